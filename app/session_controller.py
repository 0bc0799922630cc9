"""
Session lifecycle helpers for Streamlit app.

Every user intent from the UI goes through one of these functions,
which forward it to the SessionDeck held in session_state.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st
from pymongo.errors import PyMongoError

from core import player_repo
from core.deck import DeckSnapshot


def can_start_session() -> bool:
    """
    True when the current card sets select at least one prompt.
    """
    policy = st.session_state.filter_policy
    return policy.count_eligible(st.session_state.prompt_pool) > 0


def start_session() -> Optional[DeckSnapshot]:
    """
    Start a new game from the enabled card sets.
    """
    if not can_start_session():
        st.error("No cards match the selected card sets. Enable at least one set.")
        return None

    st.session_state.turn = 0
    return st.session_state.deck.start(
        st.session_state.prompt_pool,
        st.session_state.filter_policy,
    )


def _rebuild_after_filter_change() -> DeckSnapshot:
    deck = st.session_state.deck
    if deck.started:
        if can_start_session():
            deck.rebuild(policy=st.session_state.filter_policy)
        else:
            deck.end()
        st.session_state.turn = 0
    return deck.snapshot()


def toggle_filter(card_set_id: str) -> DeckSnapshot:
    """
    Flip a card set; an active game is rebuilt from the new selection.
    """
    if not st.session_state.filter_policy.toggle(card_set_id):
        return st.session_state.deck.snapshot()
    return _rebuild_after_filter_change()


def reset_filters() -> DeckSnapshot:
    """
    Turn every card set back on, rebuilding an active game if anything changed.
    """
    if not st.session_state.filter_policy.reset():
        return st.session_state.deck.snapshot()
    return _rebuild_after_filter_change()


def advance() -> DeckSnapshot:
    deck = st.session_state.deck
    if deck.can_advance:
        st.session_state.turn += 1
    return deck.advance()


def retreat() -> DeckSnapshot:
    deck = st.session_state.deck
    if deck.can_retreat:
        st.session_state.turn = max(0, st.session_state.turn - 1)
    return deck.retreat()


def toggle_reveal() -> DeckSnapshot:
    return st.session_state.deck.toggle_reveal()


def end_session() -> DeckSnapshot:
    """
    End the current game.
    """
    st.session_state.deck.end()
    st.session_state.turn = 0
    return st.session_state.deck.snapshot()


# ---- Players ----

def current_player() -> Optional[str]:
    """
    Name of the player whose turn it is, or None without players.
    """
    players = st.session_state.players
    if not players:
        return None
    return players[st.session_state.turn % len(players)]


def set_players(names: list[str]) -> bool:
    """
    Replace the player list, saving it when persistence is configured.

    Returns:
        False if the player store could not be written (names are kept
        for this browser session only)
    """
    st.session_state.players = list(names)
    if not player_repo.is_persistence_enabled():
        return True

    try:
        player_repo.save_players(st.session_state.players)
    except PyMongoError as exc:
        st.error(f"Could not save players: {exc}")
        return False
    return True
