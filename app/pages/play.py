"""
Play page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import (
    advance,
    can_start_session,
    current_player,
    end_session,
    retreat,
    start_session,
    toggle_reveal,
)
from app.ui import (
    render_deck_controls,
    render_prompt_card,
    render_session_complete,
    render_session_stats,
)
from app.ui.card_style import get_theme
from core.deck import DeckState


def render_play_page() -> None:
    """
    Render the game flow (intro or active deck).
    """
    if st.session_state.deck.state == DeckState.EMPTY:
        _render_intro_screen()
    else:
        _render_active_session()


def _render_intro_screen() -> None:
    st.markdown("<br>" * 2, unsafe_allow_html=True)
    st.markdown("### 🦐 Ready to play?")
    st.markdown("Pick your card sets in **Card Options**, add players if you like, then start.")

    players = st.session_state.players
    if players:
        st.caption("Players: " + ", ".join(players))

    if st.button(
        "Start Game ▶",
        type="primary",
        use_container_width=True,
        disabled=not can_start_session(),
    ):
        if start_session() is not None:
            st.rerun()


def _render_active_session() -> None:
    deck = st.session_state.deck
    snapshot = deck.snapshot()
    theme = get_theme(st.session_state.theme)

    if render_session_stats(snapshot, player=current_player()):
        end_session()
        st.rerun()

    if snapshot.state == DeckState.EXHAUSTED:
        render_session_complete(snapshot)

    render_prompt_card(snapshot.current, snapshot.revealed, theme)
    st.markdown("<br>", unsafe_allow_html=True)

    intent = render_deck_controls(snapshot, key_suffix=str(snapshot.history_count))
    if intent == "advance":
        advance()
        st.rerun()
    elif intent == "retreat":
        retreat()
        st.rerun()
    elif intent == "flip":
        toggle_reveal()
        st.rerun()

    if snapshot.state == DeckState.EXHAUSTED:
        if st.button("Shuffle again", use_container_width=True):
            if start_session() is not None:
                st.rerun()
