"""
Streamlit session state and prompt pool initialization helpers.
"""

from __future__ import annotations

import streamlit as st
from pymongo.errors import PyMongoError

from core import config, player_repo, prompt_repo
from core.deck import SessionDeck, build_filter_policy
from core.schemas import PromptPool


def load_prompt_pool() -> PromptPool:
    """
    Load the prompt pool (cached for the server process).
    """
    @st.cache_resource
    def _load_prompt_pool() -> PromptPool:
        return prompt_repo.get_prompt_pool()

    return _load_prompt_pool()


def _load_saved_players() -> list[str]:
    """
    Load saved player names; an unreachable player store means no saved names.
    """
    if not player_repo.is_persistence_enabled():
        return []
    try:
        return player_repo.load_players()
    except PyMongoError as exc:
        st.warning(f"Could not load saved players: {exc}")
        return []


def ensure_session_state(pool: PromptPool) -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "prompt_pool" not in st.session_state:
        st.session_state.prompt_pool = pool
    if "filter_policy" not in st.session_state:
        st.session_state.filter_policy = build_filter_policy(config.get_filter_mode(), pool)
    if "deck" not in st.session_state:
        st.session_state.deck = SessionDeck(reveal_on_retreat=config.reveal_on_retreat())
    if "theme" not in st.session_state:
        st.session_state.theme = "classic"
    if "players" not in st.session_state:
        st.session_state.players = _load_saved_players()
    if "turn" not in st.session_state:
        st.session_state.turn = 0
