"""
Player list UI.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import set_players
from core import player_repo


def parse_player_names(raw: str) -> list[str]:
    """Split one name per line, dropping blank lines."""
    return [line.strip() for line in raw.splitlines() if line.strip()]


def render_player_settings() -> None:
    """
    Render the editable player list used for turn rotation.
    """
    st.subheader("Players")
    st.caption("One name per line. Turns rotate in this order as cards are drawn.")

    raw = st.text_area(
        "Player names",
        value="\n".join(st.session_state.players),
        height=160,
        label_visibility="collapsed",
    )

    if st.button("Save players", type="primary"):
        if set_players(parse_player_names(raw)):
            st.success(f"Saved {len(st.session_state.players)} players.")
        else:
            st.caption("Players are kept for this browser session only.")

    if not player_repo.is_persistence_enabled():
        st.caption("Player names are kept for this browser session only (MONGO_URI not set).")
