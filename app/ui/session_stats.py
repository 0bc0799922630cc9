"""
Session Statistics UI

Renders deck progress and the quit control.
"""

import streamlit as st

from core.deck import DeckSnapshot


def render_session_stats(snapshot: DeckSnapshot, player: str | None = None) -> bool:
    """
    Render deck progress metrics and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    col1, col2, col3 = st.columns([2, 2, 1])

    with col1:
        st.metric("Card", f"{snapshot.position}/{snapshot.total_count}")

    with col2:
        if player:
            st.metric("Turn", player)
        else:
            st.metric("Left", snapshot.remaining_count)

    with col3:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Quit game", use_container_width=True):
            return True

    st.divider()
    return False


def render_session_complete(snapshot: DeckSnapshot) -> None:
    """Render end-of-deck message."""
    st.success(f"🎉 That's the whole deck! You went through {snapshot.history_count} cards.")
