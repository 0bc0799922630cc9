"""
Deck Control UI

Renders back / flip / next buttons under the card.
"""

from __future__ import annotations

from typing import Literal, Optional

import streamlit as st

from core.deck import DeckSnapshot


DeckIntent = Literal["retreat", "flip", "advance"]


def render_deck_controls(snapshot: DeckSnapshot, key_suffix: str = "") -> Optional[DeckIntent]:
    """
    Render navigation buttons.

    Returns:
        The intent the user picked, or None if no button was clicked
    """
    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if st.button(
            "←",
            key=f"retreat_{key_suffix}",
            disabled=not snapshot.can_retreat,
            use_container_width=True,
            help="Previous card",
        ):
            return "retreat"

    with col2:
        label = "Hide" if snapshot.revealed else "Flip"
        if st.button(
            label,
            key=f"flip_{key_suffix}",
            disabled=snapshot.current is None,
            use_container_width=True,
        ):
            return "flip"

    with col3:
        if st.button(
            "→",
            key=f"advance_{key_suffix}",
            type="primary",
            disabled=snapshot.current is None,
            use_container_width=True,
            help="Next card",
        ):
            return "advance"

    return None
