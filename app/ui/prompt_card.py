"""
Prompt Card UI Component

Renders the current prompt face up or face down.
"""

from __future__ import annotations

from html import escape
from typing import Optional

import streamlit as st

from app.ui.card_style import (
    BACK_SUBTITLE,
    BACK_TITLE,
    CARD_MAX_WIDTH,
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    EMPTY_DECK_TEXT,
    WILDCARD_MARK,
    CardStyle,
    ThemeStyle,
    font_size_for_text,
)
from core.schemas import Prompt


def _card_html(style: CardStyle, inner_html: str, corner_text: str = "") -> str:
    corner_html = ""
    if corner_text:
        corner_html = (
            '<div style="position: absolute; top: 14px; right: 18px; '
            f'font-size: 1.3em;">{corner_text}</div>'
        )
    return (
        f'<div style="background-color: {style.bg_color}; color: {style.text_color}; '
        f'border: {style.border}; padding: {CARD_PADDING}; border-radius: 16px; '
        'text-align: center; box-shadow: 0 10px 25px rgba(0, 0, 0, 0.15); '
        f'min-height: {CARD_MIN_HEIGHT}; max-width: {CARD_MAX_WIDTH}; margin: 0 auto; '
        'display: flex; flex-direction: column; align-items: center; '
        f'justify-content: center; position: relative;">{corner_html}{inner_html}</div>'
    )


def render_prompt_card(prompt: Optional[Prompt], revealed: bool, theme: ThemeStyle) -> None:
    """
    Render the current card.

    Args:
        prompt: Current prompt, or None once the deck is exhausted
        revealed: True to show the prompt text, False to show the card back
        theme: Theme preset for colors
    """
    if prompt is None:
        inner = f'<span style="font-size: 1em; font-weight: 500;">{EMPTY_DECK_TEXT}</span>'
        st.markdown(_card_html(theme.empty, inner), unsafe_allow_html=True)
        return

    if not revealed:
        inner = (
            f'<h1 style="font-size: 3.5em; font-weight: 800; letter-spacing: -0.05em; '
            f'margin: 0; color: {theme.back.text_color};">{BACK_TITLE}</h1>'
            '<p style="margin: 12px 0 0 0; font-size: 0.75em; letter-spacing: 0.2em; '
            f'text-transform: uppercase; opacity: 0.8;">{BACK_SUBTITLE}</p>'
        )
        st.markdown(_card_html(theme.back, inner), unsafe_allow_html=True)
        return

    inner = (
        f'<h2 style="font-size: {font_size_for_text(prompt.text)}; font-weight: 700; '
        f'margin: 0; line-height: 1.3; color: {theme.front.text_color}; '
        'overflow-wrap: anywhere; word-break: break-word;">'
        f"{escape(prompt.text)}</h2>"
    )
    corner = WILDCARD_MARK if prompt.wildcard else ""
    st.markdown(_card_html(theme.front, inner, corner_text=corner), unsafe_allow_html=True)
