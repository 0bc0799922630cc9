"""
Card options page rendering.
"""

from __future__ import annotations

from app.ui import render_card_set_settings


def render_card_sets_page() -> None:
    render_card_set_settings()
