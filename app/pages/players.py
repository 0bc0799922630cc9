"""
Players page rendering.
"""

from __future__ import annotations

from app.ui import render_player_settings


def render_players_page() -> None:
    render_player_settings()
