"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.play import render_play_page
from app.pages.card_sets import render_card_sets_page
from app.pages.players import render_players_page


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[], None]


PAGES = [
    AppPage(title="Play", render=render_play_page),
    AppPage(title="Card Options", render=render_card_sets_page),
    AppPage(title="Players", render=render_players_page),
]
