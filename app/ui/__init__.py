"""UI Components for the Prompt Deck"""

from app.ui.prompt_card import render_prompt_card
from app.ui.session_stats import render_session_stats, render_session_complete
from app.ui.deck_controls import render_deck_controls
from app.ui.card_set_settings import render_card_set_settings
from app.ui.players import render_player_settings

__all__ = [
    "render_prompt_card",
    "render_session_stats",
    "render_session_complete",
    "render_deck_controls",
    "render_card_set_settings",
    "render_player_settings",
]
