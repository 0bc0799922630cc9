"""
Prompt card style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "32px 28px"
CARD_MIN_HEIGHT = "260px"
CARD_MAX_WIDTH = "800px"

# ---- Theme Colors ----

CLASSIC_RED = "#C31C23"
CLASSIC_PAGE_BG = "#F5F5F5"
MIDNIGHT_PAGE_BG = "#0a0a0a"
MIDNIGHT_CARD_BG = "#1a1a1a"

# ---- Card Back Branding ----

BACK_TITLE = "WNRS"
BACK_SUBTITLE = "Prawn Edition"
EMPTY_DECK_TEXT = "End of Deck"
WILDCARD_MARK = "✨"


@dataclass(frozen=True)
class CardStyle:
    """
    Visual style preset for one face of a prompt card.
    """
    bg_color: str
    text_color: str
    border: str = "none"
    subtitle_color: str | None = None


@dataclass(frozen=True)
class ThemeStyle:
    """
    Card faces and page colors for a theme.
    """
    name: str
    page_bg: str
    page_text: str
    front: CardStyle
    back: CardStyle
    empty: CardStyle


# ---- Theme Presets ----

CLASSIC_THEME = ThemeStyle(
    name="classic",
    page_bg=CLASSIC_PAGE_BG,
    page_text="#000000",
    front=CardStyle(bg_color="#FFFFFF", text_color=CLASSIC_RED),
    back=CardStyle(bg_color=CLASSIC_RED, text_color="#FFFFFF"),
    empty=CardStyle(bg_color="#f3f4f6", text_color="#6b7280"),
)

MIDNIGHT_THEME = ThemeStyle(
    name="midnight",
    page_bg=MIDNIGHT_PAGE_BG,
    page_text="#FFFFFF",
    front=CardStyle(bg_color=MIDNIGHT_CARD_BG, text_color="#FFFFFF", border="1px solid #1f2937"),
    back=CardStyle(bg_color="#000000", text_color="#9ca3af", border="1px solid #1f2937"),
    empty=CardStyle(bg_color=MIDNIGHT_CARD_BG, text_color="#9ca3af"),
)

THEMES = {
    CLASSIC_THEME.name: CLASSIC_THEME,
    MIDNIGHT_THEME.name: MIDNIGHT_THEME,
}


def get_theme(name: str) -> ThemeStyle:
    return THEMES.get(name, CLASSIC_THEME)


def font_size_for_text(text: str) -> str:
    """
    Shrink the prompt font as the text gets longer.
    """
    length = len(text)
    if length <= 40:
        return "2.4em"
    if length <= 80:
        return "2.0em"
    if length <= 120:
        return "1.7em"
    if length <= 180:
        return "1.4em"
    return "1.2em"
