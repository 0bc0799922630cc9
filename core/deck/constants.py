"""
Deck Constants

Default card sets and filter-mode identifiers in one place.
"""

from enum import Enum


# ---- Filter Modes ----

class FilterMode(str, Enum):
    """How card-set toggles select prompts."""
    CATEGORIES = "categories"  # One toggle per category label
    WILDCARD = "wildcard"      # Single "include wildcards" toggle


# ---- Deck States ----

class DeckState(str, Enum):
    """Lifecycle state of a session deck."""
    EMPTY = "empty"          # No session started
    ACTIVE = "active"        # A card is in play
    EXHAUSTED = "exhausted"  # Drawn past the last card


# ---- Category Card Sets ----
# (id, label, description); the id matches the prompt "category" field

DEFAULT_CARD_SETS = [
    ("Wildcard", "Wildcards", "Fun action prompts & dares"),
    ("Reflection", "Reflection", "Self-discovery questions"),
    ("Perception", "Perception", "How others see you"),
    ("Connection", "Connection", "Relationship & bonding"),
    ("Family", "Family", "Family-related questions"),
    ("Self-Love", "Self-Love", "Self-care & compassion"),
]


# ---- Wildcard Toggle ----

WILDCARD_TOGGLE_ID = "wildcards"
WILDCARD_TOGGLE_LABEL = "Wildcards"
WILDCARD_TOGGLE_DESCRIPTION = "Include wildcard prompts in the deck"
