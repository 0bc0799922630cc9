"""Deck modules: filtering, shuffling and the session state machine."""

from core.deck.constants import DeckState, FilterMode
from core.deck.filter_policy import (
    CardSet,
    FilterPolicy,
    CategorySetPolicy,
    WildcardFlagPolicy,
    build_filter_policy,
    default_category_sets,
)
from core.deck.session_deck import DeckSnapshot, SessionDeck
from core.deck.shuffler import shuffle

__all__ = [
    "DeckState",
    "FilterMode",
    "CardSet",
    "FilterPolicy",
    "CategorySetPolicy",
    "WildcardFlagPolicy",
    "build_filter_policy",
    "default_category_sets",
    "DeckSnapshot",
    "SessionDeck",
    "shuffle",
]
