"""
Filter policies: card-set toggles that decide which prompts enter a deck.

Two strategies share one contract (toggle set -> predicate over Prompt):
- CategorySetPolicy: one toggle per category label
- WildcardFlagPolicy: a single "include wildcards" toggle

The strategy is picked by configuration through build_filter_policy().
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional

from core.deck.constants import (
    DEFAULT_CARD_SETS,
    WILDCARD_TOGGLE_DESCRIPTION,
    WILDCARD_TOGGLE_ID,
    WILDCARD_TOGGLE_LABEL,
    FilterMode,
)
from core.schemas import Prompt, PromptPool


PromptPredicate = Callable[[Prompt], bool]


@dataclass(frozen=True)
class CardSet:
    """
    A named toggle; the id names a category or the wildcard attribute.
    """
    id: str
    label: str
    description: str = ""
    enabled: bool = True


class FilterPolicy(ABC):
    """
    Abstract base class for card filtering policies.

    Subclasses should implement:
    - predicate()
    """

    def __init__(self, card_sets: Iterable[CardSet]):
        self._defaults = tuple(card_sets)
        self._card_sets = list(self._defaults)

    @property
    def card_sets(self) -> tuple[CardSet, ...]:
        return tuple(self._card_sets)

    def enabled_ids(self) -> set[str]:
        return {card_set.id for card_set in self._card_sets if card_set.enabled}

    def has_enabled(self) -> bool:
        """True when at least one toggle is on."""
        return any(card_set.enabled for card_set in self._card_sets)

    def toggle(self, card_set_id: str) -> bool:
        """
        Flip a toggle. Unknown ids are ignored.

        Returns:
            True if a toggle changed
        """
        before = self.enabled_ids()
        self._card_sets = [
            replace(card_set, enabled=not card_set.enabled) if card_set.id == card_set_id else card_set
            for card_set in self._card_sets
        ]
        return self.enabled_ids() != before

    def set_enabled(self, card_set_id: str, enabled: bool) -> bool:
        before = self.enabled_ids()
        self._card_sets = [
            replace(card_set, enabled=enabled) if card_set.id == card_set_id else card_set
            for card_set in self._card_sets
        ]
        return self.enabled_ids() != before

    def reset(self) -> bool:
        """Restore every toggle to its initial value; True if anything changed."""
        before = self.enabled_ids()
        self._card_sets = list(self._defaults)
        return self.enabled_ids() != before

    def count_eligible(self, prompts: Iterable[Prompt]) -> int:
        accepts = self.predicate()
        return sum(1 for prompt in prompts if accepts(prompt))

    def select(self, prompts: Iterable[Prompt]) -> list[Prompt]:
        """Return the prompts the current predicate accepts, in pool order."""
        accepts = self.predicate()
        return [prompt for prompt in prompts if accepts(prompt)]

    @abstractmethod
    def predicate(self) -> PromptPredicate:
        """
        Build a pure predicate from the current toggle state.

        The returned function does not change when toggles change later.
        """
        pass


class CategorySetPolicy(FilterPolicy):
    """
    Category-set mode.

    A prompt is eligible when its category is an enabled toggle id.
    Uncategorized prompts are eligible while any toggle is enabled.
    """

    def predicate(self) -> PromptPredicate:
        enabled = frozenset(self.enabled_ids())

        def accepts(prompt: Prompt) -> bool:
            if prompt.category:
                return prompt.category in enabled
            return bool(enabled)

        return accepts


class WildcardFlagPolicy(FilterPolicy):
    """
    Single wildcard-flag mode.

    With the toggle on every prompt is eligible; with it off wildcards are dropped.
    """

    def __init__(self, enabled: bool = True):
        super().__init__([
            CardSet(
                id=WILDCARD_TOGGLE_ID,
                label=WILDCARD_TOGGLE_LABEL,
                description=WILDCARD_TOGGLE_DESCRIPTION,
                enabled=enabled,
            )
        ])

    def predicate(self) -> PromptPredicate:
        if WILDCARD_TOGGLE_ID in self.enabled_ids():
            return lambda prompt: True
        return lambda prompt: not prompt.wildcard


def default_category_sets(pool: Optional[PromptPool] = None) -> list[CardSet]:
    """
    Build the default category toggles.

    Categories found in the pool without a default entry get a toggle too,
    so no category is unreachable.
    """
    card_sets = [
        CardSet(id=card_id, label=label, description=description)
        for card_id, label, description in DEFAULT_CARD_SETS
    ]
    if pool is None:
        return card_sets

    known = {card_set.id for card_set in card_sets}
    for prompt in pool:
        if prompt.category and prompt.category not in known:
            card_sets.append(CardSet(id=prompt.category, label=prompt.category))
            known.add(prompt.category)
    return card_sets


POLICY_FACTORIES: dict[str, Callable[[Optional[PromptPool]], FilterPolicy]] = {
    FilterMode.CATEGORIES.value: lambda pool: CategorySetPolicy(default_category_sets(pool)),
    FilterMode.WILDCARD.value: lambda pool: WildcardFlagPolicy(),
}


def build_filter_policy(mode: str, pool: Optional[PromptPool] = None) -> FilterPolicy:
    """
    Build the filter policy for a configured mode.

    Raises:
        ValueError: If the mode is unknown
    """
    factory = POLICY_FACTORIES.get(mode)
    if factory is None:
        raise ValueError(f"Unknown filter mode: {mode}")
    return factory(pool)
