"""
Session Deck - the per-session draw/back state machine.

Holds three disjoint locations for prompts:
- remaining: shuffled stack still to be drawn (top = end of list)
- current: the prompt on the table, or None
- history: prompts already shown, most recent last

States:
- EMPTY: no session started
- ACTIVE: a prompt is current
- EXHAUSTED: started, nothing current and nothing left to draw

Every operation is total: calls that make no sense in the current state
leave the deck unchanged instead of raising.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Optional

from core.deck.constants import DeckState
from core.deck.filter_policy import FilterPolicy
from core.deck.shuffler import shuffle
from core.schemas import Prompt


@dataclass(frozen=True)
class DeckSnapshot:
    """
    Read-only view of a deck handed to the presentation layer.
    """
    state: DeckState
    current: Optional[Prompt]
    revealed: bool
    remaining_count: int
    history_count: int
    can_retreat: bool

    @property
    def total_count(self) -> int:
        return self.remaining_count + self.history_count + (1 if self.current is not None else 0)

    @property
    def position(self) -> int:
        """1-based position of the current card (history length once exhausted)."""
        return self.history_count + (1 if self.current is not None else 0)


@dataclass
class SessionDeck:
    """
    Mutable deck state for one play session.
    """
    reveal_on_retreat: bool = False
    rng: Optional[random.Random] = None
    remaining: list[Prompt] = field(default_factory=list)
    current: Optional[Prompt] = None
    history: list[Prompt] = field(default_factory=list)
    revealed: bool = False
    started: bool = False
    _pool: Optional[tuple[Prompt, ...]] = field(default=None, init=False, repr=False)
    _policy: Optional[FilterPolicy] = field(default=None, init=False, repr=False)

    # ---- Queries ----

    @property
    def state(self) -> DeckState:
        if not self.started:
            return DeckState.EMPTY
        if self.current is None and not self.remaining:
            return DeckState.EXHAUSTED
        return DeckState.ACTIVE

    @property
    def can_retreat(self) -> bool:
        return self.started and bool(self.history)

    @property
    def can_advance(self) -> bool:
        return self.started and self.current is not None

    @property
    def remaining_count(self) -> int:
        return len(self.remaining)

    def snapshot(self) -> DeckSnapshot:
        return DeckSnapshot(
            state=self.state,
            current=self.current,
            revealed=self.revealed,
            remaining_count=len(self.remaining),
            history_count=len(self.history),
            can_retreat=self.can_retreat,
        )

    # ---- Transitions ----

    def start(self, pool: Iterable[Prompt], policy: FilterPolicy) -> DeckSnapshot:
        """
        Start a session: filter the pool, shuffle, and draw the first card.

        Replaces any session in progress, history included.
        """
        self._pool = tuple(pool)
        self._policy = policy

        eligible = policy.select(self._pool)
        deck = shuffle(eligible, self.rng)
        first = deck.pop() if deck else None

        self.remaining = deck
        self.current = first
        self.history = []
        self.revealed = False
        self.started = True

        print(f"[DECK] Session started with {len(eligible)}/{len(self._pool)} eligible prompts")
        return self.snapshot()

    def rebuild(
        self,
        pool: Optional[Iterable[Prompt]] = None,
        policy: Optional[FilterPolicy] = None
    ) -> DeckSnapshot:
        """
        Rebuild from a freshly filtered, freshly shuffled pool.

        Defaults to the pool and policy of the last start. History is
        discarded. Without a previous start and without arguments this
        is a no-op.
        """
        pool = self._pool if pool is None else pool
        policy = self._policy if policy is None else policy
        if pool is None or policy is None:
            return self.snapshot()
        return self.start(pool, policy)

    def advance(self) -> DeckSnapshot:
        """
        Move to the next card; past the last card the deck is exhausted.
        """
        if not self.started or self.current is None:
            return self.snapshot()

        self.history.append(self.current)
        if self.remaining:
            self.current = self.remaining.pop()
        else:
            self.current = None
        self.revealed = False
        return self.snapshot()

    def retreat(self) -> DeckSnapshot:
        """
        Step back to the previous card; the current card becomes the next draw.
        """
        if not self.can_retreat:
            return self.snapshot()

        if self.current is not None:
            self.remaining.append(self.current)
        self.current = self.history.pop()
        self.revealed = self.reveal_on_retreat
        return self.snapshot()

    def toggle_reveal(self) -> DeckSnapshot:
        if self.current is not None:
            self.revealed = not self.revealed
        return self.snapshot()

    def end(self) -> None:
        """Discard the session and return to EMPTY."""
        self.remaining = []
        self.current = None
        self.history = []
        self.revealed = False
        self.started = False
        self._pool = None
        self._policy = None
