"""
Deck shuffling.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar


T = TypeVar("T")


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """
    Return a uniformly random permutation of items (Fisher-Yates).

    The input is copied, never reordered in place.

    Args:
        items: Sequence to permute
        rng: Optional random source; defaults to the module-level generator
    """
    randint = rng.randint if rng is not None else random.randint
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
