"""
Shuffler Tests - Fisher-Yates permutation properties.

Run with: pytest tests/test_shuffler.py -v
"""
import random
from collections import Counter
from itertools import permutations

from core.deck import CategorySetPolicy, default_category_sets, shuffle


def test_returns_permutation_of_input(rng):
    items = list(range(20))
    shuffled = shuffle(items, rng)
    assert sorted(shuffled) == items
    assert len(set(shuffled)) == len(items)


def test_does_not_mutate_input(rng):
    items = [1, 2, 3, 4, 5]
    shuffle(items, rng)
    assert items == [1, 2, 3, 4, 5]


def test_accepts_tuple_and_returns_new_list(rng):
    items = (1, 2, 3)
    shuffled = shuffle(items, rng)
    assert isinstance(shuffled, list)
    assert sorted(shuffled) == [1, 2, 3]


def test_empty_and_single():
    assert shuffle([]) == []
    assert shuffle(["only"]) == ["only"]


def test_same_seed_same_order():
    items = list(range(10))
    assert shuffle(items, random.Random(7)) == shuffle(items, random.Random(7))


def test_every_permutation_reachable():
    # 3! = 6 orderings, each should show up roughly 1/6 of the time
    rng = random.Random(42)
    trials = 6000
    counts = Counter(tuple(shuffle("abc", rng)) for _ in range(trials))
    assert set(counts) == set(permutations("abc"))
    for count in counts.values():
        assert 800 < count < 1200


def test_filtered_shuffle_keeps_exactly_eligible(category_pool, rng):
    policy = CategorySetPolicy(default_category_sets(category_pool))
    policy.toggle("Wildcard")
    shuffled = shuffle(policy.select(category_pool), rng)

    expected = {p.id for p in category_pool if p.category != "Wildcard"}
    ids = [p.id for p in shuffled]
    assert len(ids) == len(set(ids))
    assert set(ids) == expected
