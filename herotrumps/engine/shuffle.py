"""
Deck shuffling.

Uses an explicit Fisher–Yates pass so every permutation is equally likely.
Sorting by a random comparator is biased and must not replace this.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def fisher_yates_shuffle(cards: Sequence[T], rng: random.Random) -> list[T]:
    """
    Return a uniformly shuffled copy of cards.

    For i from the last index down to 1, swap position i with a uniformly
    chosen position in [0, i]. The input sequence is not modified.

    Args:
        cards: Cards in their current order
        rng: Random source (the only nondeterminism in the engine)

    Returns:
        A new list holding the same cards in shuffled order
    """
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
