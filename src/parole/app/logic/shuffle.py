import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def shuffle(
    sequence: Sequence[T], rng: random.Random | None = None
) -> list[T]:
    """
    Return a uniformly shuffled copy of `sequence` (Fisher-Yates).

    The input is left untouched.
    """
    rng = rng if rng is not None else random.Random()

    items = list(sequence)
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items
