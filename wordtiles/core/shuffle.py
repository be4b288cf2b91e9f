from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def shuffle_indices(items: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """Return a uniformly shuffled copy of *items* (Fisher–Yates, last to first).

    The input is never mutated. Pass *rng* for reproducible orderings.
    """
    rand = rng if rng is not None else random
    arr = list(items)
    for i in range(len(arr) - 1, 0, -1):
        j = rand.randint(0, i)
        arr[i], arr[j] = arr[j], arr[i]
    return arr
