"""Randomness source shared by every generator in one analysis pass.

Generators never touch the ``random`` module globals; they receive the
``random.Random`` instance explicitly so tests can substitute a scripted one.
"""

from __future__ import annotations

import random
import time
from collections.abc import Sequence
from typing import TypeVar

from overthink.exceptions import EmptyPoolError

T = TypeVar("T")


def new_source() -> random.Random:
    """Fresh generator seeded from the nanosecond clock, so every run differs."""
    return random.Random(time.time_ns())


def pick_one(rng: random.Random, pool: Sequence[T]) -> T:
    """Return a uniformly selected element of *pool*."""
    if not pool:
        raise EmptyPoolError("cannot select from an empty pool")
    return pool[rng.randrange(len(pool))]


def shuffled_copy(rng: random.Random, pool: Sequence[T]) -> list[T]:
    """Return a shuffled copy of *pool*; the input is left untouched."""
    result = list(pool)
    rng.shuffle(result)
    return result
