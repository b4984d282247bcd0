"""Pseudo-statistical probability breakdown."""

from __future__ import annotations

import random
from collections.abc import Sequence

from overthink.engine.pools import OUTCOME_LABELS
from overthink.engine.randomness import shuffled_copy
from overthink.models import MAX_PROBABILITIES, MIN_PROBABILITIES, Probability

WEIGHT_MIN = 10.0
WEIGHT_SPAN = 60.0


def distribute_percentages(weights: Sequence[float]) -> list[float]:
    """Turn raw weights into one-decimal percentages summing to exactly 100.0.

    Every entry but the last is its rounded share; the last takes the rounded
    remainder, so rounding error never accumulates into the total.  When the
    earlier shares round up past 100.0 (a tiny or zero last weight), the last
    entry is pinned at 0.0 and the overshoot comes off the largest share.
    """
    if not weights:
        return []
    total = sum(weights)
    if total <= 0:
        raise ValueError("weights must have a positive sum")

    percentages: list[float] = []
    running = 0.0
    for weight in weights[:-1]:
        pct = round(weight / total * 100, 1)
        running += pct
        percentages.append(pct)

    remainder = round(100.0 - running, 1)
    if remainder < 0:
        largest = max(range(len(percentages)), key=percentages.__getitem__)
        percentages[largest] = round(percentages[largest] + remainder, 1)
        remainder = 0.0
    percentages.append(remainder)
    return percentages


def generate_probabilities(rng: random.Random) -> list[Probability]:
    """Draw 3-5 distinct outcome labels and weight them into a 100% breakdown."""
    count = rng.randint(MIN_PROBABILITIES, MAX_PROBABILITIES)
    labels = shuffled_copy(rng, OUTCOME_LABELS)[:count]
    weights = [WEIGHT_MIN + rng.random() * WEIGHT_SPAN for _ in range(count)]

    return [
        Probability(label=label, percentage=pct)
        for label, pct in zip(labels, distribute_percentages(weights))
    ]
