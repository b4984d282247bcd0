"""Fabricated academic citations."""

from __future__ import annotations

import random

from overthink.engine.pools import AUTHOR_SUFFIXES, JOURNAL_NAMES
from overthink.engine.randomness import pick_one, shuffled_copy
from overthink.models import MAX_CITATIONS, MIN_CITATIONS, Citation

YEAR_MIN = 2008
YEAR_MAX = 2025  # exclusive


def generate_citations(rng: random.Random) -> list[Citation]:
    """Draw 2-4 distinct journals, each with a year and an author suffix."""
    count = rng.randint(MIN_CITATIONS, MAX_CITATIONS)
    journals = shuffled_copy(rng, JOURNAL_NAMES)[:count]

    citations: list[Citation] = []
    for index, journal in enumerate(journals, start=1):
        year = rng.randrange(YEAR_MIN, YEAR_MAX)
        suffix = pick_one(rng, AUTHOR_SUFFIXES)
        citations.append(Citation(index=index, source=f"{journal} {suffix} ({year})"))
    return citations
