"""Summary, conclusion and closing-line selection."""

from __future__ import annotations

import random

from overthink.engine.pools import CLOSING_LINES, CONCLUSION_TEMPLATES, SUMMARY_TEMPLATES
from overthink.engine.randomness import pick_one


def pick_summary(rng: random.Random) -> str:
    return pick_one(rng, SUMMARY_TEMPLATES)


def pick_conclusion(rng: random.Random) -> str:
    return pick_one(rng, CONCLUSION_TEMPLATES)


def pick_closing_line(rng: random.Random) -> str:
    return pick_one(rng, CLOSING_LINES)
