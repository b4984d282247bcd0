"""Dramatic title extraction from the user's question."""

from __future__ import annotations

import random

from overthink.engine.pools import DRAMATIC_NOUNS, DRAMATIC_PREFIXES, STOP_WORDS
from overthink.engine.randomness import pick_one
from overthink.engine.text import tokenize

MIN_KEYWORD_LENGTH = 4
MAX_SUBJECT_WORDS = 4


def extract_keywords(question: str) -> list[str]:
    """Upper-cased content words of *question*, in their original order."""
    return [
        token.upper()
        for token in tokenize(question)
        if len(token) >= MIN_KEYWORD_LENGTH and token not in STOP_WORDS
    ]


def generate_title(question: str, rng: random.Random) -> str:
    """Build an ALL-CAPS title such as ``THE INEVITABLE DECISION VORTEX OF TEXT``."""
    prefix = pick_one(rng, DRAMATIC_PREFIXES)
    noun = pick_one(rng, DRAMATIC_NOUNS)

    keywords = extract_keywords(question)
    if not keywords:
        return f"{prefix} {noun} OF THIS SITUATION"

    subject = " ".join(keywords[:MAX_SUBJECT_WORDS])
    return f"{prefix} {noun} OF {subject}"
