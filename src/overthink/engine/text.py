"""Question tokenization shared by the title extractor and the risk scorer."""

from __future__ import annotations

STRIP_CHARS = ".,?!;:'\""


def tokenize(question: str) -> list[str]:
    """Lower-case *question*, split on whitespace, strip surrounding punctuation.

    Tokens that were pure punctuation come back as empty strings and are dropped.
    """
    tokens = (word.strip(STRIP_CHARS) for word in question.lower().split())
    return [token for token in tokens if token]
