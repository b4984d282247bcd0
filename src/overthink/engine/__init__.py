"""Procedural generator for overthought analyses.

Usage::

    from overthink.engine import analyze

    result = analyze("Should I text my ex?")
"""

from __future__ import annotations

from overthink.engine.analyzer import analyze
from overthink.engine.randomness import new_source, pick_one, shuffled_copy

__all__ = ["analyze", "new_source", "pick_one", "shuffled_copy"]
