"""Heuristic importance scoring for emails."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .lexicon import Lexicon

BASELINE_IMPORTANCE = 5
URGENT_WEIGHT = 1.5
HIGH_VALUE_WEIGHT = 1.0
LOW_PRIORITY_WEIGHT = 1.0
MIN_IMPORTANCE = 1
MAX_IMPORTANCE = 10


def score_importance(text: str, category: str, lexicon: Lexicon) -> int:
    """Return an importance score from 1 (low) to 10 (high).

    ``text`` is expected to be the lowercased subject and body. Each keyword
    counts once however often it appears. The selected category's priority
    shifts the result by ``(priority - 5) / 2``; categories missing from the
    lexicon (such as the default) leave it unchanged.
    """
    keywords = lexicon.importance
    score = float(BASELINE_IMPORTANCE)
    score += _count_present(keywords.urgent, text) * URGENT_WEIGHT
    score += _count_present(keywords.high_value, text) * HIGH_VALUE_WEIGHT
    score -= _count_present(keywords.low_priority, text) * LOW_PRIORITY_WEIGHT

    entry = lexicon.get(category)
    if entry is not None:
        score += (entry.priority - BASELINE_IMPORTANCE) / 2

    return clamp_importance(score)


def clamp_importance(value: float) -> int:
    """Round half up and clamp into the 1-10 importance range."""
    if math.isnan(value):
        return BASELINE_IMPORTANCE
    if math.isinf(value):
        return MAX_IMPORTANCE if value > 0 else MIN_IMPORTANCE
    rounded = math.floor(value + 0.5)
    return max(MIN_IMPORTANCE, min(rounded, MAX_IMPORTANCE))


def _count_present(keywords: Iterable[str], text: str) -> int:
    return sum(1 for keyword in keywords if keyword in text)


__all__ = ["score_importance", "clamp_importance"]
