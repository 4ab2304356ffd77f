"""Shared helpers for turning weighted sums into 0-100 integer scores."""

import math


def round_score(value: float) -> int:
    """Round half up, so 66.5 becomes 67 regardless of parity."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round and clamp a score into [0, 100]."""
    return min(100, max(0, round_score(value)))


def weighted_total(scores: dict, weights: dict) -> int:
    """Clamped, rounded weighted sum of the named sub-scores."""
    return clamp_score(sum(scores[name] * weight for name, weight in weights.items()))
