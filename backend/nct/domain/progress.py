"""Deterministic ratio helpers.

Pure functions with no external dependencies. Every ratio in the engine goes
through here so an empty denominator can never raise.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values.

    Python's round() is banker's rounding; week and percent math expects 2.5 -> 3.
    """
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def safe_ratio(numerator: int | float, denominator: int | float) -> float:
    """Return numerator / denominator, or 0.0 when the denominator is not positive."""
    if denominator <= 0:
        return 0.0
    return numerator / denominator


def compute_completion_percent(done: int, total: int) -> int:
    """Compute a 0-100 completion percentage from done/total counts.

    Args:
        done: Number of completed items
        total: Total number of items

    Returns:
        Integer percentage 0-100. Zero items means 0, never a division error.
    """
    return int(clamp(round_half_up(safe_ratio(done, total) * 100), 0, 100))


def clamp_score(score: int) -> int:
    """Clamp a penalty-based score into [0, 100]."""
    return int(clamp(score, 0, 100))
