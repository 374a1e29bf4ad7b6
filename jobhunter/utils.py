"""Shared utilities for jobhunter."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, unlike Python's banker's rounding.

    Args:
        value: Number to round.
        digits: Decimal places to keep.

    Returns:
        Rounded value.
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_score(value: float) -> int:
    """Round a score half-up and clamp it to 0-100."""
    return int(min(100, max(0, round_half_up(value))))
