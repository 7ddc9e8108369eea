"""Rounding and clamping helpers shared by the scorers."""

import math


def round_half_up(value: float, ndigits: int = 0) -> int | float:
    """Round halves away from zero for non-negative values (2.5 -> 3).

    Python's round() uses banker's rounding; scores are reported with the
    conventional half-up rule instead.
    """
    factor = 10 ** ndigits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if ndigits == 0 else rounded


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Round half up and clamp into [low, high]."""
    return max(low, min(high, round_half_up(value)))
