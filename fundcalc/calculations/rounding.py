"""
Rounding helpers shared by the simulations.
"""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves going towards +infinity.

    Same result as JavaScript's Math.round(), which the reference outputs
    were produced with (round() rounds halves to even).
    """
    return int(math.floor(value + 0.5))


def monthly_rate(annual_rate: float) -> float:
    """Convert an annual percentage rate to a monthly decimal rate."""
    return annual_rate / 100 / 12
