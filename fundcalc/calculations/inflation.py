"""
Inflation Adjustment

Discounts a nominal future amount back to today's purchasing power.
"""

from dataclasses import dataclass


@dataclass
class InflationResult:
    """Real value of a nominal amount and the purchasing power lost."""

    inflation_adjusted_value: float
    purchasing_power_loss: float


def calculate_inflation_adjusted(
    nominal_value: float, inflation_rate: float, years: float
) -> InflationResult:
    """
    Calculate the inflation adjusted (real) value of a nominal amount.

    Formula: nominal / (1 + inflation)^n

    Args:
        nominal_value: Future amount in nominal terms
        inflation_rate: Annual inflation rate in %
        years: Number of years until the amount is received

    Returns:
        InflationResult; at 0% inflation the adjusted value equals nominal
    """
    adjusted = nominal_value / (1 + inflation_rate / 100) ** years
    return InflationResult(
        inflation_adjusted_value=adjusted,
        purchasing_power_loss=nominal_value - adjusted,
    )
