"""
Lumpsum and CAGR Calculations

A one-time investment compounded annually, and its inverse: the constant
annual rate that turns a begin value into an end value.
"""

from fundcalc.calculations.sip import InvestmentResult


def calculate_lumpsum(
    principal: float, annual_rate: float, years: float
) -> InvestmentResult:
    """
    Calculate lumpsum future value.

    Formula: P x (1 + r)^n

    Args:
        principal: One-time investment amount
        annual_rate: Annual return rate in %
        years: Investment duration in years

    Returns:
        InvestmentResult with total_invested equal to the principal
    """
    r = annual_rate / 100
    future_value = principal * (1 + r) ** years
    return InvestmentResult(
        future_value=future_value,
        total_invested=principal,
        estimated_returns=future_value - principal,
    )


def calculate_cagr(begin_value: float, end_value: float, years: float) -> float:
    """
    Calculate CAGR (Compound Annual Growth Rate).

    Formula: ((End Value / Begin Value) ^ (1 / years)) - 1

    Args:
        begin_value: Value at the start (non-zero)
        end_value: Value at the end
        years: Holding period in years (> 0)

    Returns:
        CAGR in % (e.g., 12.0 for 12%)
    """
    return ((end_value / begin_value) ** (1 / years) - 1) * 100
