"""
SIP (Systematic Investment Plan) Calculations

Future value of fixed monthly contributions, and the year-by-year
simulation of a SIP whose contribution steps up every year.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from fundcalc.calculations.rounding import monthly_rate, round_half_up

logger = logging.getLogger(__name__)


@dataclass
class InvestmentResult:
    """Future value of an investment and how much of it was contributed."""

    future_value: float
    total_invested: float
    estimated_returns: float


@dataclass
class YearSnapshot:
    """One year of a top-up SIP simulation."""

    year: int
    monthly_sip: int
    yearly_invested: int
    corpus_at_end_of_year: int


@dataclass
class TopUpSIPResult:
    """Top-up SIP result with the per-year breakdown."""

    future_value: int
    total_invested: int
    estimated_returns: int
    yearly_breakdown: List[YearSnapshot] = field(default_factory=list)


def calculate_sip(
    monthly_investment: float, annual_rate: float, years: int
) -> InvestmentResult:
    """
    Calculate SIP future value.

    Formula: P x ((1 + r)^n - 1) / r x (1 + r)  (annuity due)

    Args:
        monthly_investment: Monthly contribution amount
        annual_rate: Annual return rate in % (e.g., 12 for 12%)
        years: Investment duration in years

    Returns:
        InvestmentResult with future value, total invested and returns
    """
    r = monthly_rate(annual_rate)
    n = years * 12

    if r == 0:
        logger.debug("Zero rate SIP, future value is the sum of contributions")
        future_value = monthly_investment * n
    else:
        future_value = monthly_investment * (((1 + r) ** n - 1) / r) * (1 + r)

    total_invested = monthly_investment * n

    return InvestmentResult(
        future_value=future_value,
        total_invested=total_invested,
        estimated_returns=future_value - total_invested,
    )


def calculate_topup_sip(
    monthly_investment: float,
    annual_rate: float,
    years: int,
    topup_rate: float,
) -> TopUpSIPResult:
    """
    Simulate a SIP whose monthly contribution increases every year.

    Year y contributes round(P x (1 + topup)^(y - 1)) each month. The corpus
    compounds monthly and is rounded once at the end of every year.

    Args:
        monthly_investment: Monthly contribution in the first year
        annual_rate: Annual return rate in %
        years: Investment duration in years
        topup_rate: Annual increase of the contribution in %

    Returns:
        TopUpSIPResult including the yearly breakdown
    """
    r = monthly_rate(annual_rate)
    corpus = 0
    total_invested = 0
    breakdown: List[YearSnapshot] = []

    for year in range(1, years + 1):
        monthly_sip = round_half_up(
            monthly_investment * (1 + topup_rate / 100) ** (year - 1)
        )
        yearly_invested = 0

        for _ in range(12):
            corpus = (corpus + monthly_sip) * (1 + r)
            yearly_invested += monthly_sip

        total_invested += yearly_invested
        # Rounded once per year, not per month
        corpus = round_half_up(corpus)

        breakdown.append(
            YearSnapshot(
                year=year,
                monthly_sip=monthly_sip,
                yearly_invested=yearly_invested,
                corpus_at_end_of_year=corpus,
            )
        )

    return TopUpSIPResult(
        future_value=corpus,
        total_invested=total_invested,
        estimated_returns=corpus - total_invested,
        yearly_breakdown=breakdown,
    )
