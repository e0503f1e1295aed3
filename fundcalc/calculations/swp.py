"""
SWP (Systematic Withdrawal Plan) Calculations

How long a corpus lasts under fixed monthly withdrawals while the
remaining balance keeps compounding.
"""

import logging
import math
from dataclasses import dataclass

from fundcalc.calculations.rounding import monthly_rate

logger = logging.getLogger(__name__)


@dataclass
class SWPResult:
    """Duration of a withdrawal plan."""

    months: int
    years: int
    remaining_months: int
    total_withdrawn: float
    is_indefinite: bool


def calculate_swp(
    corpus: float, monthly_withdrawal: float, annual_rate: float
) -> SWPResult:
    """
    Calculate how long a corpus sustains a fixed monthly withdrawal.

    Solves the annuity depletion equation for the number of months:
        n = -ln(1 - C x r / W) / ln(1 + r)
    or n = C / W when the rate is zero, rounded up to a whole month.

    When the monthly return covers the withdrawal (W <= C x r) the corpus
    never depletes and an indefinite result with zero durations is returned.

    total_withdrawn is the nominal W x months, so the final partial month
    is counted as a full withdrawal.

    Args:
        corpus: Initial corpus
        monthly_withdrawal: Fixed amount withdrawn every month
        annual_rate: Annual return rate on the remaining corpus in %

    Returns:
        SWPResult
    """
    r = monthly_rate(annual_rate)

    if monthly_withdrawal <= corpus * r:
        logger.debug(
            f"Withdrawal {monthly_withdrawal} covered by monthly return "
            f"{corpus * r:.2f}, corpus lasts indefinitely"
        )
        return SWPResult(
            months=0,
            years=0,
            remaining_months=0,
            total_withdrawn=0,
            is_indefinite=True,
        )

    if r == 0:
        n = corpus / monthly_withdrawal
    else:
        n = -math.log(1 - (corpus * r) / monthly_withdrawal) / math.log(1 + r)

    months = math.ceil(n)

    return SWPResult(
        months=months,
        years=months // 12,
        remaining_months=months % 12,
        total_withdrawn=monthly_withdrawal * months,
        is_indefinite=False,
    )
