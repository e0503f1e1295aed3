"""
STP (Systematic Transfer Plan) Calculations

Simulates moving a lump sum parked in a debt fund into an equity fund in
fixed monthly instalments, with both funds compounding monthly.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from fundcalc.calculations.rounding import monthly_rate, round_half_up

logger = logging.getLogger(__name__)


@dataclass
class MonthSnapshot:
    """Rounded fund values at the end of one month."""

    month: int
    debt_corpus: int
    equity_corpus: int
    total_corpus: int


@dataclass
class STPResult:
    """Final STP values plus the two stay-put comparisons."""

    debt_corpus: float
    equity_corpus: float
    total_corpus: float
    total_transferred: float
    direct_equity_value: float
    debt_only_value: float
    breakdown: List[MonthSnapshot] = field(default_factory=list)


def calculate_stp(
    lump_sum: float,
    monthly_transfer: float,
    debt_rate: float,
    equity_rate: float,
    months: int,
) -> STPResult:
    """
    Simulate a systematic transfer plan month by month.

    Each month the debt corpus grows first, then min(transfer, debt corpus)
    moves to equity, which then grows for the month. Breakdown rows are
    rounded for display; the returned totals use the unrounded balances.

    Args:
        lump_sum: Amount initially placed in the debt fund
        monthly_transfer: Amount moved to equity every month
        debt_rate: Annual return of the debt fund in %
        equity_rate: Annual return of the equity fund in %
        months: Duration of the plan in months

    Returns:
        STPResult with the monthly breakdown and the direct equity /
        debt only values of the same lump sum
    """
    dr = monthly_rate(debt_rate)
    er = monthly_rate(equity_rate)

    debt_corpus = lump_sum
    equity_corpus = 0.0
    total_transferred = 0.0
    breakdown: List[MonthSnapshot] = []
    exhausted_at = None

    for month in range(1, months + 1):
        debt_corpus = debt_corpus * (1 + dr)

        # Capped so the debt fund never goes negative
        transfer = min(monthly_transfer, debt_corpus)
        debt_corpus -= transfer
        total_transferred += transfer
        equity_corpus = (equity_corpus + transfer) * (1 + er)

        if debt_corpus == 0 and exhausted_at is None:
            exhausted_at = month

        breakdown.append(
            MonthSnapshot(
                month=month,
                debt_corpus=round_half_up(debt_corpus),
                equity_corpus=round_half_up(equity_corpus),
                total_corpus=round_half_up(debt_corpus + equity_corpus),
            )
        )

    if exhausted_at is not None:
        logger.debug(f"Debt fund exhausted in month {exhausted_at} of {months}")

    return STPResult(
        debt_corpus=debt_corpus,
        equity_corpus=equity_corpus,
        total_corpus=debt_corpus + equity_corpus,
        total_transferred=total_transferred,
        direct_equity_value=lump_sum * (1 + er) ** months,
        debt_only_value=lump_sum * (1 + dr) ** months,
        breakdown=breakdown,
    )
