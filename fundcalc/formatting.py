"""
Presentation helpers for calculator results.

Currency amounts are shown in whole rupees with Indian digit grouping
(12,00,000 rather than 1,200,000).
"""

from typing import Optional, Union

from babel.numbers import format_decimal

from fundcalc.calculations.rounding import round_half_up
from fundcalc.config import get_settings

Number = Union[int, float]


def format_indian_number(value: Number, locale: Optional[str] = None) -> str:
    """
    Round to a whole number and group its digits.

    Args:
        value: Amount to format
        locale: Babel locale, defaults to the configured number_locale

    Returns:
        Grouped digits, e.g. "1,00,000" for 100000
    """
    locale = locale or get_settings().number_locale
    return format_decimal(round_half_up(value), locale=locale)


def format_inr(value: Number, prefix: Optional[str] = None) -> str:
    """
    Format a number as Indian Rupees.

    Args:
        value: Amount in rupees
        prefix: Currency prefix, defaults to the configured currency_prefix

    Returns:
        Formatted amount, e.g. "Rs. 1,20,000"
    """
    if prefix is None:
        prefix = get_settings().currency_prefix
    return prefix + format_indian_number(value)


def format_percent(value: Number) -> str:
    """Format a number as a percentage string, e.g. "12%" or "7.5%"."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}%"


def format_duration(years: int, months: int) -> str:
    """Format a years + months span, e.g. "13 years 10 months"."""
    parts = []
    if years:
        parts.append(f"{years} year" + ("" if years == 1 else "s"))
    if months or not years:
        parts.append(f"{months} month" + ("" if months == 1 else "s"))
    return " ".join(parts)
