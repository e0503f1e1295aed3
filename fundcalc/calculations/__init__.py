"""
Financial Calculation Engine

Core calculation modules for the mutual fund calculators.
All calculations are designed to match the reference page outputs,
including their rounding order.
"""

from fundcalc.calculations import sip, lumpsum, inflation, swp, stp

__all__ = ["sip", "lumpsum", "inflation", "swp", "stp"]
