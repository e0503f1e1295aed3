"""
Mutual fund calculators: SIP, top-up SIP, lumpsum, CAGR, inflation
adjustment, SWP and STP.
"""

__version__ = "0.1.0"
