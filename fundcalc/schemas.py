"""
Validated calculator inputs.

The calculation functions assume domain-valid numbers. These models are the
layer in front of them: they reject non-positive amounts, negative rates and
out-of-range durations before a calculation runs.
"""

from pydantic import BaseModel, Field

from fundcalc.calculations import inflation, lumpsum, sip, stp, swp

MAX_RATE = 50.0
MAX_YEARS = 40
MAX_MONTHS = MAX_YEARS * 12


class SIPInput(BaseModel):
    """Input for SIP calculation."""

    monthly_investment: float = Field(gt=0)
    annual_rate: float = Field(ge=0, le=MAX_RATE)
    years: int = Field(gt=0, le=MAX_YEARS)

    def calculate(self) -> sip.InvestmentResult:
        return sip.calculate_sip(
            self.monthly_investment, self.annual_rate, self.years
        )


class TopUpSIPInput(SIPInput):
    """Input for top-up SIP calculation."""

    topup_rate: float = Field(ge=0, le=MAX_RATE)

    def calculate(self) -> sip.TopUpSIPResult:
        return sip.calculate_topup_sip(
            self.monthly_investment, self.annual_rate, self.years, self.topup_rate
        )


class LumpsumInput(BaseModel):
    """Input for lumpsum calculation."""

    principal: float = Field(gt=0)
    annual_rate: float = Field(ge=0, le=MAX_RATE)
    years: int = Field(gt=0, le=MAX_YEARS)

    def calculate(self) -> sip.InvestmentResult:
        return lumpsum.calculate_lumpsum(self.principal, self.annual_rate, self.years)


class CAGRInput(BaseModel):
    """Input for CAGR calculation."""

    begin_value: float = Field(gt=0)
    end_value: float = Field(ge=0)
    years: float = Field(gt=0, le=MAX_YEARS)

    def calculate(self) -> float:
        return lumpsum.calculate_cagr(self.begin_value, self.end_value, self.years)


class InflationInput(BaseModel):
    """Input for inflation adjustment."""

    nominal_value: float = Field(ge=0)
    inflation_rate: float = Field(ge=0, le=MAX_RATE)
    years: float = Field(ge=0, le=MAX_YEARS)

    def calculate(self) -> inflation.InflationResult:
        return inflation.calculate_inflation_adjusted(
            self.nominal_value, self.inflation_rate, self.years
        )


class SWPInput(BaseModel):
    """Input for SWP duration calculation."""

    corpus: float = Field(gt=0)
    monthly_withdrawal: float = Field(gt=0)
    annual_rate: float = Field(ge=0, le=MAX_RATE)

    def calculate(self) -> swp.SWPResult:
        return swp.calculate_swp(
            self.corpus, self.monthly_withdrawal, self.annual_rate
        )


class STPInput(BaseModel):
    """Input for STP simulation."""

    lump_sum: float = Field(gt=0)
    monthly_transfer: float = Field(gt=0)
    debt_rate: float = Field(ge=0, le=MAX_RATE)
    equity_rate: float = Field(ge=0, le=MAX_RATE)
    months: int = Field(gt=0, le=MAX_MONTHS)

    def calculate(self) -> stp.STPResult:
        return stp.calculate_stp(
            self.lump_sum,
            self.monthly_transfer,
            self.debt_rate,
            self.equity_rate,
            self.months,
        )
