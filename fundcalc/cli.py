#!/usr/bin/env python3
"""
Mutual Fund Calculator CLI

Runs any of the calculators from the terminal and prints the same summary
the calculator pages show.

Usage:
    fundcalc sip 5000 12 10 [--inflation 6]
    fundcalc topup-sip 5000 12 10 10 [--breakdown]
    fundcalc lumpsum 100000 12 10 [--inflation 6]
    fundcalc cagr 100000 200000 10
    fundcalc inflation 1000000 6 10
    fundcalc swp 2000000 20000 8
    fundcalc stp 500000 25000 7 14 24 [--breakdown]
"""
import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from pydantic import ValidationError

from fundcalc import schemas
from fundcalc.formatting import format_duration, format_inr, format_percent
from fundcalc.logging_config import configure_logging

logger = logging.getLogger(__name__)

LABEL_WIDTH = 28


def _row(label: str, value: str) -> str:
    return f"{label + ':':<{LABEL_WIDTH}} {value}"


def _print_investment(result, inflation_rate: Optional[float], years: int) -> None:
    print(_row("Invested amount", format_inr(result.total_invested)))
    print(_row("Est. returns", format_inr(result.estimated_returns)))
    print(_row("Total value", format_inr(result.future_value)))

    if inflation_rate is not None:
        adjusted = schemas.InflationInput(
            nominal_value=result.future_value,
            inflation_rate=inflation_rate,
            years=years,
        ).calculate()
        label = f"Value in today's terms ({format_percent(inflation_rate)})"
        print(_row(label, format_inr(adjusted.inflation_adjusted_value)))


def cmd_sip(args: argparse.Namespace) -> None:
    """Print SIP future value."""
    inputs = schemas.SIPInput(
        monthly_investment=args.monthly_investment,
        annual_rate=args.annual_rate,
        years=args.years,
    )
    _print_investment(inputs.calculate(), args.inflation, inputs.years)


def cmd_topup_sip(args: argparse.Namespace) -> None:
    """Print top-up SIP future value and optionally the yearly breakdown."""
    inputs = schemas.TopUpSIPInput(
        monthly_investment=args.monthly_investment,
        annual_rate=args.annual_rate,
        years=args.years,
        topup_rate=args.topup_rate,
    )
    result = inputs.calculate()
    _print_investment(result, None, inputs.years)

    if args.breakdown:
        print(f"\n{'Year':<6} {'Monthly SIP':>16} {'Invested':>18} {'Corpus':>20}")
        for row in result.yearly_breakdown:
            print(
                f"{row.year:<6} {format_inr(row.monthly_sip):>16} "
                f"{format_inr(row.yearly_invested):>18} "
                f"{format_inr(row.corpus_at_end_of_year):>20}"
            )


def cmd_lumpsum(args: argparse.Namespace) -> None:
    """Print lumpsum future value."""
    inputs = schemas.LumpsumInput(
        principal=args.principal,
        annual_rate=args.annual_rate,
        years=args.years,
    )
    _print_investment(inputs.calculate(), args.inflation, inputs.years)


def cmd_cagr(args: argparse.Namespace) -> None:
    """Print CAGR."""
    inputs = schemas.CAGRInput(
        begin_value=args.begin_value,
        end_value=args.end_value,
        years=args.years,
    )
    cagr = inputs.calculate()
    print(_row("CAGR", format_percent(round(cagr, 2))))


def cmd_inflation(args: argparse.Namespace) -> None:
    """Print inflation adjusted value."""
    inputs = schemas.InflationInput(
        nominal_value=args.nominal_value,
        inflation_rate=args.inflation_rate,
        years=args.years,
    )
    result = inputs.calculate()
    print(_row("Future amount", format_inr(inputs.nominal_value)))
    print(_row("Value in today's terms", format_inr(result.inflation_adjusted_value)))
    print(_row("Purchasing power lost", format_inr(result.purchasing_power_loss)))


def cmd_swp(args: argparse.Namespace) -> None:
    """Print how long the corpus lasts."""
    inputs = schemas.SWPInput(
        corpus=args.corpus,
        monthly_withdrawal=args.monthly_withdrawal,
        annual_rate=args.annual_rate,
    )
    result = inputs.calculate()

    if result.is_indefinite:
        print(_row("Corpus lasts", "Indefinitely"))
        print("Monthly returns cover the withdrawal; the corpus is never depleted.")
        return

    print(_row("Corpus lasts", format_duration(result.years, result.remaining_months)))
    print(_row("Total withdrawn", format_inr(result.total_withdrawn)))


def cmd_stp(args: argparse.Namespace) -> None:
    """Print STP outcome and optionally the monthly breakdown."""
    inputs = schemas.STPInput(
        lump_sum=args.lump_sum,
        monthly_transfer=args.monthly_transfer,
        debt_rate=args.debt_rate,
        equity_rate=args.equity_rate,
        months=args.months,
    )
    result = inputs.calculate()

    print(_row("Debt fund balance", format_inr(result.debt_corpus)))
    print(_row("Equity fund balance", format_inr(result.equity_corpus)))
    print(_row("Total corpus", format_inr(result.total_corpus)))
    print(_row("Total transferred", format_inr(result.total_transferred)))
    print(_row("If invested in equity", format_inr(result.direct_equity_value)))
    print(_row("If kept in debt", format_inr(result.debt_only_value)))

    if args.breakdown:
        print(f"\n{'Month':<6} {'Debt':>18} {'Equity':>18} {'Total':>18}")
        for row in result.breakdown:
            print(
                f"{row.month:<6} {format_inr(row.debt_corpus):>18} "
                f"{format_inr(row.equity_corpus):>18} "
                f"{format_inr(row.total_corpus):>18}"
            )


COMMANDS: Dict[str, Callable[[argparse.Namespace], None]] = {
    "sip": cmd_sip,
    "topup-sip": cmd_topup_sip,
    "lumpsum": cmd_lumpsum,
    "cagr": cmd_cagr,
    "inflation": cmd_inflation,
    "swp": cmd_swp,
    "stp": cmd_stp,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fundcalc",
        description="Mutual fund calculators (SIP, lumpsum, CAGR, SWP, STP)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--log-level", help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("sip", help="Monthly SIP future value")
    p.add_argument("monthly_investment", type=float)
    p.add_argument("annual_rate", type=float, help="Expected return in %%")
    p.add_argument("years", type=int)
    p.add_argument("--inflation", type=float, help="Also show value adjusted for this inflation %%")

    p = subparsers.add_parser("topup-sip", help="SIP with yearly top-up")
    p.add_argument("monthly_investment", type=float)
    p.add_argument("annual_rate", type=float, help="Expected return in %%")
    p.add_argument("years", type=int)
    p.add_argument("topup_rate", type=float, help="Yearly increase in %%")
    p.add_argument("--breakdown", action="store_true", help="Print the yearly breakdown")

    p = subparsers.add_parser("lumpsum", help="One-time investment future value")
    p.add_argument("principal", type=float)
    p.add_argument("annual_rate", type=float, help="Expected return in %%")
    p.add_argument("years", type=int)
    p.add_argument("--inflation", type=float, help="Also show value adjusted for this inflation %%")

    p = subparsers.add_parser("cagr", help="Compound annual growth rate")
    p.add_argument("begin_value", type=float)
    p.add_argument("end_value", type=float)
    p.add_argument("years", type=float)

    p = subparsers.add_parser("inflation", help="Inflation adjusted value")
    p.add_argument("nominal_value", type=float)
    p.add_argument("inflation_rate", type=float, help="Yearly inflation in %%")
    p.add_argument("years", type=float)

    p = subparsers.add_parser("swp", help="How long a corpus lasts under withdrawals")
    p.add_argument("corpus", type=float)
    p.add_argument("monthly_withdrawal", type=float)
    p.add_argument("annual_rate", type=float, help="Expected return in %%")

    p = subparsers.add_parser("stp", help="Debt to equity systematic transfer")
    p.add_argument("lump_sum", type=float)
    p.add_argument("monthly_transfer", type=float)
    p.add_argument("debt_rate", type=float, help="Debt fund return in %%")
    p.add_argument("equity_rate", type=float, help="Equity fund return in %%")
    p.add_argument("months", type=int)
    p.add_argument("--breakdown", action="store_true", help="Print the monthly breakdown")

    return parser


def _print_validation_errors(exc: ValidationError) -> None:
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        print(f"❌ {field}: {error['msg']}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.debug(f"Running {args.command} calculator")

    try:
        COMMANDS[args.command](args)
    except ValidationError as e:
        _print_validation_errors(e)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
