"""Calculate monthly PAYE, SSNIT and take-home pay from the command line.

Usage:
    python scripts/calculate.py 1000
    python scripts/calculate.py 5000 --relief 200 --deduction "Loan=300" \
        --allowance "Transport=400" --non-taxable-allowance "Meals=150"
    python scripts/calculate.py 5000 --working-days 22 --missed-days 2 --json
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from src.calculators.items import LineItem, new_line_item
from src.calculators.models import TaxCalculationError, TaxCalculationResult
from src.calculators.rates import TAX_YEARS, available_tax_years, load_rate_tables
from src.calculators.take_home import calculate

logger = logging.getLogger(__name__)


def _item(kind: str, spec: str, taxable: bool) -> LineItem:
    """Parse a LABEL=VALUE argument."""
    label, sep, value = spec.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected LABEL=VALUE, got {spec!r}")
    return new_line_item(kind, label.strip(), value.strip(), taxable=taxable)  # type: ignore[arg-type]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate Ghana PAYE and take-home pay")
    parser.add_argument("gross", help="Monthly basic income")
    parser.add_argument("--allowances", default="", help="Taxable allowance total")
    parser.add_argument("--relief", default="", help="Tax relief")
    parser.add_argument("--year", default=settings.default_tax_year, help="Tax year")
    parser.add_argument("--no-ssnit", action="store_true", help="Exclude SSNIT contributions")
    parser.add_argument(
        "--allowance",
        action="append",
        default=[],
        metavar="LABEL=VALUE",
        help="Taxable allowance item (repeatable)",
    )
    parser.add_argument(
        "--non-taxable-allowance",
        action="append",
        default=[],
        metavar="LABEL=VALUE",
        help="Non-taxable allowance item (repeatable)",
    )
    parser.add_argument(
        "--deduction",
        action="append",
        default=[],
        metavar="LABEL=VALUE",
        help="Post-tax deduction (repeatable)",
    )
    parser.add_argument("--working-days", default="", help="Working days in the month")
    parser.add_argument("--missed-days", default="", help="Days missed in the month")
    parser.add_argument("--rates", default=settings.rate_table_file, help="YAML rate table file")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def format_result(result: TaxCalculationResult) -> str:
    """Render a result as a plain-text payslip summary."""
    lines = [
        f"Tax year:            {result.tax_year}",
        f"Gross income:        {result.gross_income}",
        f"Taxable income:      {result.taxable_income}",
        "",
        "Tax breakdown:",
    ]
    for index, entry in enumerate(result.computation_breakdown):
        prefix = "First" if index == 0 else "Next"
        lines.append(f"  {prefix} {entry.amount_taxed} @ {entry.tax_rate:g}% = {entry.tax_amount}")
    ssnit = result.ssnit_breakdown
    lines += [
        f"Income tax:          {result.income_tax}",
        f"SSNIT (employee):    {ssnit.employee_contribution}",
        f"SSNIT (employer):    {ssnit.employer_contribution}",
        f"SSNIT Tier 1/Tier 2: {ssnit.tier1} / {ssnit.tier2}",
        f"Deductions:          {result.total_deductions}",
        f"Absenteeism:         {result.absenteeism_deduction}",
        f"Net income:          {result.net_income}",
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    tables = load_rate_tables(args.rates) if args.rates else TAX_YEARS
    if args.year not in tables:
        logger.warning(
            "Unknown tax year %s (available: %s), using default",
            args.year,
            ", ".join(available_tax_years(tables)),
        )

    try:
        allowance_items = [_item("allowance", s, True) for s in args.allowance]
        allowance_items += [_item("allowance", s, False) for s in args.non_taxable_allowance]
        deductions = [_item("deduction", s, False) for s in args.deduction]
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    result = calculate(
        args.gross,
        args.allowances,
        args.relief,
        ssnit_enabled=not args.no_ssnit,
        year=args.year,
        deductions=deductions,
        allowance_items=allowance_items,
        working_days=args.working_days,
        missed_days=args.missed_days,
        tables=tables,
    )

    if isinstance(result, TaxCalculationError):
        print(f"error: {result.error_message}", file=sys.stderr)
        return 1

    print(result.model_dump_json(indent=2) if args.json else format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
