"""Take-home pay calculator — composites PAYE, SSNIT, allowances and deductions."""

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal, localcontext
from typing import Any

from src.calculators.income_tax import compute_income_tax
from src.calculators.items import LineItem, as_line_items, total_amount
from src.calculators.models import (
    ComputationBreakdown,
    SSNITBreakdown,
    TaxCalculationError,
    TaxCalculationResult,
    to_money,
    to_rate,
)
from src.calculators.rates import DEFAULT_TAX_YEAR, RateTable, get_rate_table
from src.calculators.ssnit import compute_ssnit
from src.calculators.validation import InvalidAmountError, coerce_days, parse_amount

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please input valid amounts"

# Enough significant digits that sums of realistic amounts are never rounded.
CALCULATION_PRECISION = 50

Amount = str | int | float | Decimal | None
Items = Iterable[LineItem | Mapping[str, Any]] | None


def calculate(
    gross: Amount,
    legacy_allowances: Amount = "",
    tax_relief: Amount = "",
    ssnit_enabled: bool = True,
    year: str = DEFAULT_TAX_YEAR,
    deductions: Items = None,
    allowance_items: Items = None,
    working_days: Amount = "",
    missed_days: Amount = "",
    tables: Mapping[str, RateTable] | None = None,
) -> TaxCalculationResult | TaxCalculationError:
    """Calculate monthly PAYE, SSNIT and take-home pay.

    Taxable income is::

        gross - employee SSNIT + taxable allowances
              - (employee SSNIT + tax relief) + legacy allowances

    The employee SSNIT share is subtracted twice: once from the base and once
    as part of the total relief. Net income is::

        gross + all allowances - income tax - employee SSNIT
              - deductions - absenteeism

    where absenteeism is ``(net before deductions / working days) * missed days``
    when both day counts are positive numbers, and zero otherwise.

    Args:
        gross: Monthly basic income.
        legacy_allowances: Single allowance amount, always taxable.
        tax_relief: Relief claimed on top of employee SSNIT.
        ssnit_enabled: Whether SSNIT applies.
        year: Tax year key. Unknown years use the default table.
        deductions: Post-tax deductions; the taxable flag is ignored.
        allowance_items: Itemised allowances, taxable or not.
        working_days: Working days in the month.
        missed_days: Days missed in the month.
        tables: Rate tables to use instead of the built-in ones.

    Returns:
        TaxCalculationResult, or TaxCalculationError if gross, legacy
        allowances or tax relief is not a non-negative number.
    """
    try:
        gross_income = parse_amount(gross)
        legacy = parse_amount(legacy_allowances)
        relief = parse_amount(tax_relief)
    except InvalidAmountError as exc:
        logger.info("Rejected calculation input: %s", exc)
        return TaxCalculationError(error_message=INVALID_INPUT_MESSAGE)

    with localcontext() as ctx:
        ctx.prec = CALCULATION_PRECISION
        return _take_home(
            gross_income,
            legacy,
            relief,
            get_rate_table(year, tables),
            ssnit_enabled,
            as_line_items(allowance_items),
            as_line_items(deductions),
            working_days,
            missed_days,
        )


def _take_home(
    gross_income: Decimal,
    legacy: Decimal,
    relief: Decimal,
    table: RateTable,
    ssnit_enabled: bool,
    allowances: list[LineItem],
    deduction_items: list[LineItem],
    working_days: Amount,
    missed_days: Amount,
) -> TaxCalculationResult:
    ssnit = compute_ssnit(gross_income, table.ssnit, enabled=ssnit_enabled)

    taxable_allowances = total_amount(a for a in allowances if a.taxable)
    non_taxable_allowances = total_amount(a for a in allowances if not a.taxable)

    taxable_base = gross_income - ssnit.employee + taxable_allowances
    total_relief = ssnit.employee + relief
    taxable_income = taxable_base - total_relief + legacy

    income_tax, brackets = compute_income_tax(taxable_income, table.brackets)

    net_before_deductions = (
        gross_income
        + legacy
        + taxable_allowances
        + non_taxable_allowances
        - income_tax
        - ssnit.employee
    )

    total_deductions = total_amount(deduction_items)

    absenteeism = Decimal("0")
    workdays = coerce_days(working_days)
    missed = coerce_days(missed_days)
    if workdays is not None and missed is not None:
        daily_salary = net_before_deductions / workdays
        absenteeism = daily_salary * missed

    net_income = net_before_deductions - total_deductions - absenteeism

    logger.debug(
        "Calculated %s: taxable=%s tax=%s net=%s",
        table.year,
        taxable_income,
        income_tax,
        net_income,
    )

    return TaxCalculationResult(
        tax_year=table.year,
        gross_income=to_money(gross_income),
        taxable_income=to_money(taxable_income),
        income_tax=to_money(income_tax),
        ssnit=to_money(ssnit.employee),
        net_income=to_money(net_income),
        taxable_allowances=to_money(taxable_allowances + legacy),
        non_taxable_allowances=to_money(non_taxable_allowances),
        total_deductions=to_money(total_deductions),
        absenteeism_deduction=to_money(absenteeism),
        computation_breakdown=[
            ComputationBreakdown(
                tax_rate=to_rate(b.rate),
                amount_taxed=to_money(b.amount_taxed),
                tax_amount=to_money(b.tax),
            )
            for b in brackets
        ],
        ssnit_breakdown=SSNITBreakdown(
            employee_contribution=to_money(ssnit.employee),
            employer_contribution=to_money(ssnit.employer),
            total_contribution=to_money(ssnit.total),
            employee_rate=to_rate(table.ssnit.employee_rate),
            employer_rate=to_rate(table.ssnit.employer_rate),
            base_amount=to_money(ssnit.base_amount),
            tier1=to_money(ssnit.tier1),
            tier2=to_money(ssnit.tier2),
        ),
    )
