"""Pydantic models for calculator results.

Money fields are strings with exactly two decimal places. Amounts are kept at
full precision during the calculation and only rounded here.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Literal

from pydantic import BaseModel

_CENTS = Decimal("0.01")


def to_money(value: Decimal) -> str:
    """Render an amount with two decimals, rounding half up."""
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        rounded = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)  # no "-0.00"
    return f"{rounded:.2f}"


def to_rate(value: Decimal) -> float:
    return float(value)


class ComputationBreakdown(BaseModel):
    """Tax charged within one bracket."""

    tax_rate: float
    amount_taxed: str
    tax_amount: str


class SSNITBreakdown(BaseModel):
    """Employee and employer SSNIT contributions with the Tier 1/Tier 2 split."""

    employee_contribution: str
    employer_contribution: str
    total_contribution: str
    employee_rate: float
    employer_rate: float
    base_amount: str
    tier1: str
    tier2: str


class TaxCalculationResult(BaseModel):
    """Successful take-home pay calculation."""

    tax_year: str
    gross_income: str
    taxable_income: str
    income_tax: str
    ssnit: str
    net_income: str
    taxable_allowances: str
    non_taxable_allowances: str
    total_deductions: str
    absenteeism_deduction: str
    computation_breakdown: list[ComputationBreakdown]
    ssnit_breakdown: SSNITBreakdown


class TaxCalculationError(BaseModel):
    """Calculation rejected because of invalid input."""

    kind: Literal["invalid_input"] = "invalid_input"
    error_message: str
