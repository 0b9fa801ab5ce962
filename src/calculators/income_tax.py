"""Income tax calculator — bracket-by-bracket breakdown."""

from collections.abc import Sequence
from decimal import Decimal
from typing import NamedTuple

from src.calculators.rates import TaxBracket

_HUNDRED = Decimal("100")


class BracketTax(NamedTuple):
    """Tax charged within one bracket (unrounded)."""

    rate: Decimal
    amount_taxed: Decimal
    tax: Decimal


def compute_income_tax(
    taxable_income: Decimal,
    brackets: Sequence[TaxBracket],
) -> tuple[Decimal, list[BracketTax]]:
    """Walk the brackets from the lowest rate upwards.

    Each bracket taxes ``min(remaining, width)`` at its rate. The walk stops
    as soon as nothing is left, so untouched brackets never appear in the
    breakdown. Zero or negative taxable income yields no tax.

    Args:
        taxable_income: Monthly taxable income after reliefs (may be <= 0).
        brackets: Brackets in table order; the last one must be unbounded.

    Returns:
        (total_tax, breakdown) at full precision.
    """
    total_tax = Decimal("0")
    breakdown: list[BracketTax] = []
    remaining = taxable_income

    for bracket in brackets:
        if remaining <= 0:
            break

        amount_taxed = min(remaining, bracket.width)
        tax = bracket.rate * amount_taxed / _HUNDRED

        breakdown.append(BracketTax(bracket.rate, amount_taxed, tax))
        total_tax += tax
        remaining -= amount_taxed

    return total_tax, breakdown
