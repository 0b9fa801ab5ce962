"""SSNIT contribution calculator — employee/employer split and Tier 1/Tier 2."""

from decimal import Decimal
from typing import NamedTuple

from src.calculators.rates import SSNIT_RATES, SsnitRates

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


class SsnitContribution(NamedTuple):
    """Unrounded SSNIT amounts for one month."""

    base_amount: Decimal
    employee: Decimal
    employer: Decimal
    total: Decimal
    tier1: Decimal
    tier2: Decimal


def compute_ssnit(
    gross_income: Decimal,
    rates: SsnitRates = SSNIT_RATES,
    enabled: bool = True,
) -> SsnitContribution:
    """Calculate SSNIT contributions on basic salary.

    Only the employee share is withheld from pay; the employer share is
    reported for information. Tier 1 receives ``tier1_rate / total_rate`` of
    the combined contribution and Tier 2 the rest.

    Args:
        gross_income: Monthly basic salary.
        rates: SSNIT percentages for the tax year.
        enabled: When False every contribution is zero.
    """
    if not enabled:
        return SsnitContribution(gross_income, _ZERO, _ZERO, _ZERO, _ZERO, _ZERO)

    employee = gross_income * rates.employee_rate / _HUNDRED
    employer = gross_income * rates.employer_rate / _HUNDRED
    total = employee + employer
    tier1 = total * rates.tier1_rate / rates.total_rate
    tier2 = total - tier1

    return SsnitContribution(
        base_amount=gross_income,
        employee=employee,
        employer=employer,
        total=total,
        tier1=tier1,
        tier2=tier2,
    )
