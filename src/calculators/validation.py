"""Amount validation and lenient coercion for calculator inputs."""

import re
from decimal import Decimal, InvalidOperation
from typing import Any

# Non-negative decimal numeral: optional "+", no exponent, no separators.
_AMOUNT_RE = re.compile(r"^[+]?([0-9]+(?:[.][0-9]*)?|\.[0-9]+)$")

ZERO = Decimal("0")


class InvalidAmountError(ValueError):
    """An amount is not a non-negative decimal numeral."""


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def to_numeral(value: Any) -> Any:
    """Write numbers in plain positional notation, e.g. 1e-05 as "0.00001".

    Strings and non-numeric values pass through unchanged.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return value
    number = Decimal(str(value))
    if not number.is_finite():
        return str(value)
    return format(number, "f")


def is_valid_amount(value: Any) -> bool:
    """Return True if ``value`` is a non-negative decimal numeral.

    Empty input is not valid here; callers default it to zero first.
    """
    if _is_empty(value) or isinstance(value, bool):
        return False
    return _AMOUNT_RE.match(str(to_numeral(value))) is not None


def parse_amount(value: Any) -> Decimal:
    """Parse a strictly validated amount. Empty input means zero.

    Raises:
        InvalidAmountError: If the value is not a non-negative decimal numeral.
    """
    if _is_empty(value):
        return ZERO
    if not is_valid_amount(value):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    return Decimal(str(to_numeral(value)))


def coerce_amount(value: Any) -> Decimal:
    """Best-effort parse of a line-item value.

    Thousands separators are stripped. Anything that still isn't a
    non-negative decimal numeral counts as zero.
    """
    if isinstance(value, str):
        value = value.replace(",", "").strip()
    if not is_valid_amount(value):
        return ZERO
    return Decimal(str(to_numeral(value)))


def coerce_days(value: Any) -> Decimal | None:
    """Parse a day count for absenteeism. Returns None unless positive and numeric."""
    if _is_empty(value) or isinstance(value, bool):
        return None
    try:
        days = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not days.is_finite() or days <= 0:
        return None
    return days
