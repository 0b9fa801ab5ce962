"""Ghana PAYE rate tables and SSNIT contribution rates, keyed by tax year.

Monthly brackets are stored as (rate, width) pairs rather than lower/upper
bounds: each bracket taxes the next ``width`` cedis of taxable income at
``rate`` percent. The final bracket is unbounded.

Built-in tables are hardcoded constants. A YAML file with the same shape can
replace them (see ``load_rate_tables``).
"""

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, NamedTuple

from config import load_yaml_config

logger = logging.getLogger(__name__)

UNBOUNDED = Decimal("Infinity")


class RateTableError(ValueError):
    """A rate table definition is malformed."""


class TaxBracket(NamedTuple):
    """A single monthly PAYE bracket."""

    rate: Decimal  # percent, e.g. 17.5
    width: Decimal  # UNBOUNDED for the top bracket


class SsnitRates(NamedTuple):
    """SSNIT contribution percentages applied to basic salary."""

    employee_rate: Decimal
    employer_rate: Decimal
    tier1_rate: Decimal  # share of the total that goes to Tier 1

    @property
    def total_rate(self) -> Decimal:
        return self.employee_rate + self.employer_rate


class RateTable(NamedTuple):
    """All rate parameters for a single tax year."""

    year: str
    effective_from: str  # dd/mm/yyyy
    brackets: tuple[TaxBracket, ...]
    ssnit: SsnitRates


# 18.5% of basic salary: 5.5% withheld from the employee, 13% paid by the employer.
SSNIT_RATES = SsnitRates(
    employee_rate=Decimal("5.5"),
    employer_rate=Decimal("13.0"),
    tier1_rate=Decimal("13.5"),
)


def _brackets(*pairs: tuple[str, str | None]) -> tuple[TaxBracket, ...]:
    return tuple(
        TaxBracket(Decimal(rate), UNBOUNDED if width is None else Decimal(width))
        for rate, width in pairs
    )


TAX_YEARS: dict[str, RateTable] = {
    "2024": RateTable(
        year="2024",
        effective_from="01/01/2024",
        brackets=_brackets(
            ("0", "490"),
            ("5", "110"),
            ("10", "130"),
            ("17.5", "3166.67"),
            ("25", "16000"),
            ("30", "30520"),
            ("35", None),  # above GH¢ 50,000
        ),
        ssnit=SSNIT_RATES,
    ),
    "2023": RateTable(
        year="2023",
        effective_from="02/04/2023",
        brackets=_brackets(
            ("0", "402"),
            ("5", "110"),
            ("10", "130"),
            ("17.5", "3000"),
            ("25", "16395"),
            ("30", "29963"),
            ("35", None),
        ),
        ssnit=SSNIT_RATES,
    ),
    "2022": RateTable(
        year="2022",
        effective_from="02/04/2022",
        brackets=_brackets(
            ("0", "365"),
            ("5", "110"),
            ("10", "130"),
            ("17.5", "3000"),
            ("25", "16395"),
            ("30", None),  # above GH¢ 20,000
        ),
        ssnit=SSNIT_RATES,
    ),
}

DEFAULT_TAX_YEAR = "2024"


def _default_year(tables: Mapping[str, RateTable]) -> str:
    if DEFAULT_TAX_YEAR in tables:
        return DEFAULT_TAX_YEAR
    return max(tables)


def get_rate_table(
    year: str = DEFAULT_TAX_YEAR,
    tables: Mapping[str, RateTable] | None = None,
) -> RateTable:
    """Return the rate table for ``year``.

    Unknown years fall back to the default (most recent) table instead of
    failing.

    Args:
        year: Tax year key, e.g. "2024".
        tables: Year-keyed tables to search. Defaults to the built-in tables.

    Returns:
        The matching RateTable, or the default one.
    """
    tables = TAX_YEARS if tables is None else tables
    if not tables:
        raise RateTableError("No rate tables available.")

    table = tables.get(year)
    if table is None:
        fallback = _default_year(tables)
        logger.debug("Unknown tax year %r, using %s", year, fallback)
        table = tables[fallback]
    return table


def available_tax_years(tables: Mapping[str, RateTable] | None = None) -> list[str]:
    """List the registered tax years, newest first."""
    tables = TAX_YEARS if tables is None else tables
    return sorted(tables, reverse=True)


def _to_decimal(value: Any, what: str) -> Decimal:
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise RateTableError(f"Invalid {what}: {value!r}") from None
    if not number.is_finite():
        raise RateTableError(f"Invalid {what}: {value!r}")
    return number


def _parse_table(year: str, raw: Any) -> RateTable:
    if not isinstance(raw, Mapping):
        raise RateTableError(f"Tax year {year} must be a mapping.")
    rates = raw.get("rates")
    if not rates:
        raise RateTableError(f"Tax year {year} has no rates.")

    brackets: list[TaxBracket] = []
    for index, pair in enumerate(rates):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise RateTableError(f"Tax year {year}: bracket {index} must be [rate, width].")
        rate, width = pair
        is_last = index == len(rates) - 1
        if width is None:
            if not is_last:
                raise RateTableError(f"Tax year {year}: only the last bracket may be unbounded.")
            brackets.append(TaxBracket(_to_decimal(rate, "rate"), UNBOUNDED))
            continue
        if is_last:
            raise RateTableError(f"Tax year {year}: the last bracket must be unbounded.")
        width_value = _to_decimal(width, "bracket width")
        if width_value <= 0:
            raise RateTableError(f"Tax year {year}: bracket widths must be positive.")
        brackets.append(TaxBracket(_to_decimal(rate, "rate"), width_value))

    ssnit = SSNIT_RATES
    raw_ssnit = raw.get("ssnit")
    if raw_ssnit:
        if not isinstance(raw_ssnit, Mapping):
            raise RateTableError(f"Tax year {year}: ssnit must be a mapping.")
        ssnit = SsnitRates(
            employee_rate=_to_decimal(raw_ssnit.get("employee_rate", SSNIT_RATES.employee_rate), "rate"),
            employer_rate=_to_decimal(raw_ssnit.get("employer_rate", SSNIT_RATES.employer_rate), "rate"),
            tier1_rate=_to_decimal(raw_ssnit.get("tier1_rate", SSNIT_RATES.tier1_rate), "rate"),
        )

    return RateTable(
        year=year,
        effective_from=str(raw.get("effective_from", "")),
        brackets=tuple(brackets),
        ssnit=ssnit,
    )


def load_rate_tables(path: str | Path) -> dict[str, RateTable]:
    """Load year-keyed rate tables from a YAML file.

    Expected shape::

        "2024":
          effective_from: "01/01/2024"
          rates: [[0, 490], [5, 110], ..., [35, null]]
          ssnit: {employee_rate: 5.5, employer_rate: 13.0, tier1_rate: 13.5}

    Raises:
        RateTableError: If the file is empty or a table is malformed.
    """
    data = load_yaml_config(path)
    if not isinstance(data, dict) or not data:
        raise RateTableError(f"No rate tables found in {path}")

    tables = {str(year): _parse_table(str(year), raw) for year, raw in data.items()}
    logger.info("Loaded %d rate tables from %s", len(tables), path)
    return tables
