"""Shared test fixtures."""

from pathlib import Path

import pytest

from src.calculators.items import LineItem

RATES_YAML = """\
"2025":
  effective_from: "01/01/2025"
  rates:
    - [0, 500]
    - [10, 500]
    - [20, null]
  ssnit:
    employee_rate: 5.5
    employer_rate: 13.0
    tier1_rate: 13.5
"2019":
  effective_from: "01/01/2019"
  rates:
    - [0, 300]
    - [15, null]
"""


@pytest.fixture
def rates_file(tmp_path: Path) -> Path:
    """YAML rate table file with two custom years."""
    path = tmp_path / "rates.yaml"
    path.write_text(RATES_YAML)
    return path


@pytest.fixture
def deductions() -> list[LineItem]:
    return [
        LineItem(id="deduction-1", label="Staff loan", value="30", taxable=False),
        LineItem(id="deduction-2", label="Welfare", value="20", taxable=True),
    ]


@pytest.fixture
def allowance_items() -> list[LineItem]:
    return [
        LineItem(id="allowance-1", label="Transport", value="200", taxable=True),
        LineItem(id="allowance-2", label="Meals", value="150", taxable=False),
    ]
