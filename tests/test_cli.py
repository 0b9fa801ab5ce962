"""Tests for the calculate command-line script."""

import json
from pathlib import Path

import pytest

from scripts.calculate import main


def test_plain_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1000"]) == 0
    out = capsys.readouterr().out
    assert "First 490.00 @ 0% = 0.00" in out
    assert "Next 160.00 @ 17.5% = 28.00" in out
    assert "Net income:          898.50" in out


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1000", "--deduction", "Loan=50", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["total_deductions"] == "50.00"
    assert data["net_income"] == "848.50"


def test_allowances_and_absenteeism(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        [
            "1000",
            "--allowance",
            "Transport=200",
            "--non-taxable-allowance",
            "Meals=150",
            "--working-days",
            "20",
            "--missed-days",
            "2",
            "--json",
        ]
    )
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    # taxable 1090 → tax 81.50; net before deductions 1350 − 81.50 − 55 = 1213.50
    assert data["income_tax"] == "81.50"
    assert data["absenteeism_deduction"] == "121.35"
    assert data["net_income"] == "1092.15"


def test_no_ssnit(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1000", "--no-ssnit", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["ssnit"] == "0.00"


def test_custom_rates(capsys: pytest.CaptureFixture[str], rates_file: Path) -> None:
    assert main(["1000", "--rates", str(rates_file), "--year", "2025", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["income_tax"] == "39.00"


def test_invalid_amount(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["abc"]) == 1
    assert "Please input valid amounts" in capsys.readouterr().err


def test_bad_item_spec(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1000", "--deduction", "Loan"]) == 2
    assert "LABEL=VALUE" in capsys.readouterr().err
