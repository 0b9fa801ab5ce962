"""Tests for amount validation and line-item helpers."""

from decimal import Decimal

import pytest

from src.calculators.items import (
    LineItem,
    as_line_items,
    new_line_item,
    remove_line_item,
    total_amount,
    update_line_item,
)
from src.calculators.validation import (
    InvalidAmountError,
    coerce_amount,
    coerce_days,
    is_valid_amount,
    parse_amount,
    to_numeral,
)


class TestIsValidAmount:
    @pytest.mark.parametrize(
        "value", ["0", "1000", "+5", "12.34", "5.", ".5", 7, Decimal("2.50"), 1e-05, Decimal("1E+3")]
    )
    def test_valid(self, value: object) -> None:
        assert is_valid_amount(value) is True

    @pytest.mark.parametrize(
        "value",
        ["", None, "-1", "1e3", "1,000", " 5", "abc", ".", "+", "1.2.3", True, -3, -1e-05, float("nan")],
    )
    def test_invalid(self, value: object) -> None:
        assert is_valid_amount(value) is False


class TestParseAmount:
    def test_empty_is_zero(self) -> None:
        assert parse_amount("") == 0
        assert parse_amount(None) == 0

    def test_exact_decimal(self) -> None:
        assert parse_amount("0.1") + parse_amount("0.2") == Decimal("0.3")

    def test_invalid_raises(self) -> None:
        with pytest.raises(InvalidAmountError):
            parse_amount("-5")


class TestCoercion:
    def test_strips_thousands_separators(self) -> None:
        assert coerce_amount("1,234.50") == Decimal("1234.50")

    @pytest.mark.parametrize("value", ["", "abc", "-5", None, "1e3"])
    def test_garbage_is_zero(self, value: object) -> None:
        assert coerce_amount(value) == 0

    def test_numbers(self) -> None:
        assert coerce_amount(12) == Decimal("12")

    def test_exponent_numbers_written_out(self) -> None:
        assert to_numeral(1e-05) == "0.00001"
        assert to_numeral(Decimal("1E+3")) == "1000"
        assert to_numeral("1e3") == "1e3"
        assert parse_amount(Decimal("1E+3")) == Decimal("1000")
        assert coerce_amount(Decimal("5E+1")) == Decimal("50")

    @pytest.mark.parametrize(("value", "expected"), [("22", Decimal("22")), (2.5, Decimal("2.5")), (" 3 ", Decimal("3"))])
    def test_days(self, value: object, expected: Decimal) -> None:
        assert coerce_days(value) == expected

    @pytest.mark.parametrize("value", ["", None, "0", "-1", "abc", "NaN", "Infinity", False])
    def test_days_absent(self, value: object) -> None:
        assert coerce_days(value) is None


class TestLineItems:
    def test_new_item_ids_are_unique(self) -> None:
        first = new_line_item("deduction", "Loan", "100")
        second = new_line_item("deduction", "Loan", "100")
        assert first.id.startswith("deduction-")
        assert first.id != second.id

    def test_numeric_value_stored_as_text(self) -> None:
        item = new_line_item("allowance", "Fuel", 50.5, taxable=True)
        assert item.value == "50.5"
        assert item.amount == Decimal("50.5")

    def test_exponent_value_stored_as_plain_text(self) -> None:
        item = LineItem(id="a", value=1e-05)
        assert item.value == "0.00001"
        assert item.amount == Decimal("0.00001")

    def test_odd_field_types_coerced(self) -> None:
        item = LineItem.model_validate({"id": 7, "label": None, "value": [1], "taxable": "yes"})
        assert item.id == "7"
        assert item.label == ""
        assert item.value == ""
        assert item.taxable is False

    def test_update_returns_new_list(self, deductions: list[LineItem]) -> None:
        updated = update_line_item(deductions, "deduction-1", value="45", id="other")
        assert updated[0].id == "deduction-1"
        assert updated[0].value == "45"
        assert updated[0].label == "Staff loan"
        assert deductions[0].value == "30"
        assert updated[1] == deductions[1]

    def test_update_unknown_id(self, deductions: list[LineItem]) -> None:
        assert update_line_item(deductions, "missing", value="1") == deductions

    def test_remove(self, deductions: list[LineItem]) -> None:
        remaining = remove_line_item(deductions, "deduction-2")
        assert [item.id for item in remaining] == ["deduction-1"]
        assert len(deductions) == 2

    def test_remove_unknown_id(self, deductions: list[LineItem]) -> None:
        assert remove_line_item(deductions, "missing") == deductions

    def test_total_amount(self, allowance_items: list[LineItem]) -> None:
        assert total_amount(allowance_items) == Decimal("350")

    def test_as_line_items_accepts_mappings(self) -> None:
        items = as_line_items([{"id": "x", "value": 10}, LineItem(id="y", value="5")])
        assert [item.amount for item in items] == [Decimal("10"), Decimal("5")]
        assert as_line_items(None) == []
