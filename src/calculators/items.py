"""Allowance and deduction line items."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, field_validator

from src.calculators.validation import coerce_amount, to_numeral

ItemKind = Literal["allowance", "deduction"]


class LineItem(BaseModel):
    """An ad-hoc allowance or deduction entered by the user.

    ``taxable`` decides whether an allowance enters the taxable base.
    Deductions always come off net pay after tax, whatever the flag says.
    """

    id: str = ""
    label: str = ""
    value: str = ""
    taxable: bool = False

    model_config = {"frozen": True}

    @field_validator("id", "label", mode="before")
    @classmethod
    def _any_to_text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("value", mode="before")
    @classmethod
    def _numbers_to_text(cls, value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return str(to_numeral(value))
        return ""

    @field_validator("taxable", mode="before")
    @classmethod
    def _only_true_is_taxable(cls, value: Any) -> bool:
        return value is True

    @property
    def amount(self) -> Decimal:
        """Numeric value; malformed input counts as zero."""
        return coerce_amount(self.value)


def as_line_items(items: Iterable[LineItem | Mapping[str, Any]] | None) -> list[LineItem]:
    """Normalise plain mappings into LineItem instances.

    Entries that are neither a LineItem nor a mapping are skipped.
    """
    if not items:
        return []
    normalised: list[LineItem] = []
    for item in items:
        if isinstance(item, LineItem):
            normalised.append(item)
        elif isinstance(item, Mapping):
            normalised.append(LineItem.model_validate(dict(item)))
    return normalised


def total_amount(items: Iterable[LineItem]) -> Decimal:
    return sum((item.amount for item in items), Decimal("0"))


def new_line_item(
    kind: ItemKind,
    label: str = "",
    value: str | int | float | Decimal = "",
    taxable: bool = False,
) -> LineItem:
    """Create a line item with a fresh id, e.g. ``deduction-3f2a...``."""
    return LineItem(id=f"{kind}-{uuid4().hex}", label=label, value=value, taxable=taxable)


def update_line_item(items: Iterable[LineItem], item_id: str, **changes: Any) -> list[LineItem]:
    """Return a copy of ``items`` with the item matching ``item_id`` changed.

    The id itself cannot be changed. Unknown ids leave the list as it was.
    """
    changes.pop("id", None)
    updated: list[LineItem] = []
    for item in items:
        if item.id == item_id:
            item = LineItem.model_validate({**item.model_dump(), **changes})
        updated.append(item)
    return updated


def remove_line_item(items: Iterable[LineItem], item_id: str) -> list[LineItem]:
    """Return a copy of ``items`` without the item matching ``item_id``."""
    return [item for item in items if item.id != item_id]
