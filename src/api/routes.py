"""API routes for the take-home pay calculator."""

import logging
from collections.abc import Mapping
from decimal import Decimal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import settings
from src.calculators.items import LineItem
from src.calculators.models import TaxCalculationError, TaxCalculationResult
from src.calculators.rates import TAX_YEARS, RateTable, available_tax_years, get_rate_table
from src.calculators.take_home import calculate

logger = logging.getLogger(__name__)

router = APIRouter()


class CalculateRequest(BaseModel):
    """Request body for the /calculate endpoint."""

    gross: str | Decimal = ""
    allowances: str | Decimal = ""
    tax_relief: str | Decimal = ""
    ssnit_enabled: bool = True
    year: str | None = None
    deductions: list[LineItem] = []
    allowance_items: list[LineItem] = []
    working_days: str | Decimal = ""
    missed_days: str | Decimal = ""


class TaxYearInfo(BaseModel):
    """A selectable tax year."""

    year: str
    effective_from: str
    default: bool


def _rate_tables(request: Request) -> Mapping[str, RateTable]:
    return getattr(request.app.state, "rate_tables", None) or TAX_YEARS


@router.get("/health")
async def health() -> dict:  # type: ignore[type-arg]
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/tax-years", response_model=list[TaxYearInfo])
async def tax_years(request: Request) -> list[TaxYearInfo]:
    """List the tax years a calculation can use, newest first."""
    tables = _rate_tables(request)
    default = get_rate_table(settings.default_tax_year, tables).year
    return [
        TaxYearInfo(year=year, effective_from=tables[year].effective_from, default=year == default)
        for year in available_tax_years(tables)
    ]


@router.post("/calculate", response_model=TaxCalculationResult)
async def calculate_take_home(body: CalculateRequest, request: Request) -> TaxCalculationResult | JSONResponse:
    """Calculate PAYE, SSNIT and take-home pay for one month."""
    result = calculate(
        body.gross,
        body.allowances,
        body.tax_relief,
        ssnit_enabled=body.ssnit_enabled,
        year=body.year or settings.default_tax_year,
        deductions=body.deductions,
        allowance_items=body.allowance_items,
        working_days=body.working_days,
        missed_days=body.missed_days,
        tables=_rate_tables(request),
    )
    if isinstance(result, TaxCalculationError):
        return JSONResponse({"error": result.error_message, "kind": result.kind}, status_code=422)
    return result
