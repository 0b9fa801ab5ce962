"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from src.api.routes import router
from src.calculators.rates import TAX_YEARS, load_rate_tables

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: configure logging and load rate tables."""
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting up...")

    path = settings.rate_table_path
    app.state.rate_tables = load_rate_tables(path) if path else TAX_YEARS

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Ghana PAYE Calculator", lifespan=lifespan)
    app.include_router(router)
    return app
