"""Application lifespan: startup and shutdown.

Wiring only: logging setup, optional schema creation for local runs, and
DB engine dispose on exit.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from access_control.core.config import get_settings
from access_control.infrastructure.persistence.database import (
    dispose_engine,
    init_models,
)
from access_control.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the SQL engine."""
    settings = get_settings()
    setup_logging()

    if settings.database_auto_create:
        await init_models()
        logger.info("Database tables ensured (auto-create)")

    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    await dispose_engine()
    logger.info("Database engine disposed")
