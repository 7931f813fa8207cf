"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, table creation and
database engine disposal. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: configure logging, create missing tables when
    database_auto_create is set. Shutdown: dispose the SQL engine.
    """
    settings = get_settings()
    setup_logging()

    if settings.database_auto_create:
        await database.create_all()
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    await database.dispose_engine()
