"""FastAPI application factory.

Run with:

    uvicorn src.api.app:app
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.domain.repositories.base import StorageHandle
from src.infrastructure import database
from src.infrastructure.database import Settings
from src.infrastructure.persistence.repositories import Services, get_services

from .router import crud_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def _dispose_engine(app: FastAPI) -> AsyncIterator[None]:
    yield
    await database.engine.dispose()


def create_app(
    handle: StorageHandle | None = None,
    services: Services | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Mount one CRUD router fragment per entity kind.

    handle defaults to the process-wide AsyncSessionLocal; the module
    engine is disposed on shutdown only in that case.
    """
    settings = settings or database.settings
    configure_logging(settings.log_level)

    owns_engine = handle is None
    if owns_engine:
        handle = database.AsyncSessionLocal
    services = services or get_services()

    app = FastAPI(title="crudkit", lifespan=_dispose_engine if owns_engine else None)
    app.include_router(crud_router(services.users, handle), prefix="/users")
    app.include_router(crud_router(services.posts, handle), prefix="/posts")
    logger.info("Mounted CRUD routes: /users, /posts")
    return app


app = create_app()
