"""
Main entrypoint for the Todo API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The record store is loaded from
``settings.todo_data_file`` when the application starts; a missing or
malformed file aborts startup.  Run it with uvicorn, e.g.::

    uvicorn todo_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.todo_store import TodoStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module-level defaults, mainly so
        tests can point the app at their own data file.

    Returns
    -------
    FastAPI
        A configured FastAPI instance.  The store is attached to
        ``app.state.todo_store`` during startup.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.todo_store = TodoStore.from_file(settings.todo_data_file)
        logger.info("%s %s ready", settings.project_name, settings.api_version)
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.include_router(v1_router, prefix="/api/v1")
    return app


# Created at import time so that uvicorn can discover it.
app = create_app()
