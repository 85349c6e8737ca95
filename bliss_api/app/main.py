"""
Main entrypoint for the Bliss dating API.

``create_app`` configures logging, creates the application's single
``DataStore`` (unless one is passed in, as the tests do), optionally
seeds demo data and mounts the API under ``/api``.  The module‑level
``app`` makes the service runnable with::

    uvicorn bliss_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.seed import seed_demo_data
from .core.store import DataStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[DataStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[DataStore]
        Store the application should serve.  A fresh empty store is
        created when omitted.
    """
    # Logging first so that seeding below is logged.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else DataStore()
    if settings.seed_demo_data:
        seed_demo_data(app.state.store)

    app.include_router(v1_router, prefix="/api")
    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Created at import time so that uvicorn can discover it.
app = create_app()
