"""
Main entrypoint for the Social Media API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn, e.g.::

    uvicorn social_media_api.app.main:app --reload
"""

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import init_db


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, includes the v1 router at the application root
    and registers a startup hook that applies database migrations.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that startup work below is logged.
    setup_logging(settings.log_level, settings.log_file or None, settings.app_log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first start and brings the schema up to date.
        init_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
