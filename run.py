"""Entry point for the Social Media API.

Starts the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Host, port, log level and the database location are read from the
environment (``HOST``, ``PORT``, ``LOG_LEVEL``, ``DATABASE_URL``), see
``social_media_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from social_media_api.app.core.config import settings
from social_media_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
