"""
Logging configuration for the application.

Every logger this project creates lives under the ``social_media_api``
namespace: module loggers (``social_media_api.app.dao.account_dao``) as
well as the loggers ``api/dependencies.py`` hands to the DAOs and
services (``social_media_api.dao.account``, ``social_media_api.services.message``).
``setup_logging`` attaches handlers to the root logger once and gives
that namespace its own level, so the DAO/service records can be tuned
independently of uvicorn and library output.
"""

import logging
from pathlib import Path
from typing import Optional


APP_LOGGER_NAME = "social_media_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its number.

    Empty or unknown names yield ``default``.
    """
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    app_level: Optional[str] = None,
) -> logging.Logger:
    """Configure logging and return the ``social_media_api`` logger.

    Parameters
    ----------
    level : str
        Level of the root logger, which also governs third-party output.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    app_level : Optional[str]
        Level of the ``social_media_api`` namespace.  Falls back to
        ``level`` when empty.

    Root handlers are only installed if the root logger has none yet
    (pytest and ``create_app`` being called twice both hit this), but
    the namespace level is applied on every call.
    """
    root_level = resolve_level(level)
    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(root_level)
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
        handlers = [logging.StreamHandler()]
        if logfile:
            handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
        for handler in handlers:
            handler.setFormatter(formatter)
            root.addHandler(handler)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(resolve_level(app_level, default=root_level))
    return app_logger
