"""
Application package initializer.

The project is organised in layers: ``dao`` translates rows of the
``account`` and ``message`` tables to entities, ``services`` holds the
validation rules and ``api`` maps HTTP requests onto the services.
Shared infrastructure (settings, logging, SQLite bootstrap) lives in
``core``.
"""

from .main import app  # noqa: F401
