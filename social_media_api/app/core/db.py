"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations on application start
(``init_db``), wiping the data tables (``reset_db``), a short-lived
cursor for one-off work (``get_cursor``) and a per-request connection
dependency for FastAPI routes (``get_db``).

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS account (
            account_id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS message (
            message_id INTEGER PRIMARY KEY AUTOINCREMENT,
            posted_by INTEGER NOT NULL,
            message_text TEXT NOT NULL,
            time_posted_epoch INTEGER NOT NULL,
            FOREIGN KEY(posted_by) REFERENCES account(account_id)
        );
        """,
    ),
    # Migration 2: index for the per-account message listing
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_message_posted_by ON message(posted_by);
        """,
    ),
]

# Data tables in drop order (children first).
TABLES = ("message", "account")

# Errors a DAO reports as absence.  sqlite3 raises OverflowError, not a
# sqlite3.Error, when a bound int does not fit in a 64-bit INTEGER.
STORAGE_ERRORS = (sqlite3.Error, OverflowError)


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path or ``:memory:``,
    use it directly.  Otherwise resolve it relative to the project root.
    The setting is read on every call so it can be changed at runtime.
    """
    db_url = settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  ``check_same_thread`` is disabled because FastAPI may open
    the connection in a worker thread and use it on the event loop.
    """
    conn = sqlite3.connect(get_database_path(), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    # SQLite ignores REFERENCES clauses unless enabled per connection.
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed only if the block finishes without raising.
    """
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def get_db() -> Iterator[sqlite3.Connection]:
    """FastAPI dependency yielding one connection per request."""
    conn = get_connection()
    try:
        yield conn
    finally:
        conn.close()


def apply_migrations(conn: sqlite3.Connection) -> int:
    """Apply pending migrations on ``conn`` and return the schema version."""
    cursor = conn.cursor()
    cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
    cursor.execute("SELECT MAX(version) AS version FROM migrations")
    row = cursor.fetchone()
    current_version = row[0] if row and row[0] is not None else 0

    for version, sql in MIGRATIONS:
        if version > current_version:
            cursor.executescript(sql)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            logger.info("Applied migration %s", version)
            current_version = version
    conn.commit()
    return current_version


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the database file if it does not exist.  If you add a new
    migration, append it to ``MIGRATIONS`` with an incremented version.
    """
    with get_cursor() as cursor:
        version = apply_migrations(cursor.connection)
    logger.info("Database %s at schema version %s", get_database_path(), version)


def reset_db(conn: sqlite3.Connection) -> None:
    """Drop all data tables and recreate them from the migrations."""
    cursor = conn.cursor()
    for table in TABLES:
        cursor.execute(f"DROP TABLE IF EXISTS {table}")
    cursor.execute("DROP TABLE IF EXISTS migrations")
    conn.commit()
    apply_migrations(conn)
    logger.warning("Database reset, all accounts and messages removed")
