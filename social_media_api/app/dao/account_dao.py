"""
Data access for the ``account`` table.

All queries use parameterized statements.  Lookups return ``None``
both when no row matches and when the query fails; failures are logged
with the operation name and the offending input, which is the only
place a failed query is distinguishable from a missing row.
"""

import logging
import sqlite3
from typing import Optional

from social_media_api.app.core.db import STORAGE_ERRORS
from social_media_api.app.schemas.account import Account, AccountCreate


class AccountDAO:
    """Reads and writes accounts over a single SQLite connection."""

    def __init__(self, conn: sqlite3.Connection, logger: Optional[logging.Logger] = None) -> None:
        self.conn = conn
        self.logger = logger or logging.getLogger(__name__)

    def find_by_username(self, username: Optional[str]) -> Optional[Account]:
        """Return the account with exactly this username, if any."""
        try:
            row = self.conn.execute(
                "SELECT account_id, username, password FROM account WHERE username = ?",
                (username,),
            ).fetchone()
        except STORAGE_ERRORS as exc:
            self.logger.error("find_by_username failed, username: %s, error: %s", username, exc)
            return None
        return self._row_to_account(row) if row else None

    def find_by_id(self, account_id: int) -> Optional[Account]:
        """Return the account with this primary key, if any."""
        try:
            row = self.conn.execute(
                "SELECT account_id, username, password FROM account WHERE account_id = ?",
                (account_id,),
            ).fetchone()
        except STORAGE_ERRORS as exc:
            self.logger.error("find_by_id failed, account_id: %s, error: %s", account_id, exc)
            return None
        return self._row_to_account(row) if row else None

    def insert(self, account: AccountCreate) -> Optional[Account]:
        """Insert a new account and return it with its assigned id.

        Returns ``None`` if the insert fails, for instance on a
        duplicate username.
        """
        try:
            cursor = self.conn.execute(
                "INSERT INTO account (username, password) VALUES (?, ?)",
                (account.username, account.password),
            )
            self.conn.commit()
        except STORAGE_ERRORS as exc:
            self.conn.rollback()
            self.logger.error("insert failed, username: %s, error: %s", account.username, exc)
            return None
        account_id = cursor.lastrowid
        self.logger.info("Created account %s (%s)", account_id, account.username)
        return Account(account_id=account_id, username=account.username, password=account.password)

    @staticmethod
    def _row_to_account(row: sqlite3.Row) -> Account:
        return Account(
            account_id=row["account_id"],
            username=row["username"],
            password=row["password"],
        )
