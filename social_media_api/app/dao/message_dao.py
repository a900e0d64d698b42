"""
Data access for the ``message`` table.

Reads that return collections yield an empty list on failure, single
lookups yield ``None`` and writes yield ``False``/``None``, so callers
never see a storage exception.  Every failure is logged at ERROR level.

A missing row and a failed query are told apart only in the log: the
failure path writes an ERROR record naming the operation and its input,
the not-found path writes nothing.  Every endpoint reports both the same
way, so no richer result type is passed up to the services.
"""

import logging
import sqlite3
from typing import List, Optional

from social_media_api.app.core.db import STORAGE_ERRORS
from social_media_api.app.schemas.message import Message, MessageCreate


_COLUMNS = "message_id, posted_by, message_text, time_posted_epoch"


class MessageDAO:
    """Reads and writes messages over a single SQLite connection."""

    def __init__(self, conn: sqlite3.Connection, logger: Optional[logging.Logger] = None) -> None:
        self.conn = conn
        self.logger = logger or logging.getLogger(__name__)

    def find_all(self) -> List[Message]:
        try:
            rows = self.conn.execute(f"SELECT {_COLUMNS} FROM message ORDER BY message_id").fetchall()
        except STORAGE_ERRORS as exc:
            self.logger.error("find_all failed, error: %s", exc)
            return []
        return [self._row_to_message(row) for row in rows]

    def find_by_account_id(self, account_id: int) -> List[Message]:
        try:
            rows = self.conn.execute(
                f"SELECT {_COLUMNS} FROM message WHERE posted_by = ? ORDER BY message_id",
                (account_id,),
            ).fetchall()
        except STORAGE_ERRORS as exc:
            self.logger.error("find_by_account_id failed, account_id: %s, error: %s", account_id, exc)
            return []
        return [self._row_to_message(row) for row in rows]

    def find_by_id(self, message_id: int) -> Optional[Message]:
        try:
            row = self.conn.execute(
                f"SELECT {_COLUMNS} FROM message WHERE message_id = ?",
                (message_id,),
            ).fetchone()
        except STORAGE_ERRORS as exc:
            self.logger.error("find_by_id failed, message_id: %s, error: %s", message_id, exc)
            return None
        return self._row_to_message(row) if row else None

    def insert(self, message: MessageCreate) -> Optional[Message]:
        """Insert a new message and return it with its assigned id."""
        try:
            cursor = self.conn.execute(
                "INSERT INTO message (posted_by, message_text, time_posted_epoch) VALUES (?, ?, ?)",
                (message.posted_by, message.message_text, message.time_posted_epoch),
            )
            self.conn.commit()
        except STORAGE_ERRORS as exc:
            self.conn.rollback()
            self.logger.error("insert failed, message: %s, error: %s", message, exc)
            return None
        message_id = cursor.lastrowid
        self.logger.info("Created message %s for account %s", message_id, message.posted_by)
        return Message(message_id=message_id, **message.model_dump())

    def update_text(self, message_id: int, message_text: str) -> bool:
        """Replace the text of a message.

        Returns ``True`` if a row was updated, ``False`` if no row has
        this id or the update failed.
        """
        try:
            cursor = self.conn.execute(
                "UPDATE message SET message_text = ? WHERE message_id = ?",
                (message_text, message_id),
            )
            self.conn.commit()
        except STORAGE_ERRORS as exc:
            self.conn.rollback()
            self.logger.error(
                "update_text failed, message_id: %s, message_text: %s, error: %s",
                message_id,
                message_text,
                exc,
            )
            return False
        return cursor.rowcount > 0

    def delete_by_id(self, message_id: int) -> bool:
        """Delete a message; ``True`` if a row was removed."""
        try:
            cursor = self.conn.execute("DELETE FROM message WHERE message_id = ?", (message_id,))
            self.conn.commit()
        except STORAGE_ERRORS as exc:
            self.conn.rollback()
            self.logger.error("delete_by_id failed, message_id: %s, error: %s", message_id, exc)
            return False
        return cursor.rowcount > 0

    @staticmethod
    def _row_to_message(row: sqlite3.Row) -> Message:
        return Message(
            message_id=row["message_id"],
            posted_by=row["posted_by"],
            message_text=row["message_text"],
            time_posted_epoch=row["time_posted_epoch"],
        )
