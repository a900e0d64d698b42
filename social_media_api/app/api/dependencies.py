"""
API dependencies.

This is the composition root: every request gets its own SQLite
connection from ``get_db`` and the DAOs and services are built around
it here.  FastAPI caches ``get_db`` per request, so both DAOs of a
request share the same connection.  Tests swap collaborators through
``app.dependency_overrides``.
"""

import logging
import sqlite3

from fastapi import Depends

from social_media_api.app.core.db import get_db
from social_media_api.app.dao import AccountDAO, MessageDAO
from social_media_api.app.services import AccountService, MessageService


def get_account_dao(conn: sqlite3.Connection = Depends(get_db)) -> AccountDAO:
    return AccountDAO(conn, logger=logging.getLogger("social_media_api.dao.account"))


def get_message_dao(conn: sqlite3.Connection = Depends(get_db)) -> MessageDAO:
    return MessageDAO(conn, logger=logging.getLogger("social_media_api.dao.message"))


def get_account_service(account_dao: AccountDAO = Depends(get_account_dao)) -> AccountService:
    """Account service wired to the request's account DAO."""
    return AccountService(account_dao, logger=logging.getLogger("social_media_api.services.account"))


def get_message_service(
    message_dao: MessageDAO = Depends(get_message_dao),
    account_dao: AccountDAO = Depends(get_account_dao),
) -> MessageService:
    """Message service wired to the request's message and account DAOs."""
    return MessageService(
        message_dao,
        account_dao,
        logger=logging.getLogger("social_media_api.services.message"),
    )
