"""Shared test fixtures for the Social Media API tests."""

import asyncio
import sqlite3

import pytest
from fastapi.testclient import TestClient

from social_media_api.app.core.config import settings
from social_media_api.app.core.db import apply_migrations
from social_media_api.app.dao import AccountDAO, MessageDAO
from social_media_api.app.main import app
from social_media_api.app.schemas.account import AccountCreate
from social_media_api.app.schemas.message import MessageCreate
from social_media_api.app.services import AccountService, MessageService


def run(coro):
    """Drive a service coroutine to completion."""
    return asyncio.run(coro)


@pytest.fixture
def conn():
    """In-memory database with the full schema applied."""
    connection = sqlite3.connect(":memory:")
    connection.row_factory = sqlite3.Row
    connection.execute("PRAGMA foreign_keys = ON")
    apply_migrations(connection)
    yield connection
    connection.close()


@pytest.fixture
def account_dao(conn):
    return AccountDAO(conn)


@pytest.fixture
def message_dao(conn):
    return MessageDAO(conn)


@pytest.fixture
def account_service(account_dao):
    return AccountService(account_dao)


@pytest.fixture
def message_service(message_dao, account_dao):
    return MessageService(message_dao, account_dao)


@pytest.fixture
def bob(account_dao):
    """A stored account to post messages with."""
    return account_dao.insert(AccountCreate(username="bob", password="password"))


@pytest.fixture
def bobs_message(message_dao, bob):
    return message_dao.insert(
        MessageCreate(posted_by=bob.account_id, message_text="hello", time_posted_epoch=1669947792)
    )


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Test client backed by a fresh database file."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "test.db"))
    with TestClient(app) as test_client:
        yield test_client
