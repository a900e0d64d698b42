"""
Business logic for accounts.

Registration enforces three rules, checked in order: the username is
not blank, the password has at least four characters and no other
account already uses the username.  Passwords are compared in plain
text; hashing is deliberately not part of this API.
"""

import logging
from typing import Optional

from social_media_api.app.dao.account_dao import AccountDAO
from social_media_api.app.schemas.account import Account, AccountCreate


MIN_PASSWORD_LENGTH = 4


class AccountService:
    """Service for registering and authenticating accounts."""

    def __init__(self, account_dao: AccountDAO, logger: Optional[logging.Logger] = None) -> None:
        self.account_dao = account_dao
        self.logger = logger or logging.getLogger(__name__)

    async def register(self, candidate: AccountCreate) -> Optional[Account]:
        """Register a new account.

        Returns the stored account with its id, or ``None`` if a rule is
        violated or the insert fails.
        """
        if not candidate.username or not candidate.username.strip():
            self.logger.info("Registration rejected: blank username")
            return None
        if candidate.password is None or len(candidate.password) < MIN_PASSWORD_LENGTH:
            self.logger.info("Registration rejected for %s: password too short", candidate.username)
            return None
        if self.account_dao.find_by_username(candidate.username) is not None:
            self.logger.info("Registration rejected: username %s already taken", candidate.username)
            return None
        return self.account_dao.insert(candidate)

    async def authenticate(self, credentials: AccountCreate) -> Optional[Account]:
        """Return the stored account if username and password match."""
        existing = self.account_dao.find_by_username(credentials.username)
        if existing is None:
            self.logger.info("Login failed: unknown username %s", credentials.username)
            return None
        if existing.password != credentials.password:
            self.logger.info("Login failed: wrong password for %s", credentials.username)
            return None
        return existing
