"""
Business logic for messages.

Message text must be non-blank and shorter than 255 characters, and a
message can only be posted by an existing account.  Updates and
deletes first check that the message exists.  None of these
check-then-act sequences run in a transaction.
"""

import logging
from typing import List, Optional

from social_media_api.app.dao.account_dao import AccountDAO
from social_media_api.app.dao.message_dao import MessageDAO
from social_media_api.app.schemas.message import Message, MessageCreate


MAX_TEXT_LENGTH = 254


def is_valid_text(text: Optional[str]) -> bool:
    """Return ``True`` if ``text`` is non-blank and at most 254 characters."""
    return bool(text and text.strip()) and len(text) <= MAX_TEXT_LENGTH


class MessageService:
    """Service for posting, reading, editing and deleting messages."""

    def __init__(
        self,
        message_dao: MessageDAO,
        account_dao: AccountDAO,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.message_dao = message_dao
        self.account_dao = account_dao
        self.logger = logger or logging.getLogger(__name__)

    async def list_all(self) -> List[Message]:
        return self.message_dao.find_all()

    async def list_by_account(self, account_id: int) -> List[Message]:
        return self.message_dao.find_by_account_id(account_id)

    async def get_by_id(self, message_id: int) -> Optional[Message]:
        return self.message_dao.find_by_id(message_id)

    async def create(self, candidate: MessageCreate) -> Optional[Message]:
        """Post a message if its text is valid and its author exists."""
        if not is_valid_text(candidate.message_text):
            self.logger.info("Message rejected: invalid text from account %s", candidate.posted_by)
            return None
        if self.account_dao.find_by_id(candidate.posted_by) is None:
            self.logger.info("Message rejected: account %s does not exist", candidate.posted_by)
            return None
        return self.message_dao.insert(candidate)

    async def update_text(self, message_id: int, message_text: Optional[str]) -> Optional[Message]:
        """Replace the text of an existing message.

        The returned message is read back from storage after the update,
        so it reflects whatever the row holds at that point.
        """
        if self.message_dao.find_by_id(message_id) is None:
            self.logger.info("Update rejected: message %s does not exist", message_id)
            return None
        if not is_valid_text(message_text):
            self.logger.info("Update rejected: invalid text for message %s", message_id)
            return None
        if not self.message_dao.update_text(message_id, message_text):
            return None
        return self.message_dao.find_by_id(message_id)

    async def delete_by_id(self, message_id: int) -> Optional[Message]:
        """Delete a message and return it as it was before deletion."""
        existing = self.message_dao.find_by_id(message_id)
        if existing is None:
            return None
        if not self.message_dao.delete_by_id(message_id):
            return None
        self.logger.info("Deleted message %s", message_id)
        return existing
