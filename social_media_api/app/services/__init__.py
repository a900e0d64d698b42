"""
Service layer abstraction.

Each service encapsulates the business rules for one entity and talks
to storage only through the DAOs it is constructed with, so API
handlers stay free of validation logic and tests can hand in DAOs over
any connection.
"""

from .account_service import AccountService
from .message_service import MessageService, is_valid_text

__all__ = ["AccountService", "MessageService", "is_valid_text"]
