"""
Data-access objects.

A DAO wraps one SQLite connection and translates rows of a single
table to Pydantic entities.  DAOs never raise on storage errors: a
failure is logged and reported the same way as an absent row.
"""

from .account_dao import AccountDAO
from .message_dao import MessageDAO

__all__ = ["AccountDAO", "MessageDAO"]
