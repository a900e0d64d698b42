"""
Pydantic models for account data.

Both fields of ``AccountCreate`` are optional on the wire: a missing
username or password is a rule violation handled by ``AccountService``
rather than a parse error.  Passwords are stored and returned in plain
text; hashing is out of scope for this API.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AccountCreate(BaseModel):
    """Schema for registering or authenticating an account."""

    username: Optional[str] = Field(None, examples=["bob"])
    password: Optional[str] = Field(None, examples=["password"])


class Account(BaseModel):
    """Schema for reading an account from the API."""

    account_id: int
    username: str
    password: str

    model_config = {
        "from_attributes": True,
    }
