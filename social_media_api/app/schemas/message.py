"""
Pydantic models for messages.

A message is posted by an account (``posted_by``) at a caller-supplied
epoch timestamp.  Only ``message_text`` can change after creation, so
``MessageUpdate`` carries nothing else.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MessageCreate(BaseModel):
    """Schema for posting a new message."""

    posted_by: int = Field(..., examples=[1])
    message_text: Optional[str] = Field(None, examples=["hello world"])
    time_posted_epoch: int = Field(..., examples=[1669947792])


class MessageUpdate(BaseModel):
    """Schema for replacing the text of a message.

    Other fields sent along (e.g. a full message body) are ignored.
    """

    message_text: Optional[str] = None


class Message(BaseModel):
    """Schema for reading a message."""

    message_id: int
    posted_by: int
    message_text: str
    time_posted_epoch: int

    model_config = {
        "from_attributes": True,
    }
