"""Pydantic models for direct messages and conversation summaries."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel
from .user import UserRead


class MessageCreate(CamelModel):
    sender_id: int = Field(..., examples=[1])
    receiver_id: int = Field(..., examples=[5])
    content: str = Field(..., min_length=1, examples=["Oi! Tudo bem com você?"])
    read: Optional[bool] = None


class MessageRead(CamelModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    read: bool = False
    created_at: datetime


class ConversationRead(CamelModel):
    """Latest message exchanged with one counterpart."""

    user: UserRead
    last_message: MessageRead
    unread_count: int = 0


class ReadReceipt(CamelModel):
    updated: int
