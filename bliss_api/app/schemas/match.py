"""
Pydantic models for swipes and matches.

A match record exists once per pair of accounts.  ``user_id1`` is the
account that swiped first; ``user1_liked`` is its decision and
``user2_liked`` is the other account's answer (``None`` until it
swipes back).  ``matched`` is true exactly when both decisions are likes.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel
from .user import UserRead


class SwipeCreate(CamelModel):
    user_id2: int = Field(..., examples=[2], description="Account being swiped on")
    liked: bool = Field(..., examples=[True])


class MatchRead(CamelModel):
    id: int
    user_id1: int
    user_id2: int
    matched: bool = False
    user1_liked: bool
    user2_liked: Optional[bool] = None
    created_at: datetime
    updated_at: datetime


class SwipeResult(CamelModel):
    match: MatchRead


class MatchWithUser(MatchRead):
    """A matched record joined with the counterpart account."""

    user: UserRead
