"""
Pydantic models for account data.

``UserCreate`` is the registration payload; it enforces the minimum age
of 18.  The store itself accepts any age, so this model is the only
place the rule is checked.  ``UserRead`` never includes the password
hash.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import CamelModel

MINIMUM_AGE = 18


class UserBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Sofia"])
    age: int = Field(..., examples=[28])
    bio: Optional[str] = Field(None, examples=["Apaixonada por arte e cultura."])
    location: Optional[str] = Field(None, examples=["São Paulo"])
    gender: str = Field(..., examples=["female"])
    looking_for: str = Field(..., examples=["male"], description="Gender to discover, or 'all'")
    profile_pic_url: Optional[str] = None
    interests: List[str] = Field(default_factory=list, examples=[["Fotografia", "Viagens"]])
    photos: List[str] = Field(default_factory=list)


class UserCreate(UserBase):
    """Registration payload."""

    username: str = Field(..., min_length=3, max_length=50, examples=["sofia"])
    password: str = Field(..., min_length=6, examples=["password123"])
    age: int = Field(..., ge=MINIMUM_AGE, examples=[28])


class UserUpdate(CamelModel):
    """Partial profile update; only fields present in the body are applied."""

    name: Optional[str] = Field(None, min_length=1)
    age: Optional[int] = Field(None, ge=MINIMUM_AGE)
    bio: Optional[str] = None
    location: Optional[str] = None
    gender: Optional[str] = None
    looking_for: Optional[str] = None
    profile_pic_url: Optional[str] = None
    interests: Optional[List[str]] = None
    photos: Optional[List[str]] = None


class UserRead(UserBase):
    """Public representation of an account."""

    id: int
    username: str
    is_vip: bool = False
    created_at: datetime


class LoginRequest(CamelModel):
    username: str
    password: str


class AuthResponse(CamelModel):
    """Account plus a bearer token, returned by register and login."""

    user: UserRead
    access_token: str
    token_type: str = "bearer"


class SessionUser(CamelModel):
    id: int
    username: str
    name: str
    is_vip: bool


class SessionRead(CamelModel):
    authenticated: bool
    user: Optional[SessionUser] = None
