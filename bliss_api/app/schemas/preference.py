"""
Pydantic models for discovery preferences.

Numeric fields are optional on input: a missing or null value falls
back to the configured default when saved, while an explicit ``0`` is
kept.
"""

from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class PreferenceUpdate(CamelModel):
    min_age: Optional[int] = Field(None, examples=[18])
    max_age: Optional[int] = Field(None, examples=[35])
    distance: Optional[int] = Field(None, examples=[50], description="Search radius in km")
    gender: Optional[str] = Field(None, examples=["female"])
    interests: Optional[List[str]] = Field(None, examples=[["Música"]])


class PreferenceCreate(PreferenceUpdate):
    user_id: int


class PreferenceRead(CamelModel):
    # ``None`` when the values are defaults that were never saved.
    id: Optional[int] = None
    user_id: int
    min_age: int
    max_age: int
    distance: int
    gender: Optional[str] = None
    interests: List[str] = Field(default_factory=list)
