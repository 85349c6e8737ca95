"""
Pydantic models for VIP subscriptions.

Amounts are integers in minor currency units (cents).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class SubscriptionRequest(CamelModel):
    """Body of a subscription purchase."""

    plan_type: str = Field(..., min_length=1, examples=["monthly"], description="'monthly' or 'yearly'")
    amount: int = Field(..., ge=0, examples=[990])
    payment_method: Optional[str] = Field(None, examples=["credit_card"])
    auto_renew: Optional[bool] = None


class SubscriptionCreate(SubscriptionRequest):
    user_id: int
    status: Optional[str] = None
    start_date: Optional[datetime] = None


class SubscriptionUpdate(CamelModel):
    plan_type: Optional[str] = None
    end_date: Optional[datetime] = None
    auto_renew: Optional[bool] = None
    status: Optional[str] = None
    payment_method: Optional[str] = None
    amount: Optional[int] = Field(None, ge=0)


class SubscriptionRead(CamelModel):
    id: int
    user_id: int
    plan_type: str
    start_date: datetime
    end_date: datetime
    auto_renew: bool
    status: str
    payment_method: Optional[str] = None
    amount: int
    created_at: datetime
    updated_at: datetime


class PlanRead(CamelModel):
    plan_type: str
    amount: int
    months: int


class CancelResult(CamelModel):
    success: bool
    message: str
