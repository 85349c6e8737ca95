"""
VIP subscription endpoints.

No payment provider is involved: the client reports the plan, amount
and payment method and the subscription starts immediately.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from bliss_api.app.core.exceptions import ConflictError
from bliss_api.app.core.security import get_current_user
from bliss_api.app.core.store import DataStore, get_store
from bliss_api.app.schemas.subscription import (
    CancelResult,
    PlanRead,
    SubscriptionCreate,
    SubscriptionRead,
    SubscriptionRequest,
)
from bliss_api.app.services.subscription_service import SubscriptionService

router = APIRouter()


@router.get("", response_model=Optional[SubscriptionRead])
async def current_subscription(
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> Optional[SubscriptionRead]:
    """The caller's active subscription, or ``null``.

    Subscriptions past their end date are expired first.
    """
    service = SubscriptionService(store)
    service.expire_due()
    return service.get_active(current_user["user_id"])


@router.get("/plans", response_model=List[PlanRead])
async def list_plans() -> List[PlanRead]:
    return SubscriptionService.plans()


@router.post("", response_model=SubscriptionRead, status_code=status.HTTP_201_CREATED)
async def subscribe(
    payload: SubscriptionRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> SubscriptionRead:
    """Start a VIP subscription; 400 if one is already active."""
    data = SubscriptionCreate(user_id=current_user["user_id"], **payload.model_dump())
    try:
        return SubscriptionService(store).create(data)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/cancel", response_model=CancelResult)
async def cancel(
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> CancelResult:
    if not SubscriptionService(store).cancel(current_user["user_id"]):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active subscription found")
    return CancelResult(success=True, message="Subscription cancelled")
