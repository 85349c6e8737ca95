"""
Discovery, swiping and match endpoints.

All routes act on behalf of the authenticated account.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from bliss_api.app.core.exceptions import ConsistencyError, NotFoundError
from bliss_api.app.core.security import get_current_user, require_vip
from bliss_api.app.core.store import DataStore, get_store
from bliss_api.app.schemas.match import MatchWithUser, SwipeCreate, SwipeResult
from bliss_api.app.schemas.user import UserRead
from bliss_api.app.services.discovery_service import DiscoveryService
from bliss_api.app.services.match_service import MatchService
from bliss_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/potential-matches", response_model=List[UserRead])
async def potential_matches(
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> List[UserRead]:
    """Candidates for the swipe deck, filtered by the caller's preferences."""
    try:
        return DiscoveryService(store).get_potential_matches(current_user["user_id"])
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/swipe", response_model=SwipeResult)
async def swipe(
    payload: SwipeCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> SwipeResult:
    """Like (``liked: true``) or pass on another account.

    The returned record has ``matched: true`` when the like completed a
    mutual match.
    """
    if UserService(store).get_user(payload.user_id2) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    try:
        match = MatchService(store).record_swipe(current_user["user_id"], payload.user_id2, payload.liked)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return SwipeResult(match=match)


@router.get("/matches", response_model=List[MatchWithUser])
async def list_matches(
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> List[MatchWithUser]:
    try:
        return MatchService(store).get_matches(current_user["user_id"])
    except ConsistencyError:
        logger.exception("Could not load matches for user %s", current_user["user_id"])
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error fetching matches")


@router.get("/likes", response_model=List[UserRead])
async def incoming_likes(
    current_user: Dict[str, Any] = Depends(require_vip),
    store: DataStore = Depends(get_store),
) -> List[UserRead]:
    """Accounts that liked the caller and are awaiting an answer (VIP only)."""
    return MatchService(store).get_incoming_likes(current_user["user_id"])
