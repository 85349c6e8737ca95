"""
Profile endpoints.

``/users/me`` reads and edits the caller's own profile; ``/users/{id}``
returns any account's public profile.  The password hash is never
included in a response.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Path, status

from bliss_api.app.core.security import get_current_user
from bliss_api.app.core.store import DataStore, get_store
from bliss_api.app.schemas.user import UserRead, UserUpdate
from bliss_api.app.services.user_service import UserService

router = APIRouter()


@router.get("/me", response_model=UserRead)
async def read_me(
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> UserRead:
    user = UserService(store).get_user(current_user["user_id"])
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.put("/me", response_model=UserRead)
async def update_me(
    body: UserUpdate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> UserRead:
    """Apply a partial profile update.

    Username, password and the VIP flag cannot be changed here.
    """
    user = UserService(store).update_profile(current_user["user_id"], body.model_dump(exclude_unset=True))
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("/{user_id}", response_model=UserRead)
async def read_user(
    user_id: int = Path(..., description="Account ID"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> UserRead:
    user = UserService(store).get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
