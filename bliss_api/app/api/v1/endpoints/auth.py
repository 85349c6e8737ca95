"""
Authentication endpoints.

Registration and login both answer with the account and a bearer
token.  Logout revokes the presented token; the session endpoint lets
the client ask whether its token is still good without getting a 401.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from bliss_api.app.core.exceptions import ConflictError
from bliss_api.app.core.security import create_access_token, get_current_user, get_optional_user
from bliss_api.app.core.store import DataStore, get_store
from bliss_api.app.schemas.user import (
    AuthResponse,
    LoginRequest,
    SessionRead,
    SessionUser,
    UserCreate,
    UserRead,
)
from bliss_api.app.services.user_service import UserService

router = APIRouter()


def _issue_token(user: UserRead) -> AuthResponse:
    token = create_access_token({"sub": str(user.id)})
    return AuthResponse(user=user, access_token=token)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: UserCreate, store: DataStore = Depends(get_store)) -> AuthResponse:
    """Create an account and log it in.

    Returns 400 when the username is already taken.  Accounts younger
    than 18 are rejected by payload validation (422).
    """
    try:
        user = UserService(store).register(payload)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _issue_token(user)


@router.post("/login", response_model=AuthResponse)
async def login(payload: LoginRequest, store: DataStore = Depends(get_store)) -> AuthResponse:
    user = UserService(store).authenticate(payload.username, payload.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    return _issue_token(user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> None:
    jti = current_user.get("jti")
    if jti:
        store.revoke_token(jti)


@router.get("/session", response_model=SessionRead)
async def session(
    current_user: Optional[Dict[str, Any]] = Depends(get_optional_user),
    store: DataStore = Depends(get_store),
) -> SessionRead:
    if current_user is None:
        return SessionRead(authenticated=False)
    user = UserService(store).get_user(current_user["user_id"])
    return SessionRead(
        authenticated=True,
        user=SessionUser(id=user.id, username=user.username, name=user.name, is_vip=user.is_vip),
    )
