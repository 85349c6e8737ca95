"""
Discovery preference endpoints.

Reading preferences never fails: an account that has not saved any
gets the configured defaults (``id`` is null in that case).
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from bliss_api.app.core.security import get_current_user
from bliss_api.app.core.store import DataStore, get_store
from bliss_api.app.schemas.preference import PreferenceCreate, PreferenceRead, PreferenceUpdate
from bliss_api.app.services.preference_service import PreferenceService

router = APIRouter()


@router.get("/preferences", response_model=PreferenceRead)
async def read_preferences(
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> PreferenceRead:
    service = PreferenceService(store)
    user_id = current_user["user_id"]
    return service.get(user_id) or service.defaults(user_id)


@router.post("/preferences", response_model=PreferenceRead)
async def save_preferences(
    body: PreferenceUpdate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> PreferenceRead:
    """Replace the caller's preferences; omitted fields reset to defaults."""
    prefs = PreferenceCreate(user_id=current_user["user_id"], **body.model_dump())
    return PreferenceService(store).upsert(prefs)
