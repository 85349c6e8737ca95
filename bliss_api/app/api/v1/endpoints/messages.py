"""
Messaging endpoints.

This router defines full paths (``/messages`` and ``/conversations``)
and is included without a prefix.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from bliss_api.app.core.security import get_current_user
from bliss_api.app.core.store import DataStore, get_store
from bliss_api.app.schemas.message import ConversationRead, MessageCreate, MessageRead, ReadReceipt
from bliss_api.app.services.message_service import MessageService
from bliss_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/messages", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
async def send_message(
    payload: MessageCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> MessageRead:
    """Send a message as the authenticated account."""
    if payload.sender_id != current_user["user_id"]:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You can only send messages as yourself")
    if UserService(store).get_user(payload.receiver_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Receiver not found")
    return MessageService(store).create_message(payload)


@router.get("/messages/{user_id}", response_model=List[MessageRead])
async def conversation(
    user_id: int = Path(..., description="ID of the other account"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> List[MessageRead]:
    return MessageService(store).get_messages(current_user["user_id"], user_id)


@router.post("/messages/{user_id}/read", response_model=ReadReceipt)
async def mark_conversation_read(
    user_id: int = Path(..., description="ID of the other account"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> ReadReceipt:
    updated = MessageService(store).mark_read(current_user["user_id"], user_id)
    return ReadReceipt(updated=updated)


@router.get("/conversations", response_model=List[ConversationRead])
async def list_conversations(
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> List[ConversationRead]:
    return MessageService(store).get_conversations(current_user["user_id"])
