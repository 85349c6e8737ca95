"""
Direct message log.

Messages are append‑only.  Within a conversation they are ordered by
creation time; messages created within the same clock tick keep their
insertion order because ids are sequential and used as the tie breaker.
"""

import logging
from typing import Any, Dict, List

from ..core.store import DataStore, utcnow
from ..schemas.message import ConversationRead, MessageCreate, MessageRead
from ..schemas.user import UserRead

logger = logging.getLogger(__name__)


def _chronological(row: Dict[str, Any]):
    return (row["created_at"], row["id"])


def _between(row: Dict[str, Any], a: int, b: int) -> bool:
    return (row["sender_id"] == a and row["receiver_id"] == b) or (
        row["sender_id"] == b and row["receiver_id"] == a
    )


class MessageService:
    """Stores messages and builds conversation views."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    def create_message(self, data: MessageCreate) -> MessageRead:
        row = self.store.insert(
            "messages",
            {
                "sender_id": data.sender_id,
                "receiver_id": data.receiver_id,
                "content": data.content,
                "read": False if data.read is None else data.read,
                "created_at": utcnow(),
            },
        )
        logger.info("Message %s sent from user %s to user %s", row["id"], data.sender_id, data.receiver_id)
        return MessageRead(**row)

    def get_messages(self, user_a: int, user_b: int) -> List[MessageRead]:
        """Every message between the two accounts, oldest first."""
        rows = self.store.select("messages", lambda r: _between(r, user_a, user_b))
        return [MessageRead(**row) for row in sorted(rows, key=_chronological)]

    def get_conversations(self, user_id: int) -> List[ConversationRead]:
        """One summary per counterpart, most recent conversation first.

        Counterparts whose account no longer exists are left out.
        """
        rows = self.store.select("messages", lambda r: user_id in (r["sender_id"], r["receiver_id"]))
        latest: Dict[int, Dict[str, Any]] = {}
        unread: Dict[int, int] = {}
        for row in rows:
            other_id = row["receiver_id"] if row["sender_id"] == user_id else row["sender_id"]
            current = latest.get(other_id)
            if current is None or _chronological(row) > _chronological(current):
                latest[other_id] = row
            if row["receiver_id"] == user_id and not row["read"]:
                unread[other_id] = unread.get(other_id, 0) + 1

        conversations = []
        for other_id, message in latest.items():
            account = self.store.get("users", other_id)
            if account is None:
                logger.debug("Skipping conversation with missing user %s", other_id)
                continue
            conversations.append(
                (
                    _chronological(message),
                    ConversationRead(
                        user=UserRead(**account),
                        last_message=MessageRead(**message),
                        unread_count=unread.get(other_id, 0),
                    ),
                )
            )
        conversations.sort(key=lambda item: item[0], reverse=True)
        return [conversation for _, conversation in conversations]

    def mark_read(self, reader_id: int, counterpart_id: int) -> int:
        """Mark every unread message from ``counterpart_id`` to ``reader_id`` as read."""
        with self.store.lock:
            unread = self.store.select(
                "messages",
                lambda r: r["sender_id"] == counterpart_id and r["receiver_id"] == reader_id and not r["read"],
            )
            for row in unread:
                self.store.update("messages", row["id"], {"read": True})
        if unread:
            logger.debug("User %s read %d messages from user %s", reader_id, len(unread), counterpart_id)
        return len(unread)

