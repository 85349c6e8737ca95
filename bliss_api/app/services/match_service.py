"""
Swipe and match ledger.

There is at most one record per unordered pair of accounts.  The first
swipe between two accounts creates it with the swiper as ``user_id1``
and its decision as ``user1_liked``; the other account's swipe is
stored on the same record as ``user2_liked``.  A record is matched once
both sides liked.

While a record is unmatched, a later swipe replaces the actor's own
decision, so a pass can still turn into a match.  Once matched, further
swipes on the pair return the record unchanged.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.exceptions import ConsistencyError
from ..core.store import DataStore, utcnow
from ..schemas.match import MatchRead, MatchWithUser
from ..schemas.user import UserRead

logger = logging.getLogger(__name__)


def _touches_pair(row: Dict[str, Any], a: int, b: int) -> bool:
    return (row["user_id1"] == a and row["user_id2"] == b) or (
        row["user_id1"] == b and row["user_id2"] == a
    )


def has_swiped(row: Dict[str, Any], user_id: int) -> bool:
    """Whether ``user_id`` has recorded a decision in this record."""
    if row["user_id1"] == user_id:
        return True
    return row["user_id2"] == user_id and row.get("user2_liked") is not None


class MatchService:
    """Records swipes and answers match queries."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    def get_pair(self, a: int, b: int) -> Optional[MatchRead]:
        row = self.store.find("matches", lambda r: _touches_pair(r, a, b))
        return MatchRead(**row) if row else None

    def record_swipe(self, actor_id: int, target_id: int, liked: bool) -> MatchRead:
        """Record ``actor_id``'s decision about ``target_id``.

        Returns the (possibly new) record for the pair.  Raises
        ``ValueError`` when an account swipes on itself.
        """
        if actor_id == target_id:
            raise ValueError("An account cannot swipe on itself")
        with self.store.lock:
            existing = self.store.find("matches", lambda r: _touches_pair(r, actor_id, target_id))
            if existing is not None:
                return MatchRead(**self._redecide(existing, actor_id, liked))

            now = utcnow()
            row = self.store.insert(
                "matches",
                {
                    "user_id1": actor_id,
                    "user_id2": target_id,
                    "matched": False,
                    "user1_liked": liked,
                    "user2_liked": None,
                    "created_at": now,
                    "updated_at": now,
                },
            )
        logger.info("User %s swiped %s on user %s", actor_id, "right" if liked else "left", target_id)
        return MatchRead(**row)

    def _redecide(self, row: Dict[str, Any], actor_id: int, liked: bool) -> Dict[str, Any]:
        own, other = ("user1_liked", "user2_liked")
        if row["user_id2"] == actor_id:
            own, other = other, own
        if row["matched"] or row[own] == liked:
            return row
        changes: Dict[str, Any] = {own: liked, "updated_at": utcnow()}
        if liked and row[other]:
            changes["matched"] = True
        updated = self.store.update("matches", row["id"], changes)
        logger.info(
            "User %s swiped %s on user %s (match %s)",
            actor_id,
            "right" if liked else "left",
            row["user_id2"] if own == "user1_liked" else row["user_id1"],
            row["id"],
        )
        if updated["matched"]:
            logger.info("Match formed between users %s and %s", row["user_id1"], row["user_id2"])
        return updated

    def get_matches(self, user_id: int) -> List[MatchWithUser]:
        """Matched records involving ``user_id`` joined with the other account.

        Raises ``ConsistencyError`` if a counterpart account is missing.
        """
        rows = self.store.select(
            "matches",
            lambda r: r["matched"] and user_id in (r["user_id1"], r["user_id2"]),
        )
        result = []
        for row in rows:
            other_id = row["user_id2"] if row["user_id1"] == user_id else row["user_id1"]
            account = self.store.get("users", other_id)
            if account is None:
                logger.error("Match %s references missing user %s", row["id"], other_id)
                raise ConsistencyError(f"User with ID {other_id} not found")
            result.append(MatchWithUser(**row, user=UserRead(**account)))
        return result

    def get_incoming_likes(self, user_id: int) -> List[UserRead]:
        """Accounts that liked ``user_id`` and are still waiting for an answer."""
        rows = self.store.select(
            "matches",
            lambda r: r["user_id2"] == user_id and r["user1_liked"] and r["user2_liked"] is None,
        )
        likers = []
        for row in rows:
            account = self.store.get("users", row["user_id1"])
            if account is not None:
                likers.append(UserRead(**account))
        return likers

    def swiped_user_ids(self, user_id: int) -> set:
        """Ids of every account ``user_id`` has already swiped on."""
        ids = set()
        for row in self.store.select("matches", lambda r: has_swiped(r, user_id)):
            ids.add(row["user_id2"] if row["user_id1"] == user_id else row["user_id1"])
        return ids
