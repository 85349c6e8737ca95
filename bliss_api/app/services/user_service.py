"""
Business logic for accounts.

``create_user`` and ``update_user`` are raw store operations: they do
not check username uniqueness or validate fields.  ``register`` is the
checked entry point used by the HTTP layer; it rejects a taken
username and hashes the password before delegating to ``create_user``.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.exceptions import ConflictError
from ..core.security import hash_password, verify_password
from ..core.store import DataStore, utcnow
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)

# Fields a profile update may never touch.
PROTECTED_FIELDS = {"id", "username", "password", "is_vip", "created_at"}
# Profile fields that cannot be cleared.
REQUIRED_FIELDS = {"name", "age", "gender", "looking_for", "interests", "photos"}


class UserService:
    """Account storage: lookup by id or username, creation and updates."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    def get_user(self, user_id: int) -> Optional[UserRead]:
        row = self.store.get("users", user_id)
        return UserRead(**row) if row else None

    def get_user_by_username(self, username: str) -> Optional[UserRead]:
        """Exact, case‑sensitive username lookup."""
        row = self._find_by_username(username)
        return UserRead(**row) if row else None

    def list_users(self) -> List[UserRead]:
        return [UserRead(**row) for row in self.store.rows("users")]

    def create_user(self, data: Dict[str, Any]) -> UserRead:
        """Insert an account row.

        ``data`` must hold ``username``, ``password`` (already hashed),
        ``name``, ``age``, ``gender`` and ``looking_for``.  Optional
        fields default to ``None``/empty and the VIP flag to false.
        """
        row = {
            "username": data["username"],
            "password": data["password"],
            "name": data["name"],
            "age": data["age"],
            "bio": data.get("bio") or None,
            "location": data.get("location") or None,
            "gender": data["gender"],
            "looking_for": data["looking_for"],
            "profile_pic_url": data.get("profile_pic_url") or None,
            "is_vip": bool(data.get("is_vip") or False),
            "interests": list(data.get("interests") or []),
            "photos": list(data.get("photos") or []),
            "created_at": utcnow(),
        }
        stored = self.store.insert("users", row)
        logger.info("Created user %s (id=%s)", stored["username"], stored["id"])
        return UserRead(**stored)

    def update_user(self, user_id: int, changes: Dict[str, Any]) -> Optional[UserRead]:
        """Merge ``changes`` into the account; ``None`` if it does not exist."""
        row = self.store.update("users", user_id, changes)
        if row is None:
            return None
        logger.debug("Updated user %s fields %s", user_id, sorted(changes))
        return UserRead(**row)

    def update_profile(self, user_id: int, changes: Dict[str, Any]) -> Optional[UserRead]:
        """Profile edit made by the account owner.

        Identity, credential and VIP fields are dropped; the VIP flag
        only changes through subscriptions.
        """
        allowed = {
            k: v
            for k, v in changes.items()
            if k not in PROTECTED_FIELDS and not (v is None and k in REQUIRED_FIELDS)
        }
        return self.update_user(user_id, allowed)

    def set_vip(self, user_id: int, is_vip: bool) -> Optional[UserRead]:
        user = self.update_user(user_id, {"is_vip": is_vip})
        if user is not None:
            logger.info("User %s VIP flag set to %s", user_id, is_vip)
        return user

    def register(self, data: UserCreate) -> UserRead:
        """Create an account from a registration payload.

        Raises ``ConflictError`` if the username is already taken.
        """
        with self.store.lock:
            if self._find_by_username(data.username) is not None:
                logger.warning("Registration rejected: username %s already in use", data.username)
                raise ConflictError("Username is already in use")
            fields = data.model_dump()
            fields["password"] = hash_password(data.password)
            return self.create_user(fields)

    def authenticate(self, username: str, password: str) -> Optional[UserRead]:
        """Return the account if the credentials match, otherwise ``None``."""
        row = self._find_by_username(username)
        if row is None or not verify_password(password, row["password"]):
            logger.warning("Failed login for username %s", username)
            return None
        return UserRead(**row)

    def _find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        return self.store.find("users", lambda row: row["username"] == username)
