"""
Discovery preference storage.

Each account has at most one preference row.  Saving replaces every
field of the existing row (keeping its id); fields missing from the
payload take their defaults again rather than keeping older values.
"""

import logging
from typing import Optional

from ..core.config import settings
from ..core.store import DataStore
from ..schemas.preference import PreferenceCreate, PreferenceRead

logger = logging.getLogger(__name__)


def _default(value: Optional[int], fallback: int) -> int:
    # Only a missing value falls back; 0 is a valid setting.
    return fallback if value is None else value


class PreferenceService:
    def __init__(self, store: DataStore) -> None:
        self.store = store

    def get(self, user_id: int) -> Optional[PreferenceRead]:
        row = self.store.find("preferences", lambda r: r["user_id"] == user_id)
        return PreferenceRead(**row) if row else None

    def defaults(self, user_id: int) -> PreferenceRead:
        """Values reported to an account that never saved preferences."""
        return PreferenceRead(
            user_id=user_id,
            min_age=settings.default_min_age,
            max_age=settings.default_max_age,
            distance=settings.default_distance,
            gender=None,
            interests=[],
        )

    def upsert(self, prefs: PreferenceCreate) -> PreferenceRead:
        fields = {
            "user_id": prefs.user_id,
            "min_age": _default(prefs.min_age, settings.default_min_age),
            "max_age": _default(prefs.max_age, settings.default_max_age),
            "distance": _default(prefs.distance, settings.default_distance),
            "gender": prefs.gender or None,
            "interests": list(prefs.interests or []),
        }
        with self.store.lock:
            existing = self.store.find("preferences", lambda r: r["user_id"] == prefs.user_id)
            if existing is not None:
                row = self.store.update("preferences", existing["id"], fields)
            else:
                row = self.store.insert("preferences", fields)
        logger.info("Saved preferences for user %s", prefs.user_id)
        return PreferenceRead(**row)
