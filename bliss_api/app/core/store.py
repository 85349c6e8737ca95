"""
In‑memory data store.

``DataStore`` keeps one table per entity (users, matches, messages,
preferences, subscriptions).  A table is a ``dict`` mapping the integer
primary key to a row ``dict``; because dicts preserve insertion order,
iterating a table yields rows in creation order, which is the order the
discovery and listing operations return.

Each table has its own monotonic id sequence starting at 1.  Ids are not
persisted: a restarted process starts from 1 again.

Rows never leave the store by reference.  ``get``/``rows``/``select``
return deep copies and ``insert``/``update`` copy their input, so a
caller mutating a returned row cannot corrupt stored state.

A single re‑entrant lock guards every mutation.  Services that perform
a read‑then‑write sequence (recording a swipe, creating a subscription)
hold ``store.lock`` for the whole sequence; the lock is re‑entrant so
the individual store calls inside it can take it again.
"""

import copy
import itertools
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, List, Optional

from fastapi import Request

Row = Dict[str, Any]

TABLES = ("users", "matches", "messages", "preferences", "subscriptions")


def utcnow() -> datetime:
    """Timezone‑aware current time used for every stored timestamp."""
    return datetime.now(timezone.utc)


class DataStore:
    """Process‑local relational‑style storage for all entities."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._tables: Dict[str, Dict[int, Row]] = {name: {} for name in TABLES}
        self._sequences: Dict[str, Iterator[int]] = {name: itertools.count(1) for name in TABLES}
        self._revoked_tokens: set = set()

    def _table(self, name: str) -> Dict[int, Row]:
        try:
            return self._tables[name]
        except KeyError:
            raise ValueError(f"Unknown table: {name}") from None

    def insert(self, table: str, row: Row) -> Row:
        """Store a copy of ``row`` under the next id and return it."""
        with self.lock:
            rows = self._table(table)
            new_id = next(self._sequences[table])
            stored = copy.deepcopy(row)
            stored["id"] = new_id
            rows[new_id] = stored
            return copy.deepcopy(stored)

    def get(self, table: str, row_id: int) -> Optional[Row]:
        row = self._table(table).get(row_id)
        return copy.deepcopy(row) if row is not None else None

    def update(self, table: str, row_id: int, changes: Row) -> Optional[Row]:
        """Merge ``changes`` into an existing row; ``None`` if the row is absent.

        The primary key cannot be changed.
        """
        with self.lock:
            rows = self._table(table)
            row = rows.get(row_id)
            if row is None:
                return None
            updates = {k: v for k, v in copy.deepcopy(changes).items() if k != "id"}
            row.update(updates)
            return copy.deepcopy(row)

    def rows(self, table: str) -> List[Row]:
        """All rows of a table in insertion order."""
        with self.lock:
            return [copy.deepcopy(row) for row in self._table(table).values()]

    def select(self, table: str, predicate: Callable[[Row], bool]) -> List[Row]:
        with self.lock:
            return [copy.deepcopy(row) for row in self._table(table).values() if predicate(row)]

    def find(self, table: str, predicate: Callable[[Row], bool]) -> Optional[Row]:
        """First row (in insertion order) matching ``predicate``."""
        with self.lock:
            for row in self._table(table).values():
                if predicate(row):
                    return copy.deepcopy(row)
        return None

    def count(self, table: str) -> int:
        return len(self._table(table))

    # Logout support: token ids (``jti`` claims) that must be rejected.

    def revoke_token(self, jti: str) -> None:
        with self.lock:
            self._revoked_tokens.add(jti)

    def is_token_revoked(self, jti: Optional[str]) -> bool:
        return jti is not None and jti in self._revoked_tokens


def get_store(request: Request) -> DataStore:
    """FastAPI dependency returning the store owned by the application."""
    return request.app.state.store
