"""In-process user store for local runs without a database, and for tests."""

import threading
from datetime import datetime, timezone
from typing import Any

from app.schemas.users import UserRecord
from app.store.base import CREATE_FIELDS, check_fields, new_identifier


class InMemoryUserStore:
    """Dict-backed user store. Insertion order is the listing order."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[str, UserRecord] = {}

    def create(self, fields: dict[str, Any]) -> str:
        check_fields(fields, CREATE_FIELDS)
        identifier = new_identifier()
        record = UserRecord(
            id=identifier,
            name=fields.get("name"),
            email=fields.get("email"),
            password_hash=fields["password_hash"],
            created_at=fields.get("created_at") or datetime.now(timezone.utc),
        )
        with self._lock:
            self._records[identifier] = record
        return identifier

    def list_all(self) -> list[UserRecord]:
        with self._lock:
            return [r.model_copy() for r in self._records.values()]

    def update_by_id(self, identifier: str, fields: dict[str, Any]) -> int:
        check_fields(fields)
        with self._lock:
            current = self._records.get(identifier)
            if current is None:
                return 0
            changes = dict(fields)
            changes["updated_at"] = datetime.now(timezone.utc)
            self._records[identifier] = current.model_copy(update=changes)
        return 1

    def delete_by_id(self, identifier: str) -> int:
        with self._lock:
            return 1 if self._records.pop(identifier, None) is not None else 0

    def ping(self) -> bool:
        return True
