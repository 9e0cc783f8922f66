"""User store contract shared by the SQL and in-memory backends."""

import uuid
from typing import Any, Protocol

from app.schemas.users import UserRecord

# Fields a caller may update. id and updated_at are owned by the store.
WRITABLE_FIELDS: frozenset[str] = frozenset({"name", "email", "password_hash"})
# created_at may only be supplied on create.
CREATE_FIELDS: frozenset[str] = WRITABLE_FIELDS | {"created_at"}


def new_identifier() -> str:
    """Return a fresh 32-char hex user id."""
    return uuid.uuid4().hex


def check_fields(
    fields: dict[str, Any], allowed: frozenset[str] = WRITABLE_FIELDS
) -> None:
    """Raise ValueError if fields contains anything outside allowed."""
    unknown = set(fields) - allowed
    if unknown:
        raise ValueError(f"Unknown user fields: {sorted(unknown)}")


class UserStore(Protocol):
    """
    Boundary for all user persistence.

    Implementations must be safe to share between concurrent requests and raise
    StoreError for any connectivity or read/write failure.
    """

    def create(self, fields: dict[str, Any]) -> str:
        """Persist a new user and return its freshly assigned id."""
        ...

    def list_all(self) -> list[UserRecord]:
        """Return every stored user in store order."""
        ...

    def update_by_id(self, identifier: str, fields: dict[str, Any]) -> int:
        """Merge fields into the user with this id; return how many matched (0 or 1)."""
        ...

    def delete_by_id(self, identifier: str) -> int:
        """Remove the user with this id; return how many were deleted (0 or 1)."""
        ...

    def ping(self) -> bool:
        """Return True if the backing store is reachable."""
        ...
