"""User operations: register, list, update and delete over a UserStore."""

import logging
from datetime import datetime, timezone
from typing import Any

from app.core.errors import BadRequestError, NotFoundError
from app.core.security import BCRYPT_ROUNDS, hash_password
from app.schemas.users import UserCreate, UserOut, UserUpdate
from app.store.base import UserStore

logger = logging.getLogger(__name__)


def register_user(
    store: UserStore,
    payload: UserCreate,
    rounds: int = BCRYPT_ROUNDS,
) -> str:
    """Hash the password, stamp created_at and persist the user. Returns the new id."""
    fields: dict[str, Any] = {
        "name": payload.name,
        "email": payload.email,
        "password_hash": hash_password(payload.password, rounds=rounds),
        "created_at": datetime.now(timezone.utc),
    }
    identifier = store.create(fields)
    logger.info("Registered user %s", identifier)
    return identifier


def list_users(store: UserStore) -> list[UserOut]:
    """All users without their password hashes."""
    return [UserOut.model_validate(r.model_dump()) for r in store.list_all()]


def build_update_fields(payload: UserUpdate, rounds: int = BCRYPT_ROUNDS) -> dict[str, Any]:
    """
    Map the provided fields of an update to store fields.

    Raises BadRequestError when nothing would change.
    """
    fields: dict[str, Any] = {}
    if payload.name is not None:
        fields["name"] = payload.name
    if payload.email is not None:
        fields["email"] = payload.email
    if payload.password is not None:
        fields["password_hash"] = hash_password(payload.password, rounds=rounds)
    if not fields:
        raise BadRequestError("No fields to update.")
    return fields


def update_user(
    store: UserStore,
    payload: UserUpdate,
    rounds: int = BCRYPT_ROUNDS,
) -> None:
    """Apply a partial update. Raises NotFoundError if no user has that id."""
    fields = build_update_fields(payload, rounds=rounds)
    matched = store.update_by_id(payload.id, fields)
    if matched == 0:
        raise NotFoundError("User not found.")
    logger.info("Updated user %s fields=%s", payload.id, sorted(fields))


def delete_user(store: UserStore, identifier: str) -> None:
    """Delete one user. Raises NotFoundError if no user has that id."""
    deleted = store.delete_by_id(identifier)
    if deleted == 0:
        raise NotFoundError("User not found.")
    logger.info("Deleted user %s", identifier)
