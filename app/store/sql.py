"""SQLAlchemy-backed user store."""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.database import check_db_connected
from app.core.errors import StoreError
from app.models import User
from app.schemas.users import UserRecord
from app.store.base import CREATE_FIELDS, check_fields, new_identifier

logger = logging.getLogger(__name__)


class SqlUserStore:
    """
    User store over the "users" table.

    Holds only a session factory; each operation opens and closes its own
    session, so one instance can serve all requests concurrently.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(self, fields: dict[str, Any]) -> str:
        check_fields(fields, CREATE_FIELDS)
        identifier = new_identifier()
        created_at = fields.get("created_at") or datetime.now(timezone.utc)
        with self._session_factory() as session:
            try:
                session.add(
                    User(
                        id=identifier,
                        name=fields.get("name"),
                        email=fields.get("email"),
                        password_hash=fields["password_hash"],
                        created_at=created_at,
                    )
                )
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.exception("Failed to insert user")
                raise StoreError("Could not create user.", cause=e) from e
        return identifier

    def list_all(self) -> list[UserRecord]:
        with self._session_factory() as session:
            try:
                rows = session.query(User).all()
            except SQLAlchemyError as e:
                logger.exception("Failed to list users")
                raise StoreError("Could not list users.", cause=e) from e
            return [UserRecord.model_validate(row) for row in rows]

    def update_by_id(self, identifier: str, fields: dict[str, Any]) -> int:
        check_fields(fields)
        values = dict(fields)
        values["updated_at"] = datetime.now(timezone.utc)
        with self._session_factory() as session:
            try:
                matched = (
                    session.query(User)
                    .filter(User.id == identifier)
                    .update(values, synchronize_session=False)
                )
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.exception("Failed to update user %s", identifier)
                raise StoreError("Could not update user.", cause=e) from e
        return matched

    def delete_by_id(self, identifier: str) -> int:
        with self._session_factory() as session:
            try:
                deleted = (
                    session.query(User)
                    .filter(User.id == identifier)
                    .delete(synchronize_session=False)
                )
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.exception("Failed to delete user %s", identifier)
                raise StoreError("Could not delete user.", cause=e) from e
        return deleted

    def ping(self) -> bool:
        with self._session_factory() as session:
            return check_db_connected(session)
