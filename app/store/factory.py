"""Build the user store for the configured backend."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings
from app.core.errors import StoreError
from app.store.base import UserStore
from app.store.memory import InMemoryUserStore

logger = logging.getLogger(__name__)


def open_store(settings: Settings) -> UserStore:
    """
    Return the store for USER_STORE_BACKEND.

    For SQL, builds an engine from settings.DATABASE_URL, creates the users
    table if missing and checks the database answers; raises StoreError if it
    does not.
    """
    if settings.USER_STORE_BACKEND == "memory":
        logger.warning("Using in-memory user store; users are lost on restart")
        return InMemoryUserStore()

    from app.core.database import build_engine, build_session_factory, init_db
    from app.store.sql import SqlUserStore

    engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)
    try:
        init_db(engine)
    except SQLAlchemyError as e:
        logger.exception("Could not initialize the users table")
        raise StoreError("Could not initialize the users table.", cause=e) from e
    store = SqlUserStore(build_session_factory(engine))
    if not store.ping():
        raise StoreError("Database is not reachable.")
    logger.info("Connected to user database")
    return store
