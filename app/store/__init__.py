"""User store backends."""

from app.store.base import UserStore
from app.store.factory import open_store
from app.store.memory import InMemoryUserStore
from app.store.sql import SqlUserStore

__all__ = ["InMemoryUserStore", "SqlUserStore", "UserStore", "open_store"]
