"""SQLAlchemy declarative Base for the users table."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; init_db creates every table registered on its metadata."""
