"""ORM model for registered users."""

from sqlalchemy import Column, DateTime, String, func

from app.models.base import Base


class User(Base):
    """
    Registered user. One row per registration.

    id is a 32-char hex UUID assigned by the store on create and never changed.
    password_hash holds the bcrypt hash; the plain password is never stored.
    """

    __tablename__ = "users"

    id = Column(String(32), primary_key=True)
    name = Column(String(255), nullable=True)
    email = Column(String(320), nullable=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(DateTime(timezone=True), nullable=True)
