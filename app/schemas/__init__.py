"""Pydantic request/response schemas."""

from app.schemas.health import HealthResponse
from app.schemas.users import (
    UserCreate,
    UserDelete,
    UserOut,
    UserRecord,
    UserUpdate,
    parse_identifier,
)

__all__ = [
    "HealthResponse",
    "UserCreate",
    "UserDelete",
    "UserOut",
    "UserRecord",
    "UserUpdate",
    "parse_identifier",
]
