"""Pydantic schemas for user registration, listing, update and delete."""

import uuid
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 320


def parse_identifier(value: object) -> str:
    """
    Normalize a user identifier to 32 lowercase hex chars.

    Accepts plain hex, hyphenated or braced UUID text. Raises ValueError otherwise.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("user id must be a non-empty string")
    try:
        return uuid.UUID(value.strip()).hex
    except ValueError as e:
        raise ValueError(f"invalid user id {value!r}") from e


def _blank_to_none(value: object) -> object:
    """Treat empty form fields as absent."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class UserCreate(BaseModel):
    """Registration form submission."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    email: str | None = Field(default=None, max_length=EMAIL_MAX_LENGTH)
    password: str = Field(..., min_length=1, description="Plain password; hashed before storage")

    @field_validator("name", "email", mode="before")
    @classmethod
    def blank_fields_are_absent(cls, v: object) -> object:
        return _blank_to_none(v)


class UserUpdate(BaseModel):
    """
    Partial update of one user.

    The HTML form posts userID / newUsername / newEmail; JSON clients may use
    id / name / email. Fields left out (or empty) keep their stored value.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., validation_alias=AliasChoices("id", "userID"))
    name: str | None = Field(
        default=None,
        max_length=NAME_MAX_LENGTH,
        validation_alias=AliasChoices("name", "newUsername"),
    )
    email: str | None = Field(
        default=None,
        max_length=EMAIL_MAX_LENGTH,
        validation_alias=AliasChoices("email", "newEmail"),
    )
    password: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: object) -> str:
        return parse_identifier(v)

    @field_validator("name", "email", mode="before")
    @classmethod
    def blank_fields_are_absent(cls, v: object) -> object:
        return _blank_to_none(v)

    @field_validator("password", mode="before")
    @classmethod
    def blank_password_is_absent(cls, v: object) -> object:
        # Passwords are not stripped; only an empty string means "unchanged".
        if v == "":
            return None
        return v


class UserDelete(BaseModel):
    """Delete request: just the identifier."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., validation_alias=AliasChoices("id", "userID"))

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: object) -> str:
        return parse_identifier(v)


class UserRecord(BaseModel):
    """A stored user as returned by the store, hash included."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    email: str | None = None
    password_hash: str
    created_at: datetime
    updated_at: datetime | None = None


class UserOut(BaseModel):
    """User entry for GET /users (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    email: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
