"""Error taxonomy shared by the store, renderer, services and HTTP handlers."""


class AppError(Exception):
    """Base for errors that end a request. Carries the HTTP status to respond with."""

    status_code = 500

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class BadRequestError(AppError):
    """Malformed identifier, malformed body, or a missing required field."""

    status_code = 400


class NotFoundError(AppError):
    """Update or delete matched no record."""

    status_code = 404


class StoreError(AppError):
    """The user store could not be reached or the read/write failed."""


class HashError(AppError):
    """Password could not be hashed (too long for bcrypt, or bcrypt failed)."""


class TemplateNotFoundError(AppError):
    """Named page template does not exist in the templates directory."""


class RenderError(AppError):
    """Page template has invalid syntax or failed while rendering."""
