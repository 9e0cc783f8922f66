"""Read form or JSON request bodies into plain dicts."""

import json

from fastapi import Request
from pydantic import ValidationError

from app.core.errors import BadRequestError

FORM_CONTENT_TYPES = frozenset(
    {"application/x-www-form-urlencoded", "multipart/form-data"}
)


def validation_message(error: ValidationError) -> str:
    """One line per invalid field, e.g. 'id: Value error, invalid user id'."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "body"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


async def read_payload(request: Request) -> dict:
    """
    Return the request body as a dict.

    Accepts application/json (must be an object) and form encodings.
    Raises BadRequestError for anything else or for unparsable bodies.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == "application/json":
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise BadRequestError(f"Invalid JSON: {e!s}") from e
        if not isinstance(body, dict):
            raise BadRequestError("JSON body must be an object.")
        return body
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}
    raise BadRequestError(
        "Content-Type must be application/json, application/x-www-form-urlencoded or multipart/form-data."
    )
