"""User endpoints: JSON listing, update and delete (form or JSON bodies)."""

from fastapi import APIRouter, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from app.api.deps import RendererDep, SettingsDep, StoreDep
from app.api.payload import read_payload, validation_message
from app.core.errors import BadRequestError
from app.core.templates import DELETE_PAGE, UPDATE_PAGE
from app.schemas.users import UserDelete, UserOut, UserUpdate
from app.services.users import delete_user, list_users, update_user

router = APIRouter()


@router.get("", response_model=list[UserOut])
def get_users(store: StoreDep) -> list[UserOut]:
    """Return every registered user (without password hashes)."""
    return list_users(store)


@router.get("/update", response_class=HTMLResponse)
def update_form(renderer: RendererDep) -> HTMLResponse:
    """Update form."""
    return HTMLResponse(renderer.render(UPDATE_PAGE))


@router.api_route("/update", methods=["POST", "PUT"])
async def update(
    request: Request,
    store: StoreDep,
    settings: SettingsDep,
) -> Response:
    """
    Partially update one user.

    Body (form or JSON): the user id (`id` or `userID`) plus any of `name`/`newUsername`,
    `email`/`newEmail`, `password`. Fields not sent keep their value.
    400 on a malformed id or empty update, 404 when no user has that id.
    """
    body = await read_payload(request)
    try:
        payload = UserUpdate.model_validate(body)
    except ValidationError as e:
        raise BadRequestError(validation_message(e)) from e
    await run_in_threadpool(update_user, store, payload, settings.BCRYPT_ROUNDS)
    return Response(status_code=200)


@router.get("/delete", response_class=HTMLResponse)
def delete_form(renderer: RendererDep) -> HTMLResponse:
    """Delete form."""
    return HTMLResponse(renderer.render(DELETE_PAGE))


@router.api_route("/delete", methods=["POST", "DELETE"])
async def delete(request: Request, store: StoreDep) -> Response:
    """Delete one user by id (`id` or `userID`). 400 on a malformed id, 404 if absent."""
    body = await read_payload(request)
    try:
        payload = UserDelete.model_validate(body)
    except ValidationError as e:
        raise BadRequestError(validation_message(e)) from e
    await run_in_threadpool(delete_user, store, payload.id)
    return Response(status_code=200)
