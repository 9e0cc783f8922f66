"""HTML pages: home and the registration form."""

from typing import Annotated

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from app.api.deps import RendererDep, SettingsDep, StoreDep
from app.api.payload import validation_message
from app.core.errors import BadRequestError
from app.core.templates import INDEX_PAGE, REGISTER_PAGE, SUCCESS_PAGE
from app.schemas.users import UserCreate
from app.services.users import register_user

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(renderer: RendererDep) -> HTMLResponse:
    """Home page."""
    return HTMLResponse(renderer.render(INDEX_PAGE))


@router.get("/register", response_class=HTMLResponse)
def register_form(renderer: RendererDep) -> HTMLResponse:
    """Registration form."""
    return HTMLResponse(renderer.render(REGISTER_PAGE))


@router.post("/register", response_class=HTMLResponse)
def register(
    store: StoreDep,
    renderer: RendererDep,
    settings: SettingsDep,
    name: Annotated[str | None, Form()] = None,
    email: Annotated[str | None, Form()] = None,
    password: Annotated[str | None, Form()] = None,
) -> HTMLResponse:
    """
    Register a user from the submitted form.

    The password is bcrypt-hashed before it reaches the store. Responds with the
    success page; a missing password is a 400.
    """
    try:
        payload = UserCreate.model_validate(
            {"name": name, "email": email, "password": password}
        )
    except ValidationError as e:
        raise BadRequestError(validation_message(e)) from e
    register_user(store, payload, rounds=settings.BCRYPT_ROUNDS)
    return HTMLResponse(renderer.render(SUCCESS_PAGE, {"name": payload.name}))
