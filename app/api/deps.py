"""Request dependencies: the shared store, renderer and settings live on app.state."""

from typing import Annotated

from fastapi import Depends, Request

from app.core.config import Settings
from app.core.errors import StoreError
from app.core.templates import PageRenderer
from app.store.base import UserStore


def get_user_store(request: Request) -> UserStore:
    """The single long-lived user store built at startup."""
    store = getattr(request.app.state, "user_store", None)
    if store is None:
        raise StoreError("User store is not initialized.")
    return store


def get_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


StoreDep = Annotated[UserStore, Depends(get_user_store)]
RendererDep = Annotated[PageRenderer, Depends(get_renderer)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
