"""FastAPI application entrypoint. No business logic; only wiring, lifespan and error handlers."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from app.api import router
from app.core.config import Settings, get_settings
from app.core.errors import AppError
from app.core.templates import PageRenderer
from app.store import UserStore, open_store

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = "Internal Server Error"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if app.state.user_store is None:
        app.state.user_store = await run_in_threadpool(open_store, app.state.settings)
    yield


async def app_error_handler(request: Request, exc: AppError) -> PlainTextResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc.cause or exc,
        )
        return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=exc.status_code)
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def allowed_methods(request: Request) -> list[str]:
    """Every method some route registered for this request's path accepts."""
    methods: set[str] = set()
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match != Match.NONE:
            methods.update(getattr(route, "methods", None) or ())
    return sorted(methods)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    headers = dict(getattr(exc, "headers", None) or {})
    if exc.status_code == 405:
        # Starlette only names the methods of the first route matching the path.
        headers["Allow"] = ", ".join(allowed_methods(request))
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=headers or None,
    )


def create_app(
    settings: Settings | None = None,
    store: UserStore | None = None,
    renderer: PageRenderer | None = None,
) -> FastAPI:
    """
    Build the application.

    store and renderer are created once here (or in the lifespan, for the SQL
    store) and shared by every request through app.state.
    """
    settings = settings or get_settings()
    if store is None and settings.USER_STORE_BACKEND == "memory":
        store = open_store(settings)

    app = FastAPI(
        title="Housing Users",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.user_store = store
    app.state.renderer = renderer or PageRenderer(settings.TEMPLATES_DIR)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(router)
    return app


app = create_app()
