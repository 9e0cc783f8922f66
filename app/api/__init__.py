"""HTTP routes."""

from fastapi import APIRouter

from app.api import health, pages, users

router = APIRouter()
router.include_router(pages.router, tags=["pages"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(health.router, prefix="/health", tags=["health"])
