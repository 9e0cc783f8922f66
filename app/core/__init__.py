"""Core app configuration, errors and security."""

from app.core.config import get_settings, settings
from app.core.errors import AppError

__all__ = ["get_settings", "settings", "AppError"]
