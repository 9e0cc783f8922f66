"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    store: Literal["sql", "memory"] = Field(description="Configured user store backend")
    database: Literal["connected", "disconnected"] = Field(
        description="User store connectivity status",
    )
