"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Body of GET /api/health."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    version: str = Field(description="Running package version")
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"] = Field(
        description="Whether SELECT 1 succeeded against the configured database",
    )
