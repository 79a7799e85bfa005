"""Pydantic schemas for the conversion API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    detail: str = Field(..., description="Why the markup could not be converted")


class HealthResponse(BaseModel):
    status: str = Field(..., description="Current API state")
    app_name: str = Field(..., description="Configured application name")
    environment: str = Field(..., description="Deployment environment name")
