"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    xml: str = Field(..., description="Raw vector drawable XML")
