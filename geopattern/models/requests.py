"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    input: str | None = Field(
        default=None,
        description="String to hash; omitted means the current time (a random pattern)",
    )
    base_color: str | None = Field(default=None, description="Hex color the background is shifted from")
    color: str | None = Field(default=None, description="Exact background hex color")
    generator: str | None = Field(default=None, description="Force one of the generator names")
    hash: str | None = Field(default=None, description="Explicit 40-char hex digest")
