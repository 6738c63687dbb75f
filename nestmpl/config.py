"""Render options for nestmpl"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_MAX_DEPTH = 256


class RenderOptions(BaseModel):
    """Options that bound a single render call."""

    model_config = {"frozen": True}

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        description="Deepest sub-template level rendered before giving up",
    )
