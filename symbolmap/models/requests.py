"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SvgFile(BaseModel):
    name: str = Field(..., description="File name; the stem becomes the symbol ID")
    svg: str = Field(..., description="Raw SVG code")


class SpriteRequest(BaseModel):
    files: list[SvgFile] = Field(..., description="Images to combine")
    prefix: str | None = Field(default=None, description="ID prefix (defaults to settings)")
    attributes: dict[str, str | None] = Field(
        default_factory=dict,
        description="Extra attributes for the sprite's root <svg>",
    )


class SymbolRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    id: str = Field(default="symbol", description="ID for the resulting <symbol>")
