"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class SymbolSummary(BaseModel):
    id: str
    width: float
    height: float


class ContentWarning(BaseModel):
    name: str
    flags: list[str] = Field(default_factory=list)
    message: str = ""


class SpriteResponse(BaseModel):
    svg: str
    symbols: list[SymbolSummary] = Field(default_factory=list)
    warnings: list[ContentWarning] = Field(default_factory=list)


class SymbolResponse(BaseModel):
    svg: str
    width: float
    height: float
    warnings: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    kind: str
    detail: str | None = None
    message: str
