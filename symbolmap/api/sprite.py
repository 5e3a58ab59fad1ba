"""POST /api/sprite and /api/symbol — build sprites from uploaded SVG code."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from symbolmap.config import Settings
from symbolmap.dependencies import get_settings
from symbolmap.errors import ErrorKind, SpriteError
from symbolmap.models.requests import SpriteRequest, SymbolRequest
from symbolmap.models.responses import (
    ContentWarning,
    ErrorResponse,
    SpriteResponse,
    SymbolResponse,
    SymbolSummary,
)
from symbolmap.sprite import Sprite, SpriteOptions
from symbolmap.svg import SvgParser, serialize_element
from symbolmap.svg.names import valid_id

logger = logging.getLogger(__name__)

router = APIRouter()


def _unprocessable(e: SpriteError) -> HTTPException:
    detail = ErrorResponse(kind=e.kind.value, detail=e.detail, message=str(e))
    return HTTPException(status_code=422, detail=detail.model_dump())


@router.post("/sprite", response_model=SpriteResponse)
async def build_sprite(
    req: SpriteRequest,
    settings: Settings = Depends(get_settings),
) -> SpriteResponse:
    # Uploaded files never touch the disk; their names only feed the IDs.
    contents: dict[Path, str] = {}
    for f in req.files:
        contents.setdefault(Path(f.name), f.svg)

    try:
        options = SpriteOptions(prefix=settings.symbolmap_default_prefix)
        if req.prefix is not None:
            options.set_prefix(req.prefix)
        for key, value in req.attributes.items():
            options.set_attribute(key, value)

        paths = [Path(f.name) for f in req.files]
        sprite = Sprite.from_paths(paths, options, contents.__getitem__)
    except SpriteError as e:
        logger.info("Sprite request rejected: %s", e)
        raise _unprocessable(e) from e

    return SpriteResponse(
        svg=str(sprite),
        symbols=[SymbolSummary(id=s.id, width=s.width, height=s.height) for s in sprite.symbols],
        warnings=[
            ContentWarning(name=path.name, flags=flags.names, message=flags.describe())
            for path, flags in sprite.warnings.items()
        ],
    )


@router.post("/symbol", response_model=SymbolResponse)
async def build_symbol(req: SymbolRequest) -> SymbolResponse:
    try:
        if not valid_id(req.id):
            raise SpriteError(ErrorKind.INVALID_FILE_NAME, req.id)
        parser = SvgParser(req.svg)
        symbol = parser.symbol(req.id)
    except SpriteError as e:
        logger.info("Symbol request rejected: %s", e)
        raise _unprocessable(e) from e

    return SymbolResponse(
        svg=serialize_element(symbol),
        width=parser.viewport.width,
        height=parser.viewport.height,
        warnings=parser.warnings.names,
    )
