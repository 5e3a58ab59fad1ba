"""Viewport resolution from ``viewBox`` or ``width``/``height``."""

from __future__ import annotations

import math
import re
import string
from collections.abc import Mapping
from dataclasses import dataclass

from symbolmap.errors import ErrorKind, SpriteError

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")
_NUMBER_RE = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan)",
    re.IGNORECASE,
)
# Trailing unit suffixes like "px", "em" or "%".
_UNIT_CHARS = string.ascii_letters + "%" + string.whitespace


@dataclass(frozen=True)
class ViewportSize:
    width: float
    height: float

    @property
    def viewbox(self) -> str:
        return f"0 0 {format_number(self.width)} {format_number(self.height)}"


def format_number(value: float) -> str:
    """Print integral floats without the trailing ``.0``."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def parse_viewport(attrs: Mapping[str, str]) -> ViewportSize:
    """Work out the viewport size for an ``<svg>`` element's attributes.

    An existing ``viewBox`` always wins and must be origin-anchored; otherwise
    both ``width`` and ``height`` are required.
    """
    vb = attrs.get("viewBox")
    if vb is not None:
        return _from_viewbox(vb)

    width = attrs.get("width")
    height = attrs.get("height")
    if width is None or height is None:
        raise SpriteError(ErrorKind.PARSE_VIEWPORT_ATTR)

    return _checked(_parse_length(width), _parse_length(height))


def _from_viewbox(raw: str) -> ViewportSize:
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(raw.strip()) if p]
    if len(parts) != 4 or not all(_NUMBER_RE.fullmatch(p) for p in parts):
        raise SpriteError(ErrorKind.PARSE_VIEWBOX, raw)

    x, y, w, h = (float(p) for p in parts)
    if x != 0.0 or y != 0.0:
        raise SpriteError(ErrorKind.PARSE_VIEWBOX_OFFSET, raw)
    return _checked(w, h)


def _parse_length(raw: str) -> float:
    value = raw.strip().rstrip(_UNIT_CHARS)
    if not _NUMBER_RE.fullmatch(value):
        raise SpriteError(ErrorKind.PARSE_VIEWPORT_SIZE, raw)
    return float(value)


def _checked(width: float, height: float) -> ViewportSize:
    for v in (width, height):
        if not math.isfinite(v) or v <= 0.0:
            raise SpriteError(ErrorKind.PARSE_VIEWPORT_SIZE)
    return ViewportSize(width, height)
