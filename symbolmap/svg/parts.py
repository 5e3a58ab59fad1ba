"""Normalized parser events.

The normalizing parser reuses the lexer's :class:`Tag` and :class:`Text`
shapes (with canonical names) and adds :class:`ErrorPart` for failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from symbolmap.errors import ErrorKind
from symbolmap.svg.lexer import Tag, TagType, Text


@dataclass(frozen=True)
class ErrorPart:
    kind: ErrorKind


SvgPart = Union[Tag, Text, ErrorPart]

__all__ = ["ErrorPart", "SvgPart", "Tag", "TagType", "Text"]
