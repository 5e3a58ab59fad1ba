"""Error taxonomy for sprite building.

Every failure is a :class:`SpriteError` carrying one :class:`ErrorKind` and an
optional detail (usually the offending path or identifier).
"""

from __future__ import annotations

import enum
from os import PathLike


class ErrorCategory(str, enum.Enum):
    STRUCTURAL = "structural"
    SEMANTIC = "semantic"
    COLLISION = "collision"
    IO = "io"


class ErrorKind(str, enum.Enum):
    # Structural
    PARSE = "parse"
    PARSE_START = "parse_start"
    PARSE_END = "parse_end"
    PARSE_SVG_SVG = "parse_svg_svg"

    # Semantic
    PARSE_VIEWBOX = "parse_viewbox"
    PARSE_VIEWBOX_OFFSET = "parse_viewbox_offset"
    PARSE_VIEWPORT_ATTR = "parse_viewport_attr"
    PARSE_VIEWPORT_SIZE = "parse_viewport_size"
    PARSE_SCRIPT = "parse_script"
    INVALID_ATTRIBUTE = "invalid_attribute"
    INVALID_FILE_NAME = "invalid_file_name"
    INVALID_PREFIX = "invalid_prefix"
    NO_SVGS = "no_svgs"

    # Collisions
    DUPE_ATTRIBUTE = "dupe_attribute"
    DUPE_FILE_NAME = "dupe_file_name"
    DUPE_ID = "dupe_id"

    # I/O
    READ = "read"
    WRITE = "write"

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self]

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_CATEGORIES: dict[ErrorKind, ErrorCategory] = {
    ErrorKind.PARSE: ErrorCategory.STRUCTURAL,
    ErrorKind.PARSE_START: ErrorCategory.STRUCTURAL,
    ErrorKind.PARSE_END: ErrorCategory.STRUCTURAL,
    ErrorKind.PARSE_SVG_SVG: ErrorCategory.STRUCTURAL,
    ErrorKind.PARSE_VIEWBOX: ErrorCategory.SEMANTIC,
    ErrorKind.PARSE_VIEWBOX_OFFSET: ErrorCategory.SEMANTIC,
    ErrorKind.PARSE_VIEWPORT_ATTR: ErrorCategory.SEMANTIC,
    ErrorKind.PARSE_VIEWPORT_SIZE: ErrorCategory.SEMANTIC,
    ErrorKind.PARSE_SCRIPT: ErrorCategory.SEMANTIC,
    ErrorKind.INVALID_ATTRIBUTE: ErrorCategory.SEMANTIC,
    ErrorKind.INVALID_FILE_NAME: ErrorCategory.SEMANTIC,
    ErrorKind.INVALID_PREFIX: ErrorCategory.SEMANTIC,
    ErrorKind.NO_SVGS: ErrorCategory.SEMANTIC,
    ErrorKind.DUPE_ATTRIBUTE: ErrorCategory.COLLISION,
    ErrorKind.DUPE_FILE_NAME: ErrorCategory.COLLISION,
    ErrorKind.DUPE_ID: ErrorCategory.COLLISION,
    ErrorKind.READ: ErrorCategory.IO,
    ErrorKind.WRITE: ErrorCategory.IO,
}

_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.PARSE: "Unable to parse SVG",
    ErrorKind.PARSE_START: "The SVG must begin with an opening <svg> tag",
    ErrorKind.PARSE_END: "The SVG must end with a closing </svg> tag",
    ErrorKind.PARSE_SVG_SVG: "Nested <svg> elements are not supported",
    ErrorKind.PARSE_VIEWBOX: "Invalid viewBox",
    ErrorKind.PARSE_VIEWBOX_OFFSET: "viewBox offsets are not supported",
    ErrorKind.PARSE_VIEWPORT_ATTR: "Missing viewBox (or width and height)",
    ErrorKind.PARSE_VIEWPORT_SIZE: "Invalid viewport width and/or height",
    ErrorKind.PARSE_SCRIPT: "Scripts are not allowed in sprites",
    ErrorKind.INVALID_ATTRIBUTE: "Invalid attribute name",
    ErrorKind.INVALID_FILE_NAME: "File name cannot be converted to a valid ID",
    ErrorKind.INVALID_PREFIX: "Invalid ID prefix",
    ErrorKind.NO_SVGS: "No SVGs were found",
    ErrorKind.DUPE_ATTRIBUTE: "Duplicate attribute",
    ErrorKind.DUPE_FILE_NAME: "Normalized file names must be unique",
    ErrorKind.DUPE_ID: "Duplicate ID",
    ErrorKind.READ: "Unable to read file",
    ErrorKind.WRITE: "Unable to save the sprite",
}


class SpriteError(Exception):
    """A fatal sprite-building error."""

    def __init__(self, kind: ErrorKind, detail: str | PathLike[str] | None = None) -> None:
        self.kind = kind
        self.detail = None if detail is None else str(detail)
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.detail:
            return f"{self.kind.message}: {self.detail}"
        return f"{self.kind.message}."

    def with_detail(self, detail: str | PathLike[str]) -> SpriteError:
        """Return a copy of this error pointing at ``detail``, keeping the kind."""
        return SpriteError(self.kind, detail)
