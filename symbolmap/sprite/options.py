"""Sprite build options: root attributes, ID prefix and input paths."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from symbolmap.config import settings
from symbolmap.errors import ErrorKind, SpriteError
from symbolmap.svg.names import normalize_attr_case, valid_attr, valid_id

# Boolean attributes that default to their own name when given without a value.
_SELF_VALUED = frozenset({"hidden", "disabled"})


@dataclass
class SpriteOptions:
    attributes: dict[str, str] = field(default_factory=dict)
    prefix: str = field(default_factory=lambda: settings.symbolmap_default_prefix)
    paths: list[Path] = field(default_factory=list)
    extension: str = field(default_factory=lambda: settings.symbolmap_extension)

    def __post_init__(self) -> None:
        # Configured defaults get the same check as a user-supplied prefix.
        self.set_prefix(self.prefix)

    def set_attribute(self, key: str, value: str | None = None) -> None:
        """Add an attribute for the sprite's root ``<svg>``.

        Raises SpriteError for invalid names and for keys set twice.
        """
        found, key = normalize_attr_case(key.strip())
        if not found and not valid_attr(key):
            raise SpriteError(ErrorKind.INVALID_ATTRIBUTE, key)

        if value is None:
            value = key if key in _SELF_VALUED else ""
        else:
            value = _unquote(value.strip())

        if key in self.attributes:
            raise SpriteError(ErrorKind.DUPE_ATTRIBUTE, key)
        self.attributes[key] = value

    def set_prefix(self, prefix: str) -> None:
        if not valid_id(prefix):
            raise SpriteError(ErrorKind.INVALID_PREFIX, prefix)
        self.prefix = prefix.lower()

    def set_path(self, path: str | PathLike[str], list_file: bool = False) -> None:
        """Queue a file or directory for crawling.

        With ``list_file``, ``path`` is instead a text file holding one path
        per line (``-`` reads STDIN).
        """
        if not list_file:
            self.paths.append(Path(path))
            return

        try:
            if str(path) == "-":
                raw = sys.stdin.read()
            else:
                raw = Path(path).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise SpriteError(ErrorKind.READ, path) from e

        for line in raw.splitlines():
            line = line.strip()
            if line:
                self.paths.append(Path(line))


def _unquote(value: str) -> str:
    """Strip one pair of matching outer quotes, unless the closing one is escaped."""
    if len(value) >= 2 and value[0] in "'\"" and value[-1] == value[0]:
        if len(value) == 2 or value[-2] != "\\":
            return value[1:-1]
    return value
