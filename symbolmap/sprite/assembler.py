"""Sprite assembly — many standalone SVGs → one hidden ``<svg>`` of symbols."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from symbolmap.errors import ErrorKind, SpriteError
from symbolmap.sprite.options import SpriteOptions
from symbolmap.sprite.paths import crawl, has_extension
from symbolmap.svg.content import ContentWarnings
from symbolmap.svg.parser import SvgParser
from symbolmap.svg.serializer import serialize_element
from symbolmap.svg.names import valid_id
from symbolmap.svg.tree import Element
from symbolmap.svg.viewport import format_number

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

_KEEP = frozenset("abcdefghijklmnopqrstuvwxyz0123456789-")


@dataclass(frozen=True)
class SymbolInfo:
    id: str
    width: float
    height: float

    def __str__(self) -> str:
        return (
            f"↳ {self.id} {{ aspect-ratio: "
            f"{format_number(self.width)} / {format_number(self.height)}; }}"
        )


@dataclass
class Sprite:
    element: Element
    symbols: list[SymbolInfo] = field(default_factory=list)
    warnings: dict[Path, ContentWarnings] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return serialize_element(self.element)

    @classmethod
    def from_options(
        cls,
        options: SpriteOptions,
        reader: Callable[[Path], str] | None = None,
    ) -> Sprite:
        """Crawl, parse and combine every SVG the options point at.

        ``reader`` loads a path's contents; it defaults to reading from disk.

        Raises SpriteError on the first problem; nothing partial is returned.
        """
        paths = crawl(options.paths, options.extension)
        return cls.from_paths(paths, options, reader or read_svg_file)

    @classmethod
    def from_paths(
        cls,
        paths: list[Path],
        options: SpriteOptions,
        reader: Callable[[Path], str],
    ) -> Sprite:
        # Work out the IDs up front so naming problems surface before any
        # content is parsed.
        ids: dict[str, Path] = {}
        for path in paths:
            if not has_extension(path, options.extension):
                logger.debug("Skipping %s: not a .%s file", path, options.extension)
                continue
            symbol_id = make_symbol_id(options.prefix, path)
            if symbol_id is None:
                raise SpriteError(ErrorKind.INVALID_FILE_NAME, path)
            if symbol_id in ids:
                raise SpriteError(ErrorKind.DUPE_FILE_NAME, path)
            ids[symbol_id] = path

        if not ids:
            raise SpriteError(ErrorKind.NO_SVGS)

        root = Element(
            "svg",
            {"xmlns": SVG_NS, "aria-hidden": "true", "style": "display:none"},
        )
        root.attrs.update(options.attributes)
        sprite = cls(root)

        for symbol_id in sorted(ids):
            path = ids[symbol_id]
            raw = reader(path)
            parser = SvgParser(raw)
            try:
                symbol = parser.symbol(symbol_id)
            except SpriteError as e:
                raise e.with_detail(path) from e

            root.children.append(symbol)
            sprite.symbols.append(
                SymbolInfo(symbol_id, parser.viewport.width, parser.viewport.height)
            )
            if parser.warnings:
                sprite.warnings[path] = parser.warnings
                logger.warning(
                    "%s contains %s", path.name, parser.warnings.describe()
                )

        sprite.check_ids()
        logger.info("Built sprite with %d symbols", len(sprite.symbols))
        return sprite

    def check_ids(self) -> None:
        """Make sure no ``id`` appears twice anywhere in the sprite."""
        seen: set[str] = set()
        for el in self.element.iter():
            value = el.attrs.get("id")
            if value is None:
                continue
            if value in seen:
                raise SpriteError(ErrorKind.DUPE_ID, value)
            seen.add(value)


def read_svg_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SpriteError(ErrorKind.READ, path) from e


def make_symbol_id(prefix: str, path: str | Path) -> str | None:
    """Build a symbol ID from a prefix and a file name, e.g. ``i-arrow-left``.

    Returns ``None`` when the stem has nothing usable in it.
    """
    stem = Path(path).stem.strip()
    out = [prefix, "-"]
    sep = True
    for c in stem:
        lower = c.lower() if c.isascii() else c
        if lower in _KEEP:
            out.append(lower)
            sep = False
        elif not sep and (c.isspace() or c == "_"):
            out.append("-")
            sep = True

    symbol_id = "".join(out).rstrip("-")
    if len(symbol_id) <= len(prefix) + 1 or not valid_id(symbol_id):
        return None
    return symbol_id
