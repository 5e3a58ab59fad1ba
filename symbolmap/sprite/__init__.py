"""Sprite assembly from many standalone SVG files."""

from symbolmap.sprite.assembler import Sprite, SymbolInfo, make_symbol_id, read_svg_file
from symbolmap.sprite.options import SpriteOptions
from symbolmap.sprite.paths import crawl

__all__ = [
    "Sprite",
    "SymbolInfo",
    "SpriteOptions",
    "crawl",
    "make_symbol_id",
    "read_svg_file",
]
