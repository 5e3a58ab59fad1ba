"""SVG parsing, normalization and serialization."""

from symbolmap.svg.content import ContentWarnings
from symbolmap.svg.parser import SvgParser, normalize_attributes
from symbolmap.svg.serializer import serialize_element
from symbolmap.svg.tree import Element, is_empty
from symbolmap.svg.viewport import ViewportSize, parse_viewport

__all__ = [
    "ContentWarnings",
    "SvgParser",
    "normalize_attributes",
    "serialize_element",
    "Element",
    "is_empty",
    "ViewportSize",
    "parse_viewport",
]
