"""Normalizing SVG parser — tag stream → canonical parts → ``<symbol>``.

Wraps :class:`~symbolmap.svg.lexer.TagStream`, fixing tag/attribute casing,
moving inline styles onto real attributes where possible, and enforcing the
single-root structure a sprite entry needs.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping

from symbolmap.errors import ErrorKind, SpriteError
from symbolmap.svg.content import ContentWarnings
from symbolmap.svg.lexer import Comment, Declaration, Instruction, LexError, TagStream
from symbolmap.svg.parts import ErrorPart, SvgPart, Tag, TagType, Text
from symbolmap.svg.names import (
    is_event_attr,
    normalize_attr_case,
    normalize_tag_case,
    valid_attr,
)
from symbolmap.svg.style import StyleSplitter, split_rule
from symbolmap.svg.tree import Element, is_empty, next_element
from symbolmap.svg.viewport import ViewportSize, parse_viewport

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    BEFORE_ROOT = "before_root"
    IN_BODY = "in_body"
    CLOSED = "closed"


class SvgParser:
    """Pull parser over one SVG document.

    Iterating yields :data:`SvgPart` values: the root ``<svg>`` start tag
    first, then the body, ending with the root's closing tag. Comments,
    declarations and processing instructions are dropped. Any problem is
    reported as a single :class:`ErrorPart`, after which iteration stops.
    """

    def __init__(self, raw: str) -> None:
        # Drop a leading byte-order mark; it is not whitespace.
        self._events = TagStream(raw.lstrip("\ufeff").strip())
        self._phase = Phase.BEFORE_ROOT
        self.warnings = ContentWarnings.NONE
        self.viewport: ViewportSize | None = None

    @property
    def phase(self) -> Phase:
        return self._phase

    def __iter__(self) -> SvgParser:
        return self

    def __next__(self) -> SvgPart:
        if self._phase is Phase.CLOSED:
            raise StopIteration
        if self._phase is Phase.BEFORE_ROOT:
            return self._next_root()

        for event in self._events:
            if isinstance(event, LexError):
                logger.debug("Lexer error at %d: %s", event.offset, event.message)
                return self._fail(ErrorKind.PARSE)
            if isinstance(event, Text):
                return event
            if isinstance(event, Tag):
                return self._next_tag(event)

        # Ran out of markup before </svg>.
        return self._fail(ErrorKind.PARSE_END)

    def symbol(self, symbol_id: str) -> Element:
        """Parse the whole document as a ``<symbol>`` with the given ``id``.

        Only the viewport is carried over from the root ``<svg>``; its
        children become the symbol's children.

        Raises SpriteError if the document is malformed, has no usable
        viewport, has no content, or contains scripts.
        """
        if self._phase is not Phase.BEFORE_ROOT:
            raise SpriteError(ErrorKind.PARSE)

        part = next(self, None)
        if isinstance(part, ErrorPart):
            raise SpriteError(part.kind)
        if not isinstance(part, Tag) or part.name != "svg" or part.type is not TagType.START:
            raise SpriteError(ErrorKind.PARSE_START)

        self.viewport = parse_viewport(part.attrs)
        out = Element("symbol", {"id": symbol_id, "viewBox": self.viewport.viewbox})

        while self._phase is not Phase.CLOSED:
            child = next_element(self, self._check_element)
            if child is not None:
                if not is_empty(child):
                    out.children.append(child)
            elif self._phase is not Phase.CLOSED:
                # Loose text or a stray closing tag at the top level.
                raise SpriteError(ErrorKind.PARSE)

        if not out.children:
            raise SpriteError(ErrorKind.PARSE, "no content")
        if self.warnings & ContentWarnings.SCRIPTS:
            raise SpriteError(ErrorKind.PARSE_SCRIPT)

        logger.debug(
            "Parsed symbol %s: %d children, viewBox %s",
            symbol_id,
            len(out.children),
            self.viewport.viewbox,
        )
        return out

    def _next_root(self) -> SvgPart:
        for event in self._events:
            if isinstance(event, (Comment, Declaration, Instruction)):
                continue
            if isinstance(event, LexError):
                return self._fail(ErrorKind.PARSE)
            if (
                isinstance(event, Tag)
                and event.type is TagType.START
                and event.name.lower() == "svg"
            ):
                try:
                    attrs = normalize_attributes(event.attrs)
                except SpriteError as e:
                    return self._fail(e.kind)
                self._phase = Phase.IN_BODY
                return Tag("svg", TagType.START, attrs)
            break

        return self._fail(ErrorKind.PARSE_START)

    def _next_tag(self, event: Tag) -> SvgPart:
        # Tag names follow the same formatting rules as attribute names.
        found, name = normalize_tag_case(event.name)
        if not found and not valid_attr(name):
            return self._fail(ErrorKind.PARSE)

        try:
            attrs = normalize_attributes(event.attrs)
        except SpriteError as e:
            return self._fail(e.kind)

        if name == "style":
            attrs.pop("type", None)
        elif name == "svg":
            if event.type is not TagType.END:
                return self._fail(ErrorKind.PARSE_SVG_SVG)

            self._phase = Phase.CLOSED
            # The root has to be the last thing in the document.
            if any(isinstance(e, (Text, Tag, LexError)) for e in self._events):
                return ErrorPart(ErrorKind.PARSE_END)

        return Tag(name, event.type, attrs)

    def _fail(self, kind: ErrorKind) -> ErrorPart:
        self._phase = Phase.CLOSED
        return ErrorPart(kind)

    def _check_element(self, el: Element) -> None:
        """Record scripts, styles, classes and IDs on an element that will be kept."""
        if is_empty(el):
            return

        if el.name == "script":
            self.warnings |= ContentWarnings.SCRIPT_TAG
        elif el.name == "style":
            self.warnings |= ContentWarnings.STYLE_TAG

        for key in el.attrs:
            if key == "id":
                self.warnings |= ContentWarnings.ID_ATTR
            elif key == "class":
                self.warnings |= ContentWarnings.CLASS_ATTR
            elif key == "style":
                self.warnings |= ContentWarnings.STYLE_ATTR
            elif is_event_attr(key):
                self.warnings |= ContentWarnings.ON_ATTR


def normalize_attributes(attrs: Mapping[str, str]) -> dict[str, str]:
    """Fix attribute key casing and promote inline styles to attributes.

    A style rule is promoted when its property is a known attribute name
    (other than ``display``). Whatever can't be promoted stays in ``style``.

    Raises SpriteError for keys that are neither known nor valid names.
    """
    out: dict[str, str] = {}
    for key, value in attrs.items():
        found, canonical = normalize_attr_case(key)
        if not found and not valid_attr(canonical):
            raise SpriteError(ErrorKind.PARSE, f"invalid attribute {key!r}")
        out[canonical] = value

    style = out.pop("style", None)
    if style is not None:
        kept: list[str] = []
        for chunk in StyleSplitter(style):
            rule = split_rule(chunk)
            if rule is not None:
                found, prop = normalize_attr_case(rule[0])
                if found and prop != "display":
                    out[prop] = rule[1]
                    continue
            kept.append(chunk)
        if kept:
            out["style"] = ";".join(kept)

    return out
