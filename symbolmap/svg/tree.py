"""In-memory element tree built from normalized parser events."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from symbolmap.errors import ErrorKind, SpriteError
from symbolmap.svg.parts import ErrorPart, SvgPart, Tag, TagType, Text

# Childless elements with these tags carry nothing worth keeping.
_EMPTY_IF_CHILDLESS = frozenset({"defs", "desc", "style", "title"})

# These can be dropped too, but only when they have no attributes either.
_EMPTY_IF_BARE = frozenset(
    {"a", "g", "glyph", "marker", "mask", "missing-glyph", "pattern", "switch"}
)


@dataclass
class Element:
    name: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Element | str] = field(default_factory=list)

    def iter(self) -> Iterator[Element]:
        """Depth-first, document-order walk over this element and its descendants."""
        stack: list[Element] = [self]
        while stack:
            el = stack.pop()
            yield el
            stack.extend(c for c in reversed(el.children) if isinstance(c, Element))


def is_empty(el: Element) -> bool:
    """Return ``True`` if ``el`` can be dropped from its parent."""
    if el.children:
        return False
    return el.name in _EMPTY_IF_CHILDLESS or (not el.attrs and el.name in _EMPTY_IF_BARE)


def next_element(
    parts: Iterator[SvgPart],
    check: Callable[[Element], None],
) -> Element | None:
    """Pull the next complete element off ``parts``.

    The next part must be an opening or self-closing tag; anything else
    (text, a closing tag, end of stream) returns ``None``. Opening tags are
    collected along with all their descendants. ``check`` is called for
    every element as it is completed.

    Raises SpriteError for error parts and for streams that end before an
    opened element is closed.
    """
    part = next(parts, None)
    if isinstance(part, ErrorPart):
        raise SpriteError(part.kind)
    if not isinstance(part, Tag) or part.type is TagType.END:
        return None

    root = Element(part.name, dict(part.attrs))
    if part.type is TagType.EMPTY:
        check(root)
        return root

    stack = [root]
    while stack:
        part = next(parts, None)
        if part is None:
            raise SpriteError(ErrorKind.PARSE, f"unclosed <{stack[-1].name}>")
        if isinstance(part, ErrorPart):
            raise SpriteError(part.kind)

        current = stack[-1]
        if isinstance(part, Text):
            text = part.content.strip()
            if text:
                current.children.append(text)
        elif part.type is TagType.START:
            stack.append(Element(part.name, dict(part.attrs)))
        elif part.type is TagType.EMPTY:
            leaf = Element(part.name, dict(part.attrs))
            check(leaf)
            if not is_empty(leaf):
                current.children.append(leaf)
        elif part.name.lower() == current.name.lower():
            stack.pop()
            check(current)
            if stack and not is_empty(current):
                stack[-1].children.append(current)
        # Stray closing tags for elements that were never opened are ignored.

    return root
