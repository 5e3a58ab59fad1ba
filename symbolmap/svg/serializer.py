"""Write compact SVG markup from an element tree."""

from __future__ import annotations

import re
from typing import NamedTuple

from symbolmap.svg.tree import Element

# An ampersand that does not already start a character or entity reference.
_BARE_AMP_RE = re.compile(r"&(?!#[0-9]+;|#x[0-9A-Fa-f]+;|[A-Za-z_][A-Za-z0-9_.\-]*;)")


class _Close(NamedTuple):
    name: str


def serialize_element(root: Element) -> str:
    """Render ``root`` and its descendants as markup without extra whitespace.

    Attribute values and text are written as they were read (entities stay
    encoded). In values, bare ``&``, ``<`` and ``"`` are escaped so
    caller-supplied text still yields well-formed markup.
    """
    out: list[str] = []
    stack: list[Element | str | _Close] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, _Close):
            out.append(f"</{node.name}>")
        elif isinstance(node, str):
            out.append(node)
        else:
            attrs = "".join(f' {k}="{_escape(v)}"' for k, v in node.attrs.items())
            if not node.children:
                out.append(f"<{node.name}{attrs}/>")
                continue
            out.append(f"<{node.name}{attrs}>")
            stack.append(_Close(node.name))
            stack.extend(reversed(node.children))
    return "".join(out)


def _escape(value: str) -> str:
    value = _BARE_AMP_RE.sub("&amp;", value)
    return value.replace("<", "&lt;").replace('"', "&quot;")
