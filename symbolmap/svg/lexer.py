"""Tag-stream lexer — raw SVG text → tag/text events.

This is deliberately not an XML parser: names keep whatever casing the file
used, entities are left encoded, and namespaces are not resolved. It only
splits the markup into events and flags text it cannot make sense of.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Union

_NAME = r"[^\s/>=\"'<]+"
_START_RE = re.compile(rf"<({_NAME})")
_ATTR_RE = re.compile(rf"\s+({_NAME})\s*=\s*(?:\"([^\"]*)\"|'([^']*)')")
_TAG_CLOSE_RE = re.compile(r"\s*(/?)>")
_END_RE = re.compile(rf"</({_NAME})\s*>")


class TagType(enum.Enum):
    START = "start"
    END = "end"
    EMPTY = "empty"


@dataclass(frozen=True)
class Tag:
    name: str
    type: TagType
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Comment:
    content: str


@dataclass(frozen=True)
class Declaration:
    content: str


@dataclass(frozen=True)
class Instruction:
    content: str


@dataclass(frozen=True)
class LexError:
    message: str
    offset: int


Event = Union[Tag, Text, Comment, Declaration, Instruction, LexError]


class TagStream:
    """Iterator over the markup events of ``src``.

    Whitespace-only text between tags is skipped. The stream stops after the
    first :class:`LexError`.
    """

    def __init__(self, src: str) -> None:
        self._src = src
        self._pos = 0
        self._done = False

    def __iter__(self) -> TagStream:
        return self

    def __next__(self) -> Event:
        src = self._src
        while not self._done and self._pos < len(src):
            if src[self._pos] == "<":
                return self._read_markup()

            end = src.find("<", self._pos)
            if end == -1:
                end = len(src)
            text = src[self._pos:end]
            self._pos = end
            if text.strip():
                return Text(text)

        self._done = True
        raise StopIteration

    def _read_markup(self) -> Event:
        src, pos = self._src, self._pos

        if src.startswith("<!--", pos):
            end = src.find("-->", pos + 4)
            if end == -1:
                return self._error("unterminated comment")
            self._pos = end + 3
            return Comment(src[pos + 4:end])

        if src.startswith("<![CDATA[", pos):
            end = src.find("]]>", pos + 9)
            if end == -1:
                return self._error("unterminated CDATA section")
            self._pos = end + 3
            return Text(src[pos:end + 3])

        if src.startswith("<!", pos):
            end = self._find_declaration_end(pos + 2)
            if end == -1:
                return self._error("unterminated declaration")
            self._pos = end + 1
            return Declaration(src[pos + 2:end])

        if src.startswith("<?", pos):
            end = src.find("?>", pos + 2)
            if end == -1:
                return self._error("unterminated processing instruction")
            self._pos = end + 2
            return Instruction(src[pos + 2:end])

        if src.startswith("</", pos):
            m = _END_RE.match(src, pos)
            if not m:
                return self._error("malformed closing tag")
            self._pos = m.end()
            return Tag(m.group(1), TagType.END)

        m = _START_RE.match(src, pos)
        if not m:
            return self._error("malformed tag")
        name = m.group(1)
        attrs: dict[str, str] = {}
        cursor = m.end()
        while True:
            am = _ATTR_RE.match(src, cursor)
            if am:
                value = am.group(2) if am.group(2) is not None else am.group(3)
                attrs[am.group(1)] = value
                cursor = am.end()
                continue

            cm = _TAG_CLOSE_RE.match(src, cursor)
            if not cm:
                return self._error(f"malformed attributes in <{name}>")
            self._pos = cm.end()
            kind = TagType.EMPTY if cm.group(1) else TagType.START
            return Tag(name, kind, attrs)

    def _find_declaration_end(self, start: int) -> int:
        """Find the closing ``>`` of a declaration, skipping ``[...]`` subsets."""
        depth = 0
        for idx in range(start, len(self._src)):
            c = self._src[idx]
            if c == "[":
                depth += 1
            elif c == "]" and depth:
                depth -= 1
            elif c == ">" and not depth:
                return idx
        return -1

    def _error(self, message: str) -> LexError:
        self._done = True
        return LexError(message, self._pos)
