"""Inline ``style`` attribute splitting."""

from __future__ import annotations

_TRIM = " \t\r\n\f\v;"


class StyleSplitter:
    """Iterate over the ``;``-separated rules of an inline style value.

    Separators inside single or double quotes, or right after a backslash,
    are not split points. Chunks come back trimmed; empty ones are skipped.
    """

    def __init__(self, raw: str) -> None:
        self._rest = raw

    def __iter__(self) -> StyleSplitter:
        return self

    def __next__(self) -> str:
        while self._rest:
            stop = self._find_stop(self._rest)
            if stop is None:
                chunk, self._rest = self._rest.strip(_TRIM), ""
            else:
                chunk = self._rest[:stop].strip(_TRIM)
                self._rest = self._rest[stop:].strip(_TRIM)
            if chunk:
                return chunk
        raise StopIteration

    @staticmethod
    def _find_stop(raw: str) -> int | None:
        quote: str | None = None
        escaped = False
        for pos, c in enumerate(raw):
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif quote is not None:
                if c == quote:
                    quote = None
            elif c in "'\"":
                quote = c
            elif c == ";":
                return pos + 1
        return None


def split_rule(chunk: str) -> tuple[str, str] | None:
    """Split one style chunk into ``(property, value)`` on the first ``:``."""
    if ":" not in chunk:
        return None
    prop, value = chunk.split(":", 1)
    return prop.strip(), value.strip()
