"""Content-safety flags for parsed SVGs.

Styles, classes and IDs inside individual images tend to collide once the
images share a document. Scripts are worse; those get a file rejected.
"""

from __future__ import annotations

import enum


class ContentWarnings(enum.Flag):
    NONE = 0
    SCRIPT_TAG = 1
    STYLE_TAG = 2
    CLASS_ATTR = 4
    ID_ATTR = 8
    ON_ATTR = 16
    STYLE_ATTR = 32

    SCRIPTS = SCRIPT_TAG | ON_ATTR
    ATTRIBUTES = CLASS_ATTR | ID_ATTR | STYLE_ATTR

    @property
    def names(self) -> list[str]:
        """Single-bit member names, in declaration order."""
        return [m.name.lower() for m in _SINGLE_FLAGS if m in self]

    def describe(self) -> str:
        """Summarize the flags in plain English, e.g. ``<style> tags and classes``."""
        what: list[str] = []

        tags = (ContentWarnings.SCRIPT_TAG in self, ContentWarnings.STYLE_TAG in self)
        if tags == (True, True):
            what.append("<script>/<style> tags")
        elif tags[0]:
            what.append("<script> tags")
        elif tags[1]:
            what.append("<style> tags")

        attrs = (ContentWarnings.CLASS_ATTR in self, ContentWarnings.ID_ATTR in self)
        if attrs == (True, True):
            what.append("class/id attributes")
        elif attrs[0]:
            what.append("classes")
        elif attrs[1]:
            what.append("IDs")

        inline = (ContentWarnings.ON_ATTR in self, ContentWarnings.STYLE_ATTR in self)
        if inline == (True, True):
            what.append("inline scripts/styles")
        elif inline[0]:
            what.append("inline scripts")
        elif inline[1]:
            what.append("inline styles")

        if len(what) == 3:
            return f"{what[0]}, {what[1]}, and {what[2]}"
        return " and ".join(what)


_SINGLE_FLAGS = (
    ContentWarnings.SCRIPT_TAG,
    ContentWarnings.STYLE_TAG,
    ContentWarnings.CLASS_ATTR,
    ContentWarnings.ID_ATTR,
    ContentWarnings.ON_ATTR,
    ContentWarnings.STYLE_ATTR,
)
