"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


# Sample icons

ARROW_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
  <path d="M5 12h14"/>
  <path d="m12 5 7 7-7 7"/>
</svg>'''

CIRCLE_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!-- Exported by some editor -->
<svg xmlns="http://www.w3.org/2000/svg" width="24px" height="24px">
  <title>Circle</title>
  <circle cx="12" cy="12" r="10"/>
  <g></g>
</svg>'''

# Embedded <style> plus a class; both get flagged but the file is accepted.
STYLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">
  <style>.a{fill:red}</style>
  <rect class="a" width="16" height="16"/>
</svg>'''

CLASS_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">
  <rect class="a" width="16" height="16"/>
</svg>'''

ID_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">
  <rect id="box" width="16" height="16"/>
</svg>'''

ONCLICK_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">
  <rect onclick="alert(1)" width="16" height="16"/>
</svg>'''

SCRIPT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">
  <script>alert(1)</script>
  <rect width="16" height="16"/>
</svg>'''

# Shouty casing and inline styles that can become attributes.
MESSY_SVG = '''<SVG xmlns="http://www.w3.org/2000/svg" VIEWBOX="0 0 10 20">
  <PATH D="M0 0h10v20z" Style="fill: red; display: none; foo: bar"/>
</SVG>'''

EMPTY_BODY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">
  <defs></defs>
  <title></title>
  <g></g>
</svg>'''


@pytest.fixture
def arrow_svg() -> str:
    return ARROW_SVG


@pytest.fixture
def icon_dir(tmp_path: Path) -> Path:
    """A small folder of icons, one of them nested."""
    (tmp_path / "arrow.svg").write_text(ARROW_SVG, encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "Big Circle.SVG").write_text(CIRCLE_SVG, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not an image", encoding="utf-8")
    return tmp_path
