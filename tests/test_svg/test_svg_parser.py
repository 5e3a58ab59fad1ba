"""Tests for the normalizing parser and symbol extraction."""

import pytest

from tests.conftest import (
    ARROW_SVG,
    CIRCLE_SVG,
    CLASS_ONLY_SVG,
    EMPTY_BODY_SVG,
    ID_SVG,
    MESSY_SVG,
    ONCLICK_SVG,
    SCRIPT_SVG,
    STYLED_SVG,
)

from symbolmap.errors import ErrorKind, SpriteError
from symbolmap.svg import ContentWarnings, SvgParser, normalize_attributes, serialize_element
from symbolmap.svg.parser import Phase
from symbolmap.svg.parts import ErrorPart, Tag, TagType


def _symbol_error(raw: str) -> ErrorKind:
    with pytest.raises(SpriteError) as exc:
        SvgParser(raw).symbol("i-test")
    return exc.value.kind


def test_symbol_arrow():
    parser = SvgParser(ARROW_SVG)
    symbol = parser.symbol("i-arrow")
    assert serialize_element(symbol) == (
        '<symbol id="i-arrow" viewBox="0 0 24 24">'
        '<path d="M5 12h14"/><path d="m12 5 7 7-7 7"/>'
        "</symbol>"
    )
    assert parser.viewport.width == 24.0
    assert not parser.warnings
    assert parser.phase is Phase.CLOSED


def test_symbol_from_width_height():
    parser = SvgParser(CIRCLE_SVG)
    symbol = parser.symbol("i-circle")
    assert symbol.attrs == {"id": "i-circle", "viewBox": "0 0 24 24"}
    # <title> has text so it stays; the empty <g> does not.
    assert [c.name for c in symbol.children] == ["title", "circle"]


def test_root_attributes_dropped():
    symbol = SvgParser(ARROW_SVG).symbol("i-arrow")
    assert "fill" not in symbol.attrs
    assert "xmlns" not in symbol.attrs


def test_messy_casing_and_styles():
    symbol = SvgParser(MESSY_SVG).symbol("i-messy")
    assert symbol.attrs["viewBox"] == "0 0 10 20"
    (path,) = symbol.children
    assert path.name == "path"
    assert path.attrs == {
        "d": "M0 0h10v20z",
        "fill": "red",
        "style": "display: none;foo: bar",
    }


def test_style_tag_and_class():
    parser = SvgParser(STYLED_SVG)
    parser.symbol("i-styled")
    assert parser.warnings == ContentWarnings.STYLE_TAG | ContentWarnings.CLASS_ATTR
    assert parser.warnings.describe() == "<style> tags and classes"


def test_class_only():
    parser = SvgParser(CLASS_ONLY_SVG)
    parser.symbol("i-class")
    assert parser.warnings == ContentWarnings.CLASS_ATTR


def test_id_flagged():
    parser = SvgParser(ID_SVG)
    parser.symbol("i-id")
    assert parser.warnings == ContentWarnings.ID_ATTR


@pytest.mark.parametrize("raw", [ONCLICK_SVG, SCRIPT_SVG])
def test_scripts_rejected(raw):
    assert _symbol_error(raw) is ErrorKind.PARSE_SCRIPT


def test_style_type_removed():
    raw = '<svg viewBox="0 0 1 1"><style type="text/css">a{}</style><path d="M0 0"/></svg>'
    symbol = SvgParser(raw).symbol("i-x")
    assert symbol.children[0].attrs == {}


@pytest.mark.parametrize(
    "raw, kind",
    [
        ("", ErrorKind.PARSE_START),
        ("<g/>", ErrorKind.PARSE_START),
        ("hello <svg/>", ErrorKind.PARSE_START),
        ('<svg viewBox="0 0 1 1"><path d="M0 0"/>', ErrorKind.PARSE_END),
        ('<svg viewBox="0 0 1 1"><path d="M0 0"/></svg><g/>', ErrorKind.PARSE_END),
        ('<svg viewBox="0 0 1 1"><path d="M0 0"/></svg>junk', ErrorKind.PARSE_END),
        ('<svg viewBox="0 0 1 1"><svg/></svg>', ErrorKind.PARSE_SVG_SVG),
        ('<svg viewBox="0 0 1 1"><g><svg></svg></g></svg>', ErrorKind.PARSE_SVG_SVG),
        ('<svg viewBox="0 0 1 1">text<path d="M0 0"/></svg>', ErrorKind.PARSE),
        ('<svg viewBox="0 0 1 1"><1path/></svg>', ErrorKind.PARSE),
        ('<svg viewBox="0 0 1 1"><path 1d="x"/></svg>', ErrorKind.PARSE),
        ('<svg viewBox="0 0 1 1"><path d="x/></svg>', ErrorKind.PARSE),
        ('<svg viewBox="0 0 1 1"><g><path d="M0 0"/></svg>', ErrorKind.PARSE),
        ('<svg viewBox="1 1 2 2"><path d="M0 0"/></svg>', ErrorKind.PARSE_VIEWBOX_OFFSET),
        ('<svg><path d="M0 0"/></svg>', ErrorKind.PARSE_VIEWPORT_ATTR),
        (EMPTY_BODY_SVG, ErrorKind.PARSE),
    ],
)
def test_symbol_errors(raw, kind):
    assert _symbol_error(raw) is kind


def test_trailing_comments_allowed():
    raw = '<svg viewBox="0 0 1 1"><path d="M0 0"/></svg>\n<!-- bye -->\n'
    assert SvgParser(raw).symbol("i-x").children


def test_symbol_only_once():
    parser = SvgParser(ARROW_SVG)
    parser.symbol("i-arrow")
    with pytest.raises(SpriteError):
        parser.symbol("i-arrow")


def test_iteration():
    parts = list(SvgParser('<SVG viewbox="0 0 1 1"><Path d="M0 0"/></svg>'))
    assert parts == [
        Tag("svg", TagType.START, {"viewBox": "0 0 1 1"}),
        Tag("path", TagType.EMPTY, {"d": "M0 0"}),
        Tag("svg", TagType.END, {}),
    ]


def test_iteration_stops_after_error():
    parts = list(SvgParser("<g/><svg/>"))
    assert parts == [ErrorPart(ErrorKind.PARSE_START)]


def test_normalize_attributes():
    attrs = normalize_attributes({"STROKE-WIDTH": "2", "data-X": "y", "style": "Fill:red"})
    assert attrs == {"stroke-width": "2", "data-X": "y", "fill": "red"}
    with pytest.raises(SpriteError):
        normalize_attributes({"bad name": "x"})


def test_byte_order_mark_ignored():
    symbol = SvgParser("\ufeff" + ARROW_SVG).symbol("i-arrow")
    assert symbol.attrs["viewBox"] == "0 0 24 24"
