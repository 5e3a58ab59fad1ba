"""Tests for sprite assembly."""

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from tests.conftest import ARROW_SVG, CIRCLE_SVG, ID_SVG, SCRIPT_SVG, STYLED_SVG

from symbolmap.errors import ErrorKind, SpriteError
from symbolmap.sprite import Sprite, SpriteOptions, crawl, make_symbol_id
from symbolmap.svg import ContentWarnings


def _build(files: dict[str, str], **attrs) -> Sprite:
    """Build from in-memory files, never touching the disk."""
    opts = SpriteOptions()
    for key, value in attrs.items():
        opts.set_attribute(key.replace("_", "-"), value)
    contents = {Path(name): raw for name, raw in files.items()}
    return Sprite.from_paths(list(contents), opts, contents.__getitem__)


@pytest.mark.parametrize(
    "prefix, name, expected",
    [
        ("i", "image.svg", "i-image"),
        ("foo", "b _ (A) r.svg", "foo-b-a-r"),
        ("i", "Arrow_Left.svg", "i-arrow-left"),
        ("i", "  __lead.svg", "i-lead"),
        ("i", "trail___.svg", "i-trail"),
        ("i", "dir/Über.svg", "i-ber"),
        ("i", "__.svg", None),
        ("i", "(((.svg", None),
        ("i", "日本.svg", None),
    ],
)
def test_make_symbol_id(prefix, name, expected):
    assert make_symbol_id(prefix, name) == expected


def test_build_sprite():
    sprite = _build({"b/circle.svg": CIRCLE_SVG, "a/arrow.svg": ARROW_SVG})
    assert len(sprite) == 2
    assert [s.id for s in sprite.symbols] == ["i-arrow", "i-circle"]

    out = str(sprite)
    assert out.startswith(
        '<svg xmlns="http://www.w3.org/2000/svg" aria-hidden="true" style="display:none">'
        '<symbol id="i-arrow" viewBox="0 0 24 24">'
    )
    assert out.endswith("</symbol></svg>")
    assert out.index('id="i-arrow"') < out.index('id="i-circle"')


def test_symbol_summary():
    sprite = _build({"arrow.svg": ARROW_SVG})
    assert str(sprite.symbols[0]) == "↳ i-arrow { aspect-ratio: 24 / 24; }"


def test_root_attributes_override():
    sprite = _build({"arrow.svg": ARROW_SVG}, style="display:block", data_x="1")
    assert sprite.element.attrs == {
        "xmlns": "http://www.w3.org/2000/svg",
        "aria-hidden": "true",
        "style": "display:block",
        "data-x": "1",
    }


def test_warnings_recorded():
    sprite = _build({"arrow.svg": ARROW_SVG, "styled.svg": STYLED_SVG})
    assert sprite.warnings == {
        Path("styled.svg"): ContentWarnings.STYLE_TAG | ContentWarnings.CLASS_ATTR
    }


def test_dupe_file_name_before_parsing():
    # The second file is garbage, but the name clash is caught first.
    with pytest.raises(SpriteError) as exc:
        _build({"a/arrow.svg": ARROW_SVG, "b/Arrow.svg": "<nope"})
    assert exc.value.kind is ErrorKind.DUPE_FILE_NAME


def test_invalid_file_name():
    with pytest.raises(SpriteError) as exc:
        _build({"__.svg": ARROW_SVG})
    assert exc.value.kind is ErrorKind.INVALID_FILE_NAME


def test_no_svgs():
    with pytest.raises(SpriteError) as exc:
        _build({})
    assert exc.value.kind is ErrorKind.NO_SVGS


def test_parse_error_carries_path():
    with pytest.raises(SpriteError) as exc:
        _build({"arrow.svg": ARROW_SVG, "evil.svg": SCRIPT_SVG})
    assert exc.value.kind is ErrorKind.PARSE_SCRIPT
    assert exc.value.detail == "evil.svg"


def test_dupe_id():
    # id="box" inside one file clashes with the symbol generated for box.svg.
    with pytest.raises(SpriteError) as exc:
        _build({"box.svg": ARROW_SVG, "other.svg": ID_SVG.replace('"box"', '"i-box"')})
    assert exc.value.kind is ErrorKind.DUPE_ID
    assert exc.value.detail == "i-box"


def test_from_options(icon_dir):
    opts = SpriteOptions()
    opts.set_path(icon_dir)
    opts.set_path(icon_dir / "arrow.svg")
    sprite = Sprite.from_options(opts)
    assert [s.id for s in sprite.symbols] == ["i-arrow", "i-big-circle"]


def test_from_options_read_error(tmp_path):
    (tmp_path / "bad.svg").write_bytes(b"\xff\xfe\x00")
    opts = SpriteOptions()
    opts.set_path(tmp_path)
    with pytest.raises(SpriteError) as exc:
        Sprite.from_options(opts)
    assert exc.value.kind is ErrorKind.READ


def test_crawl(icon_dir):
    found = crawl([icon_dir, icon_dir / "nested", icon_dir / "missing.svg"])
    assert [p.name for p in found] == ["arrow.svg", "Big Circle.SVG"]
    assert crawl([icon_dir], extension="txt")[0].name == "notes.txt"


def test_output_is_well_formed_xml():
    opts = SpriteOptions()
    opts.set_attribute("aria-label", "Tom & Jerry <icons>")
    contents = {Path("arrow.svg"): ARROW_SVG, Path("circle.svg"): CIRCLE_SVG}
    sprite = Sprite.from_paths(list(contents), opts, contents.__getitem__)

    root = ET.fromstring(str(sprite))
    assert root.get("aria-label") == "Tom & Jerry <icons>"
    assert len(root) == 2


def test_other_extensions_skipped():
    sprite = _build({"arrow.svg": ARROW_SVG, "photo.png": "not an svg"})
    assert [s.id for s in sprite.symbols] == ["i-arrow"]

    with pytest.raises(SpriteError) as exc:
        _build({"photo.png": ARROW_SVG})
    assert exc.value.kind is ErrorKind.NO_SVGS


def test_from_options_byte_order_mark(tmp_path):
    (tmp_path / "arrow.svg").write_bytes(b"\xef\xbb\xbf" + ARROW_SVG.encode("utf-8"))
    opts = SpriteOptions()
    opts.set_path(tmp_path)
    assert [s.id for s in Sprite.from_options(opts).symbols] == ["i-arrow"]
