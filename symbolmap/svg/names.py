"""Canonical SVG tag and attribute spellings.

SVG is case-sensitive, but hand-edited and exported files routinely get the
casing wrong (``VIEWBOX``, ``lineargradient``).  Lookups here are
case-insensitive and return the spelling the SVG standard uses.
"""

from __future__ import annotations

import re
from bisect import bisect_left

TAG_NAMES: tuple[str, ...] = (
    "a", "altGlyph", "altGlyphDef", "altGlyphItem", "animate", "animateColor",
    "animateMotion", "animateTransform", "circle", "clipPath", "color-profile",
    "cursor", "defs", "desc", "discard", "ellipse", "feBlend", "feColorMatrix",
    "feComponentTransfer", "feComposite", "feConvolveMatrix",
    "feDiffuseLighting", "feDisplacementMap", "feDistantLight",
    "feDropShadow", "feFlood", "feFuncA", "feFuncB", "feFuncG", "feFuncR",
    "feGaussianBlur", "feImage", "feMerge", "feMergeNode", "feMorphology",
    "feOffset", "fePointLight", "feSpecularLighting", "feSpotLight", "feTile",
    "feTurbulence", "filter", "font", "font-face", "font-face-format",
    "font-face-name", "font-face-src", "font-face-uri", "foreignObject", "g",
    "glyph", "glyphRef", "hatch", "hatchpath", "hkern", "image", "line",
    "linearGradient", "marker", "mask", "mesh", "meshgradient", "meshpatch",
    "meshrow", "metadata", "missing-glyph", "mpath", "path", "pattern",
    "polygon", "polyline", "radialGradient", "rect", "script", "set",
    "solidcolor", "stop", "style", "svg", "switch", "symbol", "text",
    "textPath", "title", "tref", "tspan", "unknown", "use", "view", "vkern",
)

# Inline event handlers. Any of these on an element means scripting.
EVENT_ATTR_NAMES: tuple[str, ...] = (
    "onabort", "onactivate", "onafterprint", "onbeforeprint", "onbegin",
    "onblur", "oncancel", "oncanplay", "oncanplaythrough", "onchange",
    "onclick", "onclose", "oncopy", "oncuechange", "oncut", "ondblclick",
    "ondrag", "ondragend", "ondragenter", "ondragexit", "ondragleave",
    "ondragover", "ondragstart", "ondrop", "ondurationchange", "onemptied",
    "onend", "onended", "onerror", "onfocus", "onfocusin", "onfocusout",
    "onhashchange", "oninput", "oninvalid", "onkeydown", "onkeypress",
    "onkeyup", "onload", "onloadeddata", "onloadedmetadata", "onloadstart",
    "onmessage", "onmousedown", "onmouseenter", "onmouseleave",
    "onmousemove", "onmouseout", "onmouseover", "onmouseup", "onmousewheel",
    "onoffline", "ononline", "onpagehide", "onpageshow", "onpaste",
    "onpause", "onplay", "onplaying", "onpopstate", "onprogress",
    "onratechange", "onrepeat", "onreset", "onresize", "onscroll",
    "onseeked", "onseeking", "onselect", "onshow", "onstalled", "onstorage",
    "onsubmit", "onsuspend", "ontimeupdate", "ontoggle", "onunload",
    "onvolumechange", "onwaiting", "onwheel", "onzoom",
)

ATTR_NAMES: tuple[str, ...] = EVENT_ATTR_NAMES + (
    "accent-height", "accumulate", "additive", "alignment-baseline",
    "allowReorder", "alphabetic", "amplitude", "arabic-form", "aria-activedescendant",
    "aria-atomic", "aria-autocomplete", "aria-busy", "aria-checked",
    "aria-colcount", "aria-colindex", "aria-colspan", "aria-controls",
    "aria-current", "aria-describedby", "aria-details", "aria-disabled",
    "aria-dropeffect", "aria-errormessage", "aria-expanded", "aria-flowto",
    "aria-grabbed", "aria-haspopup", "aria-hidden", "aria-invalid",
    "aria-keyshortcuts", "aria-label", "aria-labelledby", "aria-level",
    "aria-live", "aria-modal", "aria-multiline", "aria-multiselectable",
    "aria-orientation", "aria-owns", "aria-placeholder", "aria-posinset",
    "aria-pressed", "aria-readonly", "aria-relevant", "aria-required",
    "aria-roledescription", "aria-rowcount", "aria-rowindex", "aria-rowspan",
    "aria-selected", "aria-setsize", "aria-sort", "aria-valuemax",
    "aria-valuemin", "aria-valuenow", "aria-valuetext", "ascent",
    "attributeName", "attributeType", "autoReverse", "azimuth",
    "baseFrequency", "baseProfile", "baseline-shift", "bbox", "begin", "bias",
    "by", "calcMode", "cap-height", "class", "clip", "clip-path", "clip-rule",
    "clipPathUnits", "color", "color-interpolation",
    "color-interpolation-filters", "color-profile", "color-rendering",
    "contentScriptType", "contentStyleType", "crossorigin", "cursor", "cx",
    "cy", "d", "decelerate", "decoding", "descent", "diffuseConstant",
    "direction", "disabled", "display", "divisor", "dominant-baseline",
    "download", "dur", "dx", "dy", "edgeMode", "elevation",
    "enable-background", "end", "exponent", "externalResourcesRequired",
    "fill", "fill-opacity", "fill-rule", "filter", "filterRes", "filterUnits",
    "flood-color", "flood-opacity", "focusable", "font-family", "font-size",
    "font-size-adjust", "font-stretch", "font-style", "font-variant",
    "font-weight", "format", "fr", "from", "fx", "fy", "g1", "g2",
    "glyph-name", "glyph-orientation-horizontal",
    "glyph-orientation-vertical", "glyphRef", "gradientTransform",
    "gradientUnits", "hanging", "height", "hidden", "horiz-adv-x",
    "horiz-origin-x", "horiz-origin-y", "href", "hreflang", "id",
    "ideographic", "image-rendering", "in", "in2", "intercept", "k", "k1",
    "k2", "k3", "k4", "kernelMatrix", "kernelUnitLength", "kerning",
    "keyPoints", "keySplines", "keyTimes", "lang", "lengthAdjust",
    "letter-spacing", "lighting-color", "limitingConeAngle", "local",
    "marker-end", "marker-mid", "marker-start", "markerHeight",
    "markerUnits", "markerWidth", "mask", "maskContentUnits", "maskUnits",
    "mathematical", "max", "media", "method", "min", "mode", "name",
    "numOctaves", "offset", "opacity", "operator", "order", "orient",
    "orientation", "origin", "overflow", "overline-position",
    "overline-thickness", "paint-order", "panose-1", "path", "pathLength",
    "patternContentUnits", "patternTransform", "patternUnits", "ping",
    "pointer-events", "points", "pointsAtX", "pointsAtY", "pointsAtZ",
    "preserveAlpha", "preserveAspectRatio", "primitiveUnits", "r", "radius",
    "refX", "refY", "referrerpolicy", "rel", "rendering-intent",
    "repeatCount", "repeatDur", "requiredExtensions", "requiredFeatures",
    "restart", "result", "role", "rotate", "rx", "ry", "scale", "seed",
    "shape-rendering", "side", "slope", "spacing", "specularConstant",
    "specularExponent", "speed", "spreadMethod", "startOffset",
    "stdDeviation", "stemh", "stemv", "stitchTiles", "stop-color",
    "stop-opacity", "strikethrough-position", "strikethrough-thickness",
    "string", "stroke", "stroke-dasharray", "stroke-dashoffset",
    "stroke-linecap", "stroke-linejoin", "stroke-miterlimit",
    "stroke-opacity", "stroke-width", "style", "surfaceScale",
    "systemLanguage", "tabindex", "tableValues", "target", "targetX",
    "targetY", "text-anchor", "text-decoration", "text-rendering",
    "textLength", "title", "to", "transform", "transform-origin", "type",
    "u1", "u2", "underline-position", "underline-thickness", "unicode",
    "unicode-bidi", "unicode-range", "units-per-em", "v-alphabetic",
    "v-hanging", "v-ideographic", "v-mathematical", "values",
    "vector-effect", "version", "vert-adv-y", "vert-origin-x",
    "vert-origin-y", "viewBox", "viewTarget", "visibility", "width",
    "widths", "word-spacing", "writing-mode", "x", "x-height", "x1", "x2",
    "xChannelSelector", "xlink:actuate", "xlink:arcrole", "xlink:href",
    "xlink:role", "xlink:show", "xlink:title", "xlink:type", "xml:base",
    "xml:lang", "xml:space", "xmlns", "xmlns:xlink", "y", "y1", "y2",
    "yChannelSelector", "z", "zoomAndPan",
)


def _table(names: tuple[str, ...]) -> tuple[tuple[str, ...], tuple[str, ...]]:
    ordered = tuple(sorted(set(names), key=str.lower))
    return tuple(n.lower() for n in ordered), ordered


_TAG_KEYS, _TAGS = _table(TAG_NAMES)
_ATTR_KEYS, _ATTRS = _table(ATTR_NAMES)
_EVENT_ATTRS = frozenset(EVENT_ATTR_NAMES)

_VALID_ATTR_RE = re.compile(r"[A-Za-z_:\-][A-Za-z0-9_:\-]*")
_VALID_ID_RE = re.compile(r"[A-Za-z][A-Za-z0-9_\-]*")


def _lookup(keys: tuple[str, ...], values: tuple[str, ...], name: str) -> tuple[bool, str]:
    needle = name.lower()
    idx = bisect_left(keys, needle)
    if idx < len(keys) and keys[idx] == needle:
        return True, values[idx]
    return False, name


def normalize_tag_case(name: str) -> tuple[bool, str]:
    """Return ``(True, canonical)`` for a known tag, else ``(False, name)``."""
    return _lookup(_TAG_KEYS, _TAGS, name)


def normalize_attr_case(name: str) -> tuple[bool, str]:
    """Return ``(True, canonical)`` for a known attribute, else ``(False, name)``."""
    return _lookup(_ATTR_KEYS, _ATTRS, name)


def is_event_attr(name: str) -> bool:
    return name in _EVENT_ATTRS


def valid_attr(name: str) -> bool:
    """Tag/attribute name check: ASCII alphanumerics, ``-``, ``_``, ``:``; no leading digit."""
    return bool(name) and _VALID_ATTR_RE.fullmatch(name) is not None


def valid_id(value: str) -> bool:
    """HTML-friendly ID check: a leading ASCII letter, then ``a-zA-Z0-9_-``."""
    return bool(value) and _VALID_ID_RE.fullmatch(value) is not None
