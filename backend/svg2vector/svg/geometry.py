"""Primitive SVG shapes → path-data strings.

Every converter takes the element's attribute mapping and returns a path-data
string in the grammar shared by SVG ``d`` and ``android:pathData``, or ``""``
when the shape cannot produce one. Missing or non-numeric attributes read as 0.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping

# Leading number, same reading as parseFloat("10px") -> 10
_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_POINTS_SPLIT_RE = re.compile(r"[\s,]+")


def parse_number(value: str | None, default: float = 0.0) -> float:
    """Parse the leading number of an attribute value, falling back to ``default``."""
    if value is None:
        return default
    match = _NUMBER_RE.match(value)
    if not match:
        return default
    number = float(match.group(1))
    if not math.isfinite(number):
        return default
    return number


def fmt(value: float) -> str:
    """Shortest text for a coordinate: 12 rather than 12.0.

    Sums that overflow to infinity read as 0; very large integers keep
    exponent form (1e+308).
    """
    if not math.isfinite(value):
        return "0"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _num(attrs: Mapping[str, str], name: str) -> float:
    return parse_number(attrs.get(name))


def rect_to_path(attrs: Mapping[str, str]) -> str:
    x = _num(attrs, "x")
    y = _num(attrs, "y")
    w = _num(attrs, "width")
    h = _num(attrs, "height")
    rx = _num(attrs, "rx")
    ry = _num(attrs, "ry") if attrs.get("ry") else rx

    if rx == 0 and ry == 0:
        return (
            f"M{fmt(x)},{fmt(y)} L{fmt(x + w)},{fmt(y)} "
            f"L{fmt(x + w)},{fmt(y + h)} L{fmt(x)},{fmt(y + h)} Z"
        )

    # Quadratic corners approximate the arcs; radii larger than half the side
    # are passed through as-is.
    return (
        f"M{fmt(x + rx)},{fmt(y)} L{fmt(x + w - rx)},{fmt(y)} "
        f"Q{fmt(x + w)},{fmt(y)} {fmt(x + w)},{fmt(y + ry)} "
        f"L{fmt(x + w)},{fmt(y + h - ry)} "
        f"Q{fmt(x + w)},{fmt(y + h)} {fmt(x + w - rx)},{fmt(y + h)} "
        f"L{fmt(x + rx)},{fmt(y + h)} "
        f"Q{fmt(x)},{fmt(y + h)} {fmt(x)},{fmt(y + h - ry)} "
        f"L{fmt(x)},{fmt(y + ry)} "
        f"Q{fmt(x)},{fmt(y)} {fmt(x + rx)},{fmt(y)} Z"
    )


def _two_arc_path(cx: float, cy: float, rx: float, ry: float) -> str:
    start = f"{fmt(cx - rx)},{fmt(cy)}"
    end = f"{fmt(cx + rx)},{fmt(cy)}"
    radii = f"{fmt(rx)},{fmt(ry)}"
    return f"M{start} A{radii} 0 1,0 {end} A{radii} 0 1,0 {start}"


def circle_to_path(attrs: Mapping[str, str]) -> str:
    r = _num(attrs, "r")
    return _two_arc_path(_num(attrs, "cx"), _num(attrs, "cy"), r, r)


def ellipse_to_path(attrs: Mapping[str, str]) -> str:
    return _two_arc_path(_num(attrs, "cx"), _num(attrs, "cy"), _num(attrs, "rx"), _num(attrs, "ry"))


def line_to_path(attrs: Mapping[str, str]) -> str:
    return (
        f"M{fmt(_num(attrs, 'x1'))},{fmt(_num(attrs, 'y1'))} "
        f"L{fmt(_num(attrs, 'x2'))},{fmt(_num(attrs, 'y2'))}"
    )


def _points_path(points: str | None, close: bool) -> str:
    """Move to the first pair, line to the rest. Tokens are kept as written."""
    if not points or not points.strip():
        return ""
    coords = [tok for tok in _POINTS_SPLIT_RE.split(points.strip()) if tok]
    if len(coords) < 4:
        return ""

    parts = [f"M{coords[0]},{coords[1]}"]
    # A trailing unpaired token is dropped
    for i in range(2, len(coords) - 1, 2):
        parts.append(f"L{coords[i]},{coords[i + 1]}")
    if close:
        parts.append("Z")
    return " ".join(parts)


def polygon_to_path(attrs: Mapping[str, str]) -> str:
    return _points_path(attrs.get("points"), close=True)


def polyline_to_path(attrs: Mapping[str, str]) -> str:
    return _points_path(attrs.get("points"), close=False)


def path_to_path(attrs: Mapping[str, str]) -> str:
    return attrs.get("d") or ""


SHAPE_CONVERTERS: dict[str, Callable[[Mapping[str, str]], str]] = {
    "path": path_to_path,
    "rect": rect_to_path,
    "circle": circle_to_path,
    "ellipse": ellipse_to_path,
    "line": line_to_path,
    "polygon": polygon_to_path,
    "polyline": polyline_to_path,
}


def shape_to_path(tag: str, attrs: Mapping[str, str]) -> str:
    """Convert one shape element to path data; unknown tags yield ``""``."""
    converter = SHAPE_CONVERTERS.get(tag)
    if converter is None:
        return ""
    return converter(attrs)
