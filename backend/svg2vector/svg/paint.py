"""Fill / stroke / stroke-width resolution for a single shape element.

A presentation attribute (``fill="red"``) wins over the same property inside
the inline ``style`` attribute. Only the element itself is consulted; nothing
is inherited from enclosing groups.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

# "none" / "transparent" mean "paint nothing" and are never emitted
SUPPRESSED_VALUES = frozenset({"none", "transparent"})


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


@dataclass(frozen=True)
class ResolvedPaint:
    fill: str | None = None
    stroke: str | None = None
    stroke_width: str | None = None


def style_value(style: str | None, prop: str) -> str | None:
    """First ``prop: value`` declaration in an inline style, value trimmed."""
    if not style:
        return None
    match = re.search(rf"(?<![\w-]){re.escape(prop)}\s*:\s*([^;]+)", style)
    if not match:
        return None
    return match.group(1).strip() or None


def lookup(attrs: Mapping[str, str], prop: str) -> str | None | _Unset:
    """Three-state lookup: a value, None for an explicit none, or UNSET."""
    value = (attrs.get(prop) or "").strip() or style_value(attrs.get("style"), prop)
    if not value:
        return UNSET
    if value in SUPPRESSED_VALUES:
        return None
    return value


def normalize(value: str | None) -> str | None:
    if value is None or value.strip() in SUPPRESSED_VALUES or not value.strip():
        return None
    return value.strip()


def resolve_paint(attrs: Mapping[str, str], default_fill: str | None) -> ResolvedPaint:
    fill = lookup(attrs, "fill")
    stroke = lookup(attrs, "stroke")
    stroke_width = lookup(attrs, "stroke-width")

    return ResolvedPaint(
        fill=normalize(default_fill) if fill is UNSET else fill,
        stroke=None if stroke is UNSET else stroke,
        stroke_width=None if stroke_width is UNSET else stroke_width,
    )
