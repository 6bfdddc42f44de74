"""Vector Drawable XML → minimal SVG, for side-by-side preview of a conversion.

Each <path> element's attributes are read individually, so attribute order
inside the element does not matter. Missing pieces are left out, never raised.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

_VIEWPORT_WIDTH_RE = re.compile(r'android:viewportWidth\s*=\s*"([^"]+)"')
_VIEWPORT_HEIGHT_RE = re.compile(r'android:viewportHeight\s*=\s*"([^"]+)"')
_PATH_TAG_RE = re.compile(r"<path\b[^>]*>", re.IGNORECASE)
_ANDROID_ATTR_RE = re.compile(r'android:(\w+)\s*=\s*"([^"]*)"')

# android attribute → SVG attribute, in output order
_ATTR_MAP = (
    ("pathData", "d"),
    ("fillColor", "fill"),
    ("strokeColor", "stroke"),
    ("strokeWidth", "stroke-width"),
)


def _extract_attrs(tag_text: str) -> dict[str, str]:
    return {m.group(1): m.group(2) for m in _ANDROID_ATTR_RE.finditer(tag_text)}


def extract_paths(xml: str) -> list[dict[str, str]]:
    """SVG attribute dicts for every <path> carrying a non-empty pathData."""
    paths: list[dict[str, str]] = []
    for match in _PATH_TAG_RE.finditer(xml):
        attrs = _extract_attrs(match.group(0))
        if not attrs.get("pathData"):
            logger.debug("Preview: <path> without pathData skipped")
            continue
        paths.append({svg: attrs[android] for android, svg in _ATTR_MAP if attrs.get(android)})
    return paths


def vector_to_svg(xml: str) -> str:
    width_match = _VIEWPORT_WIDTH_RE.search(xml)
    height_match = _VIEWPORT_HEIGHT_RE.search(xml)
    viewport_width = width_match.group(1) if width_match else "24"
    viewport_height = height_match.group(1) if height_match else "24"

    svg = f'<svg viewBox="0 0 {viewport_width} {viewport_height}" xmlns="{SVG_NS}">'
    for attrs in extract_paths(xml):
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        svg += f"<path {attr_str}/>"
    svg += "</svg>"
    return svg
