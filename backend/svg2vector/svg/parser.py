"""SVG parser — raw SVG text → read-only SourceElement tree (xml.etree)."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from svg2vector.models.svg_document import ElementKind, SourceElement

logger = logging.getLogger(__name__)


class InvalidSvgError(ValueError):
    """Source text is not XML, or its root element is not <svg>."""


def _strip_ns(name: str) -> str:
    return name.split("}")[-1] if "}" in name else name


def _build(element: ET.Element) -> SourceElement:
    tag = _strip_ns(element.tag).lower()
    return SourceElement(
        tag=tag,
        kind=ElementKind.from_tag(tag),
        attributes={_strip_ns(k): v for k, v in element.attrib.items()},
        children=[_build(child) for child in element if isinstance(child.tag, str)],
    )


def parse_svg(svg_text: str) -> SourceElement:
    """Parse SVG source into its element tree. Raises InvalidSvgError on bad input."""
    try:
        root = ET.fromstring(svg_text.strip())
    except ET.ParseError as e:
        raise InvalidSvgError(f"Invalid SVG file: {e}") from e

    tree = _build(root)
    if tree.tag != "svg":
        raise InvalidSvgError(f"Invalid SVG file: root element is <{tree.tag}>, expected <svg>")

    logger.debug("Parsed SVG tree with %d top-level children", len(tree.children))
    return tree
