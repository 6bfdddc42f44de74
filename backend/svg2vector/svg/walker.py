"""Flatten a SourceElement tree into PathEntry values, in document order."""

from __future__ import annotations

import logging

from svg2vector.models.svg_document import SourceElement
from svg2vector.models.vector_document import PathEntry
from svg2vector.svg.geometry import shape_to_path
from svg2vector.svg.paint import resolve_paint

logger = logging.getLogger(__name__)


def convert_element(element: SourceElement, default_fill: str | None) -> PathEntry | None:
    """One shape element → PathEntry, or None if it yields no path data."""
    path_data = shape_to_path(element.tag, element.attributes)
    if not path_data:
        logger.debug("Dropping <%s>: no path data", element.tag)
        return None

    paint = resolve_paint(element.attributes, default_fill)
    return PathEntry(
        path_data=path_data,
        fill=paint.fill,
        stroke=paint.stroke,
        stroke_width=paint.stroke_width,
    )


def walk(
    root: SourceElement,
    default_fill: str | None,
    entries: list[PathEntry] | None = None,
) -> list[PathEntry]:
    """Depth-first, pre-order walk over ``root``'s children.

    Groups and nested <svg> elements are recursed into and flattened; any other
    non-shape element is skipped along with its subtree.
    """
    if entries is None:
        entries = []

    for child in root.children:
        if child.is_shape:
            entry = convert_element(child, default_fill)
            if entry is not None:
                entries.append(entry)
        elif child.is_structural:
            walk(child, default_fill, entries)
        else:
            logger.debug("Skipping unsupported <%s>", child.tag)

    return entries
