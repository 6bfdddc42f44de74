"""Write Android Vector Drawable XML from a viewport and path entries."""

from __future__ import annotations

from collections.abc import Iterable
from xml.sax.saxutils import quoteattr

from svg2vector.models.vector_document import PathEntry, TargetDocument, Viewport
from svg2vector.svg.geometry import fmt

ANDROID_NS = "http://schemas.android.com/apk/res/android"


def _attr(value: str) -> str:
    # Values always land in double quotes
    return quoteattr(value, {'"': "&quot;"})


def _path_element(entry: PathEntry) -> str:
    lines = [f"    <path android:pathData={_attr(entry.path_data)}"]
    if entry.fill:
        lines.append(f"        android:fillColor={_attr(entry.fill)}")
    if entry.stroke:
        lines.append(f"        android:strokeColor={_attr(entry.stroke)}")
        if entry.stroke_width:
            lines.append(f"        android:strokeWidth={_attr(entry.stroke_width)}")
    return "\n".join(lines) + "/>\n"


def emit_vector(viewport: Viewport, entries: Iterable[PathEntry]) -> str:
    """Serialize a <vector> document.

    Attribute order on each <path> is fixed: pathData, fillColor, strokeColor,
    strokeWidth. strokeWidth is only written alongside a strokeColor.
    """
    xml = (
        f'<vector xmlns:android="{ANDROID_NS}"\n'
        f"    android:width={_attr(viewport.width + 'dp')}\n"
        f"    android:height={_attr(viewport.height + 'dp')}\n"
        f'    android:viewportWidth="{fmt(viewport.viewport_width)}"\n'
        f'    android:viewportHeight="{fmt(viewport.viewport_height)}">\n'
    )
    for entry in entries:
        if not entry.path_data:
            continue
        xml += _path_element(entry)
    xml += "</vector>"
    return xml


def emit_document(document: TargetDocument) -> str:
    return emit_vector(document.viewport, document.entries)
