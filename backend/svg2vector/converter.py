"""SVG → Android Vector Drawable conversion facade.

parse → walk → emit → (optional) format. One call handles one document
entirely in memory; batch conversion just repeats it per document.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from svg2vector.models.svg_document import SourceElement
from svg2vector.models.vector_document import TargetDocument, Viewport
from svg2vector.svg.geometry import fmt, parse_number
from svg2vector.svg.parser import InvalidSvgError, parse_svg
from svg2vector.svg.walker import walk
from svg2vector.vector.emitter import emit_document
from svg2vector.vector.formatter import format_xml

logger = logging.getLogger(__name__)

DEFAULT_DIMENSION = "24"

SIZE_PRESETS: dict[str, int] = {
    "Small": 24,
    "Medium": 32,
    "Large": 48,
    "Extra Large": 64,
}

COLOR_PRESETS: list[str] = [
    "#000000", "#333333", "#666666", "#999999", "#CCCCCC", "#FFFFFF",
    "#FF0000", "#00FF00", "#0000FF", "#FFFF00", "#FF00FF", "#00FFFF",
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7", "#DDA0DD",
]

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")
_SVG_SUFFIX_RE = re.compile(r"\.svg$", re.IGNORECASE)


@dataclass
class ConversionOptions:
    """Everything a conversion call can be configured with."""

    width: str | float | None = DEFAULT_DIMENSION
    height: str | float | None = DEFAULT_DIMENSION
    default_fill: str | None = "#000000"
    pretty: bool = False


@dataclass
class ConversionStats:
    source_bytes: int = 0
    output_bytes: int = 0
    # (1 - output/source) * 100, one decimal; negative when the output grew
    percent_smaller: float = 0.0


@dataclass
class ConversionResult:
    document: TargetDocument
    xml: str
    stats: ConversionStats = field(default_factory=ConversionStats)


@dataclass
class BatchResult:
    name: str
    output_name: str
    result: ConversionResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def resolve_dimension(value: str | float | None) -> str:
    """Caller-supplied dp size as text; "24" when unset or not a number."""
    if value is None or value == "":
        return DEFAULT_DIMENSION
    try:
        number = float(value)
    except (TypeError, ValueError):
        return DEFAULT_DIMENSION
    if not math.isfinite(number):
        return DEFAULT_DIMENSION
    return fmt(number)


def resolve_viewport(root: SourceElement, width: str, height: str) -> Viewport:
    """viewBox size if present, else the <svg> width/height, else the caller's size."""
    viewport_width = viewport_height = None

    view_box = root.attributes.get("viewBox", "").strip()
    if view_box:
        parts = _VIEWBOX_SPLIT_RE.split(view_box)
        if len(parts) >= 4:
            viewport_width = parse_number(parts[2])
            viewport_height = parse_number(parts[3])
        else:
            logger.warning("Ignoring malformed viewBox %r", view_box)

    if viewport_width is None or viewport_height is None:
        viewport_width = parse_number(root.attributes.get("width") or None, default=float(width))
        viewport_height = parse_number(root.attributes.get("height") or None, default=float(height))

    return Viewport(
        width=width,
        height=height,
        viewport_width=viewport_width,
        viewport_height=viewport_height,
    )


def compute_stats(source: str, output: str) -> ConversionStats:
    source_bytes = len(source.encode("utf-8"))
    output_bytes = len(output.encode("utf-8"))
    percent = round((1 - output_bytes / source_bytes) * 100, 1) if source_bytes else 0.0
    return ConversionStats(source_bytes=source_bytes, output_bytes=output_bytes, percent_smaller=percent)


def convert_svg(svg_text: str, options: ConversionOptions | None = None) -> ConversionResult:
    """Convert one SVG document. Raises InvalidSvgError if the root is not <svg>."""
    options = options or ConversionOptions()
    root = parse_svg(svg_text)

    width = resolve_dimension(options.width)
    height = resolve_dimension(options.height)
    document = TargetDocument(
        viewport=resolve_viewport(root, width, height),
        entries=walk(root, options.default_fill),
    )

    xml = emit_document(document)
    if options.pretty:
        xml = format_xml(xml)

    logger.info(
        "Converted SVG: %d paths, viewport %s×%s",
        len(document.entries),
        fmt(document.viewport.viewport_width),
        fmt(document.viewport.viewport_height),
    )
    return ConversionResult(document=document, xml=xml, stats=compute_stats(svg_text, xml))


def output_filename(name: str) -> str:
    """icon.svg → icon.xml; names without an .svg suffix get .xml appended."""
    if _SVG_SUFFIX_RE.search(name):
        return _SVG_SUFFIX_RE.sub(".xml", name)
    return f"{name}.xml"


def convert_batch(
    documents: Iterable[tuple[str, str]],
    options: ConversionOptions | None = None,
) -> list[BatchResult]:
    """Convert ``(name, svg_text)`` pairs independently, in input order.

    An invalid document is reported on its own BatchResult and does not stop
    the rest of the batch.
    """
    results: list[BatchResult] = []
    for name, svg_text in documents:
        item = BatchResult(name=name, output_name=output_filename(name))
        try:
            item.result = convert_svg(svg_text, options)
        except InvalidSvgError as e:
            logger.warning("Batch item %s failed: %s", name, e)
            item.error = str(e)
        results.append(item)
    return results
