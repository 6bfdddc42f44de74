"""svg2vector — convert SVG files (or a folder of them) to Vector Drawable XML."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from svg2vector.config import settings
from svg2vector.converter import ConversionOptions, convert_batch
from svg2vector.vector.preview import vector_to_svg

logger = logging.getLogger(__name__)


def _collect_inputs(paths: list[str], suffix: str) -> list[str]:
    files: list[str] = []
    for path in paths:
        if os.path.isdir(path):
            files.extend(
                os.path.join(path, f) for f in sorted(os.listdir(path)) if f.lower().endswith(suffix)
            )
        else:
            files.append(path)
    return files


def _read(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def _write(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text + "\n")


def _read_inputs(files: list[str]) -> tuple[list[tuple[str, str]], int]:
    """Read every input that can be read; unreadable ones are reported and counted."""
    documents: list[tuple[str, str]] = []
    failed = 0
    for path in files:
        if not os.path.exists(path):
            print(f"File not found: {path}")
            failed += 1
            continue
        try:
            documents.append((path, _read(path)))
        except (OSError, UnicodeDecodeError) as e:
            print(f"[{os.path.basename(path)}] FAILED: {e}")
            failed += 1
    return documents, failed


def _claim_target(target: str, claimed: dict[str, str], source: str) -> bool:
    """Refuse a second write to the same output file within one run."""
    key = os.path.normcase(os.path.abspath(target))
    if key in claimed:
        print(f"[{os.path.basename(source)}] FAILED: {target} already written from {claimed[key]}")
        return False
    claimed[key] = source
    return True


def _preview(files: list[str], out_dir: str | None) -> int:
    documents, failed = _read_inputs(files)
    claimed: dict[str, str] = {}
    for path, text in documents:
        base = os.path.splitext(os.path.basename(path))[0]
        target = os.path.join(out_dir or os.path.dirname(path), f"{base}.preview.svg")
        if not _claim_target(target, claimed, path):
            failed += 1
            continue
        _write(target, vector_to_svg(text))
        print(f"[{os.path.basename(path)}] → {target}")
    return 1 if failed else 0


def _convert(files: list[str], out_dir: str | None, options: ConversionOptions) -> int:
    documents, failed = _read_inputs(files)
    claimed: dict[str, str] = {}

    for item in convert_batch(documents, options):
        name = os.path.basename(item.name)
        if item.result is None:
            print(f"[{name}] FAILED: {item.error}")
            failed += 1
            continue
        target = os.path.join(out_dir or os.path.dirname(item.name), os.path.basename(item.output_name))
        if not _claim_target(target, claimed, item.name):
            failed += 1
            continue
        _write(target, item.result.xml)
        stats = item.result.stats
        print(
            f"[{name}] → {target} "
            f"({len(item.result.document.entries)} paths, {stats.percent_smaller}% smaller)"
        )

    print(f"Done: {len(files) - failed}/{len(files)} converted")
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="SVG → Android Vector Drawable converter")
    parser.add_argument("inputs", nargs="+", help="SVG files or folders of SVGs")
    parser.add_argument("-o", "--output", help="Output folder (default: next to each input)")
    parser.add_argument("--width", default=settings.default_width, help="Drawable width in dp")
    parser.add_argument("--height", default=settings.default_height, help="Drawable height in dp")
    parser.add_argument("--fill", default=settings.default_fill, help="Fill for shapes that set none")
    parser.add_argument(
        "--pretty",
        action=argparse.BooleanOptionalAction,
        default=settings.pretty_print,
        help="Re-indent the generated XML",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Inputs are Vector Drawable XML; write a <name>.preview.svg for each",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.output:
        os.makedirs(args.output, exist_ok=True)

    if args.preview:
        return _preview(_collect_inputs(args.inputs, ".xml"), args.output)

    options = ConversionOptions(
        width=args.width,
        height=args.height,
        default_fill=args.fill,
        pretty=args.pretty,
    )
    files = _collect_inputs(args.inputs, ".svg")
    if not files:
        print("No .svg files found.")
        return 1
    return _convert(files, args.output, options)


if __name__ == "__main__":
    sys.exit(main())
