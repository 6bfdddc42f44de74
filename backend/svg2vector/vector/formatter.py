"""Re-indent generated XML for display."""

from __future__ import annotations

import re

_INDENT = "    "
_BLANK_LINES_RE = re.compile(r"\n\s*\n")
_CLOSING_LINE_RE = re.compile(r"^\s*</")
# Opening tags that are not self-closing
_OPEN_TAG_RE = re.compile(r"<[^/][^>]*[^/]>")


def format_xml(xml: str) -> str:
    """Break the document at every ``><`` and re-indent each line.

    The depth of a line is the number of opening tags found on that line alone,
    minus one when the line starts with a closing tag. It is not tracked across
    lines, so runs of self-closing siblings come out flush left. The first line
    is kept as-is.
    """
    text = _BLANK_LINES_RE.sub("\n", xml.replace("><", ">\n<"))
    lines = text.split("\n")

    out = [lines[0]]
    for line in lines[1:]:
        depth = len(_OPEN_TAG_RE.findall(line))
        if _CLOSING_LINE_RE.match(line):
            depth -= 1
        out.append(_INDENT * max(0, depth) + line.strip())
    return "\n".join(out)
