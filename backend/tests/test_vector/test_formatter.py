"""Tests for the XML re-indenter."""

from __future__ import annotations

from svg2vector.vector.formatter import format_xml
from tests.conftest import SQUARE_XML


def test_splits_adjacent_tags():
    out = format_xml("<root><item>text</item></root>")
    assert out.split("\n") == ["<root>", "    <item>text</item>", "</root>"]


def test_single_letter_tags_not_counted():
    # The opening-tag pattern needs at least two characters between < and >
    out = format_xml("<a><b>text</b></a>")
    assert out.split("\n") == ["<a>", "<b>text</b>", "</a>"]


def test_first_line_kept_verbatim():
    out = format_xml("  <root>\n<child x=\"1\">\n</child>")
    assert out.split("\n")[0] == "  <root>"


def test_self_closing_siblings_flush_left():
    out = format_xml("<vector><path d=\"1\"/><path d=\"2\"/></vector>")
    assert out.split("\n") == ["<vector>", '<path d="1"/>', '<path d="2"/>', "</vector>"]


def test_closing_line_floor_at_zero():
    out = format_xml("<a>\n</a>")
    assert out.split("\n")[1] == "</a>"


def test_blank_lines_collapsed():
    out = format_xml("<a>\n\n   \n<b x=\"1\"></b></a>")
    assert "\n\n" not in out


def test_emitted_document_attribute_lines_are_trimmed():
    out = format_xml(SQUARE_XML)
    lines = out.split("\n")
    assert lines[0] == SQUARE_XML.split("\n")[0]
    assert lines[1] == 'android:width="24dp"'
    assert lines[-1] == "</vector>"
    assert len(lines) == len(SQUARE_XML.split("\n"))
