"""Tests for SVG parser."""

from __future__ import annotations

import pytest

from svg2vector.models.svg_document import ElementKind
from svg2vector.svg.parser import InvalidSvgError, parse_svg
from tests.conftest import MIXED_SVG, NESTED_GROUPS_SVG, SMILEY_SVG


def test_parse_root_and_children():
    root = parse_svg(SMILEY_SVG)
    assert root.tag == "svg"
    assert root.kind == ElementKind.CONTAINER
    assert [c.kind for c in root.children] == [
        ElementKind.CIRCLE,
        ElementKind.CIRCLE,
        ElementKind.CIRCLE,
        ElementKind.PATH,
    ]


def test_namespace_stripped_from_tags():
    root = parse_svg(NESTED_GROUPS_SVG)
    group = root.children[0]
    assert group.tag == "g"
    assert group.is_structural
    assert group.children[0].tag == "rect"


def test_attributes_kept():
    root = parse_svg(NESTED_GROUPS_SVG)
    assert root.attributes["viewBox"] == "0 0 100 100"
    assert root.children[0].children[0].attributes["fill"] == "#4ECDC4"


def test_unknown_tags_are_other():
    root = parse_svg(MIXED_SVG)
    kinds = {c.tag: c.kind for c in root.children}
    assert kinds["title"] == ElementKind.OTHER
    assert kinds["defs"] == ElementKind.OTHER
    assert kinds["text"] == ElementKind.OTHER


def test_invalid_root_rejected():
    with pytest.raises(InvalidSvgError):
        parse_svg("<notsvg/>")


def test_malformed_xml_rejected():
    with pytest.raises(InvalidSvgError):
        parse_svg("<svg><rect></svg>")


def test_invalid_svg_error_is_value_error():
    with pytest.raises(ValueError):
        parse_svg("not xml at all")
