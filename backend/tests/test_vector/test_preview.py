"""Tests for Vector Drawable → SVG preview reconstruction."""

from __future__ import annotations

from svg2vector.vector.formatter import format_xml
from svg2vector.vector.preview import extract_paths, vector_to_svg
from tests.conftest import SQUARE_XML


def test_round_trip_square():
    svg = vector_to_svg(SQUARE_XML)
    assert svg == (
        '<svg viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">'
        '<path d="M2,2 L12,2 L12,12 L2,12 Z" fill="#000000"/>'
        "</svg>"
    )


def test_pretty_printed_input():
    assert vector_to_svg(format_xml(SQUARE_XML)) == vector_to_svg(SQUARE_XML)


def test_attribute_order_does_not_matter():
    xml = (
        '<vector android:viewportWidth="10" android:viewportHeight="5">'
        '<path android:strokeWidth="2" android:strokeColor="#FF0000" '
        'android:name="x" android:pathData="M0,0 L1,1" android:fillColor="#00FF00"/>'
        "</vector>"
    )
    assert extract_paths(xml) == [
        {"d": "M0,0 L1,1", "fill": "#00FF00", "stroke": "#FF0000", "stroke-width": "2"}
    ]
    assert vector_to_svg(xml).startswith('<svg viewBox="0 0 10 5"')


def test_missing_viewport_defaults_to_24():
    svg = vector_to_svg('<vector><path android:pathData="M0,0"/></vector>')
    assert svg.startswith('<svg viewBox="0 0 24 24"')
    assert '<path d="M0,0"/>' in svg


def test_paths_without_data_skipped():
    assert extract_paths('<vector><path android:fillColor="#000"/></vector>') == []


def test_garbage_input_never_raises():
    assert vector_to_svg("not xml") == (
        '<svg viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg"></svg>'
    )
