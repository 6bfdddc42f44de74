"""Shared test fixtures."""

from __future__ import annotations

import pytest


SQUARE_SVG = '<svg viewBox="0 0 24 24"><rect x="2" y="2" width="10" height="10"/></svg>'

SQUARE_XML = (
    '<vector xmlns:android="http://schemas.android.com/apk/res/android"\n'
    '    android:width="24dp"\n'
    '    android:height="24dp"\n'
    '    android:viewportWidth="24"\n'
    '    android:viewportHeight="24">\n'
    '    <path android:pathData="M2,2 L12,2 L12,12 L2,12 Z"\n'
    '        android:fillColor="#000000"/>\n'
    '</vector>'
)

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10" fill="none" stroke="#333333" stroke-width="2"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2" fill="none" stroke="#333333" stroke-width="2"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <line x1="18" x2="18" y1="20" y2="10" stroke="#000000" stroke-width="2"/>
  <line x1="12" x2="12" y1="20" y2="4" stroke="#000000" stroke-width="2"/>
  <line x1="6" x2="6" y1="20" y2="14" stroke="#000000" stroke-width="2"/>
</svg>'''

NESTED_GROUPS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <g fill="#FF0000">
    <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
    <g>
      <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
    </g>
  </g>
</svg>'''

MIXED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="48px" height="32px">
  <title>Mixed shapes</title>
  <defs>
    <rect id="hidden" width="5" height="5"/>
  </defs>
  <ellipse cx="24" cy="16" rx="10" ry="6" style="fill: #96CEB4; stroke: #45B7D1; stroke-width: 1.5"/>
  <polygon points="0,0 10,0 10,10" fill="transparent" stroke="#000000"/>
  <polyline points="1 1 2 2 3 1"/>
  <polygon points="5,5"/>
  <text x="0" y="10">ignored</text>
  <svg x="0" y="0">
    <path d="M0 0 L4 4"/>
  </svg>
</svg>'''


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def nested_groups_svg() -> str:
    return NESTED_GROUPS_SVG


@pytest.fixture
def mixed_svg() -> str:
    return MIXED_SVG
