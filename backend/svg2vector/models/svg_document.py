"""Parsed SVG source tree model."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class ElementKind(str, enum.Enum):
    PATH = "path"
    RECT = "rect"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    LINE = "line"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    GROUP = "g"
    CONTAINER = "svg"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: str) -> ElementKind:
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


SHAPE_KINDS = frozenset({
    ElementKind.PATH,
    ElementKind.RECT,
    ElementKind.CIRCLE,
    ElementKind.ELLIPSE,
    ElementKind.LINE,
    ElementKind.POLYGON,
    ElementKind.POLYLINE,
})

STRUCTURAL_KINDS = frozenset({ElementKind.GROUP, ElementKind.CONTAINER})


class SourceElement(BaseModel):
    """One node of the source document. Built once per conversion, never mutated."""

    model_config = ConfigDict(frozen=True)

    tag: str
    kind: ElementKind = ElementKind.OTHER
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list[SourceElement] = Field(default_factory=list)

    @property
    def is_shape(self) -> bool:
        return self.kind in SHAPE_KINDS

    @property
    def is_structural(self) -> bool:
        return self.kind in STRUCTURAL_KINDS
