"""Android Vector Drawable output model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PathEntry(BaseModel):
    path_data: str
    fill: str | None = None
    stroke: str | None = None
    stroke_width: str | None = None


class Viewport(BaseModel):
    """Rendered size (dp) plus the coordinate space the paths are authored in."""

    width: str = "24"
    height: str = "24"
    viewport_width: float = 24.0
    viewport_height: float = 24.0


class TargetDocument(BaseModel):
    viewport: Viewport = Field(default_factory=Viewport)
    # Document order of the flattened source walk
    entries: list[PathEntry] = Field(default_factory=list)
