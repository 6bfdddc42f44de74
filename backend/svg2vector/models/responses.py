"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svg2vector.models.vector_document import PathEntry, Viewport


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class PresetsResponse(BaseModel):
    sizes: dict[str, int] = Field(default_factory=dict)
    colors: list[str] = Field(default_factory=list)


class StatsResponse(BaseModel):
    source_bytes: int = 0
    output_bytes: int = 0
    percent_smaller: float = 0.0


class ConvertResponse(BaseModel):
    xml: str
    viewport: Viewport
    paths: list[PathEntry] = Field(default_factory=list)
    stats: StatsResponse = Field(default_factory=StatsResponse)


class BatchItemResponse(BaseModel):
    name: str
    output_name: str
    xml: str | None = None
    error: str | None = None


class BatchConvertResponse(BaseModel):
    results: list[BatchItemResponse] = Field(default_factory=list)
    converted: int = 0
    failed: int = 0


class PreviewResponse(BaseModel):
    svg: str
