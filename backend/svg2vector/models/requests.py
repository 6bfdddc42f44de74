"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConversionSettings(BaseModel):
    width: str | float | None = Field(default=None, description="Target width in dp (default 24)")
    height: str | float | None = Field(default=None, description="Target height in dp (default 24)")
    fill_color: str | None = Field(default=None, description="Fill used when a shape sets none")
    pretty: bool | None = Field(default=None, description="Re-indent the generated XML")


class ConvertRequest(ConversionSettings):
    svg: str = Field(..., description="Raw SVG code")


class SvgFile(BaseModel):
    name: str = Field(..., description="Source file name, e.g. icon.svg")
    svg: str = Field(..., description="Raw SVG code")


class BatchConvertRequest(ConversionSettings):
    files: list[SvgFile] = Field(..., description="SVG documents to convert independently")


class PreviewRequest(BaseModel):
    xml: str = Field(..., description="Vector Drawable XML produced by a conversion")
