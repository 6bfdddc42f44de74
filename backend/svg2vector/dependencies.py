"""FastAPI dependency injection."""

from __future__ import annotations

from svg2vector.config import Settings, settings
from svg2vector.converter import ConversionOptions


def get_settings() -> Settings:
    return settings


def build_options(
    cfg: Settings,
    width: str | float | None = None,
    height: str | float | None = None,
    fill_color: str | None = None,
    pretty: bool | None = None,
) -> ConversionOptions:
    """Request overrides on top of the configured conversion defaults."""
    return ConversionOptions(
        width=cfg.default_width if width is None else width,
        height=cfg.default_height if height is None else height,
        default_fill=cfg.default_fill if fill_color is None else fill_color,
        pretty=cfg.pretty_print if pretty is None else pretty,
    )
