"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from svg2vector.converter import COLOR_PRESETS, SIZE_PRESETS
from svg2vector.models.responses import HealthResponse, PresetsResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0")


@router.get("/presets", response_model=PresetsResponse)
async def presets() -> PresetsResponse:
    return PresetsResponse(sizes=SIZE_PRESETS, colors=COLOR_PRESETS)
