"""POST /api/convert, /api/convert/batch, /api/preview."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from svg2vector.config import Settings
from svg2vector.converter import ConversionResult, convert_batch, convert_svg
from svg2vector.dependencies import build_options, get_settings
from svg2vector.models.requests import BatchConvertRequest, ConvertRequest, PreviewRequest
from svg2vector.models.responses import (
    BatchConvertResponse,
    BatchItemResponse,
    ConvertResponse,
    PreviewResponse,
    StatsResponse,
)
from svg2vector.svg.parser import InvalidSvgError
from svg2vector.vector.preview import vector_to_svg

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_response(result: ConversionResult) -> ConvertResponse:
    return ConvertResponse(
        xml=result.xml,
        viewport=result.document.viewport,
        paths=result.document.entries,
        stats=StatsResponse(
            source_bytes=result.stats.source_bytes,
            output_bytes=result.stats.output_bytes,
            percent_smaller=result.stats.percent_smaller,
        ),
    )


@router.post("/convert", response_model=ConvertResponse)
async def convert(req: ConvertRequest, cfg: Settings = Depends(get_settings)) -> ConvertResponse:
    options = build_options(cfg, req.width, req.height, req.fill_color, req.pretty)
    try:
        result = convert_svg(req.svg, options)
    except InvalidSvgError as e:
        logger.info("Rejected conversion: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    return _to_response(result)


@router.post("/convert/batch", response_model=BatchConvertResponse)
async def convert_many(
    req: BatchConvertRequest, cfg: Settings = Depends(get_settings)
) -> BatchConvertResponse:
    options = build_options(cfg, req.width, req.height, req.fill_color, req.pretty)
    results = convert_batch(((f.name, f.svg) for f in req.files), options)

    items = [
        BatchItemResponse(
            name=r.name,
            output_name=r.output_name,
            xml=r.result.xml if r.result else None,
            error=r.error,
        )
        for r in results
    ]
    converted = sum(1 for r in results if r.ok)
    return BatchConvertResponse(results=items, converted=converted, failed=len(results) - converted)


@router.post("/preview", response_model=PreviewResponse)
async def preview(req: PreviewRequest) -> PreviewResponse:
    return PreviewResponse(svg=vector_to_svg(req.xml))
