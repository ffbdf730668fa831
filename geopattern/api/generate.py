"""POST /api/generate and GET /api/pattern.svg — pattern generation."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response

from geopattern.config import settings
from geopattern.engine.config import PatternOptions
from geopattern.engine.pattern import Pattern, generate as generate_pattern
from geopattern.models.requests import GenerateRequest
from geopattern.models.responses import GenerateResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _build(
    text: str | None,
    base_color: str | None,
    color: str | None,
    generator: str | None,
    digest: str | None = None,
) -> Pattern:
    options = PatternOptions(
        base_color=base_color or settings.default_base_color,
        color=color,
        generator=generator,
        hash=digest,
    )
    try:
        return generate_pattern(text, options)
    except ValueError as e:
        logger.warning("Rejected pattern request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest) -> GenerateResponse:
    pattern = _build(req.input, req.base_color, req.color, req.generator, req.hash)
    return GenerateResponse(
        svg=pattern.to_svg(),
        color=pattern.color,
        generator=pattern.generator,
        hash=pattern.hash,
        width=pattern.width,
        height=pattern.height,
        data_uri=pattern.to_data_uri(),
    )


@router.get("/pattern.svg")
async def pattern_svg(
    input: str | None = Query(default=None, description="String to hash"),
    generator: str | None = Query(default=None),
    color: str | None = Query(default=None),
    base_color: str | None = Query(default=None),
) -> Response:
    pattern = _build(input, base_color, color, generator)
    return Response(content=pattern.to_svg(), media_type="image/svg+xml")
