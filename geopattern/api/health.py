"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from geopattern import __version__
from geopattern.engine.registry import get_registry
from geopattern.models.responses import GeneratorInfo, GeneratorsResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        generators_registered=get_registry().count,
    )


@router.get("/generators", response_model=GeneratorsResponse)
async def generators() -> GeneratorsResponse:
    """Generator names in digest selection order."""
    return GeneratorsResponse(
        generators=[
            GeneratorInfo(name=spec.name, description=spec.description)
            for spec in get_registry().all()
        ],
    )
