"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    generators_registered: int = 0


class GeneratorInfo(BaseModel):
    name: str
    description: str = ""


class GeneratorsResponse(BaseModel):
    generators: list[GeneratorInfo] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    svg: str
    color: str
    generator: str
    hash: str
    width: int
    height: int
    data_uri: str = ""
