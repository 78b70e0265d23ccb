"""Health check — no upstream calls."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from airdrop_checker import __version__

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)
