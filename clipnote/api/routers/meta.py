from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from clipnote.api.deps import get_app_settings
from clipnote.application.meta import health_status, readiness_status, status_snapshot
from clipnote.core.config import Settings
from clipnote.schemas.errors import ErrorResponse
from clipnote.schemas.meta import HealthResponse, ReadyResponse, StatusResponse

router = APIRouter(prefix="/meta", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return await health_status()


@router.get(
    "/ready",
    response_model=ReadyResponse,
    responses={503: {"model": ErrorResponse, "description": "Gemini API key is not configured."}},
)
async def ready(settings: Annotated[Settings, Depends(get_app_settings)]) -> ReadyResponse:
    return await readiness_status(settings)


@router.get("/status", response_model=StatusResponse)
async def status(settings: Annotated[Settings, Depends(get_app_settings)]) -> StatusResponse:
    return await status_snapshot(settings)
