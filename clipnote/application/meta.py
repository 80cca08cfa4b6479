from __future__ import annotations

import logging
import time

from clipnote import __version__
from clipnote.core.config import Settings
from clipnote.core.errors import NotReadyError
from clipnote.schemas.meta import HealthResponse, ReadyResponse, StatusResponse

_START_TIME = time.monotonic()

logger = logging.getLogger(__name__)


async def health_status() -> HealthResponse:
    logger.debug("health check ok")
    return HealthResponse(status="ok")


async def readiness_status(settings: Settings) -> ReadyResponse:
    # Configuration-only check; the Gemini API itself is not probed.
    if not settings.gemini_api_key:
        logger.warning("readiness check failed: gemini api key not configured")
        raise NotReadyError("Gemini API key is not configured.")

    logger.debug("readiness check ok")
    return ReadyResponse(status="ok")


async def status_snapshot(settings: Settings) -> StatusResponse:
    uptime_seconds = time.monotonic() - _START_TIME
    logger.debug("status snapshot", extra={"uptime_seconds": round(uptime_seconds, 2), "version": __version__})
    return StatusResponse(
        status="ok",
        version=__version__,
        uptime_seconds=uptime_seconds,
        model=settings.gemini_model,
    )
