from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the effective Gemini configuration once the app starts serving."""
    settings = app.state.settings
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; summarization requests will fail at the API.")
    logger.info(
        "ClipNote ready",
        extra={"model": settings.gemini_model, "app_env": settings.app_env},
    )
    yield
    logger.info("ClipNote shutting down")
