from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from clipnote.core.errors import AppError, SummarizationError
from clipnote.core.logging import log_context

logger = logging.getLogger(__name__)


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": {"code": code, "message": message}})


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    extra: dict[str, object] = {"error_code": exc.code, "status_code": exc.status_code}
    if isinstance(exc, SummarizationError):
        extra["failure"] = exc.kind.value

    with log_context(method=request.method, path=request.url.path):
        if exc.status_code >= 500:
            logger.error("%s", exc.detail, extra=extra)
        else:
            logger.info("%s", exc.detail, extra=extra)
    return error_response(exc.status_code, exc.code, exc.detail)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = sorted({".".join(str(part) for part in error["loc"]) for error in exc.errors()})
    with log_context(method=request.method, path=request.url.path):
        logger.info("Invalid request", extra={"fields": ",".join(fields)})
    return error_response(400, "invalid_request", "Invalid request")
