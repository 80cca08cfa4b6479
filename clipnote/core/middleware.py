from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from clipnote.core.errors import RequestTooLargeError
from clipnote.core.handlers import error_response
from clipnote.core.logging import log_context

logger = logging.getLogger(__name__)


async def _enforce_request_size(request: Request, max_bytes: int) -> None:
    if max_bytes <= 0:
        return

    content_length = request.headers.get("content-length")
    if content_length:
        try:
            if int(content_length) > max_bytes:
                raise RequestTooLargeError("Request body too large.")
        except ValueError:
            # Ignore invalid Content-Length and fall back to streaming enforcement.
            pass

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            raise RequestTooLargeError("Request body too large.")

    request._body = bytes(body)


async def log_requests(request: Request, call_next: RequestResponseEndpoint) -> Response:
    start = time.perf_counter()
    request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex
    request.state.request_id = request_id

    with log_context(request_id=request_id):
        try:
            await _enforce_request_size(request, request.app.state.settings.max_request_bytes)
        except RequestTooLargeError as exc:
            # Raised outside the router, so the app exception handlers never see it.
            logger.warning("Rejected oversized request", extra={"path": request.url.path})
            response: Response = error_response(exc.status_code, exc.code, exc.detail)
        else:
            response = await call_next(request)

        response.headers["X-Request-Id"] = request_id
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
    return response
