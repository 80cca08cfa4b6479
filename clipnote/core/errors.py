from __future__ import annotations

from enum import Enum


class AppError(Exception):
    """Base class for all application errors."""

    status_code = 500
    code = "internal_error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidRequestError(AppError):
    """Client sent a malformed or invalid request (400)."""

    status_code = 400
    code = "invalid_request"


class NotFoundError(AppError):
    """Requested resource does not exist (404)."""

    status_code = 404
    code = "not_found"


class RequestTooLargeError(AppError):
    """Request body exceeds the configured limit (413)."""

    status_code = 413
    code = "request_too_large"


class ExternalServiceError(AppError):
    """Upstream service failed or returned an invalid response (502)."""

    status_code = 502
    code = "external_service_error"


class NotReadyError(AppError):
    """Service is temporarily unavailable (503)."""

    status_code = 503
    code = "not_ready"


class SummarizationFailure(str, Enum):
    NETWORK = "network"
    API = "api"
    EMPTY_RESPONSE = "empty_response"


class SummarizationError(ExternalServiceError):
    """The generative API did not produce a usable summary."""

    code = "summarization_failed"
    kind = SummarizationFailure.API


class SummarizationNetworkError(SummarizationError):
    kind = SummarizationFailure.NETWORK


class SummarizationApiError(SummarizationError):
    kind = SummarizationFailure.API


class EmptySummaryError(SummarizationError):
    kind = SummarizationFailure.EMPTY_RESPONSE
