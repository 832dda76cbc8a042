"""
api/responses.py
================
Helpers building the ``{success, data|error}`` response envelope.
"""

from __future__ import annotations

from typing import Any

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response

from exam_engine.services.exceptions import (
    CaseNotFoundError,
    ExamEngineError,
    FindingNotFoundError,
    InvalidMediaRequestError,
    MediaGenerationError,
    MediaGenerationUnavailableError,
    SessionCompletedError,
    SessionNotFoundError,
)

# most specific class first
_ERROR_STATUS: list[tuple[type[ExamEngineError], int]] = [
    (CaseNotFoundError, status.HTTP_404_NOT_FOUND),
    (SessionNotFoundError, status.HTTP_404_NOT_FOUND),
    (FindingNotFoundError, status.HTTP_404_NOT_FOUND),
    (SessionCompletedError, status.HTTP_400_BAD_REQUEST),
    (InvalidMediaRequestError, status.HTTP_400_BAD_REQUEST),
    (MediaGenerationUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (MediaGenerationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (ExamEngineError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def is_development() -> bool:
    return settings.APP_ENV == "development"


def success_response(
    data: Any,
    status_code: int = status.HTTP_200_OK,
    **extra: Any,
) -> Response:
    """Wrap ``data`` in a success envelope; ``extra`` keys sit beside it."""
    return Response({"success": True, **extra, "data": data}, status=status_code)


def error_response(
    message: str,
    status_code: int,
    details: dict | None = None,
) -> Response:
    body: dict = {"success": False, "error": message}
    if details:
        body["details"] = details
    return Response(body, status=status_code)


def engine_error_response(exc: ExamEngineError) -> Response:
    """Map a domain exception to its HTTP status."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    for exc_type, code in _ERROR_STATUS:
        if isinstance(exc, exc_type):
            status_code = code
            break

    details: dict | None = exc.details
    if status_code >= 500 and not is_development():
        details = None
    return error_response(exc.message, status_code, details)


def server_error_response(exc: Exception, message: str) -> Response:
    """500 envelope; the exception text is only exposed in development."""
    details: dict | None = {"exception": str(exc)} if is_development() else None
    return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)
