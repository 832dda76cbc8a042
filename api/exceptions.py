"""
api/exceptions.py
=================
DRF exception handler wrapping framework errors (validation, parse,
method-not-allowed, 404) in the response envelope.
"""

from __future__ import annotations

import logging
from typing import Any

from rest_framework import status
from rest_framework.views import exception_handler

from .responses import error_response, server_error_response

logger: logging.Logger = logging.getLogger(__name__)

_PRESERVED_HEADERS: tuple[str, ...] = ("Allow", "Retry-After", "WWW-Authenticate")


def _first_message(data: Any, prefix: str = "") -> str:
    """Flatten DRF error data into one readable message."""
    if isinstance(data, dict):
        if "detail" in data and len(data) == 1:
            return _first_message(data["detail"], prefix)
        for key, value in data.items():
            label: str = key if key != "non_field_errors" else ""
            return _first_message(value, f"{label}: " if label else prefix)
    if isinstance(data, list) and data:
        return _first_message(data[0], prefix)
    return f"{prefix}{data}"


def envelope_exception_handler(exc: Exception, context: dict):
    """Return ``{"success": false, "error": ...}`` for every API error."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            "unhandled error in %s",
            view.__class__.__name__ if view is not None else "unknown view",
        )
        return server_error_response(exc, "Internal Server Error")

    details: dict | None = None
    if response.status_code == status.HTTP_400_BAD_REQUEST and isinstance(
        response.data, dict
    ):
        details = response.data

    envelope = error_response(
        _first_message(response.data),
        response.status_code,
        details,
    )
    for header in _PRESERVED_HEADERS:
        if response.has_header(header):
            envelope[header] = response[header]
    return envelope
