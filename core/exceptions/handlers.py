"""
DRF Exception Handler
=====================

Custom exception handler that catches TrackerError subtypes and returns
consistent ``{error, message, detail}`` JSON responses.

Registered in ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.
"""

import logging
from django.conf import settings
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

from .base import TrackerError

logger = logging.getLogger(__name__)


def tracker_exception_handler(exc, context):
    """
    Custom DRF exception handler.

    - Catches any ``TrackerError`` subtype → structured JSON response.
      Server-side (5xx) details are only exposed when
      ``settings.EXPOSE_ERROR_DETAILS`` is on (non-production).
    - Falls back to DRF's default handler for standard DRF exceptions.
    - Logs unhandled exceptions that slip through both layers.
    """

    # Handle our custom exceptions
    if isinstance(exc, TrackerError):
        logger.warning(
            "TrackerError [%s]: %s %s",
            exc.error_code,
            exc.message,
            exc.details or "",
        )
        include_details = exc.status_code < 500 or getattr(
            settings, "EXPOSE_ERROR_DETAILS", False
        )
        return Response(
            exc.to_dict(include_details=include_details),
            status=exc.status_code,
        )

    # Fall back to DRF default for everything else
    response = drf_exception_handler(exc, context)

    # If DRF didn't handle it (unexpected server error), log it
    if response is None:
        logger.exception("Unhandled exception in %s", context.get("view", "unknown"))

    return response
