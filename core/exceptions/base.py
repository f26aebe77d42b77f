"""
Mailtrack Exception Hierarchy
=============================

Domain-specific exceptions for structured error handling across the service.
Views raise these; the DRF exception handler turns them into JSON bodies.

Usage::

    from core.exceptions import ValidationError, PersistenceError

    # In a service:
    raise PersistenceError("Failed to register email", reason=str(exc))

    # In a view:
    raise ValidationError("URL parameter is required", field="url")
"""

from rest_framework import status


# =============================================================================
# Base Exception
# =============================================================================

class TrackerError(Exception):
    """Base exception for all Mailtrack application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "server_error"

    def __init__(self, message="An unexpected error occurred", **kwargs):
        self.message = message
        self.details = kwargs
        super().__init__(message)

    def to_dict(self, include_details=True):
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details and include_details:
            result["detail"] = self.details
        return result


# =============================================================================
# Client Errors
# =============================================================================

class ValidationError(TrackerError):
    """Invalid input from the client."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"

    def __init__(self, message="Invalid request data", field=None, **kwargs):
        if field:
            kwargs["field"] = field
        super().__init__(message, **kwargs)


# =============================================================================
# Server Errors
# =============================================================================

class PersistenceError(TrackerError):
    """Store read, write or transaction failure."""

    error_code = "persistence_error"

    def __init__(self, message="Database operation failed", reason=None, **kwargs):
        if reason:
            kwargs["reason"] = reason
        super().__init__(message, **kwargs)
