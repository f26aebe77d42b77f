"""
core.exceptions — Re-exports for convenient imports.

Usage::

    from core.exceptions import ValidationError, PersistenceError
    from core.exceptions import tracker_exception_handler
"""

from .base import (
    TrackerError,
    ValidationError,
    PersistenceError,
)

from .handlers import tracker_exception_handler

__all__ = [
    # Base
    "TrackerError",
    # Client
    "ValidationError",
    # Server
    "PersistenceError",
    # Handler
    "tracker_exception_handler",
]
