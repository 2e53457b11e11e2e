"""Shared domain components.

This module exports the exception hierarchy and time helpers used across
the domain.
"""

from authsrv.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InternalError,
    ValidationError,
)
from authsrv.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "InternalError",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
