"""
Error types raised by the mapping, repository and service layers.

- ApiError: base class, carries the HTTP status used by the API layer
- NotFoundError: entity absent
- ValidationError: malformed input (unknown role, empty mandatory
  field, author mismatch, dangling reference)
- PermissionDeniedError: authenticated but not authorized
- ConflictError: uniqueness violation
- InvalidTransitionError: review state machine refused a transition
- UpstreamError: an external call failed or returned an unexpected shape

``status_code`` is the only HTTP coupling; ``main.create_app`` turns
any ``ApiError`` into a JSON response with that status.

``DuplicateKeyError`` is not an ``ApiError``: it is the signal the
document store raises when a unique index rejects a write, and the
service layer decides what it means.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ApiError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: Error message
        details: Additional error context
    """

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(ApiError):
    status_code = 404


class ValidationError(ApiError):
    status_code = 400


class PermissionDeniedError(ApiError):
    status_code = 403

    def __init__(self, message: str = "Insufficient permissions", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details)


class ConflictError(ApiError):
    status_code = 409


class InvalidTransitionError(ConflictError):
    """Raised when an add-on review state change is not allowed.

    ``details`` holds the current and requested states.
    """

    def __init__(self, message: str, current: str, requested: str) -> None:
        super().__init__(message, details={"current": current, "requested": requested})
        self.current = current
        self.requested = requested


class UpstreamError(ApiError):
    status_code = 502


class DuplicateKeyError(Exception):
    """A unique index rejected a document write."""

    def __init__(self, collection: str, detail: str) -> None:
        super().__init__(f"Duplicate key in '{collection}': {detail}")
        self.collection = collection
        self.detail = detail
