"""Custom exceptions for QuickLease.

All service-level failures derive from QuickLeaseError so the HTTP layer
can map each kind to its own response without inspecting messages.
"""

from typing import Any


class QuickLeaseError(Exception):
    """Base exception carrying a message and optional structured details."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ResourceNotFound(QuickLeaseError):
    """Raised when an account lookup by id or email finds nothing."""


class AccountAlreadyExists(QuickLeaseError):
    """Raised when an email is already held by another account."""


class AuthenticationError(QuickLeaseError):
    """Raised for bad credentials or an invalid bearer token."""


class ValidationError(QuickLeaseError):
    """Raised when request data fails schema validation."""


class DatabaseError(QuickLeaseError):
    """Raised for unexpected persistence failures."""
