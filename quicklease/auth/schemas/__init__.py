"""Account and authentication Pydantic schemas for API validation."""

from .account import (
    AccountView,
    Credentials,
    AuthResult,
    AuthenticatedIdentity,
    TokenPayload,
)

__all__ = [
    "AccountView",
    "Credentials",
    "AuthResult",
    "AuthenticatedIdentity",
    "TokenPayload",
]
