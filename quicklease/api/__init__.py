"""HTTP API for QuickLease.

Auth endpoints (top-level routes, not under /api/v1/):
- POST /auth/register - Create account and return JWT token
- POST /auth/login - Authenticate and return JWT token
- GET /auth/me - Get current account from bearer token

User endpoints (/api/v1/users, bearer token required):
- GET, POST /api/v1/users
- GET, PUT, DELETE /api/v1/users/<id>
"""

from flask import current_app

from ..auth.service import AccountService

SERVICE_EXTENSION = "quicklease.account_service"


def get_account_service() -> AccountService:
    """Return the AccountService registered on the current app."""
    return current_app.extensions[SERVICE_EXTENSION]


def bearer_token(auth_header: str | None) -> str | None:
    """Extract the token from an 'Authorization: Bearer <token>' header."""
    if not auth_header:
        return None
    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]
