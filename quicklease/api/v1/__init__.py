"""API v1 endpoints for QuickLease.

This module provides the ApiV1 blueprint that aggregates all v1 resources.
All API v1 endpoints require a bearer token issued by /auth/register or
/auth/login.
"""

from flask import Blueprint, g, request

from ...exceptions import AuthenticationError
from .. import bearer_token, get_account_service
from . import users

api_v1_bp = Blueprint("api_v1", __name__)


@api_v1_bp.before_request
def authenticate():
    """
    Require a valid bearer token for all API v1 endpoints.

    Stores the authenticated account view in flask.g.account.

    Raises:
        AuthenticationError: If no valid token is provided
    """
    token = bearer_token(request.headers.get("Authorization"))
    if token is None:
        raise AuthenticationError("Authentication required", {"code": "missing_auth"})
    g.account = get_account_service().authenticate_token(token)


api_v1_bp.register_blueprint(users.users_bp)

__all__ = ["api_v1_bp"]
