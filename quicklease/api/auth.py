"""Authentication endpoints for QuickLease.

These endpoints handle account authentication:
- Registration (returns a token for the new account)
- Login
- Current account retrieval from a bearer token

All endpoints return JSON responses.
"""

import logging

from flask import Blueprint, jsonify, request

from ..auth.schemas import AccountView, Credentials
from ..exceptions import AccountAlreadyExists, AuthenticationError
from . import bearer_token, get_account_service
from .validation import validate_request

logger = logging.getLogger(__name__)


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/auth/register", methods=["POST"])
@validate_request
def register(data: AccountView):
    """
    Register a new account and return a JWT token.

    Example request:
    ```json
    {
        "email": "a@x.com",
        "password": "pw1",
        "full_name": "A",
        "phone_number": "+6590000000",
        "date_of_birth": "1990-01-31",
        "gender": true
    }
    ```

    Example response (201):
    ```json
    {"token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."}
    ```

    Raises:
        ValidationError: If the password is missing or over 72 bytes (400)
        AccountAlreadyExists: If the email is already registered (409)
    """
    try:
        result = get_account_service().register_account(data)
    except AccountAlreadyExists:
        logger.warning(f"Registration attempted with existing email: {data.email}")
        raise

    logger.info(f"Account registered: {data.email}")
    return jsonify(result.model_dump()), 201


@auth_bp.route("/auth/login", methods=["POST"])
@validate_request
def login(data: Credentials):
    """
    Authenticate and return a JWT token.

    Accepts both JSON and form data.

    Raises:
        AuthenticationError: If credentials are invalid (401)
    """
    try:
        result = get_account_service().login_account(data)
    except AuthenticationError:
        logger.warning(f"Failed login attempt for email: {data.email}")
        raise

    logger.info(f"Successful login: {data.email}")
    return jsonify(result.model_dump()), 200


@auth_bp.route("/auth/me", methods=["GET"])
def me():
    """
    Get the current account from the bearer token.

    Authorization: Bearer <token>

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    token = bearer_token(request.headers.get("Authorization"))
    if token is None:
        raise AuthenticationError(
            "Missing or malformed authorization header",
            {"expected": "Authorization: Bearer <token>"}
        )

    account = get_account_service().authenticate_token(token)
    return jsonify(account.model_dump(mode="json")), 200
