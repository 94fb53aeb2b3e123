"""User CRUD endpoints for QuickLease API.

- GET    /api/v1/users            - List all users (not paginated)
- POST   /api/v1/users            - Create user
- GET    /api/v1/users/{id}       - Get single user
- PUT    /api/v1/users/{id}       - Replace user
- DELETE /api/v1/users/{id}       - Delete user

Passwords are accepted on create and update but never returned.
"""

from flask import Blueprint, jsonify

from ...auth.schemas import AccountView
from .. import get_account_service
from ..validation import validate_request


users_bp = Blueprint("users", __name__, url_prefix="/users")


@users_bp.get("")
def list_users():
    accounts = get_account_service().list_accounts()
    return jsonify([account.model_dump(mode="json") for account in accounts]), 200


@users_bp.get("/<int:account_id>")
def get_user(account_id: int):
    """
    Returns:
        200: Account view
        404: No account with this id
    """
    account = get_account_service().get_account(account_id)
    return jsonify(account.model_dump(mode="json")), 200


@users_bp.post("")
@validate_request
def create_user(data: AccountView):
    """
    Create a user directly, without issuing a token.

    Returns:
        201: The submitted account view
        400: Validation error
        409: Email already exists
    """
    account = get_account_service().create_account(data)
    return jsonify(account.model_dump(mode="json")), 201


@users_bp.put("/<int:account_id>")
@validate_request
def update_user(account_id: int, data: AccountView):
    """
    Replace every field of a user. The id in the path wins over any id
    in the body; omitted fields are reset, not kept.

    Returns:
        200: The submitted account view
        404: No account with this id
        409: New email belongs to another account
    """
    view = data.model_copy(update={"id": account_id})
    account = get_account_service().update_account(view)
    return jsonify(account.model_dump(mode="json")), 200


@users_bp.delete("/<int:account_id>")
def delete_user(account_id: int):
    get_account_service().delete_account(account_id)
    return "", 204
