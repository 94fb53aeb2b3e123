"""Flask application entry point."""

import logging
from flask import Flask, jsonify
from flask_cors import CORS

from .api import SERVICE_EXTENSION
from .auth import AccountService, Authenticator, PasswordHasher, TokenIssuer
from .config import settings
from .db import get_core, init_db
from .exceptions import (
    AccountAlreadyExists,
    AuthenticationError,
    QuickLeaseError,
    ResourceNotFound,
    ValidationError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_account_service() -> AccountService:
    """Wire an AccountService from the current settings."""
    hasher = PasswordHasher(settings.bcrypt_work_factor)
    return AccountService(
        get_core=get_core,
        hasher=hasher,
        token_issuer=TokenIssuer(),
        authenticator=Authenticator(get_core, hasher),
        hash_on_create=settings.hash_password_on_create,
    )


# Create Flask app
app = Flask(__name__)

# CORS configuration
CORS(app, origins=settings.cors_origins, supports_credentials=True)

app.extensions[SERVICE_EXTENSION] = build_account_service()


# Database initialization (runs once on app startup)
def initialize_database():
    """Initialize database on app startup."""
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


with app.app_context():
    initialize_database()


# Error handlers
def _error_response(error: QuickLeaseError, error_type: str, status: int):
    response = {
        "error": {
            "type": error_type,
            "message": error.message
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return jsonify(response), status


@app.errorhandler(ResourceNotFound)
def handle_not_found(error):
    """Handle ResourceNotFound exceptions."""
    return _error_response(error, "ResourceNotFound", 404)


@app.errorhandler(AccountAlreadyExists)
def handle_already_exists(error):
    """Handle AccountAlreadyExists exceptions."""
    return _error_response(error, "AccountAlreadyExists", 409)


@app.errorhandler(AuthenticationError)
def handle_authentication_error(error):
    """Handle AuthenticationError exceptions."""
    return _error_response(error, "AuthenticationError", 401)


@app.errorhandler(ValidationError)
def handle_validation_error(error):
    """Handle ValidationError exceptions."""
    return _error_response(error, "ValidationError", 400)


@app.errorhandler(QuickLeaseError)
def handle_quicklease_error(error):
    """Handle any other QuickLeaseError (e.g. DatabaseError)."""
    return _error_response(error, error.__class__.__name__, 500)


@app.errorhandler(500)
def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({
        "error": {
            "type": "InternalServerError",
            "message": "An internal error occurred"
        }
    }), 500


# Health check endpoint
@app.route("/health")
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


# Register API blueprints
from .api.auth import auth_bp
from .api.v1 import api_v1_bp

app.register_blueprint(auth_bp)
app.register_blueprint(api_v1_bp, url_prefix=settings.api_v1_prefix)


if __name__ == "__main__":
    app.run(debug=True)
