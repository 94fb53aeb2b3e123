"""Tests for error handling and custom exceptions."""

import pytest
from flask import Flask

from quicklease.exceptions import (
    AccountAlreadyExists,
    AuthenticationError,
    DatabaseError,
    QuickLeaseError,
    ResourceNotFound,
    ValidationError,
)


@pytest.fixture
def error_app():
    """Create a test app with error testing routes."""
    test_app = Flask(__name__)
    test_app.config['TESTING'] = True

    # Copy error handlers from main app
    from quicklease.main import (
        handle_already_exists,
        handle_authentication_error,
        handle_internal_error,
        handle_not_found,
        handle_quicklease_error,
        handle_validation_error,
    )

    test_app.errorhandler(ResourceNotFound)(handle_not_found)
    test_app.errorhandler(AccountAlreadyExists)(handle_already_exists)
    test_app.errorhandler(AuthenticationError)(handle_authentication_error)
    test_app.errorhandler(ValidationError)(handle_validation_error)
    test_app.errorhandler(QuickLeaseError)(handle_quicklease_error)
    test_app.errorhandler(Exception)(handle_internal_error)

    @test_app.route('/test/not-found')
    def test_not_found():
        raise ResourceNotFound("Account not found", details={"account_id": 1})

    @test_app.route('/test/not-found-no-details')
    def test_not_found_no_details():
        raise ResourceNotFound("Not found")

    @test_app.route('/test/exists')
    def test_exists():
        raise AccountAlreadyExists("Email taken", details={"email": "a@x.com"})

    @test_app.route('/test/auth')
    def test_auth():
        raise AuthenticationError("Invalid email or password")

    @test_app.route('/test/validation')
    def test_validation():
        raise ValidationError("Invalid request data", details={"field": "email"})

    @test_app.route('/test/database')
    def test_database():
        raise DatabaseError("Connection failed")

    @test_app.route('/test/internal')
    def test_internal():
        raise RuntimeError("Something went wrong")

    return test_app


@pytest.fixture
def error_client(error_app):
    return error_app.test_client()


class TestExceptionClasses:
    """Test custom exception classes."""

    def test_base_error_with_message(self):
        error = QuickLeaseError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"

    def test_base_error_with_details(self):
        details = {"account_id": 1, "reason": "not found"}
        assert QuickLeaseError("Not found", details=details).details == details

    def test_base_error_without_details(self):
        assert QuickLeaseError("Test").details == {}

    @pytest.mark.parametrize(
        "error_class",
        [ResourceNotFound, AccountAlreadyExists, AuthenticationError, ValidationError, DatabaseError],
    )
    def test_subclasses_inherit_base(self, error_class):
        assert issubclass(error_class, QuickLeaseError)

    def test_kinds_are_distinct(self):
        """Each failure kind is catchable on its own."""
        with pytest.raises(AccountAlreadyExists):
            try:
                raise AccountAlreadyExists("taken")
            except (ResourceNotFound, AuthenticationError):
                pytest.fail("caught as the wrong kind")


class TestErrorHandlers:
    """Test Flask error handlers."""

    def test_not_found_response(self, error_client):
        response = error_client.get('/test/not-found')
        data = response.get_json()

        assert response.status_code == 404
        assert data["error"]["type"] == "ResourceNotFound"
        assert data["error"]["message"] == "Account not found"
        assert data["error"]["details"] == {"account_id": 1}

    def test_already_exists_response(self, error_client):
        response = error_client.get('/test/exists')

        assert response.status_code == 409
        assert response.get_json()["error"]["type"] == "AccountAlreadyExists"

    def test_authentication_error_response(self, error_client):
        response = error_client.get('/test/auth')

        assert response.status_code == 401
        assert response.get_json()["error"]["type"] == "AuthenticationError"

    def test_validation_error_response(self, error_client):
        response = error_client.get('/test/validation')
        data = response.get_json()

        assert response.status_code == 400
        assert data["error"]["type"] == "ValidationError"
        assert data["error"]["details"] == {"field": "email"}

    def test_database_error_response(self, error_client):
        response = error_client.get('/test/database')

        assert response.status_code == 500
        assert response.get_json()["error"]["type"] == "DatabaseError"

    def test_error_without_details(self, error_client):
        response = error_client.get('/test/not-found-no-details')

        assert response.status_code == 404
        assert "details" not in response.get_json()["error"]

    def test_internal_server_error_handler(self, error_client):
        response = error_client.get('/test/internal')
        data = response.get_json()

        assert response.status_code == 500
        assert data["error"]["type"] == "InternalServerError"
        assert data["error"]["message"] == "An internal error occurred"
