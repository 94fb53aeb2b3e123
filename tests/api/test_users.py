"""Tests for user CRUD endpoints under /api/v1/users."""

import pytest


@pytest.fixture
def headers(client, auth_headers):
    """Bearer headers for an account registered in the client's database."""
    return auth_headers


def _create(client, headers, **fields):
    body = {"email": "owner@example.com", "password": "secret", "full_name": "Olive Owner"}
    body.update(fields)
    return client.post("/api/v1/users", json=body, headers=headers)


class TestAuthentication:
    """All v1 endpoints require a bearer token."""

    def test_missing_token_returns_401(self, client):
        response = client.get("/api/v1/users")

        assert response.status_code == 401
        assert response.get_json()["error"]["details"]["code"] == "missing_auth"

    def test_invalid_token_returns_401(self, client):
        response = client.get("/api/v1/users", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401


class TestListUsers:
    def test_lists_registered_account(self, client, headers):
        response = client.get("/api/v1/users", headers=headers)

        assert response.status_code == 200
        data = response.get_json()
        assert [u["email"] for u in data] == ["tenant@example.com"]
        assert "password" not in data[0]

    def test_lists_created_accounts(self, client, headers):
        _create(client, headers)

        emails = [u["email"] for u in client.get("/api/v1/users", headers=headers).get_json()]

        assert emails == ["tenant@example.com", "owner@example.com"]


class TestCreateUser:
    def test_create_returns_201_with_submitted_view(self, client, headers):
        response = _create(client, headers, date_of_birth="1990-01-31")

        assert response.status_code == 201
        data = response.get_json()
        assert data["email"] == "owner@example.com"
        assert data["date_of_birth"] == "1990-01-31"
        assert "password" not in data

    def test_create_duplicate_email_returns_409(self, client, headers):
        _create(client, headers)

        response = _create(client, headers)

        assert response.status_code == 409

    def test_create_invalid_body_returns_400(self, client, headers):
        response = client.post("/api/v1/users", json={"full_name": "No Email"}, headers=headers)

        assert response.status_code == 400


class TestGetUser:
    def test_get_created_user(self, client, headers):
        _create(client, headers, id=50, phone_number="+6580000000")

        response = client.get("/api/v1/users/50", headers=headers)

        assert response.status_code == 200
        data = response.get_json()
        assert data["id"] == 50
        assert data["phone_number"] == "+6580000000"

    def test_get_unknown_user_returns_404(self, client, headers):
        response = client.get("/api/v1/users/999", headers=headers)

        assert response.status_code == 404
        assert response.get_json()["error"]["type"] == "ResourceNotFound"


class TestUpdateUser:
    def test_update_replaces_fields(self, client, headers):
        _create(client, headers, id=50, phone_number="+6580000000")

        response = client.put(
            "/api/v1/users/50",
            json={"email": "renamed@example.com", "full_name": "Renamed"},
            headers=headers,
        )

        assert response.status_code == 200
        data = client.get("/api/v1/users/50", headers=headers).get_json()
        assert data["email"] == "renamed@example.com"
        assert data["full_name"] == "Renamed"
        assert data["phone_number"] is None

    def test_path_id_wins_over_body_id(self, client, headers):
        _create(client, headers, id=50)

        response = client.put(
            "/api/v1/users/50",
            json={"id": 51, "email": "owner@example.com"},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.get_json()["id"] == 50
        assert client.get("/api/v1/users/51", headers=headers).status_code == 404

    def test_update_unknown_user_returns_404(self, client, headers):
        response = client.put(
            "/api/v1/users/999", json={"email": "ghost@example.com"}, headers=headers
        )

        assert response.status_code == 404


class TestDeleteUser:
    def test_delete_then_get_returns_404(self, client, headers):
        _create(client, headers, id=50)

        response = client.delete("/api/v1/users/50", headers=headers)

        assert response.status_code == 204
        assert client.get("/api/v1/users/50", headers=headers).status_code == 404

    def test_delete_unknown_user_returns_404(self, client, headers):
        response = client.delete("/api/v1/users/999", headers=headers)

        assert response.status_code == 404
