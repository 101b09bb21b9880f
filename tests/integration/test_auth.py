"""Integration tests for JWT authentication on the catalog API.

Validates:
  - /health is public (plain Django view, no DRF).
  - Product endpoints return 401 without or with a bad token.
  - A token obtained from /api/v1/auth/token/ grants access.
"""

import pytest

from django.contrib.auth import get_user_model

pytestmark = pytest.mark.integration

PRODUCTS_URL = "/api/v1/products/"


class TestPublicEndpoints:
    def test_health_is_public(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestProtectedEndpoints:
    """All DRF endpoints require a valid JWT by default (Fail Closed)."""

    def test_no_token_returns_401(self, api_client):
        response = api_client.get(PRODUCTS_URL)
        assert response.status_code == 401

    def test_invalid_token_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer invalid.token.here")
        response = api_client.get(PRODUCTS_URL)
        assert response.status_code == 401

    def test_malformed_auth_header_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Token some-token")
        response = api_client.get(PRODUCTS_URL)
        assert response.status_code == 401

    def test_401_includes_www_authenticate_header(self, api_client):
        response = api_client.get(PRODUCTS_URL)
        assert response.status_code == 401
        assert "Bearer" in response.get("WWW-Authenticate", "")

    def test_mutations_require_auth(self, api_client):
        response = api_client.post(PRODUCTS_URL, {"name": "Pen"}, format="json")
        assert response.status_code == 401


class TestTokenFlow:
    def test_obtained_token_grants_access(self, api_client):
        get_user_model().objects.create_user(username="catalog", password="s3cret-pass")

        token_response = api_client.post(
            "/api/v1/auth/token/",
            {"username": "catalog", "password": "s3cret-pass"},
            format="json",
        )
        assert token_response.status_code == 200
        access = token_response.data["access"]

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        response = api_client.get(PRODUCTS_URL)
        assert response.status_code == 200
        assert response.data == []

    def test_wrong_password_returns_401(self, api_client):
        get_user_model().objects.create_user(username="catalog", password="s3cret-pass")
        response = api_client.post(
            "/api/v1/auth/token/",
            {"username": "catalog", "password": "wrong"},
            format="json",
        )
        assert response.status_code == 401
