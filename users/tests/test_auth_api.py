"""
Tests for registration, login, token refresh and profile endpoints.

Run with: python -m pytest users/tests/test_auth_api.py -v
"""

import pytest
from django.contrib.auth import get_user_model

User = get_user_model()

AUTH_URL = "/api/v1/auth/"

pytestmark = pytest.mark.django_db


class TestRegister:

    def test_register_returns_user_and_tokens(self, api_client):
        response = api_client.post(f"{AUTH_URL}register/", {
            "email": "carol@example.com",
            "username": "carol",
            "password": "long-enough-pass",
            "firstName": "Carol",
        }, format="json")

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["user"]["username"] == "carol"
        assert data["user"]["firstName"] == "Carol"
        assert set(data["tokens"]) == {"access", "refresh"}
        assert "password" not in data["user"]
        assert User.objects.get(email="carol@example.com").check_password("long-enough-pass")

    def test_duplicate_email_conflicts(self, api_client, user):
        response = api_client.post(f"{AUTH_URL}register/", {
            "email": user.email.upper(),
            "username": "someone_new",
            "password": "long-enough-pass",
        }, format="json")

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"

    def test_invalid_payload_reports_every_field(self, api_client):
        response = api_client.post(f"{AUTH_URL}register/", {
            "email": "not-an-email",
            "username": "x",
            "password": "123",
        }, format="json")

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"email", "username", "password"} <= fields


class TestLogin:

    def test_login_with_email(self, api_client, user):
        response = api_client.post(f"{AUTH_URL}login/", {
            "email": user.email,
            "password": "secret-pass-123",
        }, format="json")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["data"]["user"]["email"] == user.email
        assert body["data"]["tokens"]["access"]

    def test_wrong_password(self, api_client, user):
        response = api_client.post(f"{AUTH_URL}login/", {
            "email": user.email,
            "password": "wrong",
        }, format="json")

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"

    def test_access_token_authenticates_writes(self, api_client, user):
        tokens = api_client.post(f"{AUTH_URL}login/", {
            "email": user.email,
            "password": "secret-pass-123",
        }, format="json").json()["data"]["tokens"]

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
        response = api_client.post("/api/v1/posts/", {
            "title": "Posted with a token",
            "content": "This content is comfortably longer than fifty characters in total.",
        }, format="json")
        assert response.status_code == 201


class TestRefresh:

    def test_refresh_issues_new_access_token(self, api_client, user):
        from rest_framework_simplejwt.tokens import RefreshToken

        refresh = str(RefreshToken.for_user(user))
        response = api_client.post(f"{AUTH_URL}refresh/", {"refresh": refresh}, format="json")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert response.json()["data"]["access"]

    def test_bad_refresh_token(self, api_client):
        response = api_client.post(f"{AUTH_URL}refresh/", {"refresh": "garbage"}, format="json")
        assert response.status_code == 401
        assert response.json()["success"] is False


class TestProfile:

    def test_requires_authentication(self, api_client):
        assert api_client.get(f"{AUTH_URL}profile/").status_code == 401

    def test_get_and_update_profile(self, auth_client, user):
        assert auth_client.get(f"{AUTH_URL}profile/").json()["data"]["email"] == user.email

        response = auth_client.patch(f"{AUTH_URL}profile/", {"bio": "Writes about Django"}, format="json")

        assert response.status_code == 200
        user.refresh_from_db()
        assert user.bio == "Writes about Django"

    def test_email_is_read_only(self, auth_client, user):
        auth_client.patch(f"{AUTH_URL}profile/", {"email": "new@example.com"}, format="json")
        user.refresh_from_db()
        assert user.email == "alice@example.com"
