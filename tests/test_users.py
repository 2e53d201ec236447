"""
Tests for registration, login and the current-user endpoint.
"""
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

User = get_user_model()


class TestRegister:
    def test_register(self, api_client, db):
        response = api_client.post(
            "/api/auth/register/",
            {"name": "New Person", "email": "new@example.com", "password": "secret1"},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["user"]["email"] == "new@example.com"
        assert "password" not in response.data["user"]
        user = User.objects.get(email="new@example.com")
        assert user.check_password("secret1")
        assert user.name == "New Person"

    def test_duplicate_email(self, api_client, user):
        response = api_client.post(
            "/api/auth/register/",
            {"name": "Again", "email": "author@example.com", "password": "secret1"},
            format="json",
        )

        assert response.status_code == 400
        assert response.data == {"error": "User already exists"}
        assert User.objects.filter(email__iexact="author@example.com").count() == 1

    def test_short_password(self, api_client, db):
        response = api_client.post(
            "/api/auth/register/",
            {"name": "Shorty", "email": "s@example.com", "password": "123"},
            format="json",
        )

        assert response.status_code == 400
        assert "password" in response.data["error"]

    def test_invalid_email(self, api_client, db):
        response = api_client.post(
            "/api/auth/register/",
            {"name": "Bad", "email": "not-an-email", "password": "secret1"},
            format="json",
        )

        assert response.status_code == 400
        assert "email" in response.data["error"]


class TestLogin:
    def test_login_returns_tokens(self, api_client, user):
        response = api_client.post(
            "/api/auth/login/",
            {"email": "author@example.com", "password": "testpass123"},
            format="json",
        )

        assert response.status_code == 200
        assert response.data["access"]
        assert response.data["refresh"]
        assert response.data["user"]["name"] == "Ada Author"

    def test_wrong_password(self, api_client, user):
        response = api_client.post(
            "/api/auth/login/",
            {"email": "author@example.com", "password": "nope"},
            format="json",
        )

        assert response.status_code == 400

    def test_access_token_authenticates(self, api_client, user):
        login = api_client.post(
            "/api/auth/login/",
            {"email": "author@example.com", "password": "testpass123"},
            format="json",
        )
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")

        response = client.get("/api/auth/me/")

        assert response.status_code == 200
        assert response.data["user"]["email"] == "author@example.com"


class TestCurrentUser:
    def test_requires_login(self, api_client, db):
        response = api_client.get("/api/auth/me/")

        assert response.status_code == 401

    def test_update_name(self, auth_client, user):
        response = auth_client.patch("/api/auth/me/", {"name": "Ada L."}, format="json")

        assert response.status_code == 200
        assert response.data["user"]["name"] == "Ada L."
        user.refresh_from_db()
        assert user.name == "Ada L."

    def test_display_name_falls_back(self, user):
        user.name = ""
        assert user.display_name == "Someone"
