"""
Tests for the /api/auth endpoints.
"""

import pytest


class TestRegister:
    def test_register(self, client, make_name):
        name = make_name()
        response = client.post(
            "/api/auth",
            json={"name": name, "email": f"{name}@test.com", "password": "diner"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["user"]["name"] == name
        assert body["user"]["roles"] == [{"role": "diner"}]
        assert "password" not in body["user"]
        assert body["token"].count(".") == 2

    def test_register_missing_fields(self, client):
        response = client.post("/api/auth", json={"email": "x@test.com"})
        assert response.status_code == 400
        assert response.json() == {"message": "name, email, and password are required"}

    def test_register_duplicate_email(self, client, register):
        registered = register()
        response = client.post(
            "/api/auth",
            json={"name": "again", "email": registered["user"]["email"], "password": "x"},
        )
        assert response.status_code == 400
        assert response.json() == {"message": "email already in use"}


class TestLogin:
    def test_login(self, client, register):
        registered = register(password="secret")
        response = client.put(
            "/api/auth",
            json={"email": registered["user"]["email"], "password": "secret"},
        )
        assert response.status_code == 200
        assert response.json()["user"]["id"] == registered["user"]["id"]
        assert response.json()["token"] != registered["token"]

    def test_login_unknown_user(self, client):
        response = client.put("/api/auth", json={"email": "nobody@test.com", "password": "x"})
        assert response.status_code == 404
        assert response.json() == {"message": "unknown user"}

    def test_login_wrong_password(self, client, register):
        registered = register(password="secret")
        response = client.put(
            "/api/auth",
            json={"email": registered["user"]["email"], "password": "wrong"},
        )
        assert response.status_code == 404
        assert response.json() == {"message": "unknown user"}

    @pytest.mark.parametrize("body", [{"password": None}, {}])
    def test_login_bad_password_field(self, client, register, body):
        """A null or absent password is an unknown user, not a 400."""
        registered = register(password="secret")
        response = client.put("/api/auth", json={"email": registered["user"]["email"], **body})
        assert response.status_code == 404
        assert response.json() == {"message": "unknown user"}

    def test_seeded_admin_can_log_in(self, client, admin_token, headers):
        response = client.get("/api/user/me", headers=headers(admin_token))
        assert response.status_code == 200
        assert response.json()["roles"] == [{"role": "admin"}]


class TestLogout:
    def test_logout(self, client, register, headers):
        token = register()["token"]
        response = client.delete("/api/auth", headers=headers(token))
        assert response.status_code == 200
        assert response.json() == {"message": "logout successful"}

        response = client.get("/api/user/me", headers=headers(token))
        assert response.status_code == 401

    def test_logout_requires_auth(self, client):
        response = client.delete("/api/auth")
        assert response.status_code == 401
        assert response.json() == {"message": "unauthorized"}

    def test_logout_twice(self, client, register, headers):
        token = register()["token"]
        assert client.delete("/api/auth", headers=headers(token)).status_code == 200
        assert client.delete("/api/auth", headers=headers(token)).status_code == 401
