"""
Tests for the service root endpoints.
"""


class TestRoot:
    def test_welcome(self, client, settings):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "welcome to JWT Pizza", "version": settings.app_version}

    def test_docs(self, client, settings):
        response = client.get("/api/docs")
        assert response.status_code == 200
        body = response.json()
        assert body["version"] == settings.app_version
        assert body["config"]["factory"] == "http://factory.test"
        assert body["config"]["db"].startswith("sqlite+aiosqlite://")

        endpoints = {(e["method"], e["path"]) for e in body["endpoints"]}
        assert ("PUT", "/api/auth") in endpoints
        assert ("DELETE", "/api/franchise/{franchise_id}/store/{store_id}") in endpoints
        assert ("GET", "/api/order/menu") in endpoints

    def test_docs_lists_every_router(self, client):
        """Routes from each included router show up, not just the root ones."""
        endpoints = {(e["method"], e["path"]) for e in client.get("/api/docs").json()["endpoints"]}
        assert {
            ("GET", "/"),
            ("POST", "/api/auth"),
            ("GET", "/api/user/me"),
            ("POST", "/api/order"),
            ("GET", "/api/franchise"),
        } <= endpoints
        assert all(method.isupper() for method, _ in endpoints)

    def test_unknown_endpoint(self, client):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json() == {"message": "unknown endpoint"}

    def test_wrong_method_is_unknown_endpoint(self, client):
        response = client.patch("/api/auth")
        assert response.status_code == 404
        assert response.json() == {"message": "unknown endpoint"}
