"""End-to-end tests for the sign-in flow."""

from tests.harness import create_client_fixture

client = create_client_fixture()


class TestAuthFlow:
    """End-to-end tests for session cookies."""

    def test_sign_in_sets_cookie_and_returns_user(self, client):
        """Should trade an ID token for a session cookie."""
        # Act
        response = client.post("/auth/session", json={"id_token": "valid:alice"})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == "alice"
        assert data["display_name"] == "Mock alice"
        assert data["votes"] == {}
        assert "token" not in data
        assert client.cookies.get("auth_token")

    def test_rejected_id_token_is_unauthorized(self, client):
        response = client.post("/auth/session", json={"id_token": "forged"})

        assert response.status_code == 401
        assert response.json()["code"] == "auth_required"
        assert "auth_token" not in client.cookies

    def test_me_reflects_session_state(self, client):
        """/auth/me should follow sign-in and sign-out."""
        anonymous = client.get("/auth/me").json()
        assert anonymous["authenticated"] is False

        client.post("/auth/session", json={"id_token": "valid:alice"})
        signed_in = client.get("/auth/me").json()
        assert signed_in["authenticated"] is True
        assert signed_in["user_id"] == "alice"

        response = client.delete("/auth/session")
        assert response.json() == {"success": True}
        client.cookies.clear()
        assert client.get("/auth/me").json()["authenticated"] is False

    def test_health_reports_status(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["live_subscribers"] == 0
