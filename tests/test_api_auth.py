"""
Tests for sign-up, login and user approval
"""
import pytest

from organiza.application.services.auth_service import AUTHORIZED, create_access_token, create_user


def _signup(client, email="maria@example.com"):
    return client.post("/api/auth/signup", json={"name": "Maria Souza", "email": email, "password": "segredo123"})


@pytest.mark.integration
class TestSignup:
    """Tests for the approval workflow"""

    def test_new_user_is_pending(self, client, db):
        response = _signup(client)
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "pending"
        assert body["role"] == "usuario"

    def test_duplicate_email_is_case_insensitive(self, client, db):
        _signup(client)
        response = _signup(client, email="MARIA@example.com")
        assert response.status_code == 400

    def test_pending_user_cannot_log_in(self, client, db):
        _signup(client)
        response = client.post("/api/auth/login", json={"email": "maria@example.com", "password": "segredo123"})
        assert response.status_code == 401

    def test_authorized_user_logs_in(self, client, db, api_client):
        user = _signup(client).json()
        api_client.patch(f"/api/admin/users/{user['id']}", json={"status": "authorized"})

        client.headers.clear()
        response = client.post("/api/auth/login", json={"email": "maria@example.com", "password": "segredo123"})

        assert response.status_code == 200
        token = response.json()["access_token"]
        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.json()["email"] == "maria@example.com"

    def test_wrong_password(self, client, admin_user):
        response = client.post("/api/auth/login", json={"email": admin_user.email, "password": "errada"})
        assert response.status_code == 401


@pytest.mark.integration
class TestAccessControl:
    """Tests for tokens, roles and revocation"""

    def test_invalid_token(self, client, db):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401

    def test_revoked_user_is_forbidden(self, client, db):
        user = create_user(db, name="Carlos Lima", email="carlos@example.com", password="segredo123", status="revoked")
        token = create_access_token({"sub": user.email})
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    def test_regular_user_cannot_manage_users(self, client, db):
        user = create_user(db, name="Carlos Lima", email="carlos@example.com", password="segredo123", status=AUTHORIZED)
        token = create_access_token({"sub": user.email})
        response = client.get("/api/admin/users", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    def test_admin_lists_users(self, api_client):
        response = api_client.get("/api/admin/users")
        assert response.status_code == 200
        assert [u["role"] for u in response.json()] == ["administrador"]

    def test_admin_cannot_revoke_themselves(self, api_client, admin_user):
        response = api_client.patch(f"/api/admin/users/{admin_user.id}", json={"status": "revoked"})
        assert response.status_code == 422

    def test_promote_user(self, api_client, db):
        user = create_user(db, name="Carlos Lima", email="carlos@example.com", password="segredo123")
        response = api_client.patch(
            f"/api/admin/users/{user.id}", json={"status": "authorized", "role": "administrador"},
        )
        assert response.status_code == 200
        assert response.json()["role"] == "administrador"
        assert response.json()["status"] == "authorized"


@pytest.mark.integration
class TestCors:
    """Tests for cross-origin access"""

    def _preflight(self, client, origin):
        return client.options("/health", headers={
            "Origin": origin,
            "Access-Control-Request-Method": "GET",
        })

    def test_known_origin_gets_credentials(self, client):
        """Test the front-end origin is echoed back with credentials allowed."""
        response = self._preflight(client, "http://localhost:5173")
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_unknown_origin_is_refused(self, client):
        """Test an origin outside the allow list gets no CORS grant."""
        response = self._preflight(client, "https://evil.example.com")
        assert response.status_code == 400
        assert "access-control-allow-origin" not in response.headers
