"""End-to-end tests for authentication routes."""

from tests.harness import create_client_fixture

client = create_client_fixture()

CREDENTIALS = {"username": "alice", "password": "s3cret-pass"}


class TestRegister:
    """Tests for POST /api/auth/register."""

    def test_register_returns_account(self, client):
        response = client.post("/api/auth/register", json=CREDENTIALS)

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "alice"
        assert "password" not in data

    def test_duplicate_username(self, client):
        client.post("/api/auth/register", json=CREDENTIALS)

        response = client.post("/api/auth/register", json=CREDENTIALS)

        assert response.status_code == 400
        assert response.json()["detail"] == "Username already taken"

    def test_short_password_is_rejected(self, client):
        response = client.post(
            "/api/auth/register", json={"username": "alice", "password": "123"}
        )

        assert response.status_code == 422

    def test_invalid_username_is_rejected(self, client):
        response = client.post(
            "/api/auth/register", json={"username": "a b", "password": "s3cret-pass"}
        )

        assert response.status_code == 422


class TestLoginLogout:
    """Tests for login, profile and logout."""

    def test_login_sets_httponly_cookie(self, client):
        client.post("/api/auth/register", json=CREDENTIALS)

        response = client.post("/api/auth/login", json=CREDENTIALS)

        assert response.status_code == 200
        assert response.json()["token"]
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("token=")
        assert "HttpOnly" in set_cookie
        assert "samesite=lax" in set_cookie.lower()

    def test_wrong_credentials(self, client):
        client.post("/api/auth/register", json=CREDENTIALS)

        response = client.post(
            "/api/auth/login", json={"username": "alice", "password": "wrong-pass"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Wrong credentials"

    def test_profile_after_login(self, client):
        registered = client.post("/api/auth/register", json=CREDENTIALS).json()
        client.post("/api/auth/login", json=CREDENTIALS)

        response = client.get("/api/auth/profile")

        assert response.status_code == 200
        assert response.json() == registered

    def test_profile_without_token(self, client):
        response = client.get("/api/auth/profile")

        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    def test_logout_clears_cookie(self, client):
        client.post("/api/auth/register", json=CREDENTIALS)
        client.post("/api/auth/login", json=CREDENTIALS)

        response = client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out"}
        assert client.get("/api/auth/profile").status_code == 401
