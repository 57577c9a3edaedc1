"""API endpoint tests for users and the index."""


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_index_lists_endpoints(client):
    """Test that the index lists every route."""
    response = client.get("/")
    assert response.status_code == 200
    endpoints = response.json()["endpoints"]
    assert {"path": "/thoughts/{thought_id}/like", "methods": ["POST"]} in endpoints
    assert {"path": "/users/signup", "methods": ["POST"]} in endpoints
    paths = {endpoint["path"] for endpoint in endpoints}
    assert {"/", "/thoughts", "/thoughts/like", "/thoughts/{thought_id}", "/users/login"} <= paths


def test_signup(client):
    """Test user signup."""
    response = client.post("/users/signup", json={"email": "a@x.com", "password": "pw"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "User created successfully"
    assert set(body["response"]) == {"email", "id", "accessToken"}
    assert body["response"]["email"] == "a@x.com"


def test_signup_then_login_returns_same_identity(client):
    """Test that login returns the identity created at signup."""
    signup = client.post("/users/signup", json={"email": "a@x.com", "password": "pw"})
    login = client.post("/users/login", json={"email": "a@x.com", "password": "pw"})

    assert login.status_code == 200
    assert login.json()["success"] is True
    assert login.json()["response"] == signup.json()["response"]


def test_signup_never_returns_password(client):
    """Test that neither the password nor its hash leak."""
    response = client.post("/users/signup", json={"email": "a@x.com", "password": "secret-pw"})
    text = response.text
    assert "secret-pw" not in text
    assert "password" not in text.lower()


def test_signup_duplicate_email(client, auth_headers, db):
    """Test signup with an already registered email, in any case, fails."""
    from src.models.user import User

    response = client.post(
        "/users/signup",
        json={"email": auth_headers.email.upper(), "password": "password123"},
    )
    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "response": None,
        "message": "User with this email already exists",
    }
    assert db.query(User).filter(User.email == auth_headers.email).count() == 1


def test_signup_invalid_email(client):
    """Test that signup validates the email."""
    response = client.post("/users/signup", json={"email": "not-an-email", "password": "pw"})
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_signup_missing_password(client):
    """Test that signup requires a password."""
    response = client.post("/users/signup", json={"email": "a@x.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request body"


def test_login_is_case_insensitive(client, auth_headers):
    """Test login with a differently cased email."""
    response = client.post(
        "/users/login", json={"email": "TEST@Example.com", "password": "testpass123"}
    )
    assert response.status_code == 200
    assert response.json()["response"]["id"] == auth_headers.user_id


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/users/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Wrong e-mail or password"


def test_login_unknown_email_looks_like_wrong_password(client, auth_headers):
    """Test that an unknown email fails exactly like a wrong password."""
    unknown = client.post("/users/login", json={"email": "nobody@example.com", "password": "x"})
    wrong = client.post("/users/login", json={"email": auth_headers.email, "password": "x"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json()


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/users/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["response"]["email"] == auth_headers.email


def test_get_current_user_requires_token(client):
    """Test that /users/me rejects anonymous callers."""
    response = client.get("/users/me")
    assert response.status_code == 401
    assert response.json()["loggedOut"] is True


def test_reset_db_seeds_on_startup(tmp_path):
    """Test that RESET_DB seeds the bundled thoughts when the app starts."""
    from fastapi.testclient import TestClient

    from src.config import Settings
    from src.main import create_app
    from src.services.seed import load_seed_thoughts

    settings = Settings(database_url=f"sqlite:///{tmp_path / 'seed.db'}", reset_db=True)
    seeded_app = create_app(settings)

    with TestClient(seeded_app) as seeded_client:
        response = seeded_client.get("/thoughts")

    assert response.status_code == 200
    thoughts = response.json()["response"]
    assert len(thoughts) == len(load_seed_thoughts())
    assert thoughts[0]["message"] == "My family!"


def test_signup_race_on_same_email(client, auth_headers, db, monkeypatch):
    """Test that losing a concurrent signup race still reports a duplicate."""
    from src.models.user import User
    from src.services import auth as auth_service

    # The competing signup committed after this request's lookup
    monkeypatch.setattr(auth_service, "get_user_by_email", lambda db, email: None)

    response = client.post(
        "/users/signup", json={"email": auth_headers.email, "password": "password123"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "User with this email already exists"
    assert db.query(User).filter(User.email == auth_headers.email).count() == 1


def test_default_database_url_names_psycopg2_driver(monkeypatch):
    """Test that the default database URL matches the installed driver."""
    from src.config import Settings

    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url.startswith("postgresql+psycopg2://")
