"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.context import AppContext
from src.database import Base, get_db
from src.main import create_app


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").rstrip("/") + "_test"
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

test_settings = Settings(database_url=SQLALCHEMY_DATABASE_URL, reset_db=False, log_level="WARNING")
app = create_app(test_settings)
context: AppContext = app.state.context
engine = context.engine
TestingSessionLocal = context.session_factory


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from src import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def signup(client, email: str, password: str = "testpass123") -> AuthHeaders:
    """Sign up a user and return auth headers carrying their identity."""
    response = client.post("/users/signup", json={"email": email, "password": password})
    assert response.status_code == 200
    data = response.json()["response"]
    return AuthHeaders(
        {"Authorization": f"Bearer {data['accessToken']}"},
        user_id=data["id"],
        email=data["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return signup(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """Create a second, unrelated user."""
    return signup(client, "other@example.com")


@pytest.fixture
def thought(client, auth_headers):
    """Post a thought as the ``auth_headers`` user and return its payload."""
    response = client.post("/thoughts", headers=auth_headers, json={"message": "hello"})
    assert response.status_code == 201
    return response.json()["response"]


@pytest.fixture
def session_factory():
    """Session factory for tests that need a second, independent session."""
    return TestingSessionLocal


@pytest.fixture(scope="function")
def lenient_client(db):
    """Test client that returns 500 responses instead of re-raising server errors."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
