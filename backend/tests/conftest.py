"""Pytest configuration and fixtures."""

import os
import tempfile
import time
import uuid
from typing import Callable, Generator

import pytest
from cryptography.fernet import Fernet
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["APP_ENV"] = "testing"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="finance-tracker-logs-")
os.environ["DEMO_LINK_DELAY_SECONDS"] = "0.05"
os.environ["ENCRYPTION_KEY"] = Fernet.generate_key().decode()
os.environ["JWT_SECRET"] = "test-secret"
os.environ.pop("PLAID_CLIENT_ID", None)
os.environ.pop("PLAID_SECRET", None)

API = "/app/v1"


@pytest.fixture(scope="session")
def app():
    """Create test application."""
    from finance_tracker.main import app
    return app


@pytest.fixture(scope="session")
def client(app) -> Generator:
    """Create test client.

    Kept open for the whole session so background link tasks keep running
    on the client's event loop between requests.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def test_user_email():
    """Generate unique test user email."""
    return f"test_{uuid.uuid4().hex[:12]}@example.com"


@pytest.fixture
def test_user_password():
    """Test user password."""
    return "TestPassword123!"


@pytest.fixture
def signed_up_user(client, test_user_email, test_user_password) -> dict:
    """Register a fresh user and return the signup response."""
    response = client.post(
        f"{API}/auth/signup",
        json={
            "email": test_user_email,
            "password": test_user_password,
            "first_name": "Test",
            "last_name": "User",
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(signed_up_user) -> dict:
    """Auth headers for a fresh user."""
    return {"Authorization": f"Bearer {signed_up_user['access_token']}"}


@pytest.fixture
def user_id(signed_up_user) -> str:
    return signed_up_user["user"]["id"]


@pytest.fixture
def wait_for() -> Callable[..., bool]:
    """Poll a condition until it holds or the timeout passes."""

    def _wait(condition: Callable[[], bool], timeout: float = 2.0, interval: float = 0.02) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if condition():
                return True
            time.sleep(interval)
        return condition()

    return _wait
