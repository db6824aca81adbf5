"""
Pytest Configuration and Fixtures for the authentication service tests

Every test gets its own user store in a temporary directory; the FastAPI
dependency that hands the store to the routes is overridden to point at it.
"""

import pytest
import os
import sys
import tempfile
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app
_scratch_dir = tempfile.mkdtemp(prefix="flatauth_test_")
os.environ["LOG_DIR"] = os.path.join(_scratch_dir, "logs")
os.environ["USERS_FILE_PATH"] = os.path.join(_scratch_dir, "users.json")


@pytest.fixture
def users_file(tmp_path):
    """Path of a store file that does not exist yet."""
    return str(tmp_path / "users.json")


@pytest.fixture
def user_store(users_file):
    from flatauth.config.storage import UserStore
    return UserStore(users_file)


@pytest.fixture
def test_app(user_store):
    """Application with the store dependency pointed at the temporary store."""
    from app import app
    from flatauth.config.storage import get_user_store

    app.dependency_overrides[get_user_store] = lambda: user_store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app):
    """Create test client for synchronous tests."""
    return TestClient(test_app)


@pytest.fixture
def sample_credentials():
    return {
        "email": "john.doe@example.com",
        "password": "SecurePass123"
    }


@pytest.fixture
def registered_user(test_client, sample_credentials):
    """Signs the sample user up and returns its credentials."""
    response = test_client.post("/signup", json=sample_credentials)
    assert response.status_code == 201
    return sample_credentials


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
