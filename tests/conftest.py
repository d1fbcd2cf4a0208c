"""
Pytest configuration and shared fixtures for test isolation.
"""
import pytest


# Reset global state between tests
@pytest.fixture(autouse=True)
def reset_config():
    """Snapshot Config before each test and restore it afterwards."""
    from nexus.config import Config
    snapshot = Config.to_dict()

    yield

    Config.from_dict(snapshot, apply_env_overrides=False)


@pytest.fixture
def e8_roots():
    from nexus.roots import generate_roots
    return generate_roots("E8")


@pytest.fixture
def test_client():
    """Provide a TestClient for API testing."""
    from fastapi.testclient import TestClient
    from nexus.server import app

    yield TestClient(app)
