"""Pytest configuration and shared fixtures."""
import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client():
    """TestClient bound to the FastAPI app."""
    from taxid.main import app

    return TestClient(app)


# ── Markers ──────────────────────────────────────────────────────────

def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")
    config.addinivalue_line("markers", "unit: marks unit tests")
