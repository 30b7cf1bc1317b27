"""API-specific test fixtures."""

import pytest
from fastapi.testclient import TestClient

from nct.main import create_app


@pytest.fixture
def api_client():
    """TestClient over a fresh app.

    Not used as a context manager, so the lifespan (SIGTERM hook) never runs.
    """
    return TestClient(create_app())
