"""Shared fixtures for the hello server tests."""

import pytest
from fastapi.testclient import TestClient

from hello_server.main import app


@pytest.fixture()
def client():
    """Return a test client bound to the application."""
    with TestClient(app) as test_client:
        yield test_client
