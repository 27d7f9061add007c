"""Shared fixtures for end-to-end tests."""

import pytest
from fastapi.testclient import TestClient

from scribe.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client over an app wired to in-memory persistence."""
    return TestClient(create_app(container=build_test_container()))
