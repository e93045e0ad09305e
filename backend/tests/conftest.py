"""
Pytest configuration and shared fixtures for the greeting service tests.
"""
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture
def app():
    """Fresh application instance per test."""
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def frozen_time():
    return datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_client(app, frozen_time):
    """Client whose responses are stamped with ``frozen_time``."""
    with patch("api.responses.utc_now", return_value=frozen_time):
        with TestClient(app) as test_client:
            yield test_client


@pytest.fixture
def parse_timestamp():
    """Parse an RFC 3339 timestamp as emitted by the service."""
    def _parse(value: str) -> datetime:
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    return _parse
