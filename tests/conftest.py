"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from alert_logger.app import app
from alert_logger.sheets.models import AppendResult


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def fake_sink() -> MagicMock:
    """A record sink whose append succeeds with one updated row."""
    sink = MagicMock()
    sink.check_configured = MagicMock(return_value=None)
    sink.append = AsyncMock(
        return_value=AppendResult(updated_rows=1, updated_range="Sheet1!A2:N2")
    )
    return sink
