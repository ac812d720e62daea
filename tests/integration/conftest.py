"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import create_app
from app.services.entrypoints import build_registry
from app.services.payment_service import LedgerPaymentProcessor


@pytest.fixture
def registry(mock_espn, scoreboard, tracker, clock):
    return build_registry(
        mock_espn(scoreboard),
        tracker=tracker,
        payments=LedgerPaymentProcessor(tracker),
        clock=clock,
    )


@pytest.fixture
async def client(registry):
    """
    HTTP client for testing API endpoints.

    The app is built with a test registry (mocked ESPN + isolated ledger).
    """
    app = create_app(registry=registry)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
