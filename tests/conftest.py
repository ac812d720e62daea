"""
Pytest fixtures and configuration for all tests.
"""

import copy

import httpx
import pytest

from app.services.analytics_service import PaymentAnalyticsTracker
from app.services.espn_client import EspnClient
from factories import ESPN_TEST_URL, NOW, VEGAS, make_competition, make_event


@pytest.fixture
def sample_event():
    """Completed event, 3 fights, main event last."""
    return make_event(
        "600041234",
        "UFC 324: Gaethje vs. Pimblett",
        "2026-01-25T03:00Z",
        [
            make_competition(
                "Arnold Allen", "Jean Silva", "FW", "STATUS_FINAL", winner=1,
                flags=("England", "Brazil"), venue=VEGAS,
            ),
            make_competition("Sean O'Malley", "Song Yadong", "BW", "STATUS_FINAL", winner=0),
            make_competition(
                "Justin Gaethje", "Paddy Pimblett", "LW", "STATUS_FINAL", winner=0,
                flags=("USA", "England"),
            ),
        ],
    )


@pytest.fixture
def upcoming_event():
    return make_event(
        "600041300",
        "UFC 325: Volkanovski vs. Lopes 2",
        "2026-02-08T03:00Z",
        [
            make_competition("Dan Hooker", "Benoit Saint Denis", "LW"),
            make_competition("Alexander Volkanovski", "Diego Lopes", "FW"),
        ],
    )


@pytest.fixture
def scoreboard(sample_event, upcoming_event):
    """Raw ESPN scoreboard payload."""
    return {"events": [sample_event, upcoming_event]}


@pytest.fixture
def mock_espn():
    """
    Build an EspnClient backed by httpx.MockTransport.

    Returns a factory: mock_espn(payload=..., status_code=..., handler=...).
    Every request is appended to factory.requests.
    """
    requests: list[httpx.Request] = []

    def factory(payload=None, status_code: int = 200, handler=None) -> EspnClient:
        def default_handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=copy.deepcopy(payload or {}))

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return (handler or default_handler)(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return EspnClient(base_url=ESPN_TEST_URL, timeout=1.0, http_client=http_client)

    factory.requests = requests
    return factory


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def tracker(clock):
    """Isolated ledger per test with a fixed clock."""
    return PaymentAnalyticsTracker(clock=clock)
