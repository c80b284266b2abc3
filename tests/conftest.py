"""
Pytest configuration and shared fixtures for the FotMob client tests.

No test touches the network: the client's session is a Mock whose ``get``
returns real ``requests.Response`` objects built by ``make_response``.

Usage:
    def test_something(client, make_response):
        client.session.get.return_value = make_response({"countries": []})
        client.get_all_leagues()
"""

import json
from typing import Any, Callable
from unittest.mock import Mock

import pytest
import requests

from fotmob_data import FotmobClient, FotmobConfig


def build_response(
    payload: Any = None,
    status_code: int = 200,
    text: str | None = None,
    url: str = "https://www.fotmob.com/api/test",
) -> requests.Response:
    """Build a real requests.Response carrying a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    body = text if text is not None else json.dumps(payload)
    response._content = body.encode("utf-8")
    return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return build_response


@pytest.fixture
def config() -> FotmobConfig:
    """Config with a pre-seeded token so no bootstrap request is attempted."""
    return FotmobConfig(token="test-token", timeout_seconds=5)


@pytest.fixture
def session() -> Mock:
    mock = Mock(spec=requests.Session)
    mock.headers = {}
    return mock


@pytest.fixture
def client(config, session) -> FotmobClient:
    return FotmobClient(config=config, session=session)


# ============================================================================
# Sample payloads
# ============================================================================


@pytest.fixture
def matches_payload() -> dict[str, Any]:
    return {
        "date": "20240101",
        "leagues": [
            {
                "id": 47,
                "primaryId": 47,
                "name": "Premier League",
                "ccode": "ENG",
                "matches": [
                    {
                        "id": 4193741,
                        "leagueId": 47,
                        "time": "01.01.2024 20:00",
                        "home": {"id": 8650, "name": "Liverpool", "score": 4},
                        "away": {"id": 10204, "name": "Newcastle", "score": 2},
                        "statusId": 6,
                        "status": {
                            "utcTime": "2024-01-01T20:00:00.000Z",
                            "started": True,
                            "finished": True,
                            "cancelled": False,
                            "scoreStr": "4 - 2",
                        },
                        "timeTS": 1704139200000,
                    }
                ],
            }
        ],
    }


@pytest.fixture
def all_leagues_payload() -> dict[str, Any]:
    return {
        "popular": [
            {"id": 47, "name": "Premier League", "localizedName": "Premier League", "ccode": "ENG"}
        ],
        "international": [
            {
                "ccode": "INT",
                "name": "International",
                "leagues": [{"id": 42, "name": "Champions League", "pageUrl": "/leagues/42"}],
            }
        ],
        "countries": [
            {
                "ccode": "ESP",
                "name": "Spain",
                "leagues": [{"id": 87, "name": "LaLiga", "pageUrl": "/leagues/87"}],
            }
        ],
    }
