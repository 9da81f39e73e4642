import json
from pathlib import Path

import httpx
import pytest

from gameday.core.config import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(api_key="test-key", season=2025, cache_dir=tmp_path / "cache")


class FakeSportsData:
    """httpx.MockTransport handler serving fixed payloads per URL path and counting calls."""

    def __init__(self, routes: dict):
        self.routes = routes
        self.calls: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        for suffix, payload in self.routes.items():
            if request.url.path.endswith(suffix):
                if isinstance(payload, httpx.Response):
                    return payload
                return httpx.Response(200, content=json.dumps(payload).encode())
        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def nfl_teams():
    return [
        {"Key": "PHI", "FullName": "Philadelphia Eagles"},
        {"Key": "DAL", "FullName": "Dallas Cowboys"},
    ]


@pytest.fixture
def cfb_games():
    # not in kickoff order
    return [
        {"HomeTeamName": "Alabama Crimson Tide", "AwayTeamName": "Florida State Seminoles",
         "DateTime": "2025-08-30T15:30:00", "Day": "2025-08-30T00:00:00", "Week": 1, "Channel": "ABC"},
        {"HomeTeamName": "Ohio State Buckeyes", "AwayTeamName": "Texas Longhorns",
         "DateTime": "2025-08-30T12:00:00", "Day": "2025-08-30T00:00:00", "Week": 1, "Channel": "FOX"},
    ]


@pytest.fixture
def nfl_games():
    return [
        {"HomeTeam": "PHI", "AwayTeam": "DAL", "DateTime": "2025-08-30T20:20:00",
         "Day": "2025-08-30T00:00:00", "Week": 1, "Channel": "NBC"},
    ]


@pytest.fixture
def fake_api(nfl_teams, cfb_games, nfl_games):
    return FakeSportsData({
        "/nfl/scores/json/Teams": nfl_teams,
        "/cfb/scores/json/Games/2025": cfb_games,
        "/nfl/scores/json/Schedules/2025": nfl_games,
    })
