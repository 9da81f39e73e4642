# gameday/services/sportsdata_nfl.py
from __future__ import annotations

import logging
from typing import Any, List

import httpx

from gameday.core.cache import CacheStore
from gameday.core.config import NFL_CACHE_FILE, NFL_TEAMS_CACHE_FILE, Settings
from gameday.core.errors import ParseError
from gameday.models.types import Game, NflTeamRecord, TeamLookup
from gameday.services.normalize import ingest_records, normalize
from gameday.services.sportsdata_common import api_params, fetch_cached

logger = logging.getLogger("gameday.nfl")


def build_team_lookup(payload: Any) -> TeamLookup:
    """Map upper-cased team Key -> FullName from the Teams directory."""
    if not isinstance(payload, list):
        raise ParseError("NFL teams", f"expected a JSON array, got {type(payload).__name__}")

    lookup: TeamLookup = {}
    t: NflTeamRecord
    for t in payload:
        if not isinstance(t, dict):
            continue
        key, full = t.get("Key"), t.get("FullName")
        if not key or not full:
            continue
        lookup[str(key).upper()] = full
    return lookup


async def resolve_teams(
    client: httpx.AsyncClient, settings: Settings, store: CacheStore
) -> TeamLookup:
    data = await fetch_cached(
        client, settings, store, settings.nfl_teams_url, NFL_TEAMS_CACHE_FILE, api_params(settings)
    )
    lookup = build_team_lookup(data)
    logger.info("NFL team lookup: %d teams", len(lookup))
    return lookup


async def get_nfl_games(
    client: httpx.AsyncClient,
    settings: Settings,
    store: CacheStore,
    team_lookup: TeamLookup,
) -> List[Game]:
    data = await fetch_cached(
        client, settings, store, settings.nfl_url, NFL_CACHE_FILE, api_params(settings)
    )
    games = normalize(ingest_records(data, "NFL"), "NFL", team_lookup)
    logger.info("NFL season=%s -> %d games", settings.season, len(games))
    return games
