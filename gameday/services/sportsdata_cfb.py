# gameday/services/sportsdata_cfb.py

from __future__ import annotations

import logging
from typing import List

import httpx

from gameday.core.cache import CacheStore
from gameday.core.config import CFB_CACHE_FILE, Settings
from gameday.models.types import Game
from gameday.services.normalize import ingest_records, normalize
from gameday.services.sportsdata_common import api_params, fetch_cached

logger = logging.getLogger("gameday.cfb")


async def get_cfb_games(
    client: httpx.AsyncClient, settings: Settings, store: CacheStore
) -> List[Game]:
    """College games for the configured season; team names come through as display names."""
    data = await fetch_cached(
        client, settings, store, settings.cfb_url, CFB_CACHE_FILE, api_params(settings)
    )
    games = normalize(ingest_records(data, "CFB"), "CFB")
    logger.info("CFB season=%s -> %d games", settings.season, len(games))
    return games
