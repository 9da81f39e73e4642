# gameday/services/sportsdata_common.py

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import httpx

from gameday.core.cache import CacheStore
from gameday.core.config import Settings
from gameday.core.errors import NetworkError, ParseError

logger = logging.getLogger("gameday.sportsdata")

HEADERS = {"User-Agent": "games-cli", "Accept": "application/json"}


def build_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Shared async client; default transport timeouts are left untouched."""
    return httpx.AsyncClient(headers=HEADERS, transport=transport)


def _decode(raw: bytes, source: str) -> Any:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(source, str(e)) from e


# -----------------------------------------------------------
# Cache-first GET
# -----------------------------------------------------------
async def fetch_cached(
    client: httpx.AsyncClient,
    settings: Settings,
    store: CacheStore,
    url: str,
    cache_key: str,
    params: Optional[Dict[str, Any]] = None,
) -> Any:
    """
    Return the parsed JSON for `url`, served from `store` while the entry is
    younger than settings.cache_ttl.

    A single attempt is made on a miss. The payload is written back
    pretty-printed before being returned. A corrupt cache entry is an error,
    not a reason to refetch.
    """
    store.ensure()

    if store.is_fresh(cache_key, settings.cache_ttl):
        raw = store.read(cache_key)
        if raw is not None:
            logger.info("cache hit %s", cache_key)
            return _decode(raw, str(store.path_for(cache_key)))

    logger.info("cache miss %s -> GET %s", cache_key, url)
    try:
        r = await client.get(url, params=params)
    except httpx.TransportError as e:
        raise NetworkError(None, url, repr(e)) from e

    if not r.is_success:
        raise NetworkError(r.status_code, url)

    data = _decode(r.content, url)
    store.write(cache_key, json.dumps(data, indent=2).encode("utf-8"))
    return data


def api_params(settings: Settings) -> Dict[str, str]:
    return {"key": settings.require_api_key()}
