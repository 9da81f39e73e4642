# gameday/core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from platformdirs import user_cache_dir

from gameday.core.errors import ConfigError

APP_NAME = "games"
BASE_URL = "https://api.sportsdata.io/v3"
DEFAULT_SEASON = 2025
DEFAULT_TTL = timedelta(hours=12)

# Cache file per upstream resource
CFB_CACHE_FILE = "cfb_games.json"
NFL_CACHE_FILE = "nfl_schedules.json"
NFL_TEAMS_CACHE_FILE = "nfl_teams.json"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    season: int
    cache_dir: Path
    cache_ttl: timedelta = DEFAULT_TTL
    timezone: Optional[ZoneInfo] = None
    base_url: str = BASE_URL

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigError("Missing API key: set SPORTSDATA_API_KEY in the environment or .env")
        return self.api_key

    @property
    def cfb_url(self) -> str:
        return f"{self.base_url}/cfb/scores/json/Games/{self.season}"

    @property
    def nfl_url(self) -> str:
        return f"{self.base_url}/nfl/scores/json/Schedules/{self.season}"

    @property
    def nfl_teams_url(self) -> str:
        return f"{self.base_url}/nfl/scores/json/Teams"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build the run configuration from the environment.

    Reads:
      - SPORTSDATA_API_KEY     (checked lazily, see Settings.require_api_key)
      - GAMES_SEASON           season year, default 2025
      - GAMES_CACHE_DIR        override for the per-user cache directory
      - GAMES_CACHE_TTL_HOURS  cache lifetime, default 12
      - GAMES_TIMEZONE         IANA zone for "today" and display; default = system local
    """
    env = os.environ if environ is None else environ

    raw_season = env.get("GAMES_SEASON") or str(DEFAULT_SEASON)
    try:
        season = int(raw_season)
    except ValueError:
        raise ConfigError(f"GAMES_SEASON must be a year, got {raw_season!r}") from None

    raw_ttl = env.get("GAMES_CACHE_TTL_HOURS")
    ttl = DEFAULT_TTL
    if raw_ttl:
        try:
            ttl = timedelta(hours=float(raw_ttl))
        except ValueError:
            raise ConfigError(f"GAMES_CACHE_TTL_HOURS must be a number, got {raw_ttl!r}") from None

    tz = None
    raw_tz = env.get("GAMES_TIMEZONE")
    if raw_tz:
        try:
            tz = ZoneInfo(raw_tz)
        except (ZoneInfoNotFoundError, ValueError):
            raise ConfigError(f"GAMES_TIMEZONE is not a known timezone: {raw_tz!r}") from None

    cache_dir = Path(env.get("GAMES_CACHE_DIR") or user_cache_dir(APP_NAME))

    return Settings(
        api_key=env.get("SPORTSDATA_API_KEY") or None,
        season=season,
        cache_dir=cache_dir,
        cache_ttl=ttl,
        timezone=tz,
    )
