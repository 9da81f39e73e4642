# gameday/main.py
from __future__ import annotations

import argparse
import asyncio
import logging
import re
import sys
from datetime import date
from importlib.metadata import PackageNotFoundError, version
from typing import Callable, List, Optional, Sequence

import httpx
from dotenv import load_dotenv

from gameday.core.cache import CacheStore
from gameday.core.config import Settings, load_settings
from gameday.core.errors import GamesError, UsageError
from gameday.services.slate import build_slate
from gameday.services.sportsdata_cfb import get_cfb_games
from gameday.services.sportsdata_common import build_client
from gameday.services.sportsdata_nfl import get_nfl_games, resolve_teams

logger = logging.getLogger("gameday.main")

DIST_NAME = "gameday-cli"
_OFFSET_RE = re.compile(r"^\s*[+-]?\d+\s*$")


def _pkg_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"


# ------------ Args ------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="games",
        description="Fetch and display NFL and CFB schedules (cached for 12h)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {_pkg_version()}")
    p.add_argument(
        "-d", "--days",
        default="",
        metavar="OFFSET",
        help="Day offset from today (e.g. 0, +1, -1). Default = today if no team given.",
    )
    p.add_argument("-t", "--team", default="", metavar="NAME", help="Filter games by team (home or away)")
    p.add_argument("--clear-cache", action="store_true", help="Clear the local cache and exit")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    return p


def resolve_offset(days: str, team: str) -> Optional[int]:
    """
    Neither flag -> 0 (today). Team only -> None (no date filter).
    Raises UsageError on a non-integer --days.
    """
    if not days and not team:
        return 0
    if not days:
        return None
    if not _OFFSET_RE.match(days):
        raise UsageError("Invalid value for --days. Use numbers like 0, +1, -1.")
    return int(days)


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


# ------------ Run ------------
async def run(
    settings: Settings,
    offset: Optional[int],
    team: str = "",
    client: httpx.AsyncClient | None = None,
    today: Optional[date] = None,
) -> List[str]:
    """Fetch both leagues (cache-first) and return the rendered output lines."""
    settings.require_api_key()
    store = CacheStore(settings.cache_dir)

    own_client = client is None
    client = client or build_client()
    try:
        # team lookup first: NFL normalization depends on it
        nfl_teams = await resolve_teams(client, settings, store)
        # neither league fetch is cancelled when the other one fails
        results = await asyncio.gather(
            get_cfb_games(client, settings, store),
            get_nfl_games(client, settings, store, nfl_teams),
            return_exceptions=True,
        )
    finally:
        if own_client:
            await client.aclose()

    for res in results:
        if isinstance(res, BaseException):
            raise res
    cfb_games, nfl_games = results

    combined = [*cfb_games, *nfl_games]
    return build_slate(combined, offset=offset, team=team or None, tz=settings.timezone, today=today)


def clear_cache(settings: Settings, echo: Callable[[str], None] = print) -> bool:
    removed = CacheStore(settings.cache_dir).clear()
    if removed:
        echo(f"Cache cleared: {settings.cache_dir}")
    else:
        echo("No cache to clear.")
    return removed


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = load_settings()

        if args.clear_cache:
            clear_cache(settings)
            return 0

        offset = resolve_offset(args.days, args.team)
        lines = asyncio.run(run(settings, offset, args.team))
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1
    except GamesError as e:
        logger.error("Error: %s", e)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
