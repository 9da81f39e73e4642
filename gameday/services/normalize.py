# gameday/services/normalize.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from gameday.core.errors import ParseError
from gameday.models.types import Game, League, TeamLookup, UpstreamRecord

logger = logging.getLogger("gameday.normalize")

# Upstream field names for home/away per league.
# CFB ships display names; NFL ships short codes that go through the team lookup.
TEAM_FIELDS: Dict[str, tuple[str, str]] = {
    "CFB": ("HomeTeamName", "AwayTeamName"),
    "NFL": ("HomeTeam", "AwayTeam"),
}


def ingest_records(payload: Any, league: League) -> List[UpstreamRecord]:
    """
    Boundary check for a schedule payload: must be a JSON array; records that
    are not objects or lack a home/away identifier are dropped.
    Presence only, values are not coerced.
    """
    if not isinstance(payload, list):
        raise ParseError(f"{league} schedule", f"expected a JSON array, got {type(payload).__name__}")

    home_f, away_f = TEAM_FIELDS[league]
    out: List[UpstreamRecord] = []
    skipped = 0
    for rec in payload:
        if not isinstance(rec, dict) or not rec.get(home_f) or not rec.get(away_f):
            skipped += 1
            continue
        out.append(rec)

    if skipped:
        logger.warning("%s: skipped %d record(s) without %s/%s", league, skipped, home_f, away_f)
    return out


def _resolve(code: Any, team_lookup: Optional[Mapping[str, str]]) -> str:
    if not team_lookup:
        return code
    return team_lookup.get(str(code).upper()) or code


def normalize(
    records: List[UpstreamRecord],
    league: League,
    team_lookup: Optional[TeamLookup] = None,
) -> List[Game]:
    home_f, away_f = TEAM_FIELDS[league]
    resolve = league == "NFL"

    games: List[Game] = []
    for g in records:
        home = g.get(home_f)
        away = g.get(away_f)
        if resolve:
            home = _resolve(home, team_lookup)
            away = _resolve(away, team_lookup)
        games.append(
            {
                "league": league,
                "home": home,
                "away": away,
                "dateTime": g.get("DateTime") or None,
                "day": g.get("Day") or None,
                "week": g.get("Week"),
                "channel": g.get("Channel") or None,
            }
        )
    return games
