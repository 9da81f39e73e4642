# gameday/services/slate.py
from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta, tzinfo
from functools import cmp_to_key
from typing import Iterable, List, Optional

from gameday.models.types import Game

logger = logging.getLogger("gameday.slate")

WEEKDAYS = ["MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"]


# -----------------------------------------------------------
# Date helpers
# -----------------------------------------------------------
def compute_target_date(offset: int, tz: Optional[tzinfo] = None, today: Optional[date] = None) -> str:
    """today (in `tz`, default local) + offset days, as YYYY-MM-DD."""
    base = today or datetime.now(tz).date()
    return (base + timedelta(days=offset)).isoformat()


def _parse_ts(value: str, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """
    ISO timestamp -> datetime. Zone-aware values are moved into `tz`
    (local when None); naive values are kept as the upstream wall clock.
    """
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(tz)
    return dt


def format_date(value: str, tz: Optional[tzinfo] = None) -> str:
    dt = _parse_ts(value, tz)
    if dt is None:
        return value
    return f"{dt:%Y-%m-%d} {WEEKDAYS[dt.weekday()]}"


def format_time(value: str, tz: Optional[tzinfo] = None) -> str:
    dt = _parse_ts(value, tz)
    if dt is None:
        return "TBD"
    return dt.strftime("%I:%M %p")


# -----------------------------------------------------------
# Filters
# -----------------------------------------------------------
def filter_by_date(games: Iterable[Game], target_date: str) -> List[Game]:
    out = []
    for g in games:
        if g["dateTime"]:
            if g["dateTime"].startswith(target_date):
                out.append(g)
        elif g["day"] and g["day"].startswith(target_date):
            out.append(g)
    return out


def filter_by_team(games: Iterable[Game], team: str) -> List[Game]:
    search = team.lower()
    return [
        g for g in games
        if search in str(g["home"]).lower() or search in str(g["away"]).lower()
    ]


# -----------------------------------------------------------
# Sort: week, then start time
# -----------------------------------------------------------
def _week_value(g: Game) -> float:
    w = g["week"]
    if isinstance(w, bool) or not isinstance(w, (int, float)):
        return math.nan
    return float(w)


def _effective_time(g: Game) -> float:
    value = g["dateTime"] or g["day"]
    if not value:
        return 0.0
    dt = _parse_ts(value)
    if dt is None:
        return math.nan
    return dt.timestamp()


def _compare(a: Game, b: Game) -> int:
    # NaN on either side compares equal, so malformed weeks/times stay where they are
    wa, wb = _week_value(a), _week_value(b)
    if wa != wb:
        diff = wa - wb
        return 0 if math.isnan(diff) else (1 if diff > 0 else -1)
    diff = _effective_time(a) - _effective_time(b)
    if math.isnan(diff) or diff == 0:
        return 0
    return 1 if diff > 0 else -1


def sort_games(games: Iterable[Game]) -> List[Game]:
    return sorted(games, key=cmp_to_key(_compare))


# -----------------------------------------------------------
# Rendering
# -----------------------------------------------------------
def format_game_line(g: Game, tz: Optional[tzinfo] = None) -> str:
    if g["dateTime"]:
        date_label = format_date(g["dateTime"], tz)
        start = format_time(g["dateTime"], tz)
    elif g["day"]:
        date_label = format_date(g["day"], tz)
        start = "TBD"
    else:
        date_label = f"WEEK {g['week']} (TBD)"
        start = "TBD"

    return (
        f"[{date_label}][{g['league']}] {g['away']} @ {g['home']} - {start} - "
        f"Channel: {g['channel'] or 'N/A'}"
    )


def build_slate(
    games: Iterable[Game],
    offset: Optional[int] = None,
    team: Optional[str] = None,
    tz: Optional[tzinfo] = None,
    today: Optional[date] = None,
) -> List[str]:
    """
    Filter, sort and render the combined schedule into output lines.

    offset=None means no date filter; an empty/None team means no team filter.
    An empty result yields a single informational line.
    """
    selected = list(games)
    target_date = compute_target_date(offset, tz, today) if offset is not None else None

    if target_date is not None:
        selected = filter_by_date(selected, target_date)
    if team:
        selected = filter_by_team(selected, team)

    logger.info("slate: target_date=%s team=%r -> %d games", target_date, team, len(selected))

    if not selected:
        msg = "No games found"
        if team:
            msg += f' for team matching "{team}"'
        if offset is not None:
            msg += f" on day offset {offset}"
        return [msg + "."]

    if target_date is not None:
        label = f"Games for {target_date}"
    elif team:
        label = f'All games for teams matching "{team}"'
    else:
        label = "Games"

    lines = [f"{label}:", ""]
    lines.extend(format_game_line(g, tz) for g in sort_games(selected))
    return lines
