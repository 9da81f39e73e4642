# gameday/models/types.py
from typing import Any, Dict, Optional, Union
from typing_extensions import Literal, TypedDict

League = Literal["CFB", "NFL"]


class Game(TypedDict):
    league: League
    home: str
    away: str
    dateTime: Optional[str]
    day: Optional[str]
    week: Any  # int from upstream; not coerced
    channel: Optional[str]


# ---- Upstream shapes (only the consumed fields) ----

class CfbRecord(TypedDict, total=False):
    HomeTeamName: str
    AwayTeamName: str
    DateTime: Optional[str]
    Day: Optional[str]
    Week: int
    Channel: Optional[str]


class NflRecord(TypedDict, total=False):
    HomeTeam: str
    AwayTeam: str
    DateTime: Optional[str]
    Day: Optional[str]
    Week: int
    Channel: Optional[str]


class NflTeamRecord(TypedDict, total=False):
    Key: str
    FullName: str


UpstreamRecord = Union[CfbRecord, NflRecord]
TeamLookup = Dict[str, str]
