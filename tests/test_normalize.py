import pytest

from gameday.core.errors import ParseError
from gameday.services.normalize import ingest_records, normalize
from gameday.services.sportsdata_nfl import build_team_lookup


def test_cfb_uses_full_names_directly(cfb_games):
    games = normalize(cfb_games, "CFB")
    assert games[1] == {
        "league": "CFB",
        "home": "Ohio State Buckeyes",
        "away": "Texas Longhorns",
        "dateTime": "2025-08-30T12:00:00",
        "day": "2025-08-30T00:00:00",
        "week": 1,
        "channel": "FOX",
    }


def test_nfl_codes_resolved_through_lookup(nfl_games, nfl_teams):
    games = normalize(nfl_games, "NFL", build_team_lookup(nfl_teams))
    assert games[0]["home"] == "Philadelphia Eagles"
    assert games[0]["away"] == "Dallas Cowboys"


def test_unknown_code_passes_through_unchanged(nfl_teams):
    rec = {"HomeTeam": "XYZ", "AwayTeam": "ABC", "Week": 3}
    game = normalize([rec], "NFL", build_team_lookup(nfl_teams))[0]
    assert game["home"] == "XYZ"
    assert game["away"] == "ABC"


def test_missing_optional_fields_become_none():
    game = normalize([{"HomeTeam": "PHI", "AwayTeam": "DAL", "Week": 5, "Channel": ""}], "NFL", {})[0]
    assert game["dateTime"] is None
    assert game["day"] is None
    assert game["channel"] is None
    assert game["week"] == 5


def test_week_is_not_coerced():
    game = normalize([{"HomeTeamName": "A", "AwayTeamName": "B", "Week": "three"}], "CFB")[0]
    assert game["week"] == "three"


def test_team_lookup_keys_are_upper_cased():
    lookup = build_team_lookup([{"Key": "phi", "FullName": "Philadelphia Eagles"}, {"Key": "X"}])
    assert lookup == {"PHI": "Philadelphia Eagles"}


def test_ingest_requires_array():
    with pytest.raises(ParseError):
        ingest_records({"Message": "bad key"}, "CFB")


def test_ingest_skips_records_without_teams(caplog):
    payload = [
        {"HomeTeam": "PHI", "AwayTeam": "DAL"},
        {"HomeTeam": "PHI"},
        "junk",
    ]
    with caplog.at_level("WARNING", logger="gameday.normalize"):
        kept = ingest_records(payload, "NFL")
    assert kept == [{"HomeTeam": "PHI", "AwayTeam": "DAL"}]
    assert "skipped 2 record" in caplog.text
