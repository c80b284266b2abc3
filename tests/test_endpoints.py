"""
Tests for the endpoint methods: URL building and typed results.
"""

from datetime import date

import pytest

from fotmob_data import FotmobClient
from fotmob_data.schemas import AllLeagues, Matches, Player, SearchResults, Transfers, WorldNews

BASE = "https://www.fotmob.com/api/"


def _requested_url(session) -> str:
    return session.get.call_args.args[0]


# ============================================================================
# URL building
# ============================================================================


@pytest.mark.parametrize(
    "call, expected",
    [
        (lambda c: c.get_matches_by_date("20240101"), "matches?date=20240101"),
        (lambda c: c.get_matches_by_date(date(2024, 3, 9)), "matches?date=20240309"),
        (
            lambda c: c.get_league(47),
            "leagues?id=47&tab=overview&type=league&timeZone=America%2FNew_York",
        ),
        (
            lambda c: c.get_league(42, tab="table", type="cup", time_zone="Europe/London"),
            "leagues?id=42&tab=table&type=cup&timeZone=Europe%2FLondon",
        ),
        (lambda c: c.get_all_leagues(), "allLeagues"),
        (
            lambda c: c.get_team(8650),
            "teams?id=8650&tab=overview&type=team&timeZone=America%2FNew_York",
        ),
        (
            lambda c: c.get_team_season_stats(8650, 20720),
            "teamseasonstats?teamId=8650&tournamentId=20720",
        ),
        (lambda c: c.get_player(961995), "playerData?id=961995"),
        (lambda c: c.get_match_details(4193741), "matchDetails?matchId=4193741"),
        (lambda c: c.get_world_news(), "worldnews?page=1&lang=en"),
        (lambda c: c.get_world_news(page=3, lang="de"), "worldnews?page=3&lang=de"),
        (lambda c: c.get_transfers(page=2), "transfers?page=2&lang=en"),
        (lambda c: c.search("Mohamed Salah"), "searchapi/suggest?term=Mohamed+Salah&lang=en"),
    ],
)
def test_endpoint_urls(client, session, make_response, call, expected):
    session.get.return_value = make_response({})

    call(client)

    assert _requested_url(session) == BASE + expected
    assert expected in client.cache


@pytest.mark.parametrize("bad", ["2024-01-01", "19991231", "2024011", "x20240101", 20240101, None])
def test_invalid_match_date_rejected(client, session, bad):
    with pytest.raises(ValueError):
        client.get_matches_by_date(bad)

    session.get.assert_not_called()


def test_empty_search_term_rejected(client, session):
    with pytest.raises(ValueError):
        client.search("   ")

    session.get.assert_not_called()


# ============================================================================
# Typed results
# ============================================================================


def test_matches_by_date_is_typed(client, session, make_response, matches_payload):
    session.get.return_value = make_response(matches_payload)

    result = client.get_matches_by_date("20240101")

    assert isinstance(result, Matches)
    match = result.all_matches()[0]
    assert match.home.name == "Liverpool"
    assert match.status.score_str == "4 - 2"
    assert match.time_ts == 1704139200000


def test_all_leagues_is_typed(client, session, make_response, all_leagues_payload):
    session.get.return_value = make_response(all_leagues_payload)

    result = client.get_all_leagues()

    assert isinstance(result, AllLeagues)
    assert result.find(87).name == "LaLiga"
    assert result.find(42).page_url == "/leagues/42"
    assert result.find(1) is None


def test_player_is_typed(client, session, make_response):
    session.get.return_value = make_response(
        {
            "id": 292462,
            "name": "Mohamed Salah",
            "primaryTeam": {"teamId": 8650, "teamName": "Liverpool", "onLoan": False},
            "isCaptain": False,
        }
    )

    result = client.get_player(292462)

    assert isinstance(result, Player)
    assert result.primary_team.team_name == "Liverpool"


def test_world_news_is_typed(client, session, make_response):
    session.get.return_value = make_response(
        [{"id": "abc", "title": "Derby day", "page": {"url": "/news/abc"}}]
    )

    result = client.get_world_news()

    assert isinstance(result, WorldNews)
    assert [item.title for item in result] == ["Derby day"]


def test_transfers_are_typed(client, session, make_response):
    session.get.return_value = make_response(
        {
            "hits": 1,
            "transfers": [
                {
                    "name": "Jude Bellingham",
                    "playerId": 1,
                    "fromClub": "Dortmund",
                    "toClub": "Real Madrid",
                    "fee": {"feeText": "fee", "value": 103000000},
                }
            ],
        }
    )

    result = client.get_transfers()

    assert isinstance(result, Transfers)
    assert result.transfers[0].fee.value == 103000000


def test_search_is_typed(client, session, make_response):
    session.get.return_value = make_response(
        [
            {
                "title": {"key": "players", "value": "Players"},
                "suggestions": [
                    {"type": "player", "id": "292462", "name": "Mohamed Salah", "teamId": 8650},
                    {"type": "team", "id": "8650", "name": "Liverpool"},
                ],
            }
        ]
    )

    result = client.search("salah")

    assert isinstance(result, SearchResults)
    assert [s.name for s in result.suggestions("player")] == ["Mohamed Salah"]
    assert len(result.suggestions()) == 2


def test_generic_request_returns_plain_json(client, session, make_response):
    session.get.return_value = make_response([1, 2, 3])

    assert client.request("custom", {"a": "b"}) == [1, 2, 3]
    assert _requested_url(session) == BASE + "custom?a=b"


@pytest.mark.parametrize("bad", [None, 123, ["salah"]])
def test_non_string_search_term_rejected(client, session, bad):
    with pytest.raises(ValueError):
        client.search(bad)

    session.get.assert_not_called()


def test_boolean_params_are_lower_case(client, session, make_response):
    session.get.return_value = make_response({})

    client.request("custom", {"flag": True, "other": False, "n": 1})

    assert _requested_url(session) == BASE + "custom?flag=true&other=false&n=1"


def test_build_url_without_params():
    assert FotmobClient.build_url("allLeagues") == "allLeagues"
    assert FotmobClient.build_url("allLeagues", {}) == "allLeagues"
