"""Schemas for the ``matches`` endpoint (fixtures on a given date)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import FotmobModel


class MatchTeam(FotmobModel):
    id: int
    name: str
    long_name: str | None = None
    score: int | None = None
    red_cards: int | None = None


class MatchStatus(FotmobModel):
    utc_time: str | None = None
    started: bool | None = None
    finished: bool | None = None
    cancelled: bool | None = None
    score_str: str | None = None
    reason: dict[str, Any] | None = None


class Match(FotmobModel):
    id: int
    league_id: int | None = None
    time: str | None = None
    home: MatchTeam
    away: MatchTeam
    status_id: int | None = None
    tournament_stage: str | None = None
    status: MatchStatus
    time_ts: int | None = Field(default=None, alias="timeTS")


class MatchesLeague(FotmobModel):
    id: int
    primary_id: int | None = None
    name: str
    ccode: str | None = None
    parent_league_id: int | None = None
    parent_league_name: str | None = None
    is_group: bool | None = None
    group_name: str | None = None
    matches: list[Match]


class Matches(FotmobModel):
    """All leagues with matches on a date, as returned by ``matches?date=``."""

    leagues: list[MatchesLeague]
    date: str | None = None

    def all_matches(self) -> list[Match]:
        """Flatten matches across leagues."""
        return [m for league in self.leagues for m in league.matches]
