"""Schema for the ``matchDetails`` endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import FotmobModel


class TeamRef(FotmobModel):
    id: int
    name: str


class MatchGeneral(FotmobModel):
    match_id: int | str
    match_name: str | None = None
    match_round: int | str | None = None
    league_id: int | None = None
    league_name: str | None = None
    parent_league_id: int | None = None
    country_code: str | None = None
    home_team: TeamRef
    away_team: TeamRef
    match_time_utc: str | None = Field(default=None, alias="matchTimeUTC")
    started: bool | None = None
    finished: bool | None = None


class HeaderTeam(FotmobModel):
    id: int
    name: str
    score: int | None = None
    image_url: str | None = None
    page_url: str | None = None


class MatchHeader(FotmobModel):
    teams: list[HeaderTeam]
    status: dict[str, Any] | None = None
    events: dict[str, Any] | None = None


class MatchDetails(FotmobModel):
    """Full match page: summary, header, lineups, stats."""

    general: MatchGeneral
    header: MatchHeader
    content: dict[str, Any] | None = None
    nav: list[str] = []
    ongoing: Any = None
    has_pending_var: bool | None = Field(default=None, alias="hasPendingVAR")
