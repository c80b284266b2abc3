"""Schemas for the ``teams`` and ``teamseasonstats`` endpoints."""

from __future__ import annotations

from typing import Any

from .base import FotmobModel


class TeamDetails(FotmobModel):
    id: int
    type: str | None = None
    name: str
    short_name: str | None = None
    country: str | None = None
    latest_season: str | None = None


class Team(FotmobModel):
    """Team page payload (``teams?id=...&tab=...``)."""

    details: TeamDetails
    tabs: list[str] = []
    all_available_seasons: list[str] = []
    overview: dict[str, Any] | None = None
    table: list[Any] | None = None
    fixtures: dict[str, Any] | None = None
    squad: Any = None
    stats: dict[str, Any] | None = None


class TeamSeasonStats(FotmobModel):
    """Per-season statistics for one team in one tournament.

    The payload layout differs between competitions, so nothing beyond the
    identifiers is typed.
    """

    team_id: int | None = None
    tournament_id: int | None = None
