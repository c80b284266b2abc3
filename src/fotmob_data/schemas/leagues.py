"""Schemas for the ``leagues`` and ``allLeagues`` endpoints."""

from __future__ import annotations

from typing import Any

from .base import FotmobModel


class LeagueDetails(FotmobModel):
    id: int
    type: str | None = None
    name: str
    short_name: str | None = None
    country: str | None = None
    selected_season: str | None = None
    latest_season: str | None = None
    gender: str | None = None


class League(FotmobModel):
    """League page payload (``leagues?id=...&tab=...``)."""

    details: LeagueDetails
    tabs: list[str] = []
    all_available_seasons: list[str] = []
    table: list[Any] | None = None
    matches: dict[str, Any] | None = None
    stats: dict[str, Any] | None = None


class LeagueRef(FotmobModel):
    id: int
    name: str
    localized_name: str | None = None
    page_url: str | None = None


class CountryLeagues(FotmobModel):
    ccode: str
    name: str
    localized_name: str | None = None
    leagues: list[LeagueRef]


class PopularLeague(LeagueRef):
    ccode: str | None = None


class AllLeagues(FotmobModel):
    """Every league FotMob covers, grouped by country."""

    popular: list[PopularLeague] = []
    international: list[CountryLeagues] = []
    countries: list[CountryLeagues]

    def find(self, league_id: int) -> LeagueRef | None:
        """Look up a league by id across all groups."""
        for league in self.popular:
            if league.id == league_id:
                return league
        for group in (*self.international, *self.countries):
            for league in group.leagues:
                if league.id == league_id:
                    return league
        return None
