"""Schema for the ``playerData`` endpoint."""

from __future__ import annotations

from typing import Any

from .base import FotmobModel


class PrimaryTeam(FotmobModel):
    team_id: int
    team_name: str
    on_loan: bool | None = None


class Player(FotmobModel):
    """Player profile."""

    id: int
    name: str
    birth_date: dict[str, Any] | None = None
    is_captain: bool | None = None
    primary_team: PrimaryTeam | None = None
    position_description: dict[str, Any] | None = None
    injury_information: dict[str, Any] | None = None
    main_league: dict[str, Any] | None = None
    recent_matches: list[Any] = []
    career_history: dict[str, Any] | None = None
    trophies: dict[str, Any] | None = None
