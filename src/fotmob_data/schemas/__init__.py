"""Typed schemas for FotMob API responses

Each endpoint has a pydantic model; ``cast_json`` turns raw JSON text into
one of them or raises ``CastingError``.
"""

from .base import CastingError, FotmobModel, cast_json
from .leagues import AllLeagues, League
from .match_details import MatchDetails
from .matches import Match, Matches
from .news import NewsItem, WorldNews
from .players import Player
from .search import SearchResults, Suggestion
from .teams import Team, TeamSeasonStats
from .transfers import Transfer, Transfers

__all__ = [
    "AllLeagues",
    "CastingError",
    "FotmobModel",
    "League",
    "Match",
    "MatchDetails",
    "Matches",
    "NewsItem",
    "Player",
    "SearchResults",
    "Suggestion",
    "Team",
    "TeamSeasonStats",
    "Transfer",
    "Transfers",
    "WorldNews",
    "cast_json",
]
