"""Schema for the ``searchapi/suggest`` endpoint."""

from __future__ import annotations

from pydantic import RootModel

from .base import FotmobModel


class Suggestion(FotmobModel):
    type: str
    id: int | str
    name: str | None = None
    score: float | None = None
    team_id: int | None = None
    team_name: str | None = None
    league_id: int | None = None
    league_name: str | None = None


class SuggestionGroup(FotmobModel):
    title: dict[str, str] | None = None
    suggestions: list[Suggestion]


class SearchResults(RootModel[list[SuggestionGroup]]):
    """Grouped search suggestions (teams, players, leagues, matches)."""

    def suggestions(self, kind: str | None = None) -> list[Suggestion]:
        """Flatten suggestions, optionally keeping only one ``type``."""
        return [
            s
            for group in self.root
            for s in group.suggestions
            if kind is None or s.type == kind
        ]
