"""Schema for the ``worldnews`` endpoint."""

from __future__ import annotations

from pydantic import RootModel

from .base import FotmobModel


class NewsPage(FotmobModel):
    url: str


class NewsItem(FotmobModel):
    id: int | str
    title: str
    image_url: str | None = None
    lead: str | None = None
    page: NewsPage | None = None
    source_str: str | None = None
    source_icon_url: str | None = None
    gmt_time: str | None = None


class WorldNews(RootModel[list[NewsItem]]):
    """A page of news items."""

    def __iter__(self):  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)
