"""FotMob API Client

Thin wrapper around the public FotMob web API (https://www.fotmob.com/api/)
with per-URL response caching, x-mas token bootstrap, and typed decoding.

**Architecture**:
- FotmobClient: shared requests.Session carrying browser-like headers and
  the XMasTokenAuth hook
- safe_type_cast_fetch(): fetch -> cache -> decode pipeline used by every
  endpoint method
- Endpoint methods: one per API category (matches, leagues, teams, players,
  transfers, news, search), plus request() for anything else

**Decoding**:
Each endpoint decodes the raw JSON text into a pydantic model from
``fotmob_data.schemas``. When the payload does not fit the model (FotMob
changes shapes without notice) the raw parsed JSON is returned instead.

**Usage**:
    from fotmob_data import FotmobClient

    client = FotmobClient()

    matches = client.get_matches_by_date("20240101")
    for match in matches.all_matches():
        print(match.home.name, match.status.score_str, match.away.name)

    league = client.get_league(47)          # Premier League
    details = client.get_match_details(4193450)

    # Any other endpoint, decoded as plain JSON
    data = client.request("tltable", {"leagueId": 47})

**Endpoint Catalog** (relative to base URL):
- GET matches?date=YYYYMMDD
- GET leagues?id=N&tab=T&type=league&timeZone=TZ
- GET allLeagues
- GET teams?id=N&tab=T&type=team&timeZone=TZ
- GET teamseasonstats?teamId=N&tournamentId=N
- GET playerData?id=N
- GET matchDetails?matchId=N
- GET worldnews?page=N&lang=L
- GET transfers?page=N&lang=L
- GET searchapi/suggest?term=Q&lang=L
"""

from __future__ import annotations

import json
import logging
import re
import time
from collections.abc import Callable
from datetime import date as date_type
from functools import partial
from typing import Any, TypeVar
from urllib.parse import urlencode

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .auth import XMasTokenAuth
from .cache import ResponseCache
from .config import FotmobConfig
from .exceptions import (
    FotmobAPIError,
    FotmobHTTPError,
    FotmobNoResponseError,
    FotmobRequestSetupError,
    FotmobResponseError,
)
from .schemas import (
    AllLeagues,
    League,
    MatchDetails,
    Matches,
    Player,
    SearchResults,
    Team,
    TeamSeasonStats,
    Transfers,
    WorldNews,
    cast_json,
)
from .schemas.base import CastingError
from .utils.logging import log_error, log_event, log_request

logger = logging.getLogger(__name__)

T = TypeVar("T")

DATE_RE = re.compile(r"(20\d{2})(\d{2})(\d{2})")

DEFAULT_TIME_ZONE = "America/New_York"

AUTH_FAILURE_STATUSES = (401, 403)


class FotmobClient:
    """Client for the FotMob web API.

    This client handles:
    - Connection pooling via shared Session
    - x-mas token bootstrap on the first request (see XMasTokenAuth)
    - In-memory caching of raw responses per request URL (no eviction)
    - Casting responses to pydantic models, with raw JSON fallback
    - Normalizing failures into FotmobError subclasses

    Args:
        config: Client configuration (default: FotmobConfig.from_env())
        session: Optional pre-built requests.Session to use

    Example:
        >>> client = FotmobClient()
        >>> leagues = client.get_all_leagues()
        >>> [league.name for league in leagues.popular][:3]
        ['Premier League', 'Champions League', 'LaLiga']
    """

    def __init__(
        self,
        config: FotmobConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or FotmobConfig.from_env()
        self.base_url = self.config.normalized_base_url
        self.timeout = self.config.timeout_seconds
        self.cache = ResponseCache()

        self.auth = XMasTokenAuth(
            self.config.token_url, timeout=self.timeout, token=self.config.token
        )

        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/json",
                "User-Agent": self.config.user_agent,
            }
        )
        self.session.auth = self.auth

        if self.config.max_retries > 0:
            retries = Retry(
                total=self.config.max_retries,
                backoff_factor=1,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retries)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

        logger.debug(
            f"Initialized FotmobClient: base_url={self.base_url}, "
            f"timeout={self.timeout}s, max_retries={self.config.max_retries}"
        )

    def __enter__(self) -> "FotmobClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    # ========================================
    # Token / cache helpers
    # ========================================

    @property
    def xmas(self) -> str | None:
        """Current x-mas token, or None if not bootstrapped yet."""
        return self.auth.token

    def ensure_token(self) -> str:
        """Bootstrap the x-mas token now instead of on the first request."""
        return self.auth.ensure_token()

    def refresh_token(self) -> str:
        """Drop the current x-mas token and bootstrap a new one."""
        self.auth.reset()
        return self.auth.ensure_token()

    def clear_cache(self) -> None:
        """Drop every cached response."""
        self.cache.clear()

    @staticmethod
    def build_url(path: str, params: dict[str, Any] | None = None) -> str:
        """Build a relative request URL (the cache key) from path and params.

        Booleans are sent lower-case (``true``/``false``).

        Example:
            >>> FotmobClient.build_url("playerData", {"id": 961995})
            'playerData?id=961995'
        """
        if not params:
            return path
        query = {k: str(v).lower() if isinstance(v, bool) else v for k, v in params.items()}
        return f"{path}?{urlencode(query)}"

    # ========================================
    # Request pipeline
    # ========================================

    def safe_type_cast_fetch(self, url: str, decoder: Callable[[str], T]) -> T | Any:
        """Fetch a URL (or take it from cache) and decode it.

        Args:
            url: Request URL relative to the base URL (path plus query string)
            decoder: Function mapping raw JSON text to a typed value; raises
                CastingError when the JSON does not fit

        Returns:
            The decoded value, or the raw parsed JSON if decoding raised
            CastingError

        Raises:
            FotmobHTTPError: Non-2xx status code
            FotmobNoResponseError: Connection failure or timeout
            FotmobRequestSetupError: Request could not be built or sent
                (including x-mas token bootstrap failures)
            FotmobAPIError: Response body carries an ``error`` field
            FotmobResponseError: Response body is not JSON
        """
        cached = self.cache.get(url)
        if cached is not None:
            return self._decode(url, cached, decoder)

        text = self._fetch(url)

        self.cache.set(url, text)
        return self._decode(url, text, decoder)

    def _fetch(self, url: str) -> str:
        """GET a URL and return the raw body text after the API error check."""
        full_url = f"{self.base_url}{url}"
        start = time.perf_counter()

        try:
            logger.debug(f"Request: GET {full_url}")
            response = self.session.get(full_url, timeout=self.timeout)
            response.raise_for_status()

        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else 0
            logger.error(f"FotMob HTTP error {status}: {url}")
            log_error(
                error=f"HTTP error! status: {status}", error_type="FotmobHTTPError", url=url
            )
            if status in AUTH_FAILURE_STATUSES:
                # Stale or revoked x-mas token: bootstrap a fresh one on the next request
                self.auth.reset()
            raise FotmobHTTPError(status, url) from exc

        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.error(f"No response from FotMob: {url} - {exc!r}")
            log_error(error=repr(exc), error_type="FotmobNoResponseError", url=url)
            raise FotmobNoResponseError(url) from exc

        except requests.RequestException as exc:
            logger.error(f"Could not set up request: {url} - {exc!r}")
            log_error(error=repr(exc), error_type="FotmobRequestSetupError", url=url)
            raise FotmobRequestSetupError(str(exc)) from exc

        log_request(
            url=url,
            status_code=response.status_code,
            duration_ms=(time.perf_counter() - start) * 1000,
        )

        text = response.text
        try:
            data = json.loads(text)
        except ValueError as exc:
            log_error(error=str(exc), error_type="FotmobResponseError", url=url)
            raise FotmobResponseError(f"Response from {url} is not valid JSON: {exc}") from exc

        if isinstance(data, dict) and data.get("error"):
            payload = json.dumps(data)
            log_error(error=payload, error_type="FotmobAPIError", url=url)
            raise FotmobAPIError(payload, data)

        return text

    def _decode(self, url: str, text: str, decoder: Callable[[str], T]) -> T | Any:
        try:
            return decoder(text)
        except CastingError as exc:
            logger.warning(f"Returning raw JSON for {url}: {exc}")
            log_event(level=logging.WARNING, event="cast_fallback", url=url, error=str(exc))
            return json.loads(text)

    # ========================================
    # Matches
    # ========================================

    def get_matches_by_date(self, date: str | date_type) -> Matches | Any:
        """Get all matches on a given day.

        Endpoint: GET matches?date=YYYYMMDD

        Args:
            date: Day as ``YYYYMMDD`` string or ``datetime.date``

        Returns:
            Matches grouped by league

        Raises:
            ValueError: If the date is not a YYYYMMDD string in the 2000s

        Example:
            >>> matches = client.get_matches_by_date("20240101")
            >>> len(matches.all_matches())
            212
        """
        if isinstance(date, date_type):
            date = date.strftime("%Y%m%d")

        if not isinstance(date, str) or not DATE_RE.fullmatch(date):
            raise ValueError(f"date must be YYYYMMDD (e.g. '20240101'), got {date!r}")

        url = self.build_url("matches", {"date": date})
        return self.safe_type_cast_fetch(url, partial(cast_json, Matches))

    def get_match_details(self, match_id: int | str) -> MatchDetails | Any:
        """Get the full match page (header, lineups, stats, events).

        Endpoint: GET matchDetails?matchId=N
        """
        url = self.build_url("matchDetails", {"matchId": match_id})
        return self.safe_type_cast_fetch(url, partial(cast_json, MatchDetails))

    # ========================================
    # Leagues
    # ========================================

    def get_league(
        self,
        id: int | str,
        tab: str = "overview",
        type: str = "league",
        time_zone: str = DEFAULT_TIME_ZONE,
    ) -> League | Any:
        """Get a league page.

        Endpoint: GET leagues?id=N&tab=T&type=league&timeZone=TZ

        Args:
            id: FotMob league id (e.g. 47 for the Premier League)
            tab: Page tab ("overview", "table", "matches", "stats", ...)
            type: Competition type ("league" or "cup")
            time_zone: IANA time zone used for kickoff times
        """
        url = self.build_url(
            "leagues", {"id": id, "tab": tab, "type": type, "timeZone": time_zone}
        )
        return self.safe_type_cast_fetch(url, partial(cast_json, League))

    def get_all_leagues(self) -> AllLeagues | Any:
        """Get every league FotMob covers.

        Endpoint: GET allLeagues
        """
        return self.safe_type_cast_fetch("allLeagues", partial(cast_json, AllLeagues))

    # ========================================
    # Teams
    # ========================================

    def get_team(
        self,
        id: int | str,
        tab: str = "overview",
        type: str = "team",
        time_zone: str = DEFAULT_TIME_ZONE,
    ) -> Team | Any:
        """Get a team page.

        Endpoint: GET teams?id=N&tab=T&type=team&timeZone=TZ
        """
        url = self.build_url(
            "teams", {"id": id, "tab": tab, "type": type, "timeZone": time_zone}
        )
        return self.safe_type_cast_fetch(url, partial(cast_json, Team))

    def get_team_season_stats(
        self, team_id: int | str, season_id: int | str
    ) -> TeamSeasonStats | Any:
        """Get a team's statistics for one season of a tournament.

        Endpoint: GET teamseasonstats?teamId=N&tournamentId=N

        Args:
            team_id: FotMob team id
            season_id: Tournament season id (``tournamentId`` in the API)
        """
        url = self.build_url("teamseasonstats", {"teamId": team_id, "tournamentId": season_id})
        return self.safe_type_cast_fetch(url, partial(cast_json, TeamSeasonStats))

    # ========================================
    # Players
    # ========================================

    def get_player(self, id: int | str) -> Player | Any:
        """Get a player profile.

        Endpoint: GET playerData?id=N
        """
        url = self.build_url("playerData", {"id": id})
        return self.safe_type_cast_fetch(url, partial(cast_json, Player))

    # ========================================
    # News / transfers / search
    # ========================================

    def get_world_news(self, page: int = 1, lang: str = "en") -> WorldNews | Any:
        """Get a page of world football news.

        Endpoint: GET worldnews?page=N&lang=L
        """
        url = self.build_url("worldnews", {"page": page, "lang": lang})
        return self.safe_type_cast_fetch(url, partial(cast_json, WorldNews))

    def get_transfers(self, page: int = 1, lang: str = "en") -> Transfers | Any:
        """Get a page of recent transfers.

        Endpoint: GET transfers?page=N&lang=L
        """
        url = self.build_url("transfers", {"page": page, "lang": lang})
        return self.safe_type_cast_fetch(url, partial(cast_json, Transfers))

    def search(self, term: str, lang: str = "en") -> SearchResults | Any:
        """Search teams, players, leagues and matches by name.

        Endpoint: GET searchapi/suggest?term=Q&lang=L

        Raises:
            ValueError: If the term is not a non-empty string
        """
        if not isinstance(term, str) or not term.strip():
            raise ValueError("search term must not be empty")

        url = self.build_url("searchapi/suggest", {"term": term.strip(), "lang": lang})
        return self.safe_type_cast_fetch(url, partial(cast_json, SearchResults))

    # ========================================
    # Generic
    # ========================================

    def request(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Fetch any endpoint and return plain parsed JSON.

        Args:
            path: Path relative to the base URL (e.g. "tltable")
            params: Query parameters
        """
        url = self.build_url(path.lstrip("/"), params)
        return self.safe_type_cast_fetch(url, json.loads)
