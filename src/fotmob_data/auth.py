"""x-mas token authentication

FotMob rejects API calls that lack an ``x-mas`` header. The header value is
handed out by a small bootstrap service; ``XMasTokenAuth`` fetches it the
first time a request goes out and attaches it to every request after that.

Usage:
    session = requests.Session()
    session.auth = XMasTokenAuth("http://46.101.91.154:6006/")
    session.get("https://www.fotmob.com/api/allLeagues")
"""

from __future__ import annotations

import logging

import requests
from requests.auth import AuthBase

from .exceptions import FotmobTokenError
from .utils.logging import log_event

logger = logging.getLogger(__name__)

TOKEN_HEADER = "x-mas"


class XMasTokenAuth(AuthBase):
    """Attach a lazily bootstrapped x-mas token to outgoing requests.

    Args:
        token_url: URL returning JSON with an ``x-mas`` field
        timeout: Timeout for the bootstrap request in seconds
        token: Optional pre-seeded token; no bootstrap request is made when set
    """

    def __init__(self, token_url: str, timeout: float = 10.0, token: str | None = None) -> None:
        self.token_url = token_url
        self.timeout = timeout
        self.token = token

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers[TOKEN_HEADER] = self.ensure_token()
        return r

    def ensure_token(self) -> str:
        """Return the token, fetching it from the bootstrap URL on first use.

        Raises:
            FotmobTokenError: If the bootstrap request fails or the response
                has no usable ``x-mas`` field. The token stays unset, so the
                next call tries again.
        """
        if self.token:
            return self.token

        logger.info(f"Fetching x-mas token from {self.token_url}")
        try:
            # Plain requests.get: the session this auth is attached to must not recurse into it
            response = requests.get(self.token_url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error(f"Token bootstrap failed: {exc!r}")
            raise FotmobTokenError(f"could not fetch x-mas token: {exc}") from exc

        token = data.get(TOKEN_HEADER) if isinstance(data, dict) else None
        if not token or not isinstance(token, str):
            raise FotmobTokenError(f"token response has no {TOKEN_HEADER!r} field")

        self.token = token
        log_event(level=logging.INFO, event="token_bootstrap", url=self.token_url)
        return token

    def reset(self) -> None:
        """Forget the current token so the next request bootstraps again."""
        self.token = None
