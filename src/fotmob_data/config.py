"""
Configuration management for the FotMob client.

Provides a single pydantic model that can be built directly or loaded
from environment variables.
"""

import os

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://www.fotmob.com/api/"

# Bootstrap service that hands out the x-mas header value
DEFAULT_TOKEN_URL = "http://46.101.91.154:6006/"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/91.0.4472.124 Safari/537.36"
)


class FotmobConfig(BaseModel):
    """Configuration for FotmobClient."""

    base_url: str = Field(default=DEFAULT_BASE_URL, description="FotMob API base URL")

    token_url: str = Field(
        default=DEFAULT_TOKEN_URL, description="URL returning the x-mas token as JSON"
    )

    token: str | None = Field(
        default=None, description="Pre-seeded x-mas token (skips the bootstrap request)"
    )

    timeout_seconds: float = Field(default=10.0, description="Per-request timeout", gt=0)

    max_retries: int = Field(
        default=0, description="Retries on 429/5xx responses (0 disables retrying)", ge=0
    )

    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header")

    @property
    def normalized_base_url(self) -> str:
        """Base URL guaranteed to end with a single slash."""
        return self.base_url.rstrip("/") + "/"

    @classmethod
    def from_env(cls) -> "FotmobConfig":
        """
        Load configuration from environment variables.

        Environment variables:
            FOTMOB_BASE_URL: API base URL (default: https://www.fotmob.com/api/)
            FOTMOB_TOKEN_URL: Token bootstrap URL (default: http://46.101.91.154:6006/)
            FOTMOB_XMAS_TOKEN: Pre-seeded token (default: unset)
            FOTMOB_TIMEOUT_SECONDS: Request timeout (default: 10)
            FOTMOB_MAX_RETRIES: Retry count for 429/5xx (default: 0)
            FOTMOB_USER_AGENT: User-Agent header (default: desktop Chrome)

        Returns:
            FotmobConfig instance
        """
        return cls(
            base_url=os.getenv("FOTMOB_BASE_URL", DEFAULT_BASE_URL),
            token_url=os.getenv("FOTMOB_TOKEN_URL", DEFAULT_TOKEN_URL),
            token=os.getenv("FOTMOB_XMAS_TOKEN") or None,
            timeout_seconds=float(os.getenv("FOTMOB_TIMEOUT_SECONDS", "10")),
            max_retries=int(os.getenv("FOTMOB_MAX_RETRIES", "0")),
            user_agent=os.getenv("FOTMOB_USER_AGENT", DEFAULT_USER_AGENT),
        )
