"""FotMob football data client

A typed, caching Python client for the FotMob web API: matches, leagues,
teams, players, transfers, news and search.
"""

from .client import FotmobClient
from .config import FotmobConfig
from .exceptions import (
    FotmobAPIError,
    FotmobError,
    FotmobHTTPError,
    FotmobNoResponseError,
    FotmobRequestSetupError,
    FotmobResponseError,
    FotmobTokenError,
)
from .schemas import CastingError

__version__ = "0.1.0"
__all__ = [
    "CastingError",
    "FotmobAPIError",
    "FotmobClient",
    "FotmobConfig",
    "FotmobError",
    "FotmobHTTPError",
    "FotmobNoResponseError",
    "FotmobRequestSetupError",
    "FotmobResponseError",
    "FotmobTokenError",
]
