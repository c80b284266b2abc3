"""Exceptions raised by the FotMob client

Every failure of the request pipeline is normalized into one of these,
so callers only need to catch ``FotmobError``.
"""

from __future__ import annotations

from typing import Any


class FotmobError(RuntimeError):
    """Base class for all FotMob client errors."""

    pass


class FotmobHTTPError(FotmobError):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(self, status_code: int, url: str | None = None) -> None:
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code
        self.url = url


class FotmobNoResponseError(FotmobError):
    """Raised when a request was sent but no response came back."""

    def __init__(self, url: str | None = None) -> None:
        super().__init__("No response received from the server")
        self.url = url


class FotmobRequestSetupError(FotmobError):
    """Raised when a request could not be built or sent."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Error setting up request: {detail}")
        self.detail = detail


class FotmobTokenError(FotmobRequestSetupError):
    """Raised when the x-mas token cannot be obtained from the bootstrap URL."""

    pass


class FotmobAPIError(FotmobError):
    """Raised when the response body carries an ``error`` field."""

    def __init__(self, payload: str, data: Any = None) -> None:
        super().__init__(payload)
        self.payload = payload
        self.data = data


class FotmobResponseError(FotmobError):
    """Raised when a successful response body is not valid JSON."""

    pass
