"""
JSON Structured Logging for the FotMob client.

Emits one JSON object per event on the ``fotmob_data.events`` logger, so
the host application decides where events land (stdout, file, aggregator).

Usage:
    from fotmob_data.utils.logging import log_event, log_error, log_request

    # Log a simple event
    log_event(event="token_bootstrap", url="http://46.101.91.154:6006/")

    # Log a request
    log_request(url="matches?date=20240101", status_code=200, duration_ms=45.3)

    # Log an error
    log_error(error="HTTP error! status: 404", error_type="FotmobHTTPError")
"""

import json
import logging
import time
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)

event_logger = logging.getLogger("fotmob_data.events")


# ============================================================================
# JSON Logging Functions
# ============================================================================


def log_event(level: int = logging.DEBUG, **kwargs: Any) -> None:
    """
    Log a structured event as JSON.

    Automatically adds timestamp and ensures consistent formatting.

    Args:
        level: Logging level for the event (default: DEBUG)
        **kwargs: Arbitrary key-value pairs to log. Common keys:
            - event: Event type ("request", "cache", "error", "cast_fallback")
            - url: Relative request URL
            - status_code: HTTP status code
            - duration_ms: Duration in milliseconds
            - error: Error message

    Example:
        >>> log_event(event="cache", action="hit", url="allLeagues")
        {"ts": 1699999999.123, "event": "cache", "action": "hit", "url": "allLeagues", ...}
    """
    if not event_logger.isEnabledFor(level):
        return

    kwargs.setdefault("ts", time.time())
    kwargs["timestamp"] = datetime.fromtimestamp(kwargs["ts"], tz=timezone.utc).isoformat()

    try:
        event_logger.log(level, json.dumps(kwargs, default=str))
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to write JSON log: {e}. Data: {kwargs}")


def log_request(
    url: str,
    status_code: int,
    duration_ms: float,
    method: str = "GET",
    **kwargs: Any,
) -> None:
    """
    Log an outbound HTTP request.

    Args:
        url: Relative request URL
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
        method: HTTP method (default: GET)
        **kwargs: Additional context (bytes, cached, etc.)
    """
    log_data = {
        "event": "request",
        "url": url,
        "method": method,
        "status_code": status_code,
        "duration_ms": round(duration_ms, 2),
    }
    log_data.update(kwargs)

    log_event(**log_data)


def log_error(error: str, error_type: str | None = None, **kwargs: Any) -> None:
    """
    Log an error with structured data.

    Args:
        error: Error message
        error_type: Error class name (FotmobHTTPError, ValueError, etc.)
        **kwargs: Additional context (url, operation, etc.)
    """
    log_data: dict[str, Any] = {"event": "error", "error": error}

    if error_type:
        log_data["error_type"] = error_type

    log_data.update(kwargs)

    log_event(level=logging.WARNING, **log_data)


def log_cache(action: str, url: str, **kwargs: Any) -> None:
    """
    Log cache operations (hit, miss, save).

    Args:
        action: Cache action ("hit", "miss", "save")
        url: Relative request URL used as the cache key
        **kwargs: Additional context (bytes, entries, etc.)
    """
    log_data: dict[str, Any] = {"event": "cache", "action": action, "url": url}
    log_data.update(kwargs)

    log_event(**log_data)


__all__ = [
    "log_event",
    "log_request",
    "log_error",
    "log_cache",
]
