"""In-memory response cache

Raw response bodies are stored as text, keyed by the relative request URL
(path plus query string). Entries live as long as the cache does: there is
no TTL and no eviction, so a client instance accumulates every distinct
response it has fetched.
"""

from __future__ import annotations

import logging
from typing import Any

from .utils.logging import log_cache

logger = logging.getLogger(__name__)


class ResponseCache:
    """Simple URL -> raw text cache

    Example:
        >>> cache = ResponseCache()
        >>> cache.set("allLeagues", '{"popular": []}')
        >>> "allLeagues" in cache
        True
        >>> cache.get("allLeagues")
        '{"popular": []}'
    """

    def __init__(self) -> None:
        self._mem: dict[str, str] = {}
        self.hits = 0
        self.misses = 0

    def __contains__(self, url: object) -> bool:
        return url in self._mem

    def __len__(self) -> int:
        return len(self._mem)

    def get(self, url: str) -> str | None:
        """Get cached text for a URL, or None on miss"""
        text = self._mem.get(url)
        if text is None:
            self.misses += 1
            logger.debug(f"Cache miss: {url}")
            log_cache("miss", url)
            return None

        self.hits += 1
        logger.debug(f"Cache hit: {url}")
        log_cache("hit", url, bytes=len(text))
        return text

    def set(self, url: str, text: str) -> None:
        """Store raw response text for a URL"""
        self._mem[url] = text
        log_cache("save", url, bytes=len(text), entries=len(self._mem))

    def clear(self) -> None:
        """Clear all cache entries"""
        self._mem.clear()
        self.hits = 0
        self.misses = 0
        logger.info("Cache cleared")

    def stats(self) -> dict[str, Any]:
        """Get cache statistics"""
        return {
            "entries": len(self._mem),
            "hits": self.hits,
            "misses": self.misses,
            "bytes": sum(len(text) for text in self._mem.values()),
        }
