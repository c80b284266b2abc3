"""Shared helpers for the FotMob client."""

from .logging import log_cache, log_error, log_event, log_request

__all__ = ["log_cache", "log_error", "log_event", "log_request"]
