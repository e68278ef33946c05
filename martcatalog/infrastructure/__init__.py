"""Infrastructure: settings, logging, query cache, latency, sanitizer."""

from martcatalog.infrastructure.cache import CacheEntry, CacheStats, QueryCache
from martcatalog.infrastructure.config import Settings, get_settings
from martcatalog.infrastructure.latency import LatencyRange, NetworkDelay
from martcatalog.infrastructure.logging_setup import configure_logging
from martcatalog.infrastructure.sanitize import sanitize_search_term

__all__ = [
    "CacheEntry",
    "CacheStats",
    "LatencyRange",
    "NetworkDelay",
    "QueryCache",
    "Settings",
    "configure_logging",
    "get_settings",
    "sanitize_search_term",
]
