"""Query result cache.

Bounded, time-boxed memoization keyed by query descriptors. One
instance is constructed at startup and injected into the products
service; nothing here is module-global.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol

import structlog

logger = structlog.get_logger()

DEFAULT_MAX_SIZE = 50
DEFAULT_TTL = timedelta(minutes=5)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class CacheKeySource(Protocol):
    """Anything that serializes itself into a canonical cache key."""

    def cache_key(self) -> str:
        ...


@dataclass
class CacheEntry:
    """A cached query result.

    Attributes:
        key: Canonical key of the query.
        value: Stored result, replaced wholesale on re-set.
        created_at: When the entry was stored.
        expires_at: Absolute instant after which reads miss.
    """

    key: str
    value: Any
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Check whether the entry is stale at the given instant."""
        return now > self.expires_at


@dataclass
class CacheStats:
    """Running counters for cache diagnostics."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0
    invalidations: int = 0

    @property
    def hit_ratio(self) -> float:
        """Fraction of lookups that hit; 0.0 before any lookup."""
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0


class QueryCache:
    """In-memory query cache with TTL and insertion-order eviction.

    At capacity, inserting a new key evicts the oldest-inserted entry
    still present (not the least recently read). Expired entries are
    removed lazily when read.

    Example usage:
        cache = QueryCache(max_size=50, ttl=timedelta(minutes=5))
        cached = cache.get(query)
        if cached is None:
            cache.set(query, compute(query))
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize cache.

        Args:
            max_size: Maximum number of entries.
            ttl: Time-to-live for each entry.
            clock: Source of the current time; inject a fake in tests.
        """
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self.ttl = ttl
        self._clock = clock
        # dicts keep insertion order, which drives eviction
        self._entries: dict[str, CacheEntry] = {}
        self.stats = CacheStats()

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> Iterator[str]:
        """Iterate stored keys, oldest first. Expired entries included."""
        return iter(list(self._entries))

    def get(self, query: CacheKeySource) -> Any | None:
        """Get a cached result.

        Args:
            query: Query descriptor.

        Returns:
            Cached result if present and not expired, None otherwise.
        """
        key = query.cache_key()
        entry = self._entries.get(key)

        if entry is None:
            self.stats.misses += 1
            return None

        if entry.is_expired(self._clock()):
            del self._entries[key]
            self.stats.misses += 1
            self.stats.expirations += 1
            logger.debug("Cache entry expired", key=key)
            return None

        self.stats.hits += 1
        logger.debug("Cache hit", key=key)
        return entry.value

    def contains(self, query: CacheKeySource) -> bool:
        """Check for a live entry without counting a lookup."""
        entry = self._entries.get(query.cache_key())
        return entry is not None and not entry.is_expired(self._clock())

    def set(self, query: CacheKeySource, value: Any) -> CacheEntry:
        """Store a result.

        Args:
            query: Query descriptor.
            value: Result to cache.

        Returns:
            The stored entry.
        """
        key = query.cache_key()

        # Replacing an entry re-inserts it as the newest
        if self._entries.pop(key, None) is None and len(self._entries) >= self.max_size:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            self.stats.evictions += 1
            logger.debug("Cache evicted oldest entry", key=oldest)

        now = self._clock()
        entry = CacheEntry(key=key, value=value, created_at=now, expires_at=now + self.ttl)
        self._entries[key] = entry

        logger.debug("Cache set", key=key, size=len(self._entries))
        return entry

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()
        logger.debug("Cache cleared")

    def invalidate(self, pattern: str) -> int:
        """Remove entries whose key contains a substring.

        Args:
            pattern: Substring to look for in keys.

        Returns:
            Number of entries removed.
        """
        doomed = [key for key in self._entries if pattern in key]
        for key in doomed:
            del self._entries[key]

        self.stats.invalidations += len(doomed)
        logger.debug("Cache invalidated", pattern=pattern, count=len(doomed))
        return len(doomed)
