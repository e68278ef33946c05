"""Tests for the query cache."""

from dataclasses import dataclass
from datetime import timedelta

import pytest

from martcatalog.infrastructure.cache import QueryCache
from tests.conftest import FakeClock


@dataclass(frozen=True)
class Key:
    """Minimal key source."""

    value: str

    def cache_key(self) -> str:
        return self.value


class TestQueryCache:
    """Tests for QueryCache."""

    def test_miss_then_hit(self, cache: QueryCache) -> None:
        """A stored value is returned until it expires."""
        assert cache.get(Key("a")) is None
        cache.set(Key("a"), [1, 2, 3])
        assert cache.get(Key("a")) == [1, 2, 3]
        assert cache.stats.hits == 1
        assert cache.stats.misses == 1

    def test_equal_descriptors_share_entry(self, cache: QueryCache) -> None:
        """Distinct descriptor instances with the same key hit the same entry."""
        cache.set(Key("products|page=1|"), "result")
        assert cache.get(Key("products|page=1|")) == "result"

    def test_expiry(self, cache: QueryCache, clock: FakeClock) -> None:
        """Entries expire after the TTL and are removed on read."""
        cache.set(Key("a"), "value")

        clock.advance(minutes=5)
        assert cache.get(Key("a")) == "value"

        clock.advance(seconds=1)
        assert cache.get(Key("a")) is None
        assert len(cache) == 0
        assert cache.stats.expirations == 1

    def test_contains_respects_expiry(self, cache: QueryCache, clock: FakeClock) -> None:
        """contains() reports only live entries and does not count lookups."""
        cache.set(Key("a"), "value")
        assert cache.contains(Key("a"))
        clock.advance(minutes=6)
        assert not cache.contains(Key("a"))
        assert cache.stats.hits == 0
        assert cache.stats.misses == 0

    def test_evicts_oldest_insertion(self, clock: FakeClock) -> None:
        """At capacity the earliest-inserted entry is dropped, not the least read."""
        cache = QueryCache(max_size=3, ttl=timedelta(minutes=5), clock=clock)
        for name in ("a", "b", "c"):
            cache.set(Key(name), name)

        # Reading "a" does not protect it
        assert cache.get(Key("a")) == "a"
        cache.set(Key("d"), "d")

        assert list(cache.keys()) == ["b", "c", "d"]
        assert cache.get(Key("a")) is None
        assert cache.stats.evictions == 1

    def test_size_never_exceeds_max(self, clock: FakeClock) -> None:
        """Size stays bounded under many inserts."""
        cache = QueryCache(max_size=5, clock=clock)
        for i in range(20):
            cache.set(Key(str(i)), i)
            assert len(cache) <= 5
        assert list(cache.keys()) == ["15", "16", "17", "18", "19"]

    def test_reset_existing_key_does_not_evict(self, clock: FakeClock) -> None:
        """Replacing a key at capacity moves it to newest without evicting."""
        cache = QueryCache(max_size=2, clock=clock)
        cache.set(Key("a"), 1)
        cache.set(Key("b"), 2)
        cache.set(Key("a"), 3)

        assert list(cache.keys()) == ["b", "a"]
        assert cache.get(Key("a")) == 3
        assert cache.stats.evictions == 0

    def test_reset_refreshes_ttl(self, cache: QueryCache, clock: FakeClock) -> None:
        """Re-setting a key restarts its lifetime."""
        cache.set(Key("a"), 1)
        clock.advance(minutes=4)
        cache.set(Key("a"), 2)
        clock.advance(minutes=4)
        assert cache.get(Key("a")) == 2

    def test_invalidate_by_substring(self, cache: QueryCache) -> None:
        """Only keys containing the pattern are removed."""
        cache.set(Key("products|category=electronics|page=1|"), 1)
        cache.set(Key("products|category=electronics|page=2|"), 2)
        cache.set(Key("products|category=books|page=1|"), 3)

        removed = cache.invalidate("category=electronics|")

        assert removed == 2
        assert list(cache.keys()) == ["products|category=books|page=1|"]

    def test_invalidate_without_match(self, cache: QueryCache) -> None:
        """No match removes nothing."""
        cache.set(Key("a"), 1)
        assert cache.invalidate("zzz") == 0
        assert len(cache) == 1

    def test_clear(self, cache: QueryCache) -> None:
        """clear() empties the cache."""
        cache.set(Key("a"), 1)
        cache.set(Key("b"), 2)
        cache.clear()
        assert len(cache) == 0
        assert cache.get(Key("a")) is None

    def test_rejects_non_positive_size(self) -> None:
        """Capacity must be positive."""
        with pytest.raises(ValueError):
            QueryCache(max_size=0)

    def test_hit_ratio(self, cache: QueryCache) -> None:
        """Hit ratio tracks lookups."""
        assert cache.stats.hit_ratio == 0.0
        cache.set(Key("a"), 1)
        cache.get(Key("a"))
        cache.get(Key("b"))
        assert cache.stats.hit_ratio == 0.5
