"""Tests for simulated network latency."""

import random

import pytest

from martcatalog.infrastructure.latency import (
    CATEGORIES_LATENCY,
    PRODUCTS_LATENCY,
    LatencyRange,
    NetworkDelay,
)


class RecordingSleep:
    """Sleep replacement that records requested durations."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class TestNetworkDelay:
    """Tests for NetworkDelay."""

    @pytest.mark.asyncio
    async def test_delay_within_bounds(self) -> None:
        """Chosen delays stay inside the endpoint range."""
        sleep = RecordingSleep()
        delay = NetworkDelay(rng=random.Random(1), sleep=sleep)

        for _ in range(20):
            await delay(PRODUCTS_LATENCY)

        assert len(sleep.calls) == 20
        assert all(0.05 <= s <= 0.2 for s in sleep.calls)

    @pytest.mark.asyncio
    async def test_disabled_does_not_sleep(self) -> None:
        """Disabled delays return immediately but still count calls."""
        sleep = RecordingSleep()
        delay = NetworkDelay(enabled=False, sleep=sleep)

        waited = await delay(CATEGORIES_LATENCY)

        assert waited == 0.0
        assert sleep.calls == []
        assert delay.calls == 1

    @pytest.mark.asyncio
    async def test_scale(self) -> None:
        """Scale multiplies the chosen delay."""
        sleep = RecordingSleep()
        delay = NetworkDelay(scale=0.0, sleep=sleep)
        assert await delay(LatencyRange(100, 100)) == 0.0

    def test_pick_seconds_fixed_range(self) -> None:
        """A degenerate range yields its single value."""
        delay = NetworkDelay(rng=random.Random(0))
        assert delay.pick_seconds(LatencyRange(40, 40)) == pytest.approx(0.04)
