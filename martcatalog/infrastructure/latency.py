"""Simulated network latency.

Every service entry point awaits one bounded random delay before it
touches the cache or catalog, standing in for a remote catalog API.
"""

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class LatencyRange:
    """Bounds of one simulated delay, in milliseconds."""

    min_ms: float
    max_ms: float


# Per-endpoint delay bounds
PRODUCTS_LATENCY = LatencyRange(50, 200)
PRODUCT_LATENCY = LatencyRange(30, 100)
PRODUCTS_BY_IDS_LATENCY = LatencyRange(50, 150)
CATEGORIES_LATENCY = LatencyRange(20, 50)
CATEGORY_COUNTS_LATENCY = LatencyRange(30, 80)
SEARCH_LATENCY = LatencyRange(30, 100)
RECOMMENDATION_LATENCY = LatencyRange(30, 100)


class NetworkDelay:
    """Awaitable random delay with injectable sleep and random source.

    Example usage:
        delay = NetworkDelay()
        await delay(PRODUCTS_LATENCY)

        # tests: no real waiting
        delay = NetworkDelay(enabled=False)
    """

    def __init__(
        self,
        enabled: bool = True,
        scale: float = 1.0,
        rng: random.Random | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize delay.

        Args:
            enabled: When False, calls return without suspending.
            scale: Multiplier applied to every delay.
            rng: Random source for picking delays.
            sleep: Coroutine used to wait, given seconds.
        """
        self.enabled = enabled
        self.scale = scale
        self._rng = rng or random.Random()
        self._sleep = sleep
        self.calls = 0

    def pick_seconds(self, latency: LatencyRange) -> float:
        """Choose a delay within the range.

        Args:
            latency: Delay bounds.

        Returns:
            Delay in seconds, scaled.
        """
        delay_ms = self._rng.uniform(latency.min_ms, latency.max_ms)
        return delay_ms * self.scale / 1000

    async def __call__(self, latency: LatencyRange = PRODUCTS_LATENCY) -> float:
        """Suspend for a random delay.

        Args:
            latency: Delay bounds for the calling endpoint.

        Returns:
            Seconds waited (0.0 when disabled).
        """
        self.calls += 1
        if not self.enabled:
            return 0.0

        seconds = self.pick_seconds(latency)
        logger.debug("Simulating network delay", seconds=round(seconds, 3))
        await self._sleep(seconds)
        return seconds
