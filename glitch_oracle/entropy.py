"""
entropy.py — Low-value environmental entropy for casual draws.

seed = floor(abs(battery_fraction * 1000 + epoch_millis))

This is deliberately weak, non-cryptographic randomness. Devices without a
battery sensor contribute a battery fraction of 0.0.
"""

from __future__ import annotations

import asyncio
import logging
import math
import time
from typing import Callable, Optional

import psutil

from .errors import EntropyUnavailable

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 0.150
FALLBACK_BATTERY_FRACTION = 0.0


def read_battery_fraction() -> Optional[float]:
    """Battery charge in [0, 1], or None when the host has no battery sensor."""
    sensors_battery = getattr(psutil, "sensors_battery", None)
    if sensors_battery is None:
        return None
    battery = sensors_battery()
    if battery is None:
        return None
    return max(0.0, min(1.0, battery.percent / 100.0))


def read_epoch_millis() -> float:
    return time.time() * 1000.0


def compute_seed(battery_fraction: float, epoch_millis: float) -> int:
    return int(math.floor(abs(battery_fraction * 1000 + epoch_millis)))


class EntropySource:
    """Produces one integer seed per request from battery level and clock."""

    def __init__(
        self,
        delay: float = DEFAULT_DELAY_SECONDS,
        battery_probe: Callable[[], Optional[float]] = read_battery_fraction,
        clock: Callable[[], float] = read_epoch_millis,
    ):
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self.delay = delay
        self.battery_probe = battery_probe
        self.clock = clock

    def _sample(self) -> int:
        try:
            battery = self.battery_probe()
            millis = self.clock()
        except Exception as e:
            logger.error(f"Error getting entropy seed: {e}")
            raise EntropyUnavailable(f"Failed to generate entropy seed: {e}") from e

        if battery is None:
            logger.debug("No battery sensor; using fallback fraction %.1f", FALLBACK_BATTERY_FRACTION)
            battery = FALLBACK_BATTERY_FRACTION
        return compute_seed(battery, millis)

    async def get_seed(self) -> int:
        """
        Sample the platform and return a seed after the configured delay.
        Raises EntropyUnavailable if the battery or clock read fails.
        """
        seed = self._sample()
        if self.delay:
            await asyncio.sleep(self.delay)
        return seed

    def get_seed_sync(self) -> int:
        return asyncio.run(self.get_seed())
