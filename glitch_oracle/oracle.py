"""Ties the entropy source to the reading engine for one interaction at a time."""

from __future__ import annotations

import logging
from typing import Optional

from .engine import Reading, resolve
from .entropy import EntropySource

logger = logging.getLogger(__name__)


class Oracle:
    """Main divination controller."""

    def __init__(self, source: Optional[EntropySource] = None):
        self.source = source or EntropySource()
        self.reading: Optional[Reading] = None

    async def cast(self) -> Reading:
        """
        Draw a seed and resolve it into a reading.
        EntropyUnavailable propagates and leaves no reading held.
        """
        self.reading = None
        seed = await self.source.get_seed()
        logger.info("Casting hexagram from seed %d", seed)
        return self.cast_seed(seed)

    def cast_seed(self, seed: int) -> Reading:
        self.reading = resolve(seed)
        return self.reading

    def reset(self) -> None:
        self.reading = None
