"""Exception types raised by the oracle."""

from __future__ import annotations

from typing import Optional


class GlitchOracleError(Exception):
    """Base class for oracle failures."""


class EntropyUnavailable(GlitchOracleError):
    """The platform battery/clock read failed. Seed generation may be retried."""


class TableResolutionError(GlitchOracleError):
    """A binary line pattern has no entry in the hexagram table."""

    def __init__(self, binary: str, message: Optional[str] = None):
        self.binary = binary
        super().__init__(message or f"No hexagram matches lines {binary!r}")
