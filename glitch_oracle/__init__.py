"""Glitch Oracle — deterministic I-Ching readings from low-value device entropy."""

from .engine import Reading, build_reading, generate_lines, normalize_seed, resolve
from .entropy import EntropySource
from .errors import EntropyUnavailable, GlitchOracleError, TableResolutionError
from .hexagrams import HEXAGRAM_TABLE, HexagramTable
from .meanings import MEANINGS, glitch_speak
from .oracle import Oracle

__version__ = "0.1.0"

__all__ = [
    "EntropySource",
    "EntropyUnavailable",
    "GlitchOracleError",
    "HEXAGRAM_TABLE",
    "HexagramTable",
    "MEANINGS",
    "Oracle",
    "Reading",
    "TableResolutionError",
    "build_reading",
    "generate_lines",
    "glitch_speak",
    "normalize_seed",
    "resolve",
]
