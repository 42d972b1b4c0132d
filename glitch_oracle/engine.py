"""
engine.py — Deterministic hexagram readings from an integer seed.

The seed drives a Park–Miller (Lehmer) generator. Each of the six lines is
cast with the three-coin method, bottom line first, three draws per line,
so one reading always consumes exactly 18 draws. Equal seeds give equal
readings; nothing outside the seed is consulted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .hexagrams import HEXAGRAM_TABLE, LINES_PER_HEXAGRAM, HexagramTable, lines_to_binary

# === Generator Configuration ===
MODULUS = 2147483647  # 2**31 - 1
MULTIPLIER = 16807    # 7**5
TOSSES_PER_LINE = 3


# === I-Ching Constants ===
class LineValue(IntEnum):
    """Three-coin method line values."""
    OLD_YIN = 6      # changing yin -> yang
    YOUNG_YANG = 7   # stable yang
    YOUNG_YIN = 8    # stable yin
    OLD_YANG = 9     # changing yang -> yin


CHANGING_VALUES = (LineValue.OLD_YIN, LineValue.OLD_YANG)


def normalize_seed(seed: int) -> int:
    """
    Fold any integer seed into the generator's valid state range (0, M-1].
    The remainder keeps the sign of the seed (truncated division).
    """
    seed = int(seed)
    state = abs(seed) % MODULUS
    if seed < 0:
        state = -state
    if state <= 0:
        state += MODULUS - 1
    return state


class ParkMillerRandom:
    """Minimal-standard multiplicative LCG. Not cryptographically secure."""

    def __init__(self, seed: int):
        self.state = normalize_seed(seed)

    def next(self) -> float:
        """Advance the state and return a float in [0, 1)."""
        self.state = (self.state * MULTIPLIER) % MODULUS
        return (self.state - 1) / (MODULUS - 1)

    def next_int(self, low: int, high: int) -> int:
        """Integer in [low, high] inclusive."""
        return math.floor(self.next() * (high - low + 1)) + low


def toss_coins(rng: ParkMillerRandom) -> int:
    """Three coin tosses, each worth 2 or 3. Returns 6, 7, 8 or 9."""
    return sum(rng.next_int(2, 3) for _ in range(TOSSES_PER_LINE))


def generate_lines(seed: int) -> List[int]:
    """Generate the six line values for a seed, bottom to top."""
    rng = ParkMillerRandom(seed)
    return [toss_coins(rng) for _ in range(LINES_PER_HEXAGRAM)]


def line_to_yin_yang(line: int) -> int:
    """Convert line value to binary (0=yin, 1=yang)."""
    return 0 if line in (LineValue.OLD_YIN, LineValue.YOUNG_YIN) else 1


def changing_indices(lines: Sequence[int]) -> List[int]:
    return [index for index, line in enumerate(lines) if line in CHANGING_VALUES]


def flip_changing(bits: Sequence[int], indices: Sequence[int]) -> List[int]:
    """Flip the bit at every changing index, leaving the rest untouched."""
    flipped = list(bits)
    for index in indices:
        flipped[index] = 1 - flipped[index]
    return flipped


@dataclass(frozen=True)
class Reading:
    """Complete reading derived from one seed."""
    seed: Optional[int]
    lines: Tuple[int, ...]                  # bottom->top, each in {6,7,8,9}
    primary_hexagram_number: int
    primary_hexagram_lines: Tuple[int, ...]  # 0=yin, 1=yang
    changing_line_indices: Tuple[int, ...] = ()
    changing_hexagram_number: Optional[int] = None
    changing_hexagram_lines: Optional[Tuple[int, ...]] = None

    @property
    def has_changing_lines(self) -> bool:
        return bool(self.changing_line_indices)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "lines": list(self.lines),
            "primary_hexagram_number": self.primary_hexagram_number,
            "primary_hexagram_lines": list(self.primary_hexagram_lines),
            "changing_line_indices": list(self.changing_line_indices),
            "changing_hexagram_number": self.changing_hexagram_number,
            "changing_hexagram_lines": (
                list(self.changing_hexagram_lines)
                if self.changing_hexagram_lines is not None else None
            ),
        }


def build_reading(
    lines: Sequence[int],
    table: HexagramTable = HEXAGRAM_TABLE,
    seed: Optional[int] = None,
) -> Reading:
    """
    Resolve six line values into primary and (if any lines change)
    changing hexagrams. Raises ValueError for malformed lines and
    TableResolutionError if the table has no entry for a pattern.
    """
    if len(lines) != LINES_PER_HEXAGRAM:
        raise ValueError(f"Expected {LINES_PER_HEXAGRAM} lines, got {len(lines)}")
    valid = {int(v) for v in LineValue}
    for line in lines:
        if line not in valid:
            raise ValueError(f"Invalid line value {line!r}; expected one of 6, 7, 8, 9")

    bits = [line_to_yin_yang(line) for line in lines]
    primary_number = table.lookup(lines_to_binary(bits))

    moving = changing_indices(lines)
    changing_number = None
    changing_bits = None
    if moving:
        changing_bits = tuple(flip_changing(bits, moving))
        changing_number = table.lookup(lines_to_binary(changing_bits))

    return Reading(
        seed=seed,
        lines=tuple(int(line) for line in lines),
        primary_hexagram_number=primary_number,
        primary_hexagram_lines=tuple(bits),
        changing_line_indices=tuple(moving),
        changing_hexagram_number=changing_number,
        changing_hexagram_lines=changing_bits,
    )


def resolve(seed: int, table: HexagramTable = HEXAGRAM_TABLE) -> Reading:
    """Seed in, reading out. Pure and deterministic."""
    return build_reading(generate_lines(seed), table=table, seed=seed)
