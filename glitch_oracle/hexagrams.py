"""
hexagrams.py — The 64 hexagrams of the King Wen sequence.

Every hexagram is keyed by its six binary lines read bottom to top
(0 = yin, 1 = yang). The table is built once at import, checked for
completeness, and shared read-only by every lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Tuple

from .errors import TableResolutionError

logger = logging.getLogger(__name__)

LINES_PER_HEXAGRAM = 6

# Trigram glyphs indexed by their bottom->top bit value (bit 0 = bottom line)
TRIGRAM_ORDER = ["☷", "☳", "☵", "☱", "☶", "☲", "☴", "☰"]

TRIGRAM_SYMBOLS = {
    "☰": "Qian (Heaven)",
    "☱": "Dui (Lake)",
    "☲": "Li (Fire)",
    "☳": "Zhen (Thunder)",
    "☴": "Xun (Wind/Wood)",
    "☵": "Kan (Water)",
    "☶": "Gen (Mountain)",
    "☷": "Kun (Earth)",
}

# === Complete 64 Hexagrams ===
# Format: (number, name, chinese, lines bottom->top)
_HEXAGRAM_DATA: List[Tuple[int, str, str, str]] = [
    (1, "Qian / The Creative", "乾", "111111"),
    (2, "Kun / The Receptive", "坤", "000000"),
    (3, "Zhun / Difficulty at the Beginning", "屯", "100010"),
    (4, "Meng / Youthful Folly", "蒙", "010001"),
    (5, "Xu / Waiting", "需", "111010"),
    (6, "Song / Conflict", "訟", "010111"),
    (7, "Shi / The Army", "師", "010000"),
    (8, "Bi / Holding Together", "比", "000010"),
    (9, "Xiao Chu / Small Taming", "小畜", "111011"),
    (10, "Lu / Treading", "履", "110111"),
    (11, "Tai / Peace", "泰", "111000"),
    (12, "Pi / Standstill", "否", "000111"),
    (13, "Tong Ren / Fellowship", "同人", "101111"),
    (14, "Da You / Great Possession", "大有", "111101"),
    (15, "Qian / Modesty", "謙", "001000"),
    (16, "Yu / Enthusiasm", "豫", "000100"),
    (17, "Sui / Following", "隨", "100110"),
    (18, "Gu / Work on the Decayed", "蠱", "011001"),
    (19, "Lin / Approach", "臨", "110000"),
    (20, "Guan / Contemplation", "觀", "000011"),
    (21, "Shi He / Biting Through", "噬嗑", "100101"),
    (22, "Bi / Grace", "賁", "101001"),
    (23, "Bo / Splitting Apart", "剝", "000001"),
    (24, "Fu / Return", "復", "100000"),
    (25, "Wu Wang / Innocence", "無妄", "100111"),
    (26, "Da Chu / Great Taming", "大畜", "111001"),
    (27, "Yi / Nourishing", "頤", "100001"),
    (28, "Da Guo / Great Exceeding", "大過", "011110"),
    (29, "Kan / The Abysmal", "坎", "010010"),
    (30, "Li / The Clinging", "離", "101101"),
    (31, "Xian / Influence", "咸", "001110"),
    (32, "Heng / Duration", "恆", "011100"),
    (33, "Dun / Retreat", "遯", "001111"),
    (34, "Da Zhuang / Great Power", "大壯", "111100"),
    (35, "Jin / Progress", "晉", "000101"),
    (36, "Ming Yi / Darkening of the Light", "明夷", "101000"),
    (37, "Jia Ren / The Family", "家人", "101011"),
    (38, "Kui / Opposition", "睽", "110101"),
    (39, "Jian / Obstruction", "蹇", "001010"),
    (40, "Xie / Deliverance", "解", "010100"),
    (41, "Sun / Decrease", "損", "110001"),
    (42, "Yi / Increase", "益", "100011"),
    (43, "Guai / Breakthrough", "夬", "111110"),
    (44, "Gou / Coming to Meet", "姤", "011111"),
    (45, "Cui / Gathering Together", "萃", "000110"),
    (46, "Sheng / Pushing Upward", "升", "011000"),
    (47, "Kun / Oppression", "困", "010110"),
    (48, "Jing / The Well", "井", "011010"),
    (49, "Ge / Revolution", "革", "101110"),
    (50, "Ding / The Cauldron", "鼎", "011101"),
    (51, "Zhen / The Arousing", "震", "100100"),
    (52, "Gen / Keeping Still", "艮", "001001"),
    (53, "Jian / Development", "漸", "001011"),
    (54, "Gui Mei / The Marrying Maiden", "歸妹", "110100"),
    (55, "Feng / Abundance", "豐", "101100"),
    (56, "Lu / The Wanderer", "旅", "001101"),
    (57, "Xun / The Gentle", "巽", "011011"),
    (58, "Dui / The Joyous", "兌", "110110"),
    (59, "Huan / Dispersion", "渙", "010011"),
    (60, "Jie / Limitation", "節", "110010"),
    (61, "Zhong Fu / Inner Truth", "中孚", "110011"),
    (62, "Xiao Guo / Small Exceeding", "小過", "001100"),
    (63, "Ji Ji / After Completion", "既濟", "101010"),
    (64, "Wei Ji / Before Completion", "未濟", "010101"),
]


@dataclass(frozen=True)
class Hexagram:
    """Immutable table entry for one hexagram."""
    number: int
    name: str
    chinese: str
    lines: Tuple[int, ...]

    @property
    def binary(self) -> str:
        return lines_to_binary(self.lines)

    @property
    def lower_trigram(self) -> str:
        return bits_to_trigram(self.lines[0:3])

    @property
    def upper_trigram(self) -> str:
        return bits_to_trigram(self.lines[3:6])


def lines_to_binary(bits: Sequence[int]) -> str:
    """Join binary lines (bottom->top) into the lookup key."""
    return "".join(str(bit) for bit in bits)


def bits_to_trigram(bits: Sequence[int]) -> str:
    """Convert three bits (bottom->top) to a trigram glyph."""
    index = bits[0] + (bits[1] << 1) + (bits[2] << 2)
    return TRIGRAM_ORDER[index]


class HexagramTable:
    """Read-only mapping between binary line strings and hexagram numbers."""

    def __init__(self, entries: Sequence[Hexagram]):
        self._by_binary: Dict[str, Hexagram] = {}
        self._by_number: Dict[int, Hexagram] = {}
        for hexagram in entries:
            self._by_binary[hexagram.binary] = hexagram
            self._by_number[hexagram.number] = hexagram

    @classmethod
    def from_rows(cls, rows: Sequence[Tuple[int, str, str, str]]) -> "HexagramTable":
        return cls([
            Hexagram(number=number, name=name, chinese=chinese,
                     lines=tuple(int(ch) for ch in binary))
            for number, name, chinese, binary in rows
        ])

    def __len__(self) -> int:
        return len(self._by_number)

    def __iter__(self) -> Iterator[Hexagram]:
        return iter(sorted(self._by_number.values(), key=lambda h: h.number))

    def lookup(self, binary: str) -> int:
        """Resolve a bottom->top binary string to its hexagram number."""
        hexagram = self._by_binary.get(binary)
        if hexagram is None:
            raise TableResolutionError(binary)
        return hexagram.number

    def lookup_lines(self, bits: Sequence[int]) -> int:
        return self.lookup(lines_to_binary(bits))

    def entry(self, number: int) -> Hexagram:
        try:
            return self._by_number[number]
        except KeyError:
            raise KeyError(f"No hexagram numbered {number}") from None

    def lines_for(self, number: int) -> Tuple[int, ...]:
        return self.entry(number).lines

    def verify_complete(self) -> None:
        """
        Check the table covers all 64 line patterns exactly once.
        Raises TableResolutionError naming the first missing pattern.
        """
        for value in range(2 ** LINES_PER_HEXAGRAM):
            binary = format(value, f"0{LINES_PER_HEXAGRAM}b")
            self.lookup(binary)
        if sorted(self._by_number) != list(range(1, 65)):
            raise TableResolutionError(
                "", f"Hexagram numbers are not exactly 1-64 ({len(self._by_number)} entries)"
            )
        logger.debug("Hexagram table verified: %d entries", len(self))


HEXAGRAM_TABLE = HexagramTable.from_rows(_HEXAGRAM_DATA)
HEXAGRAM_TABLE.verify_complete()
