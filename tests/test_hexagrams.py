import pytest

from glitch_oracle.errors import TableResolutionError
from glitch_oracle.hexagrams import (
    HEXAGRAM_TABLE,
    HexagramTable,
    bits_to_trigram,
    lines_to_binary,
)


def test_table_has_64_entries():
    assert len(HEXAGRAM_TABLE) == 64
    assert [h.number for h in HEXAGRAM_TABLE] == list(range(1, 65))


def test_table_is_a_bijection():
    for value in range(64):
        binary = format(value, "06b")
        number = HEXAGRAM_TABLE.lookup(binary)
        assert lines_to_binary(HEXAGRAM_TABLE.lines_for(number)) == binary


@pytest.mark.parametrize("binary, number", [
    ("111111", 1),
    ("000000", 2),
    ("100010", 3),
    ("111000", 11),
    ("000111", 12),
    ("101010", 63),
    ("010101", 64),
])
def test_known_hexagrams(binary, number):
    assert HEXAGRAM_TABLE.lookup(binary) == number


def test_lookup_lines_accepts_sequences():
    assert HEXAGRAM_TABLE.lookup_lines((1, 1, 0, 0, 1, 0)) == 60


def test_unknown_pattern_raises():
    with pytest.raises(TableResolutionError) as excinfo:
        HEXAGRAM_TABLE.lookup("1111")
    assert excinfo.value.binary == "1111"


def test_unknown_number_raises_key_error():
    with pytest.raises(KeyError):
        HEXAGRAM_TABLE.entry(65)


def test_verify_complete_flags_missing_pattern():
    table = HexagramTable.from_rows([(2, "Kun / The Receptive", "坤", "000000")])
    with pytest.raises(TableResolutionError) as excinfo:
        table.verify_complete()
    assert excinfo.value.binary == "000001"


def test_trigrams():
    assert bits_to_trigram([1, 1, 1]) == "☰"
    assert bits_to_trigram([0, 0, 0]) == "☷"
    assert bits_to_trigram([1, 0, 0]) == "☳"
    assert bits_to_trigram([0, 0, 1]) == "☶"
    # Zhun: Water over Thunder
    zhun = HEXAGRAM_TABLE.entry(3)
    assert zhun.lower_trigram == "☳"
    assert zhun.upper_trigram == "☵"
