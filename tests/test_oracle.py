import asyncio

import pytest

from glitch_oracle.engine import resolve
from glitch_oracle.entropy import EntropySource
from glitch_oracle.errors import EntropyUnavailable
from glitch_oracle.meanings import MEANINGS, glitch_speak
from glitch_oracle.oracle import Oracle


def test_cast_resolves_seed_from_source():
    oracle = Oracle(EntropySource(delay=0, battery_probe=lambda: 0.0, clock=lambda: 42.0))
    reading = asyncio.run(oracle.cast())
    assert reading == resolve(42)
    assert oracle.reading is reading


def test_failed_entropy_leaves_no_reading():
    def broken():
        raise OSError("boom")

    oracle = Oracle(EntropySource(delay=0, battery_probe=broken))
    oracle.cast_seed(1)
    with pytest.raises(EntropyUnavailable):
        asyncio.run(oracle.cast())
    assert oracle.reading is None


def test_reset_discards_reading():
    oracle = Oracle()
    oracle.cast_seed(7)
    oracle.reset()
    assert oracle.reading is None


def test_meanings_cover_every_hexagram():
    assert sorted(MEANINGS, key=int) == [str(n) for n in range(1, 65)]
    for entry in MEANINGS.values():
        assert entry["glitch_speak"]


def test_glitch_speak_fallbacks():
    assert glitch_speak(None) == "NO DATA"
    assert glitch_speak(0) == "NO DATA"
    assert glitch_speak(99) == "UNKNOWN HEXAGRAM 99"
    assert glitch_speak(1) == MEANINGS["1"]["glitch_speak"]
