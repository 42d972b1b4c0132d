import asyncio
from types import SimpleNamespace

import pytest

from glitch_oracle import entropy
from glitch_oracle.entropy import EntropySource, compute_seed, read_battery_fraction
from glitch_oracle.errors import EntropyUnavailable


def test_compute_seed_formula():
    assert compute_seed(0.5, 1700000000123.0) == 1700000000623
    assert compute_seed(0.0, 1700000000123.9) == 1700000000123
    assert compute_seed(1.0, -5000.0) == 4000


def test_get_seed_uses_probes():
    source = EntropySource(delay=0, battery_probe=lambda: 0.42, clock=lambda: 1000.0)
    assert asyncio.run(source.get_seed()) == 1420


def test_missing_battery_falls_back_to_zero():
    source = EntropySource(delay=0, battery_probe=lambda: None, clock=lambda: 1234.5)
    assert source.get_seed_sync() == 1234


def test_probe_failure_raises_entropy_unavailable():
    def broken():
        raise OSError("sensor offline")

    source = EntropySource(delay=0, battery_probe=broken, clock=lambda: 1.0)
    with pytest.raises(EntropyUnavailable):
        source.get_seed_sync()


def test_clock_failure_raises_entropy_unavailable():
    def broken():
        raise RuntimeError("no clock")

    source = EntropySource(delay=0, battery_probe=lambda: 0.5, clock=broken)
    with pytest.raises(EntropyUnavailable):
        source.get_seed_sync()


def test_delay_is_awaited(monkeypatch):
    slept = []

    async def fake_sleep(seconds):
        slept.append(seconds)

    monkeypatch.setattr(entropy.asyncio, "sleep", fake_sleep)
    source = EntropySource(delay=0.15, battery_probe=lambda: 0.0, clock=lambda: 10.0)
    assert source.get_seed_sync() == 10
    assert slept == [0.15]


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        EntropySource(delay=-1)


def test_read_battery_fraction(monkeypatch):
    monkeypatch.setattr(entropy.psutil, "sensors_battery",
                        lambda: SimpleNamespace(percent=73.0), raising=False)
    assert read_battery_fraction() == pytest.approx(0.73)


def test_read_battery_fraction_without_sensor(monkeypatch):
    monkeypatch.setattr(entropy.psutil, "sensors_battery", lambda: None, raising=False)
    assert read_battery_fraction() is None


def test_default_source_produces_seed():
    seed = EntropySource(delay=0).get_seed_sync()
    assert isinstance(seed, int)
    assert seed > 0
