from __future__ import annotations

import math

from lane_racer.clock import TickClock


def test_first_tick_has_no_delta() -> None:
    clock = TickClock()
    assert clock.tick(12345.0) == 0.0
    assert clock.previous_ms == 12345.0


def test_delta_is_time_since_previous_tick() -> None:
    clock = TickClock()
    clock.tick(100.0)
    assert clock.tick(116.0) == 16.0
    assert clock.tick(150.0) == 34.0


def test_backwards_clock_clamps_to_zero() -> None:
    clock = TickClock()
    clock.tick(500.0)
    assert clock.tick(400.0) == 0.0
    # the anomalous timestamp becomes the new baseline
    assert clock.tick(410.0) == 10.0


def test_non_finite_timestamps_are_ignored() -> None:
    clock = TickClock()
    clock.tick(10.0)
    assert clock.tick(math.nan) == 0.0
    assert clock.tick(math.inf) == 0.0
    assert clock.previous_ms == 10.0
    assert clock.tick(26.0) == 16.0


def test_reset_forgets_previous_timestamp() -> None:
    clock = TickClock()
    clock.tick(10.0)
    clock.tick(20.0)
    clock.reset()
    assert clock.previous_ms is None
    assert clock.tick(9999.0) == 0.0
