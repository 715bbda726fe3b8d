from __future__ import annotations

from lane_racer.config import GameConfig


def ramp_speed(speed: float, delta_ms: float, ramp_rate: float) -> float:
    # speed(t) == v0 + ramp_rate * t however t is split into frames.
    return speed + ramp_rate * max(0.0, delta_ms)


def speed_at(elapsed_ms: float, config: GameConfig) -> float:
    return config.initial_speed + config.ramp_rate * elapsed_ms
