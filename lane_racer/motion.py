from __future__ import annotations

from dataclasses import replace

from lane_racer.config import GameConfig
from lane_racer.entities import Entity


def fall_distance(speed: float, delta_ms: float, config: GameConfig) -> float:
    return speed * max(0.0, delta_ms) / config.reference_frame_ms


def advance(entities: list[Entity], speed: float, delta_ms: float, config: GameConfig) -> list[Entity]:
    """Move every entity down and drop the ones that left the field.

    Entities past the bottom edge vanish without scoring or penalty.
    """
    dy = fall_distance(speed, delta_ms, config)
    moved = [replace(e, y=e.y + dy) for e in entities]
    return [e for e in moved if e.y < config.field_height]
