from __future__ import annotations

import logging

import numpy as np

from lane_racer.config import GameConfig
from lane_racer.context import SimulationContext
from lane_racer.entities import Entity, EntityKind

logger = logging.getLogger(__name__)

# Evaluation order within a tick; each kind rolls independently.
SPAWN_ORDER = (EntityKind.COIN, EntityKind.BLOCKER)


def spawn_rate(kind: EntityKind, config: GameConfig) -> float:
    if kind is EntityKind.COIN:
        return config.coin_spawn_rate
    return config.blocker_spawn_rate


def spawn_chance(kind: EntityKind, delta_ms: float, config: GameConfig) -> float:
    """Probability of one `kind` spawning in a tick of `delta_ms`.

    Calibrated against `reference_frame_ms`, so the expected spawns per second
    stay the same at any frame rate.
    """
    return spawn_rate(kind, config) * max(0.0, delta_ms) / config.reference_frame_ms


def spawn(
    kind: EntityKind,
    delta_ms: float,
    rng: np.random.Generator,
    next_id: int,
    config: GameConfig,
) -> Entity | None:
    if rng.random() >= spawn_chance(kind, delta_ms, config):
        return None
    lane = int(rng.integers(config.lane_count))
    return Entity(id=next_id, lane=lane, y=float(-config.object_size), kind=kind)


def spawn_wave(delta_ms: float, ctx: SimulationContext, config: GameConfig) -> list[Entity]:
    spawned = []
    for kind in SPAWN_ORDER:
        entity = spawn(kind, delta_ms, ctx.rng, ctx.next_id, config)
        if entity is None:
            continue
        ctx.take_id()
        logger.debug("spawned %s #%d in lane %d", kind.value, entity.id, entity.lane)
        spawned.append(entity)
    return spawned
