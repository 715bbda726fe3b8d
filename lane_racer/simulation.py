from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from lane_racer.collision import resolve_collisions
from lane_racer.config import GameConfig
from lane_racer.context import SimulationContext
from lane_racer.difficulty import ramp_speed
from lane_racer.entities import Entity
from lane_racer.motion import advance
from lane_racer.spawner import spawn_wave

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass
class MatchState:
    """Authoritative state of one match; mutated only inside `advance_tick`
    and the `Match` facade."""

    score: int = 0
    lane: int = 1
    entities: list[Entity] = field(default_factory=list)
    speed: float = 0.0
    phase: Phase = Phase.IDLE

    @classmethod
    def fresh(cls, config: GameConfig, phase: Phase = Phase.IDLE) -> MatchState:
        return cls(lane=config.center_lane, speed=config.initial_speed, phase=phase)


@dataclass(frozen=True, slots=True)
class TickReport:
    delta_ms: float = 0.0
    points: int = 0
    crashed: bool = False
    spawned: tuple[int, ...] = ()
    collected: tuple[int, ...] = ()


def clamp_lane(lane: int, config: GameConfig) -> int:
    return max(0, min(config.lane_count - 1, lane))


def advance_tick(state: MatchState, ctx: SimulationContext, now_ms: float, config: GameConfig) -> TickReport:
    """Run one frame of the simulation against `state`.

    Does nothing unless the match is running. A crash is reported through
    `TickReport.crashed`; moving the phase to ENDED is left to the caller's
    state machine. On a crash tick neither points nor spawns are applied.
    """
    if state.phase is not Phase.RUNNING:
        return TickReport()

    delta_ms = ctx.clock.tick(now_ms)
    state.speed = ramp_speed(state.speed, delta_ms, config.ramp_rate)
    state.lane = clamp_lane(state.lane, config)

    moved = advance(state.entities, state.speed, delta_ms, config)
    outcome = resolve_collisions(state.lane, moved, config)
    state.entities = outcome.survivors

    if outcome.crashed:
        return TickReport(delta_ms=delta_ms, crashed=True, collected=tuple(outcome.collected_ids))

    state.score += outcome.points
    spawned = spawn_wave(delta_ms, ctx, config)
    state.entities.extend(spawned)

    return TickReport(
        delta_ms=delta_ms,
        points=outcome.points,
        spawned=tuple(e.id for e in spawned),
        collected=tuple(outcome.collected_ids),
    )
