from __future__ import annotations

import os
from collections.abc import Callable

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from lane_racer.config import GameConfig  # noqa: E402
from lane_racer.entities import Entity, EntityKind  # noqa: E402
from lane_racer.game import Match  # noqa: E402


@pytest.fixture()
def quiet_config() -> GameConfig:
    """Original field geometry, but nothing spawns and speed stays at v0."""
    return GameConfig(coin_spawn_rate=0.0, blocker_spawn_rate=0.0, ramp_rate=0.0)


@pytest.fixture()
def running_match(quiet_config: GameConfig) -> Match:
    match = Match(quiet_config)
    assert match.start()
    match.tick(0.0)
    return match


@pytest.fixture()
def place() -> Callable[[Match, EntityKind, int, float], Entity]:
    """Drop an entity straight into a match's live list."""

    def _place(match: Match, kind: EntityKind, lane: int, y: float) -> Entity:
        entity = Entity(id=match.ctx.take_id(), lane=lane, y=y, kind=kind)
        match.state.entities.append(entity)
        return entity

    return _place
