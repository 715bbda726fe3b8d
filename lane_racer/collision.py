from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lane_racer.config import GameConfig
from lane_racer.entities import Entity, EntityKind, Rect

logger = logging.getLogger(__name__)


def lane_hitbox(lane: int, top: float, config: GameConfig) -> Rect:
    # Inset by the margin on both sides of the lane.
    return Rect(
        left=lane * config.lane_width + config.hitbox_margin,
        top=top,
        right=(lane + 1) * config.lane_width - config.hitbox_margin,
        bottom=top + config.object_size,
    )


def player_hitbox(lane: int, config: GameConfig) -> Rect:
    return lane_hitbox(lane, config.player_y, config)


def entity_hitbox(entity: Entity, config: GameConfig) -> Rect:
    return lane_hitbox(entity.lane, entity.y, config)


def overlaps(a: Rect, b: Rect) -> bool:
    """Axis-aligned overlap test; shared edges count as contact."""
    return not (
        a.right < b.left
        or a.left > b.right
        or a.bottom < b.top
        or a.top > b.bottom
    )


@dataclass
class CollisionOutcome:
    survivors: list[Entity]
    points: int = 0
    crashed: bool = False
    culprit_ids: list[int] = field(default_factory=list)
    collected_ids: list[int] = field(default_factory=list)


def resolve_collisions(lane: int, entities: list[Entity], config: GameConfig) -> CollisionOutcome:
    """Check the car in `lane` against every live entity.

    Coins touching the car are consumed. Blockers touching the car end the
    run and stay in `survivors` so the final frame still shows what was hit.
    A blocker hit outranks any coin hit in the same pass: the tick scores
    nothing.
    """
    car = player_hitbox(lane, config)
    outcome = CollisionOutcome(survivors=[])

    for entity in entities:
        if not overlaps(car, entity_hitbox(entity, config)):
            outcome.survivors.append(entity)
            continue

        if entity.kind is EntityKind.BLOCKER:
            outcome.crashed = True
            outcome.culprit_ids.append(entity.id)
            outcome.survivors.append(entity)
        else:
            outcome.collected_ids.append(entity.id)

    if outcome.crashed:
        logger.debug("car in lane %d hit blocker(s) %s", lane, outcome.culprit_ids)
    else:
        outcome.points = config.coin_value * len(outcome.collected_ids)
        if outcome.collected_ids:
            logger.debug("car in lane %d collected coin(s) %s", lane, outcome.collected_ids)
    return outcome
