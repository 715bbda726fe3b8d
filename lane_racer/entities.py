from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntityKind(str, Enum):
    COIN = "coin"
    BLOCKER = "blocker"


@dataclass(frozen=True, slots=True)
class Entity:
    """A coin or blocker travelling down one lane.

    `y` is the top edge in field pixels; it starts above the field
    (`-object_size`) and only ever grows.
    """

    id: int
    lane: int
    y: float
    kind: EntityKind

    @property
    def is_blocker(self) -> bool:
        return self.kind is EntityKind.BLOCKER


@dataclass(frozen=True, slots=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float
