from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from lane_racer.clock import TickClock


@dataclass
class SimulationContext:
    """Per-simulation timers, counters and randomness.

    Kept out of module globals so independent matches (tests, replays,
    parallel environments) never share a clock or an id sequence.
    """

    clock: TickClock = field(default_factory=TickClock)
    next_id: int = 0
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def take_id(self) -> int:
        entity_id = self.next_id
        self.next_id += 1
        return entity_id

    def reset(self) -> None:
        self.clock.reset()
        self.next_id = 0

    def reseed(self, seed: int | None) -> None:
        self.rng = np.random.default_rng(seed)
