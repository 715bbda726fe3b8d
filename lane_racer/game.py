from __future__ import annotations

import logging
from dataclasses import dataclass

from statemachine.exceptions import TransitionNotAllowed

from lane_racer.config import GameConfig
from lane_racer.context import SimulationContext
from lane_racer.entities import Entity
from lane_racer.phases import PhaseMachine
from lane_racer.simulation import MatchState, Phase, TickReport, advance_tick, clamp_lane

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MatchSnapshot:
    """Read-only view handed to renderers and agents once per frame."""

    phase: Phase
    score: int
    lane: int
    entities: tuple[Entity, ...]
    speed: float

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def ended(self) -> bool:
        return self.phase is Phase.ENDED


class Match:
    """One player's match: commands in, snapshots out.

    Lane-shift requests made between frames are latched and applied at the
    start of the next tick, at most one per direction.
    """

    def __init__(self, config: GameConfig | None = None, seed: int | None = None):
        self.config = config or GameConfig()
        self.state = MatchState.fresh(self.config)
        self.ctx = SimulationContext()
        if seed is not None:
            self.ctx.reseed(seed)
        self.phases = PhaseMachine(self.state)

        self.left_pressed = False
        self.right_pressed = False

    # --- Lifecycle ---

    def start(self) -> bool:
        return self._enter_running("start_run")

    def restart(self) -> bool:
        return self._enter_running("restart")

    def _enter_running(self, event: str) -> bool:
        try:
            self.phases.send(event)
        except TransitionNotAllowed:
            logger.warning("ignoring %s while %s", event, self.state.phase.value)
            return False
        self._reset()
        return True

    def _reset(self) -> None:
        self.state.score = 0
        self.state.lane = self.config.center_lane
        self.state.entities = []
        self.state.speed = self.config.initial_speed
        self.ctx.reset()
        self.left_pressed = False
        self.right_pressed = False

    def reseed(self, seed: int | None) -> None:
        self.ctx.reseed(seed)

    @property
    def phase(self) -> Phase:
        return self.state.phase

    # --- Input ---

    def shift_left(self) -> None:
        self._shift(-1)

    def shift_right(self) -> None:
        self._shift(1)

    def _shift(self, direction: int) -> None:
        if self.state.phase is not Phase.RUNNING:
            return
        self.state.lane = clamp_lane(self.state.lane + direction, self.config)

    def press_left(self) -> None:
        if self.state.phase is Phase.RUNNING:
            self.left_pressed = True

    def press_right(self) -> None:
        if self.state.phase is Phase.RUNNING:
            self.right_pressed = True

    def tap(self, x: float) -> None:
        """Touch control: a tap on the left half of the field steers left."""
        if x < self.config.field_width / 2:
            self.press_left()
        else:
            self.press_right()

    def _apply_pressed(self) -> None:
        if self.left_pressed:
            self.shift_left()
        if self.right_pressed:
            self.shift_right()
        self.left_pressed = False
        self.right_pressed = False

    # --- Frame ---

    def tick(self, now_ms: float) -> TickReport:
        if self.state.phase is not Phase.RUNNING:
            return TickReport()

        self._apply_pressed()
        report = advance_tick(self.state, self.ctx, now_ms, self.config)
        if report.crashed:
            self.phases.send("crash")
            logger.info("match over, final score %d", self.state.score)
        return report

    def snapshot(self) -> MatchSnapshot:
        return MatchSnapshot(
            phase=self.state.phase,
            score=self.state.score,
            lane=self.state.lane,
            entities=tuple(self.state.entities),
            speed=self.state.speed,
        )
