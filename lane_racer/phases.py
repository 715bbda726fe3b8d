from __future__ import annotations

import logging

from statemachine import State, StateMachine

from lane_racer.simulation import MatchState, Phase

logger = logging.getLogger(__name__)


class PhaseMachine(StateMachine):
    """Lifecycle of a match: idle -> running -> ended -> running ...

    There is no way from idle straight to ended, and ended only leaves
    through `restart`.
    """

    idle = State("Idle", value=Phase.IDLE.value, initial=True)
    running = State("Running", value=Phase.RUNNING.value)
    ended = State("Ended", value=Phase.ENDED.value)

    start_run = idle.to(running)
    crash = running.to(ended)
    restart = ended.to(running)

    def __init__(self, match_state: MatchState):
        self.match_state = match_state
        super().__init__(start_value=match_state.phase.value)

    def after_transition(self, event: str, target: State) -> None:
        logger.debug("phase -> %s (%s)", target.value, event)
        self.sync_phase_to_model()

    def sync_phase_to_model(self) -> None:
        self.match_state.phase = Phase(str(self.current_state.value))
