from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator

from lane_racer.game import Match, MatchSnapshot
from lane_racer.simulation import TickReport

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    return time.perf_counter() * 1000.0


class FrameLoop:
    """Drives a Match once per display refresh.

    The host calls `frame()` from its own loop, so input capture and
    drawing interleave between ticks. The loop stops by itself when the
    match ends; `stop()` may be called any number of times.
    """

    def __init__(self, match: Match, now: Callable[[], float] = monotonic_ms):
        self.match = match
        self.now = now
        self.active = False

    def start(self) -> bool:
        if self.match.start():
            self.active = True
        return self.active

    def restart(self) -> bool:
        if self.match.restart():
            self.active = True
        return self.active

    def stop(self) -> None:
        if not self.active:
            return
        self.active = False
        logger.debug("frame loop stopped")

    def frame(self, now_ms: float | None = None) -> TickReport:
        if not self.active:
            return TickReport()
        report = self.match.tick(self.now() if now_ms is None else now_ms)
        if not self.match.snapshot().running:
            self.stop()
        return report

    def run(self, frames: int | None = None) -> Iterator[MatchSnapshot]:
        """Yield one snapshot per frame until stopped or `frames` runs out."""
        count = 0
        while self.active and (frames is None or count < frames):
            self.frame()
            count += 1
            yield self.match.snapshot()
