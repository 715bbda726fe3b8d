from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


class TickClock:
    """Turns per-frame timestamps (ms) into elapsed-time deltas."""

    def __init__(self) -> None:
        self.previous_ms: float | None = None

    def reset(self) -> None:
        self.previous_ms = None

    def tick(self, now_ms: float) -> float:
        if not math.isfinite(now_ms):
            logger.warning("ignoring non-finite timestamp %r", now_ms)
            return 0.0

        if self.previous_ms is None:
            # First frame of a run: no movement, no ramp.
            self.previous_ms = now_ms
            return 0.0

        delta = now_ms - self.previous_ms
        self.previous_ms = now_ms
        if delta < 0:
            logger.warning("clock went backwards by %.3f ms, clamping to 0", -delta)
            return 0.0
        return delta
