from __future__ import annotations

import os
from dataclasses import dataclass, fields


class ConfigError(ValueError):
    """Raised when a GameConfig is built from invalid values."""


@dataclass(frozen=True, slots=True)
class GameConfig:
    # --- Field ---
    field_width: int = 400
    field_height: int = 600
    lane_count: int = 3
    object_size: int = 50
    hitbox_margin: int = 10
    player_offset: int = 100

    # --- Speed ---
    initial_speed: float = 5.0
    ramp_rate: float = 0.0005

    # --- Spawning (probability per reference frame) ---
    coin_spawn_rate: float = 0.02
    blocker_spawn_rate: float = 0.015
    reference_frame_ms: float = 16.0

    # --- Scoring ---
    coin_value: int = 10

    fps: int = 30

    def __post_init__(self) -> None:
        if self.field_width <= 0 or self.field_height <= 0:
            raise ConfigError("field dimensions must be positive")
        if self.lane_count < 1:
            raise ConfigError("lane_count must be at least 1")
        if self.object_size <= 0:
            raise ConfigError("object_size must be positive")
        if not 0 <= self.hitbox_margin < self.lane_width / 2:
            raise ConfigError("hitbox_margin must fit inside half a lane")
        if not 0 <= self.player_offset <= self.field_height:
            raise ConfigError("player_offset must lie within the field")
        if self.initial_speed < 0 or self.ramp_rate < 0:
            raise ConfigError("speeds must be non-negative")
        if self.coin_spawn_rate < 0 or self.blocker_spawn_rate < 0:
            raise ConfigError("spawn rates must be non-negative")
        if self.reference_frame_ms <= 0:
            raise ConfigError("reference_frame_ms must be positive")
        if self.fps <= 0:
            raise ConfigError("fps must be positive")

    @property
    def lane_width(self) -> float:
        return self.field_width / self.lane_count

    @property
    def player_y(self) -> int:
        return self.field_height - self.player_offset

    @property
    def center_lane(self) -> int:
        return self.lane_count // 2

    @property
    def frame_ms(self) -> float:
        return 1000.0 / self.fps

    @classmethod
    def from_env(cls, prefix: str = "LANE_RACER_") -> GameConfig:
        """Build a config, overriding defaults from `<prefix><FIELD>` variables.

        e.g. `LANE_RACER_LANE_COUNT=4` or `LANE_RACER_RAMP_RATE=0`.
        """
        overrides: dict[str, int | float] = {}
        for f in fields(cls):
            raw = os.environ.get(prefix + f.name.upper())
            if raw is None or not raw.strip():
                continue
            kind = type(f.default)
            try:
                overrides[f.name] = kind(raw.strip())
            except ValueError as e:
                raise ConfigError(f"{prefix + f.name.upper()}={raw!r} is not a valid {kind.__name__}") from e
        return cls(**overrides)
