from __future__ import annotations

import pytest

from lane_racer.config import ConfigError, GameConfig


def test_defaults_match_original_tuning() -> None:
    config = GameConfig()
    assert config.lane_count == 3
    assert config.lane_width == pytest.approx(400 / 3)
    assert config.player_y == 500
    assert config.center_lane == 1
    assert config.coin_value == 10


@pytest.mark.parametrize(
    "overrides",
    [
        {"lane_count": 0},
        {"field_width": -1},
        {"object_size": 0},
        {"hitbox_margin": 80},
        {"ramp_rate": -0.1},
        {"coin_spawn_rate": -1.0},
        {"reference_frame_ms": 0.0},
        {"player_offset": 700},
    ],
)
def test_invalid_values_are_rejected(overrides: dict) -> None:
    with pytest.raises(ConfigError):
        GameConfig(**overrides)


def test_from_env_overrides_fields(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LANE_RACER_LANE_COUNT", "4")
    monkeypatch.setenv("LANE_RACER_RAMP_RATE", "0")
    monkeypatch.setenv("LANE_RACER_COIN_VALUE", " ")

    config = GameConfig.from_env()

    assert config.lane_count == 4
    assert config.ramp_rate == 0.0
    assert config.coin_value == 10
    assert config.center_lane == 2


def test_from_env_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LANE_RACER_FPS", "fast")
    with pytest.raises(ConfigError, match="LANE_RACER_FPS"):
        GameConfig.from_env()
