from lane_racer.config import ConfigError, GameConfig
from lane_racer.entities import Entity, EntityKind
from lane_racer.game import Match, MatchSnapshot
from lane_racer.loop import FrameLoop
from lane_racer.simulation import MatchState, Phase, TickReport

__all__ = [
    "ConfigError",
    "Entity",
    "EntityKind",
    "FrameLoop",
    "GameConfig",
    "Match",
    "MatchSnapshot",
    "MatchState",
    "Phase",
    "TickReport",
]
