import logging

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np

from lane_racer.config import GameConfig
from lane_racer.game import Match
from lane_racer.render import Renderer

logger = logging.getLogger(__name__)


class LaneRacerEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    user_guide = (
        "Controls: ← and → to change lanes. Space to start or restart after a crash."
    )

    game_description = (
        "Race down a three-lane road. Dodge the red blockers, grab coins, and survive as the traffic speeds up."
    )

    auto_advance = True

    SURVIVAL_REWARD = 0.01
    CRASH_PENALTY = -10.0

    def __init__(self, render_mode="rgb_array", config=None):
        super().__init__()
        self.render_mode = render_mode
        self.config = config or GameConfig()

        self.renderer = Renderer(self.config)
        width, height = self.renderer.size
        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(height, width, 3), dtype=np.uint8
        )
        # movement (none/up/down/left/right), space, shift
        self.action_space = MultiDiscrete([5, 2, 2])

        self.match = Match(self.config)
        self.sim_time_ms = 0.0
        self.steps = 0
        self.prev_space_held = False

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.steps = 0
        self.sim_time_ms = 0.0
        self.prev_space_held = False

        self.match = Match(self.config)
        # Spawns draw from gymnasium's seeded generator
        self.match.ctx.rng = self.np_random
        self.match.start()
        self.match.tick(self.sim_time_ms)

        return self._get_observation(), self._get_info()

    def step(self, action):
        movement, space_held = int(action[0]), action[1] == 1
        space_pressed = space_held and not self.prev_space_held
        self.prev_space_held = space_held

        reward = 0.0
        snapshot = self.match.snapshot()

        if snapshot.ended:
            if space_pressed:
                self.match.restart()
                self.sim_time_ms = 0.0
                self.match.tick(self.sim_time_ms)
            return self._get_observation(), reward, self.match.snapshot().ended, False, self._get_info()

        if movement == 3:
            self.match.press_left()
        elif movement == 4:
            self.match.press_right()

        self.sim_time_ms += self.config.frame_ms
        report = self.match.tick(self.sim_time_ms)
        self.steps += 1

        reward += report.points
        if report.crashed:
            reward += self.CRASH_PENALTY
        else:
            reward += self.SURVIVAL_REWARD
        terminated = report.crashed

        return (
            self._get_observation(),
            reward,
            terminated,
            False,
            self._get_info()
        )

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        return self.renderer.to_array(self.match.snapshot())

    def _get_info(self):
        snapshot = self.match.snapshot()
        return {
            "score": snapshot.score,
            "steps": self.steps,
            "speed": snapshot.speed,
            "lane": snapshot.lane,
            "phase": snapshot.phase.value,
            "entities": len(snapshot.entities),
        }

    def close(self):
        self.renderer.close()

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test reset
        obs, info = self.reset()
        assert obs.shape == self.observation_space.shape
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == self.observation_space.shape
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc is False
        assert isinstance(info, dict)

        logger.info("implementation validated")
