from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple, Union

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from lights_out_rl.game import GameConfig, LightsOutGame


class LightsOutEnv(gym.Env):
    """Lights Out as a single-agent episodic task.

    Observation is the board as an ``int8`` 0/1 array of shape (rows, cols).
    Action ``a`` presses cell ``(a // cols, a % cols)``. An episode
    terminates when the board goes dark and is truncated after
    ``config.max_episode_steps`` presses.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[Union[GameConfig, Mapping[str, Any]]] = None,
        render_mode: Optional[str] = None,
        win_reward: float = 10.0,
        step_penalty: float = -0.1,
        light_weight: float = 0.0,
    ) -> None:
        super().__init__()
        if isinstance(config, Mapping):
            config = GameConfig(**config)
        self.game = LightsOutGame(config)
        self.render_mode = render_mode

        # Reward shaping parameters
        self.win_reward = float(win_reward)
        self.step_penalty = float(step_penalty)
        # Optional dense term: reward per light turned off (negative when more come on)
        self.light_weight = float(light_weight)

        rows, cols = self.game.config.rows, self.game.config.cols
        self.observation_space = spaces.Box(low=0, high=1, shape=(rows, cols), dtype=np.int8)
        self.action_space = spaces.Discrete(rows * cols)

        self._last_obs: Optional[np.ndarray] = None

    def _get_obs(self) -> np.ndarray:
        return self.game.board.grid.astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "moves": self.game.moves,
            "lit": self.game.board.count_lit(),
            "won": self.game.won,
        }

    def action_to_cell(self, action: int) -> Tuple[int, int]:
        cols = self.game.config.cols
        return int(action) // cols, int(action) % cols

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        # Boards come from the env's generator unless the config pins its own seed
        if seed is not None or self.game.config.random_seed is None:
            self.game.rng = self.np_random
        self.game.reset()
        obs = self._get_obs()
        self._last_obs = obs
        return obs, self._get_info()

    def step(self, action: Union[int, np.integer]):
        if not self.action_space.contains(int(action)):
            raise ValueError(f"action must be in [0, {self.action_space.n}), got {action!r}")

        if self.game.won:
            obs = self._get_obs()
            info = self._get_info()
            info["reward_components"] = {}
            return obs, 0.0, True, False, info

        lit_before = self.game.board.count_lit()
        row, col = self.action_to_cell(action)
        won = self.game.press(row, col)
        lit_after = self.game.board.count_lit()

        reward_components: Dict[str, float] = {"step": self.step_penalty}
        if self.light_weight:
            reward_components["lights"] = self.light_weight * float(lit_before - lit_after)
        if won:
            reward_components["win"] = self.win_reward

        terminated = bool(won)
        truncated = not terminated and self.game.moves >= self.game.config.max_episode_steps
        reward = float(sum(reward_components.values()))

        obs = self._get_obs()
        info = self._get_info()
        info["reward_components"] = reward_components
        self._last_obs = obs
        return obs, reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self._last_obs if self._last_obs is not None else self._get_obs()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    color = (250, 210, 60) if grid[y, x] else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass
