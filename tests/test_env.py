"""
Tests for the Gymnasium environment.
"""

import gymnasium as gym
import numpy as np
import pytest

import lights_out_rl.env  # noqa: F401
from lights_out_rl.env.lights_out_env import LightsOutEnv
from lights_out_rl.game import GameConfig, LightsGrid, solve


@pytest.fixture
def env():
    e = LightsOutEnv(GameConfig(rows=3, cols=3, light_probability=0.5, max_episode_steps=4))
    yield e
    e.close()


class TestSpaces:
    def test_spaces_match_board(self, env):
        assert env.observation_space.shape == (3, 3)
        assert env.action_space.n == 9

    def test_reset_observation(self, env):
        obs, info = env.reset(seed=0)

        assert obs.dtype == np.int8
        assert env.observation_space.contains(obs)
        assert info["moves"] == 0
        assert info["lit"] == int(obs.sum())

    def test_reset_seed_reproducible(self, env):
        obs1, _ = env.reset(seed=11)
        obs2, _ = env.reset(seed=11)

        assert np.array_equal(obs1, obs2)

    def test_action_to_cell(self, env):
        assert env.action_to_cell(0) == (0, 0)
        assert env.action_to_cell(5) == (1, 2)
        assert env.action_to_cell(8) == (2, 2)


class TestStep:
    def test_step_toggles_cells(self, env):
        env.reset(seed=0)
        env.game.board = LightsGrid.from_rows([[1, 1, 1], [1, 1, 1], [1, 1, 1]])
        obs, reward, terminated, truncated, info = env.step(0)

        assert obs.tolist() == [[0, 0, 1], [0, 1, 1], [1, 1, 1]]
        assert reward == pytest.approx(env.step_penalty)
        assert not terminated and not truncated
        assert info["moves"] == 1

    def test_winning_step(self, env):
        env.reset(seed=0)
        env.game.board = LightsGrid.from_rows([[0, 1, 0], [1, 1, 1], [0, 1, 0]])
        obs, reward, terminated, truncated, info = env.step(4)

        assert terminated and not truncated
        assert info["won"]
        assert reward == pytest.approx(env.win_reward + env.step_penalty)
        assert not obs.any()

    def test_step_on_won_board(self, env):
        env.reset(seed=0)
        env.game.board = LightsGrid.from_rows([[0, 0, 0], [0, 0, 0], [0, 0, 0]])
        obs, reward, terminated, truncated, info = env.step(4)

        assert terminated
        assert reward == 0.0
        assert not obs.any()
        assert info["moves"] == 0

    def test_truncation(self, env):
        env.reset(seed=0)
        env.game.board = LightsGrid.from_rows([[1, 1, 1], [1, 1, 1], [1, 1, 1]])
        truncated = False
        for action in [0, 8, 0, 8]:
            _, _, terminated, truncated, _ = env.step(action)
            assert not terminated

        assert truncated

    def test_invalid_action(self, env):
        env.reset(seed=0)
        with pytest.raises(ValueError):
            env.step(9)

    def test_light_weight_shaping(self):
        env = LightsOutEnv(GameConfig(rows=3, cols=3), light_weight=1.0, step_penalty=0.0)
        env.reset(seed=0)
        env.game.board = LightsGrid.from_rows([[1, 1, 0], [1, 0, 0], [0, 0, 1]])
        _, reward, _, _, info = env.step(0)

        assert info["reward_components"]["lights"] == pytest.approx(3.0)
        assert reward == pytest.approx(3.0)

    def test_solver_clears_board(self):
        env = LightsOutEnv(GameConfig(rows=3, cols=3, light_probability=0.5, max_episode_steps=20))
        env.reset(seed=0)
        env.game.board = LightsGrid.from_rows([[1, 1, 1], [1, 1, 1], [1, 1, 1]])
        terminated = False
        for row, col in solve(env.game.board):
            _, _, terminated, _, _ = env.step(row * 3 + col)

        assert terminated


class TestRegistration:
    def test_registered_ids(self):
        """Importing the package registers both board sizes and exports nothing else."""
        assert "LightsOut-3x3-v0" in gym.registry
        assert "LightsOut-5x5-v0" in gym.registry
        assert not hasattr(lights_out_rl.env, "__all__")

    @pytest.mark.parametrize("env_id,shape", [("LightsOut-3x3-v0", (3, 3)), ("LightsOut-5x5-v0", (5, 5))])
    def test_make(self, env_id, shape):
        env = gym.make(env_id)
        obs, _ = env.reset(seed=1)

        assert obs.shape == shape
        env.close()

    def test_render_rgb_array(self):
        env = gym.make("LightsOut-3x3-v0", render_mode="rgb_array")
        env.reset(seed=1)
        img = env.render()

        assert img.shape == (36, 36, 3)
        env.close()
