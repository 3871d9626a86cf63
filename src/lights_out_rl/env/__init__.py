"""Gymnasium environments for Lights Out RL."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Classic 5x5 puzzle
register(
    id="LightsOut-5x5-v0",
    entry_point="lights_out_rl.env.lights_out_env:LightsOutEnv",
)

# Small board for quick experiments (every 3x3 position is solvable)
register(
    id="LightsOut-3x3-v0",
    entry_point="lights_out_rl.env.lights_out_env:LightsOutEnv",
    kwargs={"config": {"rows": 3, "cols": 3, "max_episode_steps": 50}},
)
