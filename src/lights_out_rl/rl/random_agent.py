from __future__ import annotations

import argparse
import logging

import gymnasium as gym

import lights_out_rl.env  # noqa: F401  ensure registration


logger = logging.getLogger(__name__)


def run_random(steps: int = 200, env_id: str = "LightsOut-3x3-v0", seed: int | None = None) -> float:
    env = gym.make(env_id)
    logger.info("running random agent on %s for %d steps", env_id, steps)
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    wins = 0
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if "win" in info.get("reward_components", {}):
            wins += 1
        if terminated or truncated:
            obs, info = env.reset()
    env.close()
    print(f"Random agent total reward: {total_reward:.2f}  wins: {wins}")
    return total_reward


def main() -> None:
    p = argparse.ArgumentParser(description="Play random presses on Lights Out")
    p.add_argument("--env", type=str, default="LightsOut-3x3-v0")
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--seed", type=int, default=None)
    args = p.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run_random(steps=args.steps, env_id=args.env, seed=args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
