from __future__ import annotations

import argparse
import logging
import os
from typing import Callable

import gymnasium as gym

# Ensure envs are registered
import lights_out_rl.env  # noqa: F401


logger = logging.getLogger(__name__)

ENV_IDS = {
    "3x3": "LightsOut-3x3-v0",
    "5x5": "LightsOut-5x5-v0",
}


def make_env(env_id: str, seed: int | None = None) -> gym.Env:
    env = gym.make(env_id)
    if seed is not None:
        env.reset(seed=seed)
    return env


def make_env_thunk(env_id: str, seed: int | None = None) -> Callable[[], gym.Env]:
    def thunk() -> gym.Env:
        return make_env(env_id, seed)
    return thunk


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Train a PPO agent on Lights Out")
    p.add_argument("--env", choices=sorted(ENV_IDS), default="3x3", help="Board size to train on")
    p.add_argument("--timesteps", type=int, default=200_000)
    p.add_argument("--logdir", type=str, default=None, help="TensorBoard log directory (requires tensorboard)")
    p.add_argument("--save_path", type=str, default="./models/ppo_lightsout.zip")
    p.add_argument("--n_envs", type=int, default=4)
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    from stable_baselines3 import PPO
    from stable_baselines3.common.vec_env import SubprocVecEnv, VecMonitor

    env_id = ENV_IDS[args.env]
    logger.info("training PPO on %s for %d timesteps with %d envs", env_id, args.timesteps, args.n_envs)
    seeds = [None if args.seed is None else args.seed + i for i in range(args.n_envs)]
    vec_env = SubprocVecEnv([make_env_thunk(env_id, s) for s in seeds])
    vec_env = VecMonitor(vec_env)
    model = PPO(
        policy="MlpPolicy",
        env=vec_env,
        verbose=1,
        seed=args.seed,
        tensorboard_log=args.logdir,
    )

    save_dir = os.path.dirname(args.save_path)
    if save_dir:
        os.makedirs(save_dir, exist_ok=True)
    model.learn(total_timesteps=args.timesteps)
    model.save(args.save_path)
    print(f"Saved model to {args.save_path}")
    vec_env.close()


if __name__ == "__main__":  # pragma: no cover
    main()
