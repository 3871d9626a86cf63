from __future__ import annotations

import argparse
import logging
from typing import Callable, Dict, List, Optional

import numpy as np
import gymnasium as gym

import lights_out_rl.env  # noqa: F401  ensure registration
from lights_out_rl.game import solve
from lights_out_rl.rl.train_ppo import ENV_IDS


logger = logging.getLogger(__name__)


Policy = Callable[[gym.Env, np.ndarray], int]


def solver_policy(env: gym.Env, obs: np.ndarray) -> int:
    """Press the first cell of the solver's plan; random press if unsolvable."""
    base = env.unwrapped
    presses = solve(base.game.board)
    if not presses:
        return int(env.action_space.sample())
    row, col = presses[0]
    return row * base.game.config.cols + col


def evaluate(env: gym.Env, policy: Policy, episodes: int = 100, seed: Optional[int] = None) -> Dict[str, float]:
    wins = 0
    moves: List[int] = []
    returns: List[float] = []
    obs, info = env.reset(seed=seed)
    for _ in range(episodes):
        done = False
        ep_return = 0.0
        while not done:
            action = policy(env, obs)
            obs, reward, terminated, truncated, info = env.step(action)
            ep_return += float(reward)
            done = terminated or truncated
        if info["won"]:
            wins += 1
            moves.append(int(info["moves"]))
        returns.append(ep_return)
        obs, info = env.reset()
    return {
        "episodes": float(episodes),
        "win_rate": wins / float(max(1, episodes)),
        "mean_moves_to_win": float(np.mean(moves)) if moves else float("nan"),
        "mean_return": float(np.mean(returns)) if returns else 0.0,
    }


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Evaluate a Lights Out agent headlessly")
    p.add_argument("--env", choices=sorted(ENV_IDS), default="3x3")
    p.add_argument("--model", type=str, default=None, help="Path to a saved PPO model")
    p.add_argument("--solver", action="store_true", help="Evaluate the GF(2) solver instead of a model")
    p.add_argument("--episodes", type=int, default=100)
    p.add_argument("--seed", type=int, default=0)
    return p


def main() -> None:
    p = build_parser()
    args = p.parse_args()
    if not args.solver and args.model is None:
        p.error("either --model or --solver is required")
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    env = gym.make(ENV_IDS[args.env])
    if args.solver:
        policy: Policy = solver_policy
    else:
        from stable_baselines3 import PPO

        logger.info("loading model from %s", args.model)
        model = PPO.load(args.model, device="auto")

        def policy(env: gym.Env, obs: np.ndarray) -> int:
            action, _ = model.predict(obs, deterministic=True)
            return int(action)

    try:
        stats = evaluate(env, policy, episodes=args.episodes, seed=args.seed)
    finally:
        env.close()
    for key, value in stats.items():
        print(f"{key}: {value:.3f}")


if __name__ == "__main__":  # pragma: no cover
    main()
