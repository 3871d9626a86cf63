from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from .errors import GameAlreadyWon, InvalidConfig
from .grid import LightsGrid


logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _is_real(value: Any) -> bool:
    return _is_int(value) or isinstance(value, (float, np.floating))


def validate_board_params(rows: Any, cols: Any, light_probability: Any) -> float:
    """Raise ``InvalidConfig`` unless the board parameters are usable.

    Returns the light probability as a plain ``float``.
    """
    if not _is_int(rows) or rows <= 0:
        raise InvalidConfig(f"rows must be a positive integer, got {rows!r}")
    if not _is_int(cols) or cols <= 0:
        raise InvalidConfig(f"cols must be a positive integer, got {cols!r}")
    if not _is_real(light_probability):
        raise InvalidConfig(f"light_probability must be a number, got {light_probability!r}")
    probability = float(light_probability)
    # NaN fails both comparisons
    if not 0.0 <= probability <= 1.0:
        raise InvalidConfig(f"light_probability must be in [0, 1], got {light_probability!r}")
    return probability


@dataclass(frozen=True)
class GameConfig:
    rows: int = 5
    cols: int = 5
    light_probability: float = 0.25
    random_seed: Optional[int] = None
    max_episode_steps: int = 200

    def __post_init__(self) -> None:
        probability = validate_board_params(self.rows, self.cols, self.light_probability)
        object.__setattr__(self, "light_probability", probability)
        if not _is_int(self.max_episode_steps) or self.max_episode_steps <= 0:
            raise InvalidConfig(
                f"max_episode_steps must be a positive integer, got {self.max_episode_steps!r}"
            )


def initialize(
    rows: int,
    cols: int,
    light_probability: float,
    rng_seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> LightsGrid:
    """Create a ``rows`` x ``cols`` board with each cell independently lit.

    A cell is lit when a uniform draw in ``[0, 1)`` falls below
    ``light_probability``, so ``0`` yields a dark board and ``1`` a fully lit
    one. Pass ``rng`` to share a generator, or ``rng_seed`` for a
    reproducible board; with neither, fresh OS entropy is used.
    """
    probability = validate_board_params(rows, cols, light_probability)
    if rng is None:
        rng = np.random.default_rng(rng_seed)
    board = LightsGrid(rows, cols)
    board.grid[:, :] = rng.random((board.rows, board.cols)) < probability
    logger.debug("initialized %dx%d board with %d lit cells", rows, cols, board.count_lit())
    return board


def toggle_around(board: LightsGrid, row: int, col: int) -> LightsGrid:
    """Flip ``(row, col)`` and its orthogonal neighbours in place.

    Positions outside the board, the centre included, are skipped. The same
    board instance is returned for chaining.
    """
    board.toggle_around(row, col)
    return board


def has_won(board: LightsGrid) -> bool:
    return board.all_off()


class LightsOutGame:
    """One play session: a board, its random source and a move counter.

    Once the board goes dark the session is won and further presses raise
    ``GameAlreadyWon``; call ``reset`` to start over.
    """

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rng = np.random.default_rng(self.config.random_seed)
        self.board = LightsGrid(self.config.rows, self.config.cols)
        self.moves = 0
        self.reset()

    @property
    def won(self) -> bool:
        return has_won(self.board)

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng = np.random.default_rng(seed)
        self.board = initialize(
            self.config.rows,
            self.config.cols,
            self.config.light_probability,
            rng=self.rng,
        )
        self.moves = 0

    def press(self, row: int, col: int) -> bool:
        """Toggle around ``(row, col)`` and return whether the game is now won."""
        if self.won:
            raise GameAlreadyWon(f"board already solved after {self.moves} moves; reset to play again")
        toggle_around(self.board, row, col)
        self.moves += 1
        if self.won:
            logger.debug("board solved in %d moves", self.moves)
            return True
        return False

    def get_state(self) -> Dict[str, Any]:
        return {
            "grid": self.board.clone_state(),
            "moves": self.moves,
            "lit": self.board.count_lit(),
            "won": self.won,
        }

    def get_game_stats(self) -> Dict[str, Any]:
        cells = self.board.rows * self.board.cols
        return {
            "moves": self.moves,
            "lit_cells": self.board.count_lit(),
            "lit_ratio": self.board.count_lit() / float(cells),
            "won": self.won,
        }


def format_grid(board: LightsGrid) -> str:
    return "\n".join("".join("█" if cell else "·" for cell in row) for row in board.grid)


def print_grid(board: LightsGrid) -> None:
    print(format_grid(board))


def run_game_demo() -> None:  # pragma: no cover
    from .solver import solve

    game = LightsOutGame(GameConfig(rows=5, cols=5, light_probability=0.5))
    print("=== Lights Out Demo ===")
    print_grid(game.board)
    presses = solve(game.board)
    if presses is None:
        print("\nThis board has no solution.")
        return
    print(f"\nSolution uses {len(presses)} presses: {presses}")
    for row, col in presses:
        if game.press(row, col):
            break
    print("\nBoard after applying the solution:")
    print_grid(game.board)
    print(f"Won: {game.won}")


if __name__ == "__main__":  # pragma: no cover
    run_game_demo()
