"""Game module for Lights Out RL.

Exports the board engine and supporting classes:
- LightsGrid: Board representation and neighbour toggling
- GameConfig: Board dimensions, light probability and seed
- initialize / toggle_around / has_won: Functional board operations
- LightsOutGame: Play session with move counting and win tracking
- solve / hint / is_solvable: GF(2) solver helpers
"""

from .errors import GameAlreadyWon, InvalidConfig, LightsOutError
from .grid import Coordinate, LightsGrid
from .core import (
    GameConfig,
    LightsOutGame,
    format_grid,
    has_won,
    initialize,
    print_grid,
    toggle_around,
)
from .solver import hint, is_solvable, solve

__all__ = [
    "Coordinate",
    "LightsGrid",
    "GameConfig",
    "LightsOutGame",
    "initialize",
    "toggle_around",
    "has_won",
    "format_grid",
    "print_grid",
    "solve",
    "hint",
    "is_solvable",
    "LightsOutError",
    "InvalidConfig",
    "GameAlreadyWon",
]
