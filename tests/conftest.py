"""
Pytest configuration and fixtures for Lights Out tests.
"""

import pytest

from lights_out_rl.game import GameConfig, LightsGrid, LightsOutGame, initialize


@pytest.fixture
def dark_board() -> LightsGrid:
    """3x3 board with every light off."""
    return initialize(3, 3, 0.0)


@pytest.fixture
def lit_board() -> LightsGrid:
    """3x3 board with every light on."""
    return initialize(3, 3, 1.0)


@pytest.fixture
def random_board() -> LightsGrid:
    """Seeded 5x4 board with a mix of lit and dark cells."""
    return initialize(5, 4, 0.5, rng_seed=7)


@pytest.fixture
def small_config() -> GameConfig:
    return GameConfig(rows=3, cols=3, light_probability=0.5, random_seed=123)


@pytest.fixture
def game(small_config: GameConfig) -> LightsOutGame:
    return LightsOutGame(small_config)
