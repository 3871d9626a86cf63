from __future__ import annotations


class LightsOutError(Exception):
    """Base class for errors raised by the Lights Out engine."""


class InvalidConfig(LightsOutError, ValueError):
    """Board dimensions or light probability are out of range."""


class GameAlreadyWon(LightsOutError, RuntimeError):
    """A press was issued on a session whose board is already dark."""
