from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np


Coordinate = Tuple[int, int]

# Relative offsets flipped by a single press: the cell itself, then up/down/left/right.
TOGGLE_OFFSETS: Tuple[Coordinate, ...] = ((0, 0), (-1, 0), (1, 0), (0, -1), (0, 1))


class LightsGrid:
    """Rectangular grid of lights.

    Cells are stored as a ``(rows, cols)`` boolean array, row-major, with
    ``True`` meaning lit. The dimensions are fixed when the grid is built;
    only cell values change afterwards.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self._rows = int(rows)
        self._cols = int(cols)
        self.grid = np.zeros((self._rows, self._cols), dtype=np.bool_)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "LightsGrid":
        """Build a grid from nested row sequences, e.g. ``[[1, 0], [0, 1]]``."""
        cells = np.asarray(rows, dtype=np.bool_)
        if cells.ndim != 2 or cells.size == 0:
            raise ValueError(f"expected a non-empty 2D layout, got shape {cells.shape}")
        board = cls(cells.shape[0], cells.shape[1])
        board.grid[:, :] = cells
        return board

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def is_lit(self, row: int, col: int) -> bool:
        return bool(self.grid[row, col])

    def cells_around(self, row: int, col: int) -> List[Coordinate]:
        """In-bounds cells affected by pressing ``(row, col)``."""
        cells: List[Coordinate] = []
        for dr, dc in TOGGLE_OFFSETS:
            r, c = row + dr, col + dc
            if self.is_inside(r, c):
                cells.append((r, c))
        return cells

    def flip(self, cells: Iterable[Coordinate]) -> int:
        """Invert every listed cell and return how many were flipped."""
        flipped = 0
        for r, c in cells:
            self.grid[r, c] = not self.grid[r, c]
            flipped += 1
        return flipped

    def toggle_around(self, row: int, col: int) -> int:
        return self.flip(self.cells_around(row, col))

    def all_off(self) -> bool:
        return not bool(np.any(self.grid))

    def count_lit(self) -> int:
        return int(np.count_nonzero(self.grid))

    def lit_cells(self) -> List[Coordinate]:
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid)]

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def copy(self) -> "LightsGrid":
        new_grid = LightsGrid(self._rows, self._cols)
        new_grid.grid = self.grid.copy()
        return new_grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LightsGrid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        return f"LightsGrid(rows={self._rows}, cols={self._cols}, lit={self.count_lit()})"
