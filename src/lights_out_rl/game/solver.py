"""Linear-algebra solver for Lights Out.

Pressing a cell twice cancels out and presses commute, so a solution is a
subset of cells: a 0/1 vector ``x`` with ``A x = b`` over GF(2), where ``b``
is the flattened board and column ``j`` of ``A`` marks the cells toggled by
pressing cell ``j``.
"""

from __future__ import annotations

import itertools
from typing import List, Optional, Tuple

import numpy as np

from .grid import Coordinate, LightsGrid, TOGGLE_OFFSETS


# Beyond this nullspace dimension the minimum-weight search is skipped.
MAX_NULLSPACE_SEARCH = 12


def build_toggle_matrix(rows: int, cols: int) -> np.ndarray:
    """Return the ``N x N`` effect matrix (``N = rows * cols``) over GF(2)."""
    n = rows * cols
    a = np.zeros((n, n), dtype=np.uint8)
    for r in range(rows):
        for c in range(cols):
            j = r * cols + c
            for dr, dc in TOGGLE_OFFSETS:
                rr, cc = r + dr, c + dc
                if 0 <= rr < rows and 0 <= cc < cols:
                    a[rr * cols + cc, j] = 1
    return a


def _rref_augmented(a: np.ndarray, b: np.ndarray) -> Tuple[np.ndarray, List[int]]:
    """Gauss-Jordan elimination of ``[a | b]`` over GF(2)."""
    m, n = a.shape
    aug = np.concatenate([a % 2, (b % 2).reshape(-1, 1)], axis=1).astype(np.uint8)
    row = 0
    pivots: List[int] = []
    for col in range(n):
        candidates = np.nonzero(aug[row:, col])[0]
        if candidates.size == 0:
            continue
        pivot = row + int(candidates[0])
        if pivot != row:
            aug[[row, pivot]] = aug[[pivot, row]]
        for r in np.nonzero(aug[:, col])[0]:
            if r != row:
                aug[r, :] ^= aug[row, :]
        pivots.append(col)
        row += 1
        if row == m:
            break
    return aug, pivots


def _back_substitute(r_a: np.ndarray, rhs: np.ndarray, pivots: List[int], x: np.ndarray) -> None:
    # Rows are fully reduced, so each pivot variable depends only on free variables.
    for ri, pc in enumerate(pivots):
        x[pc] = (int(rhs[ri]) + int(np.dot(r_a[ri, pc + 1:], x[pc + 1:]))) % 2


def solve_gf2(a: np.ndarray, b: np.ndarray) -> Tuple[Optional[np.ndarray], List[np.ndarray]]:
    """Solve ``a x = b`` over GF(2).

    Returns a particular solution (``None`` when inconsistent) and a basis of
    the nullspace of ``a``.
    """
    n = a.shape[1]
    aug, pivots = _rref_augmented(a, b)
    r_a, r_b = aug[:, :n], aug[:, n]

    if np.any((r_a.sum(axis=1) == 0) & (r_b == 1)):
        return None, []

    x0 = np.zeros((n,), dtype=np.uint8)
    _back_substitute(r_a, r_b, pivots, x0)

    pivot_set = set(pivots)
    zeros = np.zeros_like(r_b)
    basis: List[np.ndarray] = []
    for free in (j for j in range(n) if j not in pivot_set):
        v = np.zeros((n,), dtype=np.uint8)
        v[free] = 1
        _back_substitute(r_a, zeros, pivots, v)
        basis.append(v)
    return x0, basis


def _min_weight(x0: np.ndarray, basis: List[np.ndarray]) -> np.ndarray:
    best = x0
    best_w = int(x0.sum())
    if len(basis) > MAX_NULLSPACE_SEARCH:
        return best
    for k in range(1, len(basis) + 1):
        for combo in itertools.combinations(basis, k):
            cand = x0.copy()
            for v in combo:
                cand ^= v
            w = int(cand.sum())
            if w < best_w:
                best, best_w = cand, w
    return best


def solve(board: LightsGrid) -> Optional[List[Coordinate]]:
    """Cells to press, in row-major order, to turn ``board`` dark.

    Returns ``None`` when no sequence of presses clears the board. Among the
    valid press sets the one with the fewest presses is chosen, unless the
    nullspace is too large to search.
    """
    a = build_toggle_matrix(board.rows, board.cols)
    b = board.grid.reshape(-1).astype(np.uint8)
    x0, basis = solve_gf2(a, b)
    if x0 is None:
        return None
    x = _min_weight(x0, basis)
    return [(int(i) // board.cols, int(i) % board.cols) for i in np.flatnonzero(x)]


def is_solvable(board: LightsGrid) -> bool:
    return solve(board) is not None


def hint(board: LightsGrid) -> Optional[Coordinate]:
    """Next cell to press on the way to a solution, if there is one."""
    presses = solve(board)
    if not presses:
        return None
    return presses[0]
