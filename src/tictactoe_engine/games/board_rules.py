"""
NumPy utilities for the 3x3 board.

Win detection works on the flattened board through a pre-computed table of
line indices, so every query is a handful of vectorized operations.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

# Pre-computed winning lines (indices into flattened 3x3 board).
# Order matters: winning_line() reports the first complete one.
WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def complete_lines(flat: np.ndarray, value: int) -> np.ndarray:
    """Boolean mask over WIN_LINES: True where all three cells equal value."""
    return np.all(flat[WIN_LINES] == value, axis=1)


def first_complete_line(flat: np.ndarray) -> int:
    """
    Index into WIN_LINES of the first line held by a single non-empty value.

    Returns -1 when no line is complete.
    """
    cells = flat[WIN_LINES]
    mask = (cells[:, 0] != 0) & np.all(cells == cells[:, :1], axis=1)
    hits = np.flatnonzero(mask)
    return int(hits[0]) if hits.size else -1


def empty_cells(board: np.ndarray) -> List[Tuple[int, int]]:
    """Empty (row, col) positions in row-major order."""
    return [(int(r), int(c)) for r, c in np.argwhere(board == 0)]


def board_full(board: np.ndarray) -> bool:
    """Return True if no cell is empty."""
    return not np.any(board == 0)
