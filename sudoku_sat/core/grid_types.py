"""
Core grid types and utilities for the Sudoku encoding layer.

This module defines the fundamental Grid representation and the input
validation every solve call runs before any solver context is created.

Grid: always shape (9, 9), dtype=int, values in {0, ..., 9} (0 = blank)
Cells: indexed as (row, col) tuples, 0-based
"""

import numpy as np
from typing import Any, TypeAlias, Tuple

from sudoku_sat.core.errors import MalformedGridError


GRID_SIZE = 9
BOX_SIZE = 3
MIN_DIGIT = 1
MAX_DIGIT = 9

# 4 bits is the narrowest unsigned width that holds 0..9
CELL_BIT_WIDTH = 4

Grid: TypeAlias = np.ndarray  # shape: (9, 9), dtype: int, values in {0, ..., 9}
Cell: TypeAlias = Tuple[int, int]  # (row, col) in {0, ..., 8} x {0, ..., 8}


def validate_grid(grid: Any) -> Grid:
    """
    Check a puzzle and return it as a fresh (9, 9) integer numpy array.

    Accepts a nested list or a numpy array. The caller's object is never
    modified; the returned array is always a copy.

    Args:
        grid: 9x9 puzzle, 0 for blank cells and 1..9 for clues

    Returns:
        Grid: validated copy with dtype=int

    Raises:
        MalformedGridError: if the grid is ragged, not 9x9, holds
            non-integer entries, or holds values outside 0..9

    Example:
        >>> puzzle = validate_grid([[0] * 9 for _ in range(9)])
        >>> puzzle.shape
        (9, 9)
    """
    try:
        arr = np.asarray(grid)
    except ValueError as e:
        # Ragged nested lists cannot form a rectangular array
        raise MalformedGridError(f"Grid is not rectangular: {e}") from e

    if arr.shape != (GRID_SIZE, GRID_SIZE):
        raise MalformedGridError(
            f"Grid must have shape ({GRID_SIZE}, {GRID_SIZE}), got {arr.shape}"
        )

    if arr.dtype.kind not in ("i", "u"):
        raise MalformedGridError(
            f"Grid entries must be integers, got dtype={arr.dtype}"
        )

    bad = np.argwhere((arr < 0) | (arr > MAX_DIGIT))
    if bad.size:
        r, c = int(bad[0][0]), int(bad[0][1])
        raise MalformedGridError(
            f"Cell ({r}, {c}) holds {int(arr[r, c])}, allowed values are 0..{MAX_DIGIT}"
        )

    return arr.astype(int, copy=True)


def print_grid(grid: Grid) -> None:
    """
    Print an ASCII representation of the grid for debugging.

    Blank cells print as '.', boxes are separated by '|' and '-' rules.

    Args:
        grid: Grid to print (must be 2D)

    Raises:
        AssertionError: If grid is not 2-dimensional
    """
    grid = np.asarray(grid)
    assert grid.ndim == 2, f"Grid must be 2D, got {grid.ndim}D"

    for r, row in enumerate(grid):
        if r and r % BOX_SIZE == 0:
            print("------+-------+------")
        cells = []
        for c, val in enumerate(row):
            if c and c % BOX_SIZE == 0:
                cells.append("|")
            cells.append(str(int(val)) if val else ".")
        print(" ".join(cells))


if __name__ == "__main__":
    # Self-test: empty grid validates, bad shapes are rejected
    empty = validate_grid([[0] * GRID_SIZE for _ in range(GRID_SIZE)])
    print_grid(empty)

    try:
        validate_grid([[0] * 8 for _ in range(9)])
        raise AssertionError("Expected MalformedGridError for 9x8 grid")
    except MalformedGridError as e:
        print(f"Rejected: {e}")

    print("grid_types.py self-test passed.")
