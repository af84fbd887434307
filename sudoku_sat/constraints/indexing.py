"""
Cell indexing helpers for the Sudoku constraint system.

This module provides canonical mappings between:
  - Cell coordinates (r, c) ↔ flat cell index p_idx (0..80)
  - Cell coordinates (r, c) ↔ box id (r // 3, c // 3)
  - Cell coordinates (r, c) ↔ solver variable name "x_<r+1>_<c+1>"

Conventions:
  - Grid shape: (9, 9)
  - Cell ordering: row-major, p_idx = r * 9 + c
  - Coordinates are 0-based; variable names are 1-based

This is pure indexing math with no dependencies on constraints or solver.
"""

from typing import List, Tuple

from sudoku_sat.core.grid_types import BOX_SIZE, GRID_SIZE, Cell


def flatten_index(r: int, c: int, W: int = GRID_SIZE) -> int:
    """
    Convert row/col coordinates to a flat cell index (0 .. 80).

    Example:
        >>> flatten_index(1, 2)
        11
    """
    return r * W + c


def unflatten_index(p_idx: int, W: int = GRID_SIZE) -> Tuple[int, int]:
    """
    Convert a flat cell index back to (row, col).

    This is the inverse of flatten_index.

    Example:
        >>> unflatten_index(11)
        (1, 2)
    """
    return (p_idx // W, p_idx % W)


def variable_name(r: int, c: int) -> str:
    """
    Solver-visible name of the variable for cell (r, c).

    Names are 1-indexed so that solver dumps read like puzzle notation.

    Example:
        >>> variable_name(0, 8)
        'x_1_9'
    """
    return f"x_{r + 1}_{c + 1}"


def box_of(r: int, c: int) -> Tuple[int, int]:
    """
    Return the (box_row, box_col) id of the 3x3 box containing cell (r, c).

    Example:
        >>> box_of(4, 7)
        (1, 2)
    """
    return (r // BOX_SIZE, c // BOX_SIZE)


def row_cells(r: int) -> List[Cell]:
    """All cells of row r, left to right."""
    return [(r, c) for c in range(GRID_SIZE)]


def column_cells(c: int) -> List[Cell]:
    """All cells of column c, top to bottom."""
    return [(r, c) for r in range(GRID_SIZE)]


def box_cells(i0: int, j0: int) -> List[Cell]:
    """
    All cells of box (i0, j0), row-major inside the box.

    Box (i0, j0) holds cells (3*i0 + i, 3*j0 + j) for i, j in 0..2.

    Example:
        >>> box_cells(1, 2)[:3]
        [(3, 6), (3, 7), (3, 8)]
    """
    return [
        (BOX_SIZE * i0 + i, BOX_SIZE * j0 + j)
        for i in range(BOX_SIZE)
        for j in range(BOX_SIZE)
    ]


def all_boxes() -> List[Tuple[int, int]]:
    """Box ids in deterministic row-major order."""
    n_boxes = GRID_SIZE // BOX_SIZE
    return [(i0, j0) for i0 in range(n_boxes) for j0 in range(n_boxes)]


if __name__ == "__main__":
    # Sanity checks for indexing roundtrips
    print("Testing cell index roundtrip...")
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            p = flatten_index(r, c)
            assert unflatten_index(p) == (r, c), f"Roundtrip failed at {(r, c)}"
    print("  ✓ Cell index roundtrip passed")

    print("Testing box membership...")
    seen = {}
    for i0, j0 in all_boxes():
        for cell in box_cells(i0, j0):
            assert cell not in seen, f"Cell {cell} in two boxes"
            assert box_of(*cell) == (i0, j0)
            seen[cell] = (i0, j0)
    assert len(seen) == GRID_SIZE * GRID_SIZE
    print("  ✓ Every cell in exactly one box")

    print("\n✓ indexing.py sanity checks passed.")
