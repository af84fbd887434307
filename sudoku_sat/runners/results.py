"""
Result and verification structures for Sudoku solve calls.

Key components:
  - SolveResult: tagged outcome of one solve call ("solved" | "unsatisfiable")
  - compute_grid_mismatches: per-cell diff between two grids
  - clue_mismatches: clue cells a solved grid fails to preserve
  - is_valid_solution: every row, column and box is a permutation of 1..9
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Literal

import numpy as np

from sudoku_sat.constraints.indexing import all_boxes, box_cells
from sudoku_sat.core.grid_types import GRID_SIZE, MAX_DIGIT, MIN_DIGIT, Grid


SolveStatus = Literal["solved", "unsatisfiable"]


@dataclass
class SolveResult:
    """
    Outcome of a single solve call.

    Attributes:
        status: "solved" when the backend found a model, "unsatisfiable"
                when it proved none exists
        grid: The solved grid, or a copy of the input when unsatisfiable
        backend: Backend name ("pulp", "z3")
        solver_status: Raw status string from the backend
                       (e.g. "Optimal", "Infeasible", "sat", "unsat")
        num_variables: Number of cell variables declared
        num_constraints: Number of constraints the backend received
    """
    status: SolveStatus
    grid: Grid
    backend: str
    solver_status: str
    num_variables: int
    num_constraints: int

    @property
    def solved(self) -> bool:
        return self.status == "solved"


def compute_grid_mismatches(true_grid: Grid, pred_grid: Grid) -> List[Dict]:
    """
    Compute per-cell mismatches between two grids.

    Returns:
        - Empty list if grids are identical
        - [{"r": row, "c": col, "true": v, "pred": w}, ...] if shapes match
        - [{"shape_mismatch": True, "true_shape": ..., "pred_shape": ...}]
          if the shapes differ

    Example:
        >>> true = np.array([[0, 1], [2, 3]])
        >>> pred = np.array([[0, 9], [2, 3]])
        >>> compute_grid_mismatches(true, pred)
        [{'r': 0, 'c': 1, 'true': 1, 'pred': 9}]
    """
    true_grid = np.asarray(true_grid)
    pred_grid = np.asarray(pred_grid)

    if true_grid.shape != pred_grid.shape:
        return [{
            "shape_mismatch": True,
            "true_shape": tuple(true_grid.shape),
            "pred_shape": tuple(pred_grid.shape),
        }]

    diff_cells = []
    for coord in np.argwhere(true_grid != pred_grid):
        r, c = int(coord[0]), int(coord[1])
        diff_cells.append({
            "r": r,
            "c": c,
            "true": int(true_grid[r, c]),
            "pred": int(pred_grid[r, c]),
        })
    return diff_cells


def clue_mismatches(puzzle: Grid, solved: Grid) -> List[Dict]:
    """
    Clue cells of `puzzle` whose value differs in `solved`.

    Blank cells of the puzzle are ignored.
    """
    puzzle = np.asarray(puzzle)
    return [
        d for d in compute_grid_mismatches(puzzle, solved)
        if d.get("shape_mismatch") or d["true"] != 0
    ]


def is_valid_solution(grid: Grid) -> bool:
    """
    True iff `grid` is 9x9 and every row, column and 3x3 box is a
    permutation of 1..9.
    """
    grid = np.asarray(grid)
    if grid.shape != (GRID_SIZE, GRID_SIZE):
        return False

    digits = set(range(MIN_DIGIT, MAX_DIGIT + 1))
    for k in range(GRID_SIZE):
        if set(int(v) for v in grid[k, :]) != digits:
            return False
        if set(int(v) for v in grid[:, k]) != digits:
            return False
    for i0, j0 in all_boxes():
        if set(int(grid[r, c]) for r, c in box_cells(i0, j0)) != digits:
            return False
    return True
