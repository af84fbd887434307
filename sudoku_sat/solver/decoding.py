"""
Solution decoding from a satisfied context back to a Grid.

Given:
  - ctx: a SolvingContext whose last check() returned "sat"
  - X: the 9x9 variable matrix declared in that context

Returns:
  - Grid: shape (9, 9) with plain Python-int values

The decoder does not re-check Sudoku rules: a valid model already
satisfies them by construction.
"""

import numpy as np

from sudoku_sat.constraints.rules import VariableMatrix
from sudoku_sat.core.grid_types import GRID_SIZE, Grid
from sudoku_sat.solver.context import SolvingContext


def decode_model(ctx: SolvingContext, X: VariableMatrix) -> Grid:
    """
    Evaluate every cell variable in the current model.

    Raises:
        ValueError: if X is not 9x9
        SolverFailureError: if ctx has no model (raised by ctx.evaluate)
    """
    if len(X) != GRID_SIZE or any(len(row) != GRID_SIZE for row in X):
        raise ValueError(f"Variable matrix must be {GRID_SIZE}x{GRID_SIZE}")

    grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=int)
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            grid[i, j] = int(ctx.evaluate(X[i][j]))
    return grid
