"""
Sudoku as a satisfiability problem.

Encodes a 9x9 puzzle as bounded integer variables plus cell-range,
row/column/box distinctness and clue constraints, checks it with an
external solver backend (PuLP/CBC or Z3), and decodes the model back
into a grid.
"""

from sudoku_sat.core.errors import MalformedGridError, SolverFailureError
from sudoku_sat.runners.kernel import (
    PulpSudokuSolver,
    SudokuSolver,
    Z3SudokuSolver,
    solve,
    solve_sudoku,
)
from sudoku_sat.runners.results import SolveResult, is_valid_solution

__all__ = [
    "MalformedGridError",
    "SolverFailureError",
    "SolveResult",
    "SudokuSolver",
    "PulpSudokuSolver",
    "Z3SudokuSolver",
    "is_valid_solution",
    "solve",
    "solve_sudoku",
]
