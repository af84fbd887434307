"""
Core kernel runner for the Sudoku encoding layer.

This module provides the main entrypoint for solving a puzzle:
  1. Validate the grid (fail fast on malformed input)
  2. Create a fresh solving context for the chosen backend
  3. Declare the 9x9 variable matrix
  4. Assert the Sudoku rules and the puzzle's clues
  5. Run one satisfiability check
  6. Decode the model into a grid

No state survives a call: every solve builds and drops its own context.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from sudoku_sat.constraints.rules import create_variable_matrix, encode_clues, encode_sudoku_rules
from sudoku_sat.core.grid_types import Grid, validate_grid
from sudoku_sat.runners.results import SolveResult
from sudoku_sat.solver.decoding import decode_model
from sudoku_sat.solver.dispatch import DEFAULT_BACKEND, make_context

logger = logging.getLogger(__name__)


def solve_sudoku(grid: Any, backend: str = DEFAULT_BACKEND, **backend_options: Any) -> SolveResult:
    """
    Solve a 9x9 puzzle and report a tagged outcome.

    Args:
        grid: 9x9 nested list or numpy array, 0 for blanks
        backend: Solving backend name ("pulp" or "z3")
        **backend_options: Forwarded to the backend constructor

    Returns:
        SolveResult with status "solved" and the completed grid, or status
        "unsatisfiable" and an unmodified copy of the input

    Raises:
        MalformedGridError: if the grid is not a valid 9x9 puzzle
        SolverFailureError: if the backend fails to reach a verdict
        ValueError: if the backend name is unknown

    Example:
        >>> result = solve_sudoku([[0] * 9 for _ in range(9)], backend="z3")
        >>> result.status
        'solved'
    """
    puzzle = validate_grid(grid)
    num_clues = int(np.count_nonzero(puzzle))

    ctx = make_context(backend, **backend_options)
    X = create_variable_matrix(ctx)
    ctx.add(encode_sudoku_rules(ctx, X))
    ctx.add(encode_clues(ctx, X, puzzle))

    logger.debug(
        "Encoded puzzle with %d clues: %d variables, %d constraints (backend=%s)",
        num_clues, ctx.num_variables, ctx.num_constraints, ctx.name,
    )

    verdict = ctx.check()
    if verdict == "unsat":
        logger.info("Puzzle with %d clues is unsatisfiable (backend=%s)", num_clues, ctx.name)
        return SolveResult(
            status="unsatisfiable",
            grid=puzzle,
            backend=ctx.name,
            solver_status=ctx.solver_status,
            num_variables=ctx.num_variables,
            num_constraints=ctx.num_constraints,
        )

    solved = decode_model(ctx, X)
    logger.info("Solved puzzle with %d clues (backend=%s)", num_clues, ctx.name)
    return SolveResult(
        status="solved",
        grid=solved,
        backend=ctx.name,
        solver_status=ctx.solver_status,
        num_variables=ctx.num_variables,
        num_constraints=ctx.num_constraints,
    )


def solve(grid: Any, backend: str = DEFAULT_BACKEND, **backend_options: Any) -> Grid:
    """
    Solve a puzzle. When no solution exists, return an unmodified copy of
    the input as a (9, 9) int array.

    Callers that need to tell "unsatisfiable" apart from an already-complete
    input should use solve_sudoku instead.
    """
    return solve_sudoku(grid, backend=backend, **backend_options).grid


class SudokuSolver:
    """
    Pluggable solver object bound to one backend.

    Example:
        >>> solver = Z3SudokuSolver()
        >>> grid = solver.solve([[0] * 9 for _ in range(9)])
    """

    backend = DEFAULT_BACKEND

    def __init__(self, **backend_options: Any) -> None:
        self.backend_options = backend_options

    def solve(self, grid: Any) -> Grid:
        return solve(grid, backend=self.backend, **self.backend_options)

    def solve_with_status(self, grid: Any) -> SolveResult:
        return solve_sudoku(grid, backend=self.backend, **self.backend_options)


class PulpSudokuSolver(SudokuSolver):
    backend = "pulp"


class Z3SudokuSolver(SudokuSolver):
    backend = "z3"
