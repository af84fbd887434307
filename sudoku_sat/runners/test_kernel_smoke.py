"""
Smoke tests for the kernel entrypoints (solve_sudoku / solve / SudokuSolver).

Test scenarios:
  - A classic 30-clue puzzle solves to its known unique solution
  - A direct row contradiction is reported unsatisfiable
  - The compatibility solve() returns the input on unsatisfiable puzzles
  - Malformed input and unknown backends fail before solving
"""

import numpy as np
import pulp
import pytest
import z3

from sudoku_sat.core.errors import MalformedGridError, SolverFailureError
from sudoku_sat.runners.kernel import (
    PulpSudokuSolver,
    SudokuSolver,
    Z3SudokuSolver,
    solve,
    solve_sudoku,
)
from sudoku_sat.runners.results import clue_mismatches, is_valid_solution

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

BACKENDS = ("pulp", "z3")


def test_classic_puzzle():
    print("\n" + "=" * 70)
    print("TEST: Classic puzzle on every backend")
    print("=" * 70)

    for backend in BACKENDS:
        result = solve_sudoku(PUZZLE, backend=backend)
        print(f"  {backend}: status={result.status} solver_status={result.solver_status}")

        assert result.solved
        assert result.backend == backend
        assert result.num_variables == 81
        assert result.num_constraints > 0
        assert np.array_equal(result.grid, np.array(SOLUTION))
        assert is_valid_solution(result.grid)
        assert clue_mismatches(PUZZLE, result.grid) == []

    print("  ✓ test_classic_puzzle: PASSED")


def test_row_contradiction_is_unsatisfiable():
    print("\n" + "=" * 70)
    print("TEST: (0,0) = 5 and (0,1) = 5")
    print("=" * 70)

    puzzle = [[0] * 9 for _ in range(9)]
    puzzle[0][0] = 5
    puzzle[0][1] = 5

    for backend in BACKENDS:
        result = solve_sudoku(puzzle, backend=backend)
        assert result.status == "unsatisfiable", f"{backend}: {result.status}"
        assert not result.solved
        assert np.array_equal(result.grid, np.array(puzzle))

    print("  ✓ test_row_contradiction_is_unsatisfiable: PASSED")


def test_solve_returns_input_when_unsatisfiable():
    puzzle = [[0] * 9 for _ in range(9)]
    puzzle[2][0] = 4
    puzzle[7][0] = 4  # same column

    out = solve(puzzle, backend="z3")
    assert isinstance(out, np.ndarray) and out.dtype.kind == "i"
    assert np.array_equal(out, np.array(puzzle))
    # the caller's list is never touched
    assert puzzle[0][0] == 0


def test_solver_objects():
    assert isinstance(Z3SudokuSolver(), SudokuSolver)
    for solver in (PulpSudokuSolver(), Z3SudokuSolver()):
        grid = solver.solve(PUZZLE)
        assert np.array_equal(grid, np.array(SOLUTION))
        assert solver.solve_with_status(PUZZLE).backend == solver.backend


def test_malformed_input_fails_fast():
    for bad in ([[0] * 9] * 8, [[0] * 10] * 9):
        try:
            solve_sudoku(bad)
            raise AssertionError("Expected MalformedGridError")
        except MalformedGridError as e:
            print(f"  ✓ Caught expected error: {e}")


def test_unknown_backend():
    try:
        solve_sudoku(PUZZLE, backend="minisat")
        raise AssertionError("Expected ValueError for unknown backend")
    except ValueError as e:
        assert "Unknown backend" in str(e)


def test_backend_failure_propagates(monkeypatch):
    def cbc_crash(self, *args, **kwargs):
        raise pulp.PulpSolverError("cbc binary missing")

    monkeypatch.setattr(pulp.LpProblem, "solve", cbc_crash)
    monkeypatch.setattr(z3.Solver, "check", lambda self, *args: z3.unknown)
    monkeypatch.setattr(z3.Solver, "reason_unknown", lambda self: "canceled")

    for backend in BACKENDS:
        result = None
        with pytest.raises(SolverFailureError):
            result = solve_sudoku(PUZZLE, backend=backend)
        assert result is None, f"{backend} returned {result}"

    with pytest.raises(SolverFailureError):
        solve(PUZZLE, backend="pulp")


if __name__ == "__main__":
    test_classic_puzzle()
    test_row_contradiction_is_unsatisfiable()
    test_solve_returns_input_when_unsatisfiable()
    test_solver_objects()
    test_malformed_input_fails_fast()
    test_unknown_backend()
    print("\n✓ ALL TESTS PASSED")
