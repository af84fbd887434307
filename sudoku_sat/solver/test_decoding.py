"""
Tests for model decoding.
"""

import numpy as np

from sudoku_sat.constraints.rules import create_variable_matrix
from sudoku_sat.core.errors import SolverFailureError
from sudoku_sat.solver.decoding import decode_model
from sudoku_sat.solver.lp_solver import PulpContext
from sudoku_sat.solver.z3_solver import Z3Context


def _pinned_grid():
    # Arbitrary values, not a Sudoku: decode must copy them verbatim
    return np.array([[(3 * i + j) % 9 + 1 for j in range(9)] for i in range(9)])


def test_decode_reads_every_cell():
    expected = _pinned_grid()
    for ctx in (PulpContext(), Z3Context()):
        X = create_variable_matrix(ctx)
        for i in range(9):
            for j in range(9):
                ctx.add(ctx.equals(X[i][j], int(expected[i, j])))
        assert ctx.check() == "sat"

        grid = decode_model(ctx, X)
        assert grid.shape == (9, 9)
        assert np.array_equal(grid, expected), f"{ctx.name} decoded {grid}"
        assert all(type(v) is int for v in grid.tolist()[0])


def test_decode_without_model_fails():
    ctx = Z3Context()
    X = create_variable_matrix(ctx)
    try:
        decode_model(ctx, X)
        raise AssertionError("Expected SolverFailureError before check()")
    except SolverFailureError as e:
        print(f"  ✓ Caught expected error: {e}")


def test_decode_rejects_wrong_matrix_shape():
    ctx = Z3Context()
    X = create_variable_matrix(ctx)
    try:
        decode_model(ctx, X[:8])
        raise AssertionError("Expected ValueError for 8x9 matrix")
    except ValueError:
        pass
