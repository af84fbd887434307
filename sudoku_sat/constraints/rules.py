"""
Sudoku rule encoding over a SolvingContext.

Pipeline pieces, in the order the kernel runs them:
  1. create_variable_matrix: one bounded variable per cell, named x_<r>_<c>
  2. encode_cells / encode_rows / encode_columns / encode_boxes: the four
     puzzle-independent rule families, combined by encode_sudoku_rules
  3. encode_clues: equalities for the nonzero cells of one puzzle

Each encoder is pure: it reads the matrix, asks the context for constraint
objects, and returns them. Nothing is added to the context here.
"""

from typing import Any, List

from sudoku_sat.constraints.indexing import (
    all_boxes,
    box_cells,
    column_cells,
    row_cells,
    variable_name,
)
from sudoku_sat.core.grid_types import CELL_BIT_WIDTH, GRID_SIZE, MAX_DIGIT, MIN_DIGIT, Grid
from sudoku_sat.solver.context import SolvingContext, flatten_constraints

VariableMatrix = List[List[Any]]


def create_variable_matrix(ctx: SolvingContext, bit_width: int = CELL_BIT_WIDTH) -> VariableMatrix:
    """
    Declare a 9x9 matrix of fresh variables in `ctx`.

    Args:
        ctx: Solving context that will own the variables
        bit_width: Width of each variable; must hold MAX_DIGIT

    Raises:
        ValueError: if bit_width cannot represent 9
    """
    if (1 << bit_width) <= MAX_DIGIT:
        raise ValueError(f"bit_width={bit_width} cannot represent {MAX_DIGIT}")

    return [
        [ctx.new_bounded_integer_variable(variable_name(i, j), bit_width) for j in range(GRID_SIZE)]
        for i in range(GRID_SIZE)
    ]


def encode_cells(ctx: SolvingContext, X: VariableMatrix) -> List[Any]:
    """Each cell holds a value in 1..9: one constraint per cell (81 total)."""
    return [
        ctx.conjunction([ctx.less_equal(MIN_DIGIT, X[i][j]), ctx.less_equal(X[i][j], MAX_DIGIT)])
        for i in range(GRID_SIZE)
        for j in range(GRID_SIZE)
    ]


def encode_rows(ctx: SolvingContext, X: VariableMatrix) -> List[Any]:
    """Each row contains a digit at most once."""
    return [
        ctx.all_distinct([X[r][c] for r, c in row_cells(i)])
        for i in range(GRID_SIZE)
    ]


def encode_columns(ctx: SolvingContext, X: VariableMatrix) -> List[Any]:
    """Each column contains a digit at most once."""
    return [
        ctx.all_distinct([X[r][c] for r, c in column_cells(j)])
        for j in range(GRID_SIZE)
    ]


def encode_boxes(ctx: SolvingContext, X: VariableMatrix) -> List[Any]:
    """Each 3x3 box contains a digit at most once. Boxes in row-major order."""
    return [
        ctx.all_distinct([X[r][c] for r, c in box_cells(i0, j0)])
        for i0, j0 in all_boxes()
    ]


def encode_sudoku_rules(ctx: SolvingContext, X: VariableMatrix) -> Any:
    """
    Conjunction of the four rule families.

    Order is fixed (cells, rows, columns, boxes) so that the same puzzle
    produces the same model text on every run.
    """
    return ctx.conjunction(flatten_constraints([
        encode_cells(ctx, X),
        encode_rows(ctx, X),
        encode_columns(ctx, X),
        encode_boxes(ctx, X),
    ]))


def encode_clues(ctx: SolvingContext, X: VariableMatrix, grid: Grid) -> Any:
    """
    Fix every clue cell: x[i][j] == grid[i][j] for nonzero grid[i][j].

    Blank (0) cells contribute nothing. An empty puzzle yields an empty
    conjunction, which is trivially true.
    """
    clues = [
        ctx.equals(X[i][j], int(grid[i][j]))
        for i in range(GRID_SIZE)
        for j in range(GRID_SIZE)
        if grid[i][j] != 0
    ]
    return ctx.conjunction(clues)
