"""
Exception types raised by the Sudoku encoding layer.

Unsatisfiable puzzles are NOT errors: they come back as a SolveResult with
status "unsatisfiable". Only malformed input and backend breakdowns raise.
"""


class MalformedGridError(ValueError):
    """Raised when a puzzle grid has the wrong shape or out-of-range values."""
    pass


class SolverFailureError(RuntimeError):
    """
    Raised when the external solving backend crashes, reports an undefined
    status, or is asked to evaluate a variable without a model.
    """
    pass
