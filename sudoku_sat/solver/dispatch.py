"""
Backend dispatch layer.

This module provides a single entrypoint for creating a solving context by
backend name. Every call returns a FRESH context; contexts are never cached.
"""

from typing import Any, Callable, Dict

from sudoku_sat.solver.context import SolvingContext
from sudoku_sat.solver.lp_solver import PulpContext
from sudoku_sat.solver.z3_solver import Z3Context


DEFAULT_BACKEND = "pulp"

# =============================================================================
# Backend registry
# =============================================================================

BACKENDS: Dict[str, Callable[..., SolvingContext]] = {
    "pulp": PulpContext,
    "z3": Z3Context,
}


def make_context(backend: str = DEFAULT_BACKEND, **options: Any) -> SolvingContext:
    """
    Create a new solving context for `backend`.

    Args:
        backend: Registry key ("pulp" or "z3")
        **options: Passed to the backend constructor (e.g. msg=True for pulp)

    Raises:
        ValueError: if the backend name is unknown

    Example:
        >>> ctx = make_context("z3")
        >>> ctx.name
        'z3'
    """
    if backend not in BACKENDS:
        raise ValueError(
            f"Unknown backend: {backend}. Valid backends: {sorted(BACKENDS)}"
        )
    return BACKENDS[backend](**options)
