"""
Solving context contract shared by every backend.

A SolvingContext is the only door between the Sudoku encoder and an external
solver library. It owns every variable and constraint of ONE solve call:

    ctx.new_bounded_integer_variable(name, bit_width) -> variable
    ctx.add(constraint)                               # register for check()
    ctx.check() -> "sat" | "unsat"
    ctx.evaluate(variable) -> int                     # only after "sat"

plus the constraint primitives the encoder composes:

    conjunction, equals, less_equal, all_distinct

Backends subclass SolvingContext and fill in the primitives. The constraint
objects they return are opaque to the encoder.
"""

from typing import Any, Dict, List, Literal, Sequence, Union

Verdict = Literal["sat", "unsat"]


class SolvingContext:
    """
    Base class for solver backends. Never shared between solve calls.

    Attributes:
        name: Backend identifier used in logs and SolveResult ("pulp", "z3")
        solver_status: Raw status string from the last check(), or "Not Solved"
    """

    name = "abstract"

    def __init__(self) -> None:
        self.solver_status = "Not Solved"
        self._names: Dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Variables
    # ------------------------------------------------------------------

    def new_bounded_integer_variable(self, name: str, bit_width: int) -> Any:
        """
        Declare a fresh unsigned variable with values 0 .. 2**bit_width - 1.

        Raises:
            ValueError: if the name is already taken or bit_width < 1
        """
        if bit_width < 1:
            raise ValueError(f"bit_width must be positive, got {bit_width}")
        if name in self._names:
            raise ValueError(f"Variable name already declared: {name}")
        var = self._make_variable(name, bit_width)
        self._names[name] = var
        return var

    def _make_variable(self, name: str, bit_width: int) -> Any:
        raise NotImplementedError

    @property
    def num_variables(self) -> int:
        return len(self._names)

    @property
    def num_constraints(self) -> int:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Constraint primitives
    # ------------------------------------------------------------------

    def conjunction(self, constraints: Sequence[Any]) -> Any:
        raise NotImplementedError

    def equals(self, var: Any, value: int) -> Any:
        raise NotImplementedError

    def less_equal(self, lhs: Union[Any, int], rhs: Union[Any, int]) -> Any:
        """Unsigned lhs <= rhs where one side is a variable and the other an int."""
        raise NotImplementedError

    def all_distinct(self, variables: Sequence[Any]) -> Any:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------

    def add(self, constraint: Any) -> None:
        raise NotImplementedError

    def check(self) -> Verdict:
        raise NotImplementedError

    def evaluate(self, var: Any) -> int:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    @staticmethod
    def _check_constant(value: int, bit_width: int) -> int:
        """Reject constants that would overflow a bit_width-wide variable."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected an int constant, got {type(value).__name__}")
        if not 0 <= value < (1 << bit_width):
            raise ValueError(
                f"Constant {value} does not fit in {bit_width} unsigned bits"
            )
        return value


def flatten_constraints(groups: Sequence[Sequence[Any]]) -> List[Any]:
    """Concatenate constraint families in order."""
    return [c for group in groups for c in group]
