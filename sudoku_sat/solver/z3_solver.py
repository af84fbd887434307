"""
Z3 backend: 4-bit bit-vector encoding of the Sudoku cells.

Every context owns its own z3.Context, so two solve calls never share
declarations or assertions, even when they run on different threads.
"""

import logging
from typing import Optional, Sequence, Union

import z3

from sudoku_sat.core.errors import SolverFailureError
from sudoku_sat.solver.context import SolvingContext, Verdict

logger = logging.getLogger(__name__)


class Z3Context(SolvingContext):
    """
    Solving context backed by a z3.Solver over fixed-width bit-vectors.

    Example:
        >>> ctx = Z3Context()
        >>> x = ctx.new_bounded_integer_variable("x", 4)
        >>> ctx.add(ctx.equals(x, 9))
        >>> ctx.check()
        'sat'
        >>> ctx.evaluate(x)
        9
    """

    name = "z3"

    def __init__(self) -> None:
        super().__init__()
        self.ctx = z3.Context()
        self.solver = z3.Solver(ctx=self.ctx)
        self._model: Optional[z3.ModelRef] = None

    def _make_variable(self, name: str, bit_width: int) -> z3.BitVecRef:
        return z3.BitVec(name, bit_width, ctx=self.ctx)

    @property
    def num_constraints(self) -> int:
        return len(self.solver.assertions())

    def _const(self, value: int, bit_width: int) -> z3.BitVecNumRef:
        return z3.BitVecVal(self._check_constant(value, bit_width), bit_width, ctx=self.ctx)

    # ------------------------------------------------------------------
    # Constraint primitives
    # ------------------------------------------------------------------

    def conjunction(self, constraints: Sequence[z3.BoolRef]) -> z3.BoolRef:
        if not constraints:
            return z3.BoolVal(True, ctx=self.ctx)
        return z3.And(*constraints)

    def equals(self, var: z3.BitVecRef, value: int) -> z3.BoolRef:
        return var == self._const(value, var.size())

    def less_equal(
        self,
        lhs: Union[z3.BitVecRef, int],
        rhs: Union[z3.BitVecRef, int],
    ) -> z3.BoolRef:
        if isinstance(lhs, int) and isinstance(rhs, int):
            raise NotImplementedError("less_equal needs at least one variable")
        if isinstance(lhs, int):
            lhs = self._const(lhs, rhs.size())
        if isinstance(rhs, int):
            rhs = self._const(rhs, lhs.size())
        return z3.ULE(lhs, rhs)

    def all_distinct(self, variables: Sequence[z3.BitVecRef]) -> z3.BoolRef:
        return z3.Distinct(*variables)

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------

    def add(self, constraint: z3.BoolRef) -> None:
        self.solver.add(constraint)

    def check(self) -> Verdict:
        """
        Run z3's satisfiability check.

        Raises:
            SolverFailureError: on a z3 exception or an "unknown" verdict
        """
        self._model = None
        logger.debug("z3 check over %d assertions", self.num_constraints)
        try:
            result = self.solver.check()
        except z3.Z3Exception as e:
            self.solver_status = "Error"
            raise SolverFailureError(f"z3 failed: {e}") from e

        self.solver_status = str(result)
        if result == z3.sat:
            self._model = self.solver.model()
            return "sat"
        if result == z3.unsat:
            return "unsat"
        raise SolverFailureError(
            f"z3 returned {result}: {self.solver.reason_unknown()}"
        )

    def evaluate(self, var: z3.BitVecRef) -> int:
        if self._model is None:
            raise SolverFailureError("evaluate() called without a satisfiable check()")
        return self._model.evaluate(var, model_completion=True).as_long()
