"""
PuLP/CBC backend for the Sudoku encoding layer.

This module provides an ILP solving context that:
  - Represents each bounded integer variable as a one-hot block of binaries
  - Collects constraints as LinearConstraint objects (ConstraintBuilder)
  - Adds one one-hot constraint per variable at check() time
  - Solves using PuLP's bundled CBC solver
  - Reads the model back through a numpy array of the y values

Uses standard pulp library (no custom solver implementation).
"""

import logging
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
import pulp

from sudoku_sat.constraints.builder import (
    BoundedVariable,
    ConstraintBuilder,
    LinearConstraint,
    add_one_hot_constraints,
)
from sudoku_sat.core.errors import SolverFailureError
from sudoku_sat.solver.context import SolvingContext, Verdict

logger = logging.getLogger(__name__)

# A pulp-side constraint is a conjunction of linear rows
LpConstraint = List[LinearConstraint]


class PulpContext(SolvingContext):
    """
    Solving context backed by a fresh pulp.LpProblem per check().

    Args:
        msg: If True, let CBC print its log to stdout
        objective: "min_sum" minimizes sum(y) (constant under one-hot),
                   "none" uses a zero objective (feasibility only)

    Example:
        >>> ctx = PulpContext()
        >>> x = ctx.new_bounded_integer_variable("x", 4)
        >>> ctx.add(ctx.equals(x, 7))
        >>> ctx.check()
        'sat'
        >>> ctx.evaluate(x)
        7
    """

    name = "pulp"

    def __init__(self, msg: bool = False, objective: str = "min_sum") -> None:
        super().__init__()
        if objective not in ("min_sum", "none"):
            raise ValueError(f"Unknown objective: {objective}")
        self.msg = msg
        self.objective = objective
        self.builder = ConstraintBuilder()
        self.variables: List[BoundedVariable] = []
        self._num_y = 0
        self._values: Optional[Dict[str, int]] = None

    def _make_variable(self, name: str, bit_width: int) -> BoundedVariable:
        var = BoundedVariable(name=name, offset=self._num_y, bit_width=bit_width)
        self._num_y += var.domain_size
        self.variables.append(var)
        return var

    @property
    def num_constraints(self) -> int:
        # One-hot rows are added per variable at solve time
        return len(self.builder.constraints) + len(self.variables)

    # ------------------------------------------------------------------
    # Constraint primitives
    # ------------------------------------------------------------------

    def conjunction(self, constraints: Sequence[LpConstraint]) -> LpConstraint:
        return [lc for group in constraints for lc in group]

    def equals(self, var: BoundedVariable, value: int) -> LpConstraint:
        self._check_constant(value, var.bit_width)
        b = ConstraintBuilder()
        b.fix_value(var, value)
        return b.constraints

    def less_equal(
        self,
        lhs: Union[BoundedVariable, int],
        rhs: Union[BoundedVariable, int],
    ) -> LpConstraint:
        b = ConstraintBuilder()
        if isinstance(lhs, BoundedVariable) and isinstance(rhs, int):
            self._check_constant(rhs, lhs.bit_width)
            # var <= k: forbid every value above k
            for value in range(rhs + 1, lhs.domain_size):
                b.forbid_value(lhs, value)
        elif isinstance(lhs, int) and isinstance(rhs, BoundedVariable):
            self._check_constant(lhs, rhs.bit_width)
            # k <= var: forbid every value below k
            for value in range(0, lhs):
                b.forbid_value(rhs, value)
        else:
            raise NotImplementedError(
                "The one-hot encoding only compares a variable against an int constant"
            )
        return b.constraints

    def all_distinct(self, variables: Sequence[BoundedVariable]) -> LpConstraint:
        b = ConstraintBuilder()
        b.all_distinct(variables)
        return b.constraints

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------

    def add(self, constraint: LpConstraint) -> None:
        self.builder.constraints.extend(constraint)

    def check(self) -> Verdict:
        """
        Build and solve the ILP for every constraint added so far.

        Returns:
            "sat" if CBC found an optimal (hence feasible) assignment,
            "unsat" if CBC proved infeasibility

        Raises:
            SolverFailureError: if CBC crashed or returned any other status
        """
        self._values = None

        # 1. Create model
        prob = pulp.LpProblem("sudoku_ilp", pulp.LpMinimize)

        # 2. Create binary variables, one block per bounded variable
        y = [
            pulp.LpVariable(f"y_{var.name}_{value}", cat=pulp.LpBinary)
            for var in self.variables
            for value in range(var.domain_size)
        ]

        # 3. One-hot rows + every collected constraint
        rows = ConstraintBuilder()
        add_one_hot_constraints(rows, self.variables)
        for lc in rows.constraints + self.builder.constraints:
            assert len(lc.indices) == len(lc.coeffs), \
                f"Constraint has mismatched indices/coeffs: {len(lc.indices)} vs {len(lc.coeffs)}"
            expr = pulp.lpSum(coeff * y[idx] for idx, coeff in zip(lc.indices, lc.coeffs))
            if lc.sense == "<=":
                prob += (expr <= lc.rhs)
            else:
                prob += (expr == lc.rhs)

        # 4. Set objective
        if self.objective == "min_sum":
            prob += pulp.lpSum(y)
        else:
            prob += pulp.lpSum([])

        logger.debug(
            "CBC model: %d binaries, %d rows", len(y), prob.numConstraints()
        )

        # 5. Solve using pulp's CBC solver
        try:
            status = prob.solve(pulp.PULP_CBC_CMD(msg=self.msg))
        except pulp.PulpSolverError as e:
            self.solver_status = "Error"
            raise SolverFailureError(f"CBC failed: {e}") from e

        self.solver_status = pulp.LpStatus[status]
        if self.solver_status == "Infeasible":
            return "unsat"
        if self.solver_status != "Optimal":
            raise SolverFailureError(
                f"Solver status: {self.solver_status}. No definitive verdict from CBC."
            )

        # 6. Extract solution into numpy array (guard against None / float noise)
        y_sol = np.array(
            [1 if (v.varValue is not None and v.varValue > 0.5) else 0 for v in y],
            dtype=int,
        )
        self._values = {}
        for var in self.variables:
            block = y_sol[var.offset:var.offset + var.domain_size]
            if block.sum() != 1:
                raise SolverFailureError(
                    f"One-hot constraint violated in solution for {var.name}: {block}"
                )
            self._values[var.name] = int(np.argmax(block))
        return "sat"

    def evaluate(self, var: BoundedVariable) -> int:
        if self._values is None:
            raise SolverFailureError("evaluate() called without a satisfiable check()")
        try:
            return self._values[var.name]
        except KeyError as e:
            raise SolverFailureError(f"Unknown variable {var.name}") from e
