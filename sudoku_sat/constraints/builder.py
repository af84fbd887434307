"""
Linear constraint builder for the enumerated-domain (one-hot) encoding.

Each bounded integer variable v with bit width w owns a contiguous block of
2**w binaries in the y vector:

    y[v.offset + value] = 1  iff  v == value

Constraints have the form:
    sum_i coeffs[i] * y[indices[i]]  (== | <=)  rhs

This is the generic plumbing used by the PuLP backend. No solver logic and
no Sudoku-specific code here.
"""

from dataclasses import dataclass, field
from typing import List, Literal, Sequence


Sense = Literal["==", "<="]


@dataclass(frozen=True)
class BoundedVariable:
    """
    An unsigned integer variable in 0 .. 2**bit_width - 1, stored one-hot.

    Attributes:
        name: Unique solver-visible name (e.g. "x_1_1")
        offset: Index of this variable's first binary in the y vector
        bit_width: Number of bits; the domain has 2**bit_width values
    """
    name: str
    offset: int
    bit_width: int

    @property
    def domain_size(self) -> int:
        return 1 << self.bit_width

    def y_index(self, value: int) -> int:
        """Index into y of the binary meaning `self == value`."""
        assert 0 <= value < self.domain_size, \
            f"value {value} outside domain of {self.name} (0..{self.domain_size - 1})"
        return self.offset + value


@dataclass
class LinearConstraint:
    """
    Represents a single linear constraint over the y vector:

        sum_i coeffs[i] * y[indices[i]]  sense  rhs

    Example:
        # y[5] + y[21] <= 1 (two variables cannot both take the same value)
        LinearConstraint(indices=[5, 21], coeffs=[1.0, 1.0], rhs=1.0, sense="<=")
    """
    indices: List[int]    # indices into y
    coeffs: List[float]   # same length as indices
    rhs: float            # right-hand side
    sense: Sense = "=="


@dataclass
class ConstraintBuilder:
    """
    Collects linear constraints over the y vector.

    Attributes:
        constraints: List of LinearConstraint objects (all hard constraints)
    """
    constraints: List[LinearConstraint] = field(default_factory=list)

    def add_eq(self, indices: List[int], coeffs: List[float], rhs: float) -> None:
        """
        Add a linear equality constraint: sum_i coeffs[i] * y[indices[i]] = rhs

        Raises:
            AssertionError: If indices and coeffs have different lengths
        """
        assert len(indices) == len(coeffs), \
            f"indices and coeffs must have same length, got {len(indices)} != {len(coeffs)}"

        self.constraints.append(
            LinearConstraint(indices=indices, coeffs=coeffs, rhs=rhs, sense="==")
        )

    def add_le(self, indices: List[int], coeffs: List[float], rhs: float) -> None:
        """
        Add a linear inequality constraint: sum_i coeffs[i] * y[indices[i]] <= rhs

        Raises:
            AssertionError: If indices and coeffs have different lengths
        """
        assert len(indices) == len(coeffs), \
            f"indices and coeffs must have same length, got {len(indices)} != {len(coeffs)}"

        self.constraints.append(
            LinearConstraint(indices=indices, coeffs=coeffs, rhs=rhs, sense="<=")
        )

    def fix_value(self, var: BoundedVariable, value: int) -> None:
        """
        Enforce var == value by setting y[var, value] = 1.

        NOTE: Zeroing the other values of var is left to the one-hot
              constraint added per variable at solve time.
        """
        self.add_eq(indices=[var.y_index(value)], coeffs=[1.0], rhs=1.0)

    def forbid_value(self, var: BoundedVariable, value: int) -> None:
        """Enforce var != value by setting y[var, value] = 0."""
        self.add_eq(indices=[var.y_index(value)], coeffs=[1.0], rhs=0.0)

    def all_distinct(self, variables: Sequence[BoundedVariable]) -> None:
        """
        Enforce pairwise distinctness of `variables`.

        For every value d shared by all domains:
            sum_v y[v, d] <= 1

        Creates one constraint per value, so 16 constraints for 4-bit variables.
        """
        if not variables:
            return
        shared = min(v.domain_size for v in variables)
        for value in range(shared):
            indices = [v.y_index(value) for v in variables]
            self.add_le(indices, [1.0] * len(indices), 1.0)


def add_one_hot_constraints(builder: ConstraintBuilder, variables: Sequence[BoundedVariable]) -> None:
    """
    For each variable v, enforce:

        sum_{d=0..2**w-1} y[v, d] = 1

    This ensures every variable takes exactly one value.

    Example:
        >>> builder = ConstraintBuilder()
        >>> add_one_hot_constraints(builder, [BoundedVariable("a", 0, 4)])
        >>> len(builder.constraints)
        1
    """
    for var in variables:
        indices = [var.y_index(d) for d in range(var.domain_size)]
        builder.add_eq(indices, [1.0] * len(indices), 1.0)


if __name__ == "__main__":
    a = BoundedVariable("a", offset=0, bit_width=2)
    b = BoundedVariable("b", offset=4, bit_width=2)

    print("Testing one-hot constraints...")
    ob = ConstraintBuilder()
    add_one_hot_constraints(ob, [a, b])
    assert len(ob.constraints) == 2
    assert ob.constraints[1].indices == [4, 5, 6, 7]
    print("  ✓ Created 2 one-hot constraints (one per variable)")

    print("Testing all_distinct...")
    db = ConstraintBuilder()
    db.all_distinct([a, b])
    assert len(db.constraints) == 4
    assert all(lc.sense == "<=" and lc.rhs == 1.0 for lc in db.constraints)
    print("  ✓ Created 4 distinctness constraints (one per value)")

    print("\n✓ builder.py sanity checks passed.")
