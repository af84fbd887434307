"""
Smoke tests for the Z3 bit-vector solving context.
"""

import pytest
import z3

from sudoku_sat.core.errors import SolverFailureError
from sudoku_sat.solver.z3_solver import Z3Context


def test_simple_sat():
    ctx = Z3Context()
    a = ctx.new_bounded_integer_variable("a", 4)
    b = ctx.new_bounded_integer_variable("b", 4)
    ctx.add(ctx.equals(a, 9))
    ctx.add(ctx.conjunction([ctx.less_equal(8, b), ctx.less_equal(b, 9)]))
    ctx.add(ctx.all_distinct([a, b]))

    assert ctx.check() == "sat"
    assert ctx.solver_status == "sat"
    assert ctx.evaluate(a) == 9
    assert ctx.evaluate(b) == 8


def test_unsigned_comparison():
    # 15 must not wrap to -1 under a signed reading
    ctx = Z3Context()
    a = ctx.new_bounded_integer_variable("a", 4)
    ctx.add(ctx.equals(a, 15))
    ctx.add(ctx.less_equal(1, a))
    assert ctx.check() == "sat"
    assert ctx.evaluate(a) == 15


def test_unsat_and_no_model():
    ctx = Z3Context()
    a = ctx.new_bounded_integer_variable("a", 4)
    ctx.add(ctx.equals(a, 1))
    ctx.add(ctx.equals(a, 2))
    assert ctx.check() == "unsat"

    try:
        ctx.evaluate(a)
        raise AssertionError("Expected SolverFailureError")
    except SolverFailureError as e:
        print(f"  ✓ Caught expected error: {e}")


def test_contexts_are_independent():
    first = Z3Context()
    x1 = first.new_bounded_integer_variable("x_1_1", 4)
    first.add(first.equals(x1, 1))

    second = Z3Context()
    x2 = second.new_bounded_integer_variable("x_1_1", 4)
    second.add(second.equals(x2, 2))

    assert first.check() == "sat" and second.check() == "sat"
    assert first.evaluate(x1) == 1
    assert second.evaluate(x2) == 2
    assert first.num_constraints == 1


def test_empty_conjunction_is_true():
    ctx = Z3Context()
    ctx.add(ctx.conjunction([]))
    assert ctx.check() == "sat"


def _single_variable_context():
    ctx = Z3Context()
    a = ctx.new_bounded_integer_variable("a", 4)
    ctx.add(ctx.equals(a, 3))
    return ctx


def test_unknown_verdict_is_failure(monkeypatch):
    monkeypatch.setattr(z3.Solver, "check", lambda self, *args: z3.unknown)
    monkeypatch.setattr(z3.Solver, "reason_unknown", lambda self: "canceled")
    ctx = _single_variable_context()

    with pytest.raises(SolverFailureError) as info:
        ctx.check()
    assert "canceled" in str(info.value)
    assert ctx.solver_status == "unknown"


def test_z3_exception_is_failure(monkeypatch):
    def crash(self, *args):
        raise z3.Z3Exception("out of memory")

    monkeypatch.setattr(z3.Solver, "check", crash)
    ctx = _single_variable_context()

    with pytest.raises(SolverFailureError) as info:
        ctx.check()
    assert isinstance(info.value.__cause__, z3.Z3Exception)
    assert ctx.solver_status == "Error"
