"""Unit tests for the solver convenience helpers."""

import math

import pytest

from precisionroot import FloatField
from precisionroot.solvers import (
    AllowedSolution,
    InvalidConfigurationError,
    NoBracketingError,
    NullFunctionError,
    bracket,
    is_bracketing,
    midpoint,
    solve,
)


class TestSolve:
    def test_default_solver(self, field):
        root = solve(lambda x: x * x - 4, 0, 5, field=field)
        assert abs(root - 2) < 2e-6

    def test_custom_accuracy(self, field):
        root = solve(lambda x: field.context.exp(x) - 10, 2, 3, absolute_accuracy="1e-30", field=field,
                     relative_accuracy="1e-35", function_value_accuracy="1e-40")
        assert abs(root - field.context.log(10)) < field.convert("1e-29")

    def test_float_field(self):
        root = solve(lambda x: math.cos(x) - x, 0.0, 1.0, absolute_accuracy=1e-12, field=FloatField())
        assert abs(root - 0.7390851332151607) < 1e-11

    def test_side_policy(self, field):
        root = solve(
            field.context.sin, 3, 4, absolute_accuracy="1e-25",
            allowed_solution=AllowedSolution.RIGHT_SIDE, field=field,
        )
        assert root >= field.context.pi

    def test_null_function(self):
        with pytest.raises(NullFunctionError):
            solve(None, 0, 1)


class TestIsBracketing:
    def test_opposite_signs(self, field):
        assert is_bracketing(lambda x: x - 1, 0, 2, field=field)

    def test_same_sign(self, field):
        assert not is_bracketing(lambda x: x * x + 1, -1, 1, field=field)

    def test_tiny_same_sign_float_values(self, float_field):
        assert not is_bracketing(lambda x: 1e-170 * (x * x + 1), -1.0, 1.0, field=float_field)

    def test_zero_endpoint_counts(self, field):
        assert is_bracketing(lambda x: x, 0, 1, field=field)

    def test_null_function(self):
        with pytest.raises(NullFunctionError):
            is_bracketing(None, 0, 1)


class TestBracket:
    def test_expands_until_sign_change(self, field):
        a, b = bracket(lambda x: x - 3, 0, -10, 10, field=field)
        assert a == -3
        assert b == 3

    def test_clips_to_bounds(self, field):
        c = field.convert("9.5")
        a, b = bracket(lambda x: x - c, 5, 4, 10, field=field)
        assert a == 4
        assert b == 10

    def test_custom_step(self, field):
        c = field.convert("0.25")
        a, b = bracket(lambda x: x - c, 0, -1, 1, step="0.1", field=field)
        assert a < field.convert("0.25") <= b
        assert field.to_float(b) == pytest.approx(0.3)

    def test_tiny_same_sign_float_values_never_bracket(self, float_field):
        with pytest.raises(NoBracketingError):
            bracket(lambda x: 1e-170 * (x * x + 1), 0.0, -2.0, 2.0, field=float_field)

    def test_fails_at_bounds(self, field):
        with pytest.raises(NoBracketingError) as exc_info:
            bracket(lambda x: x * x + 1, 0, -2, 2, field=field)
        assert exc_info.value.lo == -2.0
        assert exc_info.value.hi == 2.0

    def test_fails_at_iteration_limit(self, field):
        with pytest.raises(NoBracketingError, match="3 of 3 iterations"):
            bracket(lambda x: x - 50, 0, -100, 100, maximum_iterations=3, field=field)

    def test_invalid_iterations(self, field):
        with pytest.raises(InvalidConfigurationError):
            bracket(lambda x: x, 0, -1, 1, maximum_iterations=0, field=field)

    def test_initial_outside_bounds(self, field):
        with pytest.raises(InvalidConfigurationError, match="lower_bound < initial < upper_bound"):
            bracket(lambda x: x, 5, -1, 1, field=field)

    def test_result_feeds_solver(self, field):
        a, b = bracket(lambda x: x**3 - 20, 0, -100, 100, field=field)
        root = solve(
            lambda x: x**3 - 20, a, b, absolute_accuracy="1e-30", field=field,
            relative_accuracy="1e-35", function_value_accuracy="1e-40",
        )
        assert abs(root - field.context.cbrt(20)) < field.convert("1e-29")


class TestMidpoint:
    def test_midpoint(self, field):
        assert midpoint(field, 1, 2) == field.convert("1.5")

    def test_float_midpoint(self):
        assert midpoint(FloatField(), 1, 2) == 1.5
