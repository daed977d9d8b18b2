"""Bracketing Brent-family solver with adaptive-order inverse interpolation.

A modification of Brent's method working over any RealField:

- the interpolation order is user-configurable instead of being inverse
  quadratic only; the solver uses as many of the most recent points as
  allowed and drops points when the guess leaves the bracket,
- the returned value is chosen in the final bracket according to an
  AllowedSolution policy,
- an endpoint that has not moved for MAXIMAL_AGING iterations pulls the
  interpolation target to the other side of the root, so the bracket keeps
  shrinking from both ends.

The bracket always encloses a sign change. Every guess is checked to be
strictly inside it, with bisection as the fallback.

Example:
    from precisionroot import AllowedSolution, BracketingNthOrderBrentSolver, MpmathField

    field = MpmathField(dps=40)
    solver = BracketingNthOrderBrentSolver("1e-30", "1e-30", "1e-40", 5, field=field)
    root = solver.solve(100, lambda x: x**3 - x - 2, 1, 2,
                        allowed_solution=AllowedSolution.ANY_SIDE)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from precisionroot.real.base import RealField
from precisionroot.real.mpmath_field import MpmathField
from precisionroot.solvers.allowed_solution import AllowedSolution
from precisionroot.solvers.counter import EvaluationCounter
from precisionroot.solvers.exceptions import (
    InvalidConfigurationError,
    NoBracketingError,
    NullFunctionError,
    SolverInternalError,
)
from precisionroot.solvers.result import SolveResult, SolveTrace, Termination, TraceStep
from precisionroot.solvers.window import SampleWindow

logger = logging.getLogger(__name__)

# Iterations without replacing an endpoint before the target is biased
MAXIMAL_AGING = 2

DEFAULT_MAXIMAL_ORDER = 5

UnivariateFunction = Callable[[Any], Any]


class BracketingNthOrderBrentSolver:
    """Bracketing root solver with n-th order inverse polynomial interpolation.

    Configuration is fixed at construction. Each solve call works on its own
    window, bracket and evaluation counter, so one instance can serve
    concurrent calls; the ``evaluations`` and ``max_evaluations`` properties
    then report whichever call finished last.

    Args:
        relative_accuracy: Relative accuracy on the root.
        absolute_accuracy: Absolute accuracy on the root.
        function_value_accuracy: Stop once both endpoint values are smaller
            than this in magnitude.
        maximal_order: Maximal order of the inverse polynomial (>= 2).
        field: Arithmetic to use. Defaults to MpmathField().

    Raises:
        InvalidConfigurationError: If maximal_order is lower than 2.
    """

    def __init__(
        self,
        relative_accuracy: Any,
        absolute_accuracy: Any,
        function_value_accuracy: Any,
        maximal_order: int = DEFAULT_MAXIMAL_ORDER,
        field: RealField | None = None,
    ):
        if maximal_order < 2:
            raise InvalidConfigurationError(
                f"maximal order must be at least 2, got {maximal_order}"
            )
        self._field = field if field is not None else MpmathField()
        self._maximal_order = maximal_order
        self._relative_accuracy = self._field.convert(relative_accuracy)
        self._absolute_accuracy = self._field.convert(absolute_accuracy)
        self._function_value_accuracy = self._field.convert(function_value_accuracy)
        self._last_evaluations = 0
        self._last_max_evaluations = 0

    # === Configuration ===

    @property
    def field(self) -> RealField:
        return self._field

    @property
    def maximal_order(self) -> int:
        return self._maximal_order

    @property
    def relative_accuracy(self) -> Any:
        return self._relative_accuracy

    @property
    def absolute_accuracy(self) -> Any:
        return self._absolute_accuracy

    @property
    def function_value_accuracy(self) -> Any:
        return self._function_value_accuracy

    @property
    def max_evaluations(self) -> int:
        """Evaluation budget of the most recent solve call."""
        return self._last_max_evaluations

    @property
    def evaluations(self) -> int:
        """Evaluations used by the most recent solve call, 0 before any call."""
        return self._last_evaluations

    # === Solving ===

    def solve(
        self,
        max_evaluations: int,
        f: UnivariateFunction,
        min_value: Any,
        max_value: Any,
        start_value: Any = None,
        allowed_solution: AllowedSolution | str = AllowedSolution.ANY_SIDE,
    ) -> Any:
        """Find a zero of f in [min_value, max_value].

        Args:
            max_evaluations: Maximal number of function evaluations.
            f: Function mapping a field value to a field value.
            min_value: Lower bound of the interval.
            max_value: Upper bound of the interval.
            start_value: First point evaluated. Defaults to the midpoint.
            allowed_solution: Which bracket endpoint to return on convergence.

        Returns:
            A root of f, as a value of the solver's field.

        Raises:
            NullFunctionError: If f is None.
            InvalidConfigurationError: If the interval or budget is invalid.
            NoBracketingError: If the interval does not bracket a sign change.
            TooManyEvaluationsError: If the budget runs out before convergence.
        """
        result = self.solve_detailed(
            max_evaluations, f, min_value, max_value, start_value, allowed_solution
        )
        return result.root

    def solve_detailed(
        self,
        max_evaluations: int,
        f: UnivariateFunction,
        min_value: Any,
        max_value: Any,
        start_value: Any = None,
        allowed_solution: AllowedSolution | str = AllowedSolution.ANY_SIDE,
        record_trace: bool = False,
    ) -> SolveResult:
        """Like solve(), but return a SolveResult with counts and an optional trace."""
        if f is None or not callable(f):
            raise NullFunctionError()
        if max_evaluations < 1:
            raise InvalidConfigurationError(
                f"max_evaluations must be positive, got {max_evaluations}"
            )
        allowed_solution = AllowedSolution(allowed_solution)

        fld = self._field
        lo = fld.convert(min_value)
        hi = fld.convert(max_value)
        if not fld.less_than(lo, hi):
            raise InvalidConfigurationError(
                f"endpoints do not specify an interval: [{fld.to_float(lo)}, {fld.to_float(hi)}]"
            )
        if start_value is None:
            start = fld.divide(fld.add(lo, hi), fld.convert(2))
        else:
            start = fld.convert(start_value)
            if fld.less_than(start, lo) or fld.less_than(hi, start):
                raise InvalidConfigurationError(
                    f"start value {fld.to_float(start)} is outside "
                    f"[{fld.to_float(lo)}, {fld.to_float(hi)}]"
                )

        counter = EvaluationCounter(max_evaluations)
        trace = SolveTrace(fld) if record_trace else None
        try:
            root, termination = self._search(counter, f, lo, hi, start, allowed_solution, trace)
        finally:
            self._last_evaluations = counter.count
            self._last_max_evaluations = max_evaluations

        return SolveResult(
            root=root,
            termination=termination,
            evaluations=counter.count,
            max_evaluations=max_evaluations,
            trace=trace,
        )

    def _evaluate(self, counter: EvaluationCounter, f: UnivariateFunction, x: Any) -> Any:
        counter.increment()
        return self._field.convert(f(x))

    def _search(
        self,
        counter: EvaluationCounter,
        f: UnivariateFunction,
        lo: Any,
        hi: Any,
        start: Any,
        allowed_solution: AllowedSolution,
        trace: SolveTrace | None,
    ) -> tuple[Any, Termination]:
        fld = self._field
        zero = fld.zero()
        sixteen = fld.convert(16)
        window = SampleWindow(fld, self._maximal_order + 1)

        y_start = self._evaluate(counter, f, start)
        if fld.is_zero(y_start):
            logger.debug("Start value %s is an exact root", start)
            return start, Termination.EXACT_ROOT

        y_lo = self._evaluate(counter, f, lo)
        if fld.is_zero(y_lo):
            logger.debug("Lower endpoint %s is an exact root", lo)
            return lo, Termination.EXACT_ROOT

        if fld.opposite_or_null(y_lo, y_start):
            window.reset([lo, start], [y_lo, y_start], sign_change_index=1)
        else:
            y_hi = self._evaluate(counter, f, hi)
            if fld.is_zero(y_hi):
                logger.debug("Upper endpoint %s is an exact root", hi)
                return hi, Termination.EXACT_ROOT
            if not fld.opposite_or_null(y_start, y_hi):
                raise NoBracketingError(
                    fld.to_float(lo), fld.to_float(hi), fld.to_float(y_lo), fld.to_float(y_hi)
                )
            window.reset([lo, start, hi], [y_lo, y_start, y_hi], sign_change_index=2)

        # tightest known bracket
        s = window.sign_change_index
        x_a, y_a = window.xs[s - 1], window.ys[s - 1]
        x_b, y_b = window.xs[s], window.ys[s]
        aging_a = 0
        aging_b = 0
        logger.debug("Initial bracket [%s, %s] with %d points", x_a, x_b, len(window))

        iteration = 0
        while True:
            x_tol = fld.add(
                self._absolute_accuracy,
                fld.multiply(self._relative_accuracy, fld.max_abs(x_a, x_b)),
            )
            if fld.negative_or_null(fld.subtract(fld.subtract(x_b, x_a), x_tol)) or fld.less_than(
                fld.max_abs(y_a, y_b), self._function_value_accuracy
            ):
                root = self._select(allowed_solution, x_a, y_a, x_b, y_b)
                logger.debug(
                    "Converged after %d iterations (%d evaluations): bracket [%s, %s], returning %s",
                    iteration, counter.count, x_a, x_b, root,
                )
                return root, Termination.CONVERGED

            if aging_a >= MAXIMAL_AGING:
                # only the upper endpoint moves, aim at the lower side of the root
                target_y = fld.negate(fld.divide(y_b, sixteen))
            elif aging_b >= MAXIMAL_AGING:
                target_y = fld.negate(fld.divide(y_a, sixteen))
            else:
                target_y = zero

            next_x, start_index, end_index = self._guess(window, target_y, x_a, x_b)
            bisection = next_x is None
            if bisection:
                logger.debug("Interpolation left the bracket, bisecting [%s, %s]", x_a, x_b)
                next_x = fld.midpoint(x_a, x_b)
                start_index = window.sign_change_index - 1
                end_index = window.sign_change_index + 1

            next_y = self._evaluate(counter, f, next_x)
            iteration += 1
            order = end_index - start_index - 1

            if fld.is_zero(next_y):
                logger.debug("Exact root %s found after %d iterations", next_x, iteration)
                if trace is not None:
                    trace.record(
                        TraceStep(iteration, next_x, next_y, order, bisection, target_y, next_x, next_x)
                    )
                return next_x, Termination.EXACT_ROOT

            if len(window) > 2 and end_index - start_index != len(window):
                # points dropped to keep the guess inside the bracket are
                # probably far from the root, forget them
                window.compact(start_index, end_index)
            elif window.is_full:
                window.make_room()

            window.insert(next_x, next_y)

            if fld.opposite_or_null(next_y, y_a):
                x_b, y_b = next_x, next_y
                aging_a += 1
                aging_b = 0
            else:
                x_a, y_a = next_x, next_y
                aging_a = 0
                aging_b += 1
                window.advance_sign_change()

            if trace is not None:
                trace.record(TraceStep(iteration, next_x, next_y, order, bisection, target_y, x_a, x_b))

    def _guess(
        self, window: SampleWindow, target_y: Any, x_a: Any, x_b: Any
    ) -> tuple[Any, int, int]:
        """Interpolate with decreasing order until the guess falls inside (x_a, x_b).

        Returns:
            (guess, start, end) where [start, end) are the window points used.
            guess is None when no order produced a point strictly inside.
        """
        fld = self._field
        s = window.sign_change_index
        start = 0
        end = len(window)
        while end - start > 1:
            next_x = window.interpolate(target_y, start, end)
            if fld.less_than(x_a, next_x) and fld.less_than(next_x, x_b):
                return next_x, start, end

            # outside the bracket, or NaN when two points share an ordinate
            if s - start >= end - s:
                start += 1
            else:
                end -= 1
            logger.debug("Reducing interpolation order to %d", end - start - 1)

        return None, start, end

    def _select(
        self, allowed_solution: AllowedSolution, x_a: Any, y_a: Any, x_b: Any, y_b: Any
    ) -> Any:
        fld = self._field
        zero = fld.zero()
        if allowed_solution is AllowedSolution.ANY_SIDE:
            return x_a if fld.less_than(fld.abs(y_a), fld.abs(y_b)) else x_b
        if allowed_solution is AllowedSolution.LEFT_SIDE:
            return x_a
        if allowed_solution is AllowedSolution.RIGHT_SIDE:
            return x_b
        if allowed_solution is AllowedSolution.BELOW_SIDE:
            return x_a if fld.less_than(y_a, zero) else x_b
        if allowed_solution is AllowedSolution.ABOVE_SIDE:
            return x_b if fld.less_than(y_a, zero) else x_a
        raise SolverInternalError(f"unhandled allowed solution: {allowed_solution!r}")

    def __repr__(self) -> str:
        return (
            f"BracketingNthOrderBrentSolver(maximal_order={self._maximal_order}, "
            f"field={self._field!r})"
        )
