"""Convenience helpers around the bracketing solver.

Provides:
- solve: one-call root finding with a default solver
- bracket: grow an interval around a point until it brackets a root
- is_bracketing: sign check at two endpoints
- midpoint
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from precisionroot.real.base import RealField
from precisionroot.real.mpmath_field import MpmathField
from precisionroot.solvers.allowed_solution import AllowedSolution
from precisionroot.solvers.exceptions import (
    InvalidConfigurationError,
    NoBracketingError,
    NullFunctionError,
)
from precisionroot.solvers.nth_order_brent import (
    DEFAULT_MAXIMAL_ORDER,
    BracketingNthOrderBrentSolver,
    UnivariateFunction,
)

logger = logging.getLogger(__name__)

DEFAULT_ABSOLUTE_ACCURACY = "1e-6"
DEFAULT_RELATIVE_ACCURACY = "1e-14"
DEFAULT_FUNCTION_VALUE_ACCURACY = "1e-15"
DEFAULT_BRACKET_ITERATIONS = 1000


def midpoint(field: RealField, a: Any, b: Any) -> Any:
    """Return (a + b) / 2 in the given field."""
    return field.divide(field.add(field.convert(a), field.convert(b)), field.convert(2))


def is_bracketing(
    f: UnivariateFunction, lower: Any, upper: Any, field: RealField | None = None
) -> bool:
    """Check whether f takes opposite signs (or vanishes) at the endpoints.

    Args:
        f: Function to check.
        lower: Lower endpoint.
        upper: Upper endpoint.
        field: Arithmetic to use. Defaults to MpmathField().

    Raises:
        NullFunctionError: If f is None.
    """
    if f is None:
        raise NullFunctionError()
    fld = field if field is not None else MpmathField()
    f_lo = fld.convert(f(fld.convert(lower)))
    f_hi = fld.convert(f(fld.convert(upper)))
    return fld.opposite_or_null(f_lo, f_hi)


def bracket(
    f: UnivariateFunction,
    initial: Any,
    lower_bound: Any,
    upper_bound: Any,
    maximum_iterations: int = DEFAULT_BRACKET_ITERATIONS,
    step: Any = 1,
    field: RealField | None = None,
) -> tuple[Any, Any]:
    """Find a and b with lower_bound <= a < initial < b <= upper_bound and f(a) * f(b) <= 0.

    Starts from [initial - step, initial + step] and moves both ends out by
    ``step`` per iteration, never past the bounds. If f is continuous on
    [a, b], the returned pair brackets a root.

    Args:
        f: Function to bracket.
        initial: Point the interval grows around.
        lower_bound: a is never lower than this.
        upper_bound: b is never higher than this.
        maximum_iterations: Maximal number of expansions.
        step: Distance each endpoint moves per iteration.
        field: Arithmetic to use. Defaults to MpmathField().

    Returns:
        Tuple of (a, b) as field values.

    Raises:
        NullFunctionError: If f is None.
        InvalidConfigurationError: If maximum_iterations is not positive or
            initial is not strictly between the bounds.
        NoBracketingError: If the bounds or the iteration limit are reached
            without finding a sign change.
    """
    if f is None:
        raise NullFunctionError()
    if maximum_iterations <= 0:
        raise InvalidConfigurationError(
            f"maximum_iterations must be positive, got {maximum_iterations}"
        )

    fld = field if field is not None else MpmathField()
    initial = fld.convert(initial)
    lower = fld.convert(lower_bound)
    upper = fld.convert(upper_bound)
    step = fld.convert(step)
    if not (fld.less_than(lower, initial) and fld.less_than(initial, upper)):
        raise InvalidConfigurationError(
            f"expected lower_bound < initial < upper_bound, got "
            f"{fld.to_float(lower)}, {fld.to_float(initial)}, {fld.to_float(upper)}"
        )

    a = initial
    b = initial
    iterations = 0
    while True:
        a = fld.subtract(a, step)
        if fld.less_than(a, lower):
            a = lower
        b = fld.add(b, step)
        if fld.less_than(upper, b):
            b = upper
        fa = fld.convert(f(a))
        fb = fld.convert(f(b))
        iterations += 1

        if fld.opposite_or_null(fa, fb):
            logger.debug("Bracketed a root in [%s, %s] after %d iterations", a, b, iterations)
            return a, b

        at_bounds = not fld.less_than(lower, a) and not fld.less_than(b, upper)
        if iterations >= maximum_iterations or at_bounds:
            raise NoBracketingError(
                fld.to_float(a),
                fld.to_float(b),
                fld.to_float(fa),
                fld.to_float(fb),
                detail=(
                    f"{iterations} of {maximum_iterations} iterations, initial "
                    f"{fld.to_float(initial)}, bounds [{fld.to_float(lower)}, {fld.to_float(upper)}]"
                ),
            )


def solve(
    f: UnivariateFunction,
    min_value: Any,
    max_value: Any,
    absolute_accuracy: Any = DEFAULT_ABSOLUTE_ACCURACY,
    allowed_solution: AllowedSolution | str = AllowedSolution.ANY_SIDE,
    field: RealField | None = None,
    relative_accuracy: Any = DEFAULT_RELATIVE_ACCURACY,
    function_value_accuracy: Any = DEFAULT_FUNCTION_VALUE_ACCURACY,
) -> Any:
    """Find a zero of f in [min_value, max_value] with a default solver.

    Uses a BracketingNthOrderBrentSolver of order 5 with an effectively
    unlimited evaluation budget.

    Args:
        f: Function to solve.
        min_value: Lower bound of the interval.
        max_value: Upper bound of the interval.
        absolute_accuracy: Absolute accuracy on the root.
        allowed_solution: Which bracket endpoint to return on convergence.
        field: Arithmetic to use. Defaults to MpmathField().
        relative_accuracy: Relative accuracy on the root.
        function_value_accuracy: Stop once both endpoint values are smaller
            than this in magnitude.

    Returns:
        A root of f, as a value of the field.
    """
    if f is None:
        raise NullFunctionError()
    solver = BracketingNthOrderBrentSolver(
        relative_accuracy,
        absolute_accuracy,
        function_value_accuracy,
        DEFAULT_MAXIMAL_ORDER,
        field=field,
    )
    return solver.solve(sys.maxsize, f, min_value, max_value, allowed_solution=allowed_solution)
