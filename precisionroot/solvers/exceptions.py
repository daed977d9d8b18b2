"""Exception classes for the root solvers."""


class RootSolverError(Exception):
    """Base exception for root solver errors."""


class InvalidConfigurationError(RootSolverError, ValueError):
    """Raised when a solver or a solve call is given invalid parameters."""


class NullFunctionError(RootSolverError, TypeError):
    """Raised when no function to solve is supplied."""

    def __init__(self, message: str = "function to solve must not be None"):
        super().__init__(message)


class NoBracketingError(RootSolverError, ValueError):
    """Raised when an interval does not bracket a sign change.

    Attributes:
        lo: Lower endpoint.
        hi: Upper endpoint.
        f_lo: Function value at the lower endpoint.
        f_hi: Function value at the upper endpoint.
    """

    def __init__(self, lo: float, hi: float, f_lo: float, f_hi: float, detail: str = ""):
        self.lo = lo
        self.hi = hi
        self.f_lo = f_lo
        self.f_hi = f_hi
        message = (
            f"function values at endpoints do not have opposite signs: "
            f"f({lo!r})={f_lo!r}, f({hi!r})={f_hi!r}"
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class TooManyEvaluationsError(RootSolverError, RuntimeError):
    """Raised when the function evaluation budget is exhausted.

    Attributes:
        max_count: The budget that was exceeded.
    """

    def __init__(self, max_count: int):
        self.max_count = max_count
        super().__init__(f"maximal count ({max_count}) exceeded: evaluations")


class SolverInternalError(RootSolverError, RuntimeError):
    """Raised when the solver reaches a state that correct code never reaches."""
