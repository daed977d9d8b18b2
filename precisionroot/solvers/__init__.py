"""Bracketing root solvers over precision-typed reals.

This module provides:
- BracketingNthOrderBrentSolver: Brent-family solver with adaptive-order
  inverse polynomial interpolation
- AllowedSolution: side selection for converged brackets
- bracket / is_bracketing / solve: convenience helpers
"""

from precisionroot.solvers.allowed_solution import AllowedSolution
from precisionroot.solvers.counter import EvaluationCounter
from precisionroot.solvers.exceptions import (
    InvalidConfigurationError,
    NoBracketingError,
    NullFunctionError,
    RootSolverError,
    SolverInternalError,
    TooManyEvaluationsError,
)
from precisionroot.solvers.nth_order_brent import (
    DEFAULT_MAXIMAL_ORDER,
    MAXIMAL_AGING,
    BracketingNthOrderBrentSolver,
)
from precisionroot.solvers.result import SolveResult, SolveTrace, Termination, TraceStep
from precisionroot.solvers.utils import bracket, is_bracketing, midpoint, solve

__all__ = [
    "AllowedSolution",
    "BracketingNthOrderBrentSolver",
    "DEFAULT_MAXIMAL_ORDER",
    "EvaluationCounter",
    "InvalidConfigurationError",
    "MAXIMAL_AGING",
    "NoBracketingError",
    "NullFunctionError",
    "RootSolverError",
    "SolveResult",
    "SolveTrace",
    "SolverInternalError",
    "Termination",
    "TooManyEvaluationsError",
    "TraceStep",
    "bracket",
    "is_bracketing",
    "midpoint",
    "solve",
]
