"""precisionroot: bracketing root finding over arbitrary-precision reals.

Quick start:
    from precisionroot import BracketingNthOrderBrentSolver, MpmathField

    field = MpmathField(dps=50)
    solver = BracketingNthOrderBrentSolver("1e-40", "1e-40", "1e-45", 5, field=field)
    root = solver.solve(100, lambda x: field.context.cos(x) - x, 0, 1)
"""

import logging

from precisionroot.logging_config import (
    configure_from_env,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from precisionroot.real import FloatField, MpmathField, RealField
from precisionroot.solvers import (
    AllowedSolution,
    BracketingNthOrderBrentSolver,
    EvaluationCounter,
    InvalidConfigurationError,
    NoBracketingError,
    NullFunctionError,
    RootSolverError,
    SolveResult,
    SolverInternalError,
    SolveTrace,
    Termination,
    TooManyEvaluationsError,
    bracket,
    is_bracketing,
    solve,
)

logging.getLogger("precisionroot").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AllowedSolution",
    "BracketingNthOrderBrentSolver",
    "EvaluationCounter",
    "FloatField",
    "InvalidConfigurationError",
    "MpmathField",
    "NoBracketingError",
    "NullFunctionError",
    "RealField",
    "RootSolverError",
    "SolveResult",
    "SolveTrace",
    "SolverInternalError",
    "Termination",
    "TooManyEvaluationsError",
    "bracket",
    "configure_from_env",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "is_bracketing",
    "set_level",
    "set_module_level",
    "solve",
]
