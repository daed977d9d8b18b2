"""Solve results and iteration traces."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from enum import Enum
from typing import Any

import pandas as pd

from precisionroot.real.base import RealField


class Termination(Enum):
    """How a successful solve ended."""

    EXACT_ROOT = "exact_root"
    CONVERGED = "converged"


@dataclass(frozen=True)
class TraceStep:
    """One iteration of a bracketing search.

    Attributes:
        iteration: 1-based iteration number.
        x: Evaluated abscissa.
        y: Function value at x.
        order: Interpolation order used (number of points - 1). 1 for bisection.
        bisection: Whether the step fell back to bisection.
        target_y: Ordinate the interpolation aimed at.
        x_a: Lower bracket endpoint after the step.
        x_b: Upper bracket endpoint after the step.
    """

    iteration: int
    x: Any
    y: Any
    order: int
    bisection: bool
    target_y: Any
    x_a: Any
    x_b: Any


class SolveTrace:
    """Ordered record of the iterations of one solve call."""

    COLUMNS = ["iteration", "x", "y", "order", "bisection", "target_y", "x_a", "x_b", "width"]

    def __init__(self, field: RealField):
        self._field = field
        self._steps: list[TraceStep] = []

    def record(self, step: TraceStep) -> None:
        self._steps.append(step)

    @property
    def steps(self) -> list[TraceStep]:
        return self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self):
        return iter(self._steps)

    def widths(self) -> list[Any]:
        """Bracket width after each iteration, as field values."""
        f = self._field
        return [f.subtract(step.x_b, step.x_a) for step in self._steps]

    def bisection_count(self) -> int:
        return sum(1 for step in self._steps if step.bisection)

    def to_dataframe(self) -> pd.DataFrame:
        """Trace as a DataFrame with float columns, one row per iteration."""
        to_float = self._field.to_float
        rows = [
            {
                "iteration": step.iteration,
                "x": to_float(step.x),
                "y": to_float(step.y),
                "order": step.order,
                "bisection": step.bisection,
                "target_y": to_float(step.target_y),
                "x_a": to_float(step.x_a),
                "x_b": to_float(step.x_b),
                "width": to_float(width),
            }
            for step, width in zip(self._steps, self.widths())
        ]
        return pd.DataFrame(rows, columns=self.COLUMNS)


@dataclass
class SolveResult:
    """Result of a bracketing solve.

    Attributes:
        root: The returned root, a value of the solver's field.
        termination: Whether the root is exact or selected from a converged bracket.
        evaluations: Number of function evaluations used.
        max_evaluations: The evaluation budget of the call.
        trace: Iteration trace, when requested.
    """

    root: Any
    termination: Termination
    evaluations: int
    max_evaluations: int
    trace: SolveTrace | None = dataclass_field(default=None, repr=False)

    @property
    def exact(self) -> bool:
        return self.termination is Termination.EXACT_ROOT
