"""Hardware double arithmetic with the RealField NaN rules."""

import math
from typing import Any

from precisionroot.real.base import RealField


class FloatField(RealField):
    """RealField over Python floats.

    Useful when the extra digits of MpmathField are not needed, e.g. for
    quick exploratory solves or comparison against the arbitrary-precision
    result.
    """

    name = "float"

    def zero(self) -> float:
        return 0.0

    def nan(self) -> float:
        return math.nan

    def convert(self, value: Any) -> float:
        return float(value)

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def divide(self, a: float, b: float) -> float:
        if b == 0.0:
            if a == 0.0 or math.isnan(a):
                return math.nan
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
        return a / b

    def negate(self, a: float) -> float:
        return -a

    def abs(self, a: float) -> float:
        return math.fabs(a)

    def is_zero(self, a: float) -> bool:
        return a == 0.0

    def is_nan(self, a: float) -> bool:
        return math.isnan(a)

    def less_than(self, a: float, b: float) -> bool:
        return a < b

    def negative_or_null(self, a: float) -> bool:
        return a <= 0.0

    def to_float(self, a: float) -> float:
        return float(a)
