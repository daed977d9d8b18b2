"""Arbitrary-precision arithmetic backed by mpmath.

Each field owns a private mpmath context, so setting the working precision
here does not change the caller's global ``mpmath.mp``.

Example:
    >>> field = MpmathField(dps=60)
    >>> ctx = field.context
    >>> f = lambda x: ctx.sin(x)
"""

from typing import Any

import mpmath

from precisionroot.real.base import RealField

DEFAULT_DPS = 50


class MpmathField(RealField):
    """RealField over ``mpf`` values of a private ``mpmath.MPContext``.

    Args:
        dps: Working precision in decimal digits.
    """

    name = "mpmath"

    def __init__(self, dps: int = DEFAULT_DPS):
        if dps < 1:
            raise ValueError(f"dps must be >= 1, got {dps}")
        self._ctx = mpmath.MPContext()
        self._ctx.dps = dps
        self._zero = self._ctx.mpf(0)
        self._nan = self._ctx.nan

    @property
    def context(self) -> mpmath.MPContext:
        """The mpmath context values of this field belong to."""
        return self._ctx

    @property
    def dps(self) -> int:
        """Working precision in decimal digits."""
        return self._ctx.dps

    def zero(self) -> Any:
        return self._zero

    def nan(self) -> Any:
        return self._nan

    def convert(self, value: Any) -> Any:
        return self._ctx.convert(value)

    def add(self, a: Any, b: Any) -> Any:
        return a + b

    def subtract(self, a: Any, b: Any) -> Any:
        return a - b

    def multiply(self, a: Any, b: Any) -> Any:
        return a * b

    def divide(self, a: Any, b: Any) -> Any:
        # mpmath raises on division by zero
        if b == 0:
            if a == 0 or self._ctx.isnan(a):
                return self._nan
            return self._ctx.inf if a > 0 else -self._ctx.inf
        return a / b

    def negate(self, a: Any) -> Any:
        return -a

    def abs(self, a: Any) -> Any:
        return self._ctx.fabs(a)

    def is_zero(self, a: Any) -> bool:
        return a == 0

    def is_nan(self, a: Any) -> bool:
        return bool(self._ctx.isnan(a))

    def less_than(self, a: Any, b: Any) -> bool:
        return a < b

    def negative_or_null(self, a: Any) -> bool:
        return a <= 0

    def to_float(self, a: Any) -> float:
        return float(a)

    def __repr__(self) -> str:
        return f"MpmathField(dps={self.dps})"
