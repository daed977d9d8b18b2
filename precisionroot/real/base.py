"""Base protocol for precision-typed real arithmetic.

Solvers in this package never apply Python operators to numbers directly.
Every operation goes through a RealField, which decides the representation
(arbitrary-precision mpmath values, hardware doubles, ...) and how special
values behave:

- Division by zero never raises. 0/0 is NaN, a/0 is a signed infinity.
- Comparisons involving NaN are false.

These rules let interpolation with duplicate ordinates produce a NaN (or a
non-finite) candidate that the solver simply rejects.
"""

from abc import ABC, abstractmethod
from typing import Any


class RealField(ABC):
    """Arithmetic over values of a single real-number representation."""

    name: str = "real"

    @abstractmethod
    def zero(self) -> Any:
        """The additive identity."""

    @abstractmethod
    def nan(self) -> Any:
        """A quiet NaN."""

    @abstractmethod
    def convert(self, value: Any) -> Any:
        """Build a field value from an int, str, float or another field value.

        Raises:
            TypeError: If the value cannot be represented.
        """

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        """Return a + b."""

    @abstractmethod
    def subtract(self, a: Any, b: Any) -> Any:
        """Return a - b."""

    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any:
        """Return a * b."""

    @abstractmethod
    def divide(self, a: Any, b: Any) -> Any:
        """Return a / b, with NaN or a signed infinity when b is zero."""

    @abstractmethod
    def negate(self, a: Any) -> Any:
        """Return -a."""

    @abstractmethod
    def abs(self, a: Any) -> Any:
        """Return |a|."""

    @abstractmethod
    def is_zero(self, a: Any) -> bool:
        """True if a is exactly zero (NaN is not zero)."""

    @abstractmethod
    def is_nan(self, a: Any) -> bool:
        """True if a is NaN."""

    @abstractmethod
    def less_than(self, a: Any, b: Any) -> bool:
        """True if a < b. False whenever either operand is NaN."""

    @abstractmethod
    def negative_or_null(self, a: Any) -> bool:
        """True if a <= 0. False for NaN."""

    @abstractmethod
    def to_float(self, a: Any) -> float:
        """Nearest machine double, for diagnostics and reporting."""

    # === Derived operations ===

    def midpoint(self, a: Any, b: Any) -> Any:
        """Return a + (b - a) / 2."""
        return self.add(a, self.divide(self.subtract(b, a), self.convert(2)))

    def max_abs(self, a: Any, b: Any) -> Any:
        """Return max(|a|, |b|)."""
        abs_a = self.abs(a)
        abs_b = self.abs(b)
        return abs_b if self.less_than(abs_a, abs_b) else abs_a

    def opposite_or_null(self, a: Any, b: Any) -> bool:
        """True if a and b have opposite signs or either one is zero.

        Compares signs directly instead of testing a * b <= 0, whose product
        underflows to zero for tiny values of the same sign. False when
        either operand is NaN.
        """
        if self.is_zero(a) or self.is_zero(b):
            return True
        zero = self.zero()
        if self.less_than(a, zero):
            return self.less_than(zero, b)
        return self.less_than(zero, a) and self.less_than(b, zero)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
