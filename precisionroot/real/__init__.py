"""Real-number representations the solvers compute with.

- RealField: abstract operation set (arithmetic, NaN-aware comparisons)
- MpmathField: arbitrary precision via a private mpmath context
- FloatField: hardware doubles
"""

from precisionroot.real.base import RealField
from precisionroot.real.float_field import FloatField
from precisionroot.real.mpmath_field import DEFAULT_DPS, MpmathField

__all__ = [
    "DEFAULT_DPS",
    "FloatField",
    "MpmathField",
    "RealField",
]
