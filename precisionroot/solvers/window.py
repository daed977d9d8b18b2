"""Sliding window of sample points for inverse polynomial interpolation.

The window holds at most ``capacity`` (x, y) pairs sorted by x. The sign
change index ``s`` marks the bracketed root: ``x[s - 1]`` is the lower
bracket endpoint and ``x[s]`` the upper one.
"""

from __future__ import annotations

from typing import Any, Sequence

from precisionroot.real.base import RealField


class SampleWindow:
    """Ordered (x, y) samples around the current bracket.

    Args:
        field: Arithmetic used for interpolation.
        capacity: Maximal number of points (maximal order + 1).
    """

    def __init__(self, field: RealField, capacity: int):
        self._field = field
        self.capacity = capacity
        self._x: list[Any] = []
        self._y: list[Any] = []
        self.sign_change_index = 0

    def reset(self, xs: Sequence[Any], ys: Sequence[Any], sign_change_index: int) -> None:
        """Replace the content with the given points."""
        if len(xs) != len(ys):
            raise ValueError(f"got {len(xs)} abscissas and {len(ys)} ordinates")
        if len(xs) > self.capacity:
            raise ValueError(f"{len(xs)} points exceed window capacity {self.capacity}")
        self._x = list(xs)
        self._y = list(ys)
        self.sign_change_index = sign_change_index

    def __len__(self) -> int:
        return len(self._x)

    @property
    def is_full(self) -> bool:
        return len(self._x) == self.capacity

    @property
    def xs(self) -> tuple[Any, ...]:
        return tuple(self._x)

    @property
    def ys(self) -> tuple[Any, ...]:
        return tuple(self._y)

    def interpolate(self, target_y: Any, start: int, end: int) -> Any:
        """Guess x by inverse polynomial interpolation over points [start, end).

        Builds Q with Q(y_i) = x_i using Newton divided differences, then
        evaluates Q(target_y). The stored points are left untouched.

        Returns:
            The guessed abscissa. NaN or infinite when two of the points
            share the same ordinate.
        """
        f = self._field
        x = self._x[start:end]
        y = self._y[start:end]
        n = end - start

        # Newton coefficients, computed in place over the copy
        for i in range(n - 1):
            delta = i + 1
            for j in range(n - 1, i, -1):
                x[j] = f.divide(f.subtract(x[j], x[j - 1]), f.subtract(y[j], y[j - delta]))

        # Horner evaluation of Q(target_y)
        x0 = f.zero()
        for j in range(n - 1, -1, -1):
            x0 = f.add(x[j], f.multiply(x0, f.subtract(target_y, y[j])))
        return x0

    def compact(self, start: int, end: int) -> None:
        """Keep only points [start, end), shifting the sign change index."""
        self._x = self._x[start:end]
        self._y = self._y[start:end]
        self.sign_change_index -= start

    def make_room(self) -> None:
        """Drop one point from a full window.

        The lowest point goes when the sign change sits in the upper half,
        otherwise the highest one, so the bracket stays as centered as
        possible.
        """
        if self.sign_change_index >= (self.capacity + 1) // 2:
            del self._x[0]
            del self._y[0]
            self.sign_change_index -= 1
        else:
            del self._x[-1]
            del self._y[-1]

    def insert(self, x: Any, y: Any) -> None:
        """Insert a point at the sign change index.

        The point must lie strictly inside the current bracket.
        """
        if len(self._x) >= self.capacity:
            raise ValueError("window is full, call make_room() first")
        self._x.insert(self.sign_change_index, x)
        self._y.insert(self.sign_change_index, y)

    def advance_sign_change(self) -> None:
        """Move the sign change past the last inserted point."""
        self.sign_change_index += 1

    def __repr__(self) -> str:
        return (
            f"SampleWindow(points={len(self._x)}, capacity={self.capacity}, "
            f"sign_change_index={self.sign_change_index})"
        )
