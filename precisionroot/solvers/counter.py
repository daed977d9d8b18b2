"""Function evaluation budget."""

from precisionroot.solvers.exceptions import TooManyEvaluationsError


class EvaluationCounter:
    """Counts function evaluations against a maximal count.

    Args:
        maximal_count: Number of increments allowed before
            TooManyEvaluationsError is raised.
    """

    def __init__(self, maximal_count: int = 0):
        self._maximal_count = maximal_count
        self._count = 0

    @property
    def count(self) -> int:
        """Evaluations recorded so far."""
        return self._count

    @property
    def maximal_count(self) -> int:
        return self._maximal_count

    def can_increment(self) -> bool:
        return self._count < self._maximal_count

    def increment(self) -> None:
        """Record one evaluation.

        The count never goes past the maximal count: the evaluation that
        would exceed the budget is refused instead.

        Raises:
            TooManyEvaluationsError: If the budget is already used up.
        """
        if not self.can_increment():
            raise TooManyEvaluationsError(self._maximal_count)
        self._count += 1

    def reset(self, maximal_count: int | None = None) -> None:
        """Zero the count, optionally with a new maximal count."""
        if maximal_count is not None:
            self._maximal_count = maximal_count
        self._count = 0

    def __repr__(self) -> str:
        return f"EvaluationCounter(count={self._count}, maximal_count={self._maximal_count})"
