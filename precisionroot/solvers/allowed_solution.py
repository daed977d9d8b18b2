"""Which side of a converged bracket a solver may return."""

from enum import Enum


class AllowedSolution(Enum):
    """Selection policy for the returned root.

    Bracketing solvers stop with an interval [x_a, x_b] around the root.
    Unless the function vanishes exactly at the last evaluated point, the
    returned value is one of the two endpoints, chosen by this policy.
    """

    ANY_SIDE = "any_side"
    """Endpoint with the smallest absolute function value."""

    LEFT_SIDE = "left_side"
    """Lower endpoint x_a."""

    RIGHT_SIDE = "right_side"
    """Upper endpoint x_b."""

    BELOW_SIDE = "below_side"
    """Endpoint where f(x) <= 0."""

    ABOVE_SIDE = "above_side"
    """Endpoint where f(x) >= 0."""
