"""
Bounded random error types.
"""


class InvalidRangeError(ValueError):
    """Raised when the lower bound is not strictly below the upper bound."""

    def __init__(self, lower_bound: int, upper_bound: int) -> None:
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        super().__init__(
            f"lower_bound must be less than upper_bound: "
            f"lower_bound={lower_bound}, upper_bound={upper_bound}"
        )
