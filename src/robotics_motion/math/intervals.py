"""Define a dataclass to represent a closed interval of real numbers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from robotics_motion.errors import InvariantViolationError


@dataclass(frozen=True)
class ClosedInterval:
    """An interval of real numbers between two endpoints (both included in the interval)."""

    minimum: float
    """Lower bound of the interval (included in the interval)."""

    maximum: float
    """Upper bound of the interval (included in the interval)."""

    def __post_init__(self) -> None:
        """Verify that the interval is non-empty."""
        if self.maximum < self.minimum:
            raise InvariantViolationError(
                f"Invalid interval: maximum ({self.maximum}) < minimum ({self.minimum}).",
            )

    @property
    def length(self) -> float:
        """Retrieve the length of the interval."""
        return self.maximum - self.minimum

    @property
    def midpoint(self) -> float:
        """Compute and return the midpoint of the closed interval."""
        return (self.minimum + self.maximum) / 2.0

    def contains(self, x: float) -> bool:
        """Check whether the given value is inside the interval [minimum, maximum]."""
        return self.minimum <= x <= self.maximum

    def clamp(self, x: float) -> float:
        """Clamp the given value into the interval [minimum, maximum]."""
        return float(np.clip(x, a_min=self.minimum, a_max=self.maximum))

    def uniform_sample(self, rng: np.random.Generator | None = None) -> float:
        """Sample from the interval uniformly.

        :param rng: Optional random number generator (default: None)
        :return: Sampled value within the interval
        """
        if rng is None:
            rng = np.random.default_rng()
        if self.length == 0.0:
            return self.minimum
        return float(rng.uniform(low=self.minimum, high=self.maximum))
