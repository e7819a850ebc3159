"""Define a class assigning a numeric value to each joint of a joint set."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

import numpy as np

from robotics_motion.errors import InvariantViolationError
from robotics_motion.kinematics.joint_set import JointSet

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from robotics_motion.kinematics.joint_limits import JointLimits

Operand = Union["JointValues", float]
"""Right-hand operand of JointValues arithmetic: similar joint values or a scalar."""


@dataclass(frozen=True, init=False)
class JointValues:
    """A numeric value (rad or m) for each joint name of a joint set.

    The value at index i belongs to the joint named at index i of the joint set.
    """

    joint_set: JointSet
    values: tuple[float, ...]

    def __init__(self, joint_set: JointSet, values: Iterable[float] | float) -> None:
        """Initialize the joint values, verifying that there is one value per joint.

        :param joint_set: Joints assigned a value
        :param values: One value per joint (or a single value used to fill every joint)
        :raises InvariantViolationError: If the number of values differs from the number of joints
        """
        if isinstance(values, (int, float)):
            value_tuple = (float(values),) * len(joint_set)
        else:
            value_tuple = tuple(float(v) for v in values)

        if len(value_tuple) != len(joint_set):
            raise InvariantViolationError(
                f"Expected {len(joint_set)} values to match {joint_set}, got {len(value_tuple)}.",
            )

        object.__setattr__(self, "joint_set", joint_set)
        object.__setattr__(self, "values", value_tuple)

    @classmethod
    def empty(cls) -> JointValues:
        """Construct joint values over the empty joint set."""
        return cls(JointSet.empty(), ())

    @classmethod
    def zero(cls, joint_set: JointSet) -> JointValues:
        """Construct joint values with every joint set to zero."""
        return cls(joint_set, 0.0)

    @classmethod
    def from_dict(cls, configuration: dict[str, float]) -> JointValues:
        """Construct joint values from a map of joint names to values."""
        return cls(JointSet(configuration.keys()), configuration.values())

    def __len__(self) -> int:
        """Retrieve the number of values."""
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        """Provide an iterator over the values in joint order."""
        return iter(self.values)

    def __getitem__(self, key: int | str) -> float:
        """Access a value either by joint index or by joint name."""
        if isinstance(key, str):
            return self.get_value(key)
        return self.values[key]

    def __str__(self) -> str:
        return ", ".join(f"{name}: {value}" for name, value in zip(self.joint_set, self.values))

    @property
    def count(self) -> int:
        """Retrieve the number of values."""
        return len(self.values)

    def get_value(self, joint_name: str) -> float:
        """Retrieve the value assigned to the named joint.

        :raises JointNotFoundError: If the joint is not part of the joint set
        """
        return self.values[self.joint_set.get_index_of(joint_name)]

    def try_get_value(self, joint_name: str) -> float | None:
        """Retrieve the value assigned to the named joint, or None if the joint is absent."""
        index = self.joint_set.try_get_index_of(joint_name)
        return None if index is None else self.values[index]

    def to_array(self) -> NDArray[np.float64]:
        """Convert the values into a NumPy array."""
        return np.array(self.values, dtype=np.float64)

    def to_dict(self) -> dict[str, float]:
        """Convert the values into a map from joint names to values."""
        return dict(zip(self.joint_set, self.values))

    def reorder(self, new_order: JointSet) -> JointValues:
        """Create joint values following the joint order of a similar joint set.

        :param new_order: Joint set with the same joints as this one, in any order
        :return: Joint values holding the same value per joint, ordered as `new_order`
        :raises InvariantViolationError: If the given joint set is not similar to this one
        """
        if not new_order.is_similar(self.joint_set):
            raise InvariantViolationError(f"Cannot reorder {self.joint_set} as {new_order}.")
        return JointValues(new_order, (self.get_value(name) for name in new_order))

    def select(self, subset: JointSet) -> JointValues:
        """Create joint values holding only the joints of the given subset."""
        if not subset.is_subset(self.joint_set):
            raise InvariantViolationError(f"{subset} is not a subset of {self.joint_set}.")
        return JointValues(subset, (self.get_value(name) for name in subset))

    def set_values(self, source: JointValues) -> JointValues:
        """Create joint values with the joints of `source` overwritten; other joints unchanged."""
        if not source.joint_set.is_subset(self.joint_set):
            raise InvariantViolationError(f"{source.joint_set} is not a subset of {self.joint_set}.")

        new_values = list(self.values)
        for name, value in zip(source.joint_set, source.values):
            new_values[self.joint_set.get_index_of(name)] = value
        return JointValues(self.joint_set, new_values)

    def with_value(self, joint: str | int, value: float) -> JointValues:
        """Create joint values with a single joint (given by name or index) changed."""
        index = self.joint_set.get_index_of(joint) if isinstance(joint, str) else joint
        new_values = list(self.values)
        new_values[index] = value
        return JointValues(self.joint_set, new_values)

    def merge(self, other: JointValues) -> JointValues:
        """Combine these values with another set of joint values.

        The result spans the union of both joint sets. For joints present in both, the value
        from these joint values (the first occurrence) is kept.

        :param other: Joint values merged into these joint values
        :return: Joint values over the combined joint set
        """
        full_set = self.joint_set.combine(other.joint_set)
        merged = [
            self.get_value(name) if name in self.joint_set else other.get_value(name)
            for name in full_set
        ]
        return JointValues(full_set, merged)

    def transform(self, function: Callable[[float, int], float]) -> JointValues:
        """Apply the given function(value, index) to every value."""
        return JointValues(self.joint_set, (function(v, i) for i, v in enumerate(self.values)))

    def max_norm(self) -> float:
        """Compute the maximum absolute value (0 for empty joint values)."""
        return max((abs(v) for v in self.values), default=0.0)

    def _aligned(self, other: JointValues) -> tuple[float, ...]:
        """Retrieve the other values in this instance's joint order."""
        if other.joint_set == self.joint_set:
            return other.values
        if not other.joint_set.is_similar(self.joint_set):
            raise InvariantViolationError(f"{other.joint_set} is not similar to {self.joint_set}.")
        return other.reorder(self.joint_set).values

    def _combine(self, other: Operand, op: Callable[[float, float], float]) -> JointValues:
        if isinstance(other, JointValues):
            rhs = self._aligned(other)
            return self.transform(lambda v, i: op(v, rhs[i]))
        return self.transform(lambda v, _: op(v, float(other)))

    def __add__(self, other: Operand) -> JointValues:
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other: float) -> JointValues:
        return self._combine(other, lambda a, b: b + a)

    def __sub__(self, other: Operand) -> JointValues:
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, factor: float) -> JointValues:
        return self.transform(lambda v, _: v * factor)

    def __rmul__(self, factor: float) -> JointValues:
        return self.transform(lambda v, _: factor * v)

    def __truediv__(self, divisor: float) -> JointValues:
        return self.transform(lambda v, _: v / divisor)

    def __neg__(self) -> JointValues:
        return self.transform(lambda v, _: -v)

    @staticmethod
    def interpolate(a: JointValues, b: JointValues, t: float = 0.5) -> JointValues:
        """Linearly interpolate between two similar joint values (t=0 gives a, t=1 gives b)."""
        return (1.0 - t) * a + t * b

    @classmethod
    def random(cls, limits: JointLimits, rng: np.random.Generator | None = None) -> JointValues:
        """Sample joint values uniformly within the position limits of every joint.

        :param limits: Joint limits providing the joint set and the position intervals
        :param rng: Random number generator (a new generator is created if None)
        :return: Joint values drawn uniformly from [min_position, max_position] per joint
        :raises InvariantViolationError: If any joint lacks a minimum or maximum position limit
        """
        if not limits.has_position_limits:
            raise InvariantViolationError("Position limits are not set for every joint.")

        rng = np.random.default_rng() if rng is None else rng
        intervals = [limits.position_interval(name) for name in limits.joint_set]
        return cls(limits.joint_set, (interval.uniform_sample(rng) for interval in intervals))
