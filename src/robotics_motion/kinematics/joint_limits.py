"""Define a class holding position, velocity, and acceleration limits per joint."""

from __future__ import annotations

from dataclasses import dataclass

from robotics_motion.errors import InvariantViolationError
from robotics_motion.kinematics.joint_set import JointSet
from robotics_motion.math.intervals import ClosedInterval


@dataclass(frozen=True)
class JointLimits:
    """Position, velocity, and acceleration limits for every joint of a joint set."""

    joint_set: JointSet
    max_velocity: tuple[float | None, ...]
    max_acceleration: tuple[float | None, ...]
    min_position: tuple[float | None, ...]
    max_position: tuple[float | None, ...]

    def __post_init__(self) -> None:
        """Verify that every limit array provides exactly one entry per joint."""
        for attr_name in ("max_velocity", "max_acceleration", "min_position", "max_position"):
            limits = tuple(None if x is None else float(x) for x in getattr(self, attr_name))
            if len(limits) != len(self.joint_set):
                raise InvariantViolationError(
                    f"Length of {attr_name} ({len(limits)}) does not match "
                    f"the number of joints ({len(self.joint_set)}).",
                )
            object.__setattr__(self, attr_name, limits)

    @classmethod
    def unlimited(cls, joint_set: JointSet) -> JointLimits:
        """Construct joint limits without any limit set."""
        unset = (None,) * len(joint_set)
        return cls(joint_set, unset, unset, unset, unset)

    @property
    def has_position_limits(self) -> bool:
        """Evaluate whether minimum and maximum positions are set for every joint."""
        return all(x is not None for x in (*self.min_position, *self.max_position))

    def position_interval(self, joint_name: str) -> ClosedInterval:
        """Retrieve the closed interval of allowed positions for the named joint.

        :param joint_name: Name of a joint in the joint set
        :return: Interval [min_position, max_position] of the joint
        :raises InvariantViolationError: If either position limit of the joint is not set
        """
        index = self.joint_set.get_index_of(joint_name)
        low = self.min_position[index]
        high = self.max_position[index]
        if low is None or high is None:
            raise InvariantViolationError(f"Position limits of joint '{joint_name}' are not set.")
        return ClosedInterval(low, high)

    def select(self, subset: JointSet) -> JointLimits:
        """Create joint limits holding only the joints of the given subset."""
        if not subset.is_subset(self.joint_set):
            raise InvariantViolationError(f"{subset} is not a subset of {self.joint_set}.")

        indices = [self.joint_set.get_index_of(name) for name in subset]
        return JointLimits(
            subset,
            tuple(self.max_velocity[i] for i in indices),
            tuple(self.max_acceleration[i] for i in indices),
            tuple(self.min_position[i] for i in indices),
            tuple(self.max_position[i] for i in indices),
        )
