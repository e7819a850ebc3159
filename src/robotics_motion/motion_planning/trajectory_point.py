"""Define a class representing a single timed sample of a joint trajectory."""

from __future__ import annotations

from dataclasses import dataclass, replace

from robotics_motion.errors import InvariantViolationError
from robotics_motion.kinematics.joint_set import JointSet
from robotics_motion.kinematics.joint_values import JointValues
from robotics_motion.math.hermite import MIN_INTERVAL_S, cubic_hermite

CHANNEL_NAMES = ("velocities", "accelerations", "efforts")
"""Names of the optional derivative channels of a trajectory point."""


@dataclass(frozen=True)
class JointTrajectoryPoint:
    """A planned state of joint values at a specified time in a trajectory."""

    time_from_start: float
    """Time (seconds) since the trajectory started."""

    positions: JointValues
    velocities: JointValues | None = None
    accelerations: JointValues | None = None
    efforts: JointValues | None = None

    def __post_init__(self) -> None:
        """Verify that every present channel uses the joint set of the positions."""
        if self.positions is None:
            raise InvariantViolationError("A trajectory point requires positions.")

        object.__setattr__(self, "time_from_start", float(self.time_from_start))
        for channel_name in CHANNEL_NAMES:
            channel = getattr(self, channel_name)
            if channel is not None and channel.joint_set != self.positions.joint_set:
                raise InvariantViolationError(
                    f"Point {channel_name} use {channel.joint_set} but its positions "
                    f"use {self.positions.joint_set}.",
                )

    @property
    def joint_set(self) -> JointSet:
        """Retrieve the joint set of the point's positions."""
        return self.positions.joint_set

    def with_time_from_start(self, time_s: float) -> JointTrajectoryPoint:
        """Create a copy of the point labeled with the given time (seconds)."""
        return replace(self, time_from_start=time_s)

    def add_time_offset(self, offset_s: float) -> JointTrajectoryPoint:
        """Create a copy of the point shifted later in time by the given offset (seconds)."""
        return replace(self, time_from_start=self.time_from_start + offset_s)

    def merge(self, other: JointTrajectoryPoint) -> JointTrajectoryPoint:
        """Merge two simultaneous points into one point over the union of their joint sets.

        A derivative channel is kept only if both points provide it.

        :param other: Point merged into this point
        :return: Point whose values for shared joints are taken from this point
        :raises InvariantViolationError: If the points are labeled with different times
        """
        if self.time_from_start != other.time_from_start:
            raise InvariantViolationError(
                f"Cannot merge trajectory points at times {self.time_from_start} "
                f"and {other.time_from_start}.",
            )

        merged_channels = {}
        for channel_name in CHANNEL_NAMES:
            ours = getattr(self, channel_name)
            theirs = getattr(other, channel_name)
            merged_channels[channel_name] = None if ours is None or theirs is None else ours.merge(theirs)

        return JointTrajectoryPoint(
            self.time_from_start,
            self.positions.merge(other.positions),
            **merged_channels,
        )

    def interpolate_cubic(self, other: JointTrajectoryPoint, time_s: float) -> JointTrajectoryPoint:
        """Interpolate between this point and a later point using a cubic Hermite polynomial.

        Absent velocity channels are treated as zero velocity. If the points are (nearly)
        simultaneous, the later point's positions are returned with zero velocity.

        :param other: Later point of the bracketing pair, over the same joint set
        :param time_s: Query time (seconds), on the same time axis as both points
        :return: Interpolated point, labeled with the time elapsed since this point
        :raises InvariantViolationError: If the points use different joint sets
        """
        if other.joint_set != self.joint_set:
            raise InvariantViolationError(f"Cannot interpolate between {self.joint_set} and {other.joint_set}.")

        dt = other.time_from_start - self.time_from_start
        if dt < MIN_INTERVAL_S:
            return JointTrajectoryPoint(
                self.time_from_start + dt,
                other.positions,
                velocities=JointValues.zero(self.joint_set),
            )

        zero = JointValues.zero(self.joint_set)
        v0 = (self.velocities or zero).to_array()
        v1 = (other.velocities or zero).to_array()
        tau = max(time_s - self.time_from_start, 0.0)

        positions, velocities = cubic_hermite(
            self.positions.to_array(),
            v0,
            other.positions.to_array(),
            v1,
            dt,
            tau,
        )
        return JointTrajectoryPoint(
            tau,
            JointValues(self.joint_set, positions),
            velocities=JointValues(self.joint_set, velocities),
        )
