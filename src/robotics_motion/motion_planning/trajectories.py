"""Define a class to represent timed trajectories through joint space."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from robotics_motion.errors import InvariantViolationError
from robotics_motion.kinematics.joint_set import JointSet
from robotics_motion.kinematics.joint_values import JointValues
from robotics_motion.motion_planning.interpolation import evaluate_at, merge_samples
from robotics_motion.motion_planning.paths import JointPath, check_sub_range
from robotics_motion.motion_planning.trajectory_point import JointTrajectoryPoint


@dataclass(frozen=True, init=False)
class JointTrajectory:
    """A sequence of planned joint-space points at non-decreasing times.

    Every point's positions use the trajectory's joint set. A derivative channel (velocities,
    accelerations, or efforts) is flagged as available only if every point provides it.
    """

    joint_set: JointSet
    points: tuple[JointTrajectoryPoint, ...]
    is_valid: bool = True
    """Whether the planner that produced the trajectory reported it as valid."""

    has_velocity: bool = field(default=False, compare=False)
    has_acceleration: bool = field(default=False, compare=False)
    has_effort: bool = field(default=False, compare=False)

    def __init__(
        self,
        joint_set: JointSet,
        points: Iterable[JointTrajectoryPoint] = (),
        is_valid: bool = True,
    ) -> None:
        """Initialize the trajectory and verify properties expected of any valid trajectory.

        :param joint_set: Joints specified by every point of the trajectory
        :param points: Points of the trajectory, in order of time
        :param is_valid: Whether the trajectory is considered valid for execution
        :raises InvariantViolationError: If the times decrease between consecutive points, or
            if a point specifies a different joint set
        """
        points = tuple(points)
        for i, point in enumerate(points):
            if point.joint_set != joint_set:
                raise InvariantViolationError(
                    f"Trajectory point {i} uses {point.joint_set} but the trajectory uses {joint_set}.",
                )
            if i > 0 and point.time_from_start < points[i - 1].time_from_start:
                raise InvariantViolationError(
                    f"Trajectory times must not decrease, but point {i - 1} is at "
                    f"{points[i - 1].time_from_start} s and point {i} is at {point.time_from_start} s.",
                )

        object.__setattr__(self, "joint_set", joint_set)
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "is_valid", is_valid)

        # Channels missing from any point are unavailable for the whole trajectory
        for flag_name, channel_name in (
            ("has_velocity", "velocities"),
            ("has_acceleration", "accelerations"),
            ("has_effort", "efforts"),
        ):
            available = bool(points) and all(getattr(p, channel_name) is not None for p in points)
            object.__setattr__(self, flag_name, available)

    @classmethod
    def empty(cls, joint_set: JointSet | None = None) -> JointTrajectory:
        """Construct a trajectory without any points."""
        return cls(JointSet.empty() if joint_set is None else joint_set)

    def __len__(self) -> int:
        """Retrieve the number of points in the trajectory."""
        return len(self.points)

    def __iter__(self) -> Iterator[JointTrajectoryPoint]:
        """Provide an iterator over the points in order of time."""
        return iter(self.points)

    def __getitem__(self, index: int) -> JointTrajectoryPoint:
        """Access the point at the given index."""
        return self.points[index]

    @property
    def count(self) -> int:
        """Retrieve the number of points in the trajectory."""
        return len(self.points)

    @property
    def duration(self) -> float:
        """Retrieve the duration (seconds) of the trajectory, i.e. the time of its last point."""
        return self.points[-1].time_from_start if self.points else 0.0

    @property
    def times_from_start(self) -> list[float]:
        """Retrieve the time (seconds) of every point."""
        return [p.time_from_start for p in self.points]

    @property
    def positions(self) -> list[JointValues]:
        """Retrieve the positions of every point."""
        return [p.positions for p in self.points]

    @property
    def velocities(self) -> list[JointValues | None]:
        """Retrieve the velocities of every point (None where a point has none)."""
        return [p.velocities for p in self.points]

    @property
    def path(self) -> JointPath:
        """Retrieve the untimed joint path traced by the trajectory's positions."""
        return JointPath(self.joint_set, self.positions)

    def append(self, other: JointTrajectory) -> JointTrajectory:
        """Create a trajectory that continues with the other trajectory after this one ends.

        :param other: Trajectory whose points are delayed by this trajectory's duration
        :return: Trajectory holding the points of both trajectories
        """
        shifted = (p.add_time_offset(self.duration) for p in other.points)
        return JointTrajectory(self.joint_set, (*self.points, *shifted), self.is_valid and other.is_valid)

    def prepend(self, other: JointTrajectory) -> JointTrajectory:
        """Create a trajectory that runs the other trajectory before this one."""
        return other.append(self)

    def concat(self, *others: JointTrajectory) -> JointTrajectory:
        """Create a trajectory running this trajectory and then each of the others in turn."""
        result = self
        for other in others:
            result = result.append(other)
        return result

    def sub(self, start: int, end: int | None = None) -> JointTrajectory:
        """Extract the points in the half-open index range [start, end), keeping their times.

        :raises RangeViolationError: If the range does not lie within the trajectory
        """
        end = len(self) if end is None else end
        check_sub_range(start, end, len(self))
        return JointTrajectory(self.joint_set, self.points[start:end], self.is_valid)

    def transform(
        self,
        function: Callable[[JointTrajectoryPoint, int], JointTrajectoryPoint],
    ) -> JointTrajectory:
        """Apply the given function(point, index) to every point, preserving validity."""
        new_points = (function(p, i) for i, p in enumerate(self.points))
        return JointTrajectory(self.joint_set, new_points, self.is_valid)

    def evaluate_at(self, simulated_time: float, delay: float = 0.0) -> JointTrajectoryPoint:
        """Evaluate the trajectory at a global time, given the delay before the trajectory starts.

        :raises InvariantViolationError: If the trajectory has no points
        """
        return evaluate_at(self.points, simulated_time, delay)

    def merge(self, other: JointTrajectory, delay: float = 0.0, other_delay: float = 0.0) -> JointTrajectory:
        """Merge with another trajectory into one synchronized trajectory over both joint sets.

        :param other: Trajectory merged into this trajectory
        :param delay: Start delay (seconds) of this trajectory
        :param other_delay: Start delay (seconds) of the other trajectory
        :return: Trajectory spanning the longer of the two delayed durations
        """
        points = merge_samples(self.points, other.points, delay, other_delay)
        return JointTrajectory(
            self.joint_set.combine(other.joint_set),
            points,
            self.is_valid and other.is_valid,
        )


def merge_trajectories(
    a: JointTrajectory,
    b: JointTrajectory,
    delay_a: float = 0.0,
    delay_b: float = 0.0,
) -> JointTrajectory:
    """Merge two independently delayed trajectories into one synchronized trajectory."""
    return a.merge(b, delay_a, delay_b)
