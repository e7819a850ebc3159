"""Define classes to represent planned paths in joint space and in Cartesian space."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol, TypeVar

from robotics_motion.errors import InvariantViolationError, RangeViolationError
from robotics_motion.kinematics.joint_set import JointSet
from robotics_motion.kinematics.joint_values import JointValues
from robotics_motion.kinematics.poses import Pose

ItemT = TypeVar("ItemT", covariant=True)
PathT = TypeVar("PathT", bound="PathLike")


class PathLike(Protocol[ItemT]):
    """A persistent sequence of waypoints; every operation returns a new sequence."""

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[ItemT]: ...

    def __getitem__(self, index: int) -> ItemT: ...

    def append(self: PathT, other: PathT) -> PathT: ...

    def prepend(self: PathT, other: PathT) -> PathT: ...

    def concat(self: PathT, *others: PathT) -> PathT: ...

    def sub(self: PathT, start: int, end: int | None = None) -> PathT: ...


def check_sub_range(start: int, end: int, count: int) -> None:
    """Verify that [start, end) is a valid half-open range into a sequence of the given length.

    :param start: Index of the first element in the range
    :param end: Index one past the last element in the range
    :param count: Number of elements in the sequence
    :raises RangeViolationError: If the range does not lie within the sequence
    """
    if not 0 <= start < count:
        raise RangeViolationError(f"Start index {start} is outside of [0, {count}).")
    if not start <= end <= count:
        raise RangeViolationError(f"End index {end} is outside of [{start}, {count}].")


@dataclass(frozen=True, init=False)
class JointPath:
    """An ordered sequence of joint-space waypoints sharing one joint set.

    Points whose joint set is similar to the path's joint set (same joints in another
    order) are reordered on insertion; points over any other joint set are rejected.
    """

    joint_set: JointSet
    points: tuple[JointValues, ...]

    def __init__(self, joint_set: JointSet, points: Iterable[JointValues] = ()) -> None:
        """Initialize the path, reordering similar waypoints to follow the path's joint set.

        :param joint_set: Joints that every waypoint assigns a value
        :param points: Waypoints of the path, in order
        :raises InvariantViolationError: If a waypoint's joint set is not similar to `joint_set`
        """
        object.__setattr__(self, "joint_set", joint_set)
        object.__setattr__(self, "points", tuple(self._conform(p) for p in points))

    def _conform(self, point: JointValues) -> JointValues:
        if point.joint_set == self.joint_set:
            return point
        if not point.joint_set.is_similar(self.joint_set):
            raise InvariantViolationError(
                f"Path point over {point.joint_set} does not match the path's {self.joint_set}.",
            )
        return point.reorder(self.joint_set)

    @classmethod
    def empty(cls, joint_set: JointSet | None = None) -> JointPath:
        """Construct a path without any waypoints."""
        return cls(JointSet.empty() if joint_set is None else joint_set)

    @classmethod
    def from_points(cls, *points: JointValues) -> JointPath:
        """Construct a path over the joint set of its first waypoint.

        :raises InvariantViolationError: If no waypoints are given
        """
        if not points:
            raise InvariantViolationError("Cannot infer the joint set of a path without waypoints.")
        return cls(points[0].joint_set, points)

    def __len__(self) -> int:
        """Retrieve the number of waypoints in the path."""
        return len(self.points)

    def __iter__(self) -> Iterator[JointValues]:
        """Provide an iterator over the waypoints in order."""
        return iter(self.points)

    def __getitem__(self, index: int) -> JointValues:
        """Access the waypoint at the given index."""
        return self.points[index]

    @property
    def count(self) -> int:
        """Retrieve the number of waypoints in the path."""
        return len(self.points)

    def append(self, other: JointPath | JointValues) -> JointPath:
        """Create a path with the given path (or single waypoint) appended to this path."""
        tail = (other,) if isinstance(other, JointValues) else other.points
        return JointPath(self.joint_set, (*self.points, *tail))

    def prepend(self, other: JointPath | JointValues) -> JointPath:
        """Create a path with the given path (or single waypoint) placed before this path."""
        head = (other,) if isinstance(other, JointValues) else other.points
        return JointPath(self.joint_set, (*head, *self.points))

    def concat(self, *others: JointPath) -> JointPath:
        """Create a path by joining this path with any number of other paths, in order."""
        points = list(self.points)
        for other in others:
            points.extend(other.points)
        return JointPath(self.joint_set, points)

    def sub(self, start: int, end: int | None = None) -> JointPath:
        """Extract the waypoints in the half-open index range [start, end).

        :param start: Index of the first waypoint included
        :param end: Index one past the last waypoint included (defaults to the path length)
        :return: Path holding the selected waypoints
        :raises RangeViolationError: If the range does not lie within the path
        """
        end = len(self) if end is None else end
        check_sub_range(start, end, len(self))
        return JointPath(self.joint_set, self.points[start:end])

    def transform(self, function: Callable[[JointValues, int], JointValues]) -> JointPath:
        """Apply the given function(point, index) to every waypoint."""
        return JointPath(self.joint_set, (function(p, i) for i, p in enumerate(self.points)))

    def reorder(self, new_order: JointSet) -> JointPath:
        """Create a path whose waypoints follow the joint order of a similar joint set."""
        return JointPath(new_order, self.points)


@dataclass(frozen=True, init=False)
class CartesianPath:
    """An ordered sequence of poses, e.g. waypoints for an end-effector."""

    poses: tuple[Pose, ...]

    def __init__(self, poses: Iterable[Pose] = ()) -> None:
        """Initialize the path from its poses, in order."""
        object.__setattr__(self, "poses", tuple(poses))

    @classmethod
    def empty(cls) -> CartesianPath:
        """Construct a path without any poses."""
        return cls()

    def __len__(self) -> int:
        """Retrieve the number of poses in the path."""
        return len(self.poses)

    def __iter__(self) -> Iterator[Pose]:
        """Provide an iterator over the poses in order."""
        return iter(self.poses)

    def __getitem__(self, index: int) -> Pose:
        """Access the pose at the given index."""
        return self.poses[index]

    @property
    def count(self) -> int:
        """Retrieve the number of poses in the path."""
        return len(self.poses)

    def append(self, other: CartesianPath | Pose) -> CartesianPath:
        """Create a path with the given path (or single pose) appended to this path."""
        tail = (other,) if isinstance(other, Pose) else other.poses
        return CartesianPath((*self.poses, *tail))

    def prepend(self, other: CartesianPath | Pose) -> CartesianPath:
        """Create a path with the given path (or single pose) placed before this path."""
        head = (other,) if isinstance(other, Pose) else other.poses
        return CartesianPath((*head, *self.poses))

    def concat(self, *others: CartesianPath) -> CartesianPath:
        """Create a path by joining this path with any number of other paths, in order."""
        poses = list(self.poses)
        for other in others:
            poses.extend(other.poses)
        return CartesianPath(poses)

    def sub(self, start: int, end: int | None = None) -> CartesianPath:
        """Extract the poses in the half-open index range [start, end).

        :raises RangeViolationError: If the range does not lie within the path
        """
        end = len(self) if end is None else end
        check_sub_range(start, end, len(self))
        return CartesianPath(self.poses[start:end])

    def transform(self, function: Callable[[Pose, int], Pose]) -> CartesianPath:
        """Apply the given function(pose, index) to every pose."""
        return CartesianPath(function(p, i) for i, p in enumerate(self.poses))

    @property
    def positions(self) -> list[list[float]]:
        """Retrieve the [x, y, z] translation of every pose."""
        return [p.translation.to_list() for p in self.poses]

    @property
    def orientations(self) -> list[list[float]]:
        """Retrieve the [x, y, z, w] rotation of every pose."""
        return [p.rotation.to_list() for p in self.poses]


def joint_path_from_points(*points: JointValues) -> JointPath:
    """Construct a joint path from the given waypoints (over the first waypoint's joint set)."""
    return JointPath.from_points(*points)


def joint_path_concat(first: JointPath, *others: JointPath) -> JointPath:
    """Concatenate joint paths into one path over the first path's joint set."""
    return first.concat(*others)
