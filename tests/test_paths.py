"""Unit tests for JointPath and CartesianPath, persistent sequences of waypoints."""

import pytest
from hypothesis import given

from robotics_motion.errors import InvariantViolationError, RangeViolationError
from robotics_motion.kinematics import JointSet, JointValues, Pose
from robotics_motion.motion_planning import (
    CartesianPath,
    JointPath,
    joint_path_concat,
    joint_path_from_points,
)

from .strategies.motion_strategies import joint_path_lists, joint_paths
from .strategies.spatial_strategies import poses

ARM_JOINTS = JointSet(["shoulder", "elbow", "wrist"])


def test_joint_path_reorders_similar_points() -> None:
    """Verify that a waypoint over a reordered joint set is reordered to match the path."""
    # Arrange - Create a waypoint whose joints are listed in another order
    point = JointValues(JointSet(["wrist", "shoulder", "elbow"]), [3.0, 1.0, 2.0])

    # Act - Construct a path containing the waypoint
    path = JointPath(ARM_JOINTS, [point])

    # Assert - Expect the waypoint to follow the path's joint order
    assert path[0].joint_set == ARM_JOINTS
    assert path[0].values == (1.0, 2.0, 3.0)


def test_joint_path_rejects_dissimilar_points() -> None:
    """Verify that a waypoint over other joints cannot be added to a path."""
    # Arrange - Create a waypoint lacking one of the path's joints
    point = JointValues(JointSet(["shoulder", "elbow"]), [1.0, 2.0])

    # Act/Assert - Expect construction and appending to fail
    with pytest.raises(InvariantViolationError):
        JointPath(ARM_JOINTS, [point])
    with pytest.raises(InvariantViolationError):
        JointPath.empty(ARM_JOINTS).append(point)


@given(joint_path_lists(count=3))
def test_joint_path_append_associativity(paths: list[JointPath]) -> None:
    """Verify that (a.append(b)).append(c) equals a.append(b.concat(c)) for any paths."""
    # Arrange - Unpack three paths over the same joint set
    a, b, c = paths

    # Act - Join the paths in two different groupings
    left = a.append(b).append(c)
    right = a.append(b.concat(c))

    # Assert - Expect identical waypoints in both results
    assert left == right
    assert len(left) == len(a) + len(b) + len(c)


@given(joint_paths())
def test_joint_path_operations_do_not_modify_original(path: JointPath) -> None:
    """Verify that appending and prepending return new paths and leave the original unchanged."""
    # Arrange - Record the original waypoints
    original_points = path.points
    point = JointValues.zero(path.joint_set)

    # Act - Append and prepend a waypoint
    appended = path.append(point)
    prepended = path.prepend(point)

    # Assert - Expect new paths with the waypoint at the expected end
    assert path.points == original_points
    assert appended[-1] == point
    assert prepended[0] == point
    assert len(appended) == len(prepended) == len(path) + 1


def test_joint_path_sub_is_half_open() -> None:
    """Verify that sub(start, end) keeps the waypoints with indices in [start, end)."""
    # Arrange - Create a path of four waypoints
    path = JointPath(ARM_JOINTS, [JointValues(ARM_JOINTS, float(i)) for i in range(4)])

    # Act - Extract sub-ranges
    middle = path.sub(1, 3)
    tail = path.sub(2)

    # Assert - Expect the end index to be excluded
    assert [p[0] for p in middle] == [1.0, 2.0]
    assert [p[0] for p in tail] == [2.0, 3.0]
    assert len(path.sub(1, 1)) == 0


@pytest.mark.parametrize(("start", "end"), [(-1, 2), (4, 4), (2, 1), (0, 5)])
def test_joint_path_sub_out_of_range(start: int, end: int) -> None:
    """Verify that sub-ranges reaching outside of the path are rejected."""
    # Arrange - Create a path of four waypoints
    path = JointPath(ARM_JOINTS, [JointValues.zero(ARM_JOINTS)] * 4)

    # Act/Assert - Expect a range violation
    with pytest.raises(RangeViolationError):
        path.sub(start, end)


def test_joint_path_transform_and_helpers() -> None:
    """Verify the transform operation and the module-level path construction helpers."""
    # Arrange - Create two waypoints and a path from them
    start = JointValues(ARM_JOINTS, 0.0)
    goal = JointValues(ARM_JOINTS, 1.0)
    path = joint_path_from_points(start, goal)

    # Act - Offset each waypoint by its index and concatenate paths
    shifted = path.transform(lambda p, i: p + float(i))
    joined = joint_path_concat(path, shifted)

    # Assert - Expect the transformed values and the concatenated length
    assert path.joint_set == ARM_JOINTS
    assert shifted[1] == JointValues(ARM_JOINTS, 2.0)
    assert len(joined) == 4
    with pytest.raises(InvariantViolationError):
        joint_path_from_points()


@given(poses(), poses(), poses())
def test_cartesian_path_operations(a: Pose, b: Pose, c: Pose) -> None:
    """Verify that Cartesian paths support the same persistent operations as joint paths."""
    # Arrange - Create a path of two poses
    path = CartesianPath([a, b])

    # Act - Append, prepend, and extract sub-paths
    appended = path.append(c)
    prepended = path.prepend(CartesianPath([c]))
    sub = appended.sub(1, 3)

    # Assert - Expect the poses in the expected order
    assert list(appended) == [a, b, c]
    assert list(prepended) == [c, a, b]
    assert list(sub) == [b, c]
    assert path.concat(CartesianPath([c])) == appended
    assert appended.positions[2] == c.translation.to_list()
    assert appended.orientations[0] == a.rotation.to_list()
    with pytest.raises(RangeViolationError):
        path.sub(0, 3)
