"""Unit tests for Pose and Twist, representing rigid-body poses and displacements in 3D space."""

import math

import numpy as np
import pytest
from hypothesis import given

from robotics_motion.errors import FrameMismatchError, NumericDegeneracyError
from robotics_motion.kinematics import Pose, Quaternion, Vector3, calculate_twist

from .strategies.spatial_strategies import poses, vectors


@given(poses())
def test_pose_equality_is_structural(pose: Pose) -> None:
    """Verify that poses with equal frame, translation, and rotation compare equal."""
    # Arrange - Construct an identical pose from the same components
    copy = Pose(pose.translation, pose.rotation, pose.frame)

    # Assert - Expect equality (and a shared hash)
    assert copy == pose
    assert hash(copy) == hash(pose)


@given(poses())
def test_pose_in_another_frame_is_unequal(pose: Pose) -> None:
    """Verify that changing only the frame makes poses unequal despite identical numbers."""
    # Act - Express the same numbers in a different frame
    moved = pose.with_frame(pose.frame + "_other")

    # Assert - Expect the poses to differ
    assert moved != pose
    assert not moved.approx_equal(pose)


def test_pose_rotation_not_normalized_by_default() -> None:
    """Verify that poses keep the given rotation unless normalization is requested."""
    # Arrange - Create a non-unit quaternion
    rotation = Quaternion(0.0, 0.0, 0.0, 2.0)

    # Act - Construct poses without and with normalization
    raw = Pose(Vector3.zero(), rotation)
    normalized = Pose(Vector3.zero(), rotation, normalize_rotation=True)

    # Assert - Expect only the second rotation to be scaled to unit length
    assert raw.rotation == rotation
    assert normalized.rotation == Quaternion.identity()


def test_pose_normalization_of_zero_rotation_fails() -> None:
    """Verify that normalizing a zero-valued rotation is reported as a numeric failure."""
    # Act/Assert - Expect the zero quaternion to be rejected
    with pytest.raises(NumericDegeneracyError):
        Pose(Vector3.zero(), Quaternion(0.0, 0.0, 0.0, 0.0), normalize_rotation=True)


@given(poses(), vectors())
def test_pose_translate(pose: Pose, offset: Vector3) -> None:
    """Verify that translating a pose shifts only its translation."""
    # Act - Translate the pose by the offset
    result = pose.translate(offset)

    # Assert - Expect a shifted translation and unchanged rotation and frame
    assert result.translation.approx_equal(pose.translation + offset)
    assert result.rotation == pose.rotation
    assert result.frame == pose.frame


@given(poses())
def test_pose_to_homogeneous_matrix_and_back(pose: Pose) -> None:
    """Verify that any Pose is unchanged after converting to and from a homogeneous matrix."""
    # Arrange/Act - Given a pose, convert to and from a homogeneous transformation matrix
    matrix = pose.to_homogeneous_matrix()
    result_pose = Pose.from_homogeneous_matrix(matrix, frame=pose.frame)

    # Assert - Expect that the matrix is 4x4 and the resulting Pose equals the original
    assert matrix.shape == (4, 4)
    assert pose.approx_equal(result_pose, atol=1e-06)


@given(poses())
def test_pose_inverse_multiplication(pose: Pose) -> None:
    """Verify that composing any Pose with its inverse gives the identity transform."""
    # Act - Compose the pose with its inverse
    product = pose @ pose.inverse()

    # Assert - Expect the identity pose in the pose's frame
    assert Pose.identity(pose.frame).approx_equal(product, atol=1e-06)


def test_pose_composition_takes_left_frame() -> None:
    """Verify that composing base->tool with tool->grasp yields the grasp pose in the base frame."""
    # Arrange - Place a tool 1 m above the base, yawed by 90 degrees, and a grasp 0.5 m along the tool x-axis
    tool_in_base = Pose.from_xyz_rpy(z=1.0, yaw_rad=math.pi / 2, frame="base_link")
    grasp_in_tool = Pose.from_xyz_rpy(x=0.5, frame="tool0")

    # Act - Compose the poses
    grasp_in_base = tool_in_base @ grasp_in_tool

    # Assert - Expect the left pose's frame and the grasp offset rotated onto the base y-axis
    assert grasp_in_base.frame == "base_link"
    assert grasp_in_base.translation.approx_equal(Vector3(0.0, 0.5, 1.0), atol=1e-9)
    with pytest.raises(TypeError):
        tool_in_base @ Vector3(1.0, 0.0, 0.0)


@given(poses())
def test_calculate_twist_between_equal_poses_is_zero(pose: Pose) -> None:
    """Verify that the twist from any pose to itself has no linear or angular part."""
    # Act - Calculate the twist displacing the pose onto itself
    twist = calculate_twist(pose, pose)

    # Assert - Expect a zero twist in the pose's frame
    assert twist.frame == pose.frame
    assert twist.linear.approx_equal(Vector3.zero(), atol=1e-05)
    assert twist.angular.approx_equal(Vector3.zero(), atol=1e-05)


def test_calculate_twist_pure_rotation() -> None:
    """Verify the twist between two poses that differ by a rotation about the z-axis."""
    # Arrange - Create two poses rotated a quarter turn apart about the z-axis
    source = Pose.from_xyz_rpy(x=1.0, frame="base")
    destination = Pose.from_xyz_rpy(x=1.0, yaw_rad=math.pi / 2, frame="base")

    # Act - Calculate the twist between the poses
    twist = calculate_twist(source, destination)

    # Assert - Expect no translation and an angular part of pi/2 about the z-axis
    assert twist.linear.approx_equal(Vector3.zero(), atol=1e-09)
    assert twist.angular.approx_equal(Vector3(0.0, 0.0, math.pi / 2), atol=1e-09)


def test_calculate_twist_pure_translation() -> None:
    """Verify that the linear part of a twist is expressed relative to the source pose."""
    # Arrange - Create a source pose yawed a quarter turn and a destination one meter along y
    source = Pose.from_xyz_rpy(yaw_rad=math.pi / 2)
    destination = Pose.from_xyz_rpy(y=1.0, yaw_rad=math.pi / 2)

    # Act - Calculate the twist between the poses
    twist = calculate_twist(source, destination)

    # Assert - Expect motion along the source pose's own x-axis
    assert np.allclose(twist.linear.to_array(), [1.0, 0.0, 0.0], atol=1e-09)
    assert twist.angular.approx_equal(Vector3.zero(), atol=1e-09)


def test_calculate_twist_across_frames_fails() -> None:
    """Verify that the twist between poses in different frames is rejected."""
    # Arrange - Create two poses in different frames
    source = Pose.identity("world")
    destination = Pose.identity("tool0")

    # Act/Assert - Expect a frame mismatch
    with pytest.raises(FrameMismatchError):
        calculate_twist(source, destination)


@given(poses(frame="world"), poses(frame="world"))
def test_pose_interpolation_endpoints(a: Pose, b: Pose) -> None:
    """Verify that interpolating between two poses reproduces them at t=0 and t=1."""
    # Act - Interpolate at both ends
    start = Pose.interpolate(a, b, 0.0)
    end = Pose.interpolate(a, b, 1.0)

    # Assert - Expect the endpoints to be reproduced
    assert start.approx_equal(a, atol=1e-06)
    assert end.approx_equal(b, atol=1e-06)
