"""Define classes to represent poses and twists in 3D space."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field, replace
from typing import Any

import numpy as np

from robotics_motion.errors import FrameMismatchError, InvariantViolationError, NumericDegeneracyError
from robotics_motion.kinematics.rotations import EulerRPY, Quaternion
from robotics_motion.kinematics.vector3 import Vector3

DEFAULT_FRAME = ""
"""Name of the world frame; poses in this frame are relative to the identity pose."""


@dataclass(frozen=True)
class Pose:
    """A translation and rotation in 3D space, expressed in a named reference frame.

    Two poses are equal only if their frames, translations, and rotations are equal. Poses in
    different frames are never interchangeable, even when their numbers coincide.
    """

    translation: Vector3 = field(default_factory=Vector3.zero)
    """Translation (meters) along the x, y, and z axes."""

    rotation: Quaternion = field(default_factory=Quaternion.identity)
    """Rotation as an (x, y, z, w) quaternion."""

    frame: str = DEFAULT_FRAME
    """Name of the parent reference frame (empty for the world frame)."""

    normalize_rotation: InitVar[bool] = False
    """If True, the rotation is normalized to unit length with w >= 0 on construction."""

    def __post_init__(self, normalize_rotation: bool) -> None:
        """Optionally normalize the rotation once the pose is initialized."""
        if normalize_rotation:
            object.__setattr__(self, "rotation", self.rotation.normalized())

    def __matmul__(self, other: Pose) -> Pose:
        """Compose this pose with another pose.

        Consider: pose_A_B @ pose_B_C = pose_A_C, meaning the pose of 'C' relative to frame A.
            Therefore, we see that the resulting pose takes the "left-side" reference frame.

        The frame of `other` is not checked: it names the child frame of this pose (B above),
        which a Pose does not record, so only this pose's frame carries into the result.

        :param other: Pose right-multiplied with this pose, expressed in this pose's child frame
        :return: Composed pose
        """
        if not isinstance(other, Pose):
            raise TypeError(f"Cannot compose a Pose with: {other}")

        translation = self.translation + self.rotation.rotate(other.translation)
        return Pose(translation, self.rotation * other.rotation, self.frame)

    @classmethod
    def identity(cls, frame: str = DEFAULT_FRAME) -> Pose:
        """Construct a Pose corresponding to the identity transformation."""
        return Pose(Vector3.zero(), Quaternion.identity(), frame)

    @classmethod
    def from_xyz_rpy(
        cls,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        roll_rad: float = 0.0,
        pitch_rad: float = 0.0,
        yaw_rad: float = 0.0,
        frame: str = DEFAULT_FRAME,
    ) -> Pose:
        """Construct a Pose from the given XYZ coordinates and Euler RPY angles.

        :param x: Translation along the x-axis
        :param y: Translation along the y-axis
        :param z: Translation along the z-axis
        :param roll_rad: Fixed-frame roll angle (radians) about the x-axis
        :param pitch_rad: Fixed-frame pitch angle (radians) about the y-axis
        :param yaw_rad: Fixed-frame yaw angle (radians) about the z-axis
        :param frame: Reference frame of the constructed pose
        :return: Constructed Pose instance
        """
        rotation = EulerRPY(roll_rad, pitch_rad, yaw_rad).to_quaternion()
        return Pose(Vector3(x, y, z), rotation, frame)

    @classmethod
    def from_homogeneous_matrix(cls, matrix: np.ndarray, frame: str = DEFAULT_FRAME) -> Pose:
        """Construct a Pose from a 4x4 homogeneous transformation matrix.

        The rotation of the resulting pose is normalized (unit length, w >= 0).
        """
        if matrix.shape != (4, 4):
            raise InvariantViolationError(f"Expected a 4x4 matrix but received shape {matrix.shape}")

        translation = Vector3(float(matrix[0, 3]), float(matrix[1, 3]), float(matrix[2, 3]))
        rotation = Quaternion.from_homogeneous_matrix(matrix)
        return Pose(translation, rotation, frame, normalize_rotation=True)

    def to_homogeneous_matrix(self) -> np.ndarray:
        """Convert the pose into a 4x4 homogeneous transformation matrix."""
        matrix = self.rotation.to_homogeneous_matrix()
        matrix[:3, 3] = self.translation.to_array()
        return matrix

    def rotation_matrix(self) -> np.ndarray:
        """Retrieve the 3x3 rotation matrix of the pose."""
        return self.rotation.to_rotation_matrix()

    def with_translation(self, translation: Vector3) -> Pose:
        """Create a copy of the pose with the given translation."""
        return replace(self, translation=translation)

    def with_rotation(self, rotation: Quaternion, normalize_rotation: bool = True) -> Pose:
        """Create a copy of the pose with the given rotation (normalized by default)."""
        return Pose(self.translation, rotation, self.frame, normalize_rotation=normalize_rotation)

    def with_frame(self, frame: str) -> Pose:
        """Create a copy of the pose expressed in the given reference frame."""
        return replace(self, frame=frame)

    def translate(self, offset: Vector3) -> Pose:
        """Create a pose shifted by the given offset; rotation and frame are unchanged."""
        return replace(self, translation=self.translation + offset)

    def normalized(self) -> Pose:
        """Create a copy of the pose with its rotation normalized."""
        return Pose(self.translation, self.rotation, self.frame, normalize_rotation=True)

    def inverse(self) -> Pose:
        """Return a pose representing the inverse transformation of this pose."""
        rotation = self.rotation.inverse()
        translation = rotation.rotate(-self.translation)
        return Pose(translation, rotation, self.frame)

    def to_twist(self) -> Twist:
        """Interpret the pose as a finite displacement and convert it into a twist.

        The translation becomes the linear part; the rotation angle times its rotation axis
        becomes the angular part.
        """
        angle_rad, axis = self.rotation.normalized().to_angle_axis()
        return Twist(self.translation, axis * angle_rad, self.frame)

    @staticmethod
    def interpolate(a: Pose, b: Pose, t: float = 0.5) -> Pose:
        """Interpolate between two poses in the same frame (lerp translation, slerp rotation).

        :raises FrameMismatchError: If the poses have different reference frames
        """
        if a.frame != b.frame:
            raise FrameMismatchError(f"Poses have different frames: '{a.frame}' and '{b.frame}'.")

        translation = Vector3.lerp(a.translation, b.translation, t)
        return Pose(translation, Quaternion.slerp(a.rotation, b.rotation, t), a.frame)

    def to_list(self) -> list[float]:
        """Convert the pose into a list of the form [x, y, z, qx, qy, qz, qw]."""
        return [*self.translation.to_list(), *self.rotation.to_list()]

    def approx_equal(self, other: Pose, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Pose is approximately equal to this one."""
        return (
            self.frame == other.frame
            and self.translation.approx_equal(other.translation, rtol=rtol, atol=atol)
            and self.rotation.approx_equal(other.rotation, rtol=rtol, atol=atol)
        )


@dataclass(frozen=True)
class Twist:
    """Linear (m/s) and angular (rad/s) velocity described in a named reference frame.

    A twist derived from two poses represents the finite displacement between them instead.
    """

    linear: Vector3 = field(default_factory=Vector3.zero)
    angular: Vector3 = field(default_factory=Vector3.zero)
    frame: str = DEFAULT_FRAME

    @classmethod
    def zero(cls, frame: str = DEFAULT_FRAME) -> Twist:
        """Construct a twist without any motion."""
        return Twist(Vector3.zero(), Vector3.zero(), frame)

    def to_dict(self) -> dict[str, Any]:
        """Convert the twist into a dictionary of plain data."""
        return {"linear": self.linear.to_list(), "angular": self.angular.to_list(), "frame": self.frame}


def calculate_twist(source: Pose, destination: Pose) -> Twist:
    """Calculate the twist that displaces the source pose onto the destination pose.

    :param source: Pose at which the displacement starts
    :param destination: Pose at which the displacement ends (same frame as `source`)
    :return: Twist whose linear part is the relative translation and whose angular part is
        the relative rotation angle times its axis, both expressed relative to `source`
    :raises FrameMismatchError: If the poses have different reference frames
    :raises NumericDegeneracyError: If the source transform cannot be inverted
    """
    if source.frame != destination.frame:
        raise FrameMismatchError(
            f"Twist is only defined for poses sharing a frame, got '{source.frame}' "
            f"and '{destination.frame}'.",
        )

    try:
        source_inverse = np.linalg.inv(source.to_homogeneous_matrix())
    except np.linalg.LinAlgError as error:
        raise NumericDegeneracyError(f"Cannot invert the transform of pose {source}.") from error

    delta_matrix = source_inverse @ destination.to_homogeneous_matrix()
    delta_pose = Pose.from_homogeneous_matrix(delta_matrix, source.frame)
    return delta_pose.to_twist()
