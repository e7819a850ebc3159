"""Define classes to represent 3D rotations and orientations."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING

import numpy as np
from pyquaternion import Quaternion as Q
from trimesh.transformations import (
    euler_from_quaternion,
    quaternion_from_euler,
    quaternion_from_matrix,
    quaternion_matrix,
)

from robotics_motion.errors import InvariantViolationError, NumericDegeneracyError
from robotics_motion.kinematics.vector3 import Vector3

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray


@dataclass(frozen=True)
class EulerRPY:
    """A 3D rotation represented using three fixed-frame Euler angles."""

    roll_rad: float
    pitch_rad: float
    yaw_rad: float

    def __iter__(self) -> Iterator[float]:
        """Provide an iterator over the roll, pitch, and yaw values."""
        yield from astuple(self)

    def to_quaternion(self) -> Quaternion:
        """Convert the Euler angles into an equivalent unit quaternion."""
        w, x, y, z = quaternion_from_euler(self.roll_rad, self.pitch_rad, self.yaw_rad, axes="sxyz")
        return Quaternion(x=float(x), y=float(y), z=float(z), w=float(w))


@dataclass(frozen=True)
class Quaternion:
    """A quaternion (x, y, z, w) representing a 3D orientation.

    The quaternion is not normalized on construction; use `normalized()` where a unit
    quaternion is required.
    """

    x: float
    y: float
    z: float
    w: float

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Return the Hamilton product of this quaternion and another.

        Reference: https://kieranwynn.github.io/pyquaternion/#quaternion-operations
        """
        if not isinstance(other, Quaternion):
            raise TypeError(f"Cannot multiply a Quaternion with a {type(other)}: {other}.")
        product = self._to_pyquaternion() * other._to_pyquaternion()
        return Quaternion._from_pyquaternion(product)

    def _to_pyquaternion(self) -> Q:
        return Q(self.w, self.x, self.y, self.z)

    @classmethod
    def _from_pyquaternion(cls, q: Q) -> Quaternion:
        return Quaternion(float(q.x), float(q.y), float(q.z), float(q.w))

    @classmethod
    def identity(cls) -> Quaternion:
        """Construct a Quaternion corresponding to the identity rotation."""
        return Quaternion(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Quaternion:
        """Construct a quaternion from a NumPy array of the form [x,y,z,w]."""
        if arr.shape != (4,):
            raise InvariantViolationError(f"Quaternion expects a 4-vector, got {arr.shape}")

        return cls(float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert the quaternion to a NumPy array of the form [x,y,z,w]."""
        return np.array([self.x, self.y, self.z, self.w])

    def to_list(self) -> list[float]:
        """Convert the quaternion to a list of the form [x,y,z,w]."""
        return [self.x, self.y, self.z, self.w]

    def norm(self) -> float:
        """Compute the Euclidean norm of the quaternion."""
        return float(np.linalg.norm(self.to_array()))

    def normalized(self) -> Quaternion:
        """Scale the quaternion to unit length, negating it if needed so that w >= 0.

        :raises NumericDegeneracyError: If the quaternion is zero-valued
        """
        norm = self.norm()
        if norm == 0:
            raise NumericDegeneracyError(f"Cannot normalize a zero-valued quaternion: {self}")

        unit = self.to_array() / norm
        if unit[3] < 0:
            unit = -unit
        return Quaternion.from_array(unit)

    def conjugate(self) -> Quaternion:
        """Compute the conjugate of this quaternion.

        Reference: https://mathworld.wolfram.com/QuaternionConjugate.html
        """
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> Quaternion:
        """Compute the multiplicative inverse of this quaternion."""
        if self.norm() == 0:
            raise NumericDegeneracyError(f"Cannot invert a zero-valued quaternion: {self}")
        return Quaternion._from_pyquaternion(self._to_pyquaternion().inverse)

    def rotate(self, vector: Vector3) -> Vector3:
        """Rotate the given vector by this quaternion (q * v * q^-1)."""
        rotated = self._to_pyquaternion().rotate(vector.to_list())
        return Vector3.from_sequence(rotated)

    def to_euler_rpy(self) -> EulerRPY:
        """Convert the quaternion into equivalent Euler roll, pitch, and yaw angles."""
        r, p, y = euler_from_quaternion(quaternion=[self.w, self.x, self.y, self.z], axes="sxyz")
        return EulerRPY(float(r), float(p), float(y))

    @classmethod
    def from_rotation_matrix(cls, r_matrix: NDArray[np.float64]) -> Quaternion:
        """Construct a unit quaternion from a 3x3 rotation matrix."""
        if r_matrix.shape != (3, 3):
            raise InvariantViolationError(f"Quaternion expects a 3x3 rotation matrix, got {r_matrix.shape}")

        matrix = np.eye(4)  # Begin with a 4x4 identity matrix
        matrix[:3, :3] = r_matrix  # Fill in the rotation

        return cls.from_homogeneous_matrix(matrix)

    @classmethod
    def from_homogeneous_matrix(cls, matrix: NDArray[np.float64]) -> Quaternion:
        """Construct a unit quaternion from a 4x4 homogeneous transformation matrix."""
        if matrix.shape != (4, 4):
            raise InvariantViolationError(f"Quaternion expects a 4x4 homogeneous matrix, got {matrix.shape}")
        w, x, y, z = quaternion_from_matrix(matrix)  # Note: trimesh puts w (q's real value) first
        return Quaternion(x=float(x), y=float(y), z=float(z), w=float(w))

    def to_rotation_matrix(self) -> NDArray[np.float64]:
        """Convert the quaternion to a 3x3 rotation matrix."""
        return self.to_homogeneous_matrix()[:3, :3]

    def to_homogeneous_matrix(self) -> NDArray[np.float64]:
        """Convert the quaternion to a 4x4 homogeneous transformation matrix."""
        return quaternion_matrix(quaternion=[self.w, self.x, self.y, self.z])

    def to_angle_axis(self) -> tuple[float, Vector3]:
        """Convert the (unit) quaternion into a rotation angle (radians) and rotation axis.

        For (near-)identity rotations the axis is left unscaled rather than divided by ~0.
        """
        w = float(np.clip(self.w, -1.0, 1.0))
        angle_rad = 2.0 * float(np.arccos(w))
        s = float(np.sqrt(1.0 - w * w))
        if s < np.finfo(float).eps:
            s = 1.0
        return angle_rad, Vector3(self.x / s, self.y / s, self.z / s)

    @staticmethod
    def slerp(a: Quaternion, b: Quaternion, t: float) -> Quaternion:
        """Spherically interpolate between two orientations (t=0 gives a, t=1 gives b)."""
        result = Q.slerp(a._to_pyquaternion(), b._to_pyquaternion(), amount=t)
        return Quaternion._from_pyquaternion(result)

    def approx_equal(self, other: Quaternion, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Quaternion is approximately equal to this one.

        Note: A quaternion is considered equal to its negation, as they express the same rotation.
        """
        self_array = self.to_array()
        other_array = other.to_array()

        return bool(
            np.allclose(self_array, other_array, rtol=rtol, atol=atol)
            or np.allclose(-self_array, other_array, rtol=rtol, atol=atol),
        )
