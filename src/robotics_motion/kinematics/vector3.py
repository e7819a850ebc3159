"""Define a class to represent vectors (translations, velocities) in 3D space."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING

import numpy as np

from robotics_motion.errors import InvariantViolationError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from numpy.typing import NDArray


@dataclass(frozen=True)
class Vector3:
    """An (x,y,z) vector in 3D space."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        """Provide an iterator over the vector's (x,y,z) components."""
        yield from astuple(self)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    @classmethod
    def zero(cls) -> Vector3:
        """Construct the zero vector (i.e., the identity translation)."""
        return Vector3(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector3:
        """Construct a Vector3 from a NumPy array."""
        if arr.shape != (3,):
            raise InvariantViolationError(f"Cannot construct Vector3 from an array of shape {arr.shape}")

        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert the vector to a NumPy array."""
        return np.array([self.x, self.y, self.z])

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Vector3:
        """Construct a Vector3 instance from a sequence (e.g., list or tuple) of values."""
        if len(values) != 3:
            raise InvariantViolationError(f"Vector3 expects 3 values, got {len(values)}")
        return Vector3(float(values[0]), float(values[1]), float(values[2]))

    def to_list(self) -> list[float]:
        """Convert the vector into an [x, y, z] list."""
        return [self.x, self.y, self.z]

    def norm(self) -> float:
        """Compute the Euclidean length of the vector."""
        return float(np.linalg.norm(self.to_array()))

    def approx_equal(self, other: Vector3, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Vector3 is approximately equal to this one."""
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rtol, atol=atol))

    @staticmethod
    def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
        """Linearly interpolate between two vectors (t=0 gives a, t=1 gives b)."""
        return Vector3.from_array((1.0 - t) * a.to_array() + t * b.to_array())
