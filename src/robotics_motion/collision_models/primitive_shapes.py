"""Define classes representing primitive shapes and objects used for collision-checking."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

import trimesh

from robotics_motion.errors import InvariantViolationError
from robotics_motion.kinematics.poses import Pose

DEFAULT_WORLD_FRAME = "world"
"""Reference frame of collision objects created without an explicit frame."""


class CollisionPrimitiveKind(Enum):
    """An enumeration of primitive collision shapes."""

    PLANE = 0
    BOX = 1
    SPHERE = 2
    CYLINDER = 3
    CONE = 4

    @property
    def parameter_count(self) -> int:
        """Retrieve the number of parameters describing a primitive of this kind."""
        return {
            CollisionPrimitiveKind.PLANE: 4,
            CollisionPrimitiveKind.BOX: 3,
            CollisionPrimitiveKind.SPHERE: 1,
            CollisionPrimitiveKind.CYLINDER: 2,
            CollisionPrimitiveKind.CONE: 2,
        }[self]


@dataclass(frozen=True)
class CollisionPrimitive:
    """A primitive shape placed at a pose relative to its collision object's frame.

    Parameters per kind: plane (a, b, c, d) of the plane equation ax + by + cz + d = 0,
    box (x, y, z) dimensions, sphere (radius), and cylinder or cone (height, radius), all in meters.
    """

    kind: CollisionPrimitiveKind
    parameters: tuple[float, ...]
    pose: Pose = field(default_factory=Pose.identity)

    def __post_init__(self) -> None:
        """Verify that the parameters are valid for the kind of primitive."""
        object.__setattr__(self, "kind", CollisionPrimitiveKind(self.kind))
        object.__setattr__(self, "parameters", tuple(float(p) for p in self.parameters))

        expected_count = self.kind.parameter_count
        if len(self.parameters) != expected_count:
            raise InvariantViolationError(
                f"Expected {expected_count} parameters for collision primitive '{self.kind.name}' "
                f"but {len(self.parameters)} were provided.",
            )

        if self.kind == CollisionPrimitiveKind.PLANE:
            if all(p == 0 for p in self.parameters[:3]):
                raise InvariantViolationError("Invalid normal vector specified for plane.")
        elif any(p < 0 for p in self.parameters):
            raise InvariantViolationError(
                f"Parameters of collision primitive '{self.kind.name}' must not be negative: {self.parameters}",
            )

    @classmethod
    def plane(cls, a: float, b: float, c: float, d: float, pose: Pose | None = None) -> CollisionPrimitive:
        """Construct a plane satisfying ax + by + cz + d = 0."""
        return cls(CollisionPrimitiveKind.PLANE, (a, b, c, d), Pose.identity() if pose is None else pose)

    @classmethod
    def box(cls, x_m: float, y_m: float, z_m: float, pose: Pose | None = None) -> CollisionPrimitive:
        """Construct a box with the given (x,y,z) dimensions (in meters)."""
        return cls(CollisionPrimitiveKind.BOX, (x_m, y_m, z_m), Pose.identity() if pose is None else pose)

    @classmethod
    def sphere(cls, radius_m: float, pose: Pose | None = None) -> CollisionPrimitive:
        """Construct a sphere with the given radius (in meters)."""
        return cls(CollisionPrimitiveKind.SPHERE, (radius_m,), Pose.identity() if pose is None else pose)

    @classmethod
    def cylinder(cls, height_m: float, radius_m: float, pose: Pose | None = None) -> CollisionPrimitive:
        """Construct a cylinder with the given height and radius (in meters)."""
        return cls(CollisionPrimitiveKind.CYLINDER, (height_m, radius_m), Pose.identity() if pose is None else pose)

    @classmethod
    def cone(cls, height_m: float, radius_m: float, pose: Pose | None = None) -> CollisionPrimitive:
        """Construct a cone with the given height and base radius (in meters)."""
        return cls(CollisionPrimitiveKind.CONE, (height_m, radius_m), Pose.identity() if pose is None else pose)

    @classmethod
    def unit_sphere(cls) -> CollisionPrimitive:
        """Construct a sphere of radius 1 m at the identity pose."""
        return cls.sphere(1.0)

    @classmethod
    def unit_box(cls) -> CollisionPrimitive:
        """Construct a 1 m cube at the identity pose."""
        return cls.box(1.0, 1.0, 1.0)

    def with_pose(self, pose: Pose) -> CollisionPrimitive:
        """Create a copy of the primitive placed at the given pose."""
        return CollisionPrimitive(self.kind, self.parameters, pose)

    def to_mesh(self) -> trimesh.Trimesh:
        """Convert the primitive into a mesh placed at the primitive's pose.

        :raises InvariantViolationError: If the primitive is an (unbounded) plane
        """
        if self.kind == CollisionPrimitiveKind.BOX:
            mesh = trimesh.creation.box(extents=self.parameters)
        elif self.kind == CollisionPrimitiveKind.SPHERE:
            mesh = trimesh.creation.icosphere(radius=self.parameters[0], subdivisions=3)
        elif self.kind == CollisionPrimitiveKind.CYLINDER:
            height_m, radius_m = self.parameters
            mesh = trimesh.creation.cylinder(radius=radius_m, height=height_m, sections=32)
        elif self.kind == CollisionPrimitiveKind.CONE:
            height_m, radius_m = self.parameters
            mesh = trimesh.creation.cone(radius=radius_m, height=height_m, sections=32)
        else:
            raise InvariantViolationError("Cannot convert an unbounded plane into a mesh.")

        mesh.apply_transform(self.pose.to_homogeneous_matrix())
        return mesh


@dataclass(frozen=True)
class CollisionObject:
    """A collection of collision primitives expressed in a shared reference frame."""

    primitives: tuple[CollisionPrimitive, ...] = ()
    frame: str = DEFAULT_WORLD_FRAME

    def __post_init__(self) -> None:
        """Store the primitives as a tuple."""
        object.__setattr__(self, "primitives", tuple(self.primitives))

    def __len__(self) -> int:
        """Retrieve the number of primitives in the object."""
        return len(self.primitives)

    def with_primitives(self, primitives: Iterable[CollisionPrimitive]) -> CollisionObject:
        """Create a copy of the object holding the given primitives."""
        return CollisionObject(tuple(primitives), self.frame)

    def to_mesh(self) -> trimesh.Trimesh:
        """Combine the meshes of all primitives into a single mesh."""
        return trimesh.util.concatenate([p.to_mesh() for p in self.primitives])


def create_collision_primitive(data: dict[str, str | float]) -> CollisionPrimitive:
    """Create a collision primitive from a dictionary holding its type and dimensions."""
    shape_type = data.get("type")
    if shape_type is None:
        raise KeyError(f"Cannot construct CollisionPrimitive without 'type' key: {data}")

    if shape_type == "plane":
        return CollisionPrimitive.plane(data["a"], data["b"], data["c"], data["d"])

    if shape_type == "box":
        return CollisionPrimitive.box(x_m=data["x"], y_m=data["y"], z_m=data["z"])

    if shape_type == "sphere":
        return CollisionPrimitive.sphere(radius_m=data["radius"])

    if shape_type == "cylinder":
        return CollisionPrimitive.cylinder(height_m=data["height"], radius_m=data["radius"])

    if shape_type == "cone":
        return CollisionPrimitive.cone(height_m=data["height"], radius_m=data["radius"])

    raise InvariantViolationError(f"Unknown collision primitive type: {shape_type}")
