"""Import classes for representing collision primitives and collision objects."""

from .primitive_shapes import DEFAULT_WORLD_FRAME as DEFAULT_WORLD_FRAME
from .primitive_shapes import CollisionObject as CollisionObject
from .primitive_shapes import CollisionPrimitive as CollisionPrimitive
from .primitive_shapes import CollisionPrimitiveKind as CollisionPrimitiveKind
from .primitive_shapes import create_collision_primitive as create_collision_primitive
