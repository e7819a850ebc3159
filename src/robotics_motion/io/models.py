"""Define Pydantic models holding the plain-data form of motion values.

Every model converts to and from its value type. Values rebuilt from a model pass the same
construction checks as any other value (e.g. a rebuilt trajectory must have non-decreasing times).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Literal, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from robotics_motion.collision_models.primitive_shapes import (
    DEFAULT_WORLD_FRAME,
    CollisionObject,
    CollisionPrimitive,
    CollisionPrimitiveKind,
)
from robotics_motion.errors import InvariantViolationError
from robotics_motion.io.yaml_utils import load_yaml_data
from robotics_motion.kinematics.joint_limits import JointLimits
from robotics_motion.kinematics.joint_set import JointSet
from robotics_motion.kinematics.joint_values import JointValues
from robotics_motion.kinematics.poses import DEFAULT_FRAME, Pose, Twist
from robotics_motion.kinematics.rotations import Quaternion
from robotics_motion.kinematics.vector3 import Vector3
from robotics_motion.motion_planning.paths import CartesianPath, JointPath
from robotics_motion.motion_planning.plan_parameters import (
    DEFAULT_MAX_DEVIATION,
    DEFAULT_SAMPLE_RESOLUTION_S,
    PlanParameters,
    TaskSpacePlanParameters,
)
from robotics_motion.motion_planning.results import IKResult, JointStates
from robotics_motion.motion_planning.trajectories import JointTrajectory
from robotics_motion.motion_planning.trajectory_point import JointTrajectoryPoint

XYZ = Tuple[float, float, float]
"""A three-tuple of floats representing a 3D vector."""

XYZW = Tuple[float, float, float, float]
"""A four-tuple of floats representing an (x, y, z, w) quaternion."""

OptionalValues = Union[List[float], None]
"""A list with one float per joint, or None if the channel is absent."""


def _values_or_none(joint_set: JointSet, values: list[float] | None) -> JointValues | None:
    return None if values is None else JointValues(joint_set, values)


def _list_or_none(values: JointValues | None) -> list[float] | None:
    return None if values is None else list(values.values)


class ValueModel(BaseModel, ABC):
    """Abstract base class of plain-data models that convert to and from a value type."""

    model_config = ConfigDict(extra="forbid")

    value_type: ClassVar[type]

    @classmethod
    @abstractmethod
    def from_value(cls, value: Any) -> ValueModel:
        """Construct the model holding the plain data of the given value."""

    @abstractmethod
    def to_value(self) -> Any:
        """Convert the model into its value, checking every construction invariant."""

    @classmethod
    def validate_yaml(cls, yaml_path: Path) -> ValueModel:
        """Validate a YAML file against the model and return the resulting model.

        :param yaml_path: Path to a YAML file to be validated by the model
        :return: Validated model instance
        :raises InvariantViolationError: If the YAML data does not fit the model
        """
        yaml_data = load_yaml_data(yaml_path)

        try:
            return cls.model_validate(yaml_data)
        except ValidationError as v_err:
            raise InvariantViolationError(f"Validation error in {yaml_path}: {v_err}") from v_err


# =============================================================================
# Joint-Space Models
# =============================================================================


class JointValuesModel(ValueModel):
    """Model for a JointValues instance as parallel lists of joint names and values."""

    value_type: ClassVar[type] = JointValues

    joint_names: List[str]
    values: List[float]

    @classmethod
    def from_value(cls, value: JointValues) -> JointValuesModel:
        """Construct the model holding the plain data of the given joint values."""
        return cls(joint_names=value.joint_set.to_list(), values=list(value.values))

    def to_value(self) -> JointValues:
        """Convert the model into joint values."""
        return JointValues(JointSet(self.joint_names), self.values)


class JointLimitsModel(ValueModel):
    """Model for joint limits; None marks a limit that is not set."""

    value_type: ClassVar[type] = JointLimits

    joint_names: List[str]
    max_velocity: List[Union[float, None]]
    max_acceleration: List[Union[float, None]]
    min_position: List[Union[float, None]]
    max_position: List[Union[float, None]]

    @classmethod
    def from_value(cls, value: JointLimits) -> JointLimitsModel:
        """Construct the model holding the plain data of the given joint limits."""
        return cls(
            joint_names=value.joint_set.to_list(),
            max_velocity=list(value.max_velocity),
            max_acceleration=list(value.max_acceleration),
            min_position=list(value.min_position),
            max_position=list(value.max_position),
        )

    def to_value(self) -> JointLimits:
        """Convert the model into joint limits."""
        return JointLimits(
            JointSet(self.joint_names),
            tuple(self.max_velocity),
            tuple(self.max_acceleration),
            tuple(self.min_position),
            tuple(self.max_position),
        )


class JointPathModel(ValueModel):
    """Model for a joint path as a list of waypoints over shared joint names."""

    value_type: ClassVar[type] = JointPath

    joint_names: List[str]
    points: List[List[float]] = Field(default_factory=list)

    @classmethod
    def from_value(cls, value: JointPath) -> JointPathModel:
        """Construct the model holding the plain data of the given joint path."""
        return cls(joint_names=value.joint_set.to_list(), points=[list(p.values) for p in value])

    def to_value(self) -> JointPath:
        """Convert the model into a joint path."""
        joint_set = JointSet(self.joint_names)
        return JointPath(joint_set, (JointValues(joint_set, p) for p in self.points))


class JointStatesModel(ValueModel):
    """Model for joint states; absent channels are None."""

    value_type: ClassVar[type] = JointStates

    joint_names: List[str]
    positions: OptionalValues = None
    velocities: OptionalValues = None
    efforts: OptionalValues = None

    @classmethod
    def from_value(cls, value: JointStates) -> JointStatesModel:
        """Construct the model holding the plain data of the given joint states."""
        joint_set = value.joint_set
        return cls(
            joint_names=[] if joint_set is None else joint_set.to_list(),
            positions=_list_or_none(value.positions),
            velocities=_list_or_none(value.velocities),
            efforts=_list_or_none(value.efforts),
        )

    def to_value(self) -> JointStates:
        """Convert the model into joint states."""
        joint_set = JointSet(self.joint_names)
        return JointStates(
            positions=_values_or_none(joint_set, self.positions),
            velocities=_values_or_none(joint_set, self.velocities),
            efforts=_values_or_none(joint_set, self.efforts),
        )


# =============================================================================
# Trajectory Models
# =============================================================================


class JointTrajectoryPointModel(ValueModel):
    """Model for a trajectory point; within a trajectory, its joint names may be omitted."""

    value_type: ClassVar[type] = JointTrajectoryPoint

    joint_names: Union[List[str], None] = None
    time_from_start: float = Field(ge=0, description="Time since the trajectory started (seconds)")
    positions: List[float]
    velocities: OptionalValues = None
    accelerations: OptionalValues = None
    efforts: OptionalValues = None

    @classmethod
    def from_value(
        cls,
        value: JointTrajectoryPoint,
        with_joint_names: bool = True,
    ) -> JointTrajectoryPointModel:
        """Construct the model holding the plain data of the given trajectory point.

        :param value: Trajectory point to be converted
        :param with_joint_names: Whether the model stores the point's joint names (False when
            the enclosing trajectory stores them instead)
        :return: Model holding the point's plain data
        """
        return cls(
            joint_names=value.joint_set.to_list() if with_joint_names else None,
            time_from_start=value.time_from_start,
            positions=list(value.positions.values),
            velocities=_list_or_none(value.velocities),
            accelerations=_list_or_none(value.accelerations),
            efforts=_list_or_none(value.efforts),
        )

    def to_value(self, joint_set: JointSet | None = None) -> JointTrajectoryPoint:
        """Convert the model into a trajectory point.

        :param joint_set: Joint set used if the model stores no joint names (default: None)
        :return: Trajectory point over the model's joint names, else over the given joint set
        :raises InvariantViolationError: If neither joint names nor a joint set are available
        """
        if self.joint_names is not None:
            joint_set = JointSet(self.joint_names)
        if joint_set is None:
            raise InvariantViolationError("Cannot convert a trajectory point model without joint names.")

        return JointTrajectoryPoint(
            self.time_from_start,
            JointValues(joint_set, self.positions),
            velocities=_values_or_none(joint_set, self.velocities),
            accelerations=_values_or_none(joint_set, self.accelerations),
            efforts=_values_or_none(joint_set, self.efforts),
        )


class JointTrajectoryModel(ValueModel):
    """Model for a joint trajectory."""

    value_type: ClassVar[type] = JointTrajectory

    joint_names: List[str]
    points: List[JointTrajectoryPointModel] = Field(default_factory=list)
    is_valid: bool = True

    @classmethod
    def from_value(cls, value: JointTrajectory) -> JointTrajectoryModel:
        """Construct the model holding the plain data of the given trajectory."""
        return cls(
            joint_names=value.joint_set.to_list(),
            points=[JointTrajectoryPointModel.from_value(p, with_joint_names=False) for p in value],
            is_valid=value.is_valid,
        )

    def to_value(self) -> JointTrajectory:
        """Convert the model into a joint trajectory."""
        joint_set = JointSet(self.joint_names)
        return JointTrajectory(joint_set, (p.to_value(joint_set) for p in self.points), self.is_valid)


# =============================================================================
# Planning Parameter Models
# =============================================================================


class PlanParametersModel(ValueModel):
    """Model for joint-space plan parameters."""

    value_type: ClassVar[type] = PlanParameters

    move_group_name: Union[str, None] = None
    joint_names: Union[List[str], None] = None
    max_velocity: OptionalValues = None
    max_acceleration: OptionalValues = None
    collision_check: bool = True
    sample_resolution: float = Field(default=DEFAULT_SAMPLE_RESOLUTION_S, gt=0)
    max_deviation: float = Field(default=DEFAULT_MAX_DEVIATION, ge=0)

    @classmethod
    def from_value(cls, value: PlanParameters) -> PlanParametersModel:
        """Construct the model holding the plain data of the given plan parameters."""
        return cls(
            move_group_name=value.move_group_name,
            joint_names=None if value.joint_set is None else value.joint_set.to_list(),
            max_velocity=None if value.max_velocity is None else list(value.max_velocity),
            max_acceleration=None if value.max_acceleration is None else list(value.max_acceleration),
            collision_check=value.collision_check,
            sample_resolution=value.sample_resolution,
            max_deviation=value.max_deviation,
        )

    def to_value(self) -> PlanParameters:
        """Convert the model into plan parameters."""
        return PlanParameters(
            move_group_name=self.move_group_name,
            joint_set=None if self.joint_names is None else JointSet(self.joint_names),
            max_velocity=None if self.max_velocity is None else tuple(self.max_velocity),
            max_acceleration=None if self.max_acceleration is None else tuple(self.max_acceleration),
            collision_check=self.collision_check,
            sample_resolution=self.sample_resolution,
            max_deviation=self.max_deviation,
        )


class TaskSpacePlanParametersModel(ValueModel):
    """Model for task-space plan parameters."""

    value_type: ClassVar[type] = TaskSpacePlanParameters

    end_effector_name: Union[str, None] = None
    max_xyz_velocity: float = Field(default=0.2, ge=0, description="Linear velocity limit (m/s)")
    max_xyz_acceleration: float = Field(default=0.4, ge=0, description="Linear acceleration limit (m/s^2)")
    max_angular_velocity: float = Field(default=0.026179938779915, ge=0, description="(rad/s)")
    max_angular_acceleration: float = Field(default=0.10471975511966, ge=0, description="(rad/s^2)")
    collision_check: bool = True
    sample_resolution: float = Field(default=DEFAULT_SAMPLE_RESOLUTION_S, gt=0)
    max_deviation: float = Field(default=DEFAULT_MAX_DEVIATION, ge=0)
    ik_jump_threshold: float = Field(default=1.2, ge=0)

    @classmethod
    def from_value(cls, value: TaskSpacePlanParameters) -> TaskSpacePlanParametersModel:
        """Construct the model holding the plain data of the given plan parameters."""
        return cls(**asdict(value))

    def to_value(self) -> TaskSpacePlanParameters:
        """Convert the model into task-space plan parameters."""
        return TaskSpacePlanParameters(**self.model_dump())


# =============================================================================
# Cartesian Models
# =============================================================================


class PoseModel(ValueModel):
    """Model for a pose as a translation, an (x, y, z, w) rotation, and a frame."""

    value_type: ClassVar[type] = Pose

    translation: XYZ = (0.0, 0.0, 0.0)
    rotation: XYZW = (0.0, 0.0, 0.0, 1.0)
    frame: str = DEFAULT_FRAME

    @classmethod
    def from_value(cls, value: Pose) -> PoseModel:
        """Construct the model holding the plain data of the given pose."""
        return cls(
            translation=tuple(value.translation.to_list()),
            rotation=tuple(value.rotation.to_list()),
            frame=value.frame,
        )

    def to_value(self) -> Pose:
        """Convert the model into a pose (its rotation is kept as given)."""
        return Pose(Vector3(*self.translation), Quaternion(*self.rotation), self.frame)


class TwistModel(ValueModel):
    """Model for a twist as linear and angular vectors in a frame."""

    value_type: ClassVar[type] = Twist

    linear: XYZ = (0.0, 0.0, 0.0)
    angular: XYZ = (0.0, 0.0, 0.0)
    frame: str = DEFAULT_FRAME

    @classmethod
    def from_value(cls, value: Twist) -> TwistModel:
        """Construct the model holding the plain data of the given twist."""
        return cls(**value.to_dict())

    def to_value(self) -> Twist:
        """Convert the model into a twist."""
        return Twist(Vector3(*self.linear), Vector3(*self.angular), self.frame)


class CartesianPathModel(ValueModel):
    """Model for a Cartesian path as a list of poses."""

    value_type: ClassVar[type] = CartesianPath

    poses: List[PoseModel] = Field(default_factory=list)

    @classmethod
    def from_value(cls, value: CartesianPath) -> CartesianPathModel:
        """Construct the model holding the plain data of the given Cartesian path."""
        return cls(poses=[PoseModel.from_value(p) for p in value])

    def to_value(self) -> CartesianPath:
        """Convert the model into a Cartesian path."""
        return CartesianPath(p.to_value() for p in self.poses)


# =============================================================================
# Collision Models
# =============================================================================

PrimitiveKindName = Literal["plane", "box", "sphere", "cylinder", "cone"]
"""Name of a collision primitive kind in plain data."""


class CollisionPrimitiveModel(ValueModel):
    """Model for a collision primitive."""

    value_type: ClassVar[type] = CollisionPrimitive

    kind: PrimitiveKindName
    parameters: List[float]
    pose: PoseModel = Field(default_factory=PoseModel)

    @classmethod
    def from_value(cls, value: CollisionPrimitive) -> CollisionPrimitiveModel:
        """Construct the model holding the plain data of the given primitive."""
        return cls(
            kind=value.kind.name.lower(),
            parameters=list(value.parameters),
            pose=PoseModel.from_value(value.pose),
        )

    def to_value(self) -> CollisionPrimitive:
        """Convert the model into a collision primitive."""
        kind = CollisionPrimitiveKind[self.kind.upper()]
        return CollisionPrimitive(kind, tuple(self.parameters), self.pose.to_value())


class CollisionObjectModel(ValueModel):
    """Model for a collision object."""

    value_type: ClassVar[type] = CollisionObject

    frame: str = DEFAULT_WORLD_FRAME
    primitives: List[CollisionPrimitiveModel] = Field(default_factory=list)

    @classmethod
    def from_value(cls, value: CollisionObject) -> CollisionObjectModel:
        """Construct the model holding the plain data of the given collision object."""
        return cls(
            frame=value.frame,
            primitives=[CollisionPrimitiveModel.from_value(p) for p in value.primitives],
        )

    def to_value(self) -> CollisionObject:
        """Convert the model into a collision object."""
        return CollisionObject(tuple(p.to_value() for p in self.primitives), self.frame)


# =============================================================================
# Planning Result Models
# =============================================================================


class IKResultModel(ValueModel):
    """Model for an IK result with integer MoveIt error codes."""

    value_type: ClassVar[type] = IKResult

    path: JointPathModel
    error_codes: List[int] = Field(default_factory=list)

    @classmethod
    def from_value(cls, value: IKResult) -> IKResultModel:
        """Construct the model holding the plain data of the given IK result."""
        return cls(
            path=JointPathModel.from_value(value.path),
            error_codes=[code.value for code in value.error_codes],
        )

    def to_value(self) -> IKResult:
        """Convert the model into an IK result."""
        return IKResult(self.path.to_value(), tuple(self.error_codes))


# =============================================================================
# Conversion Functions
# =============================================================================

MODEL_TYPES: Dict[type, Type[ValueModel]] = {
    model_type.value_type: model_type
    for model_type in (
        JointValuesModel,
        JointLimitsModel,
        JointPathModel,
        JointStatesModel,
        JointTrajectoryPointModel,
        JointTrajectoryModel,
        PlanParametersModel,
        TaskSpacePlanParametersModel,
        PoseModel,
        TwistModel,
        CartesianPathModel,
        CollisionPrimitiveModel,
        CollisionObjectModel,
        IKResultModel,
    )
}
"""Map from each value type to the model holding its plain data."""


def to_model(value: Any) -> ValueModel:
    """Convert a value into its plain-data model.

    :param value: Instance of a motion value type (e.g. a JointTrajectory)
    :return: Model holding the value's plain data
    :raises TypeError: If no model exists for the type of the value
    """
    model_type = MODEL_TYPES.get(type(value))
    if model_type is None:
        raise TypeError(f"No plain-data model exists for values of type {type(value).__name__}.")
    return model_type.from_value(value)


def from_model(model: ValueModel) -> Any:
    """Convert a plain-data model back into its value, checking every construction invariant."""
    return model.to_value()
