"""Define immutable parameter sets passed to joint-space and task-space motion planners."""

from __future__ import annotations

from dataclasses import dataclass, fields

from robotics_motion.errors import InvariantViolationError, RangeViolationError
from robotics_motion.kinematics.joint_limits import JointLimits
from robotics_motion.kinematics.joint_set import JointSet
from robotics_motion.motion_planning.results import EndEffectorLimits

DEFAULT_SAMPLE_RESOLUTION_S = 0.008
"""Default time between trajectory samples (seconds), i.e. 125 Hz."""

DEFAULT_MAX_DEVIATION = 0.2
"""Default maximum deviation allowed when blending path waypoints."""


def _check_scale_factor(factor: float) -> None:
    """Verify that a velocity or acceleration scaling factor lies in (0, 1]."""
    if not 0.0 < factor <= 1.0:
        raise RangeViolationError(f"Scaling factor must lie in the range (0, 1], got {factor}.")


@dataclass
class PlanParametersBuilder:
    """A mutable builder used to construct validated PlanParameters."""

    move_group_name: str | None = None
    joint_set: JointSet | None = None
    max_velocity: tuple[float, ...] | None = None
    max_acceleration: tuple[float, ...] | None = None
    collision_check: bool = True
    sample_resolution: float = DEFAULT_SAMPLE_RESOLUTION_S
    max_deviation: float = DEFAULT_MAX_DEVIATION

    def scale_velocity(self, factor: float) -> PlanParametersBuilder:
        """Scale the maximum joint velocities by a factor in (0, 1]."""
        _check_scale_factor(factor)
        if self.max_velocity is not None:
            self.max_velocity = tuple(v * factor for v in self.max_velocity)
        return self

    def scale_acceleration(self, factor: float) -> PlanParametersBuilder:
        """Scale the maximum joint accelerations by a factor in (0, 1]."""
        _check_scale_factor(factor)
        if self.max_acceleration is not None:
            self.max_acceleration = tuple(a * factor for a in self.max_acceleration)
        return self

    def build(self) -> PlanParameters:
        """Validate the builder's current values and freeze them into PlanParameters.

        :raises InvariantViolationError: If a velocity or acceleration array does not provide
            exactly one entry per joint of the joint set
        """
        return PlanParameters(
            move_group_name=self.move_group_name,
            joint_set=self.joint_set,
            max_velocity=self.max_velocity,
            max_acceleration=self.max_acceleration,
            collision_check=self.collision_check,
            sample_resolution=self.sample_resolution,
            max_deviation=self.max_deviation,
        )


@dataclass(frozen=True)
class PlanParameters:
    """Limits and settings used to plan a joint-space motion for a move group."""

    move_group_name: str | None = None
    joint_set: JointSet | None = None
    max_velocity: tuple[float, ...] | None = None
    """Maximum velocity per joint (rad/s or m/s), ordered as the joint set."""

    max_acceleration: tuple[float, ...] | None = None
    """Maximum acceleration per joint (rad/s^2 or m/s^2), ordered as the joint set."""

    collision_check: bool = True
    sample_resolution: float = DEFAULT_SAMPLE_RESOLUTION_S
    max_deviation: float = DEFAULT_MAX_DEVIATION

    def __post_init__(self) -> None:
        """Verify that the velocity and acceleration limits match the joint set."""
        for attr_name in ("max_velocity", "max_acceleration"):
            limits = getattr(self, attr_name)
            if limits is not None:
                object.__setattr__(self, attr_name, tuple(float(x) for x in limits))

        if self.joint_set is None:
            return

        joint_count = len(self.joint_set)
        for attr_name in ("max_velocity", "max_acceleration"):
            limits = getattr(self, attr_name)
            if limits is not None and len(limits) != joint_count:
                raise InvariantViolationError(
                    f"PlanParameters {attr_name} has {len(limits)} entries but "
                    f"{self.joint_set} has {joint_count} joints.",
                )

    @classmethod
    def from_joint_limits(
        cls,
        move_group_name: str | None,
        limits: JointLimits,
        collision_check: bool = True,
        sample_resolution: float = DEFAULT_SAMPLE_RESOLUTION_S,
        max_deviation: float = DEFAULT_MAX_DEVIATION,
    ) -> PlanParameters:
        """Construct plan parameters using the velocity and acceleration limits of each joint.

        :raises InvariantViolationError: If any joint lacks a velocity or acceleration limit
        """
        if any(x is None for x in (*limits.max_velocity, *limits.max_acceleration)):
            raise InvariantViolationError("Velocity and acceleration limits must be set for all joints.")

        return cls(
            move_group_name=move_group_name,
            joint_set=limits.joint_set,
            max_velocity=limits.max_velocity,  # type: ignore[arg-type]
            max_acceleration=limits.max_acceleration,  # type: ignore[arg-type]
            collision_check=collision_check,
            sample_resolution=sample_resolution,
            max_deviation=max_deviation,
        )

    def to_builder(self) -> PlanParametersBuilder:
        """Create a mutable builder initialized with these parameters."""
        return PlanParametersBuilder(**{f.name: getattr(self, f.name) for f in fields(self)})

    def with_collision_check(self, value: bool) -> PlanParameters:
        """Create parameters with collision checking enabled or disabled."""
        if self.collision_check == value:
            return self
        builder = self.to_builder()
        builder.collision_check = value
        return builder.build()

    def with_sample_resolution(self, value: float) -> PlanParameters:
        """Create parameters with the given sample resolution (seconds)."""
        if self.sample_resolution == value:
            return self
        builder = self.to_builder()
        builder.sample_resolution = value
        return builder.build()

    def with_max_deviation(self, value: float) -> PlanParameters:
        """Create parameters with the given maximum deviation."""
        if self.max_deviation == value:
            return self
        builder = self.to_builder()
        builder.max_deviation = value
        return builder.build()


@dataclass
class TaskSpacePlanParametersBuilder:
    """A mutable builder used to construct validated TaskSpacePlanParameters."""

    end_effector_name: str | None = None
    max_xyz_velocity: float = 0.2
    max_xyz_acceleration: float = 0.4
    max_angular_velocity: float = 0.026179938779915
    max_angular_acceleration: float = 0.10471975511966
    collision_check: bool = True
    sample_resolution: float = DEFAULT_SAMPLE_RESOLUTION_S
    max_deviation: float = DEFAULT_MAX_DEVIATION
    ik_jump_threshold: float = 1.2

    def scale_velocity(self, factor: float) -> TaskSpacePlanParametersBuilder:
        """Scale the maximum linear and angular velocities by a factor in (0, 1]."""
        _check_scale_factor(factor)
        self.max_xyz_velocity *= factor
        self.max_angular_velocity *= factor
        return self

    def scale_acceleration(self, factor: float) -> TaskSpacePlanParametersBuilder:
        """Scale the maximum linear and angular accelerations by a factor in (0, 1]."""
        _check_scale_factor(factor)
        self.max_xyz_acceleration *= factor
        self.max_angular_acceleration *= factor
        return self

    def build(self) -> TaskSpacePlanParameters:
        """Validate the builder's current values and freeze them into TaskSpacePlanParameters."""
        return TaskSpacePlanParameters(**{f.name: getattr(self, f.name) for f in fields(self)})


@dataclass(frozen=True)
class TaskSpacePlanParameters:
    """Limits and settings used to plan a Cartesian motion of an end effector."""

    end_effector_name: str | None = None
    max_xyz_velocity: float = 0.2
    """Maximum linear velocity (m/s) of the end effector."""

    max_xyz_acceleration: float = 0.4
    """Maximum linear acceleration (m/s^2) of the end effector."""

    max_angular_velocity: float = 0.026179938779915
    """Maximum angular velocity (rad/s) of the end effector."""

    max_angular_acceleration: float = 0.10471975511966
    """Maximum angular acceleration (rad/s^2) of the end effector."""

    collision_check: bool = True
    sample_resolution: float = DEFAULT_SAMPLE_RESOLUTION_S
    max_deviation: float = DEFAULT_MAX_DEVIATION
    ik_jump_threshold: float = 1.2
    """Maximum allowed jump (rad) between consecutive inverse kinematics solutions."""

    def __post_init__(self) -> None:
        """Verify that every limit is a non-negative number."""
        limits = (
            self.max_xyz_velocity,
            self.max_xyz_acceleration,
            self.max_angular_velocity,
            self.max_angular_acceleration,
        )
        if any(x < 0 for x in limits):
            raise InvariantViolationError(f"Task-space limits must not be negative: {limits}")

    @classmethod
    def from_end_effector_limits(
        cls,
        end_effector_name: str,
        limits: EndEffectorLimits,
        collision_check: bool = True,
    ) -> TaskSpacePlanParameters:
        """Construct task-space plan parameters using the motion limits of an end-effector."""
        return cls(
            end_effector_name=end_effector_name,
            max_xyz_velocity=limits.max_xyz_velocity,
            max_xyz_acceleration=limits.max_xyz_acceleration,
            max_angular_velocity=limits.max_angular_velocity,
            max_angular_acceleration=limits.max_angular_acceleration,
            collision_check=collision_check,
        )

    def to_builder(self) -> TaskSpacePlanParametersBuilder:
        """Create a mutable builder initialized with these parameters."""
        return TaskSpacePlanParametersBuilder(**{f.name: getattr(self, f.name) for f in fields(self)})

    def with_collision_check(self, value: bool) -> TaskSpacePlanParameters:
        """Create parameters with collision checking enabled or disabled."""
        if self.collision_check == value:
            return self
        builder = self.to_builder()
        builder.collision_check = value
        return builder.build()

    def with_sample_resolution(self, value: float) -> TaskSpacePlanParameters:
        """Create parameters with the given sample resolution (seconds)."""
        if self.sample_resolution == value:
            return self
        builder = self.to_builder()
        builder.sample_resolution = value
        return builder.build()

    def with_ik_jump_threshold(self, value: float) -> TaskSpacePlanParameters:
        """Create parameters with the given IK jump threshold."""
        if self.ik_jump_threshold == value:
            return self
        builder = self.to_builder()
        builder.ik_jump_threshold = value
        return builder.build()

    def with_max_deviation(self, value: float) -> TaskSpacePlanParameters:
        """Create parameters with the given maximum deviation."""
        if self.max_deviation == value:
            return self
        builder = self.to_builder()
        builder.max_deviation = value
        return builder.build()
