"""Define values exchanged with a motion planning service: joint states, IK results, and end-effector data."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from robotics_motion.errors import InvariantViolationError
from robotics_motion.kinematics.joint_set import JointSet
from robotics_motion.kinematics.joint_values import JointValues
from robotics_motion.kinematics.poses import Pose
from robotics_motion.motion_planning.paths import JointPath


class MoveItErrorCode(Enum):
    """An enumeration of result codes reported by MoveIt planning and IK requests."""

    SUCCESS = 1
    FAILURE = 99999
    PLANNING_FAILED = -1
    INVALID_MOTION_PLAN = -2
    MOTION_PLAN_INVALIDATED_BY_ENVIRONMENT_CHANGE = -3
    CONTROL_FAILED = -4
    UNABLE_TO_AQUIRE_SENSOR_DATA = -5
    TIMED_OUT = -6
    PREEMPTED = -7
    START_STATE_IN_COLLISION = -10
    START_STATE_VIOLATES_PATH_CONSTRAINTS = -11
    GOAL_IN_COLLISION = -12
    GOAL_VIOLATES_PATH_CONSTRAINTS = -13
    GOAL_CONSTRAINTS_VIOLATED = -14
    INVALID_GROUP_NAME = -15
    INVALID_GOAL_CONSTRAINTS = -16
    INVALID_ROBOT_STATE = -17
    INVALID_LINK_NAME = -18
    INVALID_OBJECT_NAME = -19
    FRAME_TRANSFORM_FAILURE = -21
    COLLISION_CHECKING_UNAVAILABLE = -22
    ROBOT_STATE_STALE = -23
    SENSOR_INFO_STALE = -24
    NO_IK_SOLUTION = -31


@dataclass(frozen=True)
class IKResult:
    """Joint-space solutions for a sequence of IK queries, with one error code per query."""

    path: JointPath
    error_codes: tuple[MoveItErrorCode, ...] = ()

    def __post_init__(self) -> None:
        """Convert the error codes into a tuple of enumeration members."""
        object.__setattr__(self, "error_codes", tuple(MoveItErrorCode(c) for c in self.error_codes))

    @property
    def succeeded(self) -> bool:
        """Evaluate whether every IK query succeeded."""
        return all(code == MoveItErrorCode.SUCCESS for code in self.error_codes)


@dataclass(frozen=True)
class JointStates:
    """Measured positions, velocities, and efforts of a set of joints; each channel is optional."""

    positions: JointValues | None = None
    velocities: JointValues | None = None
    efforts: JointValues | None = None

    def __post_init__(self) -> None:
        """Verify that all present channels use the same joint set."""
        joint_set = self.joint_set
        for channel in (self.positions, self.velocities, self.efforts):
            if channel is not None and channel.joint_set != joint_set:
                raise InvariantViolationError(f"Joint states mix {channel.joint_set} and {joint_set}.")

    @property
    def joint_set(self) -> JointSet | None:
        """Retrieve the joint set of the first present channel (None if all are absent)."""
        for channel in (self.positions, self.velocities, self.efforts):
            if channel is not None:
                return channel.joint_set
        return None

    def __str__(self) -> str:
        return f"Positions: {self.positions}; Velocities: {self.velocities}; Efforts: {self.efforts};"


@dataclass(frozen=True)
class EndEffectorLimits:
    """Linear (m/s, m/s^2) and angular (rad/s, rad/s^2) motion limits of an end-effector."""

    max_xyz_velocity: float
    max_xyz_acceleration: float
    max_angular_velocity: float
    max_angular_acceleration: float

    def __post_init__(self) -> None:
        """Verify that no limit is negative."""
        if min(
            self.max_xyz_velocity,
            self.max_xyz_acceleration,
            self.max_angular_velocity,
            self.max_angular_acceleration,
        ) < 0:
            raise InvariantViolationError(f"End-effector limits must not be negative: {self}")


@dataclass(frozen=True)
class EndEffectorPose:
    """The pose of a named end-effector link."""

    pose: Pose
    link_name: str


@dataclass(frozen=True)
class EndEffectorDescription:
    """Describes an end-effector: its link, the move group moving it, and that group's joints."""

    name: str
    joint_set: JointSet
    move_group_name: str
    link_name: str
    sub_move_group_ids: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Store the sub move group identifiers as a tuple."""
        object.__setattr__(self, "sub_move_group_ids", tuple(self.sub_move_group_ids))
