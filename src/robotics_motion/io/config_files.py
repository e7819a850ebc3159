"""Define functions to load and save planning configuration and trajectories as YAML files."""

from __future__ import annotations

from pathlib import Path

from robotics_motion.io.logging import log_info
from robotics_motion.io.models import (
    JointLimitsModel,
    JointTrajectoryModel,
    PlanParametersModel,
    TaskSpacePlanParametersModel,
)
from robotics_motion.io.yaml_utils import export_yaml_data
from robotics_motion.kinematics.joint_limits import JointLimits
from robotics_motion.motion_planning.plan_parameters import PlanParameters, TaskSpacePlanParameters
from robotics_motion.motion_planning.trajectories import JointTrajectory


def load_plan_parameters(yaml_path: Path) -> PlanParameters:
    """Load joint-space plan parameters from a YAML file.

    :param yaml_path: Path to a YAML file matching PlanParametersModel
    :return: Validated plan parameters
    :raises InvariantViolationError: If the file's data does not describe valid plan parameters
    """
    return PlanParametersModel.validate_yaml(yaml_path).to_value()


def load_task_space_plan_parameters(yaml_path: Path) -> TaskSpacePlanParameters:
    """Load task-space plan parameters from a YAML file; omitted entries take default values."""
    return TaskSpacePlanParametersModel.validate_yaml(yaml_path).to_value()


def load_joint_limits(yaml_path: Path) -> JointLimits:
    """Load per-joint limits from a YAML file; null entries mark limits that are not set."""
    return JointLimitsModel.validate_yaml(yaml_path).to_value()


def load_joint_trajectory(yaml_path: Path) -> JointTrajectory:
    """Load a joint trajectory from a YAML file.

    :param yaml_path: Path to a YAML file matching JointTrajectoryModel
    :return: Trajectory whose construction checks (e.g. non-decreasing times) have passed
    """
    trajectory = JointTrajectoryModel.validate_yaml(yaml_path).to_value()
    log_info(f"Loaded trajectory with {len(trajectory)} points over {trajectory.joint_set} from {yaml_path}")
    return trajectory


def export_joint_trajectory(trajectory: JointTrajectory, yaml_path: Path) -> None:
    """Save a joint trajectory to a YAML file, omitting absent channels and per-point joint names."""
    data = JointTrajectoryModel.from_value(trajectory).model_dump(exclude_none=True)
    export_yaml_data(data, yaml_path)


def export_plan_parameters(params: PlanParameters | TaskSpacePlanParameters, yaml_path: Path) -> None:
    """Save joint-space or task-space plan parameters to a YAML file."""
    if isinstance(params, PlanParameters):
        data = PlanParametersModel.from_value(params).model_dump()
    else:
        data = TaskSpacePlanParametersModel.from_value(params).model_dump()
    export_yaml_data(data, yaml_path)
