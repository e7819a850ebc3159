"""Import classes and functions for joint-space and Cartesian motion planning data."""

from .interpolation import evaluate_at as evaluate_at
from .interpolation import interpolate_cubic as interpolate_cubic
from .paths import CartesianPath as CartesianPath
from .paths import JointPath as JointPath
from .paths import PathLike as PathLike
from .paths import joint_path_concat as joint_path_concat
from .paths import joint_path_from_points as joint_path_from_points
from .plan_parameters import PlanParameters as PlanParameters
from .plan_parameters import PlanParametersBuilder as PlanParametersBuilder
from .plan_parameters import TaskSpacePlanParameters as TaskSpacePlanParameters
from .plan_parameters import TaskSpacePlanParametersBuilder as TaskSpacePlanParametersBuilder
from .results import EndEffectorDescription as EndEffectorDescription
from .results import EndEffectorLimits as EndEffectorLimits
from .results import EndEffectorPose as EndEffectorPose
from .results import IKResult as IKResult
from .results import JointStates as JointStates
from .results import MoveItErrorCode as MoveItErrorCode
from .trajectories import JointTrajectory as JointTrajectory
from .trajectories import merge_trajectories as merge_trajectories
from .trajectory_point import JointTrajectoryPoint as JointTrajectoryPoint
