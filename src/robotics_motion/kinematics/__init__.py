"""Import classes and definitions for joint-space and Cartesian kinematics."""

from .joint_limits import JointLimits as JointLimits
from .joint_set import JointSet as JointSet
from .joint_values import JointValues as JointValues
from .poses import DEFAULT_FRAME as DEFAULT_FRAME
from .poses import Pose as Pose
from .poses import Twist as Twist
from .poses import calculate_twist as calculate_twist
from .rotations import EulerRPY as EulerRPY
from .rotations import Quaternion as Quaternion
from .vector3 import Vector3 as Vector3
