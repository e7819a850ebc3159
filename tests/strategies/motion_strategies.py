"""Define strategies for generating joint-space motion data for property-based testing."""

from __future__ import annotations

import hypothesis.strategies as st

from robotics_motion.kinematics import JointLimits, JointSet, JointValues
from robotics_motion.motion_planning import JointPath, JointTrajectory, JointTrajectoryPoint


def joint_positions() -> st.SearchStrategy[float]:
    """Generate joint positions (radians or meters) of realistic magnitude."""
    return st.floats(min_value=-10.0, max_value=10.0, allow_infinity=False, allow_nan=False)


@st.composite
def joint_names(draw: st.DrawFn) -> str:
    """Generate random joint names, e.g. 'arm_joint_3'."""
    prefix = draw(st.sampled_from(["arm", "left_arm", "right_arm", "torso", "gripper"]))
    index = draw(st.integers(min_value=0, max_value=99))
    return f"{prefix}_joint_{index}"


@st.composite
def joint_sets(draw: st.DrawFn, min_size: int = 1, max_size: int = 7) -> JointSet:
    """Generate random joint sets of unique joint names."""
    names = draw(st.lists(joint_names(), min_size=min_size, max_size=max_size, unique=True))
    return JointSet(names)


@st.composite
def joint_values(draw: st.DrawFn, joint_set: JointSet | None = None) -> JointValues:
    """Generate random joint values, over the given joint set if one is provided."""
    if joint_set is None:
        joint_set = draw(joint_sets())
    values = draw(st.lists(joint_positions(), min_size=len(joint_set), max_size=len(joint_set)))
    return JointValues(joint_set, values)


@st.composite
def joint_limits(draw: st.DrawFn, joint_set: JointSet | None = None) -> JointLimits:
    """Generate random joint limits with every limit set."""
    if joint_set is None:
        joint_set = draw(joint_sets())
    count = len(joint_set)

    positive = st.floats(min_value=0.01, max_value=10.0, allow_infinity=False, allow_nan=False)
    bounds = [sorted(draw(st.tuples(joint_positions(), joint_positions()))) for _ in range(count)]
    return JointLimits(
        joint_set,
        max_velocity=tuple(draw(st.lists(positive, min_size=count, max_size=count))),
        max_acceleration=tuple(draw(st.lists(positive, min_size=count, max_size=count))),
        min_position=tuple(low for low, _ in bounds),
        max_position=tuple(high for _, high in bounds),
    )


@st.composite
def joint_paths(draw: st.DrawFn, joint_set: JointSet | None = None, max_size: int = 6) -> JointPath:
    """Generate random joint paths over a shared joint set."""
    if joint_set is None:
        joint_set = draw(joint_sets())
    points = draw(st.lists(joint_values(joint_set), min_size=0, max_size=max_size))
    return JointPath(joint_set, points)


@st.composite
def joint_trajectories(
    draw: st.DrawFn,
    joint_set: JointSet | None = None,
    min_size: int = 1,
    max_size: int = 6,
) -> JointTrajectory:
    """Generate random trajectories with non-decreasing times and velocities at every point."""
    if joint_set is None:
        joint_set = draw(joint_sets())

    time_steps = st.floats(min_value=0.0, max_value=2.0, allow_infinity=False, allow_nan=False)
    steps = draw(st.lists(time_steps, min_size=min_size, max_size=max_size))

    points = []
    time_s = 0.0
    for step in steps:
        time_s += step
        positions = draw(joint_values(joint_set))
        velocities = draw(joint_values(joint_set))
        points.append(JointTrajectoryPoint(time_s, positions, velocities=velocities))

    return JointTrajectory(joint_set, points)


@st.composite
def joint_path_lists(draw: st.DrawFn, count: int) -> list[JointPath]:
    """Generate a list of random joint paths that all share one joint set."""
    joint_set = draw(joint_sets())
    return [draw(joint_paths(joint_set)) for _ in range(count)]
