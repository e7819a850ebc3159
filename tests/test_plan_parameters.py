"""Unit tests for the joint-space and task-space plan parameters."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from robotics_motion.errors import InvariantViolationError, RangeViolationError
from robotics_motion.kinematics import JointLimits, JointSet
from robotics_motion.motion_planning import (
    EndEffectorLimits,
    PlanParameters,
    PlanParametersBuilder,
    TaskSpacePlanParameters,
)
from robotics_motion.motion_planning.plan_parameters import DEFAULT_SAMPLE_RESOLUTION_S

from .strategies.motion_strategies import joint_limits

SIX_JOINTS = JointSet([f"joint_{i}" for i in range(1, 7)])


def test_plan_parameters_limit_length_mismatch() -> None:
    """Verify that six joints with five maximum velocities are rejected."""
    # Act/Assert - Expect construction and building to fail
    with pytest.raises(InvariantViolationError):
        PlanParameters("arm", SIX_JOINTS, max_velocity=[1.0] * 5)
    with pytest.raises(InvariantViolationError):
        PlanParametersBuilder(joint_set=SIX_JOINTS, max_acceleration=(2.0,) * 7).build()


def test_plan_parameters_defaults_and_conversion() -> None:
    """Verify default settings and the conversion of limit sequences into float tuples."""
    # Act - Construct parameters using integer limits in a list
    params = PlanParameters("arm", SIX_JOINTS, max_velocity=[1] * 6)

    # Assert - Expect float tuples and the default settings
    assert params.max_velocity == (1.0,) * 6
    assert params.max_acceleration is None
    assert params.collision_check
    assert params.sample_resolution == DEFAULT_SAMPLE_RESOLUTION_S


@given(st.floats(min_value=1e-3, max_value=1.0))
def test_builder_scales_velocity_and_acceleration(factor: float) -> None:
    """Verify that the builder scales every velocity and acceleration limit by a valid factor."""
    # Arrange - Create a builder holding velocity and acceleration limits
    builder = PlanParametersBuilder("arm", SIX_JOINTS, (2.0,) * 6, (4.0,) * 6)

    # Act - Scale the limits and build the parameters
    params = builder.scale_velocity(factor).scale_acceleration(factor).build()

    # Assert - Expect each limit to be scaled
    assert params.max_velocity == pytest.approx((2.0 * factor,) * 6)
    assert params.max_acceleration == pytest.approx((4.0 * factor,) * 6)


@pytest.mark.parametrize("factor", [0.0, -0.5, 1.5])
def test_builder_rejects_invalid_scale_factors(factor: float) -> None:
    """Verify that scaling factors outside of (0, 1] are rejected."""
    # Arrange - Create a builder holding velocity limits
    builder = PlanParametersBuilder("arm", SIX_JOINTS, (2.0,) * 6)

    # Act/Assert - Expect scaling to fail for both builders
    with pytest.raises(RangeViolationError):
        builder.scale_velocity(factor)
    with pytest.raises(RangeViolationError):
        TaskSpacePlanParameters().to_builder().scale_acceleration(factor)


def test_plan_parameters_with_methods() -> None:
    """Verify that with_* methods return new parameters, or the same parameters if unchanged."""
    # Arrange - Create default joint-space parameters
    params = PlanParameters("arm", SIX_JOINTS)

    # Act - Change and keep settings
    unchanged = params.with_collision_check(True)
    unchecked = params.with_collision_check(False)
    resampled = params.with_sample_resolution(0.01).with_max_deviation(0.05)

    # Assert - Expect identity for unchanged settings and updates otherwise
    assert unchanged is params
    assert not unchecked.collision_check
    assert resampled.sample_resolution == 0.01
    assert resampled.max_deviation == 0.05
    assert params.collision_check
    assert params.to_builder().build() == params


@given(joint_limits())
def test_plan_parameters_from_joint_limits(limits: JointLimits) -> None:
    """Verify constructing plan parameters from joint limits with all velocity limits set."""
    # Act - Construct the plan parameters from the limits
    params = PlanParameters.from_joint_limits("group", limits)

    # Assert - Expect the joint limits to be carried over
    assert params.joint_set == limits.joint_set
    assert params.max_velocity == limits.max_velocity
    assert params.max_acceleration == limits.max_acceleration


def test_plan_parameters_from_unset_joint_limits_fails() -> None:
    """Verify that joint limits lacking velocity limits cannot produce plan parameters."""
    # Act/Assert - Expect construction from unlimited joints to fail
    with pytest.raises(InvariantViolationError):
        PlanParameters.from_joint_limits("arm", JointLimits.unlimited(SIX_JOINTS))


def test_task_space_plan_parameters() -> None:
    """Verify task-space defaults, validation, and construction from end-effector limits."""
    # Arrange - Create end-effector limits
    limits = EndEffectorLimits(0.5, 1.0, 0.3, 0.6)

    # Act - Construct parameters from the limits and update their settings
    params = TaskSpacePlanParameters.from_end_effector_limits("gripper", limits, collision_check=False)
    updated = params.with_ik_jump_threshold(0.5)

    # Assert - Expect the limits, settings, and defaults to be set
    assert params.end_effector_name == "gripper"
    assert params.max_xyz_velocity == 0.5
    assert params.max_angular_acceleration == 0.6
    assert not params.collision_check
    assert params.ik_jump_threshold == 1.2
    assert updated.ik_jump_threshold == 0.5
    assert params.with_max_deviation(params.max_deviation) is params
    with pytest.raises(InvariantViolationError):
        TaskSpacePlanParameters(max_xyz_velocity=-1.0)
