"""Unit tests for loading and saving motion planning configuration and trajectories as YAML."""

from pathlib import Path

import pytest
import yaml

from robotics_motion.errors import InvariantViolationError
from robotics_motion.io.config_files import (
    export_joint_trajectory,
    export_plan_parameters,
    load_joint_limits,
    load_joint_trajectory,
    load_plan_parameters,
    load_task_space_plan_parameters,
)
from robotics_motion.io.tables import trajectory_table
from robotics_motion.io.yaml_utils import export_yaml_data, load_yaml_data
from robotics_motion.kinematics import JointSet, JointValues
from robotics_motion.motion_planning import JointTrajectory, JointTrajectoryPoint, PlanParameters

ARM_JOINTS = JointSet(["shoulder", "elbow", "wrist"])


@pytest.fixture
def trajectory() -> JointTrajectory:
    """Create a three-point trajectory with velocities at every point."""
    points = [
        JointTrajectoryPoint(t, JointValues(ARM_JOINTS, t), velocities=JointValues(ARM_JOINTS, 1.0))
        for t in (0.0, 0.5, 1.0)
    ]
    return JointTrajectory(ARM_JOINTS, points)


def write_yaml(tmp_path: Path, filename: str, data: dict) -> Path:
    """Write the given data into a YAML file in the temporary directory."""
    yaml_path = tmp_path / filename
    yaml_path.write_text(yaml.safe_dump(data))
    return yaml_path


def test_load_plan_parameters(tmp_path: Path) -> None:
    """Verify that plan parameters are loaded with defaults for omitted settings."""
    # Arrange - Write parameters for three joints without a sample resolution
    yaml_path = write_yaml(
        tmp_path,
        "params.yaml",
        {
            "move_group_name": "arm",
            "joint_names": ARM_JOINTS.to_list(),
            "max_velocity": [1.0, 1.5, 2.0],
            "collision_check": False,
        },
    )

    # Act - Load the parameters
    params = load_plan_parameters(yaml_path)

    # Assert - Expect the loaded values and defaults
    assert params.joint_set == ARM_JOINTS
    assert params.max_velocity == (1.0, 1.5, 2.0)
    assert params.max_acceleration is None
    assert not params.collision_check
    assert params == PlanParameters("arm", ARM_JOINTS, (1.0, 1.5, 2.0), collision_check=False)


def test_load_plan_parameters_with_wrong_limit_count(tmp_path: Path) -> None:
    """Verify that loading parameters with too few velocity limits fails."""
    # Arrange - Write parameters with two velocity limits for three joints
    yaml_path = write_yaml(tmp_path, "params.yaml", {"joint_names": ARM_JOINTS.to_list(), "max_velocity": [1, 2]})

    # Act/Assert - Expect the loaded parameters to be rejected
    with pytest.raises(InvariantViolationError):
        load_plan_parameters(yaml_path)


def test_load_invalid_yaml_data(tmp_path: Path) -> None:
    """Verify that files with unknown keys or invalid values are rejected on validation."""
    # Arrange - Write task-space parameters with a negative limit and an unknown key
    negative_path = write_yaml(tmp_path, "negative.yaml", {"max_xyz_velocity": -1.0})
    unknown_path = write_yaml(tmp_path, "unknown.yaml", {"max_jerk": 1.0})

    # Act/Assert - Expect both files to fail validation
    with pytest.raises(InvariantViolationError):
        load_task_space_plan_parameters(negative_path)
    with pytest.raises(InvariantViolationError):
        load_task_space_plan_parameters(unknown_path)


def test_load_joint_limits_with_unset_entries(tmp_path: Path) -> None:
    """Verify that null entries in a joint limits file are loaded as unset limits."""
    # Arrange - Write limits where the wrist has no position limits
    yaml_path = write_yaml(
        tmp_path,
        "limits.yaml",
        {
            "joint_names": ARM_JOINTS.to_list(),
            "max_velocity": [1.0, 1.0, 2.0],
            "max_acceleration": [2.0, 2.0, 4.0],
            "min_position": [-1.0, -2.0, None],
            "max_position": [1.0, 2.0, None],
        },
    )

    # Act - Load the joint limits
    limits = load_joint_limits(yaml_path)

    # Assert - Expect the unset limits to be None
    assert limits.min_position == (-1.0, -2.0, None)
    assert not limits.has_position_limits
    assert limits.position_interval("elbow").maximum == 2.0


def test_export_and_load_trajectory(tmp_path: Path, trajectory: JointTrajectory) -> None:
    """Verify that an exported trajectory is loaded back as an equal trajectory."""
    # Arrange - Choose a path for the exported file
    yaml_path = tmp_path / "trajectory.yaml"

    # Act - Export and then load the trajectory
    export_joint_trajectory(trajectory, yaml_path)
    loaded = load_joint_trajectory(yaml_path)

    # Assert - Expect an equal trajectory and readable plain data
    assert loaded == trajectory
    data = load_yaml_data(yaml_path, required_keys={"joint_names", "points"})
    assert data["joint_names"] == ARM_JOINTS.to_list()
    assert "joint_names" not in data["points"][0]
    assert "accelerations" not in data["points"][0]


def test_export_plan_parameters(tmp_path: Path) -> None:
    """Verify that exported plan parameters are loaded back unchanged."""
    # Arrange - Create parameters with velocity and acceleration limits
    params = PlanParameters("arm", ARM_JOINTS, (1.0, 1.0, 1.0), (2.0, 2.0, 2.0), max_deviation=0.1)
    yaml_path = tmp_path / "params.yaml"

    # Act - Export and then load the parameters
    export_plan_parameters(params, yaml_path)

    # Assert - Expect equal parameters
    assert load_plan_parameters(yaml_path) == params


def test_load_yaml_data_missing_file_and_key(tmp_path: Path) -> None:
    """Verify the errors raised for a nonexistent YAML file and a missing required key."""
    # Arrange - Write a YAML file lacking the key "points"
    yaml_path = tmp_path / "data.yaml"
    export_yaml_data({"joint_names": ["a"]}, yaml_path)

    # Act/Assert - Expect the missing file and the missing key to be reported
    with pytest.raises(FileNotFoundError):
        load_yaml_data(tmp_path / "missing.yaml")
    with pytest.raises(KeyError):
        load_yaml_data(yaml_path, required_keys={"points"})


def test_trajectory_table(trajectory: JointTrajectory) -> None:
    """Verify that a trajectory table has one row per point and one column per joint."""
    # Act - Build the table
    table = trajectory_table(trajectory, title="Arm")

    # Assert - Expect index and time columns followed by one column per joint
    assert table.title == "Arm"
    assert table.row_count == len(trajectory)
    assert [column.header for column in table.columns] == ["#", "Time (s)", *ARM_JOINTS.to_list()]
