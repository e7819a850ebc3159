"""Define functions to display motion values as rich tables."""

from __future__ import annotations

from rich.table import Table

from robotics_motion.motion_planning.trajectories import JointTrajectory


def trajectory_table(trajectory: JointTrajectory, title: str = "Joint Trajectory", precision: int = 3) -> Table:
    """Build a table listing the time and joint positions of every trajectory point.

    :param trajectory: Trajectory to be displayed
    :param title: Title shown above the table
    :param precision: Number of decimal places shown per value
    :return: Table with one row per point and one column per joint
    """
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Time (s)", justify="right", style="yellow")
    for name in trajectory.joint_set:
        table.add_column(name, justify="right", style="white")

    for idx, point in enumerate(trajectory):
        positions = [f"{v:.{precision}f}" for v in point.positions]
        table.add_row(str(idx), f"{point.time_from_start:.{precision}f}", *positions)
    return table
