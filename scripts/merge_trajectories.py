"""Merge two joint trajectories loaded from YAML files into one synchronized trajectory."""

from pathlib import Path

import click

from robotics_motion.io import console
from robotics_motion.io.config_files import export_joint_trajectory, load_joint_trajectory
from robotics_motion.io.tables import trajectory_table


@click.command()
@click.argument("first_path", type=click.Path(exists=True, path_type=Path))
@click.argument("second_path", type=click.Path(exists=True, path_type=Path))
@click.option("--delay-first", type=float, default=0.0, help="Start delay (seconds) of the first trajectory")
@click.option("--delay-second", type=float, default=0.0, help="Start delay (seconds) of the second trajectory")
@click.option("--output", "output_path", type=click.Path(path_type=Path), default=None, help="Output YAML file")
def merge(
    first_path: Path,
    second_path: Path,
    delay_first: float,
    delay_second: float,
    output_path: Path | None,
) -> None:
    """Merge two trajectories (e.g., for two arms) into one trajectory over both joint sets.

    :param first_path: YAML file containing the first trajectory
    :param second_path: YAML file containing the second trajectory
    :param delay_first: Time (seconds) before the first trajectory starts moving
    :param delay_second: Time (seconds) before the second trajectory starts moving
    :param output_path: Optional YAML file to which the merged trajectory is exported
    """
    console.print(f"[yellow]Loading trajectories from {first_path} and {second_path}[/yellow]...")
    first = load_joint_trajectory(first_path)
    second = load_joint_trajectory(second_path)

    merged = first.merge(second, delay_first, delay_second)
    console.print(
        f"[green]Merged {len(first)} and {len(second)} points into {len(merged)} points "
        f"lasting {merged.duration:.3f} seconds.[/green]",
    )
    console.print(trajectory_table(merged, title="Merged Trajectory"))

    if output_path is not None:
        export_joint_trajectory(merged, output_path)
        console.print(f"[green]Exported the merged trajectory to {output_path}[/green]")


if __name__ == "__main__":
    merge()
