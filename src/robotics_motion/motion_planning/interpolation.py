"""Define functions to evaluate timed joint trajectories and resample them in sync."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

from robotics_motion.errors import InvariantViolationError
from robotics_motion.io.logging import log_debug
from robotics_motion.motion_planning.trajectory_point import JointTrajectoryPoint


def interpolate_cubic(point0: JointTrajectoryPoint, point1: JointTrajectoryPoint, time_s: float) -> JointTrajectoryPoint:
    """Interpolate between two timed points using a cubic Hermite polynomial per joint."""
    return point0.interpolate_cubic(point1, time_s)


def evaluate_at(
    points: Sequence[JointTrajectoryPoint],
    simulated_time: float,
    delay: float = 0.0,
) -> JointTrajectoryPoint:
    """Evaluate a sequence of timed points at a global simulated time.

    The sequence is shifted later by `delay`, so it holds its first point until then. The
    segment starts at the last point whose time does not exceed the local time; at or beyond
    the last point, the segment degenerates to (last, last), giving the last positions at rest.

    :param points: Trajectory points with non-decreasing times
    :param simulated_time: Global time (seconds) at which the trajectory is evaluated
    :param delay: Time (seconds) by which the start of the trajectory is delayed
    :return: Interpolated point, labeled with `simulated_time`
    :raises InvariantViolationError: If there are no points to evaluate
    """
    if not points:
        raise InvariantViolationError("Cannot evaluate a trajectory without any points.")

    times = [p.time_from_start for p in points]
    local_time = max(simulated_time - delay, 0.0)

    lower = min(max(bisect_right(times, local_time) - 1, 0), len(points) - 1)
    upper = min(lower + 1, len(points) - 1)

    result = points[lower].interpolate_cubic(points[upper], local_time)
    return result.with_time_from_start(simulated_time)


def merge_samples(
    points_a: Sequence[JointTrajectoryPoint],
    points_b: Sequence[JointTrajectoryPoint],
    delay_a: float = 0.0,
    delay_b: float = 0.0,
) -> list[JointTrajectoryPoint]:
    """Resample two delayed trajectories at shared instants and merge them sample by sample.

    Both trajectories are sampled at N = max(len(a), len(b)) evenly spaced times spanning
    the longer of the two delayed durations.

    :param points_a: Points of the first trajectory
    :param points_b: Points of the second trajectory
    :param delay_a: Start delay (seconds) of the first trajectory
    :param delay_b: Start delay (seconds) of the second trajectory
    :return: Merged points over the union of both joint sets (values of `a` win on overlap)
    :raises InvariantViolationError: If either trajectory has no points
    """
    if not points_a or not points_b:
        raise InvariantViolationError("Cannot merge trajectories unless both have points.")

    duration = max(points_a[-1].time_from_start + delay_a, points_b[-1].time_from_start + delay_b)
    num_samples = max(len(points_a), len(points_b))
    log_debug(f"Merging trajectories into {num_samples} samples spanning {duration:.3f} seconds.")

    merged = []
    for i in range(num_samples):
        t = 0.0 if num_samples == 1 else duration * i / (num_samples - 1)
        sample_a = evaluate_at(points_a, t, delay_a)
        sample_b = evaluate_at(points_b, t, delay_b)
        merged.append(sample_a.merge(sample_b))

    return merged
