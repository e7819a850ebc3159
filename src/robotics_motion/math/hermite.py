"""Define functions for cubic Hermite interpolation between two sampled states."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray

MIN_INTERVAL_S = 1e-6
"""Shortest time interval (seconds) over which a cubic polynomial is fit."""


def cubic_hermite(
    p0: NDArray[np.float64],
    v0: NDArray[np.float64],
    p1: NDArray[np.float64],
    v1: NDArray[np.float64],
    dt: float,
    tau: float,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Evaluate the cubic polynomial matching position and velocity at both ends of an interval.

    The polynomial is p(tau) = a + b*tau + c*tau^2 + d*tau^3, evaluated independently per element.

    :param p0: Positions at the start of the interval
    :param v0: Velocities at the start of the interval
    :param p1: Positions at the end of the interval
    :param v1: Velocities at the end of the interval
    :param dt: Duration (seconds) of the interval; must be at least MIN_INTERVAL_S
    :param tau: Time (seconds) since the start of the interval
    :return: Tuple of (positions, velocities) at time tau
    """
    a = p0
    b = v0
    c = (-3.0 * a + 3.0 * p1 - 2.0 * dt * b - dt * v1) / dt**2
    d = (2.0 * a - 2.0 * p1 + dt * b + dt * v1) / dt**3

    positions = a + b * tau + c * tau**2 + d * tau**3
    velocities = b + 2.0 * c * tau + 3.0 * d * tau**2
    return positions, velocities
