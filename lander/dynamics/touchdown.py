"""Closed-form ground contact detection within a constant-acceleration interval.

Within an interval of constant down-positive acceleration ``a`` the altitude is

    h(t) = h0 - v0*t - 0.5*a*t^2

so contact is the smallest root of ``0.5*a*t^2 + v0*t - h0 = 0`` in
``(0, duration]``. Solving per interval, rather than checking the sign of the
altitude at the end of a step, gives the exact contact time and velocity.

The scalar kernel is numba-compiled; it returns NaN when there is no contact.

Example:
    >>> from lander.dynamics import solve_contact
    >>>
    >>> contact = solve_contact(altitude=100.0, velocity_down=10.0,
    ...                         net_accel=0.0, duration=20.0)
    >>> contact.time
    10.0
"""

import math
from typing import NamedTuple

from numba import njit

from lander._checks import checked
from lander.dynamics.state import FlightStatus

# Below this |a| the motion is treated as uniform
ACCEL_EPSILON: float = 1e-8
# Below this v the lander is not closing on the ground
VELOCITY_EPSILON: float = 1e-8
# Negative discriminants above this are rounding noise
DISCRIMINANT_EPSILON: float = 1e-12


class Contact(NamedTuple):
    """Ground contact inside an interval."""
    time: float      # Time from interval start to contact [s]
    velocity: float  # Down-positive velocity at contact [m/s]


# =============================================================================
# Numba-Optimized Core
# =============================================================================


@njit(cache=True)
def _contact_time(h: float, v: float, a: float, duration: float) -> float:
    """Earliest t in (0, duration] with 0.5*a*t^2 + v*t - h = 0, else NaN."""
    if abs(a) < ACCEL_EPSILON:
        if v > VELOCITY_EPSILON:
            t = h / v
            if 0.0 < t <= duration:
                return t
        return math.nan

    A = 0.5 * a
    B = v
    C = -h

    disc = B * B - 4.0 * A * C
    if -DISCRIMINANT_EPSILON < disc < 0.0:
        disc = 0.0
    if disc < 0.0:
        return math.nan

    sqrt_disc = math.sqrt(disc)
    t1 = (-B + sqrt_disc) / (2.0 * A)
    t2 = (-B - sqrt_disc) / (2.0 * A)

    best = math.nan
    if 0.0 < t1 <= duration:
        best = t1
    if 0.0 < t2 <= duration and (math.isnan(best) or t2 < best):
        best = t2
    return best


# =============================================================================
# Public API
# =============================================================================


@checked
def solve_contact(
    altitude: float,
    velocity_down: float,
    net_accel: float,
    duration: float,
) -> Contact | None:
    """Find the first ground contact within an interval.

    Args:
        altitude: Altitude at interval start [m]
        velocity_down: Down-positive velocity at interval start [m/s]
        net_accel: Constant down-positive acceleration [m/s^2]
        duration: Interval length [s]

    Returns:
        Contact time and velocity, or None if the ground is not reached
        within (0, duration]
    """
    t = _contact_time(
        float(altitude), float(velocity_down), float(net_accel), float(duration)
    )
    if math.isnan(t):
        return None
    return Contact(time=t, velocity=velocity_down + net_accel * t)


@checked
def classify_touchdown(
    contact_velocity: float,
    safe_landing_speed: float,
) -> FlightStatus:
    """LANDED if |contact_velocity| <= safe_landing_speed, else CRASHED."""
    if abs(contact_velocity) <= safe_landing_speed:
        return FlightStatus.LANDED
    return FlightStatus.CRASHED
