"""Propulsion models for the descent stage.

Example:
    >>> from lander.propulsion import compute_thrust
    >>> result = compute_thrust(requested_burn=150.0, available_fuel=1200.0,
    ...                         dt=10.0, params=params)
"""

from lander.propulsion.thrust_model import (
    ThrustResult,
    clamp,
    clamp_burn,
    compute_thrust,
)

__all__ = [
    "ThrustResult",
    "clamp",
    "clamp_burn",
    "compute_thrust",
]
