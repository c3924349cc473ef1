"""Throttle-to-acceleration model with a fuel budget.

Maps a requested burn and the fuel on board to the upward acceleration
actually achieved during a step. Burn is counted per step: a burn of ``b``
units consumes ``b`` units of fuel over the whole step, whatever its length.
When the tank cannot cover the full step, thrust is held at the requested
level for the fraction of the step the fuel allows and then cuts out.

Example:
    >>> from lander.parameters import SimulationParameters
    >>> from lander.propulsion import compute_thrust
    >>>
    >>> params = SimulationParameters()
    >>> result = compute_thrust(200.0, 100.0, 10.0, params)
    >>> result.burn_fraction
    0.5
"""

import math
from typing import NamedTuple

from lander._checks import checked
from lander.parameters import SimulationParameters


class ThrustResult(NamedTuple):
    """Thrust achieved over one step."""
    achieved_accel: float    # Upward accel while burning [m/s^2]
    fuel_consumed: float     # Fuel spent over the step [burn units]
    burn_fraction: float     # Share of the step under thrust [-]
    time_at_full_burn: float  # Duration of the burn phase [s]


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return max(lo, min(hi, value))


def clamp_burn(requested_burn: float, params: SimulationParameters) -> float:
    """Clamp a burn request to [0, max_burn_per_step]; non-finite requests are 0."""
    if not math.isfinite(requested_burn):
        return 0.0
    return clamp(requested_burn, 0.0, params.max_burn_per_step)


@checked
def compute_thrust(
    requested_burn: float,
    available_fuel: float,
    dt: float,
    params: SimulationParameters,
) -> ThrustResult:
    """Compute the thrust a burn request yields given the fuel on board.

    Args:
        requested_burn: Commanded burn, clamped to [0, max_burn_per_step]
        available_fuel: Fuel on board, negative values treated as empty
        dt: Step duration [s]
        params: Run parameters

    Returns:
        ThrustResult for the step
    """
    burn = clamp_burn(requested_burn, params)
    fuel = max(0.0, available_fuel) if math.isfinite(available_fuel) else 0.0
    dt = max(0.0, dt) if math.isfinite(dt) else 0.0

    if burn <= 0.0:
        return ThrustResult(0.0, 0.0, 0.0, 0.0)

    burn_fraction = min(1.0, fuel / burn)
    if burn_fraction <= 0.0:
        return ThrustResult(0.0, 0.0, 0.0, 0.0)

    throttle = burn / params.max_burn_per_step
    return ThrustResult(
        achieved_accel=throttle * params.max_upward_accel,
        fuel_consumed=min(burn, fuel),
        burn_fraction=burn_fraction,
        time_at_full_burn=burn_fraction * dt,
    )
