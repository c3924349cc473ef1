"""Lander - Lunar descent physics for landing games and lessons.

This package provides the physics core of a lunar landing game: a fuel
limited thrust model, a burn/coast step integrator, and a closed-form
touchdown solver that stops each step at the exact instant of contact.

Example:
    >>> from lander import SimulationParameters, Simulator
    >>>
    >>> sim = Simulator(SimulationParameters(fuel0=800.0))
    >>> while not sim.is_terminal:
    ...     sim.step(requested_burn=180.0)
    >>> print(sim.status.value, sim.state.velocity_down)
"""

__version__ = "0.1.0"

# Descent dynamics
from lander.dynamics import (
    Contact,
    FlightStatus,
    SimulationState,
    classify_touchdown,
    solve_contact,
)

# Guidance
from lander.guidance import QuickHintGuidance

# Run parameters
from lander.parameters import (
    DEFAULT_PARAMETERS,
    SimulationParameters,
)

# Propulsion
from lander.propulsion import (
    ThrustResult,
    compute_thrust,
)

# Simulation
from lander.simulation import (
    SimulationResult,
    Simulator,
    StepReport,
    advance,
    create_session,
    propagate,
)

# Telemetry
from lander.telemetry import (
    MissionLog,
    format_fuel,
    format_meters,
    format_speed,
)

__all__ = [
    # Version
    "__version__",
    # Parameters
    "SimulationParameters",
    "DEFAULT_PARAMETERS",
    # State
    "FlightStatus",
    "SimulationState",
    # Propulsion
    "ThrustResult",
    "compute_thrust",
    # Touchdown
    "Contact",
    "solve_contact",
    "classify_touchdown",
    # Simulation
    "create_session",
    "advance",
    "propagate",
    "StepReport",
    "Simulator",
    "SimulationResult",
    # Guidance
    "QuickHintGuidance",
    # Telemetry
    "MissionLog",
    "format_meters",
    "format_speed",
    "format_fuel",
]
