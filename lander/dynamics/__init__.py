"""Dynamics module for one-dimensional powered descent.

This module provides the descent state and the closed-form touchdown
solver used by the integrator.

Example:
    >>> from lander.dynamics import SimulationState, solve_contact
    >>>
    >>> state = SimulationState(altitude=100.0, velocity_down=10.0, fuel=0.0)
    >>> contact = solve_contact(state.altitude, state.velocity_down, 1.62, 10.0)
"""

from lander.dynamics.state import (
    FlightStatus,
    SimulationState,
)
from lander.dynamics.touchdown import (
    Contact,
    classify_touchdown,
    solve_contact,
)

__all__ = [
    # State
    "FlightStatus",
    "SimulationState",
    # Touchdown
    "Contact",
    "classify_touchdown",
    "solve_contact",
]
