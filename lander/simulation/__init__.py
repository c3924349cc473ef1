"""Simulation module for lunar descent.

Provides the step integrator and the step-driven session interface where
the caller controls the loop and the simulator maintains the state.

Example:
    >>> from lander.simulation import Simulator, advance, create_session
    >>>
    >>> state = create_session()
    >>> advance(state, dt=10.0, requested_burn=120.0)
    >>>
    >>> sim = Simulator()
    >>> while not sim.is_terminal:
    ...     sim.step(requested_burn=200.0)
"""

from lander.simulation.simulator import (
    BurnPolicy,
    SimulationResult,
    Simulator,
    StepReport,
    advance,
    create_session,
    propagate,
)

__all__ = [
    "BurnPolicy",
    "SimulationResult",
    "Simulator",
    "StepReport",
    "advance",
    "create_session",
    "propagate",
]
