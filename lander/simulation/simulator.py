"""Step-driven descent simulation.

Provides the integrator that advances a SimulationState by one step and a
session object for callers that drive the loop themselves (a text prompt, an
animation timer, an autopilot).

Architecture:
    The caller owns the loop and calls:
    - sim.get_state() -> current state (copy)
    - sim.step(burn, dt) -> propagate physics

Each step is split into a burn phase, while the tank can sustain the
requested burn, and a coast phase under gravity alone. Both phases have
constant acceleration, so ground contact inside either one is found in
closed form and the step stops at the contact instant.

Example:
    >>> from lander.simulation import Simulator
    >>> from lander.guidance import QuickHintGuidance
    >>>
    >>> sim = Simulator()
    >>> while not sim.is_terminal:
    ...     sim.step(requested_burn=150.0)
    >>>
    >>> result = Simulator().run(QuickHintGuidance())
    >>> result.final_status
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from lander._checks import checked
from lander.dynamics.state import FlightStatus, SimulationState
from lander.dynamics.touchdown import Contact, classify_touchdown, solve_contact
from lander.parameters import DEFAULT_PARAMETERS, SimulationParameters
from lander.propulsion.thrust_model import ThrustResult, clamp_burn, compute_thrust
from lander.telemetry import MissionLog

logger = logging.getLogger(__name__)

BurnPolicy = Callable[[SimulationState, SimulationParameters], float]

_NO_THRUST = ThrustResult(0.0, 0.0, 0.0, 0.0)


# =============================================================================
# Step Report
# =============================================================================


class StepReport(NamedTuple):
    """Diagnostics for one call to propagate()."""
    burn: float                  # Burn after clamping [burn units]
    thrust: ThrustResult         # Thrust achieved over the step
    contact: Contact | None      # Contact found by the solver, if any
    time_advanced: float         # Simulation time consumed [s]
    fuel_before: float           # Fuel at step start [burn units]
    status_before: FlightStatus  # Status at step start
    advanced: bool               # False if the state was not integrated


# =============================================================================
# Integrator
# =============================================================================


def _resolve_on_ground(state: SimulationState, params: SimulationParameters) -> None:
    state.altitude = 0.0
    state.status = classify_touchdown(state.velocity_down, params.safe_landing_speed)
    logger.info(
        "Touchdown at T+%.2fs: %s at %.3f m/s",
        state.elapsed_time, state.status.value, state.velocity_down,
    )


@checked
def create_session(
    params: SimulationParameters | None = None,
    altitude: float | None = None,
    velocity_down: float | None = None,
    fuel: float | None = None,
) -> SimulationState:
    """Create the initial state of a descent.

    Omitted initial values come from params. Negative altitude or fuel is
    clamped to zero.

    Args:
        params: Run parameters (defaults used if None)
        altitude: Initial altitude [m]
        velocity_down: Initial down-positive velocity [m/s]
        fuel: Initial fuel [burn units]
    """
    params = params or DEFAULT_PARAMETERS
    altitude = params.altitude0 if altitude is None else altitude
    velocity_down = params.velocity0 if velocity_down is None else velocity_down
    fuel = params.fuel0 if fuel is None else fuel

    if altitude < 0:
        logger.warning("Initial altitude %.3f m is negative; clamped to 0", altitude)
    if fuel < 0:
        logger.warning("Initial fuel %.3f is negative; clamped to 0", fuel)

    return SimulationState(altitude=altitude, velocity_down=velocity_down, fuel=fuel)


@checked
def propagate(
    state: SimulationState,
    dt: float | None = None,
    requested_burn: float = 0.0,
    params: SimulationParameters | None = None,
) -> StepReport:
    """Advance the state by one step in place and report what happened.

    Args:
        state: State to advance (mutated)
        dt: Step duration [s] (params.dt if None)
        requested_burn: Commanded burn, clamped to [0, max_burn_per_step]
        params: Run parameters (defaults used if None)

    Returns:
        StepReport describing the step
    """
    params = params or DEFAULT_PARAMETERS
    dt = params.dt if dt is None else dt
    burn = clamp_burn(requested_burn, params)
    fuel_before = state.fuel
    status_before = state.status

    def skipped() -> StepReport:
        return StepReport(burn, _NO_THRUST, None, 0.0, fuel_before, status_before, False)

    if state.is_terminal:
        return skipped()
    if state.on_ground:
        _resolve_on_ground(state, params)
        return skipped()
    if not math.isfinite(dt) or dt <= 0:
        return skipped()

    thrust = compute_thrust(burn, state.fuel, dt, params)
    t_burn = thrust.time_at_full_burn
    phases = (
        (t_burn, params.gravity - thrust.achieved_accel, thrust.fuel_consumed),
        (dt - t_burn, params.gravity, 0.0),
    )

    elapsed = 0.0
    for duration, accel, fuel_cost in phases:
        if duration <= 0:
            continue

        contact = solve_contact(state.altitude, state.velocity_down, accel, duration)
        if contact is not None:
            state.velocity_down = contact.velocity
            state.elapsed_time += contact.time
            state.fuel = max(0.0, state.fuel - fuel_cost * contact.time / duration)
            elapsed += contact.time
            _resolve_on_ground(state, params)
            return StepReport(
                burn, thrust, contact, elapsed, fuel_before, status_before, True
            )

        v0 = state.velocity_down
        state.altitude -= v0 * duration + 0.5 * accel * duration * duration
        state.velocity_down = v0 + accel * duration
        state.elapsed_time += duration
        state.fuel = max(0.0, state.fuel - fuel_cost)
        elapsed += duration

        # Boundary contact the solver rounded away
        if state.altitude <= 0:
            _resolve_on_ground(state, params)
            return StepReport(
                burn, thrust, None, elapsed, fuel_before, status_before, True
            )

    if state.fuel <= 0 and state.status is FlightStatus.FLYING:
        state.status = FlightStatus.OUT_OF_FUEL
        logger.warning(
            "Fuel exhausted at T+%.2fs, altitude %.1f m", state.elapsed_time, state.altitude
        )

    logger.debug(
        "T+%.2fs burn=%.1f alt=%.3f v=%.3f fuel=%.1f",
        state.elapsed_time, burn, state.altitude, state.velocity_down, state.fuel,
    )
    return StepReport(burn, thrust, None, elapsed, fuel_before, status_before, True)


@checked
def advance(
    state: SimulationState,
    dt: float | None = None,
    requested_burn: float = 0.0,
    params: SimulationParameters | None = None,
) -> SimulationState:
    """Advance the state by one step in place and return it.

    See propagate() for the step semantics.
    """
    propagate(state, dt, requested_burn, params)
    return state


# =============================================================================
# Simulator
# =============================================================================


@checked
@dataclass
class Simulator:
    """Step-driven descent session.

    Owns one SimulationState and its parameters, records state history and
    keeps a mission log. The caller controls the loop.

    Example:
        >>> sim = Simulator(SimulationParameters.classic())
        >>> sim.step(requested_burn=200.0)
        >>> print(sim.mission_log.latest)
    """
    params: SimulationParameters | None = None
    state: SimulationState | None = None
    record_history: bool = True
    mission_log: MissionLog | None = None

    # Internal
    _history: list[SimulationState] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Create the initial state and start the log."""
        if self.params is None:
            self.params = DEFAULT_PARAMETERS
        if self.mission_log is None:
            self.mission_log = MissionLog()
        if self.state is None:
            self.state = create_session(self.params)
        self._history = [self.state.copy()]
        self.mission_log.record_start(self.params, self.state)

    @classmethod
    def from_parameters(cls, params: SimulationParameters, **kwargs) -> "Simulator":
        """Create a session whose initial state comes from params."""
        return cls(params=params, **kwargs)

    def get_state(self) -> SimulationState:
        """Get current state.

        Returns a copy to prevent external modification.
        """
        return self.state.copy()

    def step(
        self,
        requested_burn: float = 0.0,
        dt: float | None = None,
    ) -> SimulationState:
        """Propagate physics by one step.

        Args:
            requested_burn: Commanded burn [burn units]
            dt: Step duration [s] (params.dt if None)

        Returns:
            State after the step
        """
        report = propagate(self.state, dt, requested_burn, self.params)

        newly_terminal = self.state.is_terminal and not report.status_before.is_terminal
        if newly_terminal and report.advanced:
            self.mission_log.record_contact(report.burn, self.state)
        elif newly_terminal:
            self.mission_log.record_ground_resolution(self.state)
        elif report.advanced:
            self.mission_log.record_step(
                report.burn,
                report.fuel_before,
                self.state,
                fuel_exhausted=self.state.status is not report.status_before,
            )

        if self.record_history and (report.advanced or newly_terminal):
            self._history.append(self.state.copy())

        return self.state

    def run(self, policy: BurnPolicy, max_steps: int = 1000) -> "SimulationResult":
        """Fly the session under a burn policy until touchdown.

        Args:
            policy: Called with (state copy, params), returns a burn
            max_steps: Upper bound on the number of steps taken

        Returns:
            SimulationResult from the recorded history
        """
        for _ in range(max_steps):
            if self.state.is_terminal:
                break
            self.step(policy(self.get_state(), self.params))
        else:
            if not self.state.is_terminal:
                logger.warning("Run stopped after %d steps without touchdown", max_steps)

        return SimulationResult.from_simulator(self)

    def reset(self, params: SimulationParameters | None = None) -> None:
        """Restart the session, optionally with new parameters."""
        if params is not None:
            self.params = params
        self.state = create_session(self.params)
        self._history = [self.state.copy()]
        self.mission_log.record_start(self.params, self.state)

    def get_history(self) -> list[SimulationState]:
        """Get recorded state history."""
        return self._history.copy()

    def clear_history(self) -> None:
        """Clear recorded state history."""
        self._history = [self.state.copy()]

    @property
    def time(self) -> float:
        """Current simulation time [s]."""
        return self.state.elapsed_time

    @property
    def altitude(self) -> float:
        """Current altitude [m]."""
        return self.state.altitude

    @property
    def status(self) -> FlightStatus:
        """Current flight phase."""
        return self.state.status

    @property
    def is_terminal(self) -> bool:
        """True once the session has landed or crashed."""
        return self.state.is_terminal


# =============================================================================
# Results
# =============================================================================


@checked
@dataclass
class SimulationResult:
    """Recorded trajectory of a descent session."""
    states: list[SimulationState]

    @property
    def time(self) -> NDArray[np.float64]:
        """Time array [s]."""
        return np.array([s.elapsed_time for s in self.states])

    @property
    def altitude(self) -> NDArray[np.float64]:
        """Altitude history [m]."""
        return np.array([s.altitude for s in self.states])

    @property
    def velocity_down(self) -> NDArray[np.float64]:
        """Down-positive velocity history [m/s]."""
        return np.array([s.velocity_down for s in self.states])

    @property
    def fuel(self) -> NDArray[np.float64]:
        """Fuel history [burn units]."""
        return np.array([s.fuel for s in self.states])

    @property
    def status(self) -> list[FlightStatus]:
        """Status history."""
        return [s.status for s in self.states]

    @property
    def final_status(self) -> FlightStatus:
        """Status of the last recorded state."""
        return self.states[-1].status

    @classmethod
    def from_simulator(cls, sim: Simulator) -> "SimulationResult":
        """Create result from simulator history."""
        return cls(states=sim.get_history())

    def to_dataframe(self):
        """Convert to Polars DataFrame."""
        import polars as pl

        return pl.DataFrame({
            "time": self.time,
            "altitude": self.altitude,
            "velocity_down": self.velocity_down,
            "fuel": self.fuel,
            "status": [s.value for s in self.status],
        })
