"""Human-readable telemetry for descent sessions.

Formatting helpers for altitude, speed and fuel readouts, and a bounded
mission log that keeps the newest line first.

Example:
    >>> from lander.telemetry import format_meters, format_speed
    >>> format_meters(1500.0)
    '1.50 km'
    >>> format_speed(-3.5)
    '3.50 m/s up'
"""

from dataclasses import dataclass, field

from lander._checks import checked
from lander.dynamics.state import FlightStatus, SimulationState
from lander.parameters import SimulationParameters

MAX_LOG_ENTRIES: int = 200


# =============================================================================
# Formatting
# =============================================================================


@checked
def format_meters(m: float) -> str:
    """Format a distance, switching to km at 1000 m."""
    if m >= 1000:
        return f"{m / 1000:.2f} km"
    return f"{m:.1f} m"


@checked
def format_speed(velocity_down: float) -> str:
    """Format a down-positive velocity with its direction."""
    v = abs(velocity_down)
    if v >= 1000:
        return f"{v / 1000:.2f} km/s"
    direction = "down" if velocity_down >= 0 else "up"
    return f"{v:.2f} m/s {direction}"


@checked
def format_fuel(fuel: float) -> str:
    return f"{max(0.0, fuel):.0f} u"


def _format_time(t: float) -> str:
    return f"{t:g}"


# =============================================================================
# Mission Log
# =============================================================================


@checked
@dataclass
class MissionLog:
    """Bounded mission log, newest line first.

    Attributes:
        max_entries: Number of lines retained
        entries: Log lines, newest first
    """
    max_entries: int = MAX_LOG_ENTRIES
    entries: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {self.max_entries}")

    def push(self, line: str) -> None:
        """Add a line at the top, dropping the oldest beyond max_entries."""
        self.entries.insert(0, line)
        del self.entries[self.max_entries:]

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def latest(self) -> str | None:
        return self.entries[0] if self.entries else None

    def record_start(self, params: SimulationParameters, state: SimulationState) -> None:
        """Log the session start banner."""
        self.clear()
        self.push("CONTROL: Lunar Module powered descent initialized.")
        self.push(
            f"Starting Altitude: {format_meters(state.altitude)}, "
            f"Velocity: {format_speed(state.velocity_down)}, "
            f"Fuel: {format_fuel(state.fuel)}"
        )
        self.push(
            f"Time step: {_format_time(params.dt)}s, "
            f"Max burn/turn: {_format_time(params.max_burn_per_step)}, "
            f"Max upward accel: {params.max_upward_accel:.2f} m/s²"
        )

    def record_step(
        self,
        burn: float,
        fuel_before: float,
        state: SimulationState,
        fuel_exhausted: bool = False,
    ) -> None:
        """Log a step that ended airborne.

        Args:
            burn: Clamped burn commanded for the step
            fuel_before: Fuel on board when the step began
            state: State after the step
            fuel_exhausted: True if the tank ran dry during the step
        """
        line = f"T+{_format_time(state.elapsed_time)}s | Burn={_format_time(burn)}"
        if fuel_before <= 0 and burn > 0:
            line += " (No fuel to burn!)"
        line += (
            f" | Alt={format_meters(state.altitude)}"
            f" | Vel={format_speed(state.velocity_down)}"
            f" | Fuel={format_fuel(state.fuel)}"
        )
        if fuel_exhausted:
            self.push("WARNING: Fuel exhausted. You are in ballistic descent.")
        self.push(line)

    def record_contact(self, burn: float, state: SimulationState) -> None:
        """Log a touchdown or impact found inside a step."""
        t = f"{state.elapsed_time:.1f}"
        self.push(f"T+{t}s | Burn={_format_time(burn)} (partial) | Contact imminent")
        speed = format_speed(state.velocity_down)
        if state.status is FlightStatus.LANDED:
            self.push(f"TOUCHDOWN at T+{t}s - SAFE LANDING! Vertical speed: {speed}")
        else:
            self.push(f"IMPACT at T+{t}s - CRASH. Vertical speed: {speed}")

    def record_ground_resolution(self, state: SimulationState) -> None:
        """Log the outcome for a lander that was already on the ground."""
        speed = format_speed(state.velocity_down)
        if state.status is FlightStatus.LANDED:
            self.push(f"TOUCHDOWN - SAFE LANDING! Vertical speed: {speed}")
        else:
            self.push(f"IMPACT - CRASH. Vertical speed: {speed}")
