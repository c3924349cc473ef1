"""Vertical descent state for the lander.

The state is one-dimensional and uses a down-positive convention:
- altitude: height above the surface [m], never negative
- velocity_down: vertical velocity [m/s], positive toward the ground
- fuel: remaining fuel [burn units], never negative
- elapsed_time: simulation time [s]
- status: flight phase (see FlightStatus)

Status transitions:
    FLYING -> OUT_OF_FUEL -> LANDED | CRASHED
    FLYING -> LANDED | CRASHED

LANDED and CRASHED are terminal.
"""

from dataclasses import dataclass
from enum import Enum

from lander._checks import checked


class FlightStatus(Enum):
    """Flight phase of a descent."""

    FLYING = "flying"
    OUT_OF_FUEL = "out_of_fuel"  # Ballistic, thrust unavailable
    LANDED = "landed"
    CRASHED = "crashed"

    @property
    def is_terminal(self) -> bool:
        """True for LANDED and CRASHED."""
        return self in (FlightStatus.LANDED, FlightStatus.CRASHED)


@checked
@dataclass
class SimulationState:
    """Mutable state of one descent session.

    Attributes:
        altitude: Height above the surface [m]
        velocity_down: Vertical velocity, positive descending [m/s]
        fuel: Remaining fuel [burn units]
        elapsed_time: Simulation time [s]
        status: Flight phase
    """
    altitude: float
    velocity_down: float
    fuel: float
    elapsed_time: float = 0.0
    status: FlightStatus = FlightStatus.FLYING

    def __post_init__(self) -> None:
        """Clamp quantities that cannot be negative."""
        self.altitude = max(0.0, float(self.altitude))
        self.velocity_down = float(self.velocity_down)
        self.fuel = max(0.0, float(self.fuel))
        self.elapsed_time = max(0.0, float(self.elapsed_time))

    def copy(self) -> "SimulationState":
        """Create a copy of this state."""
        return SimulationState(
            altitude=self.altitude,
            velocity_down=self.velocity_down,
            fuel=self.fuel,
            elapsed_time=self.elapsed_time,
            status=self.status,
        )

    @property
    def is_terminal(self) -> bool:
        """True once the lander has landed or crashed."""
        return self.status.is_terminal

    @property
    def on_ground(self) -> bool:
        """True when the lander is at or below the surface."""
        return self.altitude <= 0.0
