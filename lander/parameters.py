"""Run parameters for the lunar descent simulation.

Every tunable of a run lives in one frozen dataclass. Values are checked
once, when the parameters are built; stepping never re-validates them.

Example:
    >>> from lander.parameters import SimulationParameters
    >>>
    >>> params = SimulationParameters(gravity=1.62, fuel0=800.0)
    >>> harder = params.with_overrides(max_upward_accel=4.0)
"""

import math
from dataclasses import dataclass, fields, replace

from lander._checks import checked

# =============================================================================
# Defaults
# =============================================================================

LUNAR_GRAVITY: float = 1.62  # [m/s^2]
MAX_UPWARD_ACCEL: float = 6.0  # Upward accel at full burn [m/s^2]
MAX_BURN_PER_STEP: float = 200.0  # [burn units]
SAFE_LANDING_SPEED: float = 2.0  # [m/s]
ALTITUDE0: float = 1500.0  # [m]
VELOCITY0: float = 50.0  # Down-positive [m/s]
FUEL0: float = 1200.0  # [burn units]
DT: float = 10.0  # Seconds per turn [s]


@checked
@dataclass(frozen=True)
class SimulationParameters:
    """Immutable configuration of a descent run.

    Attributes:
        gravity: Gravitational acceleration, down-positive [m/s^2]
        max_upward_accel: Upward acceleration at full burn [m/s^2]
        max_burn_per_step: Largest burn accepted per step [burn units]
        safe_landing_speed: Highest touchdown speed that still lands [m/s]
        altitude0: Initial altitude [m]
        velocity0: Initial downward velocity [m/s]
        fuel0: Initial fuel [burn units]
        dt: Nominal step duration [s]
    """
    gravity: float = LUNAR_GRAVITY
    max_upward_accel: float = MAX_UPWARD_ACCEL
    max_burn_per_step: float = MAX_BURN_PER_STEP
    safe_landing_speed: float = SAFE_LANDING_SPEED
    altitude0: float = ALTITUDE0
    velocity0: float = VELOCITY0
    fuel0: float = FUEL0
    dt: float = DT

    def __post_init__(self) -> None:
        """Validate parameters."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value}")

        if self.gravity <= 0:
            raise ValueError(f"gravity must be positive, got {self.gravity}")
        if self.max_upward_accel <= 0:
            raise ValueError(
                f"max_upward_accel must be positive, got {self.max_upward_accel}"
            )
        if self.max_burn_per_step <= 0:
            raise ValueError(
                f"max_burn_per_step must be positive, got {self.max_burn_per_step}"
            )
        if self.safe_landing_speed < 0:
            raise ValueError(
                f"safe_landing_speed must be non-negative, got {self.safe_landing_speed}"
            )
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")

    @classmethod
    def classic(cls) -> "SimulationParameters":
        """Low, fast start in the style of the 1970s text game."""
        return cls(
            altitude0=240.0,
            velocity0=40.0,
            fuel0=1200.0,
            max_burn_per_step=200.0,
            max_upward_accel=6.0,
            dt=10.0,
        )

    def with_overrides(self, **changes: float) -> "SimulationParameters":
        """Return a validated copy with some fields replaced.

        Raises:
            ValueError: If the resulting parameters are invalid.
            TypeError: If a field name is not recognized.
        """
        return replace(self, **changes)


DEFAULT_PARAMETERS = SimulationParameters()
