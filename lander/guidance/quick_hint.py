"""Quick-hint burn guidance.

A rule-of-thumb burn schedule: the closer to the ground or the faster the
descent, the harder the burn. It is the advice the game's "Hint" button
gives, and it doubles as a simple autopilot.

Schedule (fractions of max_burn_per_step, first match wins):
1. Below 200 m: 90%
2. Below 500 m: 70%
3. Descending faster than 40 m/s: 60%
4. Descending faster than 20 m/s: 40%
5. Otherwise: 20%

Example:
    >>> from lander.guidance import QuickHintGuidance
    >>> from lander.simulation import Simulator
    >>>
    >>> guidance = QuickHintGuidance()
    >>> result = Simulator().run(guidance)
"""

import math
from dataclasses import dataclass

from lander._checks import checked
from lander.dynamics.state import SimulationState
from lander.parameters import SimulationParameters


@checked
@dataclass
class QuickHintGuidance:
    """Altitude and speed banded burn schedule.

    Attributes:
        low_altitude: Altitude below which the hardest burn applies [m]
        mid_altitude: Altitude below which the second band applies [m]
        fast_speed: Descent speed for the third band [m/s]
        moderate_speed: Descent speed for the fourth band [m/s]
        fractions: Burn fractions for the five bands, in schedule order
    """
    low_altitude: float = 200.0
    mid_altitude: float = 500.0
    fast_speed: float = 40.0
    moderate_speed: float = 20.0
    fractions: tuple[float, float, float, float, float] = (0.9, 0.7, 0.6, 0.4, 0.2)

    def __post_init__(self) -> None:
        """Validate inputs."""
        if self.low_altitude > self.mid_altitude:
            raise ValueError("low_altitude must not exceed mid_altitude")
        if self.moderate_speed > self.fast_speed:
            raise ValueError("moderate_speed must not exceed fast_speed")
        if any(not 0.0 <= f <= 1.0 for f in self.fractions):
            raise ValueError("fractions must lie in [0, 1]")

    def burn_fraction(self, state: SimulationState) -> float:
        """Fraction of the maximum burn suggested for this state."""
        if state.altitude < self.low_altitude:
            return self.fractions[0]
        if state.altitude < self.mid_altitude:
            return self.fractions[1]
        if state.velocity_down > self.fast_speed:
            return self.fractions[2]
        if state.velocity_down > self.moderate_speed:
            return self.fractions[3]
        return self.fractions[4]

    def burn_command(
        self,
        state: SimulationState,
        params: SimulationParameters,
    ) -> float:
        """Suggested burn for the next step [burn units].

        Returns 0 once the descent is over.
        """
        if state.is_terminal:
            return 0.0
        return float(math.ceil(params.max_burn_per_step * self.burn_fraction(state)))

    def __call__(
        self,
        state: SimulationState,
        params: SimulationParameters,
    ) -> float:
        return self.burn_command(state, params)
