"""Unit tests for quick-hint burn guidance."""

import pytest

from lander.dynamics import FlightStatus, SimulationState
from lander.guidance import QuickHintGuidance
from lander.parameters import SimulationParameters
from lander.simulation import Simulator

PARAMS = SimulationParameters()


def make_state(altitude: float, velocity_down: float) -> SimulationState:
    return SimulationState(altitude=altitude, velocity_down=velocity_down, fuel=1200.0)


class TestQuickHintSchedule:
    """Test the banded schedule."""

    @pytest.mark.parametrize(
        ("altitude", "velocity_down", "expected"),
        [
            (150.0, 5.0, 180.0),     # Low altitude
            (150.0, 80.0, 180.0),    # Low altitude wins over speed
            (300.0, 5.0, 140.0),     # Mid altitude
            (1500.0, 50.0, 120.0),   # Fast descent
            (1000.0, 30.0, 80.0),    # Moderate descent
            (1000.0, 40.0, 80.0),    # Exactly 40 m/s is not "faster than"
            (1000.0, 10.0, 40.0),    # Slow
            (1000.0, -10.0, 40.0),   # Climbing
        ],
    )
    def test_bands(self, altitude, velocity_down, expected):
        guidance = QuickHintGuidance()

        assert guidance.burn_command(make_state(altitude, velocity_down), PARAMS) == expected

    def test_rounds_up(self):
        params = SimulationParameters(max_burn_per_step=15.0)
        guidance = QuickHintGuidance()

        # 0.2 * 15 = 3.0, 0.9 * 15 = 13.5 -> 14
        assert guidance.burn_command(make_state(1000.0, 0.0), params) == 3.0
        assert guidance.burn_command(make_state(10.0, 0.0), params) == 14.0

    def test_terminal_state_gets_no_burn(self):
        state = make_state(0.0, 1.0)
        state.status = FlightStatus.LANDED

        assert QuickHintGuidance().burn_command(state, PARAMS) == 0.0

    def test_callable_as_policy(self):
        guidance = QuickHintGuidance()
        state = make_state(300.0, 5.0)

        assert guidance(state, PARAMS) == guidance.burn_command(state, PARAMS)

    def test_custom_bands(self):
        guidance = QuickHintGuidance(
            low_altitude=50.0,
            mid_altitude=100.0,
            fractions=(1.0, 0.5, 0.5, 0.25, 0.0),
        )

        assert guidance.burn_command(make_state(40.0, 0.0), PARAMS) == 200.0
        assert guidance.burn_command(make_state(1000.0, 0.0), PARAMS) == 0.0


class TestQuickHintValidation:
    """Test configuration checks."""

    def test_altitude_bands_ordered(self):
        with pytest.raises(ValueError, match="low_altitude"):
            QuickHintGuidance(low_altitude=600.0, mid_altitude=500.0)

    def test_speed_bands_ordered(self):
        with pytest.raises(ValueError, match="moderate_speed"):
            QuickHintGuidance(fast_speed=10.0, moderate_speed=20.0)

    def test_fractions_in_range(self):
        with pytest.raises(ValueError, match="fractions"):
            QuickHintGuidance(fractions=(1.5, 0.7, 0.6, 0.4, 0.2))


class TestQuickHintFlight:
    """Fly full sessions on the autopilot."""

    @pytest.mark.parametrize(
        "params",
        [SimulationParameters(), SimulationParameters.classic()],
    )
    def test_reaches_the_ground(self, params):
        sim = Simulator(params)
        result = sim.run(QuickHintGuidance(), max_steps=500)

        assert result.final_status in (FlightStatus.LANDED, FlightStatus.CRASHED)
        assert result.states[-1].altitude == 0.0
