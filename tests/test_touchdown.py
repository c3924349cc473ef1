"""Unit tests for the closed-form touchdown solver.

Verifies contact times against the kinematics they are solved from.
"""

import math

import pytest
from numpy.testing import assert_allclose

from lander.dynamics import FlightStatus, classify_touchdown, solve_contact

# =============================================================================
# Linear (zero acceleration) Regime
# =============================================================================


class TestLinearRegime:
    """Uniform motion, |a| below epsilon."""

    def test_exact_contact_time(self):
        """100 m at 10 m/s reaches the ground at t = 10 s."""
        contact = solve_contact(100.0, 10.0, 0.0, 20.0)

        assert contact is not None
        assert contact.time == pytest.approx(10.0)
        assert contact.velocity == pytest.approx(10.0)

    def test_contact_beyond_interval(self):
        assert solve_contact(100.0, 10.0, 0.0, 5.0) is None

    def test_contact_at_interval_end_included(self):
        contact = solve_contact(100.0, 10.0, 0.0, 10.0)

        assert contact is not None
        assert contact.time == pytest.approx(10.0)

    def test_ascending_never_contacts(self):
        assert solve_contact(100.0, -10.0, 0.0, 1000.0) is None

    def test_hovering_never_contacts(self):
        assert solve_contact(100.0, 0.0, 1e-10, 1000.0) is None


# =============================================================================
# Quadratic Regime
# =============================================================================


class TestQuadraticRegime:
    """Constant nonzero acceleration."""

    def test_free_fall_from_rest(self):
        """h = 0.5 g t^2 from rest."""
        g = 1.62
        h = 81.0
        contact = solve_contact(h, 0.0, g, 100.0)

        assert contact is not None
        assert_allclose(contact.time, math.sqrt(2 * h / g), rtol=1e-12)
        assert_allclose(contact.velocity, math.sqrt(2 * g * h), rtol=1e-12)

    @pytest.mark.parametrize(
        ("h", "v", "a"),
        [
            (500.0, 20.0, 1.62),
            (10.0, 10.0, -4.38),
            (0.5, 1.0, 1.62),
            (1500.0, 50.0, -0.5),
        ],
    )
    def test_root_satisfies_equation_of_motion(self, h, v, a):
        contact = solve_contact(h, v, a, 1000.0)

        assert contact is not None
        t = contact.time
        assert h - v * t - 0.5 * a * t * t == pytest.approx(0.0, abs=1e-9)
        assert contact.velocity == pytest.approx(v + a * t)
        # Energy form of the same kinematics
        assert contact.velocity**2 == pytest.approx(v * v + 2 * a * h)

    def test_braking_contact_takes_earliest_root(self):
        """Decelerating lander crosses the ground on the way down first."""
        h, v, a = 10.0, 10.0, -4.38
        contact = solve_contact(h, v, a, 10.0)

        disc = v * v - 2 * (-a) * h
        expected = (v - math.sqrt(disc)) / (-a)
        assert contact is not None
        assert contact.time == pytest.approx(expected)
        assert contact.velocity > 0

    def test_braking_stops_short_of_ground(self):
        """Stopping distance v^2/(2|a|) shorter than h: no contact."""
        assert solve_contact(100.0, 10.0, -4.38, 1000.0) is None

    def test_tangent_contact_with_rounding_noise(self):
        """Discriminant that should be zero still gives a contact."""
        v = 10.0
        a = -4.0
        h = v * v / (2 * -a)  # Comes to rest exactly at the ground
        contact = solve_contact(h, v, a, 10.0)

        assert contact is not None
        assert contact.time == pytest.approx(v / -a, rel=1e-6)
        assert contact.velocity == pytest.approx(0.0, abs=1e-5)

    def test_contact_after_interval(self):
        assert solve_contact(1500.0, 50.0, 1.62, 10.0) is None

    def test_zero_duration(self):
        assert solve_contact(10.0, 10.0, 1.62, 0.0) is None


# =============================================================================
# Classification
# =============================================================================


class TestClassifyTouchdown:
    """Landed iff |v| <= safe speed."""

    def test_slow_lands(self):
        assert classify_touchdown(1.0, 2.0) is FlightStatus.LANDED

    def test_boundary_lands(self):
        assert classify_touchdown(2.0, 2.0) is FlightStatus.LANDED

    def test_fast_crashes(self):
        assert classify_touchdown(2.0001, 2.0) is FlightStatus.CRASHED

    def test_upward_velocity_uses_magnitude(self):
        assert classify_touchdown(-1.5, 2.0) is FlightStatus.LANDED
        assert classify_touchdown(-3.0, 2.0) is FlightStatus.CRASHED

    def test_zero_threshold(self):
        assert classify_touchdown(0.0, 0.0) is FlightStatus.LANDED
        assert classify_touchdown(0.1, 0.0) is FlightStatus.CRASHED
