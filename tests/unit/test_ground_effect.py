"""Unit tests for the floor and diffuser ground-effect model."""

from __future__ import annotations

import unittest

import numpy as np

from aerosim.aero.ground_effect import (
    FLOOR_BASE_LIFT_COEFFICIENT,
    clamp_ride_height,
    diffuser_angle_factor,
    floor_drag_coefficient,
    floor_lift_coefficient,
    stall_factor,
)


class GroundEffectTests(unittest.TestCase):
    """Tests for ride-height, stall and diffuser-angle shaping."""

    def test_ride_height_is_clamped_to_model_band(self) -> None:
        """Clamp ride heights outside ``[10, 120]`` mm silently."""
        self.assertEqual(clamp_ride_height(2.0), 10.0)
        self.assertEqual(clamp_ride_height(500.0), 120.0)
        self.assertEqual(clamp_ride_height(38.0), 38.0)
        k = FLOOR_BASE_LIFT_COEFFICIENT
        self.assertEqual(
            floor_lift_coefficient(-5.0, k, 12.0),
            floor_lift_coefficient(10.0, k, 12.0),
        )
        self.assertEqual(
            floor_lift_coefficient(300.0, k, 12.0),
            floor_lift_coefficient(120.0, k, 12.0),
        )

    def test_stall_ramp_is_continuous(self) -> None:
        """Ramp stall effectiveness linearly from 40 % to 100 % below 25 mm."""
        self.assertAlmostEqual(stall_factor(0.0), 0.4, places=12)
        self.assertAlmostEqual(stall_factor(12.5), 0.7, places=12)
        self.assertAlmostEqual(stall_factor(24.999999), 1.0, places=5)
        self.assertEqual(stall_factor(25.0), 1.0)
        self.assertEqual(stall_factor(80.0), 1.0)

    def test_lift_decays_with_ride_height_at_optimal_angle(self) -> None:
        """Keep floor lift non-increasing from 10 mm to 120 mm."""
        heights = np.linspace(10.0, 120.0, 221)
        values = np.array(
            [floor_lift_coefficient(h, FLOOR_BASE_LIFT_COEFFICIENT, 12.0) for h in heights]
        )
        self.assertTrue(np.all(np.diff(values) <= 0.0))

    def test_saturation_caps_lift_at_multiple_of_base(self) -> None:
        """Cap lift at exactly ``saturation_factor * base`` when exceeded."""
        k = 0.9
        capped = floor_lift_coefficient(10.0, k, 12.0, optimal_ride_height_mm=100.0)
        self.assertEqual(capped, 3.0 * k)
        below = floor_lift_coefficient(1.0, k, 12.0, optimal_ride_height_mm=100.0)
        self.assertEqual(below, 3.0 * k)

    def test_default_geometry_stays_below_saturation(self) -> None:
        """Stall penalty keeps the default model under its cap."""
        k = FLOOR_BASE_LIFT_COEFFICIENT
        value = floor_lift_coefficient(10.0, k, 12.0)
        self.assertAlmostEqual(value, k * 3.5 * 0.64, places=12)
        self.assertLess(value, 3.0 * k)

    def test_diffuser_angle_peaks_at_twelve_degrees(self) -> None:
        """Reach maximum floor lift at a 12 deg diffuser angle."""
        angles = np.arange(0.0, 24.5, 0.5)
        values = [floor_lift_coefficient(40.0, 0.9, angle) for angle in angles]
        self.assertEqual(float(angles[int(np.argmax(values))]), 12.0)
        self.assertAlmostEqual(diffuser_angle_factor(12.0), 1.0, places=12)
        self.assertAlmostEqual(
            diffuser_angle_factor(4.0),
            diffuser_angle_factor(20.0),
            places=12,
        )
        self.assertGreater(diffuser_angle_factor(60.0), 0.6)

    def test_floor_drag_couples_linearly_to_lift(self) -> None:
        """Derive floor drag as ``0.12 + 0.02 * Cl``."""
        self.assertAlmostEqual(floor_drag_coefficient(0.0), 0.12, places=12)
        self.assertAlmostEqual(floor_drag_coefficient(1.5), 0.15, places=12)


if __name__ == "__main__":
    unittest.main()
