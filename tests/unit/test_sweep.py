"""Unit tests for speed and ride-height sweeps."""

from __future__ import annotations

import unittest
from dataclasses import replace

import numpy as np

from aerosim.aero.forces import evaluate
from aerosim.analysis.sweep import (
    DEFAULT_RIDE_HEIGHT_RANGE,
    DEFAULT_SPEED_RANGE,
    SpeedSweepPoint,
    SweepRange,
    ride_height_sweep,
    speed_sweep,
    sweep_arrays,
)
from aerosim.utils.exceptions import ConfigurationError
from tests.helpers import sample_simulation_parameters


class SweepRangeTests(unittest.TestCase):
    """Tests for inclusive sweep grids."""

    def test_default_ranges_have_expected_sizes(self) -> None:
        """Produce 29 speed points and 31 ride-height points."""
        self.assertEqual(len(DEFAULT_SPEED_RANGE), 29)
        self.assertEqual(len(DEFAULT_RIDE_HEIGHT_RANGE), 31)
        np.testing.assert_allclose(DEFAULT_SPEED_RANGE.values()[[0, -1]], [60.0, 340.0])

    def test_fractional_steps_include_maximum(self) -> None:
        """Include the upper bound when it is a float multiple of the step."""
        values = SweepRange(minimum=0.0, maximum=0.3, step=0.1).values()
        self.assertEqual(values.size, 4)
        self.assertAlmostEqual(float(values[-1]), 0.3, places=12)

    def test_degenerate_range_yields_single_point(self) -> None:
        """Return one point when minimum equals maximum."""
        self.assertEqual(len(SweepRange(minimum=5.0, maximum=5.0, step=1.0)), 1)

    def test_invalid_ranges_are_rejected(self) -> None:
        """Raise configuration errors for invalid bounds or steps."""
        with self.assertRaises(ConfigurationError):
            SweepRange(minimum=0.0, maximum=10.0, step=0.0).validate()
        with self.assertRaises(ConfigurationError):
            SweepRange(minimum=10.0, maximum=0.0, step=1.0).validate()
        with self.assertRaises(ConfigurationError):
            SweepRange(minimum=0.0, maximum=float("inf"), step=1.0).validate()


class SpeedSweepTests(unittest.TestCase):
    """Tests for force-vs-speed series."""

    def test_default_sweep_is_ordered_and_complete(self) -> None:
        """Return 29 points with strictly ascending speed."""
        points = speed_sweep(sample_simulation_parameters())
        speeds = np.array([point.speed for point in points])
        self.assertEqual(len(points), 29)
        self.assertTrue(np.all(np.diff(speeds) > 0.0))
        self.assertEqual(speeds[0], 60.0)
        self.assertEqual(speeds[-1], 340.0)

    def test_downforce_scales_with_speed_squared(self) -> None:
        """Keep downforce proportional to speed squared."""
        points = speed_sweep(sample_simulation_parameters())
        ratios = np.array([point.downforce / point.speed**2 for point in points])
        np.testing.assert_allclose(ratios, ratios[0], rtol=1e-9)

    def test_points_match_single_evaluation_in_kilonewtons(self) -> None:
        """Report forces of each point in kN from the aggregator."""
        params = sample_simulation_parameters()
        points = speed_sweep(params, minimum=200.0, maximum=200.0, step=10.0)
        result = evaluate(replace(params, speed_kmh=200.0))
        point = points[0]
        self.assertAlmostEqual(point.downforce, result.total_downforce / 1000.0, places=12)
        self.assertAlmostEqual(point.drag, result.total_drag / 1000.0, places=12)
        self.assertAlmostEqual(
            point.front_downforce + point.rear_downforce + point.floor_downforce,
            point.downforce,
            places=9,
        )

    def test_sweep_ignores_parameter_speed(self) -> None:
        """Produce identical series regardless of the current speed."""
        params = sample_simulation_parameters()
        self.assertEqual(speed_sweep(params), speed_sweep(replace(params, speed_kmh=90.0)))


class RideHeightSweepTests(unittest.TestCase):
    """Tests for force-vs-ride-height series."""

    def test_default_sweep_is_ordered_and_complete(self) -> None:
        """Return 31 points from 20 mm to 80 mm."""
        points = ride_height_sweep(sample_simulation_parameters())
        heights = [point.ride_height for point in points]
        self.assertEqual(len(points), 31)
        self.assertEqual(heights[0], 20.0)
        self.assertEqual(heights[-1], 80.0)
        self.assertEqual(heights, sorted(heights))

    def test_downforce_and_front_balance_react_to_height(self) -> None:
        """Lose floor downforce and shift balance forward as height rises."""
        points = ride_height_sweep(sample_simulation_parameters())
        downforce = np.array([point.downforce for point in points])
        balance = np.array([point.front_balance for point in points])
        self.assertTrue(np.all(np.diff(downforce) <= 0.0))
        self.assertTrue(np.all(np.diff(balance) >= 0.0))
        self.assertGreater(balance[-1], balance[0])

    def test_sweep_holds_speed_fixed(self) -> None:
        """Scale the whole series with the current dynamic pressure."""
        params = sample_simulation_parameters()
        slow = ride_height_sweep(replace(params, speed_kmh=100.0))
        fast = ride_height_sweep(replace(params, speed_kmh=200.0))
        for slow_point, fast_point in zip(slow, fast):
            self.assertAlmostEqual(fast_point.downforce, 4.0 * slow_point.downforce, places=9)
            self.assertAlmostEqual(fast_point.front_balance, slow_point.front_balance, places=9)


class SweepArrayTests(unittest.TestCase):
    """Tests for the column view used by plots."""

    def test_columns_follow_field_order(self) -> None:
        """Transpose points into arrays keyed by field name."""
        points = speed_sweep(sample_simulation_parameters(), minimum=100.0, maximum=120.0)
        columns = sweep_arrays(points)
        self.assertEqual(
            list(columns),
            [
                "speed",
                "downforce",
                "drag",
                "front_downforce",
                "rear_downforce",
                "floor_downforce",
            ],
        )
        np.testing.assert_allclose(columns["speed"], [100.0, 110.0, 120.0])

    def test_empty_or_invalid_input_is_rejected(self) -> None:
        """Raise configuration errors for empty or non-dataclass input."""
        with self.assertRaises(ConfigurationError):
            sweep_arrays([])
        with self.assertRaises(ConfigurationError):
            sweep_arrays([{"speed": 1.0}])
        self.assertIsInstance(
            speed_sweep(sample_simulation_parameters(), minimum=60.0, maximum=60.0)[0],
            SpeedSweepPoint,
        )


if __name__ == "__main__":
    unittest.main()
