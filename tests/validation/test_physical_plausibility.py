"""Validation tests for physical plausibility of preset loads."""

from __future__ import annotations

import unittest
from dataclasses import replace

import numpy as np

from aerosim.aero.forces import evaluate
from aerosim.analysis.sweep import ride_height_sweep, speed_sweep
from aerosim.presets import apply_preset, available_presets


class PhysicalValidationTests(unittest.TestCase):
    """Plausibility checks against realistic open-wheel racing ranges."""

    def test_preset_loads_stay_realistic_at_top_speed(self) -> None:
        """Keep downforce, efficiency and balance within racing bounds."""
        for name in available_presets():
            with self.subTest(preset=name):
                result = evaluate(replace(apply_preset(name), speed_kmh=300.0))
                self.assertGreater(result.total_downforce, 10_000.0)
                self.assertLess(result.total_downforce, 50_000.0)
                self.assertGreater(result.efficiency, 2.0)
                self.assertLess(result.efficiency, 8.0)
                self.assertGreater(result.front_balance, 10.0)
                self.assertLess(result.front_balance, 50.0)

    def test_sweeps_stay_finite_for_all_presets(self) -> None:
        """Produce finite sweep values for every preset."""
        for name in available_presets():
            params = apply_preset(name)
            speed_values = np.array([[p.downforce, p.drag] for p in speed_sweep(params)])
            height_values = np.array(
                [[p.downforce, p.front_balance] for p in ride_height_sweep(params)]
            )
            self.assertTrue(np.all(np.isfinite(speed_values)))
            self.assertTrue(np.all(np.isfinite(height_values)))
            self.assertTrue(np.all(speed_values > 0.0))


if __name__ == "__main__":
    unittest.main()
