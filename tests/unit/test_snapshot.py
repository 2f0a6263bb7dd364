"""Unit tests for snapshot capture and comparison."""

from __future__ import annotations

import unittest
from dataclasses import replace

from aerosim.aero.forces import evaluate
from aerosim.analysis.snapshot import SnapshotSlot, diff_snapshot, save_snapshot
from tests.helpers import sample_simulation_parameters


class SnapshotTests(unittest.TestCase):
    """Tests for single-slot snapshot behavior."""

    def test_unchanged_result_has_zero_difference(self) -> None:
        """Report zero change against an identical live result."""
        params = sample_simulation_parameters()
        result = evaluate(params)
        delta = diff_snapshot(result, save_snapshot(params, result))
        self.assertIsNotNone(delta)
        assert delta is not None
        self.assertEqual(delta.downforce, 0.0)
        self.assertEqual(delta.drag, 0.0)

    def test_missing_snapshot_yields_no_difference(self) -> None:
        """Return ``None`` when nothing was captured."""
        result = evaluate(sample_simulation_parameters())
        self.assertIsNone(diff_snapshot(result, None))
        self.assertIsNone(SnapshotSlot().diff(result))

    def test_difference_is_live_minus_snapshot(self) -> None:
        """Subtract snapshot totals from the live totals."""
        params = sample_simulation_parameters()
        baseline = evaluate(params)
        live = evaluate(replace(params, drs_open=True))
        delta = diff_snapshot(live, save_snapshot(params, baseline))
        assert delta is not None
        self.assertEqual(delta.downforce, live.total_downforce - baseline.total_downforce)
        self.assertLess(delta.drag, 0.0)
        self.assertAlmostEqual(delta.drag_kn, delta.drag / 1000.0, places=12)
        self.assertAlmostEqual(delta.downforce_kn, delta.downforce / 1000.0, places=12)

    def test_slot_keeps_only_most_recent_snapshot(self) -> None:
        """Overwrite the stored snapshot on every save."""
        slot = SnapshotSlot()
        first_params = sample_simulation_parameters()
        slot.save(first_params, evaluate(first_params))
        second_params = replace(first_params, speed_kmh=250.0)
        second = slot.save(second_params, evaluate(second_params))

        self.assertIs(slot.latest, second)
        delta = slot.diff(evaluate(second_params))
        assert delta is not None
        self.assertEqual(delta.downforce, 0.0)

        slot.clear()
        self.assertIsNone(slot.latest)


if __name__ == "__main__":
    unittest.main()
