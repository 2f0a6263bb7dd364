"""Aerodynamic load model for a simplified open-wheel race car."""

from aerosim.aero.forces import AeroResult, evaluate
from aerosim.aero.params import SimulationParameters, build_simulation_parameters
from aerosim.analysis.snapshot import SnapshotSlot, diff_snapshot, save_snapshot
from aerosim.analysis.sweep import ride_height_sweep, speed_sweep
from aerosim.presets import apply_preset

__all__ = [
    "AeroResult",
    "SimulationParameters",
    "SnapshotSlot",
    "apply_preset",
    "build_simulation_parameters",
    "diff_snapshot",
    "evaluate",
    "ride_height_sweep",
    "save_snapshot",
    "speed_sweep",
]
