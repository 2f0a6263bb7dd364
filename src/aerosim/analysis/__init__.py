"""Sweeps, snapshots and reporting on top of the aerodynamic model."""

from aerosim.analysis.kpi import AeroKpis, compute_kpis
from aerosim.analysis.snapshot import (
    Snapshot,
    SnapshotDiff,
    SnapshotSlot,
    diff_snapshot,
    save_snapshot,
)
from aerosim.analysis.sweep import (
    DEFAULT_RIDE_HEIGHT_RANGE,
    DEFAULT_SPEED_RANGE,
    RideHeightSweepPoint,
    SpeedSweepPoint,
    SweepRange,
    ride_height_sweep,
    speed_sweep,
    sweep_arrays,
)

__all__ = [
    "DEFAULT_RIDE_HEIGHT_RANGE",
    "DEFAULT_SPEED_RANGE",
    "AeroKpis",
    "RideHeightSweepPoint",
    "Snapshot",
    "SnapshotDiff",
    "SnapshotSlot",
    "SpeedSweepPoint",
    "SweepRange",
    "compute_kpis",
    "diff_snapshot",
    "export_standard_plots",
    "ride_height_sweep",
    "save_snapshot",
    "speed_sweep",
    "sweep_arrays",
]


def __getattr__(name: str) -> object:
    """Resolve lazily imported symbols for public package exports.

    Args:
        name: Attribute name requested from the package namespace.

    Returns:
        Exported function matching ``name``.

    Raises:
        AttributeError: If ``name`` is not part of the public export surface.
    """
    if name == "export_standard_plots":
        from aerosim.analysis.plots import export_standard_plots

        return export_standard_plots
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
