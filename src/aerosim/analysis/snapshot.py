"""Single-slot snapshot of a configuration for side-by-side comparison."""

from __future__ import annotations

from dataclasses import dataclass

from aerosim.aero.forces import AeroResult
from aerosim.aero.params import SimulationParameters
from aerosim.utils.units import newton_to_kilonewton


@dataclass(frozen=True)
class Snapshot:
    """Captured parameter set together with its evaluated loads.

    Args:
        parameters: Parameter set at capture time.
        result: Aerodynamic result evaluated from ``parameters``.
    """

    parameters: SimulationParameters
    result: AeroResult


@dataclass(frozen=True)
class SnapshotDiff:
    """Difference of a live result relative to a snapshot.

    Args:
        downforce: Total downforce change, live minus snapshot [N].
        drag: Total drag change, live minus snapshot [N].
    """

    downforce: float
    drag: float

    @property
    def downforce_kn(self) -> float:
        """Total downforce change in kilonewtons.

        Returns:
            Downforce change [kN].
        """
        return newton_to_kilonewton(self.downforce)

    @property
    def drag_kn(self) -> float:
        """Total drag change in kilonewtons.

        Returns:
            Drag change [kN].
        """
        return newton_to_kilonewton(self.drag)


def save_snapshot(params: SimulationParameters, result: AeroResult) -> Snapshot:
    """Capture a parameter set and its result.

    Args:
        params: Parameter set to capture.
        result: Result evaluated from ``params``.

    Returns:
        Immutable snapshot.
    """
    return Snapshot(parameters=params, result=result)


def diff_snapshot(current: AeroResult, snapshot: Snapshot | None) -> SnapshotDiff | None:
    """Subtract snapshot totals from the live result.

    Args:
        current: Live aerodynamic result.
        snapshot: Previously captured snapshot, if any.

    Returns:
        Total downforce and drag change, or ``None`` without a snapshot.
    """
    if snapshot is None:
        return None
    return SnapshotDiff(
        downforce=current.total_downforce - snapshot.result.total_downforce,
        drag=current.total_drag - snapshot.result.total_drag,
    )


class SnapshotSlot:
    """Caller-owned holder for the most recent snapshot.

    Saving replaces any previous snapshot.
    """

    def __init__(self) -> None:
        """Create an empty slot."""
        self._snapshot: Snapshot | None = None

    @property
    def latest(self) -> Snapshot | None:
        """Most recently saved snapshot.

        Returns:
            Stored snapshot, or ``None`` when nothing was saved.
        """
        return self._snapshot

    def save(self, params: SimulationParameters, result: AeroResult) -> Snapshot:
        """Store a new snapshot, replacing the previous one.

        Args:
            params: Parameter set to capture.
            result: Result evaluated from ``params``.

        Returns:
            Stored snapshot.
        """
        self._snapshot = save_snapshot(params, result)
        return self._snapshot

    def clear(self) -> None:
        """Remove the stored snapshot."""
        self._snapshot = None

    def diff(self, current: AeroResult) -> SnapshotDiff | None:
        """Compare the live result against the stored snapshot.

        Args:
            current: Live aerodynamic result.

        Returns:
            Snapshot difference, or ``None`` when the slot is empty.
        """
        return diff_snapshot(current, self._snapshot)
