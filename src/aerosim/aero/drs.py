"""Drag-reduction device adjustment for the rear wing."""

from __future__ import annotations

from aerosim.aero.wing import WingCoefficients

DRS_LIFT_FACTOR = 0.75
DRS_DRAG_FACTOR = 0.65


def apply_drs(coefficients: WingCoefficients, is_open: bool) -> WingCoefficients:
    """Apply the binary DRS reduction to rear-wing coefficients.

    Args:
        coefficients: Rear-wing coefficients with the flap closed.
        is_open: Whether the drag-reduction flap is open.

    Returns:
        ``coefficients`` unchanged when closed, otherwise the reduced pair.
    """
    if not is_open:
        return coefficients
    return WingCoefficients(
        lift=coefficients.lift * DRS_LIFT_FACTOR,
        drag=coefficients.drag * DRS_DRAG_FACTOR,
    )
