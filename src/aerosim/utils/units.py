"""Scalar unit conversions applied at the model boundary."""

from __future__ import annotations

import math

from aerosim.utils.constants import KMH_PER_MPS, NEWTONS_PER_KILONEWTON


def kmh_to_mps(speed_kmh: float) -> float:
    """Convert speed from km/h to m/s.

    Args:
        speed_kmh: Speed [km/h].

    Returns:
        Speed [m/s].
    """
    return speed_kmh / KMH_PER_MPS


def deg_to_rad(angle_deg: float) -> float:
    """Convert an angle from degrees to radians.

    Args:
        angle_deg: Angle [deg].

    Returns:
        Angle [rad].
    """
    return angle_deg * math.pi / 180.0


def newton_to_kilonewton(force: float) -> float:
    """Convert a force from newtons to kilonewtons.

    Args:
        force: Force [N].

    Returns:
        Force [kN].
    """
    return force / NEWTONS_PER_KILONEWTON
