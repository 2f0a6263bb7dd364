"""Utility helpers."""

from aerosim.utils.constants import STANDARD_AIR_DENSITY
from aerosim.utils.logging import configure_logging, resolve_log_level
from aerosim.utils.units import deg_to_rad, kmh_to_mps, newton_to_kilonewton

__all__ = [
    "STANDARD_AIR_DENSITY",
    "configure_logging",
    "deg_to_rad",
    "kmh_to_mps",
    "newton_to_kilonewton",
    "resolve_log_level",
]
