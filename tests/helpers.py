"""Shared test helpers."""

from __future__ import annotations

from aerosim.aero.params import SimulationParameters
from aerosim.utils.constants import STANDARD_AIR_DENSITY


def sample_simulation_parameters(drs_open: bool = False) -> SimulationParameters:
    """Create the reference parameter set used by end-to-end scenarios.

    Args:
        drs_open: Whether the drag-reduction flap is open.

    Returns:
        Parameter set at 200 km/h with baseline wing and floor settings.
    """
    return SimulationParameters(
        speed_kmh=200.0,
        air_density=STANDARD_AIR_DENSITY,
        front_angle_of_attack=8.0,
        rear_angle_of_attack=12.0,
        ride_height_mm=38.0,
        diffuser_efficiency=1.0,
        diffuser_angle_deg=12.0,
        drs_open=drs_open,
    )
