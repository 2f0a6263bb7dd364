"""Input parameter definitions for the aerodynamic load model."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

import numpy as np

from aerosim.utils.constants import STANDARD_AIR_DENSITY
from aerosim.utils.exceptions import ConfigurationError
from aerosim.utils.units import kmh_to_mps

DEFAULT_SPEED_KMH = 200.0
DEFAULT_FRONT_ANGLE_OF_ATTACK = 8.0
DEFAULT_REAR_ANGLE_OF_ATTACK = 12.0
DEFAULT_RIDE_HEIGHT_MM = 38.0
DEFAULT_DIFFUSER_EFFICIENCY = 1.0
DEFAULT_DIFFUSER_ANGLE_DEG = 12.0

RECOMMENDED_RANGES: dict[str, tuple[float, float]] = {
    "speed_kmh": (60.0, 360.0),
    "air_density": (0.9, 1.4),
    "front_angle_of_attack": (0.0, 20.0),
    "rear_angle_of_attack": (0.0, 22.0),
    "ride_height_mm": (20.0, 80.0),
    "diffuser_efficiency": (0.5, 1.5),
    "diffuser_angle_deg": (5.0, 25.0),
}


@dataclass(frozen=True)
class SimulationParameters:
    """Full user-adjustable input vector of the aerodynamic model.

    Args:
        speed_kmh: Vehicle speed [km/h].
        air_density: Air density [kg/m^3].
        front_angle_of_attack: Front-wing angle of attack [deg].
        rear_angle_of_attack: Rear-wing angle of attack [deg].
        ride_height_mm: Floor ride height [mm].
        diffuser_efficiency: Multiplier applied to the floor lift coefficient.
        diffuser_angle_deg: Diffuser expansion angle [deg].
        drs_open: Whether the rear-wing drag-reduction flap is open.
    """

    speed_kmh: float = DEFAULT_SPEED_KMH
    air_density: float = STANDARD_AIR_DENSITY
    front_angle_of_attack: float = DEFAULT_FRONT_ANGLE_OF_ATTACK
    rear_angle_of_attack: float = DEFAULT_REAR_ANGLE_OF_ATTACK
    ride_height_mm: float = DEFAULT_RIDE_HEIGHT_MM
    diffuser_efficiency: float = DEFAULT_DIFFUSER_EFFICIENCY
    diffuser_angle_deg: float = DEFAULT_DIFFUSER_ANGLE_DEG
    drs_open: bool = False

    @property
    def speed_mps(self) -> float:
        """Vehicle speed converted to SI units.

        Returns:
            Vehicle speed [m/s].
        """
        return kmh_to_mps(self.speed_kmh)

    def validate(self) -> None:
        """Validate that every numeric input is finite.

        Finite values are never rejected, even where they are physically
        implausible, so that the model stays usable for exploration.

        Raises:
            aerosim.utils.exceptions.ConfigurationError: If a numeric field is
                NaN or infinite.
        """
        for name in RECOMMENDED_RANGES:
            if not np.isfinite(getattr(self, name)):
                msg = f"{name} must be finite"
                raise ConfigurationError(msg)

    def out_of_range_fields(self) -> tuple[str, ...]:
        """List fields outside the ranges offered by the interactive controls.

        Returns:
            Field names whose values fall outside ``RECOMMENDED_RANGES``.
        """
        outside: list[str] = []
        for name, (lower, upper) in RECOMMENDED_RANGES.items():
            value = getattr(self, name)
            if not lower <= value <= upper:
                outside.append(name)
        return tuple(outside)


def build_simulation_parameters(**overrides: Any) -> SimulationParameters:
    """Build a validated parameter set from the baseline configuration.

    Args:
        **overrides: Field values replacing the baseline defaults.

    Returns:
        Validated simulation parameters.

    Raises:
        aerosim.utils.exceptions.ConfigurationError: If an override names an
            unknown field or a value is not finite.
    """
    known = {field.name for field in fields(SimulationParameters)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        msg = f"unknown simulation parameter(s): {unknown}"
        raise ConfigurationError(msg)
    params = replace(SimulationParameters(), **overrides)
    params.validate()
    return params
