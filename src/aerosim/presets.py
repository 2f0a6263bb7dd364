"""Named circuit setup archetypes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from aerosim.aero.params import SimulationParameters

logger = logging.getLogger(__name__)

BASELINE_PRESET_NAME = "Baseline"


@dataclass(frozen=True)
class SetupPreset:
    """Wing, ride-height and DRS settings of one circuit archetype.

    Args:
        name: Canonical preset name.
        description: Short human-readable description.
        front_angle_of_attack: Front-wing angle of attack [deg].
        rear_angle_of_attack: Rear-wing angle of attack [deg].
        ride_height_mm: Floor ride height [mm].
        drs_open: Whether the drag-reduction flap is open.
    """

    name: str
    description: str
    front_angle_of_attack: float
    rear_angle_of_attack: float
    ride_height_mm: float
    drs_open: bool

    def apply(self, base: SimulationParameters) -> SimulationParameters:
        """Overlay preset settings on a parameter set.

        Args:
            base: Parameter set providing speed, density and diffuser settings.

        Returns:
            New parameter set with the preset fields replaced.
        """
        return replace(
            base,
            front_angle_of_attack=self.front_angle_of_attack,
            rear_angle_of_attack=self.rear_angle_of_attack,
            ride_height_mm=self.ride_height_mm,
            drs_open=self.drs_open,
        )


PRESETS: dict[str, SetupPreset] = {
    "Baseline": SetupPreset(
        name="Baseline",
        description="Balanced reference setup",
        front_angle_of_attack=8.0,
        rear_angle_of_attack=12.0,
        ride_height_mm=38.0,
        drs_open=False,
    ),
    "Monza": SetupPreset(
        name="Monza",
        description="Low-drag circuit: small angles, raised floor, DRS open",
        front_angle_of_attack=4.0,
        rear_angle_of_attack=6.0,
        ride_height_mm=42.0,
        drs_open=True,
    ),
    "Monaco": SetupPreset(
        name="Monaco",
        description="High-downforce circuit: large angles, DRS closed",
        front_angle_of_attack=14.0,
        rear_angle_of_attack=18.0,
        ride_height_mm=38.0,
        drs_open=False,
    ),
    "Wet": SetupPreset(
        name="Wet",
        description="Wet weather: largest angles, highest ride height",
        front_angle_of_attack=16.0,
        rear_angle_of_attack=20.0,
        ride_height_mm=48.0,
        drs_open=False,
    ),
}

_PRESET_ALIASES = {
    "baseline": "Baseline",
    "default": "Baseline",
    "monza": "Monza",
    "low_drag": "Monza",
    "monaco": "Monaco",
    "high_downforce": "Monaco",
    "wet": "Wet",
}


def available_presets() -> tuple[str, ...]:
    """Return canonical preset names in declaration order.

    Returns:
        Tuple of preset names.
    """
    return tuple(PRESETS)


def get_preset(name: str) -> SetupPreset:
    """Resolve a preset by canonical name or archetype alias.

    Args:
        name: Preset name, matched case-insensitively.

    Returns:
        Matching preset, or the baseline preset for unknown names.
    """
    key = _PRESET_ALIASES.get(name.strip().lower().replace("-", "_").replace(" ", "_"))
    if key is None:
        logger.debug("Unknown preset %r, falling back to %s", name, BASELINE_PRESET_NAME)
        key = BASELINE_PRESET_NAME
    return PRESETS[key]


def apply_preset(name: str, base: SimulationParameters | None = None) -> SimulationParameters:
    """Build the parameter set of a named circuit archetype.

    Args:
        name: Preset name or alias. Unknown names select the baseline.
        base: Optional parameter set supplying the fields a preset does not
            set. Defaults to the baseline parameters.

    Returns:
        Parameter set with the preset's angles, ride height and DRS state.
    """
    return get_preset(name).apply(base if base is not None else SimulationParameters())
