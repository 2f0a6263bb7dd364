"""Lift and drag coefficient law for a single wing element."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from aerosim.utils.exceptions import ConfigurationError
from aerosim.utils.units import deg_to_rad


@dataclass(frozen=True)
class AeroCoefficientPreset:
    """Constant coefficients describing one wing element.

    Args:
        lift_at_zero: Lift coefficient at zero angle of attack (``Cl0``).
        lift_slope: Lift-curve slope per radian of angle of attack.
        zero_lift_drag: Parasitic drag coefficient (``Cd0``).
        induced_drag_factor: Induced-drag factor ``k`` in ``Cd0 + k * Cl^2``.
    """

    lift_at_zero: float
    lift_slope: float
    zero_lift_drag: float
    induced_drag_factor: float

    def validate(self) -> None:
        """Validate preset coefficients.

        Raises:
            aerosim.utils.exceptions.ConfigurationError: If a coefficient is
                not finite or the induced-drag factor is negative.
        """
        for name in ("lift_at_zero", "lift_slope", "zero_lift_drag", "induced_drag_factor"):
            if not np.isfinite(getattr(self, name)):
                msg = f"{name} must be finite"
                raise ConfigurationError(msg)
        if self.induced_drag_factor < 0.0:
            msg = "induced_drag_factor must be non-negative"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class WingCoefficients:
    """Lift and drag coefficients of one aerodynamic component.

    Args:
        lift: Lift (downforce) coefficient.
        drag: Drag coefficient.
    """

    lift: float
    drag: float


FRONT_WING_PRESET = AeroCoefficientPreset(
    lift_at_zero=0.6,
    lift_slope=3.6,
    zero_lift_drag=0.06,
    induced_drag_factor=0.08,
)
REAR_WING_PRESET = AeroCoefficientPreset(
    lift_at_zero=0.7,
    lift_slope=4.2,
    zero_lift_drag=0.07,
    induced_drag_factor=0.10,
)


def wing_coefficients(
    angle_of_attack_deg: float,
    preset: AeroCoefficientPreset,
) -> WingCoefficients:
    """Evaluate the linear lift curve and quadratic induced-drag law.

    Angles are not clamped. Extreme angles give large but finite values.

    Args:
        angle_of_attack_deg: Wing angle of attack [deg].
        preset: Coefficient set of the wing element.

    Returns:
        Lift and drag coefficients at the requested angle.
    """
    alpha = deg_to_rad(angle_of_attack_deg)
    lift = preset.lift_at_zero + preset.lift_slope * alpha
    drag = preset.zero_lift_drag + preset.induced_drag_factor * lift * lift
    return WingCoefficients(lift=lift, drag=drag)
