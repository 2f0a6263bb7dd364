"""Aggregation of component coefficients into aerodynamic loads."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from aerosim.aero.drs import apply_drs
from aerosim.aero.ground_effect import (
    FLOOR_BASE_LIFT_COEFFICIENT,
    floor_drag_coefficient,
    floor_lift_coefficient,
)
from aerosim.aero.params import SimulationParameters
from aerosim.aero.wing import (
    FRONT_WING_PRESET,
    REAR_WING_PRESET,
    WingCoefficients,
    wing_coefficients,
)
from aerosim.utils.exceptions import ConfigurationError


@dataclass(frozen=True)
class ReferenceAreas:
    """Reference areas used to dimensionalize component coefficients.

    Args:
        front: Front-wing reference area [m^2].
        rear: Rear-wing reference area [m^2].
        floor: Floor and diffuser reference area [m^2].
    """

    front: float = 1.3
    rear: float = 1.5
    floor: float = 3.2

    def validate(self) -> None:
        """Validate reference areas.

        Raises:
            aerosim.utils.exceptions.ConfigurationError: If any area is not
                strictly positive.
        """
        if self.front <= 0.0 or self.rear <= 0.0 or self.floor <= 0.0:
            msg = "reference areas must be positive"
            raise ConfigurationError(msg)


DEFAULT_REFERENCE_AREAS = ReferenceAreas()


@dataclass(frozen=True)
class AeroCoefficients:
    """Component coefficients actually used for one evaluation.

    Args:
        front: Front-wing coefficients.
        rear: Rear-wing coefficients after the DRS adjustment.
        floor: Floor coefficients after diffuser-efficiency scaling.
    """

    front: WingCoefficients
    rear: WingCoefficients
    floor: WingCoefficients


@dataclass(frozen=True)
class AeroResult:
    """Aerodynamic loads for one parameter set.

    Args:
        dynamic_pressure: Free-stream dynamic pressure [Pa].
        front_downforce: Front-wing downforce [N].
        rear_downforce: Rear-wing downforce [N].
        floor_downforce: Floor and diffuser downforce [N].
        total_downforce: Sum of component downforce [N].
        front_drag: Front-wing drag [N].
        rear_drag: Rear-wing drag [N].
        floor_drag: Floor drag [N].
        total_drag: Sum of component drag [N].
        front_balance: Front-axle share of total downforce [%].
        rear_balance: Rear-axle share (rear wing plus floor) [%].
        coefficients: Component coefficients used for the evaluation.
    """

    dynamic_pressure: float
    front_downforce: float
    rear_downforce: float
    floor_downforce: float
    total_downforce: float
    front_drag: float
    rear_drag: float
    floor_drag: float
    total_drag: float
    front_balance: float
    rear_balance: float
    coefficients: AeroCoefficients

    @property
    def floor_share(self) -> float:
        """Share of total downforce generated by the floor.

        Returns:
            Floor share [%], ``0.0`` when total downforce is zero or not
            finite.
        """
        if _is_degenerate(self.total_downforce):
            return 0.0
        return self.floor_downforce / self.total_downforce * 100.0

    @property
    def efficiency(self) -> float:
        """Aerodynamic efficiency as downforce over drag.

        Returns:
            Lift-to-drag ratio, ``0.0`` when total drag is zero or either
            total is not finite.
        """
        if _is_degenerate(self.total_drag) or not np.isfinite(self.total_downforce):
            return 0.0
        return self.total_downforce / self.total_drag


def _is_degenerate(total: float) -> bool:
    """Check whether a force total cannot serve as a ratio denominator.

    Args:
        total: Summed force [N].

    Returns:
        ``True`` for an exact zero or a non-finite total.
    """
    return total == 0.0 or not np.isfinite(total)


def dynamic_pressure(air_density: float, speed_mps: float) -> float:
    """Compute free-stream dynamic pressure.

    Args:
        air_density: Air density [kg/m^3].
        speed_mps: Speed [m/s].

    Returns:
        Dynamic pressure ``0.5 * rho * v^2`` [Pa].
    """
    return 0.5 * air_density * speed_mps * speed_mps


def axle_balance(front_downforce: float, total_downforce: float) -> tuple[float, float]:
    """Split total downforce into front and rear axle percentages.

    Args:
        front_downforce: Front-axle downforce [N].
        total_downforce: Total downforce [N].

    Returns:
        ``(front, rear)`` percentages summing to 100, or ``(0.0, 0.0)`` when
        total downforce is exactly zero or overflowed to a non-finite value.
    """
    if _is_degenerate(total_downforce):
        return 0.0, 0.0
    front = front_downforce / total_downforce * 100.0
    return front, 100.0 - front


def component_coefficients(params: SimulationParameters) -> AeroCoefficients:
    """Evaluate front wing, rear wing and floor coefficients.

    Args:
        params: Simulation input parameters.

    Returns:
        Coefficients of all three components.
    """
    front = wing_coefficients(params.front_angle_of_attack, FRONT_WING_PRESET)
    rear = apply_drs(
        wing_coefficients(params.rear_angle_of_attack, REAR_WING_PRESET),
        params.drs_open,
    )
    floor_lift = (
        floor_lift_coefficient(
            params.ride_height_mm,
            FLOOR_BASE_LIFT_COEFFICIENT,
            params.diffuser_angle_deg,
        )
        * params.diffuser_efficiency
    )
    floor = WingCoefficients(lift=floor_lift, drag=floor_drag_coefficient(floor_lift))
    return AeroCoefficients(front=front, rear=rear, floor=floor)


def evaluate(
    params: SimulationParameters,
    reference_areas: ReferenceAreas = DEFAULT_REFERENCE_AREAS,
) -> AeroResult:
    """Compute component and total aerodynamic loads for one parameter set.

    Args:
        params: Simulation input parameters.
        reference_areas: Component reference areas.

    Returns:
        Component forces, exact totals, axle balance and coefficients.

    Raises:
        aerosim.utils.exceptions.ConfigurationError: If a parameter is not
            finite, a reference area is not positive, or a wing preset is
            invalid.
    """
    params.validate()
    reference_areas.validate()
    FRONT_WING_PRESET.validate()
    REAR_WING_PRESET.validate()

    q = dynamic_pressure(params.air_density, params.speed_mps)
    coefficients = component_coefficients(params)

    front_downforce = q * reference_areas.front * coefficients.front.lift
    rear_downforce = q * reference_areas.rear * coefficients.rear.lift
    floor_downforce = q * reference_areas.floor * coefficients.floor.lift
    front_drag = q * reference_areas.front * coefficients.front.drag
    rear_drag = q * reference_areas.rear * coefficients.rear.drag
    floor_drag = q * reference_areas.floor * coefficients.floor.drag

    total_downforce = front_downforce + rear_downforce + floor_downforce
    total_drag = front_drag + rear_drag + floor_drag
    front_balance, rear_balance = axle_balance(front_downforce, total_downforce)

    return AeroResult(
        dynamic_pressure=q,
        front_downforce=front_downforce,
        rear_downforce=rear_downforce,
        floor_downforce=floor_downforce,
        total_downforce=total_downforce,
        front_drag=front_drag,
        rear_drag=rear_drag,
        floor_drag=floor_drag,
        total_drag=total_drag,
        front_balance=front_balance,
        rear_balance=rear_balance,
        coefficients=coefficients,
    )
