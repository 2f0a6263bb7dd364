"""Parameter sweeps of the aerodynamic model for sensitivity charts."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import astuple, dataclass, fields, is_dataclass, replace
from typing import Any

import numpy as np

from aerosim.aero.forces import DEFAULT_REFERENCE_AREAS, ReferenceAreas, evaluate
from aerosim.aero.params import SimulationParameters
from aerosim.utils.constants import SMALL_EPS
from aerosim.utils.exceptions import ConfigurationError
from aerosim.utils.units import newton_to_kilonewton

logger = logging.getLogger(__name__)

DEFAULT_SPEED_SWEEP_MIN_KMH = 60.0
DEFAULT_SPEED_SWEEP_MAX_KMH = 340.0
DEFAULT_SPEED_SWEEP_STEP_KMH = 10.0
DEFAULT_RIDE_HEIGHT_SWEEP_MIN_MM = 20.0
DEFAULT_RIDE_HEIGHT_SWEEP_MAX_MM = 80.0
DEFAULT_RIDE_HEIGHT_SWEEP_STEP_MM = 2.0


@dataclass(frozen=True)
class SweepRange:
    """Inclusive, evenly spaced grid of one swept parameter.

    Args:
        minimum: First grid value.
        maximum: Last grid value, included when reachable by whole steps.
        step: Positive grid spacing.
    """

    minimum: float
    maximum: float
    step: float

    def validate(self) -> None:
        """Validate grid bounds and spacing.

        Raises:
            aerosim.utils.exceptions.ConfigurationError: If a bound is not
                finite, ``step`` is not positive, or ``minimum > maximum``.
        """
        if not (np.isfinite(self.minimum) and np.isfinite(self.maximum)):
            msg = "sweep bounds must be finite"
            raise ConfigurationError(msg)
        if not np.isfinite(self.step) or self.step <= 0.0:
            msg = f"sweep step must be a positive, finite value, got: {self.step}"
            raise ConfigurationError(msg)
        if self.minimum > self.maximum:
            msg = (
                "sweep must satisfy minimum <= maximum, "
                f"got {self.minimum} > {self.maximum}"
            )
            raise ConfigurationError(msg)

    def __len__(self) -> int:
        """Return the number of grid points.

        Returns:
            Point count including both end points.
        """
        # Tolerance keeps the maximum when the span is a float multiple of step.
        return int(np.floor((self.maximum - self.minimum) / self.step + SMALL_EPS)) + 1

    def values(self) -> np.ndarray:
        """Return grid values in ascending order.

        Returns:
            One-dimensional array of swept values.

        Raises:
            aerosim.utils.exceptions.ConfigurationError: If the range is
                invalid.
        """
        self.validate()
        return self.minimum + self.step * np.arange(len(self), dtype=float)


DEFAULT_SPEED_RANGE = SweepRange(
    minimum=DEFAULT_SPEED_SWEEP_MIN_KMH,
    maximum=DEFAULT_SPEED_SWEEP_MAX_KMH,
    step=DEFAULT_SPEED_SWEEP_STEP_KMH,
)
DEFAULT_RIDE_HEIGHT_RANGE = SweepRange(
    minimum=DEFAULT_RIDE_HEIGHT_SWEEP_MIN_MM,
    maximum=DEFAULT_RIDE_HEIGHT_SWEEP_MAX_MM,
    step=DEFAULT_RIDE_HEIGHT_SWEEP_STEP_MM,
)


@dataclass(frozen=True)
class SpeedSweepPoint:
    """Loads at one speed of a speed sweep.

    Args:
        speed: Vehicle speed [km/h].
        downforce: Total downforce [kN].
        drag: Total drag [kN].
        front_downforce: Front-wing downforce [kN].
        rear_downforce: Rear-wing downforce [kN].
        floor_downforce: Floor downforce [kN].
    """

    speed: float
    downforce: float
    drag: float
    front_downforce: float
    rear_downforce: float
    floor_downforce: float


@dataclass(frozen=True)
class RideHeightSweepPoint:
    """Loads at one ride height of a ride-height sweep.

    Args:
        ride_height: Requested floor ride height [mm].
        downforce: Total downforce [kN].
        drag: Total drag [kN].
        front_balance: Front-axle share of total downforce [%].
    """

    ride_height: float
    downforce: float
    drag: float
    front_balance: float


def speed_sweep(
    params: SimulationParameters,
    minimum: float = DEFAULT_SPEED_SWEEP_MIN_KMH,
    maximum: float = DEFAULT_SPEED_SWEEP_MAX_KMH,
    step: float = DEFAULT_SPEED_SWEEP_STEP_KMH,
    reference_areas: ReferenceAreas = DEFAULT_REFERENCE_AREAS,
) -> tuple[SpeedSweepPoint, ...]:
    """Evaluate loads across a speed grid with all other inputs held fixed.

    Args:
        params: Baseline parameter set. Its ``speed_kmh`` is ignored.
        minimum: Lowest swept speed [km/h].
        maximum: Highest swept speed [km/h].
        step: Speed increment [km/h].
        reference_areas: Component reference areas.

    Returns:
        Sweep points ordered by ascending speed.

    Raises:
        aerosim.utils.exceptions.ConfigurationError: If the sweep range or
            the parameter set is invalid.
    """
    speeds = SweepRange(minimum=minimum, maximum=maximum, step=step).values()
    points: list[SpeedSweepPoint] = []
    for speed in speeds:
        result = evaluate(replace(params, speed_kmh=float(speed)), reference_areas)
        points.append(
            SpeedSweepPoint(
                speed=float(speed),
                downforce=newton_to_kilonewton(result.total_downforce),
                drag=newton_to_kilonewton(result.total_drag),
                front_downforce=newton_to_kilonewton(result.front_downforce),
                rear_downforce=newton_to_kilonewton(result.rear_downforce),
                floor_downforce=newton_to_kilonewton(result.floor_downforce),
            )
        )
    logger.debug("Speed sweep produced %d points", len(points))
    return tuple(points)


def ride_height_sweep(
    params: SimulationParameters,
    minimum: float = DEFAULT_RIDE_HEIGHT_SWEEP_MIN_MM,
    maximum: float = DEFAULT_RIDE_HEIGHT_SWEEP_MAX_MM,
    step: float = DEFAULT_RIDE_HEIGHT_SWEEP_STEP_MM,
    reference_areas: ReferenceAreas = DEFAULT_REFERENCE_AREAS,
) -> tuple[RideHeightSweepPoint, ...]:
    """Evaluate loads across a ride-height grid at the current speed.

    Args:
        params: Baseline parameter set. Its ``ride_height_mm`` is ignored.
        minimum: Lowest swept ride height [mm].
        maximum: Highest swept ride height [mm].
        step: Ride-height increment [mm].
        reference_areas: Component reference areas.

    Returns:
        Sweep points ordered by ascending ride height.

    Raises:
        aerosim.utils.exceptions.ConfigurationError: If the sweep range or
            the parameter set is invalid.
    """
    heights = SweepRange(minimum=minimum, maximum=maximum, step=step).values()
    points: list[RideHeightSweepPoint] = []
    for height in heights:
        result = evaluate(replace(params, ride_height_mm=float(height)), reference_areas)
        points.append(
            RideHeightSweepPoint(
                ride_height=float(height),
                downforce=newton_to_kilonewton(result.total_downforce),
                drag=newton_to_kilonewton(result.total_drag),
                front_balance=result.front_balance,
            )
        )
    logger.debug("Ride-height sweep produced %d points", len(points))
    return tuple(points)


def sweep_arrays(points: Sequence[Any]) -> dict[str, np.ndarray]:
    """Transpose a sequence of sweep points into named column arrays.

    Args:
        points: Non-empty sequence of sweep point dataclasses of one type.

    Returns:
        Mapping from field name to a float array, in field order.

    Raises:
        aerosim.utils.exceptions.ConfigurationError: If ``points`` is empty
            or does not contain dataclass instances.
    """
    if not points:
        msg = "points must not be empty"
        raise ConfigurationError(msg)
    if not is_dataclass(points[0]):
        msg = "points must be dataclass instances"
        raise ConfigurationError(msg)
    names = [field.name for field in fields(points[0])]
    table = np.asarray([astuple(point) for point in points], dtype=float)
    return {name: table[:, index] for index, name in enumerate(names)}
