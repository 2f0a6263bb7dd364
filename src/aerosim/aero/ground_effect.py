"""Floor and diffuser ground-effect coefficient model.

The floor lift coefficient grows inversely with ride height, is penalized by
a linear stall ramp very close to the ground, and is shaped by a Gaussian
efficiency peak over diffuser angle. A saturation cap bounds the result.
"""

from __future__ import annotations

import math

import numpy as np

MIN_RIDE_HEIGHT_MM = 10.0
MAX_RIDE_HEIGHT_MM = 120.0
DEFAULT_OPTIMAL_RIDE_HEIGHT_MM = 35.0
DEFAULT_SATURATION_FACTOR = 3.0
STALL_RIDE_HEIGHT_MM = 25.0
STALL_MIN_EFFECTIVENESS = 0.4
STALL_RAMP_EFFECTIVENESS = 0.6
OPTIMAL_DIFFUSER_ANGLE_DEG = 12.0
DIFFUSER_ANGLE_WIDTH_DEG = 8.0
DIFFUSER_MIN_EFFECTIVENESS = 0.6
DIFFUSER_ANGLE_GAIN = 0.4
FLOOR_BASE_LIFT_COEFFICIENT = 0.9
FLOOR_ZERO_LIFT_DRAG = 0.12
FLOOR_DRAG_PER_LIFT = 0.02


def clamp_ride_height(ride_height_mm: float) -> float:
    """Clamp ride height to the band in which the model is meaningful.

    Args:
        ride_height_mm: Requested ride height [mm].

    Returns:
        Ride height limited to ``[10, 120]`` mm.
    """
    return float(np.clip(ride_height_mm, MIN_RIDE_HEIGHT_MM, MAX_RIDE_HEIGHT_MM))


def stall_factor(ride_height_mm: float) -> float:
    """Return the floor effectiveness lost to flow choking near the ground.

    Args:
        ride_height_mm: Clamped ride height [mm].

    Returns:
        Effectiveness in ``[0.4, 1.0]``, ramping linearly below 25 mm.
    """
    if ride_height_mm < STALL_RIDE_HEIGHT_MM:
        ramp = ride_height_mm / STALL_RIDE_HEIGHT_MM
        return STALL_MIN_EFFECTIVENESS + STALL_RAMP_EFFECTIVENESS * ramp
    return 1.0


def diffuser_angle_factor(diffuser_angle_deg: float) -> float:
    """Return the Gaussian diffuser-angle efficiency factor.

    Args:
        diffuser_angle_deg: Diffuser expansion angle [deg].

    Returns:
        Factor in ``(0.6, 1.0]`` with its maximum at 12 deg.
    """
    normalized = (diffuser_angle_deg - OPTIMAL_DIFFUSER_ANGLE_DEG) / DIFFUSER_ANGLE_WIDTH_DEG
    return DIFFUSER_MIN_EFFECTIVENESS + DIFFUSER_ANGLE_GAIN * math.exp(-(normalized**2))


def floor_lift_coefficient(
    ride_height_mm: float,
    base_coefficient: float,
    diffuser_angle_deg: float,
    optimal_ride_height_mm: float = DEFAULT_OPTIMAL_RIDE_HEIGHT_MM,
    saturation_factor: float = DEFAULT_SATURATION_FACTOR,
) -> float:
    """Compute the floor lift coefficient from ride height and diffuser angle.

    Args:
        ride_height_mm: Ride height [mm]. Values outside ``[10, 120]`` are
            clamped.
        base_coefficient: Floor lift coefficient at the optimal ride height.
        diffuser_angle_deg: Diffuser expansion angle [deg].
        optimal_ride_height_mm: Ride height at which the inverse-height law
            yields ``base_coefficient`` [mm].
        saturation_factor: Upper cap as a multiple of ``base_coefficient``.

    Returns:
        Floor lift (downforce) coefficient.
    """
    height = clamp_ride_height(ride_height_mm)
    peak = base_coefficient * (optimal_ride_height_mm / height)
    shaped = peak * stall_factor(height) * diffuser_angle_factor(diffuser_angle_deg)
    return min(shaped, saturation_factor * base_coefficient)


def floor_drag_coefficient(lift_coefficient: float) -> float:
    """Derive floor drag from floor lift with a fixed linear coupling.

    Args:
        lift_coefficient: Floor lift coefficient after efficiency scaling.

    Returns:
        Floor drag coefficient.
    """
    return FLOOR_ZERO_LIFT_DRAG + FLOOR_DRAG_PER_LIFT * lift_coefficient
