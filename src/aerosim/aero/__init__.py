"""Component aerodynamic models and load aggregation."""

from aerosim.aero.drs import apply_drs
from aerosim.aero.forces import (
    DEFAULT_REFERENCE_AREAS,
    AeroCoefficients,
    AeroResult,
    ReferenceAreas,
    evaluate,
)
from aerosim.aero.ground_effect import floor_drag_coefficient, floor_lift_coefficient
from aerosim.aero.params import SimulationParameters, build_simulation_parameters
from aerosim.aero.wing import (
    FRONT_WING_PRESET,
    REAR_WING_PRESET,
    AeroCoefficientPreset,
    WingCoefficients,
    wing_coefficients,
)

__all__ = [
    "DEFAULT_REFERENCE_AREAS",
    "FRONT_WING_PRESET",
    "REAR_WING_PRESET",
    "AeroCoefficientPreset",
    "AeroCoefficients",
    "AeroResult",
    "ReferenceAreas",
    "SimulationParameters",
    "WingCoefficients",
    "apply_drs",
    "build_simulation_parameters",
    "evaluate",
    "floor_drag_coefficient",
    "floor_lift_coefficient",
    "wing_coefficients",
]
