"""KPI summary of one aerodynamic evaluation."""

from __future__ import annotations

from dataclasses import dataclass

from aerosim.aero.forces import AeroResult
from aerosim.aero.params import SimulationParameters
from aerosim.utils.units import newton_to_kilonewton


@dataclass(frozen=True)
class AeroKpis:
    """Headline metrics of one aerodynamic configuration.

    Args:
        total_downforce: Total downforce [kN].
        total_drag: Total drag [kN].
        front_balance: Front-axle share of total downforce [%].
        floor_downforce: Floor downforce [kN].
        floor_share: Floor share of total downforce [%].
        efficiency: Downforce-to-drag ratio.
        front_lift_coefficient: Front-wing lift coefficient.
        front_drag_coefficient: Front-wing drag coefficient.
        rear_lift_coefficient: Rear-wing lift coefficient after DRS.
        rear_drag_coefficient: Rear-wing drag coefficient after DRS.
        drs_open: Whether the drag-reduction flap is open.
    """

    total_downforce: float
    total_drag: float
    front_balance: float
    floor_downforce: float
    floor_share: float
    efficiency: float
    front_lift_coefficient: float
    front_drag_coefficient: float
    rear_lift_coefficient: float
    rear_drag_coefficient: float
    drs_open: bool


def compute_kpis(params: SimulationParameters, result: AeroResult) -> AeroKpis:
    """Summarize an aerodynamic result for display.

    Args:
        params: Parameter set the result was evaluated from.
        result: Aerodynamic result.

    Returns:
        KPI summary with forces in kilonewtons.
    """
    return AeroKpis(
        total_downforce=newton_to_kilonewton(result.total_downforce),
        total_drag=newton_to_kilonewton(result.total_drag),
        front_balance=result.front_balance,
        floor_downforce=newton_to_kilonewton(result.floor_downforce),
        floor_share=result.floor_share,
        efficiency=result.efficiency,
        front_lift_coefficient=result.coefficients.front.lift,
        front_drag_coefficient=result.coefficients.front.drag,
        rear_lift_coefficient=result.coefficients.rear.lift,
        rear_drag_coefficient=result.coefficients.rear.drag,
        drs_open=params.drs_open,
    )
