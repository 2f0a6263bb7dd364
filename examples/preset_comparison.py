"""Compare downforce, drag and balance across the circuit presets."""

from __future__ import annotations

import logging

from aerosim.aero import evaluate
from aerosim.analysis import compute_kpis
from aerosim.presets import apply_preset, available_presets
from aerosim.utils import configure_logging


def main() -> None:
    """Evaluate every preset at its default speed and log the KPIs."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("preset_comparison_example")

    for name in available_presets():
        params = apply_preset(name)
        kpis = compute_kpis(params, evaluate(params))
        logger.info(
            "%-8s | downforce %.1f kN | drag %.1f kN | L/D %.2f | front balance %.0f %%",
            name,
            kpis.total_downforce,
            kpis.total_drag,
            kpis.efficiency,
            kpis.front_balance,
        )


if __name__ == "__main__":
    main()
