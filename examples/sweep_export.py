"""Export speed and ride-height sweeps of the baseline setup to CSV and plots."""

from __future__ import annotations

import logging

from common import example_output_root

from aerosim.aero import build_simulation_parameters
from aerosim.analysis import export_standard_plots, ride_height_sweep, speed_sweep
from aerosim.analysis.export import export_records_csv
from aerosim.utils import configure_logging


def main() -> None:
    """Run both default sweeps and write CSV tables plus plots."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("sweep_export_example")

    params = build_simulation_parameters()
    output_dir = example_output_root() / "sweeps"

    speed_points = speed_sweep(params)
    height_points = ride_height_sweep(params)
    export_records_csv(speed_points, output_dir / "speed_sweep.csv")
    export_records_csv(height_points, output_dir / "ride_height_sweep.csv")
    export_standard_plots(params, output_dir)

    logger.info(
        "Downforce %.1f kN at %.0f km/h, %.1f kN at %.0f km/h",
        speed_points[0].downforce,
        speed_points[0].speed,
        speed_points[-1].downforce,
        speed_points[-1].speed,
    )
    logger.info("Wrote sweeps to %s", output_dir)


if __name__ == "__main__":
    main()
