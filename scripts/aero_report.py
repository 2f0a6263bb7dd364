"""Print an aerodynamic KPI report and optionally export sweeps and plots."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from aerosim.aero.forces import evaluate
from aerosim.aero.params import SimulationParameters
from aerosim.analysis.export import export_kpi_json, export_records_csv
from aerosim.analysis.kpi import AeroKpis, compute_kpis
from aerosim.analysis.plots import export_standard_plots
from aerosim.analysis.sweep import ride_height_sweep, speed_sweep
from aerosim.presets import apply_preset, available_presets
from aerosim.utils import configure_logging

logger = logging.getLogger("aero_report")


def _build_parameters(args: argparse.Namespace) -> SimulationParameters:
    """Resolve the preset and apply explicit command-line overrides.

    Args:
        args: Parsed command-line namespace.

    Returns:
        Parameter set to evaluate.
    """
    params = apply_preset(args.preset)
    overrides: dict[str, object] = {}
    if args.speed is not None:
        overrides["speed_kmh"] = args.speed
    if args.ride_height is not None:
        overrides["ride_height_mm"] = args.ride_height
    if args.drs is not None:
        overrides["drs_open"] = args.drs
    return replace(params, **overrides)


def _format_kpi_table(kpis: AeroKpis) -> str:
    """Render KPIs as a markdown table.

    Args:
        kpis: KPI summary to render.

    Returns:
        Markdown table text.
    """
    rows = [
        ("Total downforce", f"{kpis.total_downforce:.1f} kN"),
        ("Total drag", f"{kpis.total_drag:.1f} kN"),
        ("Front balance", f"{kpis.front_balance:.0f} %"),
        ("Floor downforce", f"{kpis.floor_downforce:.1f} kN ({kpis.floor_share:.0f} %)"),
        ("Efficiency L/D", f"{kpis.efficiency:.2f}"),
        (
            "Front wing Cl/Cd",
            f"{kpis.front_lift_coefficient:.2f} / {kpis.front_drag_coefficient:.2f}",
        ),
        (
            "Rear wing Cl/Cd",
            f"{kpis.rear_lift_coefficient:.2f} / {kpis.rear_drag_coefficient:.2f}"
            + (" (DRS)" if kpis.drs_open else ""),
        ),
    ]
    lines = ["| Metric | Value |", "| --- | ---: |"]
    lines.extend(f"| {name} | {value} |" for name, value in rows)
    return "\n".join(lines)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Args:
        argv: Optional argument list. Defaults to ``sys.argv[1:]``.

    Returns:
        Parsed command-line namespace.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--preset",
        default="Baseline",
        help=f"Setup preset ({', '.join(available_presets())}); unknown names use Baseline.",
    )
    parser.add_argument("--speed", type=float, default=None, help="Speed [km/h].")
    parser.add_argument("--ride-height", type=float, default=None, help="Ride height [mm].")
    parser.add_argument(
        "--drs",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Open or close the drag-reduction flap.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory receiving sweep CSVs, plots and KPI JSON.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level name, for example DEBUG to show library diagnostics.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Evaluate one configuration, print its KPIs and export artifacts.

    Args:
        argv: Optional argument list. Defaults to ``sys.argv[1:]``.
    """
    args = _parse_args(argv)
    configure_logging(args.log_level)
    params = _build_parameters(args)
    for name in params.out_of_range_fields():
        logger.warning("%s=%s is outside the recommended range", name, getattr(params, name))

    result = evaluate(params)
    kpis = compute_kpis(params, result)
    print(_format_kpi_table(kpis))

    if args.output_dir is not None:
        out_dir: Path = args.output_dir
        export_records_csv(speed_sweep(params), out_dir / "speed_sweep.csv")
        export_records_csv(ride_height_sweep(params), out_dir / "ride_height_sweep.csv")
        export_kpi_json(kpis, out_dir / "kpis.json")
        export_standard_plots(params, out_dir)
        logger.info("Exported sweeps, plots and KPIs to %s", out_dir)


if __name__ == "__main__":
    main()
