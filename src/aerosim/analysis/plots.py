"""Plot generation for aerodynamic sweeps."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from aerosim.aero.params import SimulationParameters
from aerosim.analysis.sweep import (
    RideHeightSweepPoint,
    SpeedSweepPoint,
    ride_height_sweep,
    speed_sweep,
    sweep_arrays,
)

matplotlib.use("Agg")


def _save_dual_format(fig: Figure, out_base: Path) -> None:
    """Write a figure to PNG and PDF with a shared base path.

    Args:
        fig: Figure object to persist.
        out_base: Output path without suffix.
    """
    out_base.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_base.with_suffix(".png"), dpi=180, bbox_inches="tight")
    fig.savefig(out_base.with_suffix(".pdf"), bbox_inches="tight")


def plot_speed_sweep(points: Sequence[SpeedSweepPoint], out_base: Path) -> None:
    """Plot total downforce and drag against speed.

    Args:
        points: Speed sweep points.
        out_base: Output path without suffix.
    """
    columns = sweep_arrays(points)
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(columns["speed"], columns["downforce"], lw=2.0, label="Downforce")
    ax.plot(columns["speed"], columns["drag"], lw=2.0, label="Drag")
    ax.set_xlabel("Speed [km/h]")
    ax.set_ylabel("Force [kN]")
    ax.set_title("Downforce and Drag vs Speed")
    ax.grid(True, alpha=0.3)
    ax.legend()
    _save_dual_format(fig, out_base)
    plt.close(fig)


def plot_component_breakdown(points: Sequence[SpeedSweepPoint], out_base: Path) -> None:
    """Plot per-component downforce against speed as a stacked area chart.

    Args:
        points: Speed sweep points.
        out_base: Output path without suffix.
    """
    columns = sweep_arrays(points)
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.stackplot(
        columns["speed"],
        columns["front_downforce"],
        columns["rear_downforce"],
        columns["floor_downforce"],
        labels=("Front wing", "Rear wing", "Floor"),
        alpha=0.8,
    )
    ax.set_xlabel("Speed [km/h]")
    ax.set_ylabel("Downforce [kN]")
    ax.set_title("Downforce by Component")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left")
    _save_dual_format(fig, out_base)
    plt.close(fig)


def plot_ride_height_sweep(points: Sequence[RideHeightSweepPoint], out_base: Path) -> None:
    """Plot downforce and front balance against ride height.

    Args:
        points: Ride-height sweep points.
        out_base: Output path without suffix.
    """
    columns = sweep_arrays(points)
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(columns["ride_height"], columns["downforce"], lw=2.0, color="tab:blue")
    ax.set_xlabel("Ride height [mm]")
    ax.set_ylabel("Downforce [kN]", color="tab:blue")
    ax.grid(True, alpha=0.3)
    balance_ax = ax.twinx()
    balance_ax.plot(
        columns["ride_height"],
        columns["front_balance"],
        lw=1.5,
        ls="--",
        color="tab:orange",
    )
    balance_ax.set_ylabel("Front balance [%]", color="tab:orange")
    ax.set_title("Ride Height Sensitivity")
    _save_dual_format(fig, out_base)
    plt.close(fig)


def export_standard_plots(params: SimulationParameters, output_dir: str | Path) -> None:
    """Run the default sweeps and export all plots in PNG and PDF format.

    Args:
        params: Parameter set held fixed apart from the swept axis.
        output_dir: Destination directory for all generated plots.
    """
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    speed_points = speed_sweep(params)
    plot_speed_sweep(speed_points, out_dir / "speed_sweep")
    plot_component_breakdown(speed_points, out_dir / "component_breakdown")
    plot_ride_height_sweep(ride_height_sweep(params), out_dir / "ride_height_sweep")
