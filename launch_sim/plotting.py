"""
Launch Mission Simulator - Telemetry Plots

Altitude, speed and fuel/stage profiles of a FlightLog, rendered with the
non-interactive Agg backend so plots can be produced headless.
"""

import logging
import os
from dataclasses import dataclass
from typing import List

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class TelemetryData:
    """Telemetry arrays used in plotting.

    Attributes:
        time: Mission time (s)
        altitude: Altitude (km)
        speed: Speed (km/h)
        fuel_percentage: Remaining fuel (% of capacity)
        stage: Active stage number
        separation_times: Times of stage separation (s)
    """
    time: np.ndarray
    altitude: np.ndarray
    speed: np.ndarray
    fuel_percentage: np.ndarray
    stage: np.ndarray
    separation_times: np.ndarray


def configure_plot_style() -> None:
    """Configure matplotlib defaults for the mission plots."""
    plt.rcParams.update({
        'figure.figsize': (10, 6),
        'savefig.dpi': 150,
        'axes.grid': True,
        'axes.axisbelow': True,
        'grid.alpha': 0.3,
        'font.size': 11,
        'axes.titlesize': 13,
        'axes.labelsize': 12,
        'legend.fontsize': 10,
        'lines.linewidth': 1.8,
        'xtick.direction': 'in',
        'ytick.direction': 'in',
    })


def extract_log_data(log) -> TelemetryData:
    """Convert a FlightLog into numpy arrays.

    Raises:
        ValueError: if the log holds no samples
    """
    if len(log.time) == 0:
        raise ValueError("Flight log is empty")

    return TelemetryData(
        time=np.asarray(log.time, dtype=float),
        altitude=np.asarray(log.altitude, dtype=float),
        speed=np.asarray(log.speed, dtype=float),
        fuel_percentage=np.asarray(log.fuel_percentage, dtype=float),
        stage=np.asarray(log.stage, dtype=int),
        separation_times=np.asarray(getattr(log, 'stage_separation_times', []), dtype=float),
    )


def _mark_separations(ax, data: TelemetryData):
    for i, t_sep in enumerate(data.separation_times):
        ax.axvline(x=t_sep, color='gray', linestyle=':', linewidth=1.2,
                   label='Stage separation' if i == 0 else None)


def _x_limit(data: TelemetryData) -> float:
    # Single-sample logs still need a non-degenerate axis
    return max(float(data.time[-1]), 1.0)


# =============================================================================
# Plot Functions
# =============================================================================

def plot_altitude_profile(data: TelemetryData, output_dir: str) -> str:
    """Altitude vs time.

    Returns:
        Path to saved plot file
    """
    fig, ax = plt.subplots()

    ax.fill_between(data.time, 0, data.altitude, alpha=0.25, color='#1f77b4')
    ax.plot(data.time, data.altitude, 'b-', linewidth=2, label='Altitude')
    ax.scatter([data.time[-1]], [data.altitude[-1]], c='darkorange', s=90, marker='*',
               zorder=5, label=f'Final ({data.altitude[-1]:.3f} km)')
    _mark_separations(ax, data)

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Altitude (km)')
    ax.set_title('Altitude Profile', fontweight='bold')
    ax.legend(loc='lower right', framealpha=0.95)
    ax.set_xlim(0, _x_limit(data))
    ax.set_ylim(0, None)

    plt.tight_layout()
    path = os.path.join(output_dir, '01_altitude_profile.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)

    return path


def plot_speed_profile(data: TelemetryData, output_dir: str) -> str:
    """Speed vs time.

    Returns:
        Path to saved plot file
    """
    fig, ax = plt.subplots()

    ax.plot(data.time, data.speed, 'r-', linewidth=2, label='Speed')
    _mark_separations(ax, data)

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Speed (km/h)')
    ax.set_title('Speed Profile', fontweight='bold')
    ax.legend(loc='upper right', framealpha=0.95)
    ax.set_xlim(0, _x_limit(data))
    ax.set_ylim(0, None)

    plt.tight_layout()
    path = os.path.join(output_dir, '02_speed_profile.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)

    return path


def plot_fuel_profile(data: TelemetryData, output_dir: str) -> str:
    """Remaining fuel with the active stage on a second axis.

    Returns:
        Path to saved plot file
    """
    fig, ax = plt.subplots()

    ax.fill_between(data.time, 0, data.fuel_percentage, alpha=0.25, color='#2ca02c')
    ax.plot(data.time, data.fuel_percentage, 'g-', linewidth=2, label='Fuel')
    _mark_separations(ax, data)

    ax2 = ax.twinx()
    ax2.step(data.time, data.stage, 'k--', where='post', linewidth=1.2, label='Stage')
    ax2.set_ylabel('Stage')
    ax2.set_ylim(0, max(int(data.stage.max()), 1) + 1)
    ax2.grid(False)

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Fuel Remaining (%)')
    ax.set_title('Fuel and Staging Profile', fontweight='bold')
    lines, labels = ax.get_legend_handles_labels()
    lines2, labels2 = ax2.get_legend_handles_labels()
    ax.legend(lines + lines2, labels + labels2, loc='upper right', framealpha=0.95)
    ax.set_xlim(0, _x_limit(data))
    ax.set_ylim(0, 105)

    plt.tight_layout()
    path = os.path.join(output_dir, '03_fuel_profile.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)

    return path


# =============================================================================
# Main Entry Point
# =============================================================================

def generate_all_plots(log, output_dir: str = "plots") -> List[str]:
    """Generate every telemetry plot for a flight log.

    Args:
        log: FlightLog (or any object with the same list attributes)
        output_dir: Directory to save plots (created if it doesn't exist)

    Returns:
        List of paths to saved plot files

    Example:
        >>> result, log, reason = run_mission(rocket, target)
        >>> files = generate_all_plots(log, "output/plots")
    """
    os.makedirs(output_dir, exist_ok=True)
    configure_plot_style()
    data = extract_log_data(log)

    saved_files = []
    for plot_func in (plot_altitude_profile, plot_speed_profile, plot_fuel_profile):
        path = plot_func(data, output_dir)
        saved_files.append(path)
        logger.info(f"Saved plot: {path}")

    return saved_files
