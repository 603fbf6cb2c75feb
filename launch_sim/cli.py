"""
Launch Mission Simulator - CLI

The single entry point for listing the inventory, running pre-launch checks,
flying missions and generating telemetry plots.
"""

import argparse
import logging
import os
import sys

from .config import create_default_config
from .main import run_mission
from .mission_manager import MissionManager
from .plotting import generate_all_plots
from .registry import create_default_registries
from .report import (
    format_flight_status,
    format_mission_result,
    format_orbital_reference,
    format_pre_launch_checks,
)
from .validation import InvalidOperationError, ValidationError

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="launch-sim",
        description="Rocket Launch Mission Simulator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available rockets and targets and exit"
    )
    parser.add_argument(
        "--reference",
        action="store_true",
        help="Print the orbital mechanics reference table and exit"
    )
    parser.add_argument(
        "--rocket", "-r",
        type=str,
        default="Falcon Heavy",
        help="Name of the rocket to fly"
    )
    parser.add_argument(
        "--target", "-t",
        type=str,
        default="Earth Orbit",
        help="Name of the mission target"
    )
    parser.add_argument(
        "--checks-only",
        action="store_true",
        help="Run pre-launch checks without launching"
    )
    parser.add_argument(
        "--fast-forward",
        type=int,
        default=None,
        metavar="SECONDS",
        help="Launch and advance the mission by SECONDS in one step instead of flying to completion"
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default="plots",
        help="Directory to save output plots"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress verbose output"
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip plot generation"
    )
    return parser.parse_args(argv)


def _print_inventory(rockets, targets):
    print("\n=== AVAILABLE ROCKETS ===")
    for rocket in rockets:
        print(f"  {rocket!r}")
    print("\n=== AVAILABLE TARGETS ===")
    for target in targets:
        print(f"  {target}")


def _fast_forward(manager: MissionManager, seconds: int):
    """Advance a launched mission by a fixed number of seconds and report."""
    manager.update_simulation(seconds)
    if manager.is_in_flight:
        print(f"\nT+{manager.mission_time}s")
        print(format_flight_status(manager.get_flight_status()))
    else:
        print(format_mission_result(manager.get_final_result()))


def main(argv=None) -> int:
    """Main execution flow; returns the process exit status."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = create_default_config()
    rockets, targets = create_default_registries(config)

    if args.list:
        _print_inventory(rockets, targets)
        return 0
    if args.reference:
        print(format_orbital_reference())
        return 0

    rocket = rockets.get_rocket(args.rocket)
    target = targets.get_target(args.target)
    if rocket is None or target is None:
        missing = f"rocket '{args.rocket}'" if rocket is None else f"target '{args.target}'"
        logger.error(f"Unknown {missing}")
        print(f"\n[ERROR] Unknown {missing}. Use --list to see what is available.")
        return 1

    print(f"\n{'='*70}\nLAUNCH MISSION: {rocket.name} -> {target.name}\n{'='*70}")

    try:
        manager = MissionManager(config=config)
        manager.set_rocket(rocket)
        manager.set_target(target)
        print(format_pre_launch_checks(manager.perform_pre_launch_checks()))
        if args.checks_only:
            return 0

        if args.fast_forward is not None:
            manager.launch()
            _fast_forward(manager, args.fast_forward)
            return 0

        result, log, reason = run_mission(rocket, target, manager=manager, verbose=not args.quiet)

        print("\n" + "="*60)
        print("MISSION SUMMARY")
        print("="*60)
        print(f"Termination reason: {reason}")
        print(format_mission_result(result))
        print("="*60 + "\n")

        if not args.no_plots and len(log) > 0:
            if os.path.isabs(args.output_dir):
                plot_dir = args.output_dir
            else:
                plot_dir = os.path.join(os.getcwd(), args.output_dir)

            logger.info(f"Generating plots in {plot_dir}")
            print(f">> Generating Plots in: {plot_dir}")
            generate_all_plots(log, plot_dir)

    except (ValidationError, InvalidOperationError) as e:
        logger.error(f"Mission failed: {e}")
        print(f"\n[ERROR] Mission failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
