"""
Launch Mission Simulator - Batch Mission Runner

This module drives a complete mission through the MissionManager:
- Pre-launch checks and launch
- One-second ticks until completion or the time limit
- Per-second telemetry logging for plots and reports
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Tuple

from .config import SimulationConfig, create_default_config
from .mission_manager import MissionManager, MissionState
from .rocket import Rocket
from .target import Target
from .types import FlightStatus, MissionResult

# Configure module logger
logger = logging.getLogger(__name__)


@dataclass
class FlightLog:
    """Container for logged per-second telemetry."""
    time: List[int] = field(default_factory=list)
    altitude: List[float] = field(default_factory=list)  # km
    speed: List[float] = field(default_factory=list)  # km/h
    fuel_percentage: List[float] = field(default_factory=list)
    stage: List[int] = field(default_factory=list)
    stage_separation_times: List[int] = field(default_factory=list)

    def append(self, t: int, status: FlightStatus):
        """Log data from the current tick."""
        self.time.append(t)
        self.altitude.append(status.altitude)
        self.speed.append(status.speed)
        self.fuel_percentage.append(status.fuel_percentage)
        self.stage.append(status.current_stage)
        if status.stage_separated:
            self.stage_separation_times.append(t)

    def __len__(self) -> int:
        return len(self.time)


def run_mission(
    rocket: Rocket,
    target: Target,
    config: SimulationConfig = None,
    manager: MissionManager = None,
    verbose: bool = None,
) -> Tuple[MissionResult, FlightLog, str]:
    """
    Fly one mission to completion, one second per tick.

    Args:
        rocket: Rocket to fly (its state is reset)
        target: Destination
        config: Simulation configuration (the manager's, or defaults, if None)
        manager: Existing MissionManager to drive (a new one if None); its
            config governs the flight
        verbose: Print a telemetry table (config.verbose if None)

    Returns:
        (final_result, log, termination_reason); a flight still going at
        config.max_mission_time is terminated and judged where it stands

    Raises:
        ValueError: if both config and a manager with a different config
            are given
    """
    if manager is None:
        manager = MissionManager(config=config or create_default_config())
    elif config is not None and config != manager.config:
        raise ValueError("config conflicts with the manager's config")
    config = manager.config
    if verbose is None:
        verbose = config.verbose

    manager.set_rocket(rocket)
    manager.set_target(target)
    manager.perform_pre_launch_checks()
    manager.launch()

    log = FlightLog()
    log.append(0, manager.get_flight_status())

    logger.info(f"Starting mission: rocket={rocket.name}, target={target.name}, "
                f"max_time={config.max_mission_time}s")

    if verbose:
        print("\n" + "=" * 70)
        print(f"MISSION: {rocket.name} -> {target.name} ({target.formatted_distance})")
        print("=" * 70)
        print(f"{'Time (s)':^10} | {'Stage':^6} | {'Fuel (%)':^9} | {'Alt (km)':^12} | {'Speed (km/h)':^12}")
        print("-" * 70)

    start_time = time.time()
    while manager.is_in_flight and manager.mission_time < config.max_mission_time:
        manager.update_simulation(1)
        if manager.is_in_flight:
            status = manager.get_flight_status()
            log.append(manager.mission_time, status)
            if verbose:
                _print_status(manager.mission_time, status)

    elapsed = time.time() - start_time
    result = manager.get_final_result()

    if manager.state == MissionState.COMPLETED:
        reason = "Target reached" if result.successful else "Fuel exhausted"
        # Final tick is not visible through the in-flight status
        log.append(result.mission_duration, FlightStatus(
            current_stage=rocket.current_stage,
            fuel_percentage=rocket.fuel_percentage,
            altitude=result.final_altitude,
            speed=result.final_speed,
            stage_separated=manager.stage_separated,
        ))
    else:
        reason = f"Maximum mission time reached ({config.max_mission_time}s)"
        logger.warning(reason)
        result = manager.terminate_mission()

    _log_completion(manager, reason, elapsed, verbose)
    return result, log, reason


def _print_status(t: int, status: FlightStatus):
    """Print a formatted status row."""
    msg = (f"{t:10d} | {status.current_stage:6d} | {status.fuel_percentage:9.1f} | "
           f"{status.altitude:12.3f} | {status.speed:12.1f}")
    print(msg)
    if status.stage_separated:
        print(f"{'':10} | Stage {status.current_stage - 1} complete, "
              f"entering stage {status.current_stage}")


def _log_completion(manager: MissionManager, reason: str, elapsed: float, verbose: bool):
    """Log and print the mission summary."""
    logger.info(f"Mission finished in {manager.mission_time} ticks ({elapsed:.3f}s wall): {reason}")

    if verbose:
        print("-" * 70)
        print(f"MISSION ENDED: {reason}")
        print(f"Mission Time:   {manager.mission_time} s")
        print(f"Max Altitude:   {manager.max_altitude_achieved:.3f} km")
        print("-" * 70)
