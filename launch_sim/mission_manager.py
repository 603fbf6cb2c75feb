"""
Launch Mission Manager

This module handles the high-level state machine for a mission.
It defines the discrete mission states and the transition logic between them.

    IDLE -> IN_FLIGHT -> COMPLETED

Transitions:
  - Launch:      rocket and target selected, not already in flight
  - Completion:  fuel exhausted, or altitude reached the target distance
  - Termination: the caller ends a flight that ran out of time
  - Reset:       assigning a rocket or target after completion returns to IDLE

The manager advances the flight one whole second at a time. All mission
bookkeeping lives in a single Mission record that only the manager's
transition methods mutate.
"""

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Optional

from . import constants as C
from .config import SimulationConfig, create_default_config
from .orbital import analyze_orbital_capability, analyze_reachability
from .rocket import Rocket
from .target import Target
from .types import FlightStatus, MissionResult, PreLaunchCheckResult
from .validation import InvalidOperationError

logger = logging.getLogger(__name__)


class MissionState(Enum):
    IDLE = "Idle - Ready for mission setup"
    IN_FLIGHT = "In Flight - Mission in progress"
    COMPLETED = "Completed - Mission finished"

    @property
    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass
class Mission:
    """Mission record owned by the MissionManager."""
    rocket: Optional[Rocket] = None
    target: Optional[Target] = None
    state: MissionState = MissionState.IDLE
    mission_time: int = 0  # s
    max_altitude_achieved: float = 0.0  # km
    stage_separated_this_tick: bool = False
    final_result: Optional[MissionResult] = None


class MissionManager:
    """
    Sequences pre-launch checks, launch, per-second flight updates and
    completion for exactly one mission at a time.

    Rocket and target are borrowed from the registries; the manager never
    deletes them, and refuses to swap them while the mission is in flight.
    """

    def __init__(self, config: SimulationConfig = None):
        self.config = config or create_default_config()
        self._mission = Mission()

    # ── Read-only views ──────────────────────────────────────────────────

    @property
    def rocket(self) -> Optional[Rocket]:
        return self._mission.rocket

    @property
    def target(self) -> Optional[Target]:
        return self._mission.target

    @property
    def state(self) -> MissionState:
        return self._mission.state

    @property
    def is_in_flight(self) -> bool:
        return self._mission.state == MissionState.IN_FLIGHT

    @property
    def mission_time(self) -> int:
        return self._mission.mission_time

    @property
    def max_altitude_achieved(self) -> float:
        return self._mission.max_altitude_achieved

    @property
    def stage_separated(self) -> bool:
        """True if a stage dropped during the last update_simulation call."""
        return self._mission.stage_separated_this_tick

    # ── Setup transitions ────────────────────────────────────────────────

    def _require_not_in_flight(self, action: str):
        if self._mission.state == MissionState.IN_FLIGHT:
            raise InvalidOperationError(f"Cannot {action} during active mission")

    def _reopen_if_completed(self):
        # A fresh selection after a finished mission starts a new setup
        if self._mission.state == MissionState.COMPLETED:
            self._mission.state = MissionState.IDLE
            self._mission.final_result = None

    def set_rocket(self, rocket: Optional[Rocket]):
        """
        Select the rocket for the mission and put it back on the pad.

        Raises:
            InvalidOperationError: while a mission is in flight
        """
        self._require_not_in_flight("change rocket")
        self._reopen_if_completed()
        self._mission.rocket = rocket
        if rocket is not None:
            rocket.reset_state()
        logger.info(f"Rocket set for mission: {rocket.name if rocket is not None else None}")

    def set_target(self, target: Optional[Target]):
        """
        Select the mission target.

        Raises:
            InvalidOperationError: while a mission is in flight
        """
        self._require_not_in_flight("change target")
        self._reopen_if_completed()
        self._mission.target = target
        logger.info(f"Target set for mission: {target.name if target is not None else None}")

    # ── Analysis ─────────────────────────────────────────────────────────

    def perform_pre_launch_checks(self) -> PreLaunchCheckResult:
        """
        Report mission readiness and, when both rocket and target are
        selected, the reachability and orbital analyses.

        Pure with respect to mission state: repeated calls give equal results.
        """
        rocket = self._mission.rocket
        target = self._mission.target
        has_rocket = rocket is not None
        has_target = target is not None

        reachability = None
        orbital_analysis = None
        if has_rocket and has_target:
            reachability = analyze_reachability(rocket, target)
            estimated_final_velocity = (rocket.max_speed / C.SECONDS_PER_HOUR
                                        * self.config.final_velocity_efficiency)
            orbital_analysis = analyze_orbital_capability(estimated_final_velocity,
                                                          target.distance_from_earth)

        is_reachable = reachability is not None and reachability.can_reach_target
        shortfall = reachability.delta_v_deficit if reachability is not None else 0.0

        result = PreLaunchCheckResult(
            has_rocket=has_rocket,
            has_target=has_target,
            rocket_name=rocket.name if has_rocket else None,
            target_name=target.name if has_target else None,
            target_distance=target.distance_from_earth if has_target else 0.0,
            estimated_range=rocket.calculate_estimated_range() if has_rocket else 0.0,
            is_reachable=is_reachable,
            shortfall=shortfall,
            reachability=reachability,
            orbital_analysis=orbital_analysis,
        )
        logger.info(f"Pre-launch checks completed - Rocket: {result.rocket_name}, "
                    f"Target: {result.target_name}, Reachable: {is_reachable}")
        return result

    # ── Flight transitions ───────────────────────────────────────────────

    def launch(self) -> MissionResult:
        """
        Start a new mission.

        Returns:
            A zero-valued placeholder MissionResult; poll the flight status
            and the final result for real data

        Raises:
            InvalidOperationError: if rocket or target is missing, or a
                mission is already in flight. The manager is left unchanged.
        """
        m = self._mission
        if m.rocket is None or m.target is None:
            raise InvalidOperationError("Both rocket and target must be selected before launching")
        self._require_not_in_flight("launch")

        m.rocket.reset_state()
        m.state = MissionState.IN_FLIGHT
        m.mission_time = 0
        m.max_altitude_achieved = 0.0
        m.stage_separated_this_tick = False
        m.final_result = None
        m.rocket.launch()

        logger.info(f"Mission launched - Rocket: {m.rocket.name}, Target: {m.target.name}")
        return MissionResult(
            successful=False,
            final_altitude=0.0,
            final_speed=0.0,
            mission_duration=0,
            target_distance=m.target.distance_from_earth,
            distance_to_target=0.0,
        )

    def update_simulation(self, dt: int):
        """
        Advance the mission by dt whole seconds.

        Stops early when the mission completes; the remaining seconds of
        this call are discarded. No-op unless a mission is in flight.

        Args:
            dt: Number of one-second ticks to run
        """
        m = self._mission
        if m.state != MissionState.IN_FLIGHT or m.rocket is None:
            return

        m.stage_separated_this_tick = False

        for _ in range(int(dt)):
            m.mission_time += 1

            if m.rocket.should_separate_stage() and m.rocket.separate_stage():
                m.stage_separated_this_tick = True

            still_flying = m.rocket.update(self.config.tick_seconds, self.config)
            m.max_altitude_achieved = max(m.max_altitude_achieved, m.rocket.altitude)
            logger.debug(f"t={m.mission_time}s {m.rocket.state}")

            if not still_flying or m.rocket.altitude >= m.target.distance_from_earth:
                self._complete_mission()
                break

    def terminate_mission(self) -> MissionResult:
        """
        End the flight in progress where it stands (IN_FLIGHT -> COMPLETED).

        Used by callers that bound the mission time; the result is judged
        exactly as at natural completion.

        Raises:
            InvalidOperationError: if no mission is in flight
        """
        if self._mission.state != MissionState.IN_FLIGHT:
            raise InvalidOperationError("No mission in flight to terminate")
        logger.info(f"Mission terminated at t={self._mission.mission_time}s")
        self._complete_mission()
        return self._mission.final_result

    def _complete_mission(self):
        """IN_FLIGHT -> COMPLETED, recording the final result."""
        m = self._mission
        m.state = MissionState.COMPLETED

        final_altitude = m.rocket.altitude
        final_speed = m.rocket.current_speed
        target_distance = m.target.distance_from_earth
        successful = final_altitude >= target_distance

        orbital_analysis = analyze_orbital_capability(m.rocket.speed_km_s, final_altitude)

        m.final_result = MissionResult(
            successful=successful,
            final_altitude=final_altitude,
            final_speed=final_speed,
            mission_duration=m.mission_time,
            target_distance=target_distance,
            distance_to_target=max(0.0, target_distance - final_altitude),
            orbital_analysis=orbital_analysis,
            max_altitude_achieved=m.max_altitude_achieved,
        )

        logger.info(f"Mission completed - Success: {successful}, "
                    f"Final Altitude: {final_altitude:.3f}km, "
                    f"Duration: {m.mission_time}s")

    # ── Snapshots ────────────────────────────────────────────────────────

    def get_flight_status(self) -> FlightStatus:
        """Live snapshot while in flight, zeroed otherwise."""
        m = self._mission
        if m.rocket is None or m.state != MissionState.IN_FLIGHT:
            return FlightStatus(0, 0.0, 0.0, 0.0, False)

        return FlightStatus(
            current_stage=m.rocket.current_stage,
            fuel_percentage=m.rocket.fuel_percentage,
            altitude=m.rocket.altitude,
            speed=m.rocket.current_speed,
            stage_separated=m.stage_separated_this_tick,
        )

    def get_final_result(self) -> Optional[MissionResult]:
        """The completion result, or None before the mission completes."""
        return self._mission.final_result
