"""
Launch Mission Simulator - Result and Status Types

This module provides the immutable snapshot types returned by the physics
analysis and the mission manager to the presentation layer.

Each concept is a single record; the richer analysis rides along as an
optional payload instead of a subclass.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import constants as C


class OrbitalStatus(Enum):
    """Trajectory classification for a speed at an altitude."""
    SUBORBITAL = "Suborbital - Will fall back to Earth"
    STABLE_ORBIT = "Stable Orbit - Circling Earth"
    ESCAPE_TRAJECTORY = "Escape Trajectory - Leaving Earth's gravity well"

    @property
    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrbitalAnalysis:
    """Orbital capability of a speed (km/s) at an altitude (km)."""
    can_orbit: bool
    can_escape: bool
    status: OrbitalStatus
    required_orbital_velocity: float  # km/s
    required_escape_velocity: float  # km/s
    velocity_deficit: float  # km/s short of orbit (>= 0)
    escape_deficit: float  # km/s short of escape (>= 0)


@dataclass(frozen=True)
class ReachabilityAnalysis:
    """Delta-v budget of a rocket against a target."""
    can_reach_target: bool
    can_orbit_target: bool
    can_escape_earth: bool
    required_delta_v: float  # km/s
    achievable_velocity: float  # km/s
    required_orbital_velocity: float  # km/s at target distance
    required_escape_velocity: float  # km/s at surface

    @property
    def delta_v_deficit(self) -> float:
        """Delta-v still missing to reach the target (km/s)."""
        return max(0.0, self.required_delta_v - self.achievable_velocity)

    @property
    def escape_velocity_deficit(self) -> float:
        """Velocity still missing to escape Earth (km/s)."""
        return max(0.0, self.required_escape_velocity - self.achievable_velocity)


@dataclass(frozen=True)
class PreLaunchCheckResult:
    """
    Outcome of the pre-launch checks.

    reachability and orbital_analysis are only present when both a rocket
    and a target were selected.
    """
    has_rocket: bool
    has_target: bool
    rocket_name: Optional[str]
    target_name: Optional[str]
    target_distance: float  # km
    estimated_range: float  # km
    is_reachable: bool
    shortfall: float  # km/s of delta-v
    reachability: Optional[ReachabilityAnalysis] = None
    orbital_analysis: Optional[OrbitalAnalysis] = None

    @property
    def has_analysis(self) -> bool:
        return self.reachability is not None

    @property
    def ready_for_launch(self) -> bool:
        """Both mission inputs are selected."""
        return self.has_rocket and self.has_target


@dataclass(frozen=True)
class FlightStatus:
    """Live in-flight snapshot."""
    current_stage: int
    fuel_percentage: float
    altitude: float  # km
    speed: float  # km/h
    stage_separated: bool


@dataclass(frozen=True)
class MissionResult:
    """
    Mission outcome.

    The launch placeholder carries no orbital analysis; the completion
    result carries the final OrbitalAnalysis and the peak altitude.
    """
    successful: bool
    final_altitude: float  # km
    final_speed: float  # km/h
    mission_duration: int  # s
    target_distance: float  # km
    distance_to_target: float  # km
    orbital_analysis: Optional[OrbitalAnalysis] = None
    max_altitude_achieved: float = 0.0  # km

    @property
    def final_velocity_km_s(self) -> float:
        return self.final_speed / C.SECONDS_PER_HOUR

    @property
    def achieved_orbit(self) -> bool:
        return self.orbital_analysis is not None and self.orbital_analysis.can_orbit

    @property
    def achieved_escape(self) -> bool:
        return self.orbital_analysis is not None and self.orbital_analysis.can_escape

    @property
    def orbital_status_description(self) -> str:
        if self.orbital_analysis is None:
            return "Orbital analysis not available"
        return self.orbital_analysis.status.description
