"""
Launch Mission Simulator - Rocket Flight State

This module defines the single mutable state dataclass carried by a rocket
during a mission. No duplicated state is allowed anywhere.
"""

from dataclasses import dataclass


@dataclass
class FlightState:
    """
    Mutable per-mission flight state of a rocket.

    Attributes:
        current_fuel: Remaining fuel (kg), within [0, fuel_capacity]
        current_speed: Speed (km/h), within [0, max_speed]
        altitude: Altitude above the surface (km), never decreasing in flight
        current_stage: Active stage, within [1, total_stages]
        launched: True once the rocket has lifted off
    """

    current_fuel: float = 0.0
    current_speed: float = 0.0
    altitude: float = 0.0
    current_stage: int = 1
    launched: bool = False

    def copy(self) -> 'FlightState':
        """Create a copy of the state."""
        return FlightState(
            current_fuel=self.current_fuel,
            current_speed=self.current_speed,
            altitude=self.altitude,
            current_stage=self.current_stage,
            launched=self.launched,
        )

    def __str__(self) -> str:
        """Human-readable state summary."""
        return (
            f"FlightState(stage={self.current_stage}, "
            f"alt={self.altitude:.3f}km, "
            f"v={self.current_speed:.1f}km/h, "
            f"fuel={self.current_fuel:.1f}kg)"
        )


def create_initial_state(fuel_capacity: float) -> FlightState:
    """
    Create the pad state for a new mission.

    Returns:
        FlightState with full tanks, at rest on the ground, stage 1
    """
    return FlightState(
        current_fuel=float(fuel_capacity),
        current_speed=0.0,
        altitude=0.0,
        current_stage=1,
        launched=False,
    )
