"""
Launch Mission Simulator - Configuration

This module provides a SimulationConfig dataclass for dependency injection,
allowing the flight-model coefficients to be varied without modifying the
global constants.

The defaults reproduce the reference flight model exactly.
"""

from dataclasses import dataclass

from . import constants as C


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for simulation parameters.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.

    Section grouping:
      1. Simulation timing
      2. Propulsion / mass model
      3. Aerodynamics
      4. Mission analysis
      5. Misc
    """

    # ── 1. Simulation timing ─────────────────────────────────────────────
    tick_seconds: float = C.TICK_SECONDS
    max_mission_time: int = C.MAX_MISSION_TIME

    # ── 2. Propulsion / mass model ───────────────────────────────────────
    fuel_consumption_rate: float = C.FUEL_CONSUMPTION_RATE
    stage_efficiency_multiplier: float = C.STAGE_EFFICIENCY_MULTIPLIER
    thrust_per_kg_capacity: float = C.THRUST_PER_KG_CAPACITY
    thrust_stage_multiplier: float = C.THRUST_STAGE_MULTIPLIER
    full_thrust_fuel_fraction: float = C.FULL_THRUST_FUEL_FRACTION
    dry_mass_fraction: float = C.DRY_MASS_FRACTION

    # ── 3. Aerodynamics ──────────────────────────────────────────────────
    reference_area: float = C.REFERENCE_AREA
    drag_coefficient: float = C.DRAG_COEFFICIENT

    # ── 4. Mission analysis ──────────────────────────────────────────────
    final_velocity_efficiency: float = C.FINAL_VELOCITY_EFFICIENCY

    # ── 5. Misc ──────────────────────────────────────────────────────────
    verbose: bool = True


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_test_config(max_mission_time: int = 5000,
                       **overrides) -> SimulationConfig:
    """Create a quiet config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(max_mission_time=max_mission_time, verbose=False)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
