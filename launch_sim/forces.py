"""
Launch Mission Simulator - Force Computations

This module implements the scalar force models used by the flight model:
- Central gravity (inverse square)
- Exponential atmosphere
- Aerodynamic drag
- Stage- and fuel-dependent thrust
"""

import numpy as np

from . import constants as C
from .utils import radius_m


# =============================================================================
# ATMOSPHERE MODEL (exponential, vacuum above the Karman line)
# =============================================================================

def atmospheric_density(altitude: float) -> float:
    """
    Compute atmospheric density: rho = rho0 * exp(-h / H).

    Args:
        altitude: Altitude above sea level (km)

    Returns:
        Density (kg/m^3), zero above 100 km
    """
    if altitude > C.ATMOSPHERE_CEILING_KM:
        return 0.0
    return float(C.RHO_0 * np.exp(-altitude / C.H_SCALE_KM))


# =============================================================================
# FORCE MODELS
# =============================================================================

def gravitational_acceleration(altitude: float) -> float:
    """
    Compute gravitational acceleration g = mu / r^2.

    Args:
        altitude: Altitude above the surface (km)

    Returns:
        Acceleration magnitude (m/s^2)
    """
    r = radius_m(altitude)
    return C.MU_EARTH / (r * r)


def drag_force(velocity: float, altitude: float,
               area: float = C.REFERENCE_AREA,
               drag_coefficient: float = C.DRAG_COEFFICIENT) -> float:
    """
    Compute aerodynamic drag F = 0.5 * rho * v^2 * Cd * A.

    Args:
        velocity: Speed (km/s)
        altitude: Altitude (km)
        area: Reference area (m^2)
        drag_coefficient: Cd (dimensionless)

    Returns:
        Drag force magnitude (N)
    """
    rho = atmospheric_density(altitude)
    v_ms = velocity * C.METERS_PER_KM
    return 0.5 * rho * v_ms * v_ms * drag_coefficient * area


def compute_thrust(fuel_capacity: float, current_fuel: float, stage: int,
                   thrust_per_kg: float = C.THRUST_PER_KG_CAPACITY,
                   stage_multiplier: float = C.THRUST_STAGE_MULTIPLIER,
                   full_thrust_fraction: float = C.FULL_THRUST_FUEL_FRACTION) -> float:
    """
    Compute engine thrust.

    Base thrust scales with tank capacity and grows geometrically with the
    stage number. Below full_thrust_fraction of capacity the engine is
    starved and thrust tapers linearly with remaining fuel.

    Returns:
        Thrust (N), zero with empty tanks
    """
    if current_fuel <= 0.0:
        return 0.0

    base_thrust = fuel_capacity * thrust_per_kg
    multiplier = stage_multiplier ** stage
    fuel_efficiency = min(1.0, current_fuel / (fuel_capacity * full_thrust_fraction))
    return base_thrust * multiplier * fuel_efficiency


def compute_net_acceleration(thrust: float, drag: float, gravity: float,
                             mass: float) -> float:
    """
    Net vertical acceleration (m/s^2) = (T - D - g*m) / m.
    """
    return (thrust - drag - gravity * mass) / mass
