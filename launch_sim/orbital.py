"""
Launch Mission Simulator - Orbital Mechanics Analysis

Circular/escape velocities, a two-burn Hohmann delta-v estimate, and the
rocket-equation capability heuristics used for pre-launch reachability.

All velocities are returned in km/s; altitudes are km above the surface.
"""

import numpy as np

from . import constants as C
from .types import OrbitalAnalysis, OrbitalStatus, ReachabilityAnalysis
from .utils import radius_m


def escape_velocity(altitude: float) -> float:
    """
    Escape velocity v_esc = sqrt(2 * mu / r).

    Args:
        altitude: Altitude above the surface (km)

    Returns:
        Escape velocity (km/s)
    """
    return float(np.sqrt(2.0 * C.MU_EARTH / radius_m(altitude))) / C.METERS_PER_KM


def orbital_velocity(altitude: float) -> float:
    """
    Circular orbit velocity v_c = sqrt(mu / r).

    Args:
        altitude: Altitude above the surface (km)

    Returns:
        Circular velocity (km/s)
    """
    return float(np.sqrt(C.MU_EARTH / radius_m(altitude))) / C.METERS_PER_KM


def _vis_viva(r_m: float, a_m: float) -> float:
    """Speed (km/s) on an orbit of semi-major axis a_m at radius r_m."""
    return float(np.sqrt(C.MU_EARTH * (2.0 / r_m - 1.0 / a_m))) / C.METERS_PER_KM


def analyze_orbital_capability(speed: float, altitude: float) -> OrbitalAnalysis:
    """
    Classify a speed at an altitude as suborbital, orbital or escape.

    Args:
        speed: Vehicle speed (km/s)
        altitude: Altitude (km)

    Returns:
        OrbitalAnalysis with the required velocities and both deficits
    """
    required_orbital = orbital_velocity(altitude)
    required_escape = escape_velocity(altitude)

    can_orbit = speed >= required_orbital
    can_escape = speed >= required_escape

    if can_escape:
        status = OrbitalStatus.ESCAPE_TRAJECTORY
    elif can_orbit:
        status = OrbitalStatus.STABLE_ORBIT
    else:
        status = OrbitalStatus.SUBORBITAL

    return OrbitalAnalysis(
        can_orbit=can_orbit,
        can_escape=can_escape,
        status=status,
        required_orbital_velocity=required_orbital,
        required_escape_velocity=required_escape,
        velocity_deficit=max(0.0, required_orbital - speed),
        escape_deficit=max(0.0, required_escape - speed),
    )


def required_delta_v(start_altitude: float, target_altitude: float) -> float:
    """
    Two-burn Hohmann transfer estimate between two circular altitudes.

    Transfer ellipse:
        r_p = R + min(h1, h2),  r_a = R + max(h1, h2),  a = (r_p + r_a) / 2
    Burns:
        dv1 = |v_transfer(r_start) - v_circ(start)|
        dv2 = |v_circ(target) - v_transfer(r_target)|

    Returns:
        Total delta-v (km/s)
    """
    r_start = radius_m(start_altitude)
    r_target = radius_m(target_altitude)
    a_transfer = 0.5 * (min(r_start, r_target) + max(r_start, r_target))

    dv1 = abs(_vis_viva(r_start, a_transfer) - orbital_velocity(start_altitude))
    dv2 = abs(orbital_velocity(target_altitude) - _vis_viva(r_target, a_transfer))
    return dv1 + dv2


# =============================================================================
# CAPABILITY HEURISTICS
# =============================================================================

def estimate_specific_impulse(rocket) -> float:
    """
    Heuristic Isp (s): more stages and bigger tanks mean better engines.

        Isp = 300 + 50*(stages - 1) + 20*ln(fuel / 100000), clipped to [250, 450]
    """
    stage_bonus = (rocket.total_stages - 1) * C.ISP_STAGE_BONUS
    fuel_bonus = np.log(rocket.fuel_capacity / C.ISP_REFERENCE_FUEL) * C.ISP_FUEL_BONUS
    return float(np.clip(C.ISP_BASE + stage_bonus + fuel_bonus, C.ISP_MIN, C.ISP_MAX))


def estimate_mass_ratio(rocket) -> float:
    """Heuristic m0/mf: 3.0 for one stage, x2.5 per extra stage, capped at 20."""
    ratio = C.MASS_RATIO_BASE * C.MASS_RATIO_STAGE_MULTIPLIER ** (rocket.total_stages - 1)
    return min(C.MASS_RATIO_MAX, ratio)


def estimate_achievable_velocity(rocket) -> float:
    """
    Ideal rocket equation dv = Isp * g0 * ln(m0/mf).

    Returns:
        Achievable delta-v (km/s)
    """
    isp = estimate_specific_impulse(rocket)
    mass_ratio = estimate_mass_ratio(rocket)
    g0_kms = C.G0 / C.METERS_PER_KM
    return float(isp * g0_kms * np.log(mass_ratio))


def analyze_reachability(rocket, target) -> ReachabilityAnalysis:
    """
    Compare a rocket's estimated delta-v with what the target requires.

    Args:
        rocket: Object exposing fuel_capacity and total_stages
        target: Object exposing distance_from_earth (km)

    Returns:
        ReachabilityAnalysis
    """
    distance = target.distance_from_earth

    required_escape = escape_velocity(0.0)
    required_orbital = orbital_velocity(distance)
    delta_v = required_delta_v(0.0, distance)
    achievable = estimate_achievable_velocity(rocket)

    return ReachabilityAnalysis(
        can_reach_target=achievable >= delta_v,
        can_orbit_target=achievable >= required_orbital,
        can_escape_earth=achievable >= required_escape,
        required_delta_v=delta_v,
        achievable_velocity=achievable,
        required_orbital_velocity=required_orbital,
        required_escape_velocity=required_escape,
    )
