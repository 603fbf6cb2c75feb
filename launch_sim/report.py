"""
Launch Mission Simulator - Text Reports

Plain-text formatting of the snapshot types for terminal output. The
formatters only read the snapshots; they never touch mission state.
"""

from typing import List

from . import constants as C
from .orbital import escape_velocity, orbital_velocity
from .types import FlightStatus, MissionResult, PreLaunchCheckResult
from .utils import kms_to_kmh


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def format_pre_launch_checks(result: PreLaunchCheckResult) -> str:
    """Readiness summary, followed by the physics analysis when available."""
    lines = [
        "",
        "=== PRE-LAUNCH CHECKS ===",
        f"Rocket: {result.rocket_name if result.has_rocket else 'NOT SELECTED'}",
        f"Target: {result.target_name if result.has_target else 'NOT SELECTED'}",
    ]

    if not result.ready_for_launch:
        lines.append("ERROR: Both rocket and target must be selected before launch checks!")
        lines.append("=" * 25)
        return "\n".join(lines)

    lines.append(f"Target Distance: {result.target_distance:.1f} km")
    lines.append(f"Estimated Max Range: {result.estimated_range:.2f} km")
    lines.append(format_physics_analysis(result))
    if result.is_reachable:
        lines.append("All systems are 'Go' for launch.")
    else:
        lines.append("WARNING: Mission parameters indicate potential challenges!")
        lines.append("You may still proceed with launch to test rocket capabilities.")
    lines.append("=" * 25)
    return "\n".join(lines)


def format_physics_analysis(result: PreLaunchCheckResult) -> str:
    """Orbital-mechanics breakdown of a pre-launch check."""
    reach = result.reachability
    if reach is None:
        return "Physics analysis not available - select rocket and target first."

    v_esc = escape_velocity(0.0)
    lines = [
        "",
        "=== ORBITAL MECHANICS ANALYSIS ===",
        f"Earth Escape Velocity: {v_esc:.2f} km/s ({kms_to_kmh(v_esc):.0f} km/h)",
        f"Required Delta-V: {reach.required_delta_v:.2f} km/s",
        f"Achievable Delta-V: {reach.achievable_velocity:.2f} km/s",
    ]
    if result.target_distance > 0:
        lines.append(f"Target Orbital Velocity: {reach.required_orbital_velocity:.2f} km/s")

    lines += [
        "",
        "=== MISSION CAPABILITY ===",
        f"Can Escape Earth: {_yes_no(reach.can_escape_earth)}",
        f"Can Reach Target: {_yes_no(reach.can_reach_target)}",
        f"Can Orbit Target: {_yes_no(reach.can_orbit_target)}",
    ]
    if not reach.can_escape_earth:
        lines.append(f"Escape Velocity Deficit: {reach.escape_velocity_deficit:.2f} km/s")
    if not reach.can_reach_target:
        lines.append(f"Delta-V Deficit: {reach.delta_v_deficit:.2f} km/s")

    if result.orbital_analysis is not None:
        lines.append(f"Estimated Burnout Status: {result.orbital_analysis.status}")

    lines.append("=" * 35)
    return "\n".join(lines)


def format_flight_status(status: FlightStatus) -> str:
    """One-line live status."""
    line = (f"Stage: {status.current_stage}, Fuel: {status.fuel_percentage:.1f}%, "
            f"Altitude: {status.altitude:.1f} km, Speed: {status.speed:.0f} km/h")
    if status.stage_separated:
        line += (f"\nStage {status.current_stage - 1} complete. Separating stage. "
                 f"Entering Stage {status.current_stage}.")
    return line


def format_mission_result(result: MissionResult) -> str:
    """Detailed mission outcome with the final orbital analysis."""
    lines = [
        "",
        "=== MISSION COMPLETE ===",
        f"Final Altitude: {result.final_altitude:.2f} km",
        f"Final Speed: {result.final_speed:.0f} km/h",
        f"Mission Duration: {result.mission_duration} seconds "
        f"({result.mission_duration / 60.0:.1f} minutes)",
        f"Maximum Altitude: {result.max_altitude_achieved:.2f} km",
        f"Final Velocity: {result.final_velocity_km_s:.2f} km/s",
    ]

    analysis = result.orbital_analysis
    if analysis is not None:
        lines.append(f"Orbital Status: {analysis.status}")
        lines.append(f"Required Orbital Velocity: {analysis.required_orbital_velocity:.2f} km/s")
        lines.append(f"Required Escape Velocity: {analysis.required_escape_velocity:.2f} km/s")
        if result.achieved_escape:
            lines.append("ESCAPE ACHIEVED - Rocket has left Earth's gravity well")
        elif result.achieved_orbit:
            lines.append("ORBIT ACHIEVED - Rocket is circling Earth")
        else:
            lines.append("SUBORBITAL - Rocket will fall back to Earth")
            lines.append(f"   Velocity deficit: {analysis.velocity_deficit:.2f} km/s for orbit")

    if result.target_distance > 0:
        if result.successful:
            lines.append("TARGET REACHED - Mission successful")
        else:
            lines.append(f"TARGET MISSED - {result.distance_to_target:.2f} km remaining")

    lines.append("=" * 33)
    return "\n".join(lines)


def format_orbital_reference() -> str:
    """Reference table of orbital and escape velocities."""
    v_esc = escape_velocity(0.0)
    v_iss = orbital_velocity(C.ISS_ALTITUDE_KM)
    lines: List[str] = [
        "",
        "=== ORBITAL MECHANICS REFERENCE ===",
        f"Earth Escape Velocity (surface): {v_esc:.2f} km/s ({kms_to_kmh(v_esc):.0f} km/h)",
        f"LEO Orbital Velocity ({C.ISS_ALTITUDE_KM:.0f} km): {v_iss:.2f} km/s ({kms_to_kmh(v_iss):.0f} km/h)",
        "",
        "Common Orbital Velocities:",
    ]
    for name, altitude in C.REFERENCE_ORBITS:
        lines.append(f"  {name} ({altitude:.0f} km): Orbital {orbital_velocity(altitude):.2f} km/s, "
                     f"Escape {escape_velocity(altitude):.2f} km/s")
    lines += [
        "",
        "Atmospheric Information:",
        f"  Karman Line (space boundary): {C.ATMOSPHERE_CEILING_KM:.0f} km",
        f"  Sea level density: {C.RHO_0} kg/m^3, scale height {C.H_SCALE_KM} km",
        "=" * 36,
    ]
    return "\n".join(lines)
