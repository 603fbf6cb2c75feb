"""Tests for the text report formatters."""
from launch_sim import report
from launch_sim.mission_manager import MissionManager
from launch_sim.config import create_test_config
from launch_sim.rocket import Rocket
from launch_sim.target import Target
from launch_sim.types import FlightStatus, MissionResult
from launch_sim.orbital import analyze_orbital_capability


def _checks(rocket=None, target=None):
    mgr = MissionManager(config=create_test_config())
    mgr.set_rocket(rocket)
    mgr.set_target(target)
    return mgr.perform_pre_launch_checks()


def test_pre_launch_checks_missing_selection():
    text = report.format_pre_launch_checks(_checks(target=Target("Moon", 384400.0)))
    assert "Rocket: NOT SELECTED" in text
    assert "ERROR" in text


def test_pre_launch_checks_go():
    text = report.format_pre_launch_checks(_checks(Rocket("Big", 1e6, 25000.0, 3), Target("LEO", 408.0)))
    assert "Estimated Max Range: 80000.00 km" in text
    assert "ORBITAL MECHANICS ANALYSIS" in text
    assert "Can Reach Target: YES" in text
    assert "'Go' for launch" in text


def test_pre_launch_checks_warning():
    text = report.format_pre_launch_checks(_checks(Rocket("Small", 1.0, 1000.0, 1), Target("GEO", 35786.0)))
    assert "WARNING" in text
    assert "Delta-V Deficit" in text
    assert "Escape Velocity Deficit" in text


def test_physics_analysis_unavailable():
    text = report.format_physics_analysis(_checks())
    assert "not available" in text


def test_flight_status_with_separation():
    text = report.format_flight_status(FlightStatus(2, 50.0, 0.123, 0.0, True))
    assert "Stage: 2, Fuel: 50.0%" in text
    assert "Stage 1 complete" in text


def test_mission_result_missed():
    result = MissionResult(False, 0.29, 0.0, 59, 400.0, 399.71,
                           analyze_orbital_capability(0.0, 0.29), 0.29)
    text = report.format_mission_result(result)
    assert "SUBORBITAL" in text
    assert "TARGET MISSED - 399.71 km remaining" in text
    assert "Mission Duration: 59 seconds" in text


def test_mission_result_reached_escape():
    result = MissionResult(True, 500.0, 45000.0, 100, 400.0, 0.0,
                           analyze_orbital_capability(12.5, 500.0), 500.0)
    text = report.format_mission_result(result)
    assert "ESCAPE ACHIEVED" in text
    assert "TARGET REACHED" in text


def test_orbital_reference():
    text = report.format_orbital_reference()
    assert "Earth Escape Velocity (surface): 11.19 km/s" in text
    assert "LEO Orbital Velocity (408 km)" in text
    assert "Geostationary Orbit (35786 km)" in text
    assert "Karman Line" in text
