"""
Tests for the mission state machine.

IDLE -> IN_FLIGHT -> COMPLETED, the guards on each transition, and the
snapshots exposed while and after flying.
"""

import unittest

import pytest

from launch_sim.config import create_test_config
from launch_sim.mission_manager import MissionManager, MissionState
from launch_sim.rocket import Rocket
from launch_sim.target import Target
from launch_sim.types import FlightStatus, OrbitalStatus
from launch_sim.validation import InvalidOperationError


def _manager(rocket=None, target=None):
    mgr = MissionManager(config=create_test_config())
    if rocket is not None:
        mgr.set_rocket(rocket)
    if target is not None:
        mgr.set_target(target)
    return mgr


def _fly_to_completion(mgr, limit=10000):
    while mgr.is_in_flight and mgr.mission_time < limit:
        mgr.update_simulation(1)


class TestMissionSetup(unittest.TestCase):

    def test_initial_state(self):
        mgr = _manager()
        self.assertEqual(mgr.state, MissionState.IDLE)
        self.assertIsNone(mgr.rocket)
        self.assertIsNone(mgr.target)
        self.assertIsNone(mgr.get_final_result())
        self.assertEqual(mgr.get_flight_status(), FlightStatus(0, 0.0, 0.0, 0.0, False))

    def test_state_descriptions(self):
        self.assertEqual(str(MissionState.IDLE), "Idle - Ready for mission setup")
        self.assertEqual(MissionState.IN_FLIGHT.description, "In Flight - Mission in progress")
        self.assertEqual(MissionState.COMPLETED.description, "Completed - Mission finished")

    def test_launch_requires_rocket_and_target(self):
        mgr = _manager(rocket=Rocket("R", 1e6, 30000.0, 3))
        with self.assertRaises(InvalidOperationError):
            mgr.launch()
        self.assertEqual(mgr.state, MissionState.IDLE)
        self.assertFalse(mgr.rocket.is_launched)

    def test_set_rocket_resets_it(self):
        rocket = Rocket("R", 1e6, 30000.0, 3)
        rocket.launch()
        rocket.update(1.0)
        _manager(rocket=rocket)
        self.assertFalse(rocket.is_launched)
        self.assertEqual(rocket.current_fuel, 1e6)


class TestPreLaunchChecks(unittest.TestCase):

    def test_missing_selection(self):
        result = _manager(target=Target("Moon", 384400.0)).perform_pre_launch_checks()
        self.assertFalse(result.has_rocket)
        self.assertTrue(result.has_target)
        self.assertIsNone(result.rocket_name)
        self.assertEqual(result.target_name, "Moon")
        self.assertFalse(result.is_reachable)
        self.assertIsNone(result.reachability)
        self.assertIsNone(result.orbital_analysis)

    def test_full_checks(self):
        mgr = _manager(Rocket("Big", 1e6, 25000.0, 3), Target("LEO", 408.0))
        result = mgr.perform_pre_launch_checks()
        self.assertTrue(result.ready_for_launch)
        self.assertTrue(result.has_analysis)
        self.assertAlmostEqual(result.estimated_range, 80000.0)
        self.assertTrue(result.is_reachable)
        self.assertEqual(result.shortfall, 0.0)
        # 25000 km/h * 0.8 = 5.56 km/s at 408 km
        self.assertEqual(result.orbital_analysis.status, OrbitalStatus.SUBORBITAL)

    def test_shortfall_when_unreachable(self):
        mgr = _manager(Rocket("Small", 1.0, 1000.0, 1), Target("GEO", 35786.0))
        result = mgr.perform_pre_launch_checks()
        self.assertFalse(result.is_reachable)
        self.assertAlmostEqual(result.shortfall, result.reachability.delta_v_deficit)
        self.assertGreater(result.shortfall, 0.0)

    def test_checks_are_pure(self):
        mgr = _manager(Rocket("Big", 1e6, 25000.0, 3), Target("LEO", 408.0))
        self.assertEqual(mgr.perform_pre_launch_checks(), mgr.perform_pre_launch_checks())
        self.assertEqual(mgr.state, MissionState.IDLE)


class TestFlight(unittest.TestCase):

    def setUp(self):
        self.rocket = Rocket("Big", 1e6, 30000.0, 3)
        self.mgr = _manager(self.rocket, Target("ISS", 400.0))

    def test_launch_placeholder(self):
        placeholder = self.mgr.launch()
        self.assertFalse(placeholder.successful)
        self.assertEqual(placeholder.final_altitude, 0.0)
        self.assertEqual(placeholder.final_speed, 0.0)
        self.assertEqual(placeholder.mission_duration, 0)
        self.assertEqual(placeholder.target_distance, 400.0)
        self.assertEqual(placeholder.distance_to_target, 0.0)
        self.assertIsNone(placeholder.orbital_analysis)
        self.assertEqual(self.mgr.state, MissionState.IN_FLIGHT)
        self.assertTrue(self.rocket.is_launched)

    def test_no_changes_in_flight(self):
        self.mgr.launch()
        with self.assertRaises(InvalidOperationError):
            self.mgr.set_rocket(Rocket("Other", 1.0, 1.0, 1))
        with self.assertRaises(InvalidOperationError):
            self.mgr.set_target(Target("Other", 1.0))
        with self.assertRaises(InvalidOperationError):
            self.mgr.launch()
        self.assertIs(self.mgr.rocket, self.rocket)
        self.assertEqual(self.mgr.target.name, "ISS")
        self.assertEqual(self.mgr.state, MissionState.IN_FLIGHT)

    def test_update_outside_flight_is_noop(self):
        self.mgr.update_simulation(10)
        self.assertEqual(self.mgr.mission_time, 0)
        self.assertEqual(self.rocket.altitude, 0.0)

    def test_stage_separation_flag(self):
        self.mgr.launch()
        self.mgr.update_simulation(25)
        self.assertFalse(self.mgr.get_flight_status().stage_separated)
        self.mgr.update_simulation(1)
        status = self.mgr.get_flight_status()
        self.assertTrue(status.stage_separated)
        self.assertEqual(status.current_stage, 2)
        self.mgr.update_simulation(1)
        self.assertFalse(self.mgr.get_flight_status().stage_separated)

    def test_flight_status_tracks_rocket(self):
        self.mgr.launch()
        self.mgr.update_simulation(5)
        status = self.mgr.get_flight_status()
        self.assertEqual(self.mgr.mission_time, 5)
        self.assertAlmostEqual(status.fuel_percentage, 90.0)
        self.assertEqual(status.altitude, self.rocket.altitude)
        self.assertEqual(self.mgr.max_altitude_achieved, self.rocket.altitude)

    def test_fuel_exhaustion_completes_unsuccessfully(self):
        self.mgr.launch()
        _fly_to_completion(self.mgr)
        self.assertEqual(self.mgr.state, MissionState.COMPLETED)
        result = self.mgr.get_final_result()
        self.assertFalse(result.successful)
        self.assertLess(result.final_altitude, 400.0)
        self.assertAlmostEqual(result.distance_to_target, 400.0 - result.final_altitude)
        self.assertEqual(result.mission_duration, self.mgr.mission_time)
        self.assertEqual(result.max_altitude_achieved, result.final_altitude)
        self.assertEqual(result.orbital_analysis.status, OrbitalStatus.SUBORBITAL)
        self.assertEqual(self.mgr.get_flight_status(), FlightStatus(0, 0.0, 0.0, 0.0, False))


def test_reaching_target_completes_successfully():
    mgr = _manager(Rocket("Big", 1e6, 30000.0, 3), Target("Hop", 0.01))
    mgr.launch()
    mgr.update_simulation(100)
    assert mgr.state == MissionState.COMPLETED
    result = mgr.get_final_result()
    assert result.successful
    assert result.final_altitude >= 0.01
    assert result.distance_to_target == 0.0
    # Remaining seconds of the call are discarded once complete
    assert mgr.mission_time == result.mission_duration < 100


def test_zero_distance_target_succeeds_on_first_tick():
    mgr = _manager(Rocket("Big", 1e6, 30000.0, 3), Target("Pad", 0.0))
    mgr.launch()
    mgr.update_simulation(1)
    result = mgr.get_final_result()
    assert result.successful
    assert result.mission_duration == 1


def test_near_empty_rocket_runs_dry():
    mgr = _manager(Rocket("Tiny", 1.0, 1000.0, 1), Target("ISS", 400.0))
    mgr.launch()
    _fly_to_completion(mgr)
    result = mgr.get_final_result()
    assert mgr.state == MissionState.COMPLETED
    assert result.successful is False
    assert 50 <= result.mission_duration <= 51


def test_reassignment_after_completion_returns_to_idle():
    rocket = Rocket("Big", 1e6, 30000.0, 3)
    mgr = _manager(rocket, Target("Pad", 0.0))
    mgr.launch()
    mgr.update_simulation(1)
    assert mgr.state == MissionState.COMPLETED

    mgr.set_target(Target("Hop", 0.01))
    assert mgr.state == MissionState.IDLE
    assert mgr.get_final_result() is None

    mgr.launch()
    assert mgr.mission_time == 0
    assert rocket.altitude == 0.0


def test_relaunch_after_completion():
    mgr = _manager(Rocket("Big", 1e6, 30000.0, 3), Target("Pad", 0.0))
    mgr.launch()
    mgr.update_simulation(1)
    mgr.launch()
    assert mgr.state == MissionState.IN_FLIGHT
    assert mgr.get_final_result() is None
    assert mgr.mission_time == 0


def test_fractional_dt_truncates():
    mgr = _manager(Rocket("Big", 1e6, 30000.0, 3), Target("ISS", 400.0))
    mgr.launch()
    mgr.update_simulation(2.7)
    assert mgr.mission_time == 2


def test_manager_config_drives_flight():
    mgr = MissionManager(config=create_test_config(fuel_consumption_rate=0.5))
    mgr.set_rocket(Rocket("A", 1e6, 30000.0, 1))
    mgr.set_target(Target("ISS", 400.0))
    mgr.launch()
    mgr.update_simulation(10)
    assert mgr.state == MissionState.COMPLETED
    assert mgr.get_final_result().mission_duration == 2


def test_terminate_mission():
    mgr = _manager(Rocket("Big", 1e6, 30000.0, 3), Target("ISS", 400.0))
    with pytest.raises(InvalidOperationError):
        mgr.terminate_mission()
    mgr.launch()
    mgr.update_simulation(5)
    result = mgr.terminate_mission()
    assert mgr.state == MissionState.COMPLETED
    assert result is mgr.get_final_result()
    assert not result.successful
    assert result.mission_duration == 5
    assert result.distance_to_target == pytest.approx(400.0 - result.final_altitude)
    mgr.set_target(Target("Hop", 0.01))
    assert mgr.state == MissionState.IDLE


def test_stage_separated_view():
    mgr = _manager(Rocket("Big", 1e6, 30000.0, 3), Target("ISS", 400.0))
    mgr.launch()
    mgr.update_simulation(26)
    assert mgr.stage_separated
    mgr.update_simulation(1)
    assert not mgr.stage_separated
