import pytest
import numpy as np
from launch_sim import forces, constants as C


def test_density_at_sea_level():
    assert forces.atmospheric_density(0.0) == pytest.approx(1.225)


def test_density_scale_height():
    assert forces.atmospheric_density(C.H_SCALE_KM) == pytest.approx(1.225 / np.e)


def test_density_vacuum_above_karman_line():
    assert forces.atmospheric_density(100.0) > 0.0
    assert forces.atmospheric_density(100.01) == 0.0
    assert forces.atmospheric_density(500.0) == 0.0


def test_gravity_at_surface():
    assert forces.gravitational_acceleration(0.0) == pytest.approx(9.82, abs=0.01)


def test_gravity_decreases_with_altitude():
    assert forces.gravitational_acceleration(400.0) < forces.gravitational_acceleration(0.0)


def test_drag_zero_at_rest_and_in_vacuum():
    assert forces.drag_force(0.0, 0.0) == 0.0
    assert forces.drag_force(5.0, 150.0) == 0.0


def test_drag_at_sea_level():
    # 0.5 * 1.225 * (1000 m/s)^2 * 0.3 * 10
    assert forces.drag_force(1.0, 0.0) == pytest.approx(1837500.0)


def test_thrust_full_above_fraction():
    thrust = forces.compute_thrust(1e6, 5e5, stage=1)
    assert thrust == pytest.approx(1e6 * 0.01 * 1.3)


def test_thrust_grows_with_stage():
    t1 = forces.compute_thrust(1e6, 5e5, stage=1)
    t2 = forces.compute_thrust(1e6, 5e5, stage=2)
    assert t2 == pytest.approx(t1 * 1.3)


def test_thrust_tapers_when_starved():
    full = forces.compute_thrust(1e6, 1e5, stage=1)
    half = forces.compute_thrust(1e6, 5e4, stage=1)
    assert half == pytest.approx(full / 2)


def test_thrust_zero_when_empty():
    assert forces.compute_thrust(1e6, 0.0, stage=3) == 0.0


def test_net_acceleration():
    a = forces.compute_net_acceleration(thrust=2000.0, drag=0.0, gravity=10.0, mass=100.0)
    assert a == pytest.approx(10.0)
