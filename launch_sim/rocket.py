"""
Launch Mission Simulator - Rocket Flight Model

A Rocket couples an immutable specification (name, tank capacity, top speed,
stage count) with the mutable FlightState of the current mission, and
advances that state with a fixed-step vertical integrator:

    1. burn fuel (later stages burn slower)
    2. thrust from capacity, stage and remaining fuel
    3. mass = structure + fuel
    4. drag from the exponential atmosphere
    5. a = (T - D - g*m) / m
    6. speed += a*dt, clamped to [0, max_speed]
    7. altitude += trapezoidal average speed * dt
"""

import logging

from . import constants as C
from .config import SimulationConfig, create_default_config
from .forces import (
    compute_net_acceleration,
    compute_thrust,
    drag_force,
    gravitational_acceleration,
)
from .mass import (
    compute_current_mass,
    compute_fuel_consumption,
    get_fuel_percentage,
    is_fuel_exhausted,
    update_fuel,
)
from .state import FlightState, create_initial_state
from .utils import kmh_to_kms
from .validation import (
    InvalidOperationError,
    check_name,
    check_positive,
    check_stage_count,
)

logger = logging.getLogger(__name__)


class Rocket:
    """
    Rocket specification plus flight state.

    Args:
        name: Unique rocket name
        fuel_capacity: Tank capacity (kg), > 0
        max_speed: Top speed (km/h), > 0
        total_stages: Number of stages, >= 1
        config: Flight-model coefficients

    Raises:
        ValidationError: on any malformed parameter
    """

    def __init__(self, name: str, fuel_capacity: float, max_speed: float,
                 total_stages: int, config: SimulationConfig = None):
        self._name = check_name(name, "Rocket")
        self._fuel_capacity = check_positive(fuel_capacity, "Fuel capacity")
        self._max_speed = check_positive(max_speed, "Max speed")
        self._total_stages = check_stage_count(total_stages)
        self.config = config or create_default_config()
        self.state = create_initial_state(self._fuel_capacity)

    # ── Specification (read-only) ────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def fuel_capacity(self) -> float:
        return self._fuel_capacity

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @property
    def total_stages(self) -> int:
        return self._total_stages

    # ── Flight state read-outs ───────────────────────────────────────────

    @property
    def current_fuel(self) -> float:
        return self.state.current_fuel

    @property
    def current_speed(self) -> float:
        return self.state.current_speed

    @property
    def altitude(self) -> float:
        return self.state.altitude

    @property
    def current_stage(self) -> int:
        return self.state.current_stage

    @property
    def is_launched(self) -> bool:
        return self.state.launched

    @property
    def fuel_percentage(self) -> float:
        return get_fuel_percentage(self.state.current_fuel, self._fuel_capacity)

    @property
    def speed_km_s(self) -> float:
        return kmh_to_kms(self.state.current_speed)

    def has_fuel(self) -> bool:
        return not is_fuel_exhausted(self.state.current_fuel)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset_state(self):
        """Put the rocket back on the pad with full tanks for a new mission."""
        self.state = create_initial_state(self._fuel_capacity)

    def launch(self):
        """
        Lift off.

        Raises:
            InvalidOperationError: if the rocket is already launched
        """
        if self.state.launched:
            raise InvalidOperationError(f"Rocket '{self._name}' is already launched")
        self.state.launched = True
        logger.debug(f"Rocket {self._name} launched")

    def update(self, dt: float, config: SimulationConfig = None) -> bool:
        """
        Advance the flight state by dt seconds.

        Args:
            dt: Time step (s)
            config: Flight-model coefficients for this step (the rocket's own
                config if None)

        Returns:
            True while the rocket is still flying, False once it is grounded
            or its fuel is exhausted (the tick ends at exhaustion)
        """
        s = self.state
        cfg = config or self.config
        if not s.launched or is_fuel_exhausted(s.current_fuel):
            return False

        # 1. Fuel burn
        fuel_used = compute_fuel_consumption(
            self._fuel_capacity, dt, s.current_stage,
            rate=cfg.fuel_consumption_rate,
            multiplier=cfg.stage_efficiency_multiplier,
        )
        s.current_fuel = update_fuel(s.current_fuel, fuel_used)
        if is_fuel_exhausted(s.current_fuel):
            logger.debug(f"Rocket {self._name} fuel exhausted at alt={s.altitude:.3f}km")
            return False

        # 2-4. Forces
        thrust = compute_thrust(
            self._fuel_capacity, s.current_fuel, s.current_stage,
            thrust_per_kg=cfg.thrust_per_kg_capacity,
            stage_multiplier=cfg.thrust_stage_multiplier,
            full_thrust_fraction=cfg.full_thrust_fuel_fraction,
        )
        mass = compute_current_mass(self._fuel_capacity, s.current_fuel,
                                    cfg.dry_mass_fraction)
        drag = drag_force(kmh_to_kms(s.current_speed), s.altitude,
                          cfg.reference_area, cfg.drag_coefficient)
        gravity = gravitational_acceleration(s.altitude)

        # 5. Net acceleration (m/s^2)
        acceleration = compute_net_acceleration(thrust, drag, gravity, mass)

        # 6. Speed update: m/s -> km/s -> km/h
        velocity_change = acceleration * dt / C.METERS_PER_KM * C.SECONDS_PER_HOUR
        s.current_speed = max(0.0, min(self._max_speed, s.current_speed + velocity_change))

        # 7. Trapezoidal altitude update; the model has no descent
        avg_speed = s.current_speed - velocity_change / 2.0
        s.altitude += max(0.0, avg_speed / C.SECONDS_PER_HOUR * dt)

        return True

    # ── Staging ──────────────────────────────────────────────────────────

    def should_separate_stage(self) -> bool:
        """
        True when fuel has dropped to the active stage's threshold.

        The threshold descends per stage:
            100 * (total - stage + 1) / total / 2  percent
        """
        s = self.state
        if s.current_stage >= self._total_stages:
            return False

        threshold = 100.0 * (self._total_stages - s.current_stage + 1) / self._total_stages / 2.0
        return self.fuel_percentage <= threshold

    def separate_stage(self) -> bool:
        """
        Advance to the next stage.

        Returns:
            True if a stage was dropped, False if already on the last stage
        """
        if self.state.current_stage >= self._total_stages:
            return False
        self.state.current_stage += 1
        logger.info(f"Rocket {self._name} separated to stage {self.state.current_stage}"
                    f"/{self._total_stages}, fuel={self.fuel_percentage:.1f}%")
        return True

    # ── Estimates ────────────────────────────────────────────────────────

    def calculate_estimated_range(self) -> float:
        """
        Heuristic range (km) from the specification only:
            (fuel/1000)*50 * (1 + 0.3*(stages - 1)) * (max_speed/25000)
        """
        base_range = self._fuel_capacity / 1000.0 * C.RANGE_KM_PER_TONNE
        stage_multiplier = 1.0 + (self._total_stages - 1) * C.RANGE_STAGE_BONUS
        speed_multiplier = self._max_speed / C.RANGE_REFERENCE_SPEED
        return base_range * stage_multiplier * speed_multiplier

    # ── Identity ─────────────────────────────────────────────────────────

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Rocket):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return (f"Rocket(name='{self._name}', fuel={self._fuel_capacity:.0f} kg, "
                f"max_speed={self._max_speed:.0f} km/h, stages={self._total_stages})")
