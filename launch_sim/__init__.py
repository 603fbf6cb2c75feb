"""
Launch Mission Simulator Package

A one-dimensional rocket launch simulation: vertical flight with fuel burn,
staging, drag and gravity, driven one second at a time by a mission
controller, plus orbital-mechanics feasibility analysis.

Modules:
    - constants: Physical constants and flight-model coefficients
    - config: Simulation configuration
    - forces: Atmosphere, gravity, drag and thrust
    - mass: Fuel burn and vehicle mass
    - orbital: Orbital/escape velocities and reachability analysis
    - state: Mutable flight state
    - rocket: Rocket flight model
    - target: Mission destinations
    - mission_manager: Mission state machine
    - registry: Rocket and target inventories
    - main: Batch mission runner
    - report: Text reports
    - plotting: Telemetry plots
"""

from .config import SimulationConfig, create_default_config, create_test_config
from .main import FlightLog, run_mission
from .mission_manager import MissionManager, MissionState
from .registry import RocketRegistry, TargetRegistry, create_default_registries
from .rocket import Rocket
from .target import DifficultyLevel, Target
from .types import (
    FlightStatus,
    MissionResult,
    OrbitalAnalysis,
    OrbitalStatus,
    PreLaunchCheckResult,
    ReachabilityAnalysis,
)
from .validation import InvalidOperationError, ValidationError

__version__ = "1.0.0"
__author__ = "Launch Simulation Team"

__all__ = [
    'SimulationConfig',
    'create_default_config',
    'create_test_config',
    'FlightLog',
    'run_mission',
    'MissionManager',
    'MissionState',
    'RocketRegistry',
    'TargetRegistry',
    'create_default_registries',
    'Rocket',
    'DifficultyLevel',
    'Target',
    'FlightStatus',
    'MissionResult',
    'OrbitalAnalysis',
    'OrbitalStatus',
    'PreLaunchCheckResult',
    'ReachabilityAnalysis',
    'InvalidOperationError',
    'ValidationError',
]
