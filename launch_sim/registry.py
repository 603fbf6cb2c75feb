"""
Launch Mission Simulator - In-Memory Registries

Process-lifetime inventories of rockets and targets, keyed by name.
The registries own their entities; the MissionManager only borrows them.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .config import SimulationConfig
from .rocket import Rocket
from .target import DifficultyLevel, Target
from .validation import ValidationError

logger = logging.getLogger(__name__)


DEFAULT_ROCKETS = (
    # name, fuel capacity (kg), max speed (km/h), stages
    ("Falcon Heavy", 1420000.0, 28000.0, 3),
    ("Saturn V", 2970000.0, 39000.0, 3),
    ("Starship", 1200000.0, 27000.0, 2),
)

DEFAULT_TARGETS = (
    # name, distance from Earth (km)
    ("Earth Orbit", 408.0),
    ("Moon", 384400.0),
    ("Mars", 54600000.0),
)


def _normalize(name) -> Optional[str]:
    if name is None or not str(name).strip():
        return None
    return str(name).strip()


class RocketRegistry:
    """Rocket inventory."""

    def __init__(self, config: SimulationConfig = None):
        self.config = config
        self._rockets: Dict[str, Rocket] = {}

    def create_rocket(self, name: str, fuel_capacity: float, max_speed: float,
                      stages: int) -> Optional[Rocket]:
        """
        Build and register a rocket.

        Returns:
            The new Rocket, or None if the name is already taken

        Raises:
            ValidationError: on malformed parameters
        """
        key = _normalize(name)
        if key is not None and key in self._rockets:
            logger.warning(f"Rocket with name '{key}' already exists")
            return None
        try:
            rocket = Rocket(name, fuel_capacity, max_speed, stages, config=self.config)
        except ValidationError as e:
            logger.warning(f"Failed to create rocket: {e}")
            raise
        self._rockets[rocket.name] = rocket
        logger.info(f"Created rocket: {rocket!r}")
        return rocket

    def delete_rocket(self, name: str) -> bool:
        key = _normalize(name)
        if key is None or key not in self._rockets:
            logger.info(f"Rocket '{key}' not found for deletion")
            return False
        del self._rockets[key]
        logger.info(f"Deleted rocket: {key}")
        return True

    def get_rocket(self, name: str) -> Optional[Rocket]:
        key = _normalize(name)
        return self._rockets.get(key) if key is not None else None

    def names(self) -> List[str]:
        return list(self._rockets)

    def clear(self):
        self._rockets.clear()
        logger.info("All rockets cleared from inventory")

    def __contains__(self, name) -> bool:
        key = _normalize(name)
        return key is not None and key in self._rockets

    def __iter__(self) -> Iterator[Rocket]:
        return iter(list(self._rockets.values()))

    def __len__(self) -> int:
        return len(self._rockets)


class TargetRegistry:
    """Target catalogue."""

    def __init__(self):
        self._targets: Dict[str, Target] = {}

    def create_target(self, name: str, distance_from_earth: float) -> Optional[Target]:
        """
        Build and register a target.

        Returns:
            The new Target, or None if the name is already taken

        Raises:
            ValidationError: on malformed parameters
        """
        key = _normalize(name)
        if key is not None and key in self._targets:
            logger.warning(f"Target with name '{key}' already exists")
            return None
        try:
            target = Target(name, distance_from_earth)
        except ValidationError as e:
            logger.warning(f"Failed to create target: {e}")
            raise
        self._targets[target.name] = target
        logger.info(f"Created target: {target}")
        return target

    def delete_target(self, name: str) -> bool:
        key = _normalize(name)
        if key is None or key not in self._targets:
            logger.info(f"Target '{key}' not found for deletion")
            return False
        del self._targets[key]
        logger.info(f"Deleted target: {key}")
        return True

    def get_target(self, name: str) -> Optional[Target]:
        key = _normalize(name)
        return self._targets.get(key) if key is not None else None

    def names(self) -> List[str]:
        return list(self._targets)

    def sorted_by_distance(self) -> List[Target]:
        return sorted(self._targets.values(), key=lambda t: t.distance_from_earth)

    def targets_within_range(self, max_distance: float) -> List[Target]:
        """Targets no farther than max_distance (km), nearest first."""
        return [t for t in self.sorted_by_distance() if t.distance_from_earth <= max_distance]

    def targets_by_difficulty(self, difficulty: DifficultyLevel) -> List[Target]:
        return [t for t in self.sorted_by_distance() if t.difficulty_level == difficulty]

    def find_closest_target(self, distance: float) -> Optional[Target]:
        """Target whose distance is nearest to the given one (km)."""
        if not self._targets:
            return None
        return min(self._targets.values(), key=lambda t: abs(t.distance_from_earth - distance))

    def clear(self):
        self._targets.clear()
        logger.info("All targets cleared from collection")

    def __contains__(self, name) -> bool:
        key = _normalize(name)
        return key is not None and key in self._targets

    def __iter__(self) -> Iterator[Target]:
        return iter(list(self._targets.values()))

    def __len__(self) -> int:
        return len(self._targets)


def create_default_registries(config: SimulationConfig = None) -> Tuple[RocketRegistry, TargetRegistry]:
    """Registries seeded with the stock fleet and destinations."""
    rockets = RocketRegistry(config=config)
    for name, fuel, speed, stages in DEFAULT_ROCKETS:
        rockets.create_rocket(name, fuel, speed, stages)

    targets = TargetRegistry()
    for name, distance in DEFAULT_TARGETS:
        targets.create_target(name, distance)

    return rockets, targets
