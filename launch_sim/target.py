"""
Launch Mission Simulator - Mission Targets

A Target is an immutable destination identified by name and its distance
from Earth's surface. Difficulty is banded by distance.
"""

from dataclasses import dataclass, field
from enum import Enum

from . import constants as C
from .validation import check_name, check_non_negative


class DifficultyLevel(Enum):
    EASY = "Easy - Low Earth Orbit"
    MEDIUM = "Medium - Beyond LEO"
    HARD = "Hard - Interplanetary"
    EXTREME = "Extreme - Deep Space"

    @property
    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def classify_distance(distance: float) -> DifficultyLevel:
    """Band a distance (km) into a difficulty level."""
    if distance <= C.EASY_MAX_DISTANCE:
        return DifficultyLevel.EASY
    if distance <= C.MEDIUM_MAX_DISTANCE:
        return DifficultyLevel.MEDIUM
    if distance <= C.HARD_MAX_DISTANCE:
        return DifficultyLevel.HARD
    return DifficultyLevel.EXTREME


@dataclass(frozen=True)
class Target:
    """
    Mission destination. Targets compare equal by name.

    Attributes:
        name: Target name (surrounding whitespace stripped)
        distance_from_earth: Distance from the surface (km), >= 0

    Raises:
        ValidationError: on an empty name or negative distance
    """
    name: str
    distance_from_earth: float = field(compare=False)  # identity is the name

    def __post_init__(self):
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, 'name', check_name(self.name, "Target"))
        object.__setattr__(self, 'distance_from_earth',
                           check_non_negative(self.distance_from_earth, "Distance"))

    @property
    def difficulty_level(self) -> DifficultyLevel:
        return classify_distance(self.distance_from_earth)

    @property
    def formatted_distance(self) -> str:
        """Distance with a unit suited to its magnitude."""
        d = self.distance_from_earth
        if d < 1000.0:
            return f"{d:.1f} km"
        if d < 1000000.0:
            return f"{d:.0f} km"
        return f"{d / 1000000.0:.2f} million km"

    def is_reachable_by(self, rocket_range: float) -> bool:
        """True if a rocket with the given range (km) covers the distance."""
        return rocket_range >= self.distance_from_earth

    def calculate_shortfall(self, rocket_range: float) -> float:
        """Distance (km) a rocket with the given range falls short by."""
        return max(0.0, self.distance_from_earth - rocket_range)

    def __str__(self) -> str:
        return (f"Target(name='{self.name}', distance={self.formatted_distance}, "
                f"difficulty={self.difficulty_level})")
