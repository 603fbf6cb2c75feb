"""
Launch Mission Simulator - Mass and fuel-flow computations.
"""

from . import constants as C


def compute_stage_efficiency(stage: int,
                             multiplier: float = C.STAGE_EFFICIENCY_MULTIPLIER) -> float:
    """
    Burn-rate divisor for the active stage: multiplier^(stage - 1).
    """
    return multiplier ** (stage - 1)


def compute_fuel_consumption(fuel_capacity: float, dt: float, stage: int,
                             rate: float = C.FUEL_CONSUMPTION_RATE,
                             multiplier: float = C.STAGE_EFFICIENCY_MULTIPLIER) -> float:
    """
    Fuel burned (kg) over dt seconds.
    """
    return fuel_capacity * rate * dt / compute_stage_efficiency(stage, multiplier)


def update_fuel(current_fuel: float, fuel_used: float) -> float:
    """
    Subtract burned fuel with a zero floor.
    """
    return max(0.0, current_fuel - fuel_used)


def compute_dry_mass(fuel_capacity: float,
                     dry_mass_fraction: float = C.DRY_MASS_FRACTION) -> float:
    """Structure mass (kg) as a fixed fraction of tank capacity."""
    return fuel_capacity * dry_mass_fraction


def compute_current_mass(fuel_capacity: float, current_fuel: float,
                         dry_mass_fraction: float = C.DRY_MASS_FRACTION) -> float:
    """Total vehicle mass (kg): structure plus remaining fuel."""
    return compute_dry_mass(fuel_capacity, dry_mass_fraction) + current_fuel


def is_fuel_exhausted(current_fuel: float) -> bool:
    """True if the tanks are empty."""
    return current_fuel <= 0.0


def get_fuel_percentage(current_fuel: float, fuel_capacity: float) -> float:
    """Remaining fuel as a percentage of capacity."""
    return current_fuel / fuel_capacity * 100.0
