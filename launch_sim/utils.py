"""
Launch Mission Simulator - Utility Functions

Unit conversions shared by the flight model, the mission analysis and the
report formatting.
"""

from . import constants as C


def kmh_to_kms(speed_kmh: float) -> float:
    """Convert km/h to km/s."""
    return speed_kmh / C.SECONDS_PER_HOUR


def kms_to_kmh(speed_kms: float) -> float:
    """Convert km/s to km/h."""
    return speed_kms * C.SECONDS_PER_HOUR


def radius_m(altitude_km: float) -> float:
    """
    Distance from Earth's center for a given altitude.

    Args:
        altitude_km: Altitude above the surface (km)

    Returns:
        Geocentric radius (m)
    """
    return (C.R_EARTH_KM + altitude_km) * C.METERS_PER_KM
