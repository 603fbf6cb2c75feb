"""
Launch Mission Simulator - Physical Constants and Flight-Model Coefficients

This module defines the idealized Earth model, the exponential atmosphere,
the heuristic flight-model coefficients and the reference values used by the
mission analysis.

Unit conventions (unless a name says otherwise):
    altitude / distance : km
    rocket speed        : km/h
    orbital velocities  : km/s
    accelerations       : m/s^2
    forces              : N
    fuel / mass         : kg
"""

# =============================================================================
# EARTH PARAMETERS (spherical, non-rotating)
# =============================================================================

# Gravitational constant (m^3 kg^-1 s^-2)
G = 6.67430e-11

# Earth mass (kg)
M_EARTH = 5.972e24

# Gravitational parameter (m^3/s^2)
MU_EARTH = G * M_EARTH

# Earth mean radius (km)
R_EARTH_KM = 6371.0

# Standard gravitational acceleration at sea level (m/s^2)
G0 = 9.80665

# =============================================================================
# ATMOSPHERE (exponential model)
# =============================================================================

RHO_0 = 1.225                 # Sea level density (kg/m^3)
H_SCALE_KM = 8.4              # Scale height (km)
ATMOSPHERE_CEILING_KM = 100.0  # Karman line, vacuum above (km)

# =============================================================================
# FLIGHT MODEL COEFFICIENTS
# =============================================================================

# Fraction of tank capacity burned per second at stage 1
FUEL_CONSUMPTION_RATE = 0.02

# Each later stage burns 1.2x slower: efficiency = 1.2^(stage-1)
STAGE_EFFICIENCY_MULTIPLIER = 1.2

# Base thrust (N) per kg of fuel capacity
THRUST_PER_KG_CAPACITY = 0.01

# Thrust grows as 1.3^stage
THRUST_STAGE_MULTIPLIER = 1.3

# Below this fraction of capacity thrust tapers linearly with fuel
FULL_THRUST_FUEL_FRACTION = 0.1

# Structure mass as a fraction of fuel capacity
DRY_MASS_FRACTION = 0.1

# Aerodynamics
REFERENCE_AREA = 10.0     # Cross-sectional area (m^2)
DRAG_COEFFICIENT = 0.3    # Cd

# =============================================================================
# RANGE HEURISTIC
# =============================================================================

RANGE_KM_PER_TONNE = 50.0        # 50 km per 1000 kg of fuel
RANGE_STAGE_BONUS = 0.3          # +30% per additional stage
RANGE_REFERENCE_SPEED = 25000.0  # km/h

# =============================================================================
# CAPABILITY HEURISTICS (rocket equation estimate)
# =============================================================================

ISP_BASE = 300.0                  # s, typical chemical engine
ISP_STAGE_BONUS = 50.0            # s per additional stage
ISP_FUEL_BONUS = 20.0             # s per e-fold of capacity over reference
ISP_REFERENCE_FUEL = 100000.0     # kg
ISP_MIN = 250.0                   # s
ISP_MAX = 450.0                   # s

MASS_RATIO_BASE = 3.0             # single stage
MASS_RATIO_STAGE_MULTIPLIER = 2.5
MASS_RATIO_MAX = 20.0

# Fraction of max speed expected at burnout (pre-launch estimate)
FINAL_VELOCITY_EFFICIENCY = 0.8

# =============================================================================
# TARGET DIFFICULTY BANDS (km)
# =============================================================================

EASY_MAX_DISTANCE = 1000.0
MEDIUM_MAX_DISTANCE = 50000.0
HARD_MAX_DISTANCE = 1000000.0

# =============================================================================
# SIMULATION PARAMETERS
# =============================================================================

# Controller tick (s); the mission advances in whole seconds
TICK_SECONDS = 1.0

# Upper bound on a batch run (s)
MAX_MISSION_TIME = 100000

# Unit conversions
SECONDS_PER_HOUR = 3600.0
METERS_PER_KM = 1000.0

# Reference altitudes for the orbital reference table (km)
ISS_ALTITUDE_KM = 408.0
REFERENCE_ORBITS = (
    ("Low Earth Orbit", 200.0),
    ("ISS Altitude", ISS_ALTITUDE_KM),
    ("Geostationary Orbit", 35786.0),
)

# =============================================================================


def print_config():
    """Print configuration summary."""
    print("=" * 60)
    print("Launch Mission Simulator Configuration")
    print("=" * 60)
    print(f"Earth mass: {M_EARTH:.3e} kg")
    print(f"Earth radius: {R_EARTH_KM:,.0f} km")
    print(f"Sea level density: {RHO_0} kg/m^3, scale height {H_SCALE_KM} km")
    print(f"Fuel consumption: {FUEL_CONSUMPTION_RATE * 100:.0f}% of capacity per second")
    print(f"Drag: Cd={DRAG_COEFFICIENT}, A={REFERENCE_AREA} m^2")
    print(f"Isp range: {ISP_MIN:.0f}-{ISP_MAX:.0f} s, max mass ratio {MASS_RATIO_MAX:.0f}")
    print("=" * 60)
