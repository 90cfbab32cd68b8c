from __future__ import annotations

"""Reference values, classification thresholds and input defaults.

Distances in km, velocities in km/s, areas in m², durations in seconds.
"""

# --- Time ---
SECONDS_PER_YEAR: float = 31536000.0
"""Seconds in a 365-day year."""

# --- Orbit regime boundaries ---
LEO_MAX_ALT_KM: float = 600.0
"""Altitudes strictly below this are classified LEO."""

MEO_MAX_ALT_KM: float = 20000.0
"""Altitudes strictly below this (and at or above LEO_MAX_ALT_KM) are MEO."""

# --- Debris environment boundaries (objects/km³) ---
SPARSE_MAX_DENSITY: float = 0.001
"""Densities at or below this are Sparse."""

MODERATE_MAX_DENSITY: float = 0.01
"""Densities at or below this (and above SPARSE_MAX_DENSITY) are Moderate."""

# --- Risk tier lower bounds (percent) ---
MODERATE_MIN_PERCENT: float = 1.0
HIGH_MIN_PERCENT: float = 5.0
CRITICAL_MIN_PERCENT: float = 15.0

# --- Model coefficients ---
ALTITUDE_REFERENCE_KM: float = 600.0
"""Below this altitude the altitude modifier rises linearly."""

ALTITUDE_WEIGHT: float = 0.5
"""Maximum extra risk from altitude (at 0 km)."""

REFERENCE_INCLINATION_DEG: float = 28.5
"""Low-inclination reference orbit (Cape Canaveral latitude)."""

INCLINATION_SCALE_DEG: float = 90.0
INCLINATION_WEIGHT: float = 0.3

MANEUVER_REDUCTION: float = 0.7
"""Fraction of risk removed by full maneuver capability."""

MAX_PROBABILITY_PERCENT: float = 100.0

# --- Documented input defaults ---
DEFAULT_SPATIAL_DENSITY: float = 0.001
DEFAULT_RELATIVE_VELOCITY_KM_S: float = 10.0
DEFAULT_CROSS_SECTIONAL_AREA_M2: float = 5.0
DEFAULT_MISSION_DURATION_S: float = SECONDS_PER_YEAR
DEFAULT_ORBITAL_ALTITUDE_KM: float = 400.0
DEFAULT_ORBITAL_INCLINATION_DEG: float = 51.6
DEFAULT_DEBRIS_SIZE_CM: float = 1.0
DEFAULT_DEBRIS_MASS_KG: float = 0.1
DEFAULT_DEBRIS_VELOCITY_KM_S: float = 8.0
DEFAULT_MANEUVER_CAPABILITY: float = 0.8
DEFAULT_STRUCTURAL_VULNERABILITY: float = 0.6
