"""Input parameter set for the debris collision-risk model.

A :class:`ParameterSet` is the immutable value the presentation layer hands
to :func:`debrisrisk.core.risk.assess` every time any input changes.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from debrisrisk.core.tle import OrbitElements
from debrisrisk.utils.constants import (
    DEFAULT_CROSS_SECTIONAL_AREA_M2,
    DEFAULT_DEBRIS_MASS_KG,
    DEFAULT_DEBRIS_SIZE_CM,
    DEFAULT_DEBRIS_VELOCITY_KM_S,
    DEFAULT_MANEUVER_CAPABILITY,
    DEFAULT_MISSION_DURATION_S,
    DEFAULT_ORBITAL_ALTITUDE_KM,
    DEFAULT_ORBITAL_INCLINATION_DEG,
    DEFAULT_RELATIVE_VELOCITY_KM_S,
    DEFAULT_SPATIAL_DENSITY,
    DEFAULT_STRUCTURAL_VULNERABILITY,
    SECONDS_PER_YEAR,
)

logger = logging.getLogger(__name__)

# Carried for interface stability; the model does not read them.
RESERVED_FIELDS: frozenset[str] = frozenset({"debris_mass", "debris_velocity"})

UNIT_INTERVAL_FIELDS: frozenset[str] = frozenset(
    {"maneuver_capability", "structural_vulnerability"}
)


def clamp_unit_interval(x: float) -> float:
    """Restrict ``x`` to ``[0, 1]``."""
    return min(1.0, max(0.0, x))


@dataclass(frozen=True)
class ParameterSet:
    """Satellite and debris-environment inputs.

    Attributes:
        spatial_density: Debris objects per km³.
        relative_velocity: Mean relative velocity in km/s.
        cross_sectional_area: Satellite cross-sectional area in m².
        mission_duration: Mission duration in seconds.
        orbital_altitude: Orbital altitude in km.
        orbital_inclination: Orbital inclination in degrees.
        debris_size: Characteristic debris size in cm.
        debris_mass: Debris mass in kg (reserved, unused by the model).
        debris_velocity: Debris velocity in km/s (reserved, unused by the model).
        maneuver_capability: Avoidance capability, clamped to [0, 1].
        structural_vulnerability: Damage susceptibility, clamped to [0, 1].
    """

    spatial_density: float = DEFAULT_SPATIAL_DENSITY
    relative_velocity: float = DEFAULT_RELATIVE_VELOCITY_KM_S
    cross_sectional_area: float = DEFAULT_CROSS_SECTIONAL_AREA_M2
    mission_duration: float = DEFAULT_MISSION_DURATION_S
    orbital_altitude: float = DEFAULT_ORBITAL_ALTITUDE_KM
    orbital_inclination: float = DEFAULT_ORBITAL_INCLINATION_DEG
    debris_size: float = DEFAULT_DEBRIS_SIZE_CM
    debris_mass: float = field(default=DEFAULT_DEBRIS_MASS_KG, metadata={"reserved": True})
    debris_velocity: float = field(default=DEFAULT_DEBRIS_VELOCITY_KM_S, metadata={"reserved": True})
    maneuver_capability: float = DEFAULT_MANEUVER_CAPABILITY
    structural_vulnerability: float = DEFAULT_STRUCTURAL_VULNERABILITY

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to store the sanitised ratios
        for name in UNIT_INTERVAL_FIELDS:
            object.__setattr__(self, name, clamp_unit_interval(getattr(self, name)))

    @property
    def mission_duration_years(self) -> float:
        return self.mission_duration / SECONDS_PER_YEAR

    def replace(self, **changes: float) -> ParameterSet:
        """Return a copy with ``changes`` applied (ratios are re-clamped)."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, float]:
        return dataclasses.asdict(self)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ParameterSet:
        """Build a parameter set from loosely-typed form input.

        Keys may be snake_case (``spatial_density``) or camelCase
        (``spatialDensity``). Missing keys keep their defaults. Values that
        do not parse as a number, or parse to NaN, are read as 0.

        Args:
            data: Mapping of field name to raw value (number or string).

        Returns:
            A sanitised ParameterSet.

        Raises:
            ValueError: On an unknown key or an infinite value.
        """
        known = set(cls.field_names())
        values: dict[str, float] = {}
        for key, raw in data.items():
            name = _to_snake_case(key)
            if name not in known:
                logger.error("Unknown parameter: %r", key)
                raise ValueError(f"Unknown parameter: {key!r}")
            value = _parse_number(raw)
            if math.isinf(value):
                logger.error("Non-finite value for %s: %r", name, raw)
                raise ValueError(f"Non-finite value for {name}: {raw!r}")
            values[name] = value
        return cls(**values)

    @classmethod
    def from_tle(cls, line1: str, line2: str, **overrides: float) -> ParameterSet:
        """Build a parameter set whose altitude and inclination come from a TLE.

        Args:
            line1: TLE line 1.
            line2: TLE line 2.
            **overrides: Any other ParameterSet fields.

        Raises:
            ValueError: If the TLE lines are malformed.
        """
        elements = OrbitElements.from_lines(line1, line2)
        values = {
            "orbital_altitude": elements.mean_altitude_km,
            "orbital_inclination": elements.inclination_deg,
        }
        values.update(overrides)
        logger.debug(
            "Parameters from TLE %d: alt=%.1f km, inc=%.2f deg",
            elements.norad_id, values["orbital_altitude"], values["orbital_inclination"],
        )
        return cls(**values)


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key.strip()).lower()


def _parse_number(raw: Any) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value):
        return 0.0
    return value
