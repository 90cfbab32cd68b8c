from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Iterable, Mapping

from debrisrisk.core.parameters import ParameterSet, clamp_unit_interval
from debrisrisk.utils.constants import (
    ALTITUDE_REFERENCE_KM,
    ALTITUDE_WEIGHT,
    CRITICAL_MIN_PERCENT,
    HIGH_MIN_PERCENT,
    INCLINATION_SCALE_DEG,
    INCLINATION_WEIGHT,
    LEO_MAX_ALT_KM,
    MANEUVER_REDUCTION,
    MAX_PROBABILITY_PERCENT,
    MEO_MAX_ALT_KM,
    MODERATE_MAX_DENSITY,
    MODERATE_MIN_PERCENT,
    REFERENCE_INCLINATION_DEG,
    SPARSE_MAX_DENSITY,
)

logger = logging.getLogger(__name__)


class RiskTier(Enum):
    """Qualitative bucket for a collision probability percentage."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    CRITICAL = "Critical"


class OrbitalRegime(Enum):
    LEO = "LEO"
    MEO = "MEO"
    GEO = "GEO"


class DebrisEnvironment(Enum):
    SPARSE = "Sparse"
    MODERATE = "Moderate"
    DENSE = "Dense"


@dataclass(frozen=True)
class RiskFactors:
    """Breakdown of the terms multiplied into the probability."""

    base: float
    altitude_modifier: float
    inclination_modifier: float
    size_modifier: float
    maneuver_modifier: float
    vulnerability_modifier: float
    adjusted: float


@dataclass(frozen=True)
class RiskAssessment:
    probability_percent: float   # 0-100
    tier: RiskTier
    orbital_regime: OrbitalRegime
    debris_environment: DebrisEnvironment
    mission_duration_years: float
    factors: RiskFactors

    def formatted_percent(self) -> str:
        """Probability with four decimals, e.g. ``'0.1815%'``."""
        return f"{self.probability_percent:.4f}%"

    def to_dict(self) -> dict[str, Any]:
        return {
            "probability_percent": self.probability_percent,
            "tier": self.tier.value,
            "orbital_regime": self.orbital_regime.value,
            "debris_environment": self.debris_environment.value,
            "mission_duration_years": self.mission_duration_years,
            "factors": asdict(self.factors),
        }


def classify_regime(altitude_km: float) -> OrbitalRegime:
    """Orbital regime for an altitude; anything below 600 km (negatives included) is LEO."""
    if altitude_km < LEO_MAX_ALT_KM:
        return OrbitalRegime.LEO
    elif altitude_km < MEO_MAX_ALT_KM:
        return OrbitalRegime.MEO
    else:
        return OrbitalRegime.GEO


def classify_debris_environment(spatial_density: float) -> DebrisEnvironment:
    if spatial_density > MODERATE_MAX_DENSITY:
        return DebrisEnvironment.DENSE
    elif spatial_density > SPARSE_MAX_DENSITY:
        return DebrisEnvironment.MODERATE
    else:
        return DebrisEnvironment.SPARSE


def classify_tier(percent: float) -> RiskTier:
    """Categorize a probability percentage; each lower bound is inclusive."""
    if percent < MODERATE_MIN_PERCENT:
        return RiskTier.LOW
    elif percent < HIGH_MIN_PERCENT:
        return RiskTier.MODERATE
    elif percent < CRITICAL_MIN_PERCENT:
        return RiskTier.HIGH
    else:
        return RiskTier.CRITICAL


def compute_factors(params: ParameterSet) -> RiskFactors:
    """
    Evaluate every term of the collision model.

    The base term is the classic flux x cross-section x time estimate
    ``S_PD * V_REL * A_C * T``. Area is taken in m² as entered even though
    the classical form expects km², so the raw product is large; this is
    kept as-is because reference outputs depend on it.

    Args:
        params: Input parameters.

    Returns:
        RiskFactors with each modifier and the combined (uncapped) product.

    Raises:
        ValueError: If ``debris_size <= -1`` (logarithm undefined).
    """
    base = (
        params.spatial_density
        * params.relative_velocity
        * params.cross_sectional_area
        * params.mission_duration
    )

    altitude_mod = 1 + (max(0.0, ALTITUDE_REFERENCE_KM - params.orbital_altitude) / ALTITUDE_REFERENCE_KM) * ALTITUDE_WEIGHT
    inclination_mod = 1 + (abs(params.orbital_inclination - REFERENCE_INCLINATION_DEG) / INCLINATION_SCALE_DEG) * INCLINATION_WEIGHT
    size_mod = math.log10(params.debris_size + 1) + 1
    maneuver_mod = 1 - clamp_unit_interval(params.maneuver_capability) * MANEUVER_REDUCTION
    vulnerability_mod = 1 + clamp_unit_interval(params.structural_vulnerability)

    adjusted = base * altitude_mod * inclination_mod * size_mod * maneuver_mod * vulnerability_mod

    return RiskFactors(
        base=base,
        altitude_modifier=altitude_mod,
        inclination_modifier=inclination_mod,
        size_modifier=size_mod,
        maneuver_modifier=maneuver_mod,
        vulnerability_modifier=vulnerability_mod,
        adjusted=adjusted,
    )


def compute_probability(params: ParameterSet) -> float:
    """Collision probability in percent, capped at 100 (no lower clamp)."""
    return _to_percent(compute_factors(params).adjusted)


def _to_percent(adjusted: float) -> float:
    return min(adjusted * 100, MAX_PROBABILITY_PERCENT)


def assess(params: ParameterSet) -> RiskAssessment:
    """
    Assess collision risk for one parameter set.

    Args:
        params: Input parameters.

    Returns:
        RiskAssessment with probability, tier and display classifications.
    """
    factors = compute_factors(params)
    percent = _to_percent(factors.adjusted)
    tier = classify_tier(percent)

    logger.debug(
        "Risk assessment: pc=%.4f%%, tier=%s, alt=%.1f km, density=%.3g",
        percent, tier.value, params.orbital_altitude, params.spatial_density,
    )
    return RiskAssessment(
        probability_percent=percent,
        tier=tier,
        orbital_regime=classify_regime(params.orbital_altitude),
        debris_environment=classify_debris_environment(params.spatial_density),
        mission_duration_years=params.mission_duration_years,
        factors=factors,
    )


def assess_many(items: Iterable[ParameterSet | Mapping[str, Any]]) -> list[RiskAssessment]:
    """
    Batch assess parameter sets.

    Args:
        items: ParameterSet instances or mappings accepted by
            ``ParameterSet.from_mapping``.

    Returns:
        List of RiskAssessment objects, in input order.
    """
    return [
        assess(item if isinstance(item, ParameterSet) else ParameterSet.from_mapping(item))
        for item in items
    ]
