"""
debrisrisk: orbital-debris collision-risk estimation for Python.

Turns satellite and debris-environment parameters into a collision
probability percentage, a qualitative risk tier, and the orbital-regime
and debris-environment labels shown alongside it.
"""

from __future__ import annotations

__version__ = "0.1.0-dev"

from debrisrisk.core.parameters import ParameterSet, clamp_unit_interval
from debrisrisk.core.risk import (
    DebrisEnvironment,
    OrbitalRegime,
    RiskAssessment,
    RiskFactors,
    RiskTier,
    assess,
    assess_many,
    classify_debris_environment,
    classify_regime,
    classify_tier,
    compute_probability,
)
from debrisrisk.core.sweep import (
    ParameterSweep,
    SensitivityBar,
    compute_probability_batch,
    sensitivity,
    sweep_parameter,
)
from debrisrisk.core.tle import OrbitElements, parse_elements

__all__ = [
    "__version__",
    "ParameterSet",
    "clamp_unit_interval",
    "DebrisEnvironment",
    "OrbitalRegime",
    "RiskAssessment",
    "RiskFactors",
    "RiskTier",
    "assess",
    "assess_many",
    "classify_debris_environment",
    "classify_regime",
    "classify_tier",
    "compute_probability",
    "ParameterSweep",
    "SensitivityBar",
    "compute_probability_batch",
    "sensitivity",
    "sweep_parameter",
    "OrbitElements",
    "parse_elements",
]
