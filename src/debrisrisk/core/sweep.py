"""Vectorised risk evaluation and one-at-a-time sensitivity sweeps.

The batch path evaluates the same model as
:func:`debrisrisk.core.risk.compute_probability` over numpy arrays, so a
parameter can be swept across thousands of values in one call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from debrisrisk.core.parameters import (
    RESERVED_FIELDS,
    UNIT_INTERVAL_FIELDS,
    ParameterSet,
    clamp_unit_interval,
)
from debrisrisk.core.risk import RiskTier, classify_tier, compute_probability
from debrisrisk.utils.constants import (
    ALTITUDE_REFERENCE_KM,
    ALTITUDE_WEIGHT,
    INCLINATION_SCALE_DEG,
    INCLINATION_WEIGHT,
    MANEUVER_REDUCTION,
    MAX_PROBABILITY_PERCENT,
    REFERENCE_INCLINATION_DEG,
)

logger = logging.getLogger(__name__)


@dataclass
class ParameterSweep:
    """Result of varying a single parameter.

    Attributes:
        name: Swept ParameterSet field.
        values: Input values, shape (N,).
        probability_percent: Probability for each value, shape (N,).
    """

    name: str
    values: NDArray[np.float64]
    probability_percent: NDArray[np.float64]

    @property
    def tiers(self) -> list[RiskTier]:
        return [classify_tier(float(p)) for p in self.probability_percent]


@dataclass(frozen=True)
class SensitivityBar:
    """One bar of a tornado chart."""

    name: str
    base_value: float
    low_value: float
    high_value: float
    percent_at_low: float
    percent_at_high: float

    @property
    def swing(self) -> float:
        return abs(self.percent_at_high - self.percent_at_low)


def compute_probability_batch(
    spatial_density: ArrayLike,
    relative_velocity: ArrayLike,
    cross_sectional_area: ArrayLike,
    mission_duration: ArrayLike,
    orbital_altitude: ArrayLike,
    orbital_inclination: ArrayLike,
    debris_size: ArrayLike,
    maneuver_capability: ArrayLike,
    structural_vulnerability: ArrayLike,
) -> NDArray[np.float64]:
    """Collision probability in percent for broadcastable input arrays.

    Unlike the scalar path, ``debris_size <= -1`` does not raise: the
    corresponding entries come back non-finite.

    Returns:
        Array of percentages capped at 100, broadcast shape of the inputs.
    """
    density = np.asarray(spatial_density, dtype=np.float64)
    velocity = np.asarray(relative_velocity, dtype=np.float64)
    area = np.asarray(cross_sectional_area, dtype=np.float64)
    duration = np.asarray(mission_duration, dtype=np.float64)
    altitude = np.asarray(orbital_altitude, dtype=np.float64)
    inclination = np.asarray(orbital_inclination, dtype=np.float64)
    size = np.asarray(debris_size, dtype=np.float64)
    maneuver = np.clip(np.asarray(maneuver_capability, dtype=np.float64), 0.0, 1.0)
    vulnerability = np.clip(np.asarray(structural_vulnerability, dtype=np.float64), 0.0, 1.0)

    base = density * velocity * area * duration
    altitude_mod = 1 + (np.maximum(0.0, ALTITUDE_REFERENCE_KM - altitude) / ALTITUDE_REFERENCE_KM) * ALTITUDE_WEIGHT
    inclination_mod = 1 + (np.abs(inclination - REFERENCE_INCLINATION_DEG) / INCLINATION_SCALE_DEG) * INCLINATION_WEIGHT
    with np.errstate(divide="ignore", invalid="ignore"):
        size_mod = np.log10(size + 1) + 1
    maneuver_mod = 1 - maneuver * MANEUVER_REDUCTION
    vulnerability_mod = 1 + vulnerability

    adjusted = base * altitude_mod * inclination_mod * size_mod * maneuver_mod * vulnerability_mod
    return np.minimum(adjusted * 100, MAX_PROBABILITY_PERCENT)


def _model_inputs(params: ParameterSet) -> dict[str, float]:
    return {k: v for k, v in params.to_dict().items() if k not in RESERVED_FIELDS}


def sweep_parameter(params: ParameterSet, name: str, values: ArrayLike) -> ParameterSweep:
    """Vary one field over ``values`` with every other field held at ``params``.

    Args:
        params: Base parameter set.
        name: ParameterSet field to vary.
        values: Values to evaluate (any 1-D array-like).

    Returns:
        ParameterSweep with one probability per value.

    Raises:
        ValueError: If ``name`` is not a ParameterSet field.
    """
    if name not in ParameterSet.field_names():
        logger.error("Cannot sweep unknown parameter: %r", name)
        raise ValueError(f"Unknown parameter: {name!r}")

    swept = np.atleast_1d(np.asarray(values, dtype=np.float64))
    inputs: dict[str, ArrayLike] = dict(_model_inputs(params))
    if name in inputs:
        inputs[name] = swept
        percent = np.broadcast_to(compute_probability_batch(**inputs), swept.shape).astype(np.float64)
    else:
        # reserved field: model output does not depend on it
        percent = np.full(swept.shape, compute_probability(params), dtype=np.float64)

    logger.debug("Swept %s over %d values", name, swept.size)
    return ParameterSweep(name=name, values=swept, probability_percent=percent)


def sensitivity(
    params: ParameterSet,
    names: list[str] | None = None,
    rel_step: float = 0.1,
) -> list[SensitivityBar]:
    """
    One-at-a-time sensitivity of the probability to each parameter.

    Each field is moved to ``value * (1 - rel_step)`` and
    ``value * (1 + rel_step)``; ratio fields are clamped to [0, 1].

    Args:
        params: Base parameter set.
        names: Fields to perturb. Defaults to every field the model reads.
        rel_step: Relative step size, must be in (0, 1).

    Returns:
        Bars sorted by swing, widest first.

    Raises:
        ValueError: If ``rel_step`` is out of range or a name is unknown.
    """
    if not 0 < rel_step < 1:
        raise ValueError(f"rel_step must be in (0, 1), got {rel_step}")

    base_inputs = _model_inputs(params)
    if names is None:
        names = list(base_inputs)

    bars: list[SensitivityBar] = []
    for name in names:
        if name not in ParameterSet.field_names():
            logger.error("Unknown sensitivity parameter: %r", name)
            raise ValueError(f"Unknown parameter: {name!r}")
        base_value = getattr(params, name)
        low, high = base_value * (1 - rel_step), base_value * (1 + rel_step)
        if name in UNIT_INTERVAL_FIELDS:
            low, high = clamp_unit_interval(low), clamp_unit_interval(high)
        bars.append(
            SensitivityBar(
                name=name,
                base_value=base_value,
                low_value=low,
                high_value=high,
                percent_at_low=compute_probability(params.replace(**{name: low})),
                percent_at_high=compute_probability(params.replace(**{name: high})),
            )
        )

    bars.sort(key=lambda b: b.swing, reverse=True)
    logger.info("sensitivity: %d parameters, widest=%s", len(bars), bars[0].name if bars else None)
    return bars
