"""Orbit inputs from Two-Line Element sets.

The risk model only needs altitude and inclination; this module pulls both
out of a TLE via the sgp4 library so callers can seed a parameter set from a
real catalogue entry instead of typing them in.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from sgp4.api import Satrec, WGS72
from sgp4.earth_gravity import wgs72

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrbitElements:
    """Orbit summary taken from a TLE.

    Attributes:
        name: Satellite name (line 0, if provided).
        norad_id: NORAD catalog number.
        inclination_deg: Orbital inclination in degrees.
        eccentricity: Orbital eccentricity (dimensionless).
        mean_motion_rev_per_day: Mean motion in revolutions per day.
        semi_major_axis_km: Semi-major axis in km.
        perigee_altitude_km: Perigee height above the WGS-72 equatorial radius.
        apogee_altitude_km: Apogee height above the WGS-72 equatorial radius.
    """

    name: str
    norad_id: int
    inclination_deg: float
    eccentricity: float
    mean_motion_rev_per_day: float
    semi_major_axis_km: float
    perigee_altitude_km: float
    apogee_altitude_km: float

    @property
    def mean_altitude_km(self) -> float:
        return self.semi_major_axis_km - wgs72.radiusearthkm

    @classmethod
    def from_lines(cls, line1: str, line2: str, name: str = "") -> OrbitElements:
        """Parse orbit elements from TLE lines 1 and 2.

        Raises:
            ValueError: If the TLE lines are malformed.
        """
        line1 = line1.strip()
        line2 = line2.strip()

        if len(line1) != 69 or not line1.startswith("1"):
            logger.error("Invalid TLE line 1: %r", line1)
            raise ValueError(f"Invalid TLE line 1: {line1!r}")
        if len(line2) != 69 or not line2.startswith("2"):
            logger.error("Invalid TLE line 2: %r", line2)
            raise ValueError(f"Invalid TLE line 2: {line2!r}")

        sat = Satrec.twoline2rv(line1, line2, WGS72)
        radius = wgs72.radiusearthkm
        norad_id = int(line1[2:7].strip())

        logger.debug("Parsed orbit elements for NORAD %d", norad_id)

        return cls(
            name=name.strip(),
            norad_id=norad_id,
            inclination_deg=math.degrees(sat.inclo),
            eccentricity=sat.ecco,
            mean_motion_rev_per_day=sat.no_kozai * 1440 / (2 * math.pi),
            semi_major_axis_km=sat.a * radius,
            perigee_altitude_km=sat.altp * radius,
            apogee_altitude_km=sat.alta * radius,
        )


def parse_elements(text: str) -> list[OrbitElements]:
    """Parse every 2-line or 3-line TLE in ``text``; other lines are skipped."""
    lines = [l.rstrip() for l in text.strip().splitlines() if l.strip()]
    parsed: list[OrbitElements] = []
    i = 0

    while i < len(lines):
        if lines[i].startswith("1 ") and i + 1 < len(lines) and lines[i + 1].startswith("2 "):
            parsed.append(OrbitElements.from_lines(lines[i], lines[i + 1]))
            i += 2
        elif (
            not lines[i].startswith(("1 ", "2 "))
            and i + 2 < len(lines)
            and lines[i + 1].startswith("1 ")
            and lines[i + 2].startswith("2 ")
        ):
            parsed.append(OrbitElements.from_lines(lines[i + 1], lines[i + 2], name=lines[i]))
            i += 3
        else:
            i += 1

    logger.debug("Parsed %d element sets from text", len(parsed))
    return parsed
