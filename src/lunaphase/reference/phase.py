# reference/phase.py

from __future__ import annotations

import logging
import math
from typing import Tuple

from .angles import acos_deg, cos_deg, gmod, sin_deg
from .ephemeris import moon_and_sun_position
from ..core.errors import FractionRangeError
from ..core.types import IlluminatedFraction, PhaseResult

logger = logging.getLogger(__name__)

Vector = Tuple[float, float, float]

PHASE_NAMES = (
    "new moon",
    "waxing crescent",
    "first quarter",
    "waxing gibbous",
    "full moon",
    "waning gibbous",
    "last quarter",
    "waning crescent",
)


def ecliptic_to_cartesian(lon_deg: float, lat_deg: float, r: float) -> Vector:
    """Spherical ecliptic coordinates -> (x, y, z), z out of the ecliptic plane."""
    return (
        r * cos_deg(lat_deg) * cos_deg(lon_deg),
        r * cos_deg(lat_deg) * sin_deg(lon_deg),
        r * sin_deg(lat_deg),
    )


def lunar_phase(jd: float) -> PhaseResult:
    """
    Elongation and phase angle of the Moon at a given JD.

    The phase angle is the angle between the Earth->Moon vector and the
    Sun->Moon vector, which is the Sun-Moon-Earth angle: 0 at full moon,
    180 at new moon.
    """
    pos = moon_and_sun_position(jd)
    moon, sun = pos.moon, pos.sun

    elongation = gmod(moon.lon_deg - sun.lon_deg, 360.0)

    xm, ym, zm = ecliptic_to_cartesian(moon.lon_deg, moon.lat_deg, moon.distance_au)
    xs, ys, _ = ecliptic_to_cartesian(sun.lon_deg, 0.0, sun.distance_au)

    xms = xm - xs
    yms = ym - ys
    zms = zm
    rms = math.sqrt(xms * xms + yms * yms + zms * zms)

    phase = acos_deg((xm * xms + ym * yms + zm * zms) / (moon.distance_au * rms))

    res = PhaseResult(elongation_deg=elongation, phase_angle_deg=phase)
    logger.debug("JD %.6f: elongation %.4f deg, phase angle %.4f deg", jd, elongation, phase)
    return res


def phase_name(elongation_deg: float) -> str:
    """Eight-way phase name from the luni-solar elongation (45 degree sectors)."""
    return PHASE_NAMES[int(gmod(elongation_deg + 22.5, 360.0) // 45.0) % 8]


# ============================================================
# Illuminated fraction
# ============================================================

def illuminated_fraction(phase_angle_deg: float) -> float:
    """k = (1 + cos(phase angle)) / 2."""
    return (1.0 + cos_deg(phase_angle_deg)) / 2.0


def to_thousandths(k: float) -> int:
    """Round k to thousandths, half up."""
    return math.floor(1000.0 * k + 0.5)


def format_thousandths(k999: int) -> str:
    """
    Render thousandths as "D.DDD".

    Anything at or above 1000 renders as "1.000"; rounding drift past 1000
    is absorbed rather than rejected.
    """
    if k999 < 0:
        raise FractionRangeError(f"illuminated fraction cannot be negative: {k999}/1000")
    if k999 < 10:
        return f"0.00{k999}"
    if k999 < 100:
        return f"0.0{k999}"
    if k999 < 1000:
        return f"0.{k999}"
    return "1.000"


def illumination(phase_angle_deg: float) -> IlluminatedFraction:
    k999 = to_thousandths(illuminated_fraction(phase_angle_deg))
    return IlluminatedFraction(thousandths=k999, text=format_thousandths(k999))
