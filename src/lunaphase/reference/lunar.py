# reference/lunar.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from . import astro_args as aa
from .angles import cos_deg, sin_deg
from ..core.types import CelestialPosition

AU_KM = 149597870.0  # astronomical unit in km

Term = Tuple[int, int, int, int, float]

# (d, m, m', f, coefficient): argument d*D + m*M + m'*M' + f*F
# Leading terms only, everything kept is larger than ~0.02 degrees.
LUNAR_LON_TERMS: Tuple[Term, ...] = (
    (0, 0, 1, 0, 6.289),
    (2, 0, -1, 0, 1.274),
    (2, 0, 0, 0, 0.658),
    (0, 0, 2, 0, 0.214),
    (0, 1, 0, 0, -0.185),
    (0, 0, 0, 2, -0.114),
    (2, 0, -2, 0, 0.059),
    (2, -1, -1, 0, 0.057),
    (2, 0, 1, 0, 0.053),
    (2, -1, 0, 0, 0.046),
    (0, 1, -1, 0, -0.041),
    (1, 0, 0, 0, -0.035),
    (0, 1, 1, 0, -0.030),
)

LUNAR_LAT_TERMS: Tuple[Term, ...] = (
    (0, 0, 0, 1, 5.128),
    (0, 0, 1, 1, 0.281),
    (0, 0, 1, -1, 0.278),
    (2, 0, 0, -1, 0.173),
    (2, 0, -1, 1, 0.055),
    (2, 0, -1, -1, 0.046),
    (2, 0, 0, 1, 0.033),
)

# cosine terms, km
LUNAR_DIST_TERMS: Tuple[Term, ...] = (
    (0, 0, 1, 0, -20905.4),
    (2, 0, -1, 0, -3699.1),
    (2, 0, 0, 0, -2956.0),
    (0, 0, 2, 0, -569.9),
)

LUNAR_MEAN_DISTANCE_KM = 385000.6


def _argument(fa: aa.FundamentalArgs, d: int, m: int, mp: int, f: int) -> float:
    return d * fa.D_deg + m * fa.Ms_deg + mp * fa.Ml_deg + f * fa.F_deg


def lunar_position(jd: float) -> CelestialPosition:
    """
    Geocentric ecliptic longitude, latitude (degrees) and distance (AU)
    of the Moon for a given JD.

    The longitude is the mean longitude plus perturbations and is not
    wrapped; callers reduce it through the degree helpers.
    """
    fa = aa.fundamental_args(aa.T_centuries(jd))

    lat = 0.0
    for d, m, mp, f, coef in LUNAR_LAT_TERMS:
        lat += coef * sin_deg(_argument(fa, d, m, mp, f))

    lon = fa.Lm0_deg
    for d, m, mp, f, coef in LUNAR_LON_TERMS:
        lon += coef * sin_deg(_argument(fa, d, m, mp, f))

    dist_km = LUNAR_MEAN_DISTANCE_KM
    for d, m, mp, f, coef in LUNAR_DIST_TERMS:
        dist_km += coef * cos_deg(_argument(fa, d, m, mp, f))

    return CelestialPosition(lon_deg=lon, lat_deg=lat, distance_au=dist_km / AU_KM)
