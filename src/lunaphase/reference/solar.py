# reference/solar.py

from __future__ import annotations

from . import astro_args as aa
from .angles import cos_deg, sin_deg
from ..core.types import CelestialPosition


def solar_position(jd: float) -> CelestialPosition:
    """
    Geocentric ecliptic longitude (degrees) and distance (AU) of the Sun
    for a given JD. The latitude of the Sun is taken as zero.
    """
    fa = aa.fundamental_args(aa.T_centuries(jd))
    Ms = fa.Ms_deg

    # equation of centre, aberration and the leading nutation term
    lon = (
        fa.Ls0_deg
        - 0.0057
        + 1.915 * sin_deg(Ms)
        + 0.020 * sin_deg(2 * Ms)
        - 0.0048 * sin_deg(fa.Nl_deg)
    )
    dist = 1.00014 - 0.01671 * cos_deg(Ms) - 0.00014 * cos_deg(2 * Ms)

    return CelestialPosition(lon_deg=lon, lat_deg=0.0, distance_au=dist)
