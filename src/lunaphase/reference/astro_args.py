from __future__ import annotations

from dataclasses import dataclass

from .angles import gmod


# ------------------------------------------------------------
# Time variable
# ------------------------------------------------------------

J2000_JD = 2451545.0  # JD at J2000.0


def T_centuries(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000_JD) / 36525.0


# ------------------------------------------------------------
# Fundamental arguments (degrees, wrapped to [0,360))
# Linear in T only; the series below are truncated to match.
# ------------------------------------------------------------

@dataclass(frozen=True)
class FundamentalArgs:
    """Mean elements of the Moon and Sun in degrees."""
    Lm0_deg: float    # mean lunar longitude
    Ls0_deg: float    # mean solar longitude
    D_deg: float      # mean luni-solar elongation
    F_deg: float      # argument of lunar latitude
    Ml_deg: float     # mean lunar anomaly
    Nl_deg: float     # longitude of the lunar node
    Ms_deg: float     # mean solar anomaly


def fundamental_args(T: float) -> FundamentalArgs:
    """
    Fundamental arguments at T Julian centuries from J2000.0:
      L'm = 218.3164 + 481267.8812 T
      Ls  = 280.4665 +  36000.7698 T
      D   = 297.8502 + 445267.1114 T
      F   =  93.2721 + 483202.0175 T
      M'  = 134.9634 + 477198.8675 T
      Om  = 125.0445 -   1934.1363 T
      M   = 357.5291 +  35999.0503 T
    """
    return FundamentalArgs(
        Lm0_deg=gmod(218.3164 + 481267.8812 * T, 360.0),
        Ls0_deg=gmod(280.4665 + 36000.7698 * T, 360.0),
        D_deg=gmod(297.8502 + 445267.1114 * T, 360.0),
        F_deg=gmod(93.2721 + 483202.0175 * T, 360.0),
        Ml_deg=gmod(134.9634 + 477198.8675 * T, 360.0),
        Nl_deg=gmod(125.0445 - 1934.1363 * T, 360.0),
        Ms_deg=gmod(357.5291 + 35999.0503 * T, 360.0),
    )
