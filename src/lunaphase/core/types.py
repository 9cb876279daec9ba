from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class CelestialPosition:
    """Geocentric ecliptic position (degrees) and distance (AU)."""
    lon_deg: float
    lat_deg: float
    distance_au: float


@dataclass(frozen=True)
class MoonSunPosition:
    moon: CelestialPosition
    sun: CelestialPosition

    def __iter__(self) -> Iterator[float]:
        # (lmoon, bmoon, rmoon, lsun, rsun)
        yield self.moon.lon_deg
        yield self.moon.lat_deg
        yield self.moon.distance_au
        yield self.sun.lon_deg
        yield self.sun.distance_au


@dataclass(frozen=True)
class PhaseResult:
    elongation_deg: float  # [0, 360), along the ecliptic
    phase_angle_deg: float  # [0, 180], Sun-Moon-Earth

    @property
    def waxing(self) -> bool:
        return self.elongation_deg < 180.0


@dataclass(frozen=True)
class IlluminatedFraction:
    """Illuminated fraction of the lunar disk, rounded to thousandths."""
    thousandths: int
    text: str  # "D.DDD"

    def __str__(self) -> str:
        return self.text
