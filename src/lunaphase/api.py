from __future__ import annotations

from datetime import datetime
from typing import Optional

from .core.types import IlluminatedFraction, MoonSunPosition, PhaseResult
from .reference import phase as _phase
from .reference import time_scales as ts
from .reference.ephemeris import moon_and_sun_position


def positions_at(when: datetime) -> MoonSunPosition:
    return moon_and_sun_position(ts.julian_day(when))


def lunar_phase_at(when: datetime) -> PhaseResult:
    return _phase.lunar_phase(ts.julian_day(when))


def illumination_for_jd(jd: float) -> IlluminatedFraction:
    return _phase.illumination(_phase.lunar_phase(jd).phase_angle_deg)


def illuminated_fraction_for_jd(jd: float) -> str:
    """Illuminated fraction of the lunar disk at a JD, as "D.DDD"."""
    return illumination_for_jd(jd).text


def illuminated_fraction_at(when: datetime) -> str:
    """Illuminated fraction at a timezone-aware instant, as "D.DDD"."""
    return illuminated_fraction_for_jd(ts.julian_day(when))


def illuminated_fraction_now(*, clock: Optional[ts.Clock] = None) -> str:
    """Illuminated fraction of the lunar disk right now, as "D.DDD"."""
    return illuminated_fraction_for_jd(ts.julian_day_now(clock=clock))


def phase_name_at(when: datetime) -> str:
    return _phase.phase_name(lunar_phase_at(when).elongation_deg)
