"""lunaphase public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    illuminated_fraction_now,
    illuminated_fraction_at,
    illuminated_fraction_for_jd,
    illumination_for_jd,
    lunar_phase_at,
    phase_name_at,
    positions_at,
)
from .core.types import CelestialPosition, IlluminatedFraction, MoonSunPosition, PhaseResult
from .reference.phase import lunar_phase
from .reference.time_scales import julian_day, julian_day_now

__version__ = "0.1.0"

__all__ = [
    "illuminated_fraction_now",
    "illuminated_fraction_at",
    "illuminated_fraction_for_jd",
    "illumination_for_jd",
    "lunar_phase",
    "lunar_phase_at",
    "phase_name_at",
    "positions_at",
    "julian_day",
    "julian_day_now",
    "CelestialPosition",
    "IlluminatedFraction",
    "MoonSunPosition",
    "PhaseResult",
]
