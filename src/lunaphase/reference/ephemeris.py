from __future__ import annotations

from ..core.types import MoonSunPosition
from .lunar import lunar_position
from .solar import solar_position


def moon_and_sun_position(jd: float) -> MoonSunPosition:
    """Lunar and solar positions at the same JD (truncated series, ~0.02 deg)."""
    return MoonSunPosition(moon=lunar_position(jd), sun=solar_position(jd))
