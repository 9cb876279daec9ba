from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# UTC -> TAI is approximated by a fixed one-minute shift
TAI_OFFSET_MINUTES = 1

Clock = Callable[[], datetime]


# ============================================================
# Basic JD / JDN helpers
# ============================================================

def jd_to_jdn(jd: float) -> int:
    """Civil day number of a JD: days begin at midnight, so JDN = floor(JD + 0.5)."""
    return int(math.floor(jd + 0.5))


# ============================================================
# datetime(UTC) -> JD (TAI-like)
# ============================================================

def utc_now() -> datetime:
    """Read the system clock as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def julian_day(dt: datetime, *, tai_offset_minutes: float = TAI_OFFSET_MINUTES) -> float:
    """
    datetime -> fractional JD. Requires timezone-aware datetime.

    Proleptic Gregorian calendar, January and February counted as months
    13 and 14 of the previous year:
      c    = floor(y / 100)
      jgc  = c - floor(c / 4) - 2
      cjdn = floor(365.25 (y + 4716)) + floor(30.6001 (m + 1)) + day - jgc - 1524
      JD   = cjdn + ((hour - 12) + (minute + offset + second / 60) / 60) / 24

    Sub-second precision is dropped, as with a whole-second clock read.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    dt_utc = dt.astimezone(timezone.utc)

    y = dt_utc.year
    m = dt_utc.month
    if m < 3:
        y -= 1
        m += 12

    c = math.floor(y / 100)
    jgc = c - math.floor(c / 4) - 2
    cjdn = math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + dt_utc.day - jgc - 1524

    minutes = dt_utc.minute + tai_offset_minutes
    return cjdn + ((dt_utc.hour - 12) + (minutes + dt_utc.second / 60) / 60) / 24


def julian_day_now(
    *,
    clock: Optional[Clock] = None,
    tai_offset_minutes: float = TAI_OFFSET_MINUTES,
) -> float:
    """
    Current JD from a single clock read. Clock errors propagate to the caller.
    """
    now = (clock or utc_now)()
    jd = julian_day(now, tai_offset_minutes=tai_offset_minutes)
    logger.debug("clock read %s -> JD %.6f", now.isoformat(), jd)
    return jd
