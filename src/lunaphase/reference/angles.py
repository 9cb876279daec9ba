# reference/angles.py

from __future__ import annotations

import logging
import math
from math import fmod

logger = logging.getLogger(__name__)


# ------------------------------------------------------------
# Degree-based helpers
# ------------------------------------------------------------

RAD_DEG = 180.0 / math.pi  # degrees in a radian


def gmod(n: float, m: float) -> float:
    """
    Generalized modulo: n reduced into [0, m), also for negative n.
    """
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m!r}")
    y = fmod(n, m)
    if y < 0:
        y += m
    # -1e-17 + 360.0 rounds to 360.0
    if y >= m:
        y = 0.0
    return y


def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return gmod(deg + 180.0, 360.0) - 180.0


def cos_deg(x: float) -> float:
    """Cosine of an angle in degrees."""
    return math.cos(gmod(x, 360.0) / RAD_DEG)


def sin_deg(x: float) -> float:
    """Sine of an angle in degrees."""
    return math.sin(gmod(x, 360.0) / RAD_DEG)


def acos_deg(x: float) -> float:
    """
    Inverse cosine in degrees, principal value in [0, 180].

    Arguments that drift slightly outside [-1, 1] through rounding in a
    dot-product/norm quotient are clamped to the nearest bound.
    """
    if x > 1.0 or x < -1.0:
        logger.debug("acos argument %r clamped into [-1, 1]", x)
        x = max(-1.0, min(1.0, x))
    return RAD_DEG * math.acos(x)
