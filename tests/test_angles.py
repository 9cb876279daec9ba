# tests/test_angles.py

import math
import random

import pytest

from lunaphase.reference import angles as ang


def test_gmod_range_and_congruence():
    random.seed(42)
    for _ in range(10000):
        n = random.uniform(-1e6, 1e6)
        m = random.choice([1.0, 24.0, 360.0, random.uniform(0.1, 1000.0)])
        r = ang.gmod(n, m)
        assert 0.0 <= r < m
        q = (n - r) / m
        assert q == pytest.approx(round(q), abs=1e-6)


def test_gmod_negative_values():
    assert ang.gmod(-30.0, 360.0) == pytest.approx(330.0)
    assert ang.gmod(-720.0, 360.0) == 0.0
    assert ang.gmod(725.5, 360.0) == pytest.approx(5.5)


def test_gmod_tiny_negative_does_not_return_modulus():
    r = ang.gmod(-1e-17, 360.0)
    assert 0.0 <= r < 360.0


def test_gmod_rejects_non_positive_modulus():
    with pytest.raises(ValueError):
        ang.gmod(10.0, 0.0)
    with pytest.raises(ValueError):
        ang.gmod(10.0, -360.0)


def test_trig_periodicity():
    random.seed(7)
    for _ in range(1000):
        x = random.uniform(-720.0, 720.0)
        k = random.randint(-50, 50)
        assert ang.cos_deg(x) == pytest.approx(ang.cos_deg(x + 360.0 * k), abs=1e-9)
        assert ang.sin_deg(x) == pytest.approx(ang.sin_deg(x + 360.0 * k), abs=1e-9)


def test_trig_known_values():
    assert ang.cos_deg(0.0) == 1.0
    assert ang.cos_deg(180.0) == pytest.approx(-1.0)
    assert ang.sin_deg(90.0) == pytest.approx(1.0)
    assert ang.sin_deg(-90.0) == pytest.approx(-1.0)
    assert ang.cos_deg(60.0) == pytest.approx(0.5)


def test_acos_deg_principal_values():
    assert ang.acos_deg(1.0) == 0.0
    assert ang.acos_deg(-1.0) == pytest.approx(180.0)
    assert ang.acos_deg(0.0) == pytest.approx(90.0)
    assert ang.acos_deg(0.5) == pytest.approx(60.0)


def test_acos_deg_clamps_rounding_drift():
    assert ang.acos_deg(1.0 + 1e-12) == 0.0
    assert ang.acos_deg(-1.0 - 1e-12) == pytest.approx(180.0)
    assert not math.isnan(ang.acos_deg(1.0000001))


def test_wrap180():
    assert ang.wrap180(190.0) == pytest.approx(-170.0)
    assert ang.wrap180(-190.0) == pytest.approx(170.0)
    assert ang.wrap180(180.0) == pytest.approx(-180.0)
    assert ang.wrap180(0.25) == pytest.approx(0.25)
