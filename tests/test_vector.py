"""
Tests for Vector2 - the immutable 2D vector behind all steering math.
"""

import dataclasses

import pytest

from tadpoles.flock.vector import Vector2


class TestArithmetic:
    """Operator overloads."""

    def test_add_sub(self):
        assert Vector2(1, 2) + Vector2(3, 4) == Vector2(4, 6)
        assert Vector2(1, 2) - Vector2(3, 4) == Vector2(-2, -2)

    def test_scalar_mul_div(self):
        assert Vector2(1, -2) * 3 == Vector2(3, -6)
        assert 3 * Vector2(1, -2) == Vector2(3, -6)
        assert Vector2(3, -6) / 3 == Vector2(1, -2)

    def test_neg(self):
        assert -Vector2(1, -2) == Vector2(-1, 2)

    def test_is_immutable(self):
        v = Vector2(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5


class TestLength:
    """Length, rescaling and clamping."""

    def test_length(self):
        assert Vector2(3, 4).length == 5

    def test_with_length_rescales(self):
        v = Vector2(3, 4).with_length(10)
        assert v.x == pytest.approx(6)
        assert v.y == pytest.approx(8)

    def test_with_length_on_zero_is_noop(self):
        """Rescaling a zero vector is defined and stays zero."""
        assert Vector2().with_length(10) == Vector2(0, 0)

    def test_normalize_default_unit(self):
        assert Vector2(0, 5).normalize() == Vector2(0, 1)

    def test_normalize_negative_flips(self):
        v = Vector2(1, 0).normalize(-2)
        assert v == Vector2(-2, 0)

    def test_normalize_zero_is_zero(self):
        assert Vector2().normalize(7).is_zero()

    def test_limit_clamps_long_vectors(self):
        v = Vector2(6, 8).limit(5)
        assert v.x == pytest.approx(3)
        assert v.y == pytest.approx(4)

    def test_limit_keeps_short_vectors(self):
        assert Vector2(3, 4).limit(10) == Vector2(3, 4)


class TestGeometry:
    """Rotation, distance, zero-test."""

    def test_rotate_90_degrees(self):
        v = Vector2(1, 0).rotate(90)
        assert v.x == pytest.approx(0, abs=1e-12)
        assert v.y == pytest.approx(1)

    def test_rotate_preserves_length(self):
        v = Vector2(3, 4).rotate(37)
        assert v.length == pytest.approx(5)

    def test_distance_to(self):
        assert Vector2(1, 1).distance_to(Vector2(4, 5)) == pytest.approx(5)

    def test_is_zero(self):
        assert Vector2().is_zero()
        assert Vector2.zero().is_zero()
        assert not Vector2(0, 1e-9).is_zero()

    def test_dot(self):
        assert Vector2(1, 2).dot(Vector2(3, 4)) == 11
