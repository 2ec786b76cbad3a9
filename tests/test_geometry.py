"""Tests for the planar value types and angle normalization."""

import numpy as np
import pytest

from dubins_path import Angle, Point, Vector, distance, midpoint, normalize_positive, normalize_signed, rotate
from dubins_path.geometry import TAU, as_angle, check_radius, heading_of, left_center, right_center

from .common import angle_close, point_close


class TestNormalize:
    @pytest.mark.parametrize(
        "angle, expected",
        [
            (0.0, 0.0),
            (np.pi, np.pi),
            (-np.pi / 2, 3 * np.pi / 2),
            (5 * np.pi, np.pi),
            (-4 * np.pi, 0.0),
        ],
    )
    def test_positive(self, angle, expected):
        assert normalize_positive(angle) == pytest.approx(expected)

    def test_positive_never_returns_full_turn(self):
        assert normalize_positive(-1e-18) == 0.0
        assert 0.0 <= normalize_positive(-1e-12) < TAU

    @pytest.mark.parametrize(
        "angle, expected",
        [
            (0.0, 0.0),
            (np.pi, np.pi),
            (-np.pi, np.pi),
            (3 * np.pi / 2, -np.pi / 2),
            (2 * np.pi - 0.1, -0.1),
        ],
    )
    def test_signed(self, angle, expected):
        assert normalize_signed(angle) == pytest.approx(expected)


class TestAngle:
    def test_stored_value_is_wrapped(self):
        assert Angle(-np.pi / 2).radians == pytest.approx(3 * np.pi / 2)
        assert Angle(7 * np.pi).radians == pytest.approx(np.pi)

    def test_signed_view(self):
        assert Angle(3 * np.pi / 2).signed == pytest.approx(-np.pi / 2)
        assert Angle.pi().signed == pytest.approx(np.pi)

    def test_constants(self):
        assert Angle.zero().radians == 0.0
        assert Angle.frac_pi_2().radians == pytest.approx(np.pi / 2)
        assert Angle.from_degrees(270.0).radians == pytest.approx(3 * np.pi / 2)
        assert Angle.from_degrees(90).degrees == pytest.approx(90.0)

    def test_arithmetic_wraps(self):
        a = Angle(3 * np.pi / 2) + Angle(np.pi)
        assert a.radians == pytest.approx(np.pi / 2)
        assert (Angle.zero() - Angle.frac_pi_2()).radians == pytest.approx(3 * np.pi / 2)
        assert (-Angle.frac_pi_2()).radians == pytest.approx(3 * np.pi / 2)

    def test_approx_eq_across_zero(self):
        assert Angle(TAU - 1e-12).approx_eq(Angle.zero())
        assert not Angle(0.1).approx_eq(Angle.zero())

    def test_as_angle(self):
        assert as_angle(np.pi) == Angle.pi()
        a = Angle(1.0)
        assert as_angle(a) is a


class TestVector:
    def test_from_angle_and_length(self):
        v = Vector.from_angle_and_length(Angle.frac_pi_2(), 10.0)
        assert v.approx_eq(Vector(0.0, 10.0))
        assert v.length == pytest.approx(10.0)

    def test_from_heading_and_length(self):
        # heading 90 degrees clockwise from +y points along +x
        v = Vector.from_heading_and_length(Angle.frac_pi_2(), 2.0)
        assert v.approx_eq(Vector(2.0, 0.0))

    def test_angle_and_heading_conventions(self):
        v = Vector(1.0, 0.0)
        assert angle_close(v.angle, Angle.zero())
        assert angle_close(v.heading, Angle.frac_pi_2())
        assert angle_close(Vector(0.0, -3.0).heading, Angle.pi())

    def test_vertical_heading_has_no_quadrant_jump(self):
        assert angle_close(heading_of(Vector(0.0, 5.0)), Angle.zero())
        assert angle_close(heading_of(Vector(-0.0, -5.0)), Angle.pi())
        assert angle_close(heading_of(Vector(-1e-300, 5.0)), Angle.zero())

    def test_rotate_counter_clockwise(self):
        v = rotate(Vector(1.0, 0.0), Angle.frac_pi_2())
        assert v.approx_eq(Vector(0.0, 1.0))
        v = rotate(Vector(1.0, 1.0), Angle.pi())
        assert v.approx_eq(Vector(-1.0, -1.0))

    def test_rotate_preserves_length(self):
        v = Vector(3.0, 4.0)
        assert rotate(v, Angle(0.7)).length == pytest.approx(5.0)

    def test_operators(self):
        v = Vector(1.0, 2.0)
        assert v + Vector(1.0, 1.0) == Vector(2.0, 3.0)
        assert v - Vector(1.0, 1.0) == Vector(0.0, 1.0)
        assert 2 * v == Vector(2.0, 4.0)
        assert -v == Vector(-1.0, -2.0)


class TestPoint:
    def test_distance_and_midpoint(self):
        a, b = Point(0.0, 0.0), Point(3.0, 4.0)
        assert distance(a, b) == pytest.approx(5.0)
        assert point_close(midpoint(a, b), Point(1.5, 2.0))

    def test_point_vector_arithmetic(self):
        p = Point(1.0, 1.0) + Vector(2.0, -1.0)
        assert p == Point(3.0, 0.0)
        assert Point(3.0, 0.0) - Point(1.0, 1.0) == Vector(2.0, -1.0)
        assert np.allclose(p.to_array(), [3.0, 0.0])

    def test_integer_and_numpy_coordinates(self):
        p = Point(1, 2)
        assert p == Point(1.0, 2.0)
        assert isinstance(p.x, float)
        assert Point(np.float32(1.0), np.int64(2)) == p
        assert Vector(3, 4).length == pytest.approx(5.0)
        assert Angle(0) == Angle.zero()


class TestTurnCenters:
    def test_start_configuration(self):
        origin = Point(0.0, 0.0)
        assert point_close(right_center(origin, Angle.zero(), 0.5), Point(0.5, 0.0))
        assert point_close(left_center(origin, Angle.zero(), 0.5), Point(-0.5, 0.0))

    def test_facing_east(self):
        p = Point(2.0, 3.0)
        assert point_close(right_center(p, Angle.frac_pi_2(), 1.0), Point(2.0, 2.0))
        assert point_close(left_center(p, Angle.frac_pi_2(), 1.0), Point(2.0, 4.0))


class TestCheckRadius:
    @pytest.mark.parametrize("radius", [0.0, -1.0, float("inf"), float("nan")])
    def test_rejects_invalid(self, radius):
        with pytest.raises(ValueError):
            check_radius(radius)

    def test_accepts_int(self):
        assert check_radius(2) == 2.0
