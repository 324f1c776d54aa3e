#!/usr/bin/env python3
"""Test suite for spherical vector primitives, chord lengths and great circles"""

import math
import unittest

import numpy.testing as npt

from pynvec.coordinate.positions import LatLong, NVector
from pynvec.coordinate.vec3 import Vec3
from pynvec.core.angle import Angle
from pynvec.spherical.base import angle_radians_between, easting, exact_side, orthogonal_to, side
from pynvec.spherical.chord_length import ChordLength
from pynvec.spherical.great_circle import GreatCircle
from pynvec.spherical.sphere import Sphere


def assert_nv_eq_d7(expected, actual):
    """Positions are equal once rounded to 7 decimal places of degree"""
    assert actual is not None
    assert LatLong.from_nvector(expected).round_d7() == LatLong.from_nvector(actual).round_d7(), \
        f"{LatLong.from_nvector(expected)} != {LatLong.from_nvector(actual)}"


class TestAngleBetween(unittest.TestCase):
    """Test signed and unsigned angles between vectors"""

    def test_signed(self):
        z = Vec3(0.0, 0.0, -1.0)
        self.assertEqual(math.pi / 2.0, angle_radians_between(Vec3.UNIT_Y, Vec3.UNIT_X, z))
        self.assertEqual(-math.pi / 2.0, angle_radians_between(Vec3.UNIT_X, Vec3.UNIT_Y, z))
        self.assertEqual(-math.pi / 4.0, angle_radians_between(Vec3.UNIT_X, Vec3(1.0, 1.0, 0.0), z))
        self.assertEqual(math.pi / 4.0, angle_radians_between(Vec3(1.0, 1.0, 0.0), Vec3.UNIT_X, z))

    def test_unsigned(self):
        self.assertEqual(math.pi / 2.0, angle_radians_between(Vec3.UNIT_Y, Vec3.UNIT_X))
        self.assertEqual(math.pi / 4.0, angle_radians_between(Vec3.UNIT_X, Vec3(1.0, 1.0, 0.0)))
        self.assertEqual(math.pi, angle_radians_between(Vec3.UNIT_X, Vec3.NEG_UNIT_X))


class TestVectorPrimitives(unittest.TestCase):
    """Test easting, orthogonal vectors and sides"""

    def test_easting(self):
        npt.assert_allclose(easting(Vec3.UNIT_X).as_array(), [0.0, 1.0, 0.0])
        npt.assert_allclose(easting(Vec3.UNIT_Y).as_array(), [-1.0, 0.0, 0.0])
        # undefined at the poles
        self.assertEqual(Vec3.UNIT_Y, easting(Vec3.UNIT_Z))
        self.assertEqual(Vec3.UNIT_Y, easting(Vec3.NEG_UNIT_Z))

    def test_orthogonal_to(self):
        a = Vec3.new_unit(1.0, 2.0, 3.0)
        b = Vec3.new_unit(3.0, -1.0, 0.5)
        o = orthogonal_to(a, b)
        self.assertAlmostEqual(1.0, o.norm())
        self.assertAlmostEqual(0.0, o.dot_prod(a))
        self.assertAlmostEqual(0.0, o.dot_prod(b))
        # same orientation as a x b
        self.assertGreater(o.dot_prod(a.cross_prod(b)), 0.0)

    def test_orthogonal_to_degenerate(self):
        """Equal or opposite vectors fall back to any orthogonal vector"""
        a = Vec3.new_unit(1.0, 2.0, 3.0)
        self.assertEqual(a.orthogonal(), orthogonal_to(a, a))
        self.assertEqual(a.orthogonal(), orthogonal_to(a, -a))

    def test_side(self):
        v1 = Vec3.UNIT_X
        v2 = Vec3.UNIT_Y
        self.assertEqual(1, side(Vec3.UNIT_Z, v1, v2))
        self.assertEqual(-1, side(Vec3.NEG_UNIT_Z, v1, v2))
        self.assertEqual(0, side(Vec3.new_unit(1.0, 1.0, 0.0), v1, v2))
        self.assertAlmostEqual(1.0, exact_side(Vec3.UNIT_Z, v1, v2))


class TestChordLength(unittest.TestCase):
    """Test squared chord lengths"""

    def test_from_positions(self):
        c = ChordLength.new(NVector.from_lat_long_degrees(90.0, 0.0), NVector.from_lat_long_degrees(-90.0, 0.0))
        self.assertEqual(ChordLength.MAX, c)
        self.assertEqual(Angle.HALF_CIRCLE, c.to_angle())

    def test_symmetry(self):
        self.assertEqual(Angle.QUARTER_CIRCLE,
                         ChordLength.from_angle(Angle.QUARTER_CIRCLE).to_angle().round_d7())
        self.assertEqual(Angle.from_degrees(45.0),
                         ChordLength.from_angle(Angle.from_degrees(45.0)).to_angle().round_d7())

    def test_negative_to_angle(self):
        self.assertEqual(Angle.from_radians(-1.0), ChordLength.NEGATIVE.to_angle())

    def test_from_angle_range(self):
        q = ChordLength.from_angle(Angle.QUARTER_CIRCLE)
        self.assertEqual(q, ChordLength.from_angle(Angle.HALF_CIRCLE + Angle.QUARTER_CIRCLE))
        self.assertEqual(q, ChordLength.from_angle(-Angle.QUARTER_CIRCLE))
        self.assertEqual(ChordLength.MAX, ChordLength.from_angle(Angle.HALF_CIRCLE))
        self.assertEqual(ChordLength.ZERO, ChordLength.from_angle(Angle.ZERO))

    def test_ordering(self):
        a = ChordLength.from_angle(Angle.from_degrees(45.0))
        b = ChordLength.from_angle(Angle.from_degrees(90.0))
        self.assertEqual(a, ChordLength.from_angle(Angle.from_degrees(45.0)))
        self.assertLess(ChordLength.NEGATIVE, a)
        self.assertGreater(a, ChordLength.NEGATIVE)
        self.assertLess(a, b)
        self.assertLess(b, ChordLength.MAX)


class TestGreatCircle(unittest.TestCase):
    """Test great circles"""

    def test_new(self):
        gc = GreatCircle.new(NVector.from_lat_long_degrees(0.0, 0.0), NVector.from_lat_long_degrees(0.0, 10.0))
        npt.assert_allclose(gc.normal.as_array(), [0.0, 0.0, 1.0], atol=1e-15)
        self.assertTrue(gc.contains_point(NVector.from_lat_long_degrees(0.0, -120.0)))
        self.assertFalse(gc.contains_point(NVector.from_lat_long_degrees(1.0, 0.0)))

    def test_from_heading(self):
        """Heading east on the equator gives the equator"""
        gc = GreatCircle.from_heading(NVector.from_lat_long_degrees(0.0, 0.0), Angle.from_degrees(90.0))
        npt.assert_allclose(gc.normal.as_array(), [0.0, 0.0, 1.0], atol=1e-15)
        gc = GreatCircle.from_heading(NVector.from_lat_long_degrees(0.0, 0.0), Angle.ZERO)
        npt.assert_allclose(gc.normal.as_array(), [0.0, -1.0, 0.0], atol=1e-15)
        self.assertTrue(gc.contains_point(NVector.from_lat_long_degrees(45.0, 0.0)))

    def test_from_heading_matches_new(self):
        p1 = NVector.from_lat_long_degrees(53.3206, -1.7297)
        p2 = NVector.from_lat_long_degrees(53.1887, 0.1334)
        gc = GreatCircle.from_heading(p1, Sphere.initial_bearing(p1, p2))
        npt.assert_allclose(gc.normal.as_array(), GreatCircle.new(p1, p2).normal.as_array(), atol=1e-8)

    def test_projection(self):
        gc = GreatCircle.new(NVector.from_lat_long_degrees(0.0, 0.0), NVector.from_lat_long_degrees(0.0, 10.0))
        assert_nv_eq_d7(NVector.from_lat_long_degrees(0.0, 25.0),
                        gc.projection(NVector.from_lat_long_degrees(40.0, 25.0)))

    def test_projection_of_pole(self):
        """Every position of the circle is equally close to its pole"""
        gc = GreatCircle.new(NVector.from_lat_long_degrees(0.0, 0.0), NVector.from_lat_long_degrees(0.0, 10.0))
        p = gc.projection(NVector.from_lat_long_degrees(90.0, 0.0))
        self.assertTrue(gc.contains_point(p))


if __name__ == '__main__':
    unittest.main()
