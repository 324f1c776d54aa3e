#!/usr/bin/env python3
"""Test suite for spherical caps"""

import math
import unittest

from pynvec.coordinate.positions import LatLong, NVector
from pynvec.core.angle import Angle
from pynvec.spherical.cap import Cap
from pynvec.spherical.sphere import Sphere


def nv(latitude, longitude):
    return NVector.from_lat_long_degrees(latitude, longitude)


def assert_nv_eq_d7(expected, actual):
    """Positions are equal once rounded to 7 decimal places of degree"""
    assert actual is not None
    assert LatLong.from_nvector(expected).round_d7() == LatLong.from_nvector(actual).round_d7(), \
        f"{LatLong.from_nvector(expected)} != {LatLong.from_nvector(actual)}"


class TestCapConstants(unittest.TestCase):
    """Test the empty and full caps"""

    def test_full(self):
        self.assertTrue(Cap.FULL.is_full())
        self.assertTrue(Cap.FULL.contains_point(nv(90.0, 0.0)))
        self.assertTrue(Cap.FULL.contains_point(nv(-90.0, 0.0)))
        self.assertEqual(Angle.from_radians(math.pi), Cap.FULL.radius())
        self.assertEqual(Cap.EMPTY, Cap.FULL.complement())

    def test_empty(self):
        self.assertTrue(Cap.EMPTY.is_empty())
        self.assertFalse(Cap.EMPTY.contains_point(nv(90.0, 0.0)))
        self.assertFalse(Cap.EMPTY.contains_point(nv(-90.0, 0.0)))
        self.assertEqual(Angle.from_radians(-1.0), Cap.EMPTY.radius())
        self.assertEqual(Cap.FULL, Cap.EMPTY.complement())


class TestCapConstruction(unittest.TestCase):
    """Test cap constructors"""

    def test_from_triangle(self):
        a = nv(0.0, 0.0)
        b = nv(20.0, 0.0)
        c = nv(10.0, 10.0)
        cap = Cap.from_triangle(a, b, c)
        self.assertTrue(cap.contains_point(a))
        self.assertTrue(cap.contains_point(b))
        self.assertTrue(cap.contains_point(c))

        # same cap whatever the winding
        o = Cap.from_triangle(c, b, a)
        assert_nv_eq_d7(o.centre, cap.centre)
        self.assertAlmostEqual(o.chord_radius.length2, cap.chord_radius.length2, places=12)

    def test_radius(self):
        np_ = nv(90.0, 0.0)
        self.assertEqual(Angle.QUARTER_CIRCLE,
                         Cap.from_centre_and_boundary_point(np_, nv(0.0, 0.0)).radius().round_d7())
        self.assertEqual(Angle.from_radians(math.pi / 4.0).round_d7(),
                         Cap.from_centre_and_boundary_point(np_, nv(45.0, 45.0)).radius().round_d7())

    def test_from_centre_and_radius(self):
        cap = Cap.from_centre_and_radius(nv(10.0, 20.0), Angle.from_degrees(5.0))
        self.assertEqual(Angle.from_degrees(5.0), cap.radius().round_d7())
        self.assertFalse(cap.is_empty())
        self.assertFalse(cap.is_full())


class TestCapOperations(unittest.TestCase):
    """Test complement, containment and union"""

    def test_complement(self):
        np_ = nv(90.0, 0.0)
        sp = nv(-90.0, 0.0)
        northern = Cap.from_centre_and_radius(np_, Angle.QUARTER_CIRCLE)
        southern = Cap.from_centre_and_radius(sp, Angle.QUARTER_CIRCLE)

        nc = northern.complement()
        assert_nv_eq_d7(southern.centre, nc.centre)
        self.assertAlmostEqual(southern.chord_radius.length2, nc.chord_radius.length2, places=12)

        sc = southern.complement()
        assert_nv_eq_d7(northern.centre, sc.centre)
        self.assertAlmostEqual(northern.chord_radius.length2, sc.chord_radius.length2, places=12)

    def test_contains_point(self):
        cap = Cap.from_centre_and_boundary_point(nv(90.0, 0.0), nv(0.0, 0.0))
        self.assertTrue(cap.contains_point(nv(0.0, 0.0)))
        self.assertTrue(cap.contains_point(nv(45.0, 45.0)))
        self.assertFalse(cap.contains_point(nv(-1.0, 0.0)))

    def test_interior_contains_point(self):
        cap = Cap.from_centre_and_boundary_point(nv(90.0, 0.0), nv(0.0, 0.0))
        self.assertFalse(cap.interior_contains_point(nv(0.0, 0.0)))
        self.assertTrue(cap.interior_contains_point(nv(45.0, 45.0)))

    def test_contains_cap(self):
        c = Cap.from_centre_and_radius(nv(30.0, 30.0), Angle.from_degrees(10.0))
        self.assertTrue(Cap.FULL.contains_cap(c))
        self.assertTrue(c.contains_cap(Cap.EMPTY))

        o = Cap.from_centre_and_radius(nv(30.0, 30.0), Angle.from_degrees(20.0))
        self.assertFalse(c.contains_cap(o))
        self.assertTrue(o.contains_cap(c))

    def test_union_with_constants(self):
        self.assertTrue(Cap.FULL.union(Cap.EMPTY).is_full())
        self.assertTrue(Cap.EMPTY.union(Cap.FULL).is_full())

        a = Cap.from_centre_and_radius(nv(50.0, 10.0), Angle.from_degrees(0.2))
        self.assertEqual(Cap.FULL, a.union(Cap.FULL))
        self.assertEqual(a, a.union(Cap.EMPTY))

    def test_union_same_centre(self):
        a = Cap.from_centre_and_radius(nv(50.0, 10.0), Angle.from_degrees(0.2))
        b = Cap.from_centre_and_radius(nv(50.0, 10.0), Angle.from_degrees(0.3))
        self.assertTrue(b.contains_cap(a))
        self.assertEqual(b, a.union(b))

    def test_union_enclosing(self):
        a = Cap.from_centre_and_radius(nv(50.0, 10.0), Angle.from_degrees(0.2))
        c = Cap.from_centre_and_radius(nv(51.0, 11.0), Angle.from_degrees(1.5))
        self.assertTrue(c.contains_cap(a))
        u = a.union(c)
        self.assertEqual(c.centre, u.centre)
        self.assertEqual(c.radius(), u.radius())

    def test_union_overlapping(self):
        a = Cap.from_centre_and_radius(nv(50.0, 10.0), Angle.from_degrees(0.2))
        e = Cap.from_centre_and_radius(nv(50.3, 10.3), Angle.from_degrees(0.2))
        self.assertFalse(e.contains_cap(a))
        u = a.union(e)
        c = LatLong.from_nvector(u.centre)
        self.assertEqual(Angle.from_degrees(50.1501), c.latitude.round_d5())
        self.assertEqual(Angle.from_degrees(10.14953), c.longitude.round_d5())
        self.assertEqual(Angle.from_degrees(0.37815), u.radius().round_d5())
        self.assertTrue(u.contains_cap(a))
        self.assertTrue(u.contains_cap(e))

    def test_union_with_complement_is_full(self):
        for lat, lon, radius in ((90.0, 0.0, 10.0), (30.0, 30.0, 60.0), (-45.0, 120.0, 120.0),
                                 (0.0, -179.0, 90.0)):
            c = Cap.from_centre_and_radius(nv(lat, lon), Angle.from_degrees(radius))
            self.assertTrue(c.union(c.complement()).is_full())
            self.assertTrue(c.complement().union(c).is_full())

    def test_complement_contains_the_other_positions(self):
        c = Cap.from_centre_and_radius(nv(30.0, 30.0), Angle.from_degrees(60.0))
        cc = c.complement()
        for lat in range(-80, 90, 20):
            for lon in range(-170, 180, 40):
                p = nv(float(lat), float(lon))
                if abs(Sphere.angle(c.centre, p).as_degrees() - 60.0) < 1e-6:
                    continue
                self.assertNotEqual(c.contains_point(p), cc.contains_point(p), f"{lat} {lon}")

    def test_union_of_large_caps_is_full(self):
        a = Cap.from_centre_and_radius(nv(0.0, 0.0), Angle.from_degrees(150.0))
        b = Cap.from_centre_and_radius(nv(0.0, 90.0), Angle.from_degrees(150.0))
        self.assertEqual(Cap.FULL, a.union(b))


class TestCapBoundary(unittest.TestCase):
    """Test boundary sampling"""

    def test_constants_have_no_boundary(self):
        self.assertEqual([], Cap.EMPTY.boundary(1))
        self.assertEqual([], Cap.FULL.boundary(1))

    def test_northern_hemisphere(self):
        northern = Cap.from_centre_and_radius(nv(90.0, 0.0), Angle.QUARTER_CIRCLE)
        expected = [LatLong.from_degrees(0.0, 180.0), LatLong.from_degrees(0.0, 90.0),
                    LatLong.from_degrees(0.0, 0.0), LatLong.from_degrees(0.0, -90.0)]
        self.assertEqual(expected, [LatLong.from_nvector(v).round_d7() for v in northern.boundary(4)])

    def test_at_least_three_vertices(self):
        northern = Cap.from_centre_and_radius(nv(90.0, 0.0), Angle.QUARTER_CIRCLE)
        expected = [LatLong.from_degrees(0.0, 180.0), LatLong.from_degrees(0.0, 60.0),
                    LatLong.from_degrees(0.0, -60.0)]
        self.assertEqual(expected, [LatLong.from_nvector(v).round_d7() for v in northern.boundary(2)])

    def test_boundary_at_radius(self):
        cap = Cap.from_centre_and_radius(nv(45.0, 45.0), Angle.from_degrees(10.0))
        for v in cap.boundary(8):
            self.assertAlmostEqual(10.0, Sphere.angle(cap.centre, v).as_degrees(), places=7)


if __name__ == '__main__':
    unittest.main()
