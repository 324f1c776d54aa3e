#!/usr/bin/env python3
"""Test suite for Length, Speed and Duration"""

import math
import unittest

from pynvec.core.angle import Angle
from pynvec.core.duration import Duration
from pynvec.core.length import Length
from pynvec.core.speed import Speed


class TestLength(unittest.TestCase):
    """Test length units and arithmetic"""

    def test_units(self):
        self.assertEqual(Length.from_kilometres(1.5).as_metres(), 1500.0)
        self.assertEqual(Length.from_nautical_miles(1.0).as_metres(), 1852.0)
        self.assertEqual(Length.from_feet(1.0).as_metres(), 0.3048)
        self.assertAlmostEqual(Length.from_metres(3704.0).as_nautical_miles(), 2.0)
        self.assertAlmostEqual(Length.from_metres(0.6096).as_feet(), 2.0)
        self.assertEqual(Length.from_metres(2500.0).as_kilometres(), 2.5)

    def test_rounding(self):
        self.assertEqual(Length.from_metres(1.23456).round_mm(), Length.from_metres(1.235))
        self.assertEqual(Length.from_metres(1.23456).round_cm(), Length.from_metres(1.23))
        self.assertEqual(Length.from_metres(1.26).round_dm(), Length.from_metres(1.3))
        self.assertEqual(Length.from_metres(-2.5).round_m(), Length.from_metres(-3.0))

    def test_arithmetic(self):
        a = Length.from_metres(3.0)
        b = Length.from_metres(1.5)
        self.assertEqual(a + b, Length.from_metres(4.5))
        self.assertEqual(a - b, Length.from_metres(1.5))
        self.assertEqual(a * 2, Length.from_metres(6.0))
        self.assertEqual(2 * a, Length.from_metres(6.0))
        self.assertEqual(a / 2, b)
        self.assertEqual(a / b, 2.0)
        self.assertEqual(-a, Length.from_metres(-3.0))
        self.assertLess(b, a)

    def test_arc_length(self):
        """Radius times central angle"""
        r = Length.from_metres(1.0)
        self.assertAlmostEqual((r * Angle.HALF_CIRCLE).as_metres(), math.pi)
        self.assertAlmostEqual((Angle.HALF_CIRCLE * r).as_metres(), math.pi)

    def test_mixed_kinds(self):
        with self.assertRaises(TypeError):
            Length.from_metres(1.0) + Duration.from_seconds(1.0)

    def test_speed_from_length_and_duration(self):
        s = Length.from_metres(100.0) / Duration.from_seconds(10.0)
        self.assertEqual(s, Speed.from_metres_per_second(10.0))
        with self.assertRaises(ValueError):
            Length.from_metres(100.0) / Duration.ZERO


class TestSpeed(unittest.TestCase):
    """Test speed units"""

    def test_units(self):
        self.assertAlmostEqual(Speed.from_knots(1.0).as_metres_per_second(), 1852.0 / 3600.0)
        self.assertAlmostEqual(Speed.from_kilometres_per_hour(36.0).as_metres_per_second(), 10.0)
        self.assertAlmostEqual(Speed.from_feet_per_second(1.0).as_metres_per_second(), 0.3048)
        self.assertAlmostEqual(Speed.from_metres_per_second(10.0).as_kilometres_per_hour(), 36.0)
        self.assertAlmostEqual(Speed.from_knots(15.0).as_knots(), 15.0)
        self.assertAlmostEqual(Speed.from_metres_per_second(0.3048).as_feet_per_second(), 1.0)

    def test_distance_travelled(self):
        d = Speed.from_knots(15.0) * Duration.from_hours(1.0)
        self.assertAlmostEqual(d.as_metres(), 27780.0)
        d = Duration.from_seconds(10.0) * Speed.from_metres_per_second(2.0)
        self.assertEqual(d, Length.from_metres(20.0))


class TestDuration(unittest.TestCase):
    """Test duration units"""

    def test_units(self):
        self.assertEqual(Duration.from_hours(1.5).as_seconds(), 5400.0)
        self.assertEqual(Duration.from_minutes(2.0).as_seconds(), 120.0)
        self.assertEqual(Duration.from_seconds(90.0).as_minutes(), 1.5)
        self.assertEqual(Duration.from_seconds(1800.0).as_hours(), 0.5)

    def test_rounding(self):
        self.assertEqual(Duration.from_seconds(1.23456).round_ms(), Duration.from_seconds(1.235))


if __name__ == '__main__':
    unittest.main()
