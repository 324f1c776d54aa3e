#!/usr/bin/env python3
"""Test suite for Euler angle conversions"""

import unittest

import numpy as np
import numpy.testing as npt
from scipy.spatial.transform import Rotation

from pynvec.coordinate.rotation import r2xyz, r2zyx, xyz2r, zyx2r
from pynvec.coordinate.vec3 import Vec3
from pynvec.core.angle import Angle


def _deg(*values):
    return [Angle.from_degrees(v) for v in values]


class TestRotation(unittest.TestCase):
    """Test rotation matrices against scipy"""

    def test_zyx2r_matches_intrinsic_zyx(self):
        """zyx2r is Rz * Ry * Rx"""
        expected = Rotation.from_euler('ZYX', [30.0, 20.0, 10.0], degrees=True).as_matrix()
        npt.assert_allclose(zyx2r(*_deg(30.0, 20.0, 10.0)).as_array(), expected, atol=1e-12)

    def test_xyz2r_matches_intrinsic_xyz(self):
        """xyz2r is Rx * Ry * Rz"""
        expected = Rotation.from_euler('XYZ', [10.0, -20.0, 45.0], degrees=True).as_matrix()
        npt.assert_allclose(xyz2r(*_deg(10.0, -20.0, 45.0)).as_array(), expected, atol=1e-12)

    def test_yaw_rotates_x_to_y(self):
        r = zyx2r(*_deg(90.0, 0.0, 0.0))
        npt.assert_allclose((r @ Vec3.UNIT_X).as_array(), [0.0, 1.0, 0.0], atol=1e-15)

    def test_r2zyx(self):
        z, y, x = r2zyx(zyx2r(*_deg(45.0, 10.0, 5.0)))
        self.assertEqual(Angle.from_degrees(45.0), z.round_d7())
        self.assertEqual(Angle.from_degrees(10.0), y.round_d7())
        self.assertEqual(Angle.from_degrees(5.0), x.round_d7())

    def test_r2xyz(self):
        x, y, z = r2xyz(xyz2r(*_deg(-30.0, 60.0, 120.0)))
        self.assertEqual(Angle.from_degrees(-30.0), x.round_d7())
        self.assertEqual(Angle.from_degrees(60.0), y.round_d7())
        self.assertEqual(Angle.from_degrees(120.0), z.round_d7())

    def test_orthonormal(self):
        r = zyx2r(*_deg(123.0, -45.0, 12.0)).as_array()
        npt.assert_allclose(r @ r.T, np.eye(3), atol=1e-12)
        self.assertAlmostEqual(np.linalg.det(r), 1.0)


if __name__ == '__main__':
    unittest.main()
