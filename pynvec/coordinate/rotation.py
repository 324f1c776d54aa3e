# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Rotation matrices from and to Euler angles.

Two sequences are supported, both composed of rotations about the new
(intrinsic) axes:

- 'XYZ': R = Rx(x) * Ry(y) * Rz(z), used by the local-level frame
- 'ZYX': R = Rz(z) * Ry(y) * Rx(x), i.e. yaw, pitch and roll

The element formulas match other n-vector implementations so that matrices
can be exchanged with them.

References:
    Gade, K. (2010). A Non-singular Horizontal Position Representation,
    The Journal of Navigation, Volume 63, Issue 03, pp 395-417.
"""

from typing import Tuple

import numpy as np
from numba import njit

from ..core.angle import Angle
from .mat33 import Mat33


@njit(cache=True, fastmath=True)
def _xyz2r(x, y, z):
    """
    Rotation matrix for the 'XYZ' sequence.

    Parameters
    ----------
    x, y, z : float
        Rotation angles about the x, new y and new z axes in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Rotation matrix
    """
    cx, sx = np.cos(x), np.sin(x)
    cy, sy = np.cos(y), np.sin(y)
    cz, sz = np.cos(z), np.sin(z)
    R = np.array([[cy*cz, -cy*sz, sy],
                  [sy*sx*cz + cx*sz, -sy*sx*sz + cx*cz, -cy*sx],
                  [-sy*cx*cz + sx*sz, sy*cx*sz + sx*cz, cy*cx]],
                 dtype=np.double)
    return R


@njit(cache=True, fastmath=True)
def _zyx2r(z, y, x):
    """
    Rotation matrix for the 'ZYX' sequence.

    Parameters
    ----------
    z, y, x : float
        Yaw, pitch and roll in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Rotation matrix
    """
    cx, sx = np.cos(x), np.sin(x)
    cy, sy = np.cos(y), np.sin(y)
    cz, sz = np.cos(z), np.sin(z)
    R = np.array([[cz*cy, -sz*cx + cz*sy*sx, sz*sx + cz*sy*cx],
                  [sz*cy, cz*cx + sz*sy*sx, -cz*sx + sz*sy*cx],
                  [-sy, cy*sx, cy*cx]],
                 dtype=np.double)
    return R


@njit(cache=True, fastmath=True)
def _r2xyz(R):
    """
    Angles of the 'XYZ' sequence from a rotation matrix.

    cos(y) is taken from four elements to average out round-off; it is the
    positive root since y is in [-pi/2, pi/2].

    Parameters
    ----------
    R : ndarray, shape (3, 3)
        Rotation matrix

    Returns
    -------
    x, y, z : float
        Angles in radians
    """
    v00 = R[0, 0]
    v01 = R[0, 1]
    v12 = R[1, 2]
    v22 = R[2, 2]
    z = -np.arctan2(v01, v00)
    x = -np.arctan2(v12, v22)
    sy = R[0, 2]
    cy = np.sqrt((v00*v00 + v01*v01 + v12*v12 + v22*v22) / 2.0)
    y = np.arctan2(sy, cy)
    return x, y, z


def xyz2r(x: Angle, y: Angle, z: Angle) -> Mat33:
    """Rotation matrix from angles about x, new y and new z axes

    Parameters
    ----------
    x : Angle
        Rotation about the x axis
    y : Angle
        Rotation about the new y axis
    z : Angle
        Rotation about the new z axis

    Returns
    -------
    Mat33
        R = Rx(x) * Ry(y) * Rz(z)
    """
    return Mat33.from_array(_xyz2r(x.as_radians(), y.as_radians(), z.as_radians()))


def zyx2r(z: Angle, y: Angle, x: Angle) -> Mat33:
    """Rotation matrix from yaw (z), pitch (y) and roll (x)

    Parameters
    ----------
    z : Angle
        Yaw, rotation about the z axis
    y : Angle
        Pitch, rotation about the new y axis
    x : Angle
        Roll, rotation about the new x axis

    Returns
    -------
    Mat33
        R = Rz(z) * Ry(y) * Rx(x)
    """
    return Mat33.from_array(_zyx2r(z.as_radians(), y.as_radians(), x.as_radians()))


def r2xyz(m: Mat33) -> Tuple[Angle, Angle, Angle]:
    """Angles (x, y, z) such that m = xyz2r(x, y, z)"""
    x, y, z = _r2xyz(m.as_array())
    return Angle.from_radians(x), Angle.from_radians(y), Angle.from_radians(z)


def r2zyx(m: Mat33) -> Tuple[Angle, Angle, Angle]:
    """Angles (z, y, x), i.e. yaw, pitch and roll, such that m = zyx2r(z, y, x)

    The transpose of Rz(z) * Ry(y) * Rx(x) is Rx(-x) * Ry(-y) * Rz(-z), so the
    angles are the negated 'XYZ' angles of the transpose in reverse order.
    """
    a, b, c = _r2xyz(m.transpose().as_array())
    return Angle.from_radians(-c), Angle.from_radians(-b), Angle.from_radians(-a)
