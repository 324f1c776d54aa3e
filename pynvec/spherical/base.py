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

"""Vector primitives shared by the spherical algorithms"""

import math
from typing import Optional

from ..coordinate.vec3 import Vec3
from ..core.numbers import sign


def angle_radians_between(v1: Vec3, v2: Vec3, vn: Optional[Vec3] = None) -> float:
    """
    Angle between two vectors in radians.

    Parameters
    ----------
    v1, v2 : Vec3
        The vectors, not necessarily unit length
    vn : Vec3, optional
        Reference direction: if given the angle is signed, positive when
        v1 x v2 points along vn

    Returns
    -------
    float
        Angle in [0, pi] if vn is None, else in [-pi, pi]
    """
    c = v1.cross_prod(v2)
    sin_o = c.norm()
    if vn is not None and c.dot_prod(vn) < 0.0:
        sin_o = -sin_o
    return math.atan2(sin_o, v1.dot_prod(v2))


def easting(v: Vec3) -> Vec3:
    """Unit vector pointing east at the n-vector v

    At the poles east is undefined and the y axis is returned.
    """
    if abs(v.z) == 1.0:
        return Vec3.UNIT_Y
    return Vec3.new_unit(-v.y, v.x, 0.0)


def orthogonal_to(a: Vec3, b: Vec3) -> Vec3:
    """Unit vector orthogonal to a and b, accurate when both are nearly parallel

    If a and b are equal or opposite, any unit vector orthogonal to a is
    returned.
    """
    o = a.stable_cross_prod_unit(b)
    if o.is_zero():
        return a.orthogonal()
    return o


def exact_side(v0: Vec3, v1: Vec3, v2: Vec3) -> float:
    """Dot product of v0 and the unit normal of the great circle through v1 and v2"""
    return v0.dot_prod(orthogonal_to(v1, v2))


def side(v0: Vec3, v1: Vec3, v2: Vec3) -> int:
    """
    Side of v0 relative to the great circle from v1 to v2.

    Returns
    -------
    int
        -1 if v0 is right of the great circle, 0 if on it (within tolerance),
        +1 if left of it
    """
    return sign(exact_side(v0, v1, v2))
