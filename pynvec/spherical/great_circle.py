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

"""Great circles on the sphere"""

import math
from dataclasses import dataclass

from ..coordinate.positions import NVector
from ..coordinate.vec3 import Vec3
from ..core.angle import Angle
from ..core.numbers import eq_zero
from .base import easting, orthogonal_to


@dataclass(frozen=True)
class GreatCircle:
    """Circle on the surface of a sphere whose plane passes through the centre

    A great circle is oriented: it is described by the unit normal of its
    plane, and positions left of the direction of travel are on the side the
    normal points to.

    Attributes
    ----------
    normal : Vec3
        Unit normal to the plane of the great circle
    """

    normal: Vec3

    @classmethod
    def new(cls, p1: NVector, p2: NVector) -> 'GreatCircle':
        """Great circle passing through p1 then p2

        p1 and p2 must be distinct and not antipodal.
        """
        return cls(orthogonal_to(p1.as_vec3(), p2.as_vec3()))

    @classmethod
    def from_heading(cls, p: NVector, bearing: Angle) -> 'GreatCircle':
        """Great circle passing through p and heading on the given bearing"""
        e = easting(p.as_vec3())
        n = p.as_vec3().cross_prod(e)
        b = bearing.as_radians()
        se = e * (math.cos(b) / e.norm())
        sn = n * (math.sin(b) / n.norm())
        return cls(sn - se)

    def projection(self, p: NVector) -> NVector:
        """Closest position to p on this great circle

        If p is a pole of the great circle every position of the circle is
        equally close and an arbitrary one is returned.
        """
        n1 = self.normal
        n2 = p.as_vec3().stable_cross_prod_unit(n1)
        if n2.is_zero():
            return NVector(p.as_vec3().orthogonal())
        return NVector(orthogonal_to(n1, n2))

    def contains_point(self, p: NVector) -> bool:
        """Whether p lies on this great circle, within tolerance"""
        return eq_zero(p.as_vec3().dot_prod(self.normal))
