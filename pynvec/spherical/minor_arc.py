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

"""Oriented minor arcs of great circles"""

from dataclasses import dataclass, field
from typing import Optional

from ..coordinate.positions import NVector
from ..coordinate.vec3 import Vec3
from ..core.angle import Angle
from ..core.constants import EPSILON
from ..core.numbers import eq_zero, gte, lte, sign
from .base import angle_radians_between, orthogonal_to
from .chord_length import ChordLength


@dataclass(frozen=True)
class MinorArc:
    """Shortest path on the great circle going from start to end

    start and end must be distinct and not antipodal.

    Attributes
    ----------
    start : NVector
        First position of the arc
    end : NVector
        Last position of the arc
    normal : Vec3
        Unit normal to the great circle, computed from start and end
    """

    start: NVector
    end: NVector
    normal: Vec3 = field(default=None, compare=False)

    def __post_init__(self):
        if self.normal is None:
            object.__setattr__(self, 'normal', orthogonal_to(self.start.as_vec3(), self.end.as_vec3()))

    def intersection(self, other: 'MinorArc') -> Optional[NVector]:
        """
        Intersection of this arc with another arc.

        Parameters
        ----------
        other : MinorArc
            The other arc

        Returns
        -------
        NVector or None
            The intersection, or None if the arcs do not intersect or lie on
            the same great circle
        """
        i = self.normal.stable_cross_prod_unit(other.normal)
        if i.is_zero():
            return None
        # of the two antipodal candidates pick the one nearest to start
        candidate = i if self.start.as_vec3().dot_prod(i) > 0.0 else -i
        if self._contains_vec3(candidate) and other._contains_vec3(candidate):
            return NVector(candidate)
        return None

    def projection(self, p: NVector) -> Optional[NVector]:
        """Closest position to p on the great circle of this arc, if within the arc

        If p is a pole of the great circle, start is returned.
        """
        n1 = self.normal
        n2 = p.as_vec3().stable_cross_prod_unit(n1)
        if n2.is_zero():
            return self.start
        proj = orthogonal_to(n1, n2)
        if self._contains_vec3(proj):
            return NVector(proj)
        return None

    def contains_point(self, p: NVector) -> bool:
        """Whether p lies on this arc, endpoints included"""
        v = p.as_vec3()
        return eq_zero(v.dot_prod(self.normal)) and self._contains_vec3(v)

    def distance_to(self, p: NVector) -> ChordLength:
        """Chord length between p and the closest position of this arc"""
        xa = ChordLength.new(p, self.start).length2
        xb = ChordLength.new(p, self.end).length2
        ab = ChordLength.new(self.start, self.end).length2
        endpoint = ChordLength(min(xa, xb))
        if abs(xa - xb) >= ab + EPSILON:
            # the angle at one endpoint is obtuse: that endpoint is the closest position
            return endpoint
        proj = self.projection(p)
        if proj is None:
            return endpoint
        return ChordLength.new(p, proj)

    def side_of(self, p: NVector) -> int:
        """-1 if p is right of this arc, 0 if on its great circle, +1 if left"""
        return sign(p.as_vec3().dot_prod(self.normal))

    def turn(self, other: 'MinorArc') -> Angle:
        """Signed turn angle from this arc to other, where other starts at this arc's end

        Negative when turning right, positive when turning left.
        """
        return Angle.from_radians(angle_radians_between(self.normal, other.normal, self.end.as_vec3()))

    def opposite(self) -> 'MinorArc':
        """This arc travelled from end to start"""
        return MinorArc(self.end, self.start, -self.normal)

    def _contains_vec3(self, v: Vec3) -> bool:
        # v is left of (normal, start) and right of (normal, end); the normal is
        # never parallel to either endpoint so a plain cross product is enough
        n = self.normal
        return (gte(v.dot_prod(n.cross_prod_unit(self.start.as_vec3())), 0.0)
                and lte(v.dot_prod(n.cross_prod_unit(self.end.as_vec3())), 0.0))
