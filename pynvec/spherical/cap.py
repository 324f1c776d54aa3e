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

"""Spherical caps"""

import math
from dataclasses import dataclass
from typing import ClassVar, List

from ..coordinate.mat33 import Mat33
from ..coordinate.positions import LatLong, NVector
from ..coordinate.vec3 import Vec3
from ..core.angle import Angle
from .base import orthogonal_to
from .chord_length import ChordLength
from .sphere import Sphere


@dataclass(frozen=True)
class Cap:
    """Portion of a sphere cut off by a plane

    A cap is the set of positions within an angular radius of its centre. The
    radius is kept as a chord length so that containment tests need no
    trigonometry.

    Attributes
    ----------
    centre : NVector
        Centre of the cap
    chord_radius : ChordLength
        Chord length from the centre to the boundary; ``ChordLength.NEGATIVE``
        for the empty cap and ``ChordLength.MAX`` for the full cap
    """

    centre: NVector
    chord_radius: ChordLength

    EMPTY: ClassVar['Cap']
    FULL: ClassVar['Cap']

    @classmethod
    def from_centre_and_radius(cls, centre: NVector, radius: Angle) -> 'Cap':
        return cls(centre, ChordLength.from_angle(radius))

    @classmethod
    def from_centre_and_boundary_point(cls, centre: NVector, boundary_point: NVector) -> 'Cap':
        return cls(centre, ChordLength.new(centre, boundary_point))

    @classmethod
    def from_triangle(cls, a: NVector, b: NVector, c: NVector) -> 'Cap':
        """Smallest cap whose boundary passes through a, b and c

        The positions may be given in any order.
        """
        # the circumcentre formula expects the positions anti-clockwise
        clockwise = Sphere.side(a, b, c) < 0
        v1 = a.as_vec3()
        v2 = c.as_vec3() if clockwise else b.as_vec3()
        v3 = b.as_vec3() if clockwise else c.as_vec3()
        centre = NVector(orthogonal_to(v2 - v1, v3 - v1))
        # all three chords are equal up to round-off
        radius = max(ChordLength.new(a, centre), ChordLength.new(b, centre), ChordLength.new(c, centre))
        return cls(centre, radius)

    def is_empty(self) -> bool:
        return self.chord_radius == ChordLength.NEGATIVE

    def is_full(self) -> bool:
        return self.chord_radius == ChordLength.MAX

    def complement(self) -> 'Cap':
        """Cap covering every position not in the interior of this cap"""
        if self.is_empty():
            return Cap.FULL
        if self.is_full():
            return Cap.EMPTY
        return Cap(self.centre.antipode(), ChordLength(ChordLength.MAX.length2 - self.chord_radius.length2))

    def contains_point(self, p: NVector) -> bool:
        """Whether p is inside this cap or on its boundary"""
        return ChordLength.new(self.centre, p) <= self.chord_radius

    def interior_contains_point(self, p: NVector) -> bool:
        """Whether p is strictly inside this cap"""
        return ChordLength.new(self.centre, p) < self.chord_radius

    def contains_cap(self, other: 'Cap') -> bool:
        if self.is_full() or other.is_empty():
            return True
        d = ChordLength.new(self.centre, other.centre).length2
        return self.chord_radius.length2 >= d + other.chord_radius.length2

    def union(self, other: 'Cap') -> 'Cap':
        """
        Smallest cap containing this cap and other.

        Parameters
        ----------
        other : Cap
            Cap to merge with this one

        Returns
        -------
        Cap
            The union; if one cap contains the other, that cap
        """
        if self.chord_radius < other.chord_radius:
            return other.union(self)
        if self.is_full() or other.is_empty():
            return self

        self_radius = self.radius()
        other_radius = other.radius()
        distance = Sphere.angle(self.centre, other.centre)
        if self_radius >= distance + other_radius:
            return self
        union_radius = 0.5 * (distance + self_radius + other_radius)
        if union_radius >= Angle.HALF_CIRCLE:
            return Cap.FULL
        ang = 0.5 * (distance - self_radius + other_radius)
        centre = Sphere.position_on_great_circle(self.centre, other.centre, ang)
        return Cap(centre, ChordLength.from_angle(union_radius))

    def radius(self) -> Angle:
        """Angular radius; -1 radian for the empty cap"""
        return self.chord_radius.to_angle()

    def boundary(self, nb_vertices: int) -> List[NVector]:
        """
        Positions evenly spaced on the boundary of this cap.

        Parameters
        ----------
        nb_vertices : int
            Number of positions, at least 3 are returned

        Returns
        -------
        list of NVector
            Boundary positions in clockwise order, empty for the empty and
            full caps
        """
        if self.is_empty() or self.is_full():
            return []

        rm = math.sin(self.radius().as_radians())
        z = math.sqrt(1.0 - rm * rm)

        ll = LatLong.from_nvector(self.centre)
        rya = math.pi / 2.0 - ll.latitude.as_radians()
        cy, sy = math.cos(rya), math.sin(rya)
        ry = Mat33(Vec3(cy, 0.0, sy), Vec3(0.0, 1.0, 0.0), Vec3(-sy, 0.0, cy))
        rza = ll.longitude.as_radians()
        cz, sz = math.cos(rza), math.sin(rza)
        rz = Mat33(Vec3(cz, -sz, 0.0), Vec3(sz, cz, 0.0), Vec3(0.0, 0.0, 1.0))

        n = max(nb_vertices, 3)
        inc = 2.0 * math.pi / n
        res = []
        for i in range(n):
            a = i * inc
            # boundary of the same cap centred on the north pole, rotated to the centre
            a_np = Vec3(-rm * math.cos(a), rm * math.sin(a), z)
            res.append(NVector((rz @ (ry @ a_np)).unit()))
        return res


Cap.EMPTY = Cap(NVector(Vec3.UNIT_Z), ChordLength.NEGATIVE)
Cap.FULL = Cap(NVector(Vec3.UNIT_Z), ChordLength.MAX)
