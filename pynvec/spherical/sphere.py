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
Navigation on a spherical model of the body.

Positions are n-vectors; the sphere only matters for functions that produce
or consume lengths (distances, destinations). Functions that only involve
angles are static.

Example:
    >>> from pynvec.coordinate import NVector
    >>> from pynvec.spherical.sphere import EARTH
    >>> p1 = NVector.from_lat_long_degrees(50.066389, -5.714722)
    >>> p2 = NVector.from_lat_long_degrees(58.643889, -3.07)
    >>> EARTH.distance(p1, p2).round_m()
    Length(metres=968854.0)
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from ..coordinate import surface
from ..coordinate.positions import NVector
from ..coordinate.vec3 import Vec3
from ..core.angle import Angle
from ..core.constants import R_EARTH_IUGG, R_MOON
from ..core.length import Length
from .base import angle_radians_between, easting, exact_side, orthogonal_to
from .base import side as _side
from .great_circle import GreatCircle
from .minor_arc import MinorArc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sphere(surface.Sphere):
    """Sphere used as the surface of navigation functions

    Attributes
    ----------
    radius : Length
        Radius of the sphere
    """

    def along_track_distance(self, p: NVector, ma: MinorArc) -> Length:
        """
        Signed distance from the start of an arc to the projection of p on its great circle.

        Parameters
        ----------
        p : NVector
            Position
        ma : MinorArc
            Arc giving the origin (its start) and the direction of travel

        Returns
        -------
        Length
            Positive if the projection is ahead of the start, negative if behind
        """
        n = ma.normal
        a = angle_radians_between(ma.start.as_vec3(), n.cross_prod(p.as_vec3()).cross_prod(n), n)
        return self.radius * a

    @staticmethod
    def angle(p1: NVector, p2: NVector) -> Angle:
        """Unsigned angle between two positions, in [0, 180] degrees"""
        return Angle.from_radians(angle_radians_between(p1.as_vec3(), p2.as_vec3()))

    def cross_track_distance(self, p: NVector, gc: GreatCircle) -> Length:
        """Signed distance from p to a great circle

        Negative if p is left of the great circle, positive if right of it.
        """
        a = angle_radians_between(gc.normal, p.as_vec3())
        return self.radius * (a - math.pi / 2.0)

    def destination_pos(self, p0: NVector, bearing: Angle, distance: Length) -> NVector:
        """
        Position reached from p0 travelling on a great circle.

        Parameters
        ----------
        p0 : NVector
            Initial position
        bearing : Angle
            Initial bearing, clockwise from north
        distance : Length
            Distance travelled along the surface, may be negative

        Returns
        -------
        NVector
            Destination, p0 itself if distance is zero
        """
        if distance == Length.ZERO:
            return p0
        v0 = p0.as_vec3()
        ed = easting(v0)
        nd = v0.cross_prod(ed)
        ta = distance.as_metres() / self.radius.as_metres()
        b = bearing.as_radians()
        direction = nd * math.cos(b) + ed * math.sin(b)
        return NVector((v0 * math.cos(ta) + direction * math.sin(ta)).unit())

    def distance(self, p1: NVector, p2: NVector) -> Length:
        """Surface distance between two positions"""
        return self.radius * angle_radians_between(p1.as_vec3(), p2.as_vec3())

    @staticmethod
    def is_great_circle(p1: NVector, p2: NVector) -> bool:
        """Whether p1 and p2 define a unique great circle (distinct, not antipodal)"""
        return p1 != p2 and not p1.is_antipode_of(p2)

    @staticmethod
    def initial_bearing(p1: NVector, p2: NVector) -> Angle:
        """Bearing at p1 of the great circle from p1 to p2, in [0, 360)

        Zero if p1 and p2 are equal or antipodal.
        """
        if not Sphere.is_great_circle(p1, p2):
            return Angle.ZERO
        return Angle.from_radians(_initial_bearing_radians(p1.as_vec3(), p2.as_vec3())).normalised()

    @staticmethod
    def final_bearing(p1: NVector, p2: NVector) -> Angle:
        """Bearing at p2 of the great circle from p1 to p2, in [0, 360)

        Zero if p1 and p2 are equal or antipodal.
        """
        if not Sphere.is_great_circle(p1, p2):
            return Angle.ZERO
        a = _initial_bearing_radians(p2.as_vec3(), p1.as_vec3()) + math.pi
        return Angle.from_radians(a).normalised()

    @staticmethod
    def interpolated_pos(p1: NVector, p2: NVector, f: float) -> Optional[NVector]:
        """
        Position at a fraction of the minor arc from p1 to p2.

        Parameters
        ----------
        p1, p2 : NVector
            Endpoints
        f : float
            Fraction in [0, 1]

        Returns
        -------
        NVector or None
            p1 for f = 0, p2 for f = 1, None if f is outside [0, 1] or the
            endpoints are antipodal
        """
        if not 0.0 <= f <= 1.0:
            return None
        if p1.is_antipode_of(p2):
            logger.debug("No interpolation between antipodal positions %s and %s", p1, p2)
            return None
        if f == 0.0:
            return p1
        if f == 1.0:
            return p2
        v1 = p1.as_vec3()
        v2 = p2.as_vec3()
        return NVector(_towards(v1, v2, f * angle_radians_between(v1, v2)))

    @staticmethod
    def mean_position(ps: Sequence[NVector]) -> Optional[NVector]:
        """Geographical mean of the given positions

        None if ps is empty or contains two antipodal positions.
        """
        if not ps or _contains_antipodal(ps):
            return None
        if len(ps) == 1:
            return ps[0]
        return NVector(Vec3.mean(p.as_vec3() for p in ps))

    @staticmethod
    def triangle_mean_position(a: NVector, b: NVector, c: NVector) -> Optional[NVector]:
        return Sphere.mean_position([a, b, c])

    @staticmethod
    def position_on_great_circle(start: NVector, towards: NVector, angle: Angle) -> NVector:
        """Position at the given angle from start on the great circle from start to towards"""
        return NVector(_towards(start.as_vec3(), towards.as_vec3(), angle.as_radians()))

    @staticmethod
    def projection(p: NVector, gc: GreatCircle) -> NVector:
        """Closest position to p on a great circle"""
        return gc.projection(p)

    @staticmethod
    def side(p0: NVector, p1: NVector, p2: NVector) -> int:
        """
        Side of p0 relative to the great circle from p1 to p2.

        Returns
        -------
        int
            -1 if p0 is right of (p1, p2), 0 if the three positions are on
            the same great circle, +1 if p0 is left of (p1, p2). If p1 and p2
            are equal or antipodal an arbitrary great circle through them is
            used.
        """
        return _side(p0.as_vec3(), p1.as_vec3(), p2.as_vec3())

    @staticmethod
    def side_exact(p0: NVector, p1: NVector, p2: NVector) -> float:
        """Like ``side`` but returns the dot product the sign is taken from"""
        return exact_side(p0.as_vec3(), p1.as_vec3(), p2.as_vec3())

    @staticmethod
    def turn(a: NVector, b: NVector, c: NVector) -> Angle:
        """Signed turn angle at b travelling from a to c

        Negative when turning right, positive when turning left, zero when
        the three positions are on the same great circle.
        """
        n1 = orthogonal_to(a.as_vec3(), b.as_vec3())
        n2 = orthogonal_to(b.as_vec3(), c.as_vec3())
        return Angle.from_radians(angle_radians_between(n1, n2, b.as_vec3()))


def _initial_bearing_radians(v1: Vec3, v2: Vec3) -> float:
    # great circle through v1 and v2
    gc1 = v1.cross_prod(v2)
    # great circle through v1 and the north pole, i.e. -easting(v1)
    if abs(v1.z) == 1.0:
        gc2 = Vec3.NEG_UNIT_Y
    else:
        gc2 = Vec3(v1.y, -v1.x, 0.0)
    return angle_radians_between(gc1, gc2, v1)


def _towards(v1: Vec3, v2: Vec3, radians: float) -> Vec3:
    direction = v1.stable_cross_prod(v2).cross_prod_unit(v1)
    return (v1 * math.cos(radians) + direction * math.sin(radians)).unit()


def _contains_antipodal(ps: Sequence[NVector]) -> bool:
    for p in ps:
        a = p.antipode()
        if any(o == a for o in ps):
            return True
    return False


EARTH = Sphere(Length(R_EARTH_IUGG))
MOON = Sphere(Length(R_MOON))
