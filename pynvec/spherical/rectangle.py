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
Latitude-longitude rectangles.

A rectangle is the product of a latitude interval and a longitude interval.
Longitude intervals live on a circle: an interval whose ``lo`` is greater
than its ``hi`` wraps around the antimeridian.

References:
    The longitude interval algebra follows the S1Interval class of the S2
    geometry library (https://s2geometry.io).
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable

from ..coordinate.positions import LatLong
from ..coordinate.vec3 import Vec3
from ..core.angle import Angle
from ..core.numbers import eq_zero, gte, lte
from .minor_arc import MinorArc


def _cmp(a: Angle, b: Angle) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class LatitudeInterval:
    """Closed interval of latitudes [lo, hi], empty if lo > hi

    Attributes
    ----------
    lo : Angle
        Southern bound
    hi : Angle
        Northern bound
    """

    lo: Angle
    hi: Angle

    EMPTY: ClassVar['LatitudeInterval']
    FULL: ClassVar['LatitudeInterval']

    @classmethod
    def from_minor_arc(cls, ma: MinorArc, lls: LatLong, lle: LatLong) -> 'LatitudeInterval':
        """
        Latitudes spanned by a minor arc.

        The arc may reach a latitude beyond both endpoints if it passes
        through the vertex (northernmost or southernmost position) of its
        great circle.

        Parameters
        ----------
        ma : MinorArc
            The arc
        lls, lle : LatLong
            Start and end of the arc
        """
        n = ma.normal
        # m = n x north pole
        m = Vec3(n.y, -n.x, 0.0)
        ms = m.dot_prod(ma.start.as_vec3())
        me = m.dot_prod(ma.end.as_vec3())
        lo = min(lls.latitude, lle.latitude)
        hi = max(lls.latitude, lle.latitude)
        if ms * me < 0.0 or eq_zero(ms) or eq_zero(me):
            max_lat = Angle.from_radians(math.atan2(math.hypot(n.x, n.y), abs(n.z)))
            if lte(ms, 0.0) and gte(me, 0.0):
                hi = max_lat
            if lte(me, 0.0) and gte(ms, 0.0):
                lo = -max_lat
        return cls(lo, hi)

    def is_empty(self) -> bool:
        return self.lo > self.hi

    def is_full(self) -> bool:
        return self.lo == -Angle.QUARTER_CIRCLE and self.hi == Angle.QUARTER_CIRCLE

    def contains_point(self, latitude: Angle) -> bool:
        return self.lo <= latitude <= self.hi

    def contains_interval(self, o: 'LatitudeInterval') -> bool:
        if o.is_empty():
            return True
        return o.lo >= self.lo and o.hi <= self.hi

    def union(self, o: 'LatitudeInterval') -> 'LatitudeInterval':
        """Smallest interval containing both intervals"""
        if self.is_empty():
            return o
        if o.is_empty():
            return self
        return LatitudeInterval(min(self.lo, o.lo), max(self.hi, o.hi))

    def expand(self, amount: Angle) -> 'LatitudeInterval':
        """Interval grown by amount on both sides, clamped to [-90, 90]

        A negative amount shrinks the interval, possibly down to empty.
        """
        if self.is_empty():
            return self
        lo = max(self.lo - amount, -Angle.QUARTER_CIRCLE)
        hi = min(self.hi + amount, Angle.QUARTER_CIRCLE)
        if lo > hi:
            return LatitudeInterval.EMPTY
        return LatitudeInterval(lo, hi)

    def length(self) -> Angle:
        """hi - lo, negative if empty"""
        return self.hi - self.lo

    def midpoint(self) -> Angle:
        return (self.lo + self.hi) / 2


@dataclass(frozen=True)
class LongitudeInterval:
    """Closed interval of longitudes on the circle

    ``lo > hi`` denotes an interval crossing the antimeridian. The empty
    interval is (180, -180) and the full interval is (-180, 180).

    Attributes
    ----------
    lo : Angle
        Western bound
    hi : Angle
        Eastern bound
    """

    lo: Angle
    hi: Angle

    EMPTY: ClassVar['LongitudeInterval']
    FULL: ClassVar['LongitudeInterval']

    @classmethod
    def from_minor_arc(cls, lls: LatLong, lle: LatLong) -> 'LongitudeInterval':
        """Shorter of the two intervals joining the longitudes of the arc endpoints"""
        start = _normalised_longitude(lls.longitude)
        end = _normalised_longitude(lle.longitude)
        if _positive_distance(start, end) <= Angle.HALF_CIRCLE:
            return cls(start, end)
        return cls(end, start)

    def is_empty(self) -> bool:
        return self.lo == Angle.HALF_CIRCLE and self.hi == Angle.NEG_HALF_CIRCLE

    def is_full(self) -> bool:
        return self.lo == Angle.NEG_HALF_CIRCLE and self.hi == Angle.HALF_CIRCLE

    def is_inverted(self) -> bool:
        return self.lo > self.hi

    def contains_point(self, longitude: Angle) -> bool:
        return self._fast_contains(_normalised_longitude(longitude))

    def contains_interval(self, o: 'LongitudeInterval') -> bool:
        if self.is_inverted():
            if o.is_inverted():
                return o.lo >= self.lo and o.hi <= self.hi
            return (o.lo >= self.lo or o.hi <= self.hi) and not self.is_empty()
        if o.is_inverted():
            return self.is_full() or o.is_empty()
        return o.lo >= self.lo and o.hi <= self.hi

    def union(self, o: 'LongitudeInterval') -> 'LongitudeInterval':
        """
        Smallest interval containing both intervals.

        If the intervals are disjoint, the gap that is bridged is the shorter
        of the two.
        """
        if o.is_empty():
            return self
        if self._fast_contains(o.lo):
            if self._fast_contains(o.hi):
                # either o is inside self, or together they cover the circle
                if self.contains_interval(o):
                    return self
                return LongitudeInterval.FULL
            return LongitudeInterval(self.lo, o.hi)
        if self._fast_contains(o.hi):
            return LongitudeInterval(o.lo, self.hi)
        # neither endpoint of o is in self: self is empty, inside o or disjoint from o
        if self.is_empty() or o._fast_contains(self.lo):
            return o
        dlo = _positive_distance(o.hi, self.lo)
        dhi = _positive_distance(self.hi, o.lo)
        if dlo < dhi:
            return LongitudeInterval(o.lo, self.hi)
        return LongitudeInterval(self.lo, o.hi)

    def expand(self, amount: Angle) -> 'LongitudeInterval':
        """
        Interval grown by amount on both sides.

        Parameters
        ----------
        amount : Angle
            Margin; negative to shrink the interval

        Returns
        -------
        LongitudeInterval
            FULL if the grown interval covers the circle, EMPTY if the
            shrunken interval has no length left
        """
        if amount >= Angle.ZERO:
            if self.is_empty():
                return self
            if self.length() + amount * 2 >= Angle.FULL_CIRCLE:
                return LongitudeInterval.FULL
        else:
            if self.is_full():
                return self
            if self.length() + amount * 2 <= Angle.ZERO:
                return LongitudeInterval.EMPTY
        lo = _wrap(self.lo - amount)
        hi = _wrap(self.hi + amount)
        return LongitudeInterval(lo, hi)

    def length(self) -> Angle:
        """Angular length of the interval, -1 radian if empty"""
        if self.is_empty():
            return Angle.from_radians(-1.0)
        d = self.hi - self.lo
        if d >= Angle.ZERO:
            return d
        return d + Angle.FULL_CIRCLE

    def midpoint(self) -> Angle:
        centre = (self.lo + self.hi) / 2
        if not self.is_inverted():
            return centre
        if centre <= Angle.ZERO:
            return centre + Angle.HALF_CIRCLE
        return centre - Angle.HALF_CIRCLE

    def _fast_contains(self, longitude: Angle) -> bool:
        if self.is_inverted():
            return (longitude >= self.lo or longitude <= self.hi) and not self.is_empty()
        return self.lo <= longitude <= self.hi


def _normalised_longitude(longitude: Angle) -> Angle:
    """-180 is mapped to 180 so that both denote the same meridian"""
    if longitude == Angle.NEG_HALF_CIRCLE:
        return Angle.HALF_CIRCLE
    return longitude


def _positive_distance(a: Angle, b: Angle) -> Angle:
    """Distance from a to b going east, in [0, 360]"""
    d = b - a
    if d >= Angle.ZERO:
        return d
    return (b + Angle.HALF_CIRCLE) - (a - Angle.HALF_CIRCLE)


def _wrap(longitude: Angle) -> Angle:
    """Longitude reduced to (-180, 180]"""
    n = longitude.normalised()
    if n > Angle.HALF_CIRCLE:
        return n - Angle.FULL_CIRCLE
    return n


@dataclass(frozen=True)
class Rectangle:
    """Region bounded by two parallels and two meridians

    Attributes
    ----------
    latitude_interval : LatitudeInterval
        Latitudes covered by the rectangle
    longitude_interval : LongitudeInterval
        Longitudes covered by the rectangle
    """

    latitude_interval: LatitudeInterval
    longitude_interval: LongitudeInterval

    EMPTY: ClassVar['Rectangle']
    FULL: ClassVar['Rectangle']

    @classmethod
    def from_minor_arc(cls, ma: MinorArc) -> 'Rectangle':
        """Smallest rectangle containing every position of the arc"""
        lls = LatLong.from_nvector(ma.start)
        lle = LatLong.from_nvector(ma.end)
        return cls(LatitudeInterval.from_minor_arc(ma, lls, lle), LongitudeInterval.from_minor_arc(lls, lle))

    @classmethod
    def from_nesw(cls, north: Angle, east: Angle, south: Angle, west: Angle) -> 'Rectangle':
        return cls(LatitudeInterval(south, north), LongitudeInterval(west, east))

    @classmethod
    def from_union(cls, rectangles: Iterable['Rectangle']) -> 'Rectangle':
        """Smallest rectangle containing all the given rectangles, EMPTY if none"""
        res = cls.EMPTY
        for r in rectangles:
            res = res.union(r)
        return res

    def contains_point(self, p: LatLong) -> bool:
        return (self.latitude_interval.contains_point(p.latitude)
                and self.longitude_interval.contains_point(p.longitude))

    def contains_rectangle(self, r: 'Rectangle') -> bool:
        return (self.latitude_interval.contains_interval(r.latitude_interval)
                and self.longitude_interval.contains_interval(r.longitude_interval))

    def south_west(self) -> LatLong:
        return LatLong(self.latitude_interval.lo, self.longitude_interval.lo)

    def north_east(self) -> LatLong:
        return LatLong(self.latitude_interval.hi, self.longitude_interval.hi)

    def is_empty(self) -> bool:
        return self.latitude_interval.is_empty() and self.longitude_interval.is_empty()

    def is_full(self) -> bool:
        return self.latitude_interval.is_full() and self.longitude_interval.is_full()

    def is_latitude_empty(self) -> bool:
        return self.latitude_interval.is_empty()

    def is_latitude_full(self) -> bool:
        return self.latitude_interval.is_full()

    def is_longitude_empty(self) -> bool:
        return self.longitude_interval.is_empty()

    def is_longitude_full(self) -> bool:
        return self.longitude_interval.is_full()

    def union(self, o: 'Rectangle') -> 'Rectangle':
        return Rectangle(self.latitude_interval.union(o.latitude_interval),
                         self.longitude_interval.union(o.longitude_interval))

    def expand(self, amount: Angle) -> 'Rectangle':
        """Rectangle grown by amount in every direction, EMPTY if shrunk to nothing"""
        lat = self.latitude_interval.expand(amount)
        lng = self.longitude_interval.expand(amount)
        if lat.is_empty() or lng.is_empty():
            return Rectangle.EMPTY
        return Rectangle(lat, lng)

    def expand_to_north_pole(self) -> 'Rectangle':
        return Rectangle(LatitudeInterval(self.latitude_interval.lo, Angle.QUARTER_CIRCLE),
                         LongitudeInterval.FULL)

    def expand_to_south_pole(self) -> 'Rectangle':
        return Rectangle(LatitudeInterval(-Angle.QUARTER_CIRCLE, self.latitude_interval.hi),
                         LongitudeInterval.FULL)

    def polar_closure(self) -> 'Rectangle':
        """Rectangle with full longitudes if it reaches either pole"""
        lat = self.latitude_interval
        if lat.lo == -Angle.QUARTER_CIRCLE or lat.hi == Angle.QUARTER_CIRCLE:
            return Rectangle(lat, LongitudeInterval.FULL)
        return self

    def cmp_by_latitude(self, o: 'Rectangle') -> int:
        """-1, 0 or +1 comparing the latitude midpoints of both rectangles"""
        return _cmp(self.latitude_interval.midpoint(), o.latitude_interval.midpoint())

    def cmp_by_longitude(self, o: 'Rectangle') -> int:
        """-1, 0 or +1 comparing the longitude midpoints of both rectangles"""
        return _cmp(self.longitude_interval.midpoint(), o.longitude_interval.midpoint())


LatitudeInterval.EMPTY = LatitudeInterval(Angle.from_radians(1.0), Angle.ZERO)
LatitudeInterval.FULL = LatitudeInterval(-Angle.QUARTER_CIRCLE, Angle.QUARTER_CIRCLE)
LongitudeInterval.EMPTY = LongitudeInterval(Angle.HALF_CIRCLE, Angle.NEG_HALF_CIRCLE)
LongitudeInterval.FULL = LongitudeInterval(Angle.NEG_HALF_CIRCLE, Angle.HALF_CIRCLE)
Rectangle.EMPTY = Rectangle(LatitudeInterval.EMPTY, LongitudeInterval.EMPTY)
Rectangle.FULL = Rectangle(LatitudeInterval.FULL, LongitudeInterval.FULL)
