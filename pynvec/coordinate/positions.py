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

"""Horizontal and 3D position types

Two interchangeable horizontal position types are provided: ``LatLong``
(latitude and longitude angles) and ``NVector`` (unit vector normal to the
surface). Both expose ``from_lat_long_degrees``, ``to_lat_long``,
``as_nvector``, ``antipode`` and ``is_antipode_of``. Geometric algorithms work
on n-vectors and convert at the boundary.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from ..core.angle import Angle
from ..core.length import Length
from .vec3 import Vec3


def latlong_to_nvector(latitude: Angle, longitude: Angle) -> Vec3:
    """Convert latitude and longitude to an n-vector

    Parameters
    ----------
    latitude : Angle
        Geodetic latitude
    longitude : Angle
        Longitude

    Returns
    -------
    Vec3
        Unit n-vector; exactly (0, 0, 1) or (0, 0, -1) at the poles
    """
    if latitude == Angle.QUARTER_CIRCLE:
        return Vec3.UNIT_Z
    if latitude == -Angle.QUARTER_CIRCLE:
        return Vec3.NEG_UNIT_Z
    lat = latitude.as_radians()
    lon = longitude.as_radians()
    cl = math.cos(lat)
    return Vec3(cl * math.cos(lon), cl * math.sin(lon), math.sin(lat))


def nvector_to_latlong(v: Vec3) -> Tuple[Angle, Angle]:
    """Convert an n-vector to latitude and longitude

    Longitude is 0 at either pole.
    """
    lat = math.atan2(v.z, math.hypot(v.x, v.y))
    if abs(v.z) == 1.0:
        lon = 0.0
    else:
        lon = math.atan2(v.y, v.x)
    return Angle.from_radians(lat), Angle.from_radians(lon)


@dataclass(frozen=True)
class LatLong:
    """Horizontal position as latitude and longitude

    Attributes
    ----------
    latitude : Angle
        Latitude in [-90, 90] degrees
    longitude : Angle
        Longitude in [-180, 180] degrees
    """

    latitude: Angle
    longitude: Angle

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> 'LatLong':
        return cls(Angle.from_degrees(latitude), Angle.from_degrees(longitude))

    @classmethod
    def from_lat_long_degrees(cls, latitude: float, longitude: float) -> 'LatLong':
        return cls.from_degrees(latitude, longitude)

    @classmethod
    def from_radians(cls, latitude: float, longitude: float) -> 'LatLong':
        return cls(Angle.from_radians(latitude), Angle.from_radians(longitude))

    @classmethod
    def from_nvector(cls, nv) -> 'LatLong':
        """Create from an NVector (or a unit Vec3)"""
        v = nv.as_vec3() if isinstance(nv, NVector) else nv
        lat, lon = nvector_to_latlong(v)
        return cls(lat, lon)

    def to_nvector(self) -> 'NVector':
        return NVector(latlong_to_nvector(self.latitude, self.longitude))

    def as_nvector(self) -> Vec3:
        return latlong_to_nvector(self.latitude, self.longitude)

    def to_lat_long(self) -> 'LatLong':
        return self

    def to_lat_long_degrees(self) -> Tuple[float, float]:
        return self.latitude.as_degrees(), self.longitude.as_degrees()

    def to_lat_long_radians(self) -> Tuple[float, float]:
        return self.latitude.as_radians(), self.longitude.as_radians()

    def antipode(self) -> 'LatLong':
        return LatLong.from_nvector(-self.as_nvector())

    def is_antipode_of(self, other) -> bool:
        return (self.as_nvector() + other.as_nvector()).is_zero()

    def round_d5(self) -> 'LatLong':
        return LatLong(self.latitude.round_d5(), self.longitude.round_d5())

    def round_d6(self) -> 'LatLong':
        return LatLong(self.latitude.round_d6(), self.longitude.round_d6())

    def round_d7(self) -> 'LatLong':
        return LatLong(self.latitude.round_d7(), self.longitude.round_d7())

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True)
class NVector:
    """Horizontal position as a unit vector normal to the reference surface

    The vector is assumed to be unit length; use the provided constructors
    (or ``Vec3.new_unit``) to build one.

    Attributes
    ----------
    vec3 : Vec3
        The n-vector
    """

    vec3: Vec3

    @classmethod
    def from_lat_long_degrees(cls, latitude: float, longitude: float) -> 'NVector':
        return cls(latlong_to_nvector(Angle.from_degrees(latitude), Angle.from_degrees(longitude)))

    @classmethod
    def from_lat_long_radians(cls, latitude: float, longitude: float) -> 'NVector':
        return cls(latlong_to_nvector(Angle.from_radians(latitude), Angle.from_radians(longitude)))

    @classmethod
    def from_lat_long(cls, ll: LatLong) -> 'NVector':
        return cls(latlong_to_nvector(ll.latitude, ll.longitude))

    def as_vec3(self) -> Vec3:
        return self.vec3

    def as_nvector(self) -> Vec3:
        return self.vec3

    def to_lat_long(self) -> LatLong:
        return LatLong.from_nvector(self.vec3)

    def to_lat_long_degrees(self) -> Tuple[float, float]:
        return self.to_lat_long().to_lat_long_degrees()

    def to_lat_long_radians(self) -> Tuple[float, float]:
        return self.to_lat_long().to_lat_long_radians()

    def antipode(self) -> 'NVector':
        return NVector(-self.vec3)

    def is_antipode_of(self, other) -> bool:
        """Whether this position and other sum to the zero vector"""
        return (self.vec3 + other.as_nvector()).is_zero()

    def round_d5(self) -> 'NVector':
        return self.to_lat_long().round_d5().to_nvector()

    def round_d6(self) -> 'NVector':
        return self.to_lat_long().round_d6().to_nvector()

    def round_d7(self) -> 'NVector':
        return self.to_lat_long().round_d7().to_nvector()


@dataclass(frozen=True)
class GeocentricPos:
    """Earth-centred Earth-fixed (ECEF) position

    Attributes
    ----------
    x, y, z : Length
        ECEF coordinates
    """

    x: Length
    y: Length
    z: Length

    @classmethod
    def from_metres(cls, x: float, y: float, z: float) -> 'GeocentricPos':
        return cls(Length.from_metres(x), Length.from_metres(y), Length.from_metres(z))

    @classmethod
    def from_vec3_metres(cls, v: Vec3) -> 'GeocentricPos':
        return cls.from_metres(v.x, v.y, v.z)

    def as_metres(self) -> Vec3:
        return Vec3(self.x.as_metres(), self.y.as_metres(), self.z.as_metres())

    def _round(self, f) -> 'GeocentricPos':
        return GeocentricPos(f(self.x), f(self.y), f(self.z))

    def round_m(self) -> 'GeocentricPos':
        return self._round(Length.round_m)

    def round_dm(self) -> 'GeocentricPos':
        return self._round(Length.round_dm)

    def round_cm(self) -> 'GeocentricPos':
        return self._round(Length.round_cm)

    def round_mm(self) -> 'GeocentricPos':
        return self._round(Length.round_mm)


@dataclass(frozen=True)
class GeodeticPos:
    """Position as a horizontal n-vector and a height above the surface

    Attributes
    ----------
    horizontal_position : NVector
        Horizontal position
    height : Length
        Height above the reference surface
    """

    horizontal_position: NVector
    height: Length = Length.ZERO

    def round_mm(self) -> 'GeodeticPos':
        return GeodeticPos(self.horizontal_position, self.height.round_mm())

    def round_d7_mm(self) -> 'GeodeticPos':
        return GeodeticPos(self.horizontal_position.round_d7(), self.height.round_mm())
