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

"""Reference surfaces: sphere and ellipsoid of revolution

A surface is either a ``Sphere`` or an ``Ellipsoid``. Both convert between
geodetic positions (n-vector and height) and geocentric (ECEF) positions.
"""

import math
from dataclasses import dataclass
from typing import Union

import numpy as np
from numba import njit

from ..core.angle import Angle
from ..core.constants import (
    ECC_GRS80, ECC_MOLA, ECC_WGS72, ECC_WGS84,
    FE_GRS80, FE_MOLA, FE_WGS72, FE_WGS84,
    R_EARTH_IUGG, R_MOON,
    RE_GRS80, RE_MOLA, RE_WGS72, RE_WGS84,
    RP_GRS80, RP_MOLA, RP_WGS72, RP_WGS84,
)
from ..core.length import Length
from .positions import GeocentricPos, GeodeticPos, NVector
from .vec3 import Vec3


@njit(cache=True)
def _geodetic_to_geocentric(a, b, vx, vy, vz, h):
    """
    Geocentric position of an n-vector and height on an ellipsoid.

    Parameters
    ----------
    a, b : float
        Equatorial and polar radii in meters
    vx, vy, vz : float
        n-vector components
    h : float
        Height above the ellipsoid in meters

    Returns
    -------
    c : ndarray, shape (3,)
        ECEF coordinates in meters
    """
    m = (a * a) / (b * b)
    n = b / np.sqrt(m * vx * vx + m * vy * vy + vz * vz)
    return np.array([n * m * vx + h * vx, n * m * vy + h * vy, n * vz + h * vz])


@njit(cache=True)
def _geocentric_to_geodetic(a, e, px, py, pz):
    """
    Closed-form conversion of an ECEF position to n-vector and height.

    Parameters
    ----------
    a : float
        Equatorial radius in meters
    e : float
        Eccentricity
    px, py, pz : float
        ECEF coordinates in meters

    Returns
    -------
    nv : ndarray, shape (3,)
        n-vector
    h : float
        Height above the ellipsoid in meters
    """
    e2 = e * e
    e4 = e2 * e2
    a2 = a * a
    p = (px * px + py * py) / a2
    q = ((1.0 - e2) / a2) * (pz * pz)
    r = (p + q - e4) / 6.0
    s = (e4 * p * q) / (4.0 * r * r * r)
    t = np.cbrt(1.0 + s + np.sqrt(s * (2.0 + s)))
    u = r * (1.0 + t + 1.0 / t)
    v = np.sqrt(u * u + q * e4)
    w = e2 * (u + v - q) / (2.0 * v)
    k = np.sqrt(u + v + w * w) - w
    d = k * np.sqrt(px * px + py * py) / (k + e2)
    h = ((k + e2 - 1.0) / k) * np.sqrt(d * d + pz * pz)

    fs = 1.0 / np.sqrt(d * d + pz * pz)
    fa = k / (k + e2)
    nv = np.array([fs * fa * px, fs * fa * py, fs * pz])
    return nv, h


@dataclass(frozen=True)
class Sphere:
    """Spherical surface

    Attributes
    ----------
    radius : Length
        Radius of the sphere
    """

    radius: Length

    def __post_init__(self):
        if self.radius.as_metres() <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")

    def geodetic_to_geocentric(self, pos: GeodeticPos) -> GeocentricPos:
        """ECEF position of a geodetic position: (radius + height) * n-vector"""
        v = pos.horizontal_position.as_vec3()
        return GeocentricPos.from_vec3_metres(v * (self.radius.as_metres() + pos.height.as_metres()))

    def geocentric_to_geodetic(self, pos: GeocentricPos) -> GeodeticPos:
        """Geodetic position of an ECEF position: unit vector and distance to the surface"""
        p = pos.as_metres()
        h = p.norm() - self.radius.as_metres()
        return GeodeticPos(NVector(p.unit()), Length.from_metres(h))


@dataclass(frozen=True)
class Ellipsoid:
    """Oblate ellipsoid of revolution

    Attributes
    ----------
    equatorial_radius : Length
        Semi-major axis a
    polar_radius : Length
        Semi-minor axis b = a * (1 - f)
    eccentricity : float
        First eccentricity e = sqrt(1 - b^2 / a^2)
    flattening : float
        Flattening f
    """

    equatorial_radius: Length
    polar_radius: Length
    eccentricity: float
    flattening: float

    @classmethod
    def from_inverse_flattening(cls, equatorial_radius: Length, inverse_flattening: float) -> 'Ellipsoid':
        """Ellipsoid from its equatorial radius and inverse flattening

        Parameters
        ----------
        equatorial_radius : Length
            Semi-major axis
        inverse_flattening : float
            1 / f

        Returns
        -------
        Ellipsoid
            The ellipsoid with derived polar radius and eccentricity
        """
        a = equatorial_radius.as_metres()
        if a <= 0.0 or inverse_flattening <= 0.0:
            raise ValueError(
                f"Invalid ellipsoid: a={a}, 1/f={inverse_flattening} (both must be positive)")
        f = 1.0 / inverse_flattening
        b = a * (1.0 - f)
        e = math.sqrt(1.0 - (b * b) / (a * a))
        return cls(equatorial_radius, Length.from_metres(b), e, f)

    def mean_radius(self) -> Length:
        """Mean radius (2a + b) / 3"""
        a = self.equatorial_radius.as_metres()
        b = self.polar_radius.as_metres()
        return Length.from_metres((2.0 * a + b) / 3.0)

    def volumetric_radius(self) -> Length:
        """Radius of the sphere of equal volume, cbrt(a^2 * b)"""
        a = self.equatorial_radius.as_metres()
        b = self.polar_radius.as_metres()
        return Length.from_metres(np.cbrt(a * a * b))

    def to_sphere(self) -> Sphere:
        """Sphere of equal volume"""
        return Sphere(self.volumetric_radius())

    def geocentric_radius(self, latitude: Angle) -> Length:
        """Distance from the centre to the surface at the given geodetic latitude"""
        a = self.equatorial_radius.as_metres()
        b = self.polar_radius.as_metres()
        lat = latitude.as_radians()
        cos_lat = math.cos(lat)
        sin_lat = math.sin(lat)
        f1 = a * a * cos_lat
        f2 = b * b * sin_lat
        f3 = a * cos_lat
        f4 = b * sin_lat
        return Length.from_metres(math.sqrt((f1 * f1 + f2 * f2) / (f3 * f3 + f4 * f4)))

    def latitude_radius(self, latitude: Angle) -> Length:
        """Radius of the parallel at the given latitude, 0 at the poles"""
        if abs(latitude) == Angle.QUARTER_CIRCLE:
            return Length.ZERO
        return self.prime_vertical_radius(latitude) * math.cos(latitude.as_radians())

    def prime_vertical_radius(self, latitude: Angle) -> Length:
        """Radius of curvature in the prime vertical, N = a / sqrt(1 - e^2 sin^2(lat))"""
        a = self.equatorial_radius.as_metres()
        e2 = self.eccentricity * self.eccentricity
        sin_lat = math.sin(latitude.as_radians())
        return Length.from_metres(a / math.sqrt(1.0 - e2 * sin_lat * sin_lat))

    def meridian_radius(self, latitude: Angle) -> Length:
        """Radius of curvature in the meridian, M = a (1 - e^2) / (1 - e^2 sin^2(lat))^1.5"""
        a = self.equatorial_radius.as_metres()
        e2 = self.eccentricity * self.eccentricity
        sin_lat = math.sin(latitude.as_radians())
        return Length.from_metres(a * (1.0 - e2) / math.pow(1.0 - e2 * sin_lat * sin_lat, 1.5))

    def geodetic_to_geocentric(self, pos: GeodeticPos) -> GeocentricPos:
        v = pos.horizontal_position.as_vec3()
        c = _geodetic_to_geocentric(self.equatorial_radius.as_metres(), self.polar_radius.as_metres(),
                                    v.x, v.y, v.z, pos.height.as_metres())
        return GeocentricPos.from_vec3_metres(Vec3.from_array(c))

    def geocentric_to_geodetic(self, pos: GeocentricPos) -> GeodeticPos:
        """Geodetic position of an ECEF position

        Closed-form (non-iterative) solution from Gade (2010), accurate near
        the equator and the poles.
        """
        p = pos.as_metres()
        nv, h = _geocentric_to_geodetic(self.equatorial_radius.as_metres(), self.eccentricity,
                                        p.x, p.y, p.z)
        return GeodeticPos(NVector(Vec3.from_array(nv)), Length.from_metres(h))


Surface = Union[Sphere, Ellipsoid]

WGS84_ELLIPSOID = Ellipsoid(Length(RE_WGS84), Length(RP_WGS84), ECC_WGS84, FE_WGS84)
GRS80_ELLIPSOID = Ellipsoid(Length(RE_GRS80), Length(RP_GRS80), ECC_GRS80, FE_GRS80)
WGS72_ELLIPSOID = Ellipsoid(Length(RE_WGS72), Length(RP_WGS72), ECC_WGS72, FE_WGS72)
MARS_2000_ELLIPSOID = Ellipsoid(Length(RE_MOLA), Length(RP_MOLA), ECC_MOLA, FE_MOLA)

IUGG_EARTH_SPHERE = Sphere(Length(R_EARTH_IUGG))
MOON_SPHERE = Sphere(Length(R_MOON))
