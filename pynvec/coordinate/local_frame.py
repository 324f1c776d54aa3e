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

"""Local tangent-plane frames (NED, ENU, Body and Local-Level)"""

import math
from dataclasses import dataclass
from enum import Enum

from ..core.angle import Angle
from ..core.length import Length
from .mat33 import Mat33
from .positions import GeocentricPos, GeodeticPos, LatLong
from .rotation import xyz2r, zyx2r
from .surface import Surface
from .vec3 import Vec3


class Orientation(Enum):
    """Axes convention of a local frame.

    Attributes
    ----------
    NED : int
        x = north (or forward), y = east (or right), z = down
    ENU : int
        x = east, y = north, z = up
    """
    NED = 1
    ENU = 2


@dataclass(frozen=True)
class LocalPosition:
    """Cartesian position relative to the origin of a local frame

    Attributes
    ----------
    x, y, z : Length
        Coordinates along the frame axes
    orientation : Orientation
        Axes convention the coordinates are expressed in
    """

    x: Length
    y: Length
    z: Length
    orientation: Orientation = Orientation.NED

    @classmethod
    def from_metres(cls, x: float, y: float, z: float,
                    orientation: Orientation = Orientation.NED) -> 'LocalPosition':
        return cls(Length.from_metres(x), Length.from_metres(y), Length.from_metres(z), orientation)

    @classmethod
    def from_aer(cls, azimuth: Angle, elevation: Angle, slant_range: Length,
                 orientation: Orientation = Orientation.NED) -> 'LocalPosition':
        """Local position from azimuth, elevation and slant range

        Parameters
        ----------
        azimuth : Angle
            Angle from north towards east
        elevation : Angle
            Angle above the horizontal plane
        slant_range : Length
            Distance from the origin
        orientation : Orientation
            Axes convention of the returned position

        Returns
        -------
        LocalPosition
            east = sin(az) cos(el) r, north = cos(az) cos(el) r, up = sin(el) r
        """
        az = azimuth.as_radians()
        el = elevation.as_radians()
        r = slant_range.as_metres()
        east = math.sin(az) * math.cos(el) * r
        north = math.cos(az) * math.cos(el) * r
        up = math.sin(el) * r
        if orientation is Orientation.ENU:
            return cls.from_metres(east, north, up, orientation)
        return cls.from_metres(north, east, -up, orientation)

    def as_metres(self) -> Vec3:
        return Vec3(self.x.as_metres(), self.y.as_metres(), self.z.as_metres())

    def to_orientation(self, orientation: Orientation) -> 'LocalPosition':
        """Same position with axes swapped to the given convention"""
        if orientation is self.orientation:
            return self
        # NED <-> ENU: swap horizontal axes, flip vertical
        return LocalPosition(self.y, self.x, -self.z, orientation)

    def azimuth(self) -> Angle:
        """Angle from north, clockwise, in [0, 360)"""
        if self.orientation is Orientation.NED:
            e, n = self.y, self.x
        else:
            e, n = self.x, self.y
        return Angle.from_radians(math.atan2(e.as_metres(), n.as_metres())).normalised()

    def elevation(self) -> Angle:
        """Angle above the horizontal plane (negative below)"""
        r = self.slant_range()
        if r == Length.ZERO:
            return Angle.ZERO
        up = -self.z if self.orientation is Orientation.NED else self.z
        return Angle.from_radians(math.asin(up / r))

    def slant_range(self) -> Length:
        return Length.from_metres(self.as_metres().norm())

    def round_mm(self) -> 'LocalPosition':
        return LocalPosition(self.x.round_mm(), self.y.round_mm(), self.z.round_mm(), self.orientation)


class LocalFrame:
    """Cartesian frame tangent to a surface at an origin

    Use the ``ned``, ``enu``, ``body`` or ``local_level`` constructors.

    Parameters:
    -----------
    origin : Vec3
        Origin of the frame in ECEF metres
    dir_rm : Mat33
        Rotation from the local frame to the Earth frame
    surface : Surface
        Reference surface
    orientation : Orientation
        Axes convention of the frame
    """

    def __init__(self, origin: Vec3, dir_rm: Mat33, surface: Surface, orientation: Orientation):
        self.origin = origin
        self.dir_rm = dir_rm
        self.inv_rm = dir_rm.transpose()
        self.surface = surface
        self.orientation = orientation

    @classmethod
    def enu(cls, origin: GeodeticPos, surface: Surface) -> 'LocalFrame':
        """East-North-Up frame: x = east, y = north, z = up"""
        vo = origin.horizontal_position.as_vec3()
        ru = vo
        re = Vec3.UNIT_Z.cross_prod(vo).unit()
        rn = ru.cross_prod(re)
        inv_rm = Mat33(re, rn, ru)
        return cls(_ecef(origin, surface), inv_rm.transpose(), surface, Orientation.ENU)

    @classmethod
    def ned(cls, origin: GeodeticPos, surface: Surface) -> 'LocalFrame':
        """North-East-Down frame: x = north, y = east, z = down"""
        vo = origin.horizontal_position.as_vec3()
        rd = -vo
        re = Vec3.UNIT_Z.cross_prod(vo).unit()
        rn = re.cross_prod(rd)
        inv_rm = Mat33(rn, re, rd)
        return cls(_ecef(origin, surface), inv_rm.transpose(), surface, Orientation.NED)

    @classmethod
    def body(cls, yaw: Angle, pitch: Angle, roll: Angle, origin: GeodeticPos,
             surface: Surface) -> 'LocalFrame':
        """Body frame: x = forward, y = right, z = down

        Parameters:
        -----------
        yaw : Angle
            Rotation about the down axis of the NED frame
        pitch : Angle
            Rotation about the new y axis
        roll : Angle
            Rotation about the new x axis
        origin : GeodeticPos
            Origin of the frame
        surface : Surface
            Reference surface
        """
        r_nb = zyx2r(yaw, pitch, roll)
        r_en = cls.ned(origin, surface).dir_rm
        return cls(_ecef(origin, surface), r_en @ r_nb, surface, Orientation.NED)

    @classmethod
    def local_level(cls, wander_azimuth: Angle, origin: GeodeticPos,
                    surface: Surface) -> 'LocalFrame':
        """Local-level frame: NED rotated about the down axis by the wander azimuth

        Unlike NED, the frame is defined at the poles.
        """
        ll = LatLong.from_nvector(origin.horizontal_position)
        r = xyz2r(ll.longitude, -ll.latitude, wander_azimuth)
        r_ee = Mat33(Vec3.NEG_UNIT_Z, Vec3.UNIT_Y, Vec3.UNIT_X)
        return cls(_ecef(origin, surface), r_ee @ r, surface, Orientation.NED)

    def geodetic_to_local_pos(self, p: GeodeticPos) -> LocalPosition:
        """Position of p in this frame"""
        pg = self.surface.geodetic_to_geocentric(p).as_metres()
        de = pg - self.origin
        d = self.inv_rm @ de
        return LocalPosition.from_metres(d.x, d.y, d.z, self.orientation)

    def local_to_geodetic_pos(self, p: LocalPosition) -> GeodeticPos:
        """Geodetic position of a position given in this frame"""
        d = p.to_orientation(self.orientation).as_metres()
        c = self.dir_rm @ d
        return self.surface.geocentric_to_geodetic(GeocentricPos.from_vec3_metres(self.origin + c))


def _ecef(origin: GeodeticPos, surface: Surface) -> Vec3:
    return surface.geodetic_to_geocentric(origin).as_metres()
