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

"""Coordinate system models: a reference surface and a longitude convention"""

from dataclasses import dataclass
from enum import Enum

from ..core.angle import Angle
from .surface import (
    GRS80_ELLIPSOID,
    IUGG_EARTH_SPHERE,
    MARS_2000_ELLIPSOID,
    MOON_SPHERE,
    WGS72_ELLIPSOID,
    WGS84_ELLIPSOID,
    Surface,
)


class LongitudeRange(Enum):
    """Longitude conventions.

    Attributes
    ----------
    L180 : int
        Longitudes in [-180, 180] degrees
    L360 : int
        Longitudes in [0, 360) degrees
    """
    L180 = 1
    L360 = 2


@dataclass(frozen=True)
class Model:
    """Coordinate system model

    Attributes
    ----------
    model_id : str
        Identifier of the model
    surface : Surface
        Reference sphere or ellipsoid
    longitude_range : LongitudeRange
        Longitude convention of the model
    """

    model_id: str
    surface: Surface
    longitude_range: LongitudeRange = LongitudeRange.L180

    def longitude(self, longitude: Angle) -> Angle:
        """Express a longitude in [-180, 180] in this model's convention"""
        if self.longitude_range is LongitudeRange.L360:
            return longitude.normalised()
        return longitude


WGS84 = Model("WGS84", WGS84_ELLIPSOID)
GRS80 = Model("GRS80", GRS80_ELLIPSOID)
WGS72 = Model("WGS72", WGS72_ELLIPSOID)
ETRS89 = Model("ETRS89", GRS80_ELLIPSOID)
NAD83 = Model("NAD83", GRS80_ELLIPSOID)
S84 = Model("S84", IUGG_EARTH_SPHERE)
MARS_2000 = Model("MARS_2000", MARS_2000_ELLIPSOID, LongitudeRange.L360)
MOON = Model("MOON", MOON_SPHERE)
