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

"""Positions, surfaces, rotations and local frames

This module provides:
- 3D vector and matrix algebra (Vec3, Mat33)
- Horizontal positions (LatLong, NVector) and 3D positions (GeocentricPos, GeodeticPos)
- Reference surfaces (Sphere, Ellipsoid) with geodetic <-> geocentric conversions
- Euler angle <-> rotation matrix conversions
- Local tangent-plane frames (NED, ENU, Body, Local-Level)
"""

from .local_frame import LocalFrame, LocalPosition, Orientation
from .mat33 import Mat33
from .models import LongitudeRange, Model
from .positions import GeocentricPos, GeodeticPos, LatLong, NVector, latlong_to_nvector, nvector_to_latlong
from .rotation import r2xyz, r2zyx, xyz2r, zyx2r
from .surface import (
    GRS80_ELLIPSOID,
    IUGG_EARTH_SPHERE,
    MARS_2000_ELLIPSOID,
    MOON_SPHERE,
    WGS72_ELLIPSOID,
    WGS84_ELLIPSOID,
    Ellipsoid,
    Sphere,
    Surface,
)
from .vec3 import Vec3
