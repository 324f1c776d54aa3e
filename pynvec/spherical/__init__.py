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

"""Navigation and regions on a spherical model

This module provides:
- Great circles and minor arcs, with intersections and projections
- Navigation functions on a sphere (distance, bearings, destination, interpolation)
- Spherical caps, latitude-longitude rectangles and loops (polygons)
- Closest point of approach of two vehicles
"""

from .base import angle_radians_between, easting, exact_side, orthogonal_to, side
from .cap import Cap
from .chord_length import ChordLength
from .cpa import Vehicle, cpa, time_to_cpa
from .great_circle import GreatCircle
from .minor_arc import MinorArc
from .rectangle import LatitudeInterval, LongitudeInterval, Rectangle
from .sloop import Classification, Loop, Vertex, is_loop_clockwise
from .sphere import EARTH, MOON, Sphere
