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

"""Core Scalars and Constants.

This module provides the building blocks shared by every other part of pynvec:

- **Constants**: reference ellipsoid and sphere parameters, unit conversion
  factors and numerical tolerances
- **Numbers**: floating-point comparison with a tolerance suited to unit
  vectors, and half-away-from-zero rounding
- **Scalars**: immutable measurements with closed arithmetic

  - ``Angle`` backed by whole microarcseconds so that equality at that
    resolution is exact
  - ``Length`` in metres, ``Speed`` in metres per second and ``Duration``
    in seconds

Example Usage:
    >>> from pynvec.core import Angle, Length, Speed, Duration
    >>>
    >>> Angle.from_degrees(45.5).arcminutes()
    30
    >>> travelled = Speed.from_knots(15.0) * Duration.from_hours(1.0)
    >>> travelled.round_m()
    Length(metres=27780.0)
"""

from .angle import Angle
from .constants import *
from .duration import Duration
from .length import Length
from .measurement import Measurement
from .numbers import eq, eq_zero, gte, lte, round_half_away, round_to, sign
from .speed import Speed
