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

"""Squared chord length between two positions on the unit sphere"""

import math
from dataclasses import dataclass
from typing import ClassVar

from ..coordinate.positions import NVector
from ..core.angle import Angle

_MAX_LENGTH2 = 4.0


@dataclass(frozen=True, order=True)
class ChordLength:
    """Squared length of the chord between two n-vectors

    Cheaper to compute than the angle between the positions and ordered the
    same way, so it is used to compare distances. ``length2`` is in [0, 4],
    or -1 for ``NEGATIVE``.

    Attributes
    ----------
    length2 : float
        Squared chord length on the unit sphere
    """

    length2: float

    NEGATIVE: ClassVar['ChordLength']
    ZERO: ClassVar['ChordLength']
    MAX: ClassVar['ChordLength']

    @classmethod
    def new(cls, p1: NVector, p2: NVector) -> 'ChordLength':
        """Chord length between two positions"""
        l2 = (p1.as_vec3() - p2.as_vec3()).squared_norm()
        return cls(min(l2, _MAX_LENGTH2))

    @classmethod
    def from_angle(cls, angle: Angle) -> 'ChordLength':
        """Chord length subtending the given angle

        The absolute value of the angle is taken and reduced to [0, 180).
        """
        a = abs(angle)
        if a == Angle.HALF_CIRCLE:
            return cls.MAX
        a = a.normalised_to(Angle.HALF_CIRCLE)
        half = 2.0 * math.sin(a.as_radians() * 0.5)
        return cls(half * half)

    def to_angle(self) -> Angle:
        """Angle subtended by this chord, -1 radian if negative"""
        if self.length2 < 0.0:
            return Angle.from_radians(-1.0)
        return Angle.from_radians(2.0 * math.asin(math.sqrt(self.length2) * 0.5))


ChordLength.NEGATIVE = ChordLength(-1.0)
ChordLength.ZERO = ChordLength(0.0)
ChordLength.MAX = ChordLength(_MAX_LENGTH2)
