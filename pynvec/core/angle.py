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

"""Angle with a fixed resolution of one microarcsecond"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar

from .constants import DG_TO_UAS
from .measurement import Measurement
from .numbers import round_half_away

_UAS_PER_ARCMINUTE = 60_000_000
_UAS_PER_ARCSECOND = 1_000_000
_UAS_PER_MAS = 1_000


def _round_uas(uas: int, step: int) -> int:
    """Round microarcseconds to a multiple of step, ties away from zero"""
    q, r = divmod(abs(uas), step)
    if 2 * r >= step:
        q += 1
    return q * step if uas >= 0 else -q * step


@dataclass(frozen=True, order=True)
class Angle(Measurement):
    """Signed angle stored as a whole number of microarcseconds

    The resolution of one microarcsecond (1/3 600 000 000 degree) is about
    30 mm of arc on the Earth. Two angles built from decimal degrees that agree
    to the microarcsecond compare equal.

    Attributes
    ----------
    microarcseconds : int
        Angle in microarcseconds
    """

    microarcseconds: int = 0

    ZERO: ClassVar['Angle']
    QUARTER_CIRCLE: ClassVar['Angle']
    HALF_CIRCLE: ClassVar['Angle']
    NEG_HALF_CIRCLE: ClassVar['Angle']
    FULL_CIRCLE: ClassVar['Angle']

    @classmethod
    def from_degrees(cls, degrees: float) -> 'Angle':
        """Create an angle from decimal degrees"""
        return cls(int(round_half_away(degrees * DG_TO_UAS)))

    @classmethod
    def from_radians(cls, radians: float) -> 'Angle':
        """Create an angle from radians"""
        return cls.from_degrees(math.degrees(radians))

    @classmethod
    def from_dms(cls, degrees: int, minutes: int = 0, seconds: int = 0,
                 milliseconds: int = 0) -> 'Angle':
        """Create an angle from degrees, arcminutes, arcseconds and arcmilliseconds

        The sign of the angle is the sign of ``degrees``.

        Parameters
        ----------
        degrees : int
            Whole degrees (signed)
        minutes : int
            Arcminutes in [0, 60)
        seconds : int
            Arcseconds in [0, 60)
        milliseconds : int
            Arcmilliseconds in [0, 1000)

        Returns
        -------
        Angle
            The angle
        """
        if not 0 <= minutes < 60 or not 0 <= seconds < 60 or not 0 <= milliseconds < 1000:
            raise ValueError(f"Invalid DMS fields: {minutes}', {seconds}\", {milliseconds} mas")
        uas = (abs(int(degrees)) * DG_TO_UAS
               + minutes * _UAS_PER_ARCMINUTE
               + seconds * _UAS_PER_ARCSECOND
               + milliseconds * _UAS_PER_MAS)
        return cls(-uas if degrees < 0 else uas)

    @classmethod
    def from_default_unit(cls, amount: float) -> 'Angle':
        return cls.from_degrees(amount)

    def as_default_unit(self) -> float:
        return self.as_degrees()

    def as_degrees(self) -> float:
        """Angle in decimal degrees"""
        return self.microarcseconds / DG_TO_UAS

    def as_radians(self) -> float:
        """Angle in radians"""
        return math.radians(self.as_degrees())

    def as_microarcseconds(self) -> int:
        return self.microarcseconds

    def whole_degrees(self) -> int:
        """Whole degrees, truncated towards zero"""
        d = abs(self.microarcseconds) // DG_TO_UAS
        return -d if self.microarcseconds < 0 else d

    def arcminutes(self) -> int:
        return abs(self.microarcseconds) // _UAS_PER_ARCMINUTE % 60

    def arcseconds(self) -> int:
        return abs(self.microarcseconds) // _UAS_PER_ARCSECOND % 60

    def arcmilliseconds(self) -> int:
        return abs(self.microarcseconds) // _UAS_PER_MAS % 1000

    def arcmicroseconds(self) -> int:
        return abs(self.microarcseconds) % 1000

    def normalised(self) -> 'Angle':
        """This angle normalised into [0, 360) degrees"""
        return self.normalised_to(Angle.FULL_CIRCLE)

    def normalised_to(self, bound: 'Angle') -> 'Angle':
        """This angle normalised into [0, bound)

        Parameters
        ----------
        bound : Angle
            Exclusive upper bound, must be positive

        Returns
        -------
        Angle
            Normalised angle
        """
        if bound.microarcseconds <= 0:
            raise ValueError(f"Normalisation bound must be positive, got {bound}")
        return Angle(self.microarcseconds % bound.microarcseconds)

    def round_d5(self) -> 'Angle':
        """Round to 5 decimal places of degree"""
        return Angle(_round_uas(self.microarcseconds, 36_000))

    def round_d6(self) -> 'Angle':
        """Round to 6 decimal places of degree"""
        return Angle(_round_uas(self.microarcseconds, 3_600))

    def round_d7(self) -> 'Angle':
        """Round to 7 decimal places of degree"""
        return Angle(_round_uas(self.microarcseconds, 360))

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.microarcseconds + other.microarcseconds)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.microarcseconds - other.microarcseconds)

    def __neg__(self) -> 'Angle':
        return Angle(-self.microarcseconds)

    def __abs__(self) -> 'Angle':
        return Angle(abs(self.microarcseconds))

    def __truediv__(self, other):
        if isinstance(other, Angle):
            return self.microarcseconds / other.microarcseconds
        if isinstance(other, Real):
            return Angle(int(round_half_away(self.microarcseconds / float(other))))
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Real):
            return Angle(int(round_half_away(self.microarcseconds * float(other))))
        return NotImplemented

    def __str__(self) -> str:
        sign = '-' if self.microarcseconds < 0 else ''
        return (f"{sign}{abs(self.whole_degrees())}°{self.arcminutes()}'"
                f"{self.arcseconds()}.{self.arcmilliseconds():03d}\"")


Angle.ZERO = Angle(0)
Angle.QUARTER_CIRCLE = Angle(90 * DG_TO_UAS)
Angle.HALF_CIRCLE = Angle(180 * DG_TO_UAS)
Angle.NEG_HALF_CIRCLE = Angle(-180 * DG_TO_UAS)
Angle.FULL_CIRCLE = Angle(360 * DG_TO_UAS)
