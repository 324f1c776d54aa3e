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

"""Length in metres"""

from dataclasses import dataclass
from typing import ClassVar

from .angle import Angle
from .constants import M_PER_FT, M_PER_KM, M_PER_NM
from .measurement import Measurement
from .numbers import round_to


@dataclass(frozen=True, order=True)
class Length(Measurement):
    """Length, with metre as the default unit

    Attributes
    ----------
    metres : float
        Length in metres
    """

    metres: float = 0.0

    ZERO: ClassVar['Length']

    @classmethod
    def from_metres(cls, metres: float) -> 'Length':
        return cls(float(metres))

    @classmethod
    def from_kilometres(cls, kilometres: float) -> 'Length':
        return cls(kilometres * M_PER_KM)

    @classmethod
    def from_nautical_miles(cls, nautical_miles: float) -> 'Length':
        return cls(nautical_miles * M_PER_NM)

    @classmethod
    def from_feet(cls, feet: float) -> 'Length':
        return cls(feet * M_PER_FT)

    @classmethod
    def from_default_unit(cls, amount: float) -> 'Length':
        return cls(float(amount))

    def as_default_unit(self) -> float:
        return self.metres

    def as_metres(self) -> float:
        return self.metres

    def as_kilometres(self) -> float:
        return self.metres / M_PER_KM

    def as_nautical_miles(self) -> float:
        return self.metres / M_PER_NM

    def as_feet(self) -> float:
        return self.metres / M_PER_FT

    def round_m(self) -> 'Length':
        """Round to the nearest metre"""
        return Length(round_to(self.metres, 1.0))

    def round_dm(self) -> 'Length':
        """Round to the nearest decimetre"""
        return Length(round_to(self.metres, 10.0))

    def round_cm(self) -> 'Length':
        """Round to the nearest centimetre"""
        return Length(round_to(self.metres, 100.0))

    def round_mm(self) -> 'Length':
        """Round to the nearest millimetre"""
        return Length(round_to(self.metres, 1000.0))

    def __mul__(self, other):
        # radius times central angle
        if isinstance(other, Angle):
            return Length(self.metres * other.as_radians())
        return super().__mul__(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        from .duration import Duration
        from .speed import Speed

        if isinstance(other, Duration):
            if other.seconds == 0.0:
                raise ValueError("Cannot compute a speed over a zero duration")
            return Speed(self.metres / other.seconds)
        return super().__truediv__(other)

    def __str__(self) -> str:
        return f"{self.metres}m"


Length.ZERO = Length(0.0)
