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

"""Speed in metres per second"""

from dataclasses import dataclass
from typing import ClassVar

from .constants import FPS_TO_MPS, KNOTS_TO_MPS, KPH_TO_MPS
from .duration import Duration
from .length import Length
from .measurement import Measurement


@dataclass(frozen=True, order=True)
class Speed(Measurement):
    """Speed, with metres per second as the default unit"""

    metres_per_second: float = 0.0

    ZERO: ClassVar['Speed']

    @classmethod
    def from_metres_per_second(cls, mps: float) -> 'Speed':
        return cls(float(mps))

    @classmethod
    def from_kilometres_per_hour(cls, kph: float) -> 'Speed':
        return cls(kph * KPH_TO_MPS)

    @classmethod
    def from_knots(cls, knots: float) -> 'Speed':
        return cls(knots * KNOTS_TO_MPS)

    @classmethod
    def from_feet_per_second(cls, fps: float) -> 'Speed':
        return cls(fps * FPS_TO_MPS)

    @classmethod
    def from_default_unit(cls, amount: float) -> 'Speed':
        return cls(float(amount))

    def as_default_unit(self) -> float:
        return self.metres_per_second

    def as_metres_per_second(self) -> float:
        return self.metres_per_second

    def as_kilometres_per_hour(self) -> float:
        return self.metres_per_second / KPH_TO_MPS

    def as_knots(self) -> float:
        return self.metres_per_second / KNOTS_TO_MPS

    def as_feet_per_second(self) -> float:
        return self.metres_per_second / FPS_TO_MPS

    def __mul__(self, other):
        # distance travelled
        if isinstance(other, Duration):
            return Length(self.metres_per_second * other.seconds)
        return super().__mul__(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __str__(self) -> str:
        return f"{self.metres_per_second}m/s"


Speed.ZERO = Speed(0.0)
