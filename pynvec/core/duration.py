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

"""Elapsed time in seconds"""

from dataclasses import dataclass
from typing import ClassVar

from .constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from .measurement import Measurement
from .numbers import round_to


@dataclass(frozen=True, order=True)
class Duration(Measurement):
    """Elapsed time, with second as the default unit"""

    seconds: float = 0.0

    ZERO: ClassVar['Duration']

    @classmethod
    def from_seconds(cls, seconds: float) -> 'Duration':
        return cls(float(seconds))

    @classmethod
    def from_minutes(cls, minutes: float) -> 'Duration':
        return cls(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def from_hours(cls, hours: float) -> 'Duration':
        return cls(hours * SECONDS_PER_HOUR)

    @classmethod
    def from_default_unit(cls, amount: float) -> 'Duration':
        return cls(float(amount))

    def as_default_unit(self) -> float:
        return self.seconds

    def as_seconds(self) -> float:
        return self.seconds

    def as_minutes(self) -> float:
        return self.seconds / SECONDS_PER_MINUTE

    def as_hours(self) -> float:
        return self.seconds / SECONDS_PER_HOUR

    def round_ms(self) -> 'Duration':
        """Round to the nearest millisecond"""
        return Duration(round_to(self.seconds, 1000.0))

    def __str__(self) -> str:
        return f"{self.seconds}s"


Duration.ZERO = Duration(0.0)
