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

"""Common arithmetic for scalar measurements"""

from numbers import Real


class Measurement:
    """Base class for immutable scalar quantities

    Subclasses are frozen dataclasses holding a single value and implement
    ``from_default_unit`` and ``as_default_unit``. Arithmetic is closed over
    the subclass: adding or subtracting two quantities of the same kind yields
    that kind, dividing two of them yields a dimensionless float, and scaling
    by a real number yields the same kind.
    """

    __slots__ = ()

    @classmethod
    def from_default_unit(cls, amount: float):
        raise NotImplementedError

    def as_default_unit(self) -> float:
        raise NotImplementedError

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.from_default_unit(self.as_default_unit() + other.as_default_unit())

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.from_default_unit(self.as_default_unit() - other.as_default_unit())

    def __neg__(self):
        return self.from_default_unit(-self.as_default_unit())

    def __abs__(self):
        return self.from_default_unit(abs(self.as_default_unit()))

    def __mul__(self, other):
        if isinstance(other, Real):
            return self.from_default_unit(self.as_default_unit() * float(other))
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if type(other) is type(self):
            return self.as_default_unit() / other.as_default_unit()
        if isinstance(other, Real):
            return self.from_default_unit(self.as_default_unit() / float(other))
        return NotImplemented
