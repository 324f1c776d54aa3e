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

"""Three-dimensional vector"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Iterable

import numpy as np


@dataclass(frozen=True)
class Vec3:
    """Immutable 3-vector (x, y, z), not constrained to unit length

    Attributes
    ----------
    x : float
        X component
    y : float
        Y component
    z : float
        Z component
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar['Vec3']
    UNIT_X: ClassVar['Vec3']
    UNIT_Y: ClassVar['Vec3']
    UNIT_Z: ClassVar['Vec3']
    NEG_UNIT_X: ClassVar['Vec3']
    NEG_UNIT_Y: ClassVar['Vec3']
    NEG_UNIT_Z: ClassVar['Vec3']

    @classmethod
    def new_unit(cls, x: float, y: float, z: float) -> 'Vec3':
        """Unit vector in the direction of (x, y, z)"""
        return cls(x, y, z).unit()

    @classmethod
    def from_array(cls, a: np.ndarray) -> 'Vec3':
        return cls(float(a[0]), float(a[1]), float(a[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    @staticmethod
    def mean(vs: Iterable['Vec3']) -> 'Vec3':
        """Unit vector in the direction of the sum of the given vectors

        Returns the zero vector if the sum is zero.
        """
        sx = sy = sz = 0.0
        for v in vs:
            sx += v.x
            sy += v.y
            sz += v.z
        return Vec3(sx, sy, sz).unit()

    def dot_prod(self, o: 'Vec3') -> float:
        return self.x * o.x + self.y * o.y + self.z * o.z

    def cross_prod(self, o: 'Vec3') -> 'Vec3':
        return Vec3(self.y * o.z - self.z * o.y,
                    self.z * o.x - self.x * o.z,
                    self.x * o.y - self.y * o.x)

    def cross_prod_unit(self, o: 'Vec3') -> 'Vec3':
        return self.cross_prod(o).unit()

    def stable_cross_prod(self, o: 'Vec3') -> 'Vec3':
        """Cross product of this vector and o, computed as (o + self) x (o - self)

        For unit vectors the result is 2 * (self x o). Computing the sum and the
        difference first keeps the direction accurate when both vectors are
        nearly parallel or opposite.
        """
        return (o + self).cross_prod(o - self)

    def stable_cross_prod_unit(self, o: 'Vec3') -> 'Vec3':
        return self.stable_cross_prod(o).unit()

    def squared_norm(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        return math.sqrt(self.squared_norm())

    def unit(self) -> 'Vec3':
        """This vector scaled to unit length, or itself if its norm is zero"""
        n = self.norm()
        if n == 0.0:
            return self
        s = 1.0 / n
        return Vec3(s * self.x, s * self.y, s * self.z)

    def orthogonal(self) -> 'Vec3':
        """A unit vector orthogonal to this vector

        The cross product is taken with the world axis least aligned with this
        vector.
        """
        ax = abs(self.x)
        ay = abs(self.y)
        az = abs(self.z)
        if ax > ay:
            tmp = Vec3.UNIT_Z if az < ax else Vec3.UNIT_Y
        elif ay > az:
            tmp = Vec3.UNIT_X
        else:
            tmp = Vec3.UNIT_Y
        return self.cross_prod_unit(tmp)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def __add__(self, o):
        if not isinstance(o, Vec3):
            return NotImplemented
        return Vec3(self.x + o.x, self.y + o.y, self.z + o.z)

    def __sub__(self, o):
        if not isinstance(o, Vec3):
            return NotImplemented
        return Vec3(self.x - o.x, self.y - o.y, self.z - o.z)

    def __neg__(self) -> 'Vec3':
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        return Vec3(self.x * s, self.y * s, self.z * s)

    def __rmul__(self, s):
        return self.__mul__(s)

    def __truediv__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        return Vec3(self.x / s, self.y / s, self.z / s)

    def __iter__(self):
        return iter((self.x, self.y, self.z))


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.UNIT_X = Vec3(1.0, 0.0, 0.0)
Vec3.UNIT_Y = Vec3(0.0, 1.0, 0.0)
Vec3.UNIT_Z = Vec3(0.0, 0.0, 1.0)
Vec3.NEG_UNIT_X = Vec3(-1.0, 0.0, 0.0)
Vec3.NEG_UNIT_Y = Vec3(0.0, -1.0, 0.0)
Vec3.NEG_UNIT_Z = Vec3(0.0, 0.0, -1.0)
