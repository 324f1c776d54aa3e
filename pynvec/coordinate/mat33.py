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

"""3x3 matrix stored as three row vectors"""

from dataclasses import dataclass

import numpy as np

from .vec3 import Vec3


@dataclass(frozen=True)
class Mat33:
    """Immutable row-major 3x3 matrix

    ``m @ v`` with a ``Vec3`` returns the vector whose components are the dot
    products of each row with v (the matrix applied to a column vector).
    ``m1 @ m2`` is the standard matrix product.

    Attributes
    ----------
    r0, r1, r2 : Vec3
        Rows of the matrix
    """

    r0: Vec3
    r1: Vec3
    r2: Vec3

    @classmethod
    def from_array(cls, a: np.ndarray) -> 'Mat33':
        return cls(Vec3.from_array(a[0]), Vec3.from_array(a[1]), Vec3.from_array(a[2]))

    @classmethod
    def identity(cls) -> 'Mat33':
        return cls(Vec3.UNIT_X, Vec3.UNIT_Y, Vec3.UNIT_Z)

    def as_array(self) -> np.ndarray:
        return np.array([[self.r0.x, self.r0.y, self.r0.z],
                         [self.r1.x, self.r1.y, self.r1.z],
                         [self.r2.x, self.r2.y, self.r2.z]])

    def transpose(self) -> 'Mat33':
        return Mat33(Vec3(self.r0.x, self.r1.x, self.r2.x),
                     Vec3(self.r0.y, self.r1.y, self.r2.y),
                     Vec3(self.r0.z, self.r1.z, self.r2.z))

    def __matmul__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.r0.dot_prod(other), self.r1.dot_prod(other), self.r2.dot_prod(other))
        if isinstance(other, Mat33):
            return Mat33.from_array(self.as_array() @ other.as_array())
        return NotImplemented
