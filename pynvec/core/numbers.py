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

"""Floating-point comparison and rounding helpers"""

import math

from .constants import EPSILON


def eq(left: float, right: float) -> bool:
    """Approximate equality of two floats

    The tolerance is ``EPSILON`` for magnitudes up to 1 and grows with the
    smaller magnitude beyond that, so that values computed on unit vectors
    compare absolutely and large values compare relatively.

    Parameters
    ----------
    left : float
        First value
    right : float
        Second value

    Returns
    -------
    bool
        True if both values are equal within tolerance
    """
    scale = max(1.0, min(abs(left), abs(right)))
    return abs(right - left) <= EPSILON * scale


def eq_zero(f: float) -> bool:
    """Whether f is zero within tolerance"""
    return eq(f, 0.0)


def lte(left: float, right: float) -> bool:
    """left <= right, or equal within tolerance"""
    return left <= right or eq(left, right)


def gte(left: float, right: float) -> bool:
    """left >= right, or equal within tolerance"""
    return left >= right or eq(left, right)


def round_half_away(x: float) -> float:
    """Round to the nearest integer, ties away from zero

    Python's built-in ``round`` rounds ties to even, which makes values such
    as 0.5 mm round inconsistently with their negated counterpart.
    """
    return math.copysign(math.floor(abs(x) + 0.5), x)


def round_to(x: float, scale: float) -> float:
    """Round x to the nearest multiple of 1/scale, ties away from zero"""
    return round_half_away(x * scale) / scale


def sign(f: float) -> int:
    """Sign of f as -1, 0 or +1, treating values near zero as zero"""
    if eq_zero(f):
        return 0
    return 1 if f > 0.0 else -1
