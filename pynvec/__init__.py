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

"""
pynvec - Horizontal position calculations using n-vectors

A Python library for geodetic and spherical navigation: positions expressed as
n-vectors, reference ellipsoids, local tangent-plane frames, great circle
navigation, spherical caps, rectangles and loops, and closest point of approach.
Inspired by the n-vector formulation of Gade (2010).
"""

__version__ = "1.0.0"
__author__ = "pynvec Development Team"
__title__ = "pynvec"
__description__ = "Horizontal position calculations using n-vectors"

from .core import *
from .coordinate import *
# spherical last so that Sphere names the navigation-capable subclass
from .spherical import *
