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
Closest point of approach (CPA) of two vehicles on a sphere.

Each vehicle travels on a great circle at constant speed. Its position at
time t is p cos(w t) + c sin(w t), where p is the initial n-vector, c the
course vector (unit, orthogonal to p, pointing in the direction of travel)
and w the angular speed. The separation is minimal when the derivative of
the cosine of the angle between both positions is zero; this root is found
by Newton-Raphson iteration starting at t = 0.
"""

import logging
import math
import warnings
from dataclasses import dataclass
from typing import Optional, Tuple

from scipy.optimize import newton

from ..coordinate.positions import LatLong, NVector
from ..coordinate.rotation import xyz2r
from ..coordinate.vec3 import Vec3
from ..core.angle import Angle
from ..core.constants import CPA_MAX_ITERATIONS, CPA_TOLERANCE_SECONDS, SECONDS_PER_HOUR
from ..core.duration import Duration
from ..core.length import Length
from ..core.speed import Speed
from .sphere import EARTH, Sphere

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vehicle:
    """Vehicle travelling on a great circle at constant speed

    Attributes
    ----------
    position : NVector
        Initial position
    bearing : Angle
        Initial bearing, clockwise from north
    speed : Speed
        Speed over the surface
    """

    position: NVector
    bearing: Angle
    speed: Speed


@dataclass(frozen=True)
class _Track:
    p: Vec3
    c: Vec3
    w: float

    def position_at(self, hours: float) -> NVector:
        wt = self.w * hours
        return NVector((self.p * math.cos(wt) + self.c * math.sin(wt)).unit())


def _course(position: NVector, bearing: Angle) -> Vec3:
    """Unit vector orthogonal to position, pointing along bearing"""
    ll = LatLong.from_nvector(position)
    r = xyz2r(bearing, ll.latitude, -ll.longitude)
    return r.transpose() @ Vec3.UNIT_Z


def _track(v: Vehicle, sphere: Sphere) -> _Track:
    # radians per hour
    w = v.speed.as_knots() / sphere.radius.as_nautical_miles()
    return _Track(v.position.as_vec3(), _course(v.position, v.bearing), w)


def _time_to_cpa_hours(t1: _Track, t2: _Track) -> Optional[float]:
    p1, c1, w1 = t1.p, t1.c, t1.w
    p2, c2, w2 = t2.p, t2.c, t2.w

    p1p2 = p1.dot_prod(p2)
    p1c2 = p1.dot_prod(c2)
    p2c1 = p2.dot_prod(c1)
    c1c2 = c1.dot_prod(c2)

    a = -(w1 * p1c2 + w2 * p2c1)
    b = w1 * p2c1 + w2 * p1c2
    c = -(w1 * p1p2 - w2 * c1c2)
    d = w1 * c1c2 - w2 * p1p2

    def f(t):
        s1, k1 = math.sin(w1 * t), math.cos(w1 * t)
        s2, k2 = math.sin(w2 * t), math.cos(w2 * t)
        return a * s1 * s2 + b * k1 * k2 + c * s1 * k2 + d * k1 * s2

    def fp(t):
        s1, k1 = math.sin(w1 * t), math.cos(w1 * t)
        s2, k2 = math.sin(w2 * t), math.cos(w2 * t)
        return (s1 * s2 * (-c * w2 - d * w1)
                + k1 * k2 * (c * w1 + d * w2)
                + s1 * k2 * (a * w2 - b * w1)
                + k1 * s2 * (a * w1 - b * w2))

    # failures are reported through the returned RootResults
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", RuntimeWarning)
        root, res = newton(f, 0.0, fprime=fp, tol=CPA_TOLERANCE_SECONDS / SECONDS_PER_HOUR,
                           maxiter=CPA_MAX_ITERATIONS, full_output=True, disp=False)

    if not res.converged:
        logger.debug("CPA not found: Newton-Raphson did not converge (%s)", res.flag)
        return None
    if root < 0.0:
        logger.debug("CPA in the past (t = %.3f h), vehicles are moving apart", root)
        return None
    return float(root)


def time_to_cpa(v1: Vehicle, v2: Vehicle, sphere: Sphere = EARTH) -> Optional[Duration]:
    """
    Time until two vehicles reach their closest point of approach.

    Parameters
    ----------
    v1, v2 : Vehicle
        The vehicles
    sphere : Sphere
        Sphere the vehicles travel on

    Returns
    -------
    Duration or None
        Time to CPA, None if the vehicles are moving apart or the iteration
        did not converge
    """
    hours = _time_to_cpa_hours(_track(v1, sphere), _track(v2, sphere))
    if hours is None:
        return None
    return Duration.from_hours(hours)


def cpa(v1: Vehicle, v2: Vehicle,
        sphere: Sphere = EARTH) -> Optional[Tuple[Duration, Tuple[NVector, NVector], Length]]:
    """
    Closest point of approach of two vehicles.

    Parameters
    ----------
    v1, v2 : Vehicle
        The vehicles
    sphere : Sphere
        Sphere the vehicles travel on

    Returns
    -------
    tuple or None
        (time to CPA, (position of v1, position of v2) at CPA, distance
        between the vehicles at CPA), None when ``time_to_cpa`` is None
    """
    t1 = _track(v1, sphere)
    t2 = _track(v2, sphere)
    hours = _time_to_cpa_hours(t1, t2)
    if hours is None:
        return None
    q1 = t1.position_at(hours)
    q2 = t2.position_at(hours)
    return Duration.from_hours(hours), (q1, q2), sphere.distance(q1, q2)
