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
Loops: closed polygons on the sphere whose edges are minor arcs.

A loop is stored clockwise whatever the order of the positions it is built
from; its interior is on the right of its edges. Vertices are classified as
convex, reflex or collinear with their neighbours, which drives the ear
clipping used both to triangulate the loop and to find positions inside it
for point-in-polygon tests.
"""

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Iterator, List, Optional, Sequence, Tuple

from ..coordinate.positions import NVector
from ..coordinate.vec3 import Vec3
from ..core.angle import Angle
from ..core.numbers import eq_zero
from .base import angle_radians_between, exact_side
from .minor_arc import MinorArc
from .rectangle import Rectangle
from .sphere import Sphere

logger = logging.getLogger(__name__)

Triangle = Tuple[NVector, NVector, NVector]

# 1e-7 degrees is about 11 mm at the equator
_BOUND_MARGIN = Angle.from_degrees(1.0e-7)
# intersections closer than this (under a micrometre on Earth) to a vertex or to
# the tested position are taken as that position
_VERTEX_TOLERANCE = 1.0e-13
_NORTH_POLE = NVector(Vec3.UNIT_Z)
_SOUTH_POLE = NVector(Vec3.NEG_UNIT_Z)


class Classification(Enum):
    """Classification of a loop vertex.

    Attributes
    ----------
    CONVEX : int
        Interior angle less than 180 degrees
    REFLEX : int
        Interior angle greater than 180 degrees
    BOTH : int
        Collinear with the previous and next vertices
    """
    CONVEX = 1
    REFLEX = 2
    BOTH = 3


@dataclass(frozen=True)
class Vertex:
    position: NVector
    classification: Classification


@dataclass(frozen=True)
class Loop:
    """Closed chain of at least 3 positions, stored clockwise

    Use ``Loop.new`` to build a loop from positions.

    Attributes
    ----------
    vertices : tuple of Vertex
        Classified vertices in clockwise order
    edges : tuple of MinorArc
        Edge i goes from vertex i to vertex i + 1
    insides : tuple of NVector, optional
        Two positions inside the loop, found for loops of more than 3 vertices
    """

    vertices: Tuple[Vertex, ...]
    edges: Tuple[MinorArc, ...]
    insides: Optional[Tuple[NVector, NVector]] = None

    EMPTY: ClassVar['Loop']

    @classmethod
    def new(cls, vs: Sequence[NVector]) -> 'Loop':
        """
        Build a loop from positions given in either orientation.

        Parameters
        ----------
        vs : sequence of NVector
            Positions; the loop is closed automatically and a last position
            equal to the first is ignored

        Returns
        -------
        Loop
            The loop, or ``Loop.EMPTY`` if fewer than 3 positions are given or
            all positions are on the same great circle
        """
        opened = _opened(vs)
        if len(opened) < 3:
            logger.debug("Empty loop: %d distinct vertices", len(opened))
            return cls.EMPTY
        edges, clockwise = _to_edges(opened)
        if not clockwise:
            logger.debug("Loop given anti-clockwise, reversing %d edges", len(edges))
            edges = _reverse_edges(edges)
        vertices = _clockwise_edges_to_vertices(edges)
        if all(v.classification is Classification.BOTH for v in vertices):
            logger.debug("Empty loop: all %d vertices are collinear", len(vertices))
            return cls.EMPTY
        insides = _find_insides(vertices) if len(opened) > 3 else None
        return cls(tuple(vertices), tuple(edges), insides)

    def is_convex(self) -> bool:
        """Whether every non-collinear vertex turns the same way"""
        n = len(self.vertices)
        if n < 3:
            return False
        if n == 3:
            return True
        cur_side = 0
        for i in range(n):
            prev = self.vertices[i - 1].position
            cur = self.vertices[i].position
            nxt = self.vertices[(i + 1) % n].position
            s = Sphere.side(prev, cur, nxt)
            if s != 0:
                if cur_side == 0:
                    cur_side = s
                elif cur_side != s:
                    return False
        return True

    def is_simple(self) -> bool:
        """Whether consecutive vertices define great circles and no two edges cross"""
        n = len(self.vertices)
        for i in range(n):
            if not Sphere.is_great_circle(self.vertices[i].position, self.vertices[(i + 1) % n].position):
                return False
        ne = len(self.edges)
        if ne <= 3:
            return True
        # only non-adjacent edges, the first and last edges are adjacent
        for i in range(ne - 1):
            e1 = self.edges[i]
            last = ne - 1 if i == 0 else ne
            for j in range(i + 2, last):
                if e1.intersection(self.edges[j]) is not None:
                    return False
        return True

    def is_empty(self) -> bool:
        return not self.vertices

    def has_vertex(self, p: NVector) -> bool:
        return any(v.position == p for v in self.vertices)

    def any_edge_contains_point(self, p: NVector) -> bool:
        return any(e.contains_point(p) for e in self.edges)

    def num_vertices(self) -> int:
        return len(self.vertices)

    def vertex(self, i: int) -> NVector:
        return self.vertices[i].position

    def iter_vertices(self) -> Iterator[NVector]:
        return (v.position for v in self.vertices)

    def iter_edges(self) -> Iterator[MinorArc]:
        return iter(self.edges)

    def bound(self) -> Rectangle:
        """
        Smallest latitude-longitude rectangle containing this loop.

        The rectangle is expanded by 1e-7 degrees so that every position
        inside the loop is inside the rectangle despite the round-off of
        converting n-vectors to latitude and longitude.

        Returns
        -------
        Rectangle
            The bound, ``Rectangle.EMPTY`` for an empty loop
        """
        if self.is_empty():
            return Rectangle.EMPTY
        mbr = Rectangle.from_union(Rectangle.from_minor_arc(e) for e in self.edges)
        mbr = mbr.expand(_BOUND_MARGIN).polar_closure()
        if self.contains_point(_NORTH_POLE):
            mbr = mbr.expand_to_north_pole()
        # a loop containing the south pole either wraps around the sphere or also
        # contains the north pole: both give full longitudes
        if mbr.is_longitude_full() and self.contains_point(_SOUTH_POLE):
            mbr = mbr.expand_to_south_pole()
        return mbr

    def contains_point(self, p: NVector) -> bool:
        """
        Whether p is inside this loop.

        Positions on an edge or at a vertex are not inside. The result is
        undefined for loops that are not simple.
        """
        if self.insides is None:
            if len(self.vertices) == 3:
                return self._triangle_contains_point(p)
            return False

        a, b = self.insides
        if p == a or p == b:
            return True
        if any(v.position == p for v in self.vertices):
            return False
        start = b if a.is_antipode_of(p) else a
        ma = MinorArc(start, p)
        pv = p.as_vec3()
        n = len(self.vertices)
        count = 0
        # an intersection at a vertex is found on both edges sharing it: count
        # each vertex once
        vertex_hits = set()
        for i, e in enumerate(self.edges):
            iv = ma.intersection(e)
            if iv is None:
                continue
            v = iv.as_vec3()
            if _is_near(v, pv):
                # p is on this edge
                return False
            if _is_near(v, e.start.as_vec3()):
                vertex_hits.add(i)
            elif _is_near(v, e.end.as_vec3()):
                vertex_hits.add((i + 1) % n)
            else:
                count += 1
        count += len(vertex_hits)
        # the arc starts inside: an even number of crossings ends inside
        return count % 2 == 0

    def triangulate(self) -> List[Triangle]:
        """
        Triangles covering this loop, by ear clipping.

        Returns
        -------
        list of tuple
            n - 2 triangles for a simple loop of n vertices, empty for an
            empty loop or if no ear could be found (loop not simple)
        """
        if self.is_empty():
            return []
        if len(self.vertices) == 3:
            return [tuple(v.position for v in self.vertices)]
        return _ear_clipping(self.vertices)

    def spherical_excess(self) -> Angle:
        """
        Spherical excess of this loop.

        The area of the loop on a sphere of radius R is excess * R^2.
        """
        if self.is_empty():
            return Angle.ZERO
        ns = [e.normal for e in self.edges]
        # interior angles are pi - a or pi + a depending on the turn direction,
        # where a is the signed angle between consecutive edge normals about
        # the vertex they share
        n = len(ns)
        interior = 0.0
        for i in range(n):
            v = self.edges[i].end.as_vec3()
            interior += angle_radians_between(ns[i], ns[(i + 1) % n], v)
        total = n * math.pi - abs(interior)
        return Angle.from_radians(total - (n - 2) * math.pi)

    def _triangle_contains_point(self, p: NVector) -> bool:
        if any(v.position == p for v in self.vertices):
            return False
        # edges are clockwise: the interior is right of every edge
        v = p.as_vec3()
        s1 = -v.dot_prod(self.edges[0].normal)
        s2 = -v.dot_prod(self.edges[1].normal)
        s3 = -v.dot_prod(self.edges[2].normal)
        if eq_zero(s1) and s2 > 0.0 and s3 > 0.0:
            return False
        if eq_zero(s2) and s1 > 0.0 and s3 > 0.0:
            return False
        if eq_zero(s3) and s1 > 0.0 and s2 > 0.0:
            return False
        return s1 > 0.0 and s2 > 0.0 and s3 > 0.0


Loop.EMPTY = Loop((), ())


def is_loop_clockwise(vs: Sequence[NVector]) -> bool:
    """
    Whether positions are given in clockwise order.

    Parameters
    ----------
    vs : sequence of NVector
        Positions of the loop, closed or not

    Returns
    -------
    bool
        True if clockwise, False if anti-clockwise or fewer than 3 positions
    """
    ovs = _opened(vs)
    n = len(ovs)
    if n < 3:
        return False
    if n == 3:
        return Sphere.side(ovs[0], ovs[1], ovs[2]) < 0
    turn = Angle.ZERO
    for i in range(n):
        turn = turn + Sphere.turn(ovs[i - 1], ovs[i], ovs[(i + 1) % n])
    return turn < Angle.ZERO


def _opened(vs: Sequence[NVector]) -> Sequence[NVector]:
    if len(vs) > 1 and vs[0] == vs[-1]:
        return vs[:-1]
    return vs


def _to_edges(vs: Sequence[NVector]) -> Tuple[List[MinorArc], bool]:
    n = len(vs)
    edges = []
    turn = Angle.ZERO
    for i in range(n):
        e = MinorArc(vs[i], vs[(i + 1) % n])
        if i > 0:
            turn = turn + edges[i - 1].turn(e)
        edges.append(e)
    turn = turn + edges[-1].turn(edges[0])
    return edges, turn < Angle.ZERO


def _reverse_edges(es: List[MinorArc]) -> List[MinorArc]:
    last = len(es) - 1
    res = [es[i].opposite() for i in reversed(range(last))]
    res.append(es[last].opposite())
    return res


def _classification(side: int) -> Classification:
    if side > 0:
        return Classification.REFLEX
    if side < 0:
        return Classification.CONVEX
    return Classification.BOTH


def _clockwise_edges_to_vertices(es: List[MinorArc]) -> List[Vertex]:
    return [Vertex(cur.start, _classification(cur.side_of(es[i - 1].start))) for i, cur in enumerate(es)]


def _ear_clipping(vs: Sequence[Vertex]) -> List[Triangle]:
    remaining = list(vs)
    res = []
    while True:
        if len(remaining) == 3:
            res.append(tuple(v.position for v in remaining))
            return res
        ear = _next_ear(remaining)
        if ear is None:
            logger.debug("No ear found with %d vertices remaining, loop is not simple", len(remaining))
            return []
        res.append(ear)


def _find_insides(vs: Sequence[Vertex]) -> Optional[Tuple[NVector, NVector]]:
    remaining = list(vs)
    res = []
    while True:
        if len(remaining) == 3:
            p = Sphere.triangle_mean_position(*(v.position for v in remaining))
            if p is not None:
                res.append(p)
            break
        ear = _next_ear(remaining)
        if ear is None:
            logger.debug("No ear found with %d vertices remaining, loop is not simple", len(remaining))
            break
        p = Sphere.triangle_mean_position(*ear)
        if p is not None:
            res.append(p)
            if len(res) == 2:
                break
    if len(res) == 2:
        return res[0], res[1]
    return None


def _next_ear(remaining: List[Vertex]) -> Optional[Triangle]:
    """Remove the first ear from remaining and return its triangle"""
    n = len(remaining)
    for i, cur in enumerate(remaining):
        if cur.classification is not Classification.CONVEX:
            continue
        prev = remaining[i - 1].position
        nxt = remaining[(i + 1) % n].position
        if _all_outside(prev, cur.position, nxt, remaining):
            del remaining[i]
            if len(remaining) > 3:
                _re_classify(remaining, i)
            return prev, cur.position, nxt
    return None


def _re_classify(vs: List[Vertex], ear_index: int):
    """Classify again both vertices adjacent to the removed ear"""
    n = len(vs)
    last = n - 1
    if ear_index == 0 or ear_index == n:
        _classify(vs, 0, vs[last], vs[1])
        _classify(vs, last, vs[last - 1], vs[0])
    else:
        nxt = vs[0] if ear_index == last else vs[ear_index + 1]
        _classify(vs, ear_index, vs[ear_index - 1], nxt)
        prev = vs[last] if ear_index == 1 else vs[ear_index - 2]
        _classify(vs, ear_index - 1, prev, vs[ear_index])


def _classify(vs: List[Vertex], i: int, prev: Vertex, nxt: Vertex):
    side = Sphere.side(prev.position, vs[i].position, nxt.position)
    vs[i] = replace(vs[i], classification=_classification(side))


def _all_outside(v1: NVector, v2: NVector, v3: NVector, vertices: Sequence[Vertex]) -> bool:
    # only reflex (or collinear) vertices can be inside the triangle of a convex vertex
    return not any(v.classification is not Classification.CONVEX and _inside_or_edge(v.position, v1, v2, v3)
                   for v in vertices)


def _inside_or_edge(p: NVector, v1: NVector, v2: NVector, v3: NVector) -> bool:
    if p == v1 or p == v2 or p == v3:
        return False
    sign = -1.0 if Sphere.side(v1, v2, v3) < 0 else 1.0
    vp = p.as_vec3()
    s1 = exact_side(vp, v1.as_vec3(), v2.as_vec3()) * sign
    s2 = exact_side(vp, v2.as_vec3(), v3.as_vec3()) * sign
    s3 = exact_side(vp, v3.as_vec3(), v1.as_vec3()) * sign
    on_edge = False
    if eq_zero(s1) and s2 > 0.0 and s3 > 0.0:
        on_edge = True
    if eq_zero(s2) and s1 > 0.0 and s3 > 0.0:
        if on_edge:
            # on (v1, v2) and (v2, v3): p is v2
            return False
        on_edge = True
    if eq_zero(s3) and s1 > 0.0 and s2 > 0.0:
        if on_edge:
            # on (v3, v1) and another edge: p is v1 or v3
            return False
        on_edge = True
    if on_edge:
        return True
    return s1 > 0.0 and s2 > 0.0 and s3 > 0.0


def _is_near(a: Vec3, b: Vec3) -> bool:
    return (a - b).norm() <= _VERTEX_TOLERANCE
