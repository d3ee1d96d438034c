"""Planar quadrilaterals and boxes made of them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from weekendtracer.aabb import AABB
from weekendtracer.hittable import HitRecord, Hittable
from weekendtracer.hittable_list import HittableList
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.vec3 import Point3, Vec3, cross, dot, unit_vector

if TYPE_CHECKING:
    from weekendtracer.material import Material

_UNIT_INTERVAL = Interval(0, 1)


class Quad(Hittable):
    """A parallelogram with corner q and edge vectors u and v."""

    def __init__(self, q: Point3, u: Vec3, v: Vec3, mat: Optional["Material"]) -> None:
        self.q = q
        self.u = u
        self.v = v
        self.mat = mat
        n = cross(u, v)
        self.normal = unit_vector(n)
        self.d = dot(self.normal, q)
        self.w = n / dot(n, n)
        self._bbox = self._compute_bounding_box()

    def _compute_bounding_box(self) -> AABB:
        diagonal1 = AABB.from_points(self.q, self.q + self.u + self.v)
        diagonal2 = AABB.from_points(self.q + self.u, self.q + self.v)
        return AABB.enclosing(diagonal1, diagonal2)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denom = dot(self.normal, r.direction)
        if abs(denom) < 1e-8:
            return None

        t = (self.d - dot(self.normal, r.origin)) / denom
        if not ray_t.contains(t):
            return None

        intersection = r.at(t)
        planar = intersection - self.q
        alpha = dot(self.w, cross(planar, self.v))
        beta = dot(self.w, cross(self.u, planar))

        rec = HitRecord()
        if not self.is_interior(alpha, beta, rec):
            return None

        rec.t = t
        rec.p = intersection
        rec.mat = self.mat
        rec.set_face_normal(r, self.normal)
        return rec

    def is_interior(self, a: float, b: float, rec: HitRecord) -> bool:
        """Whether plane coordinates (a, b) lie inside; if so, store them as rec.u, rec.v."""
        if not _UNIT_INTERVAL.contains(a) or not _UNIT_INTERVAL.contains(b):
            return False
        rec.u = a
        rec.v = b
        return True


def box(a: Point3, b: Point3, mat: Optional["Material"]) -> HittableList:
    """The six-sided box with opposite vertices a and b."""
    lo = Vec3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Vec3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vec3(hi.x - lo.x, 0, 0)
    dy = Vec3(0, hi.y - lo.y, 0)
    dz = Vec3(0, 0, hi.z - lo.z)

    return HittableList(
        [
            Quad(Vec3(lo.x, lo.y, hi.z), dx, dy, mat),   # front
            Quad(Vec3(hi.x, lo.y, hi.z), -dz, dy, mat),  # right
            Quad(Vec3(hi.x, lo.y, lo.z), -dx, dy, mat),  # back
            Quad(Vec3(lo.x, lo.y, lo.z), dz, dy, mat),   # left
            Quad(Vec3(lo.x, hi.y, hi.z), dx, -dz, mat),  # top
            Quad(Vec3(lo.x, lo.y, lo.z), dx, dz, mat),   # bottom
        ]
    )