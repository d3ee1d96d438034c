"""Stationary and moving spheres."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from weekendtracer.aabb import AABB
from weekendtracer.hittable import HitRecord, Hittable
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.util import PI
from weekendtracer.vec3 import Point3, Vec3, dot

if TYPE_CHECKING:
    from weekendtracer.material import Material


def get_sphere_uv(p: Point3) -> tuple[float, float]:
    """Texture coordinates (u, v) in [0, 1] of a point on the unit sphere."""
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + PI
    return phi / (2 * PI), theta / PI


class Sphere(Hittable):
    """A sphere; given center2 it moves linearly from center at time 0 to center2 at time 1."""

    def __init__(
        self,
        center: Point3,
        radius: float,
        mat: Optional["Material"],
        center2: Optional[Point3] = None,
    ) -> None:
        self.center1 = center
        self.radius = max(0.0, radius)
        self.mat = mat
        self.is_moving = center2 is not None
        rvec = Vec3(radius, radius, radius)
        box1 = AABB.from_points(center - rvec, center + rvec)
        if center2 is None:
            self.center_vec = Vec3()
            self._bbox = box1
        else:
            box2 = AABB.from_points(center2 - rvec, center2 + rvec)
            self._bbox = AABB.enclosing(box1, box2)
            self.center_vec = center2 - center

    def center_at(self, time: float) -> Point3:
        return self.center1 + time * self.center_vec if self.is_moving else self.center1

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        center = self.center_at(r.time)
        oc = center - r.origin
        a = r.direction.length_squared()
        if a == 0:
            return None
        h = dot(r.direction, oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0:
            return None
        sqrtd = math.sqrt(discriminant)

        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = r.at(root)
        rec = HitRecord(p=p, t=root, mat=self.mat)
        outward_normal = (p - center) / self.radius
        rec.set_face_normal(r, outward_normal)
        rec.u, rec.v = get_sphere_uv(outward_normal)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox