"""Hit records, the hittable interface and instance transforms."""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from weekendtracer.aabb import AABB
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.util import degrees_to_radians
from weekendtracer.vec3 import Point3, Vec3, dot

if TYPE_CHECKING:
    from weekendtracer.material import Material


@dataclass(slots=True)
class HitRecord:
    """Everything known about one ray-object intersection."""

    p: Point3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    mat: Optional["Material"] = None
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0
    front_face: bool = False

    def set_face_normal(self, r: Ray, outward_normal: Vec3) -> None:
        """Orient the normal against the ray; outward_normal must be a unit vector."""
        self.front_face = dot(r.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can hit."""

    @abstractmethod
    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """The nearest intersection with t inside ray_t, or None."""

    @abstractmethod
    def bounding_box(self) -> AABB:
        """A box enclosing the object."""

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """Density of sampling direction from origin toward this object.

        Objects that cannot be sampled as light sources have zero density.
        """
        return 0.0

    def random(self, origin: Point3) -> Vec3:
        """A direction from origin toward this object; +x for unsampled objects."""
        return Vec3(1, 0, 0)


class Translate(Hittable):
    """An object moved by a fixed offset."""

    def __init__(self, obj: Hittable, offset: Vec3) -> None:
        self.object = obj
        self.offset = offset
        self._bbox = obj.bounding_box() + offset

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        offset_r = Ray(r.origin - self.offset, r.direction, r.time)
        rec = self.object.hit(offset_r, ray_t)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox


class RotateY(Hittable):
    """An object rotated about the y axis by an angle in degrees."""

    def __init__(self, obj: Hittable, angle: float) -> None:
        self.object = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        bbox = obj.bounding_box()
        rotated = [
            Vec3(
                self.cos_theta * x + self.sin_theta * z,
                y,
                -self.sin_theta * x + self.cos_theta * z,
            )
            for x, y, z in itertools.product(
                (bbox.x.min, bbox.x.max),
                (bbox.y.min, bbox.y.max),
                (bbox.z.min, bbox.z.max),
            )
        ]
        low = Vec3(*(min(p[c] for p in rotated) for c in range(3)))
        high = Vec3(*(max(p[c] for p in rotated) for c in range(3)))
        self._bbox = AABB.from_points(low, high)

    def _to_object(self, v: Vec3) -> Vec3:
        return Vec3(
            self.cos_theta * v.x - self.sin_theta * v.z,
            v.y,
            self.sin_theta * v.x + self.cos_theta * v.z,
        )

    def _to_world(self, v: Vec3) -> Vec3:
        return Vec3(
            self.cos_theta * v.x + self.sin_theta * v.z,
            v.y,
            -self.sin_theta * v.x + self.cos_theta * v.z,
        )

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        rotated_r = Ray(self._to_object(r.origin), self._to_object(r.direction), r.time)
        rec = self.object.hit(rotated_r, ray_t)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox