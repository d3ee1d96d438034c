"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.vec3 import Point3, Vec3

_MIN_SIDE = 0.0001


@dataclass(frozen=True, slots=True)
class AABB:
    """A box given by one interval per axis; no side is narrower than a small delta."""

    x: Interval = Interval.EMPTY
    y: Interval = Interval.EMPTY
    z: Interval = Interval.EMPTY

    EMPTY: ClassVar["AABB"]
    UNIVERSE: ClassVar["AABB"]

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            iv = getattr(self, name)
            if iv.size() < _MIN_SIDE:
                object.__setattr__(self, name, iv.expand(_MIN_SIDE))

    @classmethod
    def from_points(cls, a: Point3, b: Point3) -> "AABB":
        """The box with a and b as opposite corners, in any order."""
        return cls(*(Interval(min(p, q), max(p, q)) for p, q in zip(a, b)))

    @classmethod
    def enclosing(cls, box0: "AABB", box1: "AABB") -> "AABB":
        return cls(
            Interval.enclosing(box0.x, box1.x),
            Interval.enclosing(box0.y, box1.y),
            Interval.enclosing(box0.z, box1.z),
        )

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def hit(self, r: Ray, ray_t: Interval) -> bool:
        t_min, t_max = ray_t.min, ray_t.max
        for axis in range(3):
            ax = self.axis_interval(axis)
            d = r.direction[axis]
            adinv = 1.0 / d if d != 0 else math.copysign(math.inf, d)
            orig = r.origin[axis]

            t0 = (ax.min - orig) * adinv
            t1 = (ax.max - orig) * adinv

            if t0 < t1:
                if t0 > t_min:
                    t_min = t0
                if t1 < t_max:
                    t_max = t1
            else:
                if t1 > t_min:
                    t_min = t1
                if t0 < t_max:
                    t_max = t0

            if t_max <= t_min:
                return False
        return True

    def longest_axis(self) -> int:
        """Index of the longest axis of the box."""
        if self.x.size() > self.y.size():
            return 0 if self.x.size() > self.z.size() else 2
        return 1 if self.y.size() > self.z.size() else 2

    def __add__(self, offset: Vec3) -> "AABB":
        if not isinstance(offset, Vec3):
            return NotImplemented
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    __radd__ = __add__


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)
AABB.UNIVERSE = AABB(Interval.UNIVERSE, Interval.UNIVERSE, Interval.UNIVERSE)