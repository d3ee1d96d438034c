"""Bounding volume hierarchies."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from weekendtracer.aabb import AABB
from weekendtracer.hittable import HitRecord, Hittable
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray


class BVHNode(Hittable):
    """A binary tree of bounding boxes over a set of objects."""

    def __init__(self, objects: Iterable[Hittable]) -> None:
        items = list(objects)
        if not items:
            raise ValueError("a BVH needs at least one object")
        self._build(items)

    @classmethod
    def _from_span(cls, objects: Sequence[Hittable]) -> "BVHNode":
        node = cls.__new__(cls)
        node._build(list(objects))
        return node

    def _build(self, objects: list[Hittable]) -> None:
        bbox = AABB.EMPTY
        for obj in objects:
            bbox = AABB.enclosing(bbox, obj.bounding_box())
        self._bbox = bbox

        if len(objects) == 1:
            self.left = self.right = objects[0]
        elif len(objects) == 2:
            self.left, self.right = objects
        else:
            axis = bbox.longest_axis()
            ordered = sorted(objects, key=lambda o: o.bounding_box().axis_interval(axis).min)
            mid = len(ordered) // 2
            self.left = BVHNode._from_span(ordered[:mid])
            self.right = BVHNode._from_span(ordered[mid:])

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self._bbox.hit(r, ray_t):
            return None
        hit_left = self.left.hit(r, ray_t)
        upper = hit_left.t if hit_left is not None else ray_t.max
        hit_right = self.right.hit(r, Interval(ray_t.min, upper))
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self._bbox