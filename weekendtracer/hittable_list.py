"""A collection of hittable objects."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from weekendtracer.aabb import AABB
from weekendtracer.hittable import HitRecord, Hittable
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray


class HittableList(Hittable):
    """Objects hit as one: the nearest hit among them wins."""

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: list[Hittable] = []
        self._bbox = AABB()
        for obj in objects:
            self.add(obj)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)
        self._bbox = AABB.enclosing(self._bbox, obj.bounding_box())

    def clear(self) -> None:
        self.objects.clear()

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        closest: Optional[HitRecord] = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(r, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest

    def bounding_box(self) -> AABB:
        return self._bbox