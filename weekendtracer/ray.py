"""Rays with an origin, a direction and a time."""

from __future__ import annotations

from dataclasses import dataclass, field

from weekendtracer.vec3 import Point3, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    origin: Point3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)
    time: float = 0.0

    def at(self, t: float) -> Point3:
        """The point reached after travelling t along the direction."""
        return self.origin + t * self.direction