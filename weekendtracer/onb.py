"""Orthonormal bases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from weekendtracer.vec3 import Vec3, cross, unit_vector


@dataclass(frozen=True, slots=True)
class ONB:
    """An orthonormal basis u, v, w."""

    u: Vec3
    v: Vec3
    w: Vec3

    @classmethod
    def from_w(cls, w: Vec3) -> "ONB":
        """Build a basis whose w axis points along the given vector."""
        unit_w = unit_vector(w)
        a = Vec3(0, 1, 0) if abs(unit_w.x) > 0.9 else Vec3(1, 0, 0)
        v = unit_vector(cross(unit_w, a))
        u = cross(unit_w, v)
        return cls(u, v, unit_w)

    def __getitem__(self, i: int) -> Vec3:
        return (self.u, self.v, self.w)[i]

    def __iter__(self) -> Iterator[Vec3]:
        yield self.u
        yield self.v
        yield self.w

    def local(
        self,
        a: Union[float, Vec3],
        b: Optional[float] = None,
        c: Optional[float] = None,
    ) -> Vec3:
        """Express basis coordinates (a, b, c), or a vector of them, in world space."""
        if isinstance(a, Vec3):
            a, b, c = a.x, a.y, a.z
        if b is None or c is None:
            raise TypeError("local() takes a Vec3 or three coordinates")
        return a * self.u + b * self.v + c * self.w