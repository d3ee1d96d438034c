"""Textures: colour as a function of surface coordinates and position."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Union

from weekendtracer.color import Color
from weekendtracer.image import RTWImage
from weekendtracer.interval import Interval
from weekendtracer.perlin import Perlin
from weekendtracer.vec3 import Point3, Vec3

_UNIT_INTERVAL = Interval(0, 1)


class Texture(ABC):
    @abstractmethod
    def value(self, u: float, v: float, p: Point3) -> Color:
        """The colour at texture coordinates (u, v) and point p."""


class SolidColor(Texture):
    """A single constant colour."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.albedo


def _as_texture(t: Union[Texture, Color]) -> Texture:
    return SolidColor(t) if isinstance(t, Vec3) else t


class CheckerTexture(Texture):
    """A 3D checkerboard alternating two textures (or colours) in cubes of side scale."""

    def __init__(
        self, scale: float, even: Union[Texture, Color], odd: Union[Texture, Color]
    ) -> None:
        self.inv_scale = 1.0 / scale
        self.even = _as_texture(even)
        self.odd = _as_texture(odd)

    def value(self, u: float, v: float, p: Point3) -> Color:
        total = sum(math.floor(self.inv_scale * c) for c in p)
        chosen = self.even if total % 2 == 0 else self.odd
        return chosen.value(u, v, p)


class ImageTexture(Texture):
    """A texture mapped from an image file; solid cyan when the file cannot be loaded."""

    def __init__(self, filename: str) -> None:
        self.image = RTWImage(filename)

    def value(self, u: float, v: float, p: Point3) -> Color:
        if self.image.height <= 0:
            return Color(0, 1, 1)

        u = _UNIT_INTERVAL.clamp(u)
        v = 1.0 - _UNIT_INTERVAL.clamp(v)

        i = int(u * self.image.width)
        j = int(v * self.image.height)
        r, g, b = self.image.pixel_data(i, j)

        color_scale = 1.0 / 255.0
        return Color(color_scale * r, color_scale * g, color_scale * b)


class NoiseTexture(Texture):
    """A marble-like grey pattern from Perlin turbulence."""

    def __init__(self, scale: float = 1.0) -> None:
        self.scale = scale
        self.noise = Perlin()

    def value(self, u: float, v: float, p: Point3) -> Color:
        return Color(0.5, 0.5, 0.5) * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p, 7)))