"""Surface materials: how light scatters off a hit point."""

from __future__ import annotations

import math
from typing import Optional

from weekendtracer.color import Color
from weekendtracer.hittable import HitRecord
from weekendtracer.ray import Ray
from weekendtracer.util import random_double
from weekendtracer.vec3 import dot, random_unit_vector, reflect, refract, unit_vector

Scatter = Optional[tuple[Color, Ray]]


def reflectance(cosine: float, refraction_index: float) -> float:
    """Schlick's approximation for reflectance."""
    r0 = (1 - refraction_index) / (1 + refraction_index)
    r0 = r0 * r0
    return r0 + (1 - r0) * (1 - cosine) ** 5


class Material:
    """A material that absorbs every ray."""

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter:
        """Return (attenuation, scattered ray), or None if the ray is absorbed."""
        return None


class Lambertian(Material):
    """An ideal diffuse surface."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter:
        scatter_direction = rec.normal + random_unit_vector()
        if scatter_direction.near_zero():
            scatter_direction = rec.normal
        return self.albedo, Ray(rec.p, scatter_direction)


class Metal(Material):
    """A reflective surface; fuzz (at most 1) blurs the reflection."""

    def __init__(self, albedo: Color, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter:
        reflected = reflect(r_in.direction, rec.normal)
        reflected = unit_vector(reflected) + self.fuzz * random_unit_vector()
        scattered = Ray(rec.p, reflected)
        if dot(scattered.direction, rec.normal) > 0:
            return self.albedo, scattered
        return None


class Dielectric(Material):
    """A clear material that refracts or reflects, such as glass or water."""

    def __init__(self, refraction_index: float) -> None:
        self.refraction_index = refraction_index

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter:
        attenuation = Color(1.0, 1.0, 1.0)
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = unit_vector(r_in.direction)
        cos_theta = min(dot(-unit_direction, rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ri) > random_double():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return attenuation, Ray(rec.p, direction)