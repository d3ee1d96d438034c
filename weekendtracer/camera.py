"""A positionable thin-lens camera that renders a scene to PPM text."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from weekendtracer.color import Color, write_color
from weekendtracer.hittable import Hittable
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.util import INFINITY, degrees_to_radians, random_double
from weekendtracer.vec3 import Point3, Vec3, cross, random_in_unit_disk, unit_vector

_BLACK = Color(0.0, 0.0, 0.0)
_WHITE = Color(1.0, 1.0, 1.0)
_SKY_BLUE = Color(0.5, 0.7, 1.0)


@dataclass(frozen=True)
class _Frame:
    """Values derived from the camera settings before rendering."""

    image_height: int
    pixel_samples_scale: float
    center: Point3
    pixel00_loc: Point3
    pixel_delta_u: Vec3
    pixel_delta_v: Vec3
    defocus_disk_u: Vec3
    defocus_disk_v: Vec3


@dataclass
class Camera:
    """Camera settings; render() writes the image seen from lookfrom towards lookat."""

    aspect_ratio: float = 1.0
    image_width: int = 100
    samples_per_pixel: int = 10
    max_depth: int = 10

    vfov: float = 90.0
    lookfrom: Point3 = field(default_factory=lambda: Vec3(0, 0, 0))
    lookat: Point3 = field(default_factory=lambda: Vec3(0, 0, -1))
    vup: Vec3 = field(default_factory=lambda: Vec3(0, 1, 0))

    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    _frame: Optional[_Frame] = field(default=None, init=False, repr=False, compare=False)

    def _initialize(self) -> _Frame:
        image_height = max(1, int(self.image_width / self.aspect_ratio))
        pixel_samples_scale = 1.0 / self.samples_per_pixel
        center = self.lookfrom

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (float(self.image_width) / image_height)

        w = unit_vector(self.lookfrom - self.lookat)
        u = unit_vector(cross(self.vup, w))
        v = cross(w, u)

        viewport_u = viewport_width * u
        viewport_v = viewport_height * -v

        pixel_delta_u = viewport_u / self.image_width
        pixel_delta_v = viewport_v / image_height

        viewport_upper_left = center - (self.focus_dist * w) - viewport_u / 2 - viewport_v / 2
        pixel00_loc = viewport_upper_left + 0.5 * (pixel_delta_u + pixel_delta_v)

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))

        frame = _Frame(
            image_height=image_height,
            pixel_samples_scale=pixel_samples_scale,
            center=center,
            pixel00_loc=pixel00_loc,
            pixel_delta_u=pixel_delta_u,
            pixel_delta_v=pixel_delta_v,
            defocus_disk_u=u * defocus_radius,
            defocus_disk_v=v * defocus_radius,
        )
        self._frame = frame
        return frame

    def render(
        self,
        world: Hittable,
        out: Optional[TextIO] = None,
        log: Optional[TextIO] = None,
    ) -> None:
        """Render world as a plain PPM (P3) image to out, with progress on log."""
        out = sys.stdout if out is None else out
        log = sys.stderr if log is None else log
        frame = self._initialize()

        out.write(f"P3\n{self.image_width} {frame.image_height}\n255\n")

        for j in range(frame.image_height):
            log.write(f"\rScanlines remaining: {frame.image_height - j} ")
            log.flush()
            for i in range(self.image_width):
                pixel_color = _BLACK
                for _ in range(self.samples_per_pixel):
                    pixel_color = pixel_color + self.ray_color(
                        self.get_ray(i, j), self.max_depth, world
                    )
                write_color(out, frame.pixel_samples_scale * pixel_color)

        log.write("\rDone.                 \n")

    def get_ray(self, i: int, j: int) -> Ray:
        """A ray from the defocus disk through a random point around pixel (i, j)."""
        frame = self._frame if self._frame is not None else self._initialize()

        offset = Vec3(random_double() - 0.5, random_double() - 0.5, 0.0)
        pixel_sample = (
            frame.pixel00_loc
            + ((i + offset.x) * frame.pixel_delta_u)
            + ((j + offset.y) * frame.pixel_delta_v)
        )

        if self.defocus_angle <= 0:
            ray_origin = frame.center
        else:
            p = random_in_unit_disk()
            ray_origin = frame.center + (p.x * frame.defocus_disk_u) + (p.y * frame.defocus_disk_v)

        return Ray(ray_origin, pixel_sample - ray_origin)

    def ray_color(self, r: Ray, depth: int, world: Hittable) -> Color:
        """The light gathered along r after at most depth bounces."""
        if depth <= 0:
            return _BLACK

        rec = world.hit(r, Interval(0.001, INFINITY))
        if rec is not None:
            if rec.mat is None:
                return _BLACK
            scattered = rec.mat.scatter(r, rec)
            if scattered is None:
                return _BLACK
            attenuation, ray_out = scattered
            return attenuation * self.ray_color(ray_out, depth - 1, world)

        unit_direction = unit_vector(r.direction)
        a = 0.5 * (unit_direction.y + 1.0)
        return (1.0 - a) * _WHITE + a * _SKY_BLUE