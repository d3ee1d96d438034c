"""Colour conversion and PPM pixel output."""

from __future__ import annotations

import math
from typing import TextIO

from weekendtracer.interval import Interval
from weekendtracer.vec3 import Vec3

Color = Vec3

_INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Gamma-2 transform; non-positive values map to 0."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def color_to_bytes(pixel_color: Color) -> tuple[int, int, int]:
    """Translate a linear colour to three bytes in [0, 255]; NaN becomes 0."""
    components = (0.0 if math.isnan(c) else c for c in pixel_color)
    r, g, b = (int(256 * _INTENSITY.clamp(linear_to_gamma(c))) for c in components)
    return r, g, b


def write_color(out: TextIO, pixel_color: Color) -> None:
    """Write a pixel as one 'r g b' text line."""
    r, g, b = color_to_bytes(pixel_color)
    out.write(f"{r} {g} {b}\n")