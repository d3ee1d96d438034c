"""A small path tracer rendering spheres, quads and boxes to PPM images."""

__version__ = "0.1.0"