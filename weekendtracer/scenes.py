"""The final scene of random spheres and a command that renders it."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

from weekendtracer.camera import Camera
from weekendtracer.color import Color
from weekendtracer.hittable_list import HittableList
from weekendtracer.material import Dielectric, Lambertian, Material, Metal
from weekendtracer.sphere import Sphere
from weekendtracer.util import random_double
from weekendtracer.vec3 import Point3, Vec3


def random_spheres_world() -> HittableList:
    """A ground sphere, a grid of small random spheres and three large ones."""
    world = HittableList()

    ground_material = Lambertian(Color(0.5, 0.5, 0.5))
    world.add(Sphere(Point3(0, -1000, 0), 1000, ground_material))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double()
            center = Point3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())

            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            sphere_material: Material
            if choose_mat < 0.8:
                sphere_material = Lambertian(Color.random() * Color.random())
            elif choose_mat < 0.95:
                albedo = Color.random(0.5, 1)
                fuzz = random_double(0, 0.5)
                sphere_material = Metal(albedo, fuzz)
            else:
                sphere_material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, sphere_material))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    return world


def random_spheres_camera() -> Camera:
    """The camera set up to view the random-spheres scene."""
    return Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=1200,
        samples_per_pixel=10,
        max_depth=20,
        vfov=20,
        lookfrom=Point3(13, 2, 3),
        lookat=Point3(0, 0, 0),
        vup=Vec3(0, 1, 0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weekendtracer",
        description="Render the random-spheres scene as a PPM image on standard output.",
    )
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum ray bounces")
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    if args.seed is not None:
        random.seed(args.seed)

    world = random_spheres_world()
    cam = random_spheres_camera()
    if args.width is not None:
        cam.image_width = args.width
    if args.samples is not None:
        cam.samples_per_pixel = args.samples
    if args.max_depth is not None:
        cam.max_depth = args.max_depth

    cam.render(world, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())