# weekendtracer

A compact path tracer written in plain Python. It renders scenes made of
spheres, quads and boxes with diffuse, metal and glass materials, and writes
the result as a plain-text PPM (P3) image. It also provides bounding volume
hierarchies, solid, checker, image and Perlin-noise textures, probability
density helpers, and a few Monte Carlo integration experiments.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Rendering the example scene

```
weekendtracer > image.ppm
```

This renders the field of random spheres: a large grey ground sphere, a grid
of small diffuse, metal and glass spheres, and three large feature spheres,
seen through a camera with a slight depth-of-field blur. The image goes to
standard output; the count of scanlines still to be rendered goes to standard
error.

The default image is 1200 pixels wide with 10 samples per pixel and up to 20
bounces, which takes a long time in pure Python. The command accepts:

- `--width N`: image width in pixels
- `--samples N`: samples per pixel
- `--max-depth N`: maximum number of ray bounces
- `--seed N`: seed for the random generator, for repeatable scenes and images

```
weekendtracer --width 200 --samples 4 --seed 1 > small.ppm
```

## Using the library

```python
import sys

from weekendtracer.scenes import random_spheres_world, random_spheres_camera

world = random_spheres_world()
cam = random_spheres_camera()
cam.image_width = 200
cam.samples_per_pixel = 4

with open("spheres.ppm", "w") as out:
    cam.render(world, out, sys.stderr)
```

`Camera` is a dataclass whose fields are the settings: `aspect_ratio`,
`image_width`, `samples_per_pixel`, `max_depth`, `vfov`, `lookfrom`, `lookat`,
`vup`, `defocus_angle` and `focus_dist`. `render(world, out, log)` writes to
standard output and standard error when `out` and `log` are not given. Rays
that hit nothing take the colour of a white-to-blue sky gradient.

The building blocks live in their own modules:

- `weekendtracer.vec3`: `Vec3` (also used as `Point3`), `dot`, `cross`,
  `unit_vector`, `reflect`, `refract` and random direction helpers
- `weekendtracer.interval`, `weekendtracer.ray`, `weekendtracer.aabb`:
  `Interval`, `Ray` and `AABB`
- `weekendtracer.hittable`: `HitRecord`, the `Hittable` base class, and the
  instance transforms `Translate` and `RotateY`; `hit()` returns a
  `HitRecord` or `None`
- `weekendtracer.sphere`, `weekendtracer.quad`, `weekendtracer.hittable_list`,
  `weekendtracer.bvh`: `Sphere` (optionally moving, given `center2`),
  `get_sphere_uv`, `Quad`, `box`, `HittableList`, `BVHNode`
- `weekendtracer.material`: `Material`, `Lambertian`, `Metal`, `Dielectric`
  and `reflectance`; `scatter()` returns `(attenuation, ray)` or `None`
- `weekendtracer.texture`: `SolidColor`, `CheckerTexture`, `ImageTexture`,
  `NoiseTexture`, backed by `weekendtracer.perlin.Perlin` and
  `weekendtracer.image.RTWImage`
- `weekendtracer.pdf`: `SpherePDF`, `HittablePDF`, `MixturePDF`
- `weekendtracer.onb`: `ONB`, an orthonormal basis built from one direction
  with `ONB.from_w`
- `weekendtracer.color`: `linear_to_gamma`, `color_to_bytes`, `write_color`
- `weekendtracer.util`: `degrees_to_radians`, `random_double`, `random_int`

Image textures search for their file in the directory named by the
`RTW_IMAGES` environment variable, then in the current directory and in
`images/` directories up to six levels above it. Images are read with Pillow
and converted to linear RGB bytes. An `RTWImage` with no data returns magenta
from `pixel_data`, and an `ImageTexture` whose image could not be loaded
renders as solid cyan.

## Monte Carlo experiments

```
weekendtracer-montecarlo cos-cubed
weekendtracer-montecarlo halfway
weekendtracer-montecarlo x-sq -n 1000
```

Each subcommand prints the result of one experiment; `-n` sets the number of
samples. The same estimates are available as functions in
`weekendtracer.montecarlo`: `estimate_cos_cubed(n)`, `estimate_halfway(n)`
(returning the average, the area under the curve and the halfway point) and
`integrate_x_sq(n)`. A sample count below 1 raises `ValueError`.

## Detector geometry files

`weekendtracer.geometry.Geometry.load(path)` reads a JSON object from a file;
it raises `OSError` if the file cannot be opened and `ValueError` if the
document is not an object. A `Geometry` is a read-only mapping. `keys()` lists
its member names sorted, `get_float(key)` returns a number as single precision
(0 for a missing member) and `get_vector(key)` returns an array's elements as
numbers (empty for a missing member).

## What it does not do

The package has no light-emitting materials, no participating media such as
smoke or fog, and no cosine-weighted direction density. The camera gathers
light only from its fixed sky gradient and does not sample light sources;
spheres and quads keep the `Hittable` default of a zero `pdf_value`, so a
`HittablePDF` over them has zero density. Only the random-spheres scene ships
as a ready-made command.