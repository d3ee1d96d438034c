import random

from weekendtracer.material import Dielectric, Lambertian, Metal
from weekendtracer.scenes import main, random_spheres_camera, random_spheres_world
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3


def test_world_starts_with_ground_sphere():
    random.seed(7)
    world = random_spheres_world()
    ground = world.objects[0]
    assert isinstance(ground, Sphere)
    assert ground.center1 == Vec3(0, -1000, 0)
    assert ground.radius == 1000
    assert isinstance(ground.mat, Lambertian)
    assert ground.mat.albedo == Vec3(0.5, 0.5, 0.5)


def test_world_ends_with_three_large_spheres():
    random.seed(7)
    world = random_spheres_world()
    glass, diffuse, metal = world.objects[-3:]
    assert glass.center1 == Vec3(0, 1, 0)
    assert isinstance(glass.mat, Dielectric)
    assert diffuse.center1 == Vec3(-4, 1, 0)
    assert isinstance(diffuse.mat, Lambertian)
    assert metal.center1 == Vec3(4, 1, 0)
    assert isinstance(metal.mat, Metal)
    assert metal.mat.fuzz == 0.0


def test_small_spheres_are_on_the_grid_and_clear_of_metal_sphere():
    random.seed(11)
    world = random_spheres_world()
    small = world.objects[1:-3]
    assert 0 < len(small) <= 22 * 22
    for s in small:
        assert s.radius == 0.2
        assert s.center1.y == 0.2
        assert (s.center1 - Vec3(4, 0.2, 0)).length() > 0.9
        assert -11 <= s.center1.x < 11
        assert -11 <= s.center1.z < 11


def test_world_is_reproducible_with_seed():
    random.seed(42)
    first = [s.center1 for s in random_spheres_world()]
    random.seed(42)
    second = [s.center1 for s in random_spheres_world()]
    assert first == second


def test_camera_settings():
    cam = random_spheres_camera()
    assert cam.image_width == 1200
    assert cam.samples_per_pixel == 10
    assert cam.max_depth == 20
    assert cam.vfov == 20
    assert cam.lookfrom == Vec3(13, 2, 3)
    assert cam.defocus_angle == 0.6
    assert cam.focus_dist == 10.0


def test_main_renders_small_image(capsys):
    code = main(["--width", "8", "--samples", "1", "--max-depth", "2", "--seed", "1"])
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert code == 0
    assert lines[0] == "P3"
    width, height = (int(v) for v in lines[1].split())
    assert width == 8
    assert height == int(8 / (16.0 / 9.0))
    assert len(lines) == 3 + width * height
    assert "Done." in captured.err