import math

import pytest

from weekendtracer.hittable import HitRecord
from weekendtracer.interval import Interval
from weekendtracer.quad import Quad, box
from weekendtracer.ray import Ray
from weekendtracer.vec3 import Vec3

ANY_T = Interval(0.001, math.inf)


def _unit_quad(mat=None):
    return Quad(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0), mat)


def test_hit_sets_plane_coordinates():
    q = _unit_quad("m")
    r = Ray(Vec3(0.25, 0.75, 1), Vec3(0, 0, -1))
    rec = q.hit(r, ANY_T)
    assert rec is not None
    assert rec.u == pytest.approx(0.25)
    assert rec.v == pytest.approx(0.75)
    assert rec.p.z == pytest.approx(0.0)
    assert (r.at(rec.t) - rec.p).length() == pytest.approx(0.0)
    assert rec.front_face is True
    assert rec.mat == "m"


def test_hit_from_behind_flips_normal():
    rec = _unit_quad().hit(Ray(Vec3(0.5, 0.5, -1), Vec3(0, 0, 1)), ANY_T)
    assert rec.front_face is False
    assert rec.normal == Vec3(0, 0, -1)


def test_parallel_ray_misses():
    assert _unit_quad().hit(Ray(Vec3(0.5, 0.5, 1), Vec3(1, 0, 0)), ANY_T) is None


def test_outside_the_quad_misses():
    assert _unit_quad().hit(Ray(Vec3(1.5, 0.5, 1), Vec3(0, 0, -1)), ANY_T) is None


def test_t_outside_interval_misses():
    r = Ray(Vec3(0.5, 0.5, 1), Vec3(0, 0, -1))
    assert _unit_quad().hit(r, Interval(2.0, math.inf)) is None


def test_is_interior():
    q = _unit_quad()
    rec = HitRecord()
    assert q.is_interior(1.5, 0.5, rec) is False
    assert q.is_interior(0.3, 0.6, rec) is True
    assert (rec.u, rec.v) == (0.3, 0.6)


def test_flat_quad_box_is_padded():
    bb = _unit_quad().bounding_box()
    assert bb.z.size() >= 0.0001
    assert bb.x.min == pytest.approx(0.0)
    assert bb.y.max == pytest.approx(1.0)


def test_box_has_six_sides_and_encloses_corners():
    b = box(Vec3(2, 3, 4), Vec3(-1, 0, 1), None)
    assert len(b) == 6
    bb = b.bounding_box()
    assert bb.x.min == pytest.approx(-1)
    assert bb.x.max == pytest.approx(2)
    assert bb.y.min == pytest.approx(0)
    assert bb.z.max == pytest.approx(4)


def test_box_hit_from_each_axis():
    b = box(Vec3(0, 0, 0), Vec3(1, 1, 1), None)
    for origin, direction in [
        (Vec3(0.5, 0.5, 5), Vec3(0, 0, -1)),
        (Vec3(5, 0.5, 0.5), Vec3(-1, 0, 0)),
        (Vec3(0.5, 5, 0.5), Vec3(0, -1, 0)),
    ]:
        rec = b.hit(Ray(origin, direction), ANY_T)
        assert rec is not None
        assert rec.front_face is True
        assert max(rec.p) == pytest.approx(1.0)