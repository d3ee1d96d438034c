import math
import random

import pytest

from weekendtracer.bvh import BVHNode
from weekendtracer.hittable_list import HittableList
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3

ANY_T = Interval(0.001, math.inf)


def _scene(count, seed=7):
    rng = random.Random(seed)
    return [
        Sphere(
            Vec3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10)),
            rng.uniform(0.3, 1.5),
            i,
        )
        for i in range(count)
    ]


def test_empty_raises():
    with pytest.raises(ValueError):
        BVHNode([])


def test_single_object():
    s = Sphere(Vec3(0, 0, -5), 1.0, "only")
    node = BVHNode([s])
    rec = node.hit(Ray(Vec3(), Vec3(0, 0, -1)), ANY_T)
    assert rec.mat == "only"


def test_bounding_box_matches_list():
    objs = _scene(25)
    lst = HittableList(objs)
    node = BVHNode(lst)
    for axis in range(3):
        assert node.bounding_box().axis_interval(axis).min == pytest.approx(
            lst.bounding_box().axis_interval(axis).min
        )
        assert node.bounding_box().axis_interval(axis).max == pytest.approx(
            lst.bounding_box().axis_interval(axis).max
        )


def test_hits_agree_with_linear_list():
    objs = _scene(40)
    lst = HittableList(objs)
    node = BVHNode(lst)
    rng = random.Random(11)
    hits = 0
    for _ in range(300):
        d = Vec3(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1))
        r = Ray(Vec3(0, 0, 0), d)
        expected = lst.hit(r, ANY_T)
        got = node.hit(r, ANY_T)
        assert (expected is None) == (got is None)
        if expected is not None:
            hits += 1
            assert got.t == pytest.approx(expected.t)
            assert got.mat == expected.mat
    assert hits > 0


def test_does_not_change_source_list_order():
    objs = _scene(10)
    lst = HittableList(objs)
    BVHNode(lst)
    assert list(lst) == objs


def test_ray_outside_box_misses():
    node = BVHNode(_scene(10))
    assert node.hit(Ray(Vec3(100, 100, 100), Vec3(1, 0, 0)), ANY_T) is None