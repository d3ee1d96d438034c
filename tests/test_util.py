import math
import random

import pytest

from weekendtracer.util import PI, degrees_to_radians, random_double, random_int


def test_degrees_to_radians_half_turn_is_pi():
    assert degrees_to_radians(180) == pytest.approx(PI)


def test_degrees_to_radians_round_trip():
    for deg in (0.0, 15.0, 90.0, -18.0, 360.0):
        assert math.degrees(degrees_to_radians(deg)) == pytest.approx(deg)


def test_random_double_default_range():
    random.seed(1)
    values = [random_double() for _ in range(2000)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_random_double_custom_range():
    random.seed(2)
    values = [random_double(-3.0, 5.0) for _ in range(2000)]
    assert all(-3.0 <= v < 5.0 for v in values)
    assert min(values) < -2.0 and max(values) > 4.0


def test_random_int_inclusive_bounds():
    random.seed(3)
    values = {random_int(0, 4) for _ in range(2000)}
    assert values == {0, 1, 2, 3, 4}


def test_random_int_single_value():
    random.seed(4)
    assert {random_int(7, 7) for _ in range(50)} == {7}