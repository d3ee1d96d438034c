import random

import pytest
from PIL import Image

from weekendtracer.texture import (
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
    SolidColor,
    Texture,
)
from weekendtracer.vec3 import Vec3

EVEN = Vec3(0.2, 0.3, 0.1)
ODD = Vec3(0.9, 0.9, 0.9)


def test_texture_is_abstract():
    with pytest.raises(TypeError):
        Texture()


def test_solid_color_ignores_coordinates():
    tex = SolidColor(Vec3(0.1, 0.2, 0.3))
    assert tex.value(0.0, 0.0, Vec3()) == Vec3(0.1, 0.2, 0.3)
    assert tex.value(0.7, 0.4, Vec3(5, 6, 7)) == Vec3(0.1, 0.2, 0.3)


@pytest.mark.parametrize(
    "p, expected",
    [
        (Vec3(0.5, 0.5, 0.5), EVEN),
        (Vec3(1.5, 0.5, 0.5), ODD),
        (Vec3(-0.5, 0.5, 0.5), ODD),
        (Vec3(-0.5, -0.5, 0.5), EVEN),
        (Vec3(1.5, 1.5, 0.5), EVEN),
    ],
)
def test_checker_alternates(p, expected):
    assert CheckerTexture(1.0, EVEN, ODD).value(0, 0, p) == expected


def test_checker_scale_and_texture_arguments():
    tex = CheckerTexture(2.0, SolidColor(EVEN), SolidColor(ODD))
    assert tex.value(0, 0, Vec3(1.5, 0.5, 0.5)) == EVEN
    assert tex.value(0, 0, Vec3(2.5, 0.5, 0.5)) == ODD


def test_image_texture_missing_file_is_cyan(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RTW_IMAGES", raising=False)
    assert ImageTexture("absent.png").value(0.5, 0.5, Vec3()) == Vec3(0, 1, 1)


def test_image_texture_flips_v(tmp_path):
    img = Image.new("RGB", (1, 2))
    img.putpixel((0, 0), (255, 0, 0))
    img.putpixel((0, 1), (0, 0, 255))
    path = tmp_path / "column.png"
    img.save(path)
    tex = ImageTexture(str(path))
    assert tex.value(0.0, 1.0, Vec3()) == pytest.approx(Vec3(1, 0, 0))
    assert tex.value(0.0, 0.0, Vec3()) == pytest.approx(Vec3(0, 0, 1))
    assert tex.value(-3.0, 5.0, Vec3()) == tex.value(0.0, 1.0, Vec3())


def test_noise_texture_is_grey_and_in_range():
    random.seed(3)
    tex = NoiseTexture(4)
    rng = random.Random(11)
    for _ in range(50):
        p = Vec3(rng.uniform(-5, 5), rng.uniform(-5, 5), rng.uniform(-5, 5))
        c = tex.value(0, 0, p)
        assert c.x == c.y == c.z
        assert 0.0 <= c.x <= 1.0