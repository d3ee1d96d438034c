import json

import pytest

from weekendtracer.geometry import Geometry


@pytest.fixture
def geom_file(tmp_path):
    path = tmp_path / "geom.json"
    path.write_text(
        json.dumps(
            {
                "radius": 0.5,
                "height": 3,
                "positions": [1.5, -2.25, 4],
                "name": "tank",
                "flag": True,
            }
        ),
        encoding="utf-8",
    )
    return path


def test_keys_sorted(geom_file):
    geom = Geometry.load(geom_file)
    assert geom.keys() == ["flag", "height", "name", "positions", "radius"]


def test_get_float(geom_file):
    geom = Geometry.load(geom_file)
    assert geom.get_float("radius") == 0.5
    assert geom.get_float("height") == 3.0
    assert geom.get_float("flag") == 1.0


def test_get_float_is_single_precision(tmp_path):
    path = tmp_path / "g.json"
    path.write_text(json.dumps({"x": 0.1}), encoding="utf-8")
    value = Geometry.load(path).get_float("x")
    assert value == pytest.approx(0.1, rel=1e-6)
    assert value != 0.1


def test_missing_members(geom_file):
    geom = Geometry.load(geom_file)
    assert geom.get_float("absent") == 0.0
    assert geom.get_vector("absent") == []


def test_get_vector(geom_file):
    geom = Geometry.load(geom_file)
    assert geom.get_vector("positions") == [1.5, -2.25, 4.0]


def test_non_numeric_member_raises(geom_file):
    geom = Geometry.load(geom_file)
    with pytest.raises(TypeError):
        geom.get_float("name")
    with pytest.raises(TypeError):
        geom.get_vector("radius")


def test_mapping_access(geom_file):
    geom = Geometry.load(geom_file)
    assert geom["name"] == "tank"
    assert len(geom) == 5
    assert "positions" in geom


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Geometry.load(tmp_path / "nope.json")


def test_non_object_document_rejected(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        Geometry.load(path)