"""
Parameter loading tests
"""

import json

import pytest

from circle_seeker.errors import ConfigError
from circle_seeker.params import PARAMS_FILE, MoveSpecs, ScanGeometry, SectorWindow


def valid_data():
    return {
        "high_security_distance": 0.6,
        "low_security_distance": 0.4,
        "wall_follow_distance": 0.7,
        "linear_velocity": 0.2,
        "angular_velocity": 0.6,
        "right_window": {"low": 10, "high": 250},
        "center_window": {"low": 251, "high": 469},
        "left_window": {"low": 470, "high": 710},
    }


def write(tmp_path, data):
    path = tmp_path / "params.json"
    path.write_text(json.dumps(data))
    return path


def test_load_shipped_params():
    specs = MoveSpecs.load(PARAMS_FILE)

    assert specs.right_window == SectorWindow(10, 250)
    assert specs.geometry.beam_count == 720


def test_load_from_file(tmp_path):
    specs = MoveSpecs.load(write(tmp_path, valid_data()))

    assert specs.high_security_distance == 0.6
    assert specs.center_window == SectorWindow(251, 469)
    assert specs.geometry == ScanGeometry()


def test_specs_are_frozen(tmp_path):
    specs = MoveSpecs.load(write(tmp_path, valid_data()))
    with pytest.raises(AttributeError):
        specs.linear_velocity = 1.0


@pytest.mark.parametrize("key", list(valid_data()))
def test_missing_value_rejected(tmp_path, key):
    data = valid_data()
    del data[key]
    with pytest.raises(ConfigError, match=key):
        MoveSpecs.load(write(tmp_path, data))


@pytest.mark.parametrize("bound", ["low", "high"])
def test_missing_window_bound_rejected(bound):
    data = valid_data()
    del data["left_window"][bound]
    with pytest.raises(ConfigError, match=f"left_window.{bound}"):
        MoveSpecs.from_dict(data)


@pytest.mark.parametrize("value", ["fast", None, True, float("nan"), [1]])
def test_non_numeric_value_rejected(value):
    data = valid_data()
    data["angular_velocity"] = value
    with pytest.raises(ConfigError):
        MoveSpecs.from_dict(data)


def test_fractional_window_index_rejected():
    data = valid_data()
    data["right_window"]["low"] = 10.5
    with pytest.raises(ConfigError):
        MoveSpecs.from_dict(data)


def test_integral_float_window_index_accepted():
    data = valid_data()
    data["right_window"]["low"] = 10.0
    assert MoveSpecs.from_dict(data).right_window.low == 10


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        MoveSpecs.load(tmp_path / "nope.json")


def test_bad_json(tmp_path):
    path = tmp_path / "params.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        MoveSpecs.load(path)


def test_geometry_override():
    data = valid_data()
    data["geometry"] = {"angle_min_deg": -180.0, "angle_increment_deg": 1.0, "beam_count": 360}
    geometry = MoveSpecs.from_dict(data).geometry

    assert geometry.index_of(0.0) == 180
    assert geometry.bearing_of(90) == -90.0
    # Probe bearings keep their defaults
    assert geometry.index_of(geometry.wall_probe_right_deg) == 188


@pytest.mark.parametrize("geometry", [
    {"angle_increment_deg": 0},
    {"beam_count": -5},
    {"unknown": 1.0},
    "wide",
])
def test_bad_geometry_rejected(geometry):
    data = valid_data()
    data["geometry"] = geometry
    with pytest.raises(ConfigError):
        MoveSpecs.from_dict(data)


def test_default_geometry_reproduces_probe_indices():
    g = ScanGeometry()

    assert g.index_of(g.wall_probe_right_deg) == 380
    assert g.index_of(g.wall_probe_left_deg) == 340
    assert g.index_of(g.approach_front_right_deg) == 90
    assert g.index_of(g.approach_front_left_deg) == 630
