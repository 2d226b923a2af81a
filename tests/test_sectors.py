"""
Sector analysis tests
"""

import math

import pytest

from circle_seeker.errors import InvalidWindow, OutOfRange, WindowOutOfRange
from circle_seeker.params import SectorWindow
from circle_seeker.strategies import analyze, min_in_window

from conftest import make_frame


def test_min_in_window_inclusive_bounds():
    ranges = [5.0] * 10
    ranges[2] = 1.5
    ranges[6] = 1.0

    assert min_in_window(ranges, SectorWindow(2, 6)) == 1.0
    assert min_in_window(ranges, SectorWindow(2, 5)) == 1.5
    assert min_in_window(ranges, SectorWindow(3, 5)) == 5.0


def test_min_in_window_single_index():
    ranges = [3.0, 2.0, 1.0]
    assert min_in_window(ranges, SectorWindow(1, 1)) == 2.0


def test_non_finite_readings_ignored():
    ranges = [math.inf, float("nan"), 2.5, -math.inf, 4.0]
    assert min_in_window(ranges, SectorWindow(0, 4)) == 2.5


def test_window_without_finite_readings_is_clear():
    ranges = [math.inf, float("nan"), math.inf]
    assert min_in_window(ranges, SectorWindow(0, 2)) == math.inf


def test_empty_window_rejected():
    with pytest.raises(InvalidWindow):
        min_in_window([1.0] * 10, SectorWindow(5, 4))


@pytest.mark.parametrize("window", [SectorWindow(0, 10), SectorWindow(-1, 3), SectorWindow(8, 12)])
def test_out_of_bounds_window_rejected(window):
    with pytest.raises(WindowOutOfRange) as info:
        min_in_window([1.0] * 10, window)

    # Both an invalid window and an out-of-range access
    assert isinstance(info.value, InvalidWindow)
    assert isinstance(info.value, OutOfRange)


def test_accepts_scan_frame():
    frame = make_frame(overrides={100: 0.3})
    assert min_in_window(frame, SectorWindow(90, 110)) == pytest.approx(0.3)


def test_analyze_uses_configured_windows(specs):
    frame = make_frame(overrides={20: 0.9, 300: 1.1, 700: 1.3})
    sectors = analyze(frame, specs)

    assert sectors.right == pytest.approx(0.9)
    assert sectors.center == pytest.approx(1.1)
    assert sectors.left == pytest.approx(1.3)


def test_analyze_short_frame_fails(specs):
    frame = make_frame(beams=600)
    with pytest.raises(OutOfRange):
        analyze(frame, specs)
