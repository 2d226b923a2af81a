"""
Target approach alignment tests
"""

import math

import pytest

from circle_seeker.errors import OutOfRange
from circle_seeker.motion import Command, TurnDirection
from circle_seeker.strategies import CircleAlignment

from conftest import make_frame

LEFT, NONE, RIGHT = TurnDirection.LEFT, TurnDirection.NONE, TurnDirection.RIGHT

# Default geometry: right back = right_window.low, left back = left_window.high
RIGHT_BACK, RIGHT_FRONT = 10, 90
LEFT_BACK, LEFT_FRONT = 710, 630


@pytest.fixture
def alignment(specs):
    return CircleAlignment(specs)


def right_frame(front, back):
    return make_frame(overrides={RIGHT_FRONT: front, RIGHT_BACK: back})


def left_frame(front, back):
    return make_frame(overrides={LEFT_FRONT: front, LEFT_BACK: back})


def test_sample_indices_follow_geometry(alignment):
    frame = make_frame(overrides={RIGHT_BACK: 1.0, RIGHT_FRONT: 2.0, LEFT_BACK: 3.0, LEFT_FRONT: 4.0})

    assert alignment.samples(frame, RIGHT) == (1.0, 2.0)
    assert alignment.samples(frame, LEFT) == (3.0, 4.0)


def test_aligned_drives_straight(alignment, specs):
    """Scenario E: 0.9 - sin(60°) * 1.0 ≈ 0.034"""
    assert 0.9 - math.sin(math.radians(60)) * 1.0 == pytest.approx(0.034, abs=1e-3)
    assert alignment.compute(right_frame(0.9, 1.0), RIGHT) == Command(specs.linear_velocity, 0.0)


@pytest.mark.parametrize("front", [0.05, -0.05])
def test_tolerance_bounds_inclusive(alignment, specs, front):
    # back = 0 makes diff exactly equal to the front reading
    assert alignment.compute(right_frame(front, 0.0), RIGHT) == Command(specs.linear_velocity, 0.0)


def test_just_outside_tolerance_corrects(alignment, specs):
    command = alignment.compute(right_frame(0.0501, 0.0), RIGHT)
    assert command == Command(0.0, -RIGHT.sign * specs.angular_velocity / 4)
    assert command.angular == pytest.approx(0.15)


@pytest.mark.parametrize("side,make", [(RIGHT, right_frame), (LEFT, left_frame)])
def test_front_too_far_turns_away_from_side_sign(alignment, specs, side, make):
    command = alignment.compute(make(2.0, 1.0), side)
    assert command == Command(0.0, -side.sign * specs.angular_velocity / 4)


@pytest.mark.parametrize("side,make", [(RIGHT, right_frame), (LEFT, left_frame)])
def test_front_too_close_turns_with_side_sign(alignment, specs, side, make):
    command = alignment.compute(make(0.3, 1.0), side)
    assert command == Command(0.0, side.sign * specs.angular_velocity / 4)


def test_no_side_sends_nothing(alignment):
    assert alignment.compute(make_frame(), NONE) is None


def test_short_frame_out_of_range(alignment):
    with pytest.raises(OutOfRange):
        alignment.compute(make_frame(beams=500), LEFT)
