"""
Shared fixtures: motion parameters and scan frame builders.
"""

import pytest

from circle_seeker.params import MoveSpecs, ScanGeometry, SectorWindow
from circle_seeker.perception import ScanCycle, ScanFrame, TargetObservation

BEAMS = 720


@pytest.fixture
def specs():
    """Parameters matching the shipped params.json."""
    return MoveSpecs(
        high_security_distance=0.6,
        low_security_distance=0.4,
        wall_follow_distance=0.7,
        linear_velocity=0.2,
        angular_velocity=0.6,
        right_window=SectorWindow(10, 250),
        left_window=SectorWindow(470, 710),
        center_window=SectorWindow(251, 469),
        geometry=ScanGeometry(),
    )


class FixedChoice:
    """Stand-in random generator that always picks the same option."""

    def __init__(self, value):
        self.value = value

    def choice(self, options):
        assert self.value in options
        return self.value


def make_frame(default=5.0, overrides=None, beams=BEAMS, timestamp=0.0):
    """Scan frame of `beams` readings at `default`, with index overrides."""
    ranges = [default] * beams
    for index, value in (overrides or {}).items():
        ranges[index] = value
    return ScanFrame.from_ranges(ranges, timestamp)


def make_cycle(default=5.0, overrides=None, target=None, beams=BEAMS):
    return ScanCycle(
        frame=make_frame(default, overrides, beams),
        target=target or TargetObservation.absent(),
    )


class FakeLidar:
    def __init__(self, frame=None):
        self.frame = frame
        self.is_running = False

    def get_frame(self):
        return self.frame

    def start(self):
        self.is_running = True
        return True

    def stop(self):
        self.is_running = False


class FakeCamera:
    def __init__(self, target=None):
        self.target = target or TargetObservation.absent()
        self.is_running = False

    def get_target(self):
        return self.target

    def start(self):
        self.is_running = True
        return True

    def stop(self):
        self.is_running = False


class FakeMotor:
    def __init__(self):
        self.sent = []
        self.is_connected = False
        self.stopped = False

    def connect(self):
        self.is_connected = True
        return True

    def disconnect(self):
        self.is_connected = False

    def drive(self, linear, angular):
        self.sent.append((linear, angular))

    def stop(self):
        self.stopped = True

