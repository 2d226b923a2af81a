"""
Observations consumed by the decision layer.

A ScanCycle pairs one complete scan with the most recent circle detection.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from circle_seeker.config import NO_TARGET
from circle_seeker.errors import OutOfRange


@dataclass(frozen=True)
class TargetObservation:
    """
    Circle position relative to the robot (m).

    circle_x is the lateral offset (positive = right in the image),
    circle_y the forward distance. (-10, -10) means nothing was detected.
    """

    circle_x: float = NO_TARGET
    circle_y: float = NO_TARGET

    @classmethod
    def absent(cls) -> TargetObservation:
        return cls(NO_TARGET, NO_TARGET)

    @property
    def is_present(self) -> bool:
        return not (self.circle_x == NO_TARGET and self.circle_y == NO_TARGET)


@dataclass(frozen=True)
class ScanFrame:
    """Ordered range readings (m). Non-finite readings mean no return."""

    ranges: tuple[float, ...]
    timestamp: float = 0.0

    @classmethod
    def from_ranges(cls, ranges: Sequence[float], timestamp: float = 0.0) -> ScanFrame:
        return cls(tuple(float(r) for r in ranges), timestamp)

    def __len__(self) -> int:
        return len(self.ranges)

    def __getitem__(self, index: int) -> float:
        """Reading at index. Negative indices are rejected, not wrapped."""
        if not 0 <= index < len(self.ranges):
            raise OutOfRange(f"Scan index {index} outside frame of {len(self.ranges)} readings")
        return self.ranges[index]

    @property
    def valid_count(self) -> int:
        """Number of finite readings."""
        return sum(1 for r in self.ranges if math.isfinite(r))


@dataclass(frozen=True)
class ScanCycle:
    """Input to one decision cycle."""

    frame: ScanFrame
    target: TargetObservation = field(default_factory=TargetObservation.absent)
