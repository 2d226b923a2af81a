"""
Motion primitives shared by the decision layers.

TurnDirection is the side the robot keeps the wall on. Its sign is used
directly as a multiplier on angular velocity (positive = turn left).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TurnDirection(Enum):
    """Wall-follow side. NONE only before the first wall-follow episode."""

    LEFT = "LEFT"
    NONE = "NONE"
    RIGHT = "RIGHT"

    @property
    def sign(self) -> int:
        if self is TurnDirection.LEFT:
            return 1
        if self is TurnDirection.RIGHT:
            return -1
        return 0


@dataclass
class MoveStatus:
    """
    Per-cycle clearance flags.

    is_close_to_wall only means something while is_following_wall is set.
    is_following_wall goes False -> True once and is never cleared.
    """

    can_continue: bool = True
    is_close_to_wall: bool = False
    is_following_wall: bool = False


@dataclass(frozen=True)
class Command:
    """Velocity command: linear (m/s) and angular (rad/s, positive = left)."""

    linear: float
    angular: float
