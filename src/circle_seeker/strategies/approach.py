"""
Target approach strategies - Line up on the circle once it is in reach.

Takes the scan frame and the wall-follow side fixed at the mode switch,
returns a command.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Optional

from circle_seeker.motion import Command, TurnDirection
from circle_seeker.params import MoveSpecs
from circle_seeker.perception.world_state import ScanFrame

logger = logging.getLogger(__name__)


class ApproachStrategy(ABC):
    """Base class for target approach algorithms."""

    @abstractmethod
    def compute(self, frame: ScanFrame, direction: TurnDirection) -> Optional[Command]:
        """
        Compute the approach command.

        Args:
            frame: Current scan.
            direction: Wall-follow side chosen before the switch.

        Returns:
            Command, or None if nothing should be sent.
        """
        ...


class CircleAlignment(ApproachStrategy):
    """
    Keep two wall samples in a fixed ratio while driving.

    The back sample is the outer edge of the wall-side sector, the front
    sample sits at the approach bearing. When front == sin(60°) * back
    (within tolerance) the robot drives straight; otherwise it turns in
    place at a quarter of the wall-follow angular velocity.
    """

    def __init__(self, specs: MoveSpecs, tolerance: float = 0.05, ratio_angle_deg: float = 60.0):
        self.specs = specs
        self.tolerance = tolerance
        self.ratio = math.sin(math.radians(ratio_angle_deg))
        self._log_count = 0

    def samples(self, frame: ScanFrame, direction: TurnDirection) -> tuple[float, float]:
        """(back, front) readings for a wall side. Raises OutOfRange."""
        geometry = self.specs.geometry
        if direction is TurnDirection.RIGHT:
            back = frame[self.specs.right_window.low]
            front = frame[geometry.index_of(geometry.approach_front_right_deg)]
        else:
            back = frame[self.specs.left_window.high]
            front = frame[geometry.index_of(geometry.approach_front_left_deg)]
        return back, front

    def compute(self, frame: ScanFrame, direction: TurnDirection) -> Optional[Command]:
        if direction is TurnDirection.NONE:
            self._log_count += 1
            if self._log_count % 50 == 1:
                logger.warning("Approaching target without a wall side, holding last command")
            return None

        back, front = self.samples(frame, direction)
        diff = front - self.ratio * back
        turn = direction.sign * self.specs.angular_velocity / 4

        if -self.tolerance <= diff <= self.tolerance:
            return Command(self.specs.linear_velocity, 0.0)
        if diff > self.tolerance:
            return Command(0.0, -turn)
        return Command(0.0, turn)
