"""
Wall following strategies - Obstacle avoidance by hugging a wall.

Takes MoveStatus and the current turn direction, returns a command
(or None) and the turn direction to use from now on.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Optional

from circle_seeker.motion import Command, MoveStatus, TurnDirection
from circle_seeker.params import MoveSpecs

logger = logging.getLogger(__name__)


class WallFollowStrategy(ABC):
    """Base class for wall following algorithms."""

    @abstractmethod
    def step(
        self, status: MoveStatus, direction: TurnDirection
    ) -> tuple[Optional[Command], TurnDirection]:
        """
        Decide this cycle's motion.

        Args:
            status: Clearance flags for this cycle. May be updated.
            direction: Current wall-follow side.

        Returns:
            (command, direction). command is None when nothing should be
            sent this cycle.
        """
        ...


class RandomSideWallFollow(WallFollowStrategy):
    """
    Drive straight until blocked, then pick a side at random and keep
    that wall on it for the rest of the run.

    Once following:
    - clear and close to the wall -> straight ahead
    - blocked -> turn on the spot toward the wall side's sign
    - clear but drifted away -> turn back toward the wall

    The random generator is injected so a whole run draws from one source.
    """

    def __init__(self, specs: MoveSpecs, rng: random.Random | None = None):
        self.specs = specs
        self.rng = rng or random.Random()

    def step(
        self, status: MoveStatus, direction: TurnDirection
    ) -> tuple[Optional[Command], TurnDirection]:
        linear = self.specs.linear_velocity
        angular = self.specs.angular_velocity

        if not status.is_following_wall:
            if not status.can_continue:
                # Path blocked for the first time: choose a side, no command
                direction = self.rng.choice((TurnDirection.LEFT, TurnDirection.RIGHT))
                status.is_following_wall = True
                logger.info(f"Path blocked, following wall on the {direction.name}")
                return None, direction
            return Command(linear, 0.0), direction

        if status.can_continue and status.is_close_to_wall:
            return Command(linear, 0.0), direction
        if not status.can_continue:
            return Command(0.0, direction.sign * angular), direction
        return Command(0.0, -direction.sign * angular), direction
