"""
Clearance policy - Is the way ahead clear, and is the followed wall close?

Takes sector minima, returns the two flags of MoveStatus.
"""

from __future__ import annotations

from circle_seeker.errors import InvariantViolation
from circle_seeker.motion import MoveStatus, TurnDirection
from circle_seeker.params import MoveSpecs

from .sectors import SectorDistances


class ClearancePolicy:
    """
    Security distance checks against the configured thresholds.

    The sector on the wall-follow side is checked together with the center
    against high_security_distance; the opposite sector only needs
    low_security_distance. Before a side is chosen all three sectors must
    clear both.
    """

    def __init__(self, specs: MoveSpecs):
        self.specs = specs

    def evaluate_can_continue(
        self, right: float, left: float, center: float, direction: TurnDirection
    ) -> bool:
        if direction is TurnDirection.RIGHT:
            priority = min(center, right)
            secondary = left
        elif direction is TurnDirection.LEFT:
            priority = min(center, left)
            secondary = right
        else:
            priority = secondary = min(right, left, center)

        return (
            priority > self.specs.high_security_distance
            and secondary > self.specs.low_security_distance
        )

    def evaluate_close_to_wall(
        self, right: float, left: float, direction: TurnDirection, is_following_wall: bool
    ) -> bool:
        """
        Whether the followed wall is nearer than wall_follow_distance.

        Raises:
            InvariantViolation: following a wall without a turn direction.
        """
        if not is_following_wall:
            return False

        if direction is TurnDirection.RIGHT:
            distance = right
        elif direction is TurnDirection.LEFT:
            distance = left
        else:
            raise InvariantViolation("Following a wall with turn direction NONE")

        return distance < self.specs.wall_follow_distance

    def update(self, status: MoveStatus, sectors: SectorDistances, direction: TurnDirection) -> None:
        """Refresh status flags from this cycle's sector minima."""
        status.can_continue = self.evaluate_can_continue(
            sectors.right, sectors.left, sectors.center, direction
        )
        if status.is_following_wall:
            status.is_close_to_wall = self.evaluate_close_to_wall(
                sectors.right, sectors.left, direction, True
            )
