"""
Mode arbiter - When to stop wall following and go for the circle.
"""

from __future__ import annotations

from circle_seeker.motion import TurnDirection
from circle_seeker.params import MoveSpecs
from circle_seeker.perception.world_state import ScanFrame, TargetObservation

# Facing-wall distance assumed before a wall side is chosen
DEFAULT_WALL_DISTANCE = 1.0


class ModeArbiter:
    """
    Decides whether the detected circle is reachable.

    The circle must be centered (|x| < 0.5), closer than 1 m ahead, and
    nearer than the facing wall, so the wall itself is not taken for the
    target.
    """

    def __init__(self, specs: MoveSpecs, margin: float = 0.5, max_offset: float = 0.5, max_range: float = 1.0):
        self.specs = specs
        self.margin = margin
        self.max_offset = max_offset
        self.max_range = max_range

    def wall_distance(self, frame: ScanFrame, direction: TurnDirection) -> float:
        """Facing-wall reading for the current side. Raises OutOfRange."""
        geometry = self.specs.geometry
        if direction is TurnDirection.RIGHT:
            return frame[geometry.index_of(geometry.wall_probe_right_deg)]
        if direction is TurnDirection.LEFT:
            return frame[geometry.index_of(geometry.wall_probe_left_deg)]
        return DEFAULT_WALL_DISTANCE

    def should_switch(
        self, frame: ScanFrame, target: TargetObservation, direction: TurnDirection
    ) -> bool:
        wall = self.wall_distance(frame, direction)
        x, y = target.circle_x, target.circle_y
        threshold = x * x + y * y + self.margin
        return (
            wall * wall > threshold
            and -self.max_offset < x < self.max_offset
            and y < self.max_range
        )
