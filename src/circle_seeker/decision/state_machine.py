"""
State machine for robot control.

Two modes: wall following (default) and target approach. The switch to
target approach is one-way. Each mode delegates to a swappable strategy
for computing the velocity command.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from circle_seeker.motion import Command, MoveStatus, TurnDirection
from circle_seeker.params import MoveSpecs
from circle_seeker.perception import ScanCycle, TargetObservation
from circle_seeker.strategies import (
    ApproachStrategy,
    CircleAlignment,
    ClearancePolicy,
    RandomSideWallFollow,
    SectorDistances,
    WallFollowStrategy,
    analyze,
)

from .arbiter import ModeArbiter

logger = logging.getLogger(__name__)


class RobotState(Enum):
    """Robot mode enumeration."""

    WALL_FOLLOW = auto()
    APPROACH_TARGET = auto()


@dataclass
class ControllerState:
    """Everything that carries over from one cycle to the next."""

    mode: RobotState = RobotState.WALL_FOLLOW
    turn_direction: TurnDirection = TurnDirection.NONE
    move_status: MoveStatus = field(default_factory=MoveStatus)
    last_target: TargetObservation = field(default_factory=TargetObservation.absent)
    cycles: int = 0

    @property
    def hit_mode(self) -> bool:
        return self.mode is RobotState.APPROACH_TARGET


class StateMachine:
    """
    Per-cycle decision engine.

    States:
    - WALL_FOLLOW: Drive ahead, follow a randomly chosen wall once blocked
    - APPROACH_TARGET: Circle judged reachable, align on it (never left)

    Usage:
        sm = StateMachine(specs, rng=random.Random(seed))

        # In control loop:
        command = sm.decide(cycle)
        if command is not None:
            emitter.emit(command)

        # With custom strategies:
        sm = StateMachine(specs, approach=CircleAlignment(specs, tolerance=0.03))
    """

    def __init__(
        self,
        specs: MoveSpecs,
        wall_follow: WallFollowStrategy = None,
        approach: ApproachStrategy = None,
        arbiter: ModeArbiter = None,
        rng: random.Random = None,
    ):
        self.specs = specs
        self.state = ControllerState()
        self.last_sectors: Optional[SectorDistances] = None

        # Strategies
        self.clearance = ClearancePolicy(specs)
        self.wall_follow = wall_follow or RandomSideWallFollow(specs, rng=rng)
        self.approach = approach or CircleAlignment(specs)
        self.arbiter = arbiter or ModeArbiter(specs)

    @property
    def hit_mode(self) -> bool:
        return self.state.hit_mode

    def decide(self, cycle: ScanCycle) -> Optional[Command]:
        """
        Decide the velocity command for one scan cycle.

        The cycle on which the target becomes reachable is still handled
        by wall following; approach starts with the next cycle.

        Args:
            cycle: Latest scan and circle observation.

        Returns:
            Command, or None when the previous command should stay active.

        Raises:
            ScanError: The frame does not cover a configured index.
            InvariantViolation: Following a wall without a side.
        """
        state = self.state
        state.cycles += 1

        if state.mode is RobotState.APPROACH_TARGET:
            return self.approach.compute(cycle.frame, state.turn_direction)

        # Frame reads first: a scan fault must not latch the mode or the target
        sectors = analyze(cycle.frame, self.specs)
        self._check_transitions(cycle)

        state.last_target = cycle.target
        self.last_sectors = sectors
        self.clearance.update(state.move_status, sectors, state.turn_direction)

        command, state.turn_direction = self.wall_follow.step(
            state.move_status, state.turn_direction
        )
        return command

    def _check_transitions(self, cycle: ScanCycle) -> None:
        """Latch into target approach when the circle is reachable."""
        if self.arbiter.should_switch(cycle.frame, cycle.target, self.state.turn_direction):
            self.state.mode = RobotState.APPROACH_TARGET
            t = cycle.target
            logger.info(
                f"Transition: WALL_FOLLOW -> APPROACH_TARGET "
                f"(circle x={t.circle_x:.2f} y={t.circle_y:.2f}, side={self.state.turn_direction.name})"
            )

    def snapshot(self) -> dict:
        """Current state as plain data for the web interface."""
        state = self.state
        status = state.move_status
        sectors = self.last_sectors
        return {
            "mode": state.mode.name,
            "hit_mode": state.hit_mode,
            "turn_direction": state.turn_direction.name,
            "can_continue": status.can_continue,
            "is_close_to_wall": status.is_close_to_wall,
            "is_following_wall": status.is_following_wall,
            "target": {
                "x": state.last_target.circle_x,
                "y": state.last_target.circle_y,
                "present": state.last_target.is_present,
            },
            "sectors": None if sectors is None else {
                "right": sectors.right,
                "center": sectors.center,
                "left": sectors.left,
            },
            "cycles": state.cycles,
        }
