"""
Decision Layer - What to do.

Contains:
- StateMachine: Per-cycle decision engine (wall follow / target approach)
- ModeArbiter: One-way switch into target approach
"""

from .arbiter import ModeArbiter
from .state_machine import ControllerState, RobotState, StateMachine

__all__ = ["ControllerState", "ModeArbiter", "RobotState", "StateMachine"]
