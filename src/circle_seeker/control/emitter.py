"""
Command emitter - The only place velocity commands leave the controller.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from circle_seeker.motion import Command

logger = logging.getLogger(__name__)


class CommandEmitter:
    """
    Forwards commands to a velocity sink (normally Motor.drive).

    A held cycle sends nothing, so the base keeps executing the previous
    command.
    """

    def __init__(self, sink: Callable[[float, float], None]):
        self.sink = sink
        self._last_command: Optional[Command] = None
        self.emitted = 0
        self.held = 0

    @property
    def last_command(self) -> Optional[Command]:
        return self._last_command

    def emit(self, command: Command) -> None:
        self.sink(command.linear, command.angular)
        self._last_command = command
        self.emitted += 1

    def hold(self) -> None:
        self.held += 1
        logger.debug(f"No command this cycle, keeping {self._last_command}")
