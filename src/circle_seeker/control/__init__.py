"""
Control Layer - Execution.

Main control loop that coordinates all other layers, and the single
exit point for velocity commands.
"""

from .emitter import CommandEmitter
from .controller import Controller

__all__ = ["CommandEmitter", "Controller"]
