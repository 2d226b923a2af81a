"""
Web Layer - Debug interface.

Provides read-only JSON views of the controller state.
"""

from .server import create_app, run_server

__all__ = ["create_app", "run_server"]
