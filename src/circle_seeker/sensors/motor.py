"""
Base controller - Velocity commands over serial.

Handles:
- Sending (linear, angular) velocity commands
- Stop
"""

from __future__ import annotations

import logging

import serial

from circle_seeker.config import BASE_BAUDRATE, BASE_PORT

logger = logging.getLogger(__name__)


class Motor:
    """
    Differential drive base controller.

    Protocol (host -> base):
        V:<linear>,<angular>\\n  - linear m/s, angular rad/s (positive = left)
        S\\n                     - stop
    """

    def __init__(self, port: str = BASE_PORT, baudrate: int = BASE_BAUDRATE):
        self.port = port
        self.baudrate = baudrate

        self._serial: serial.Serial | None = None
        self._linear = 0.0
        self._angular = 0.0
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def linear(self) -> float:
        return self._linear

    @property
    def angular(self) -> float:
        return self._angular

    def connect(self) -> bool:
        """Open serial connection to the base."""
        try:
            self._serial = serial.Serial(
                port=self.port,
                baudrate=self.baudrate,
                timeout=0.005
            )
            self._connected = True
            logger.info(f"Connected to base on {self.port}")
            return True
        except serial.SerialException as e:
            logger.error(f"Failed to connect to base: {e}")
            self._connected = False
            return False

    def disconnect(self):
        """Close serial connection."""
        if self._serial:
            self.stop()
            self._serial.close()
            self._serial = None
        self._connected = False
        logger.info("Disconnected from base")

    def drive(self, linear: float, angular: float):
        """Set and send a velocity command."""
        self._linear = linear
        self._angular = angular
        self._send(f"V:{linear:.3f},{angular:.3f}\n")

    def stop(self):
        """Stop motors."""
        self._linear = 0.0
        self._angular = 0.0
        self._send("S\n")
        logger.info("Motors stopped")

    def _send(self, command: str):
        if not self._serial:
            logger.warning("Not connected to base")
            return
        self._serial.write(command.encode())
        logger.debug(f"Sent: {command.strip()}")

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.disconnect()
