"""
LIDAR sensor - RPLIDAR driver.

Provides continuous scanning with background thread.
Each complete rotation is published as a ScanFrame laid out by ScanGeometry.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from typing import Optional

import numpy as np
from pyrplidar import PyRPlidar

from circle_seeker.config import (
    LIDAR_BAUDRATE,
    LIDAR_FILL_MAX_DEG,
    LIDAR_MIN_DISTANCE,
    LIDAR_MIN_QUALITY,
    LIDAR_MOTOR_PWM,
    LIDAR_PORT,
)
from circle_seeker.params import ScanGeometry
from circle_seeker.perception.world_state import ScanFrame

logger = logging.getLogger(__name__)


def bin_index(geometry: ScanGeometry, angle_deg: float) -> Optional[int]:
    """
    Frame index for a raw LIDAR angle, or None if outside the frame.

    The RPLIDAR reports angles clockwise from forward; frame bearings are
    counter-clockwise.
    """
    bearing = (-angle_deg + 180.0) % 360.0 - 180.0
    index = geometry.index_of(bearing)
    if 0 <= index < geometry.beam_count:
        return index
    return None


def build_frame(
    geometry: ScanGeometry,
    readings: dict[int, float],
    timestamp: float,
    max_gap_deg: float = LIDAR_FILL_MAX_DEG,
) -> ScanFrame:
    """
    Frame from index -> distance (m).

    The scanner's angular spacing is coarser than the frame grid, so one
    rotation leaves empty beams between readings. Each empty beam takes the
    nearest reading within max_gap_deg; beams farther from any reading are inf.
    """
    ranges = np.full(geometry.beam_count, np.inf)
    if not readings:
        return ScanFrame(tuple(ranges.tolist()), timestamp)

    indices = np.array(sorted(readings))
    ranges[indices] = [readings[i] for i in indices]

    beams = np.arange(geometry.beam_count)
    after = np.searchsorted(indices, beams)
    left = indices[np.clip(after - 1, 0, len(indices) - 1)]
    right = indices[np.clip(after, 0, len(indices) - 1)]
    nearest = np.where(np.abs(beams - left) <= np.abs(right - beams), left, right)

    max_gap = int(max_gap_deg / geometry.angle_increment_deg)
    fill = np.abs(nearest - beams) <= max_gap
    ranges[fill] = ranges[nearest[fill]]
    return ScanFrame(tuple(ranges.tolist()), timestamp)


class Lidar:
    """
    RPLIDAR driver with background scanning.

    Usage:
        lidar = Lidar(specs.geometry)
        lidar.start()

        # Get latest complete rotation
        frame = lidar.get_frame()  # ScanFrame or None

        lidar.stop()
    """

    def __init__(
        self,
        geometry: ScanGeometry,
        port: str = LIDAR_PORT,
        baudrate: int = LIDAR_BAUDRATE,
        motor_pwm: int = LIDAR_MOTOR_PWM,
    ):
        self.geometry = geometry
        self.port = port
        self.baudrate = baudrate
        self.motor_pwm = motor_pwm

        self._lidar: PyRPlidar | None = None
        self._running = False
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

        self._frame: ScanFrame | None = None

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> bool:
        """Start LIDAR scanning in background thread."""
        if self._running:
            logger.warning("LIDAR already running")
            return True

        try:
            self._lidar = PyRPlidar()
            self._lidar.connect(port=self.port, baudrate=self.baudrate)
            self._lidar.set_motor_pwm(self.motor_pwm)
            time.sleep(1)  # Let motor spin up

            self._running = True
            self._thread = threading.Thread(target=self._scan_loop, daemon=True)
            self._thread.start()

            logger.info(f"LIDAR started on {self.port}")
            return True

        except Exception as e:
            logger.error(f"Failed to start LIDAR: {e}")
            self._running = False
            return False

    def stop(self):
        """Stop LIDAR scanning."""
        self._running = False

        if self._thread:
            self._thread.join(timeout=2.0)
            self._thread = None

        if self._lidar:
            try:
                self._lidar.stop()
                self._lidar.set_motor_pwm(0)
                self._lidar.disconnect()
            except Exception as e:
                logger.error(f"Error stopping LIDAR: {e}")
            self._lidar = None

        logger.info("LIDAR stopped")

    def get_frame(self) -> Optional[ScanFrame]:
        """Latest complete rotation, or None before the first one."""
        with self._lock:
            return self._frame

    def _scan_loop(self):
        """Background scanning thread."""
        try:
            scan_generator = self._lidar.start_scan()
            current: dict[int, float] = {}

            for reading in scan_generator():
                if not self._running:
                    break

                # New rotation: publish the one just completed
                if reading.start_flag and current:
                    frame = build_frame(self.geometry, current, time.time())
                    with self._lock:
                        self._frame = frame
                    current = {}

                distance = reading.distance / 1000.0  # mm -> m
                if distance < LIDAR_MIN_DISTANCE or reading.quality < LIDAR_MIN_QUALITY:
                    continue

                index = bin_index(self.geometry, reading.angle)
                if index is None:
                    continue

                # Keep the closest return per beam
                if distance < current.get(index, math.inf):
                    current[index] = distance

        except Exception as e:
            if self._running:
                logger.error(f"LIDAR scan error: {e}")

    def __enter__(self):
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()
