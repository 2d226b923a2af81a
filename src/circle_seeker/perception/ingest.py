"""
Scan ingest - Pairs the latest scan with the latest circle detection.

The lidar and the circle detector publish on their own cadence. Each
control cycle takes whatever both last published (last value wins);
there is no synchronization between them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from .world_state import ScanCycle, ScanFrame, TargetObservation

if TYPE_CHECKING:
    from circle_seeker.sensors import Camera, Lidar

logger = logging.getLogger(__name__)


class ScanIngest:
    """
    Builds one ScanCycle per new scan.

    Usage:
        ingest = ScanIngest(lidar, camera)

        # In control loop:
        cycle = ingest.update()
        if cycle is not None:
            command = state_machine.decide(cycle)
    """

    def __init__(self, lidar: Lidar, camera: Camera):
        self.lidar = lidar
        self.camera = camera
        self._last_frame: Optional[ScanFrame] = None
        self._last_timestamp = 0.0
        self._stale_count = 0

    def update(self) -> Optional[ScanCycle]:
        """
        Snapshot both sensors.

        Each scan is handed out once; the loop polls faster than the
        scanner rotates.

        Returns:
            ScanCycle, or None if no new complete scan has arrived.
        """
        frame = self.lidar.get_frame()
        if frame is None:
            return None

        if frame is self._last_frame or (frame.timestamp and frame.timestamp == self._last_timestamp):
            self._stale_count += 1
            if self._stale_count % 50 == 0:
                logger.debug(f"No new scan since t={frame.timestamp:.3f} ({self._stale_count} polls)")
            return None

        self._stale_count = 0
        self._last_frame = frame
        self._last_timestamp = frame.timestamp
        return ScanCycle(frame=frame, target=self.camera.get_target())

    @staticmethod
    def from_message(
        ranges: Sequence[float], circle_x: float, circle_y: float, timestamp: float = 0.0
    ) -> ScanCycle:
        """Build a cycle from a combined scan + circle message."""
        return ScanCycle(
            frame=ScanFrame.from_ranges(ranges, timestamp),
            target=TargetObservation(float(circle_x), float(circle_y)),
        )
