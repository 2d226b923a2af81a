"""
Camera sensor - Circle detection with OpenCV.

Runs capture and detection in a background thread at a fixed rate and
keeps only the latest result. Positions are estimated with a pinhole
model from the known physical circle diameter.
"""

from __future__ import annotations

import logging
import math
import threading
import time

import cv2
import numpy as np

from circle_seeker.config import (
    CAMERA_FOV,
    CAMERA_HEIGHT,
    CAMERA_INDEX,
    CAMERA_WIDTH,
    CIRCLE_DIAMETER,
    CIRCLE_MAX_RADIUS,
    CIRCLE_MIN_RADIUS,
    DETECTION_HZ,
    HOUGH_ACCUMULATOR_THRESHOLD,
    HOUGH_CANNY_THRESHOLD,
    HOUGH_DP,
    HOUGH_MIN_DIST,
)
from circle_seeker.perception.world_state import TargetObservation

logger = logging.getLogger(__name__)


class Camera:
    """
    Camera with circle detection.

    Usage:
        camera = Camera()
        camera.start()

        target = camera.get_target()
        if target.is_present:
            print(f"circle at x={target.circle_x} y={target.circle_y}")

        camera.stop()
    """

    def __init__(
        self,
        index: int = CAMERA_INDEX,
        width: int = CAMERA_WIDTH,
        height: int = CAMERA_HEIGHT,
        fov: float = CAMERA_FOV,
        rate_hz: float = DETECTION_HZ,
        circle_diameter: float = CIRCLE_DIAMETER,
    ):
        self.index = index
        self.width = width
        self.height = height
        self.fov = fov
        self.period = 1.0 / rate_hz
        self.circle_diameter = circle_diameter

        # Focal length in pixels from the horizontal field of view
        self.focal_px = (width / 2) / math.tan(math.radians(fov) / 2)

        self._cap: cv2.VideoCapture | None = None
        self._running = False
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

        # Latest detection result
        self._target = TargetObservation.absent()

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> bool:
        """Start camera capture in background thread."""
        if self._running:
            logger.warning("Camera already running")
            return True

        self._cap = cv2.VideoCapture(self.index)
        self._cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        self._cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)

        if not self._cap.isOpened():
            logger.error("Failed to open camera")
            return False

        logger.info(f"Camera started: {self.width}x{self.height}, detecting at {1 / self.period:.0f} Hz")

        self._running = True
        self._thread = threading.Thread(target=self._capture_loop, daemon=True)
        self._thread.start()
        return True

    def stop(self):
        """Stop camera capture."""
        self._running = False

        if self._thread:
            self._thread.join(timeout=2.0)
            self._thread = None

        if self._cap:
            self._cap.release()
            self._cap = None

        logger.info("Camera stopped")

    def get_target(self) -> TargetObservation:
        """Latest circle observation (absent sentinel if none)."""
        with self._lock:
            return self._target

    def estimate_position(self, pixel_x: float, radius_px: float) -> TargetObservation:
        """
        Circle position (m) from its image center column and radius.

        Forward distance from apparent size, lateral offset from the
        column's distance to the image center.
        """
        forward = self.focal_px * self.circle_diameter / (2 * radius_px)
        lateral = (pixel_x - self.width / 2) * forward / self.focal_px
        return TargetObservation(lateral, forward)

    def detect(self, frame: np.ndarray) -> TargetObservation:
        """Find the largest circle in a BGR frame."""
        gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        gray = cv2.medianBlur(gray, 5)

        circles = cv2.HoughCircles(
            gray,
            cv2.HOUGH_GRADIENT,
            dp=HOUGH_DP,
            minDist=HOUGH_MIN_DIST,
            param1=HOUGH_CANNY_THRESHOLD,
            param2=HOUGH_ACCUMULATOR_THRESHOLD,
            minRadius=CIRCLE_MIN_RADIUS,
            maxRadius=CIRCLE_MAX_RADIUS,
        )
        if circles is None:
            return TargetObservation.absent()

        # Largest radius = closest circle
        x, _, radius = max(circles[0], key=lambda c: c[2])
        return self.estimate_position(float(x), float(radius))

    def _capture_loop(self):
        """Background capture and detection thread."""
        while self._running:
            t0 = time.monotonic()
            try:
                ret, frame = self._cap.read()
                if ret:
                    target = self.detect(frame)
                    if target.is_present:
                        logger.debug(f"Detecting circle: {target.circle_x:.2f} {target.circle_y:.2f}")

                    with self._lock:
                        self._target = target

            except Exception as e:
                if self._running:
                    logger.error(f"Camera capture error: {e}")

            time.sleep(max(0.0, self.period - (time.monotonic() - t0)))

    def __enter__(self):
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()
