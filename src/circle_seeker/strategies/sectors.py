"""
Sector analysis - Closest obstacle per scan sector.

Each sector (right, center, left) is an inclusive index window into the
scan frame, configured in params.json.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from circle_seeker.errors import InvalidWindow, WindowOutOfRange
from circle_seeker.params import MoveSpecs, SectorWindow
from circle_seeker.perception.world_state import ScanFrame


@dataclass(frozen=True)
class SectorDistances:
    """Minimum measured distance per sector (m). inf = nothing seen."""

    right: float
    center: float
    left: float


def min_in_window(ranges: Sequence[float] | ScanFrame, window: SectorWindow) -> float:
    """
    Smallest finite reading inside the window (bounds inclusive).

    Non-finite readings are beyond sensor range and count as no obstacle,
    so a window without any finite reading returns inf.

    Raises:
        InvalidWindow: window is empty (low > high).
        WindowOutOfRange: window bounds fall outside the frame.
    """
    if isinstance(ranges, ScanFrame):
        ranges = ranges.ranges

    if window.is_empty:
        raise InvalidWindow(f"Empty sector window [{window.low}, {window.high}]")
    if window.low < 0 or window.high >= len(ranges):
        raise WindowOutOfRange(
            f"Sector window [{window.low}, {window.high}] outside frame of {len(ranges)} readings"
        )

    values = np.asarray(ranges[window.low:window.high + 1], dtype=float)
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return math.inf
    return float(finite.min())


def analyze(frame: ScanFrame, specs: MoveSpecs) -> SectorDistances:
    """Minimum distance in each configured sector."""
    return SectorDistances(
        right=min_in_window(frame, specs.right_window),
        center=min_in_window(frame, specs.center_window),
        left=min_in_window(frame, specs.left_window),
    )
