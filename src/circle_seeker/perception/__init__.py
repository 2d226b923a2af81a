"""
Perception Layer - What the robot sees this cycle.

- ScanIngest: Pairs the latest LIDAR scan with the latest circle detection
- ScanFrame, TargetObservation, ScanCycle: Observation types
"""

from .world_state import ScanCycle, ScanFrame, TargetObservation
from .ingest import ScanIngest

__all__ = [
    "ScanCycle",
    "ScanFrame",
    "TargetObservation",
    "ScanIngest",
]
