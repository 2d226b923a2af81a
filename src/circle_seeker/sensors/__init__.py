"""
Sensor Layer - Hardware interfaces.

Provides access to all robot hardware:
- Lidar: RPLIDAR for range scans
- Camera: circle detection for the target
- Motor: base controller for velocity commands
"""

from .lidar import Lidar
from .camera import Camera
from .motor import Motor

__all__ = ["Lidar", "Camera", "Motor"]
