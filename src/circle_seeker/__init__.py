"""
Circle Seeker - Reactive wall-following robot that homes in on a circle.

Layers:
- sensors: LIDAR, camera circle detector, base controller
- perception: per-cycle observations
- strategies: sector analysis, clearance, wall follow, target approach
- decision: mode arbitration and the per-cycle state machine
- control: main loop and command output
- web: debug interface
"""

__version__ = "0.1.0"
