"""
Exceptions raised by the navigation stack.

Scan faults (ScanError and subclasses) are cycle-local: the controller
skips the cycle and keeps running. ConfigError, HardwareError and
InvariantViolation end the process.
"""


class CircleSeekerError(Exception):
    """Base class for all circle seeker errors."""


class ConfigError(CircleSeekerError):
    """Missing or malformed configuration value."""


class InvariantViolation(CircleSeekerError):
    """Controller reached a state that must not happen."""


class HardwareError(CircleSeekerError):
    """A sensor or the base controller could not be started."""


class ScanError(CircleSeekerError):
    """A scan frame could not be used for this cycle."""


class InvalidWindow(ScanError):
    """Sector window is empty or does not fit the frame."""


class OutOfRange(ScanError, IndexError):
    """Index outside the valid range of the scan frame."""


class WindowOutOfRange(InvalidWindow, OutOfRange):
    """Sector window bounds exceed the scan frame."""
