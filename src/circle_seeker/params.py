"""
Motion parameters loaded once at startup from JSON.

MoveSpecs is frozen after load; every decision component reads it and
nothing writes it. Unlike hardware constants in config.py, all of these
values must be present in the params file: a missing or non-numeric value
raises ConfigError and the robot never starts.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

from circle_seeker.errors import ConfigError

logger = logging.getLogger(__name__)

PARAMS_FILE = Path(__file__).parent / "params.json"

DISTANCE_FIELDS = (
    "high_security_distance",
    "low_security_distance",
    "wall_follow_distance",
    "linear_velocity",
    "angular_velocity",
)
WINDOW_FIELDS = ("right_window", "left_window", "center_window")


@dataclass(frozen=True)
class SectorWindow:
    """Inclusive index range into a scan frame."""

    low: int
    high: int

    @property
    def is_empty(self) -> bool:
        return self.low > self.high


@dataclass(frozen=True)
class ScanGeometry:
    """
    Angular layout of a scan frame.

    Bearings are in degrees, counter-clockwise positive, 0 = straight ahead.
    The defaults describe a 270° scanner with 720 beams, which places the
    probe bearings on indices 380, 340, 90 and 630.
    """

    angle_min_deg: float = -135.0
    angle_increment_deg: float = 0.375
    beam_count: int = 720

    # Facing-wall probe used by the mode arbiter, per turn direction
    wall_probe_right_deg: float = 7.5
    wall_probe_left_deg: float = -7.5

    # Front sample used by the target approach alignment, per turn direction
    approach_front_right_deg: float = -101.25
    approach_front_left_deg: float = 101.25

    def index_of(self, bearing_deg: float) -> int:
        """Scan index closest to a bearing."""
        return int(round((bearing_deg - self.angle_min_deg) / self.angle_increment_deg))

    def bearing_of(self, index: int) -> float:
        """Bearing (degrees) of a scan index."""
        return self.angle_min_deg + index * self.angle_increment_deg


@dataclass(frozen=True)
class MoveSpecs:
    """Thresholds, velocities and sector windows for the controller."""

    high_security_distance: float
    low_security_distance: float
    wall_follow_distance: float
    linear_velocity: float
    angular_velocity: float
    right_window: SectorWindow
    left_window: SectorWindow
    center_window: SectorWindow
    geometry: ScanGeometry = field(default_factory=ScanGeometry)

    @classmethod
    def load(cls, path: Path | str | None = None) -> MoveSpecs:
        """Load from a JSON file. Raises ConfigError on any problem."""
        path = Path(path) if path is not None else PARAMS_FILE
        try:
            with open(path) as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e

        specs = cls.from_dict(data)
        logger.info(f"Parameters loaded from {path}")
        return specs

    @classmethod
    def from_dict(cls, data: dict) -> MoveSpecs:
        if not isinstance(data, dict):
            raise ConfigError("Parameters must be a JSON object")

        missing = [k for k in DISTANCE_FIELDS + WINDOW_FIELDS if k not in data]
        if missing:
            raise ConfigError(f"Missing parameters: {', '.join(missing)}")

        values = {k: _number(k, data[k]) for k in DISTANCE_FIELDS}
        for key in WINDOW_FIELDS:
            values[key] = _window(key, data[key])

        if "geometry" in data:
            values["geometry"] = _geometry(data["geometry"])

        return cls(**values)

    def to_dict(self) -> dict:
        """Convert to dict for JSON API."""
        return asdict(self)


def _number(key: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigError(f"{key} must be finite, got {value!r}")
    return float(value)


def _index(key: str, value) -> int:
    number = _number(key, value)
    if not number.is_integer():
        raise ConfigError(f"{key} must be an integer index, got {value!r}")
    return int(number)


def _window(key: str, value) -> SectorWindow:
    if not isinstance(value, dict):
        raise ConfigError(f"{key} must be an object with 'low' and 'high'")
    for bound in ("low", "high"):
        if bound not in value:
            raise ConfigError(f"Missing parameters: {key}.{bound}")
    return SectorWindow(
        low=_index(f"{key}.low", value["low"]),
        high=_index(f"{key}.high", value["high"]),
    )


def _geometry(value) -> ScanGeometry:
    if not isinstance(value, dict):
        raise ConfigError("geometry must be an object")
    known = {f.name for f in fields(ScanGeometry)}
    unknown = set(value) - known
    if unknown:
        raise ConfigError(f"Unknown geometry keys: {', '.join(sorted(unknown))}")

    kwargs = {}
    for key, raw in value.items():
        if key == "beam_count":
            kwargs[key] = _index(f"geometry.{key}", raw)
        else:
            kwargs[key] = _number(f"geometry.{key}", raw)

    geometry = ScanGeometry(**kwargs)
    if geometry.angle_increment_deg <= 0:
        raise ConfigError("geometry.angle_increment_deg must be positive")
    if geometry.beam_count <= 0:
        raise ConfigError("geometry.beam_count must be positive")
    return geometry
