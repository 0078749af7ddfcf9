"""Orientation helpers: accelerometer calibration and yaw from DMP quaternions."""

from __future__ import annotations

import math

Q30_SCALE = 1073741824.0
"""Scale of the fixed-point quaternion components reported by the DMP (2**30)."""

YAW_NO_DATA = 404404.0
"""Reading reported when the sensor queue holds no data."""

YAW_WRONG_ID_BASE = 100000.0
"""Base added to the sensor status when the sensor reports a wrong ID."""

YAW_UNEXPECTED = -666666.0
"""Reading reported when the sensor is in an unexpected state."""

_VALID_YAW_LIMIT = 99999.0

_ROLL_MEASURED_MINUS_90 = -87.5
_ROLL_MEASURED_PLUS_90 = 88.0
_PITCH_MEASURED_MINUS_90 = -85.0
_PITCH_MEASURED_PLUS_90 = 87.0


def _two_point(val: float, measured_minus_90: float, measured_plus_90: float) -> float:
    return -90.0 + (val - measured_minus_90) * (180.0 / (measured_plus_90 - measured_minus_90))


def calibrated_roll(val: float) -> float:
    """Correct an accelerometer roll angle with a two-point calibration."""
    return _two_point(val, _ROLL_MEASURED_MINUS_90, _ROLL_MEASURED_PLUS_90)


def calibrated_pitch(val: float) -> float:
    """Correct an accelerometer pitch angle with a two-point calibration."""
    return _two_point(val, _PITCH_MEASURED_MINUS_90, _PITCH_MEASURED_PLUS_90)


def quat6_to_yaw(q1: int, q2: int, q3: int) -> float:
    """Return the yaw in degrees, in ``[-180, 180]``, of a DMP Quat6 reading.

    ``q1``, ``q2`` and ``q3`` are the raw fixed-point components; the scalar
    part is reconstructed from them.
    """
    x = q1 / Q30_SCALE
    y = q2 / Q30_SCALE
    z = q3 / Q30_SCALE
    w = math.sqrt(max(0.0, 1.0 - (x * x + y * y + z * z)))
    yaw = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
    return math.degrees(yaw)


def is_valid_yaw(yaw: float) -> bool:
    """Return True if ``yaw`` is a real reading rather than an error value."""
    return -_VALID_YAW_LIMIT < yaw < _VALID_YAW_LIMIT


class YawTracker:
    """Unwraps yaw readings so that a continuous rotation gives a continuous angle.

    Consecutive readings are assumed to differ by less than 180 degrees.
    """

    def __init__(self) -> None:
        self.last: float | None = None

    def update(self, yaw: float) -> float:
        """Return ``yaw`` shifted by whole turns to lie closest to the previous reading."""
        if self.last is None:
            self.last = yaw
            return yaw
        while yaw - self.last >= 180.0:
            yaw -= 360.0
        while yaw - self.last <= -180.0:
            yaw += 360.0
        self.last = yaw
        return yaw

    def from_quat6(self, q1: int, q2: int, q3: int) -> float:
        """Convert a raw Quat6 reading to yaw and unwrap it."""
        return self.update(quat6_to_yaw(q1, q2, q3))