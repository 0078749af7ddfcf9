"""Shared limits, clamping helpers and text formatting of sensor readings."""

from __future__ import annotations

import math
from collections.abc import Sequence

ARRAY_SIZE = 500
"""Length of the slower measurement logs."""

PID_ARRAY_SIZE = 2000
"""Length of the control-loop logs."""

DO_LOWPASS = True
IMU_LOWPASS_ALPHA = 0.284
ALPHA_COMPLEMENTARY = 0.1

DEADBAND = 80
"""Smallest PWM that makes the motors move."""

MAX_PWM = 255.0
MIN_PWM = -255.0

MAX_INTEGRAL = 300.0

DO_DEBUG = True

_INT16_MIN = -32768
_INT16_MAX = 32767


def index_out_of_bounds(index: int) -> bool:
    """Return True if ``index`` is not a valid position in an ``ARRAY_SIZE`` log."""
    return not 0 <= index < ARRAY_SIZE


def clamp(val: float, low: float, high: float) -> float:
    """Limit ``val`` to the range ``[low, high]``."""
    if val > high:
        return high
    if val < low:
        return low
    return val


def calculate_motor_drive_actual(p: float, i: float, d: float) -> int:
    """Return the PWM actually sent to the motors for the given PID terms.

    The sum is clamped to the PWM range; its magnitude is then raised to at
    least the deadband. A zero sum is treated as a reverse drive.
    """
    total = p + i + d
    raw = clamp(total, MIN_PWM, MAX_PWM)
    if raw > 0:
        return int(clamp(total, DEADBAND, MAX_PWM))
    return -int(clamp(-total, DEADBAND, MAX_PWM))


def format_padded_int16(val: int) -> str:
    """Format a 16-bit integer as a sign character followed by five digits.

    Positive values get a leading space, zero and negative values a minus sign.
    """
    if not _INT16_MIN <= val <= _INT16_MAX:
        raise ValueError(f"{val} does not fit in a signed 16-bit integer")
    sign = " " if val > 0 else "-"
    return f"{sign}{abs(val):05d}"


def format_raw_agmt(
    acc: Sequence[int], gyr: Sequence[int], mag: Sequence[int], tmp: int
) -> str:
    """Format raw accelerometer, gyroscope, magnetometer and temperature readings."""

    def axes(values: Sequence[int]) -> str:
        x, y, z = values
        return ", ".join(format_padded_int16(v) for v in (x, y, z))

    return (
        f"RAW. Acc [ {axes(acc)} ], Gyr [ {axes(gyr)} ], "
        f"Mag [ {axes(mag)} ], Tmp [ {format_padded_int16(tmp)} ]"
    )


def format_formatted_float(val: float, leading: int, decimals: int) -> str:
    """Format a number with a sign column, zero padding to ``leading`` digits and fixed decimals."""
    aval = abs(val)
    sign = "-" if val < 0 else " "
    zeros = 0
    for position in range(leading):
        threshold = 10 ** (leading - 1 - position) if position < leading - 1 else 0
        if aval < threshold:
            zeros += 1
        else:
            break
    return f"{sign}{'0' * zeros}{aval:.{decimals}f}"


def format_scaled_agmt(
    acc: Sequence[float], gyr: Sequence[float], mag: Sequence[float], temp: float
) -> str:
    """Format scaled sensor readings and the pitch and roll derived from the accelerometer."""

    def axes(values: Sequence[float]) -> str:
        x, y, z = values
        return ", ".join(format_formatted_float(v, 5, 2) for v in (x, y, z))

    acc_x, acc_y, acc_z = acc
    readings = (
        f"Scaled. Acc (mg) [ {axes(acc)} ], Gyr (DPS) [ {axes(gyr)} ], "
        f"Mag (uT) [ {axes(mag)} ], Tmp (C) [ {format_formatted_float(temp, 5, 2)} ]"
    )
    theta = math.degrees(math.atan2(acc_x, acc_z))
    phi = math.degrees(math.atan2(acc_y, acc_z))
    angles = (
        f"Acc. Pitch (deg) [ {format_formatted_float(theta, 3, 3)} ] "
        f"Acc. Roll (deg) [ {format_formatted_float(phi, 3, 3)} ]  "
    )
    return f"{readings}\n{angles}"