"""PID controller with a filtered derivative and logging of each control step."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from robotctl.lpf import LowPassFilter
from robotctl.utils import ARRAY_SIZE, DO_DEBUG, MAX_PWM, MIN_PWM, PID_ARRAY_SIZE, clamp

logger = logging.getLogger(__name__)

DEFAULT_DT = 0.02
"""Control period in seconds, also the upper bound on a measured period."""

_NO_PREVIOUS = -1.0


def _millis() -> int:
    return time.monotonic_ns() // 1_000_000


class PIDController:
    """PID controller whose output is a PWM value in ``[MIN_PWM, MAX_PWM]``.

    ``clock`` returns the current time in milliseconds.
    """

    def __init__(
        self,
        setpoint: float = 0.0,
        kp: float = 0.0,
        ki: float = 0.0,
        kd: float = 0.0,
        dt: float = DEFAULT_DT,
        alpha: float = 0.1,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.setpoint = setpoint
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self.pid_dt = dt
        self.accumulator = 0.0
        self.prev_val = _NO_PREVIOUS
        self.clock = clock if clock is not None else _millis

        self.pid_index = 0
        self.pwm_history = [0] * ARRAY_SIZE
        self.time_array = [0] * ARRAY_SIZE
        self.meas_array = [0.0] * ARRAY_SIZE
        self.setpoint_array = [0.0] * ARRAY_SIZE

        self.pid_control_index = 0
        self.pid_timestamp_array = [0] * PID_ARRAY_SIZE
        self.p_array = [0.0] * PID_ARRAY_SIZE
        self.i_array = [0.0] * PID_ARRAY_SIZE
        self.d_array = [0.0] * PID_ARRAY_SIZE

        self.do_pid = False
        self.pid_start_time = 0
        self.pid_prev_time = 0
        self.derivative_filter = LowPassFilter(alpha)

    def set_gains(self, kp: float, ki: float, kd: float) -> None:
        """Replace the proportional, integral and derivative gains."""
        self.kp = kp
        self.ki = ki
        self.kd = kd

    def compute(self, pos: float) -> int:
        """Return the PWM for measurement ``pos``; call once per control step."""
        error = pos - self.setpoint
        cur_time = self.clock()

        if self.pid_prev_time != 0:
            self.pid_dt = clamp((cur_time - self.pid_prev_time) / 1000.0, 0.0, DEFAULT_DT)
        self.pid_prev_time = cur_time

        self.accumulator += error * self.pid_dt

        # No derivative on the first step, nor when no time has passed.
        if self.prev_val != _NO_PREVIOUS and self.pid_dt > 0:
            raw_derivative = (pos - self.prev_val) / self.pid_dt
        else:
            raw_derivative = 0.0

        filtered_derivative = self.derivative_filter.update(raw_derivative)
        self.prev_val = pos

        p = self.kp * error
        i = self.ki * self.accumulator
        d = self.kd * filtered_derivative
        output = int(clamp(p + i + d, MIN_PWM, MAX_PWM))

        index = self.pid_control_index
        if index < PID_ARRAY_SIZE:
            self.pid_timestamp_array[index] = cur_time
            self.p_array[index] = p
            self.i_array[index] = i
            self.d_array[index] = d

        if DO_DEBUG:
            logger.debug(
                "PID Control--- Pos: %s | Error: %s | P: %s | I: %s | D: %s | dt:%s | "
                "accum:%s | Prev value:%s | Total output: %s",
                pos, error, p, i, d, self.pid_dt, self.accumulator, self.prev_val, output,
            )

        self.pid_control_index += 1
        return output

    def linear_extrapolate(self) -> float:
        """Predict the current measurement from the last two logged ones."""
        index = self.pid_index
        if index <= 1:
            return self.meas_array[index]
        if index >= ARRAY_SIZE:
            logger.warning("array out of bounds reached in linear extrapolation")
            return self.meas_array[ARRAY_SIZE - 1]
        slope = (self.meas_array[index - 1] - self.meas_array[index - 2]) / (
            self.time_array[index - 1] - self.time_array[index - 2]
        )
        local_dt = self.clock() - self.time_array[index - 1]
        return self.meas_array[index - 1] + slope * local_dt

    def reset_accumulator(self) -> None:
        """Clear the integral term."""
        self.accumulator = 0.0

    def reset(self) -> None:
        """Clear the state and logs ready for a fresh control run."""
        self.pid_dt = DEFAULT_DT
        self.accumulator = 0.0
        self.prev_val = _NO_PREVIOUS
        self.pid_index = 0
        self.pid_control_index = 0

        self.time_array = [0] * ARRAY_SIZE
        self.pwm_history = [0] * ARRAY_SIZE
        self.meas_array = [0.0] * ARRAY_SIZE
        self.setpoint_array = [0.0] * ARRAY_SIZE

        self.pid_timestamp_array = [0] * PID_ARRAY_SIZE
        self.p_array = [0.0] * PID_ARRAY_SIZE
        self.i_array = [0.0] * PID_ARRAY_SIZE
        self.d_array = [0.0] * PID_ARRAY_SIZE

        self.pid_start_time = self.clock()