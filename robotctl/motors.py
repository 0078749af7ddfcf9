"""Motor driver for the two-wheel robot."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable

from robotctl.utils import DEADBAND, MAX_PWM, clamp

SERIAL_PORT = "Serial"
CS_PIN = 2
AD0_VAL = 1
XSHUT = 8
ALT_I2C = 0x30

M1_IN1 = 5
M1_IN2 = 2
M2_IN1 = 12
M2_IN2 = 15

PINS = (M1_IN1, M1_IN2, M2_IN1, M2_IN2)

_MIN_ANGLE_PWM = 3


class Side(enum.Enum):
    """Spin direction: LEFT is counter-clockwise, RIGHT clockwise."""

    LEFT = 0
    RIGHT = 1


class Direction(enum.Enum):
    """Straight-line driving direction."""

    FORWARD = 0
    BACKWARD = 1


def _sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000.0)


class MotorDriver:
    """Drives the motor pins through ``write(pin, value)``.

    ``sleep`` waits the given number of milliseconds. ``left_percent`` and
    ``right_percent`` scale the PWM of each side when driving straight.
    """

    def __init__(
        self,
        write: Callable[[int, int], None],
        sleep: Callable[[float], None] | None = None,
        left_percent: float = 1.0,
        right_percent: float = 1.0,
    ) -> None:
        self.write = write
        self.sleep = sleep if sleep is not None else _sleep_ms
        self.left_percent = left_percent
        self.right_percent = right_percent

    def _set(self, m1_in1: int, m1_in2: int, m2_in1: int, m2_in2: int) -> None:
        for pin, value in zip(PINS, (m1_in1, m1_in2, m2_in1, m2_in2)):
            self.write(pin, value)

    def spin(self, side: Side, pwm: int) -> None:
        """Turn on the spot towards ``side``."""
        if side is Side.LEFT:
            self._set(0, pwm, pwm, 0)
        elif side is Side.RIGHT:
            self._set(pwm, 0, 0, pwm)
        else:
            raise ValueError(f"unknown side {side!r}")

    def drive(self, direction: Direction, pwm: int) -> None:
        """Drive straight in ``direction``."""
        left = int(pwm * self.left_percent)
        right = int(pwm * self.right_percent)
        if direction is Direction.FORWARD:
            self._set(left, 0, right, 0)
        elif direction is Direction.BACKWARD:
            self._set(0, left, 0, right)
        else:
            raise ValueError(f"unknown direction {direction!r}")

    def brake(self) -> None:
        """Short both motors to brake actively."""
        self._set(255, 255, 255, 255)

    def stop(self) -> None:
        """Let both motors coast."""
        self._set(0, 0, 0, 0)

    def brake_for(self, ms: float) -> None:
        """Brake for ``ms`` milliseconds, then stop."""
        self.brake()
        self.sleep(ms)
        self.stop()

    def cycle_pwm_test(self) -> None:
        """Ramp the PWM on each input of both drivers, for testing the wiring."""
        for value in range(255):
            self.write(M1_IN1, value)
            self.write(M2_IN1, value)
        self.write(M1_IN1, 0)
        self.write(M2_IN1, 0)

        self.sleep(500)

        for value in range(255):
            self.write(M1_IN2, value)
            self.write(M2_IN2, value)
        self.write(M1_IN2, 0)
        self.write(M2_IN2, 0)

    def open_loop(self) -> None:
        """Run a fixed drive, turn, drive, turn sequence."""
        steps = (
            (lambda: self.drive(Direction.FORWARD, 235), 750),
            (lambda: self.spin(Side.RIGHT, 200), 1000),
            (lambda: self.drive(Direction.FORWARD, 200), 750),
            (lambda: self.spin(Side.LEFT, 200), 1000),
        )
        for action, duration in steps:
            action()
            self.sleep(duration)
            self.stop()
            self.sleep(2500)
        self.sleep(5000)

    def execute_angle_pid(self, pwm: int) -> None:
        """Spin according to the output of an angle PID controller.

        A positive output turns clockwise, a negative one counter-clockwise;
        very small outputs stop the motors.
        """
        if abs(pwm) < _MIN_ANGLE_PWM:
            self.stop()
            return
        if pwm > 0:
            self.spin(Side.RIGHT, int(clamp(pwm + DEADBAND, 0.0, MAX_PWM)))
        else:
            self.spin(Side.LEFT, int(clamp(-pwm + DEADBAND, 0.0, MAX_PWM)))