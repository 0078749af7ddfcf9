"""Command parsing, message building, filters, PID control, yaw tracking and motor logic for a small wheeled robot."""

__version__ = "0.1.0"
__all__ = ["estring", "robot_command", "lpf", "utils", "kalman", "pid", "imu", "motors"]