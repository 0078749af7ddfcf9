"""Kalman filter for the one-dimensional position of the robot."""

from __future__ import annotations

import logging

import numpy as np

from robotctl.utils import PID_ARRAY_SIZE

logger = logging.getLogger(__name__)

_PWM_SCALE = 150.0


class KalmanFilter:
    """Position and velocity estimator driven by a normalised motor input.

    Each :meth:`predict` logs the estimated position into ``position_array``
    at ``kf_index`` until the array is full.
    """

    def __init__(
        self,
        dt: float,
        mass: float,
        dist: float,
        sigma_meas: float,
        sigma_proc_1: float,
        sigma_proc_2: float,
    ) -> None:
        self.dt = dt
        a = np.array([[0.0, 1.0], [0.0, -dist / mass]])
        b = np.array([[0.0], [1.0 / mass]])
        self._identity = np.eye(2)
        self._c = np.array([[1.0, 0.0]])
        self._ad = self._identity + a * dt
        self._bd = b * dt
        self._x = np.zeros((2, 1))
        self._sigma = np.diag([400.0, 1.0])
        self._sig_u = np.diag([sigma_proc_1 * sigma_proc_1, sigma_proc_2 * sigma_proc_2])
        self._sig_z = np.array([[sigma_meas * sigma_meas]])
        self.kf_index = 0
        self.position_array = np.zeros(PID_ARRAY_SIZE)

    def predict(self, control_input: float) -> None:
        """Advance the state by one time step with the given control input."""
        self._x = self._ad @ self._x + self._bd * control_input
        self._sigma = self._ad @ self._sigma @ self._ad.T + self._sig_u

        if self.kf_index < PID_ARRAY_SIZE:
            self.position_array[self.kf_index] = self.position
            logger.debug("KF Pos:%s | KF Velocity:%s", self.position, self.velocity)
            self.kf_index += 1
        else:
            logger.warning("KF array is full!")

    def update(self, measurement: float) -> None:
        """Correct the state with a position measurement."""
        s = self._c @ self._sigma @ self._c.T + self._sig_z
        gain = self._sigma @ self._c.T / s[0, 0]
        innovation = measurement - (self._c @ self._x)[0, 0]
        self._x = self._x + gain * innovation
        self._sigma = (self._identity - gain @ self._c) @ self._sigma

    def initialize(self, first_measurement: float) -> None:
        """Reset the state to a known position at rest and clear the log."""
        self._x = np.array([[float(first_measurement)], [0.0]])
        self._sigma = np.diag([25.0, 1.0])
        self.kf_index = 0
        self.position_array[:] = 0.0

    @staticmethod
    def normalize(pwm: int) -> float:
        """Scale a PWM value to the filter's control input."""
        return pwm / _PWM_SCALE

    @property
    def position(self) -> float:
        """Estimated position."""
        return float(self._x[0, 0])

    @property
    def velocity(self) -> float:
        """Estimated velocity."""
        return float(self._x[1, 0])

    @property
    def covariance(self) -> np.ndarray:
        """A copy of the 2x2 state covariance."""
        return self._sigma.copy()