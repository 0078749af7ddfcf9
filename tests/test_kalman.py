import numpy as np
import pytest

from robotctl.kalman import KalmanFilter
from robotctl.utils import PID_ARRAY_SIZE


@pytest.fixture
def kf():
    return KalmanFilter(dt=0.02, mass=0.5, dist=0.3, sigma_meas=20, sigma_proc_1=10, sigma_proc_2=10)


def test_normalize_scale():
    assert KalmanFilter.normalize(150) == 1.0
    assert KalmanFilter.normalize(-150) == -1.0


@pytest.mark.parametrize("pwm", [1, 80, 255])
def test_normalize_is_odd(pwm):
    assert KalmanFilter.normalize(-pwm) == -KalmanFilter.normalize(pwm)


def test_initial_state_at_rest(kf):
    assert kf.position == 0
    assert kf.velocity == 0
    assert kf.kf_index == 0


def test_initialize_sets_position(kf):
    kf.predict(1.0)
    kf.initialize(1000)
    assert kf.position == 1000
    assert kf.velocity == 0
    assert kf.kf_index == 0
    assert not kf.position_array.any()


def test_predict_without_input_keeps_position(kf):
    kf.initialize(750)
    kf.predict(0.0)
    assert kf.position == 750
    assert kf.kf_index == 1
    assert kf.position_array[0] == kf.position


def test_positive_input_moves_forward(kf):
    kf.initialize(0)
    kf.predict(1.0)
    assert kf.velocity > 0
    kf.predict(1.0)
    assert kf.position > 0
    assert kf.position_array[1] == kf.position


def test_negative_input_moves_backward(kf):
    kf.initialize(0)
    kf.predict(-1.0)
    kf.predict(-1.0)
    assert kf.velocity < 0
    assert kf.position < 0


def test_predict_grows_uncertainty(kf):
    before = kf.covariance
    kf.predict(0.0)
    assert kf.covariance[0, 0] > before[0, 0]


def test_update_moves_toward_measurement(kf):
    kf.initialize(0)
    kf.update(100)
    assert 0 < kf.position < 100


def test_update_shrinks_uncertainty(kf):
    before = kf.covariance
    kf.update(100)
    assert kf.covariance[0, 0] < before[0, 0]


def test_covariance_stays_symmetric(kf):
    for step in range(10):
        kf.predict(0.5)
        kf.update(step * 10)
    cov = kf.covariance
    assert np.allclose(cov, cov.T)


def test_repeated_updates_converge(kf):
    kf.initialize(0)
    errors = []
    for _ in range(100):
        kf.update(500)
        errors.append(abs(500 - kf.position))
    assert all(later <= earlier for earlier, later in zip(errors, errors[1:]))
    assert errors[-1] < errors[9]


def test_full_log_is_not_overrun(kf):
    kf.kf_index = PID_ARRAY_SIZE
    kf.predict(1.0)
    assert kf.kf_index == PID_ARRAY_SIZE
    assert len(kf.position_array) == PID_ARRAY_SIZE