import pytest

from robotctl.lpf import LowPassFilter


def test_no_value_before_first_sample():
    f = LowPassFilter(0.3)
    assert f.value is None
    assert f.initialized is False


def test_first_sample_passes_through():
    f = LowPassFilter(0.1)
    assert f.update(42.0) == 42.0
    assert f.value == 42.0
    assert f.initialized is True


def test_half_alpha_averages():
    f = LowPassFilter(0.5)
    f.update(0.0)
    assert f.update(10.0) == pytest.approx(5.0)


def test_alpha_one_tracks_input():
    f = LowPassFilter(1.0)
    f.update(3.0)
    for sample in (7.0, -2.0, 100.0):
        assert f.update(sample) == sample


def test_alpha_zero_holds_first_value():
    f = LowPassFilter(0.0)
    f.update(9.0)
    for sample in (1.0, -5.0, 1000.0):
        assert f.update(sample) == 9.0


@pytest.mark.parametrize("alpha", [0.01, 0.05, 0.284, 0.9])
def test_output_stays_between_previous_and_input(alpha):
    f = LowPassFilter(alpha)
    f.update(0.0)
    previous = f.value
    for sample in (10.0, -4.0, 25.0, 25.0, 3.0):
        result = f.update(sample)
        assert min(previous, sample) <= result <= max(previous, sample)
        previous = result


def test_converges_to_constant_input():
    f = LowPassFilter(0.2)
    f.update(0.0)
    for _ in range(200):
        f.update(50.0)
    assert f.value == pytest.approx(50.0, abs=1e-6)


def test_value_matches_last_update():
    f = LowPassFilter(0.4)
    f.update(1.0)
    result = f.update(11.0)
    assert f.value == result