import pytest

from robotctl.utils import (
    ARRAY_SIZE,
    DEADBAND,
    MAX_PWM,
    MIN_PWM,
    calculate_motor_drive_actual,
    clamp,
    format_formatted_float,
    format_padded_int16,
    format_raw_agmt,
    format_scaled_agmt,
    index_out_of_bounds,
)


@pytest.mark.parametrize(
    "index, expected",
    [(0, False), (ARRAY_SIZE - 1, False), (ARRAY_SIZE, True), (-1, True)],
)
def test_index_out_of_bounds(index, expected):
    assert index_out_of_bounds(index) is expected


@pytest.mark.parametrize(
    "val, low, high, expected",
    [(5, 0, 10, 5), (-3, 0, 10, 0), (20, 0, 10, 10), (0, 0, 10, 0), (10, 0, 10, 10)],
)
def test_clamp(val, low, high, expected):
    assert clamp(val, low, high) == expected


def test_motor_drive_small_positive_raised_to_deadband():
    assert calculate_motor_drive_actual(10, 0, 0) == DEADBAND


def test_motor_drive_small_negative_raised_to_deadband():
    assert calculate_motor_drive_actual(-10, 0, 0) == -DEADBAND


def test_motor_drive_zero_counts_as_reverse():
    assert calculate_motor_drive_actual(0, 0, 0) == -DEADBAND


def test_motor_drive_saturates():
    assert calculate_motor_drive_actual(300, 50, 10) == int(MAX_PWM)
    assert calculate_motor_drive_actual(-300, -50, -10) == int(MIN_PWM)


def test_motor_drive_sums_terms():
    assert calculate_motor_drive_actual(100, 20, 3) == calculate_motor_drive_actual(123, 0, 0)


@pytest.mark.parametrize("val", [1, 5, 42, 999, 12345, 32767, -1, -42, -32768, 0])
def test_padded_int16_shape(val):
    text = format_padded_int16(val)
    assert len(text) == 6
    assert text[0] == (" " if val > 0 else "-")
    assert int(text[1:]) == abs(val)


@pytest.mark.parametrize("val", [32768, -32769])
def test_padded_int16_rejects_out_of_range(val):
    with pytest.raises(ValueError):
        format_padded_int16(val)


def test_formatted_float_example():
    assert format_formatted_float(1.5, 5, 2) == " 00001.50"


@pytest.mark.parametrize("val", [0.5, 1.5, -2.25, 150.0, -9999.0, 123456.0])
def test_formatted_float_invariants(val):
    text = format_formatted_float(val, 5, 2)
    assert text[0] == ("-" if val < 0 else " ")
    integer_digits, fraction = text[1:].split(".")
    assert len(fraction) == 2
    assert len(integer_digits) == max(5, len(str(int(abs(val)))))
    assert float(text[1:]) == pytest.approx(abs(val), abs=0.01)


def test_formatted_float_without_leading():
    text = format_formatted_float(-3.0, 0, 1)
    assert text.startswith("-")
    assert float(text[1:]) == pytest.approx(3.0)


def test_raw_agmt_layout():
    text = format_raw_agmt((1, -2, 3), (4, 5, 6), (7, 8, 9), 10)
    assert text.startswith("RAW. Acc [ " + format_padded_int16(1))
    assert format_padded_int16(-2) in text
    assert ", Gyr [ " in text and ", Mag [ " in text
    assert text.endswith("Tmp [ " + format_padded_int16(10) + " ]")


def test_raw_agmt_requires_three_axes():
    with pytest.raises(ValueError):
        format_raw_agmt((1, 2), (4, 5, 6), (7, 8, 9), 10)


def test_scaled_agmt_layout():
    text = format_scaled_agmt((1.0, 0.0, 1.0), (0.0, 0.0, 0.0), (1.0, 2.0, 3.0), 25.0)
    first, second = text.split("\n")
    assert first.startswith("Scaled. Acc (mg) [ " + format_formatted_float(1.0, 5, 2))
    assert first.endswith("Tmp (C) [ " + format_formatted_float(25.0, 5, 2) + " ]")
    assert second.startswith("Acc. Pitch (deg) [ ")
    assert "45.000" in second
    assert second.endswith(" ]  ")