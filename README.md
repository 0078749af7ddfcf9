# robotctl

Building blocks for controlling a small two-motor robot. The robot takes text
commands, measures distance with a time-of-flight sensor and reads yaw from an
IMU. The package holds the parts of such a controller that work without
hardware: message building, command parsing, filters, controllers, yaw
arithmetic and the pin-level motor logic.

## Modules

- `robotctl.estring`: `EString` is a text buffer that holds at most 150
  characters (`MAX_LENGTH`). `set()` and `append()` take `str` or bytes. Bytes
  are decoded as Latin-1 and cut at the first NUL. `append()` also takes
  integers, and floats, which it writes with exactly three truncated decimals
  (`-1.5` becomes `"-1.500"`). A result longer than the limit raises
  `ValueError`. `str()` and `len()` give the contents.
- `robotctl.robot_command`: `CommandType` is an `IntEnum` of the numbered
  commands, from `SET_POS_GAINS` (0) to `FETCH_MAPPING` (20). `RobotCommand`
  splits a string such as `"0:1.5|0.2|3"` on any of its delimiter characters
  (by default `":|"`, with one to eight allowed) and skips empty fields. Only
  the first 150 characters of a message are kept. `get_command_type()` returns
  the first field as an integer. `get_next_int()`, `get_next_float()` and
  `get_next_str()` then read the fields that follow. Numbers are read from the
  start of a field, and a field with no leading number reads as 0. A message
  with no fields, running out of fields, or reading values before the command
  type raises `ValueError`. The module also defines the BLE service and
  characteristic UUID constants.
- `robotctl.lpf`: `LowPassFilter(alpha)` is first-order exponential smoothing.
  The first sample passes through unchanged. `value` is `None` until then.
- `robotctl.utils`: the shared limits (`ARRAY_SIZE`, `PID_ARRAY_SIZE`,
  `DEADBAND`, `MAX_PWM`, `MIN_PWM`, ...), `clamp`, `index_out_of_bounds`, and
  `calculate_motor_drive_actual`. The last one clamps a PID sum to the PWM
  range and raises its magnitude to at least the deadband. It also has text
  formatters for sensor readouts: `format_padded_int16`, `format_raw_agmt`,
  `format_formatted_float` and `format_scaled_agmt`.
- `robotctl.kalman`: `KalmanFilter(dt, mass, dist, sigma_meas, sigma_proc_1,
  sigma_proc_2)` estimates position and velocity with a linear drag model,
  using numpy.
  - `predict()` logs each predicted position into `position_array` until that
    array is full.
  - `update()` corrects the estimate with a measurement.
  - `initialize()` resets the state to a known position at rest.
  - `KalmanFilter.normalize(pwm)` scales a PWM value to a control input.
  - `position`, `velocity` and `covariance` are read-only properties.
- `robotctl.pid`: `PIDController` is a PID controller.
  - `compute(pos)` returns an integer PWM in `[-255, 255]`. The error is
    `pos - setpoint`. The derivative is low-pass filtered and skipped on the
    first step. The measured time step is capped at 0.02 s.
  - The P, I and D terms of each step are logged.
  - Time comes from an injectable `clock` that returns milliseconds.
  - Other methods: `set_gains()`, `reset_accumulator()`, `reset()`, and
    `linear_extrapolate()` over the logged measurements.
- `robotctl.imu`: `calibrated_roll` and `calibrated_pitch` apply two-point
  calibrations. `quat6_to_yaw` converts raw fixed-point Quat6 components to
  yaw in degrees. `is_valid_yaw` rejects the error values (`YAW_NO_DATA`,
  `YAW_UNEXPECTED`, ...). `YawTracker` unwraps successive readings into a
  continuous angle.
- `robotctl.motors`: `Side` and `Direction` are enums, and the module defines
  the pin numbers. `MotorDriver(write, sleep=None, left_percent=1.0,
  right_percent=1.0)` turns requests into calls of `write(pin, value)`:
  - `drive()` and `spin()` run the motors in a direction.
  - `brake()`, `stop()` and `brake_for(ms)` halt them.
  - `execute_angle_pid(pwm)` spins by the sign of a PID output and adds the
    deadband.
  - `cycle_pwm_test()` and `open_loop()` run fixed test sequences.

  `sleep` takes milliseconds and defaults to `time.sleep`.

## Install

```
pip install .
```

## Example

```python
from robotctl.robot_command import RobotCommand, CommandType
from robotctl.pid import PIDController

cmd = RobotCommand()
cmd.set_cmd_string("8:2.0|0.1|0.5")

pid = PIDController()
if cmd.get_command_type() == CommandType.SET_ANGLE_GAINS:
    pid.set_gains(cmd.get_next_float(), cmd.get_next_float(), cmd.get_next_float())

pwm = pid.compute(12.5)
```

## What it does not do

The package talks to no hardware and runs no main loop. It has:

- no BLE server;
- no drivers for the time-of-flight sensors or the IMU;
- no LED handling;
- no dispatcher that acts on each `CommandType`;
- no position-PID drive, stunt or mapping sequences.

It provides no command-line program. You supply the pin writes, the clock and
the sensor readings.

## Tests

```
pip install .[test]
pytest
```