[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robotctl"
version = "0.1.0"
description = "Control primitives for a small wheeled robot: command parsing, PID, Kalman and low-pass filters, IMU yaw tracking and motor drive logic"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["robotics", "pid", "kalman-filter", "low-pass-filter", "motor-control", "imu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["robotctl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
