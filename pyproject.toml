[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simwheel"
version = "0.1.0"
description = "Input numbers, GPIO validation, simulated I2C/GPIO control, telemetry data and in-memory test doubles for sim-racing wheel logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["sim-racing", "steering-wheel", "gpio", "i2c", "telemetry", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simwheel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
