"""Input numbers, GPIO validation, simulated I2C/GPIO control, telemetry and test doubles for sim-racing wheel logic."""

__version__ = "0.1.0"

__all__ = [
    "definitions",
    "errors",
    "gpio",
    "hal",
    "inputnumbers",
    "pixels",
    "preferences",
    "telemetry",
    "ui",
]