"""Enumerations used for hardware setup: I2C buses, power latches and pixels."""

from __future__ import annotations

import enum

# Well-known input numbers for PC game controllers
JOY_A = 0
JOY_B = 1
JOY_X = 2
JOY_Y = 3
JOY_LB = 4
JOY_RB = 5
JOY_LSHIFT_PADDLE = 4
JOY_RSHIFT_PADDLE = 5
JOY_BACK = 6
JOY_START = 7
JOY_LTHUMBSTICK_CLICK = 8
JOY_RTHUMBSTICK_CLICK = 9


class I2CBus(enum.IntEnum):
    """I2C bus controller."""

    PRIMARY = 0
    SECONDARY = 1


class PowerLatchMode(enum.IntEnum):
    """Supported power latch modes."""

    POWER_OPEN_DRAIN = 0
    """Power on when low voltage, power off when open drain."""
    POWER_OFF_HIGH = 1
    """Power on when low voltage, power off when high voltage."""
    POWER_OFF_LOW = 2
    """Power on when high voltage, power off when low voltage."""


class PixelGroup(enum.IntEnum):
    """Available RGB LED groups for pixel control."""

    GRP_TELEMETRY = 0
    GRP_BUTTONS = 1
    GRP_INDIVIDUAL = 2


class PixelDriver(enum.IntEnum):
    """Pixel driver chip family."""

    WS2811 = 0
    WS2812 = 1
    WS2815 = 2
    SK6812 = 3
    UCS1903 = 4


class PixelFormat(enum.IntEnum):
    """Byte order of pixel data. ``AUTO`` means detect from the pixel driver."""

    AUTO = 0
    RGB = 1
    RBG = 2
    GRB = 3
    GBR = 4
    BRG = 5
    BGR = 6