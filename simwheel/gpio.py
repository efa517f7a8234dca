"""GPIO pin numbers with validation and exclusive reservation."""

from __future__ import annotations

import functools

from .errors import GpioError
from .inputnumbers import add_if_not_exists

# Pin capabilities of the reference board used by this package.
GPIO_COUNT = 100
NO_OUTPUT_GPIO = 80
RTC_GPIO_RANGE = range(40, 50)
RESERVED_GPIO = 50


def _is_valid_gpio(pin: int) -> bool:
    return pin < GPIO_COUNT


def _is_valid_output_gpio(pin: int) -> bool:
    return pin < NO_OUTPUT_GPIO


def _is_valid_rtc_gpio(pin: int) -> bool:
    return pin in RTC_GPIO_RANGE


@functools.total_ordering
class GPIO:
    """A usable GPIO pin number, or "not connected" (``None`` or negative)."""

    _reserved_pins: list[int] = []

    def __init__(self, pin: "int | GPIO | None" = None) -> None:
        if pin is None:
            self._pin = -1
            return
        pin = int(pin)
        if pin < 0:
            self._pin = -1
            return
        if not _is_valid_gpio(pin):
            raise GpioError(pin, "Does not exist")
        if pin == RESERVED_GPIO:
            raise GpioError(pin, "Reserved for SPI FLASH, PSRAM or otherwise NOT USABLE")
        self._pin = pin

    def is_unspecified(self) -> bool:
        return self._pin < 0

    def __int__(self) -> int:
        return self._pin

    __index__ = __int__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GPIO):
            return self._pin == other._pin
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, GPIO):
            return self._pin < other._pin
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._pin)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pin if self._pin >= 0 else None})"

    def reserve(self) -> None:
        """Reserve this pin for exclusive use."""
        self.abort_if_unspecified()
        if not add_if_not_exists(self._pin, GPIO._reserved_pins):
            raise GpioError(self._pin, "Already in use")

    def grant(self) -> None:
        """Release this pin for non-exclusive use."""
        self.abort_if_unspecified()
        if self._pin in GPIO._reserved_pins:
            GPIO._reserved_pins.remove(self._pin)

    def abort_if_unspecified(self) -> None:
        if self._pin < 0:
            raise GpioError(self._pin, "Is unspecified but required")

    @classmethod
    def clear_reservations(cls) -> None:
        GPIO._reserved_pins.clear()


class OutputGPIO(GPIO):
    """An output-capable GPIO pin number."""

    def __init__(self, pin: "int | GPIO | None" = None) -> None:
        super().__init__(pin)
        if self._pin >= 0 and not _is_valid_output_gpio(self._pin):
            raise GpioError(self._pin, "Not output-capable")


class InputGPIO(GPIO):
    """An input-capable GPIO pin number."""


class ADCGPIO(InputGPIO):
    """An ADC-capable GPIO pin number."""


class RTCGPIO(InputGPIO):
    """An RTC-capable GPIO pin number."""

    def __init__(self, pin: "int | GPIO") -> None:
        super().__init__(pin)
        if self._pin >= 0 and not _is_valid_rtc_gpio(self._pin):
            raise GpioError(self._pin, "Not RTC-capable")