"""I2C bus and GPIO operation over a simulated controller."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from .definitions import I2CBus
from .errors import GpioError, I2CError
from .gpio import GPIO_COUNT, NO_OUTPUT_GPIO

STANDARD_CLOCK_SPEED = 100_000
"""Bus clock in hertz for a speed multiplier of one."""

NOT_FOUND = 0xFF
"""Returned by :func:`find_full_address` when no device matches."""

AMBIGUOUS = 0xFE
"""Returned by :func:`find_full_address` when several devices match."""

Initializer = Callable[[int, int, int, I2CBus], bool]


# ---------------------------------------------------------------------------
# I2C helpers
# ---------------------------------------------------------------------------


def abort_on_invalid_address(
    address7bits: int, min_address: int = 0, max_address: int = 127
) -> None:
    """Raise :class:`I2CError` unless the address lies in the inclusive range."""
    if min_address > max_address:
        min_address, max_address = max_address, min_address
    if not min_address <= address7bits <= max_address:
        raise I2CError.invalid_address(address7bits)


def find_full_address(
    full_address_list: Iterable[int],
    hardware_address: int,
    hardware_address_mask: int = 0b00000111,
) -> int:
    """Find the single full address whose masked bits equal ``hardware_address``.

    Returns :data:`NOT_FOUND` if none matches and :data:`AMBIGUOUS` if
    two or more match.
    """
    matches = [
        address
        for address in full_address_list
        if address & hardware_address_mask == hardware_address
    ]
    if not matches:
        return NOT_FOUND
    if len(matches) > 1:
        return AMBIGUOUS
    return matches[0]


def check_speed_multiplier(multiplier: int) -> int:
    """Clamp a bus speed multiplier to the range [1,4]."""
    return min(max(multiplier, 1), 4)


@dataclass
class _BusState:
    sda: int = -1
    scl: int = -1
    initialized: bool = False
    installed: bool = False
    max_speed: int = 4


class I2CController:
    """I2C buses with their pins, clock speed and attached devices.

    ``devices`` maps each bus to the 7-bit addresses that answer on it;
    ``None`` means every address answers. ``initializer`` is called with
    ``(sda, scl, speed_multiplier, bus)`` each time a bus driver is
    installed and returns whether installation succeeded.
    """

    def __init__(
        self,
        devices: Mapping[I2CBus | int, Iterable[int]] | None = None,
        initializer: Initializer | None = None,
        default_sda: int = -1,
        default_scl: int = -1,
    ) -> None:
        if devices is None:
            self._devices: dict[I2CBus, frozenset[int]] | None = None
        else:
            self._devices = {
                I2CBus(bus): frozenset(addresses) for bus, addresses in devices.items()
            }
        self._initializer: Initializer = initializer or (lambda *_: True)
        self._buses = {
            I2CBus.PRIMARY: _BusState(sda=default_sda, scl=default_scl),
            I2CBus.SECONDARY: _BusState(),
        }

    def _state(self, bus: I2CBus | int) -> tuple[I2CBus, _BusState]:
        bus = I2CBus(bus)
        return bus, self._buses[bus]

    def _install(self, state: _BusState, multiplier: int, bus: I2CBus) -> None:
        if not self._initializer(state.sda, state.scl, multiplier, bus):
            state.installed = False
            raise I2CError.bus_failure(state.sda, state.scl, int(bus), multiplier)
        state.installed = True

    @staticmethod
    def _uninstall(state: _BusState) -> None:
        state.installed = False

    def initialize(self, sda, scl, bus=I2CBus.PRIMARY) -> None:
        """Assign the pins of a bus, reinstalling it if already running."""
        bus, state = self._state(bus)
        state.sda = int(sda)
        state.scl = int(scl)
        if state.initialized:
            self._uninstall(state)
            try:
                self._install(state, state.max_speed, bus)
            except I2CError:
                state.initialized = False
                raise

    def require(self, max_speed_multiplier: int = 4, bus=I2CBus.PRIMARY) -> None:
        """Ensure the bus runs no faster than ``max_speed_multiplier``."""
        bus, state = self._state(bus)
        multiplier = check_speed_multiplier(max_speed_multiplier)
        if state.initialized:
            if multiplier >= state.max_speed:
                return
            self._uninstall(state)
        self._install(state, multiplier, bus)
        state.initialized = True
        state.max_speed = multiplier

    def probe(self, address7bits: int, bus=I2CBus.PRIMARY) -> bool:
        """Return whether a device answers at the address on a running bus."""
        abort_on_invalid_address(address7bits)
        bus, state = self._state(bus)
        if not state.installed:
            return False
        if self._devices is None:
            return True
        return address7bits in self._devices.get(bus, frozenset())

    def probe_all(self, bus=I2CBus.PRIMARY) -> list[int]:
        """Return every 7-bit address that answers on the bus.

        The bus is run at minimum speed while probing, then restored.
        """
        bus, state = self._state(bus)
        if state.installed:
            self._uninstall(state)
        self._install(state, 1, bus)
        found = [address for address in range(128) if self.probe(address, bus)]
        self._uninstall(state)
        if state.initialized:
            self._install(state, state.max_speed, bus)
        return found


# ---------------------------------------------------------------------------
# GPIO
# ---------------------------------------------------------------------------


class PinMode(enum.Enum):
    """Configured direction of a GPIO pin."""

    INPUT = "input"
    OUTPUT = "output"
    OUTPUT_OPEN_DRAIN = "output_open_drain"


@dataclass(frozen=True)
class PinConfig:
    """Configuration applied to a GPIO pin."""

    mode: PinMode
    level: bool = False
    pull_down: bool = False
    pull_up: bool = False


class GPIOController:
    """GPIO pin configuration and ADC readings.

    ADC readings come from ``adc_sampler(pin)`` when given, otherwise the
    ``adc_reading`` attribute is returned as is.
    """

    def __init__(
        self,
        adc_reading: int = 0,
        adc_sampler: Callable[[int], int] | None = None,
    ) -> None:
        self.adc_reading = adc_reading
        self._adc_sampler = adc_sampler
        self.pins: dict[int, PinConfig] = {}

    @staticmethod
    def _pin_number(pin) -> int:
        number = int(pin)
        if number < 0:
            raise GpioError(number, "Is unspecified but required")
        return number

    def get_adc_reading(self, pin, sample_count: int = 1) -> int:
        """Mean of ``sample_count`` readings, or -1 if the count is not positive."""
        number = self._pin_number(pin)
        if number >= GPIO_COUNT:
            raise GpioError(number, "Is not ADC")
        if sample_count <= 0:
            return -1
        if self._adc_sampler is None:
            return self.adc_reading
        total = sum(self._adc_sampler(number) for _ in range(sample_count))
        return total // sample_count

    def for_output(self, pin, initial_level: bool, open_drain: bool) -> None:
        """Configure a pin for output and set its initial level."""
        number = self._pin_number(pin)
        if number >= NO_OUTPUT_GPIO:
            raise GpioError(number, "Can't be used as output")
        mode = PinMode.OUTPUT_OPEN_DRAIN if open_drain else PinMode.OUTPUT
        self.pins[number] = PinConfig(mode=mode, level=bool(initial_level))

    def for_input(self, pin, enable_pull_down: bool, enable_pull_up: bool) -> None:
        """Configure a pin for digital input."""
        number = self._pin_number(pin)
        if number >= GPIO_COUNT:
            raise GpioError(number, "Can't be used as input")
        self.pins[number] = PinConfig(
            mode=PinMode.INPUT,
            pull_down=bool(enable_pull_down),
            pull_up=bool(enable_pull_up),
        )

    def wait_propagation(self, nanoseconds: int) -> None:
        """Busy-wait for signal propagation."""
        if nanoseconds < 0:
            raise ValueError("nanoseconds must not be negative")
        start = time.perf_counter_ns()
        while time.perf_counter_ns() - start < nanoseconds:
            pass