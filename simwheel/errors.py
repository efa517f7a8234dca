"""Exceptions raised while validating firmware setup and I2C hardware."""

from __future__ import annotations


class InvalidInputNumber(RuntimeError):
    """An input number outside [0,63], or an unspecified one where one is required."""

    def __init__(self, value: int | None = None) -> None:
        self.value = value
        if value is None:
            message = "Trying to use an unspecified input number."
        else:
            message = f"The input number {value} is out of range [0,63]"
        super().__init__(message)


class GpioError(RuntimeError):
    """An invalid, unusable or already reserved GPIO pin number."""

    def __init__(self, value: int, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid GPIO number {value}. Reason: {reason}")


class EmptyInputNumberSet(RuntimeError):
    """No input numbers were given to a piece of input hardware."""

    def __init__(self, hardware: str) -> None:
        self.hardware = hardware
        super().__init__(f"No input numbers were given to: {hardware}")


class UnknownInputNumber(RuntimeError):
    """An input number is used but not assigned to any hardware input."""

    def __init__(self, usage: str) -> None:
        self.usage = usage
        super().__init__(
            "There is an input number not assigned to a hardware input. "
            f"Usage: {usage}"
        )


class InvalidUserInputNumber(RuntimeError):
    """A user-defined input number outside [0,127], or an unspecified one."""

    def __init__(self, value: int | None = None) -> None:
        self.value = value
        if value is None:
            message = "Trying to use an unspecified input number."
        else:
            message = f"The user-defined input number {value} is out of range [0,127]"
        super().__init__(message)


class I2CError(RuntimeError):
    """An I2C bus that cannot be initialized, or an invalid I2C address."""

    @classmethod
    def bus_failure(cls, sda: int, scl: int, bus: int, clock_mult: int) -> "I2CError":
        """Build the error for a bus that could not be initialized."""
        return cls(
            f"I2C: unable to initialize bus. SDA={sda} SCL={scl} "
            f"BUS={bus} CLOCK=x{clock_mult}"
        )

    @classmethod
    def invalid_address(cls, address: int) -> "I2CError":
        """Build the error for an I2C address out of range."""
        return cls(f"I2C: invalid address {address} (dec)")


class I2CDeviceNotFound(RuntimeError):
    """A required I2C device did not answer."""

    def __init__(self, address: int, bus: int = 0) -> None:
        self.address = address
        self.bus = bus
        super().__init__(
            f"I2C: device not found, but required. Bus={bus} "
            f"Hw/Full address={address} (dec)"
        )


class I2CFullAddressUnknown(RuntimeError):
    """The full I2C address matching a hardware address could not be found."""

    def __init__(self, hw_address: int, bus: int = 0) -> None:
        self.hw_address = hw_address
        self.bus = bus
        super().__init__(
            f"I2C: unable to detect full address. Bus={bus} "
            f"HW address={hw_address} (dec)"
        )