import pytest

from simwheel.errors import (
    EmptyInputNumberSet,
    GpioError,
    I2CDeviceNotFound,
    I2CError,
    I2CFullAddressUnknown,
    InvalidInputNumber,
    InvalidUserInputNumber,
    UnknownInputNumber,
)


def test_invalid_input_number_with_value():
    err = InvalidInputNumber(70)
    assert str(err) == "The input number 70 is out of range [0,63]"
    assert err.value == 70


def test_invalid_input_number_unspecified():
    assert str(InvalidInputNumber()) == "Trying to use an unspecified input number."


def test_gpio_error_message():
    err = GpioError(12, "Already in use")
    assert str(err) == "Invalid GPIO number 12. Reason: Already in use"
    assert err.reason == "Already in use"


def test_empty_input_number_set():
    assert str(EmptyInputNumberSet("matrix")) == "No input numbers were given to: matrix"


def test_unknown_input_number():
    assert str(UnknownInputNumber("alt")) == (
        "There is an input number not assigned to a hardware input. Usage: alt"
    )


def test_invalid_user_input_number():
    assert str(InvalidUserInputNumber(200)) == (
        "The user-defined input number 200 is out of range [0,127]"
    )
    assert str(InvalidUserInputNumber()) == "Trying to use an unspecified input number."


def test_i2c_bus_failure():
    err = I2CError.bus_failure(21, 22, 1, 4)
    assert isinstance(err, I2CError)
    assert str(err) == "I2C: unable to initialize bus. SDA=21 SCL=22 BUS=1 CLOCK=x4"


def test_i2c_invalid_address():
    assert str(I2CError.invalid_address(130)) == "I2C: invalid address 130 (dec)"


def test_i2c_device_not_found_default_bus():
    assert str(I2CDeviceNotFound(32)) == (
        "I2C: device not found, but required. Bus=0 Hw/Full address=32 (dec)"
    )


def test_i2c_full_address_unknown():
    assert str(I2CFullAddressUnknown(7, 1)) == (
        "I2C: unable to detect full address. Bus=1 HW address=7 (dec)"
    )


@pytest.mark.parametrize(
    "err, message",
    [
        (InvalidInputNumber(99), "The input number 99 is out of range [0,63]"),
        (GpioError(3, "Does not exist"), "Invalid GPIO number 3. Reason: Does not exist"),
        (I2CError.invalid_address(200), "I2C: invalid address 200 (dec)"),
    ],
)
def test_errors_are_caught_as_runtime_error(err, message):
    caught = None
    try:
        raise err
    except RuntimeError as exc:
        caught = exc
    assert caught is err
    assert caught.args == (message,)