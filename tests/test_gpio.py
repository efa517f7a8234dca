import pytest

from simwheel.errors import GpioError
from simwheel.gpio import ADCGPIO, GPIO, InputGPIO, OutputGPIO, RTCGPIO


@pytest.fixture(autouse=True)
def _clean_reservations():
    GPIO.clear_reservations()
    yield
    GPIO.clear_reservations()


def test_valid_pin():
    pin = GPIO(12)
    assert int(pin) == 12
    assert not pin.is_unspecified()


@pytest.mark.parametrize("value", [None, -1, -20])
def test_unspecified(value):
    pin = GPIO(value)
    assert pin.is_unspecified()
    assert int(pin) == -1


def test_nonexistent_pin():
    with pytest.raises(GpioError, match="Does not exist"):
        GPIO(100)


def test_reserved_pin():
    with pytest.raises(GpioError, match="NOT USABLE"):
        GPIO(50)


def test_output_capability():
    assert int(OutputGPIO(79)) == 79
    with pytest.raises(GpioError, match="Not output-capable"):
        OutputGPIO(80)
    assert OutputGPIO().is_unspecified()


def test_input_and_adc_accept_any_usable_pin():
    assert int(InputGPIO(90)) == 90
    assert int(ADCGPIO(85)) == 85


def test_rtc_capability():
    assert int(RTCGPIO(40)) == 40
    assert int(RTCGPIO(49)) == 49
    with pytest.raises(GpioError, match="Not RTC-capable"):
        RTCGPIO(39)
    assert RTCGPIO(-1).is_unspecified()


def test_reserve_and_grant():
    pin = GPIO(5)
    pin.reserve()
    with pytest.raises(GpioError, match="Already in use"):
        GPIO(5).reserve()
    pin.grant()
    GPIO(5).reserve()
    with pytest.raises(GpioError, match="Already in use"):
        pin.reserve()


def test_reservation_shared_across_subclasses():
    InputGPIO(7).reserve()
    with pytest.raises(GpioError):
        OutputGPIO(7).reserve()


def test_unspecified_cannot_be_reserved():
    with pytest.raises(GpioError, match="unspecified but required"):
        GPIO().reserve()
    with pytest.raises(GpioError, match="unspecified but required"):
        GPIO().abort_if_unspecified()


def test_equality_and_order():
    assert GPIO(3) == GPIO(3)
    assert GPIO(3) < GPIO(4)
    assert GPIO() == GPIO(-5)
    assert GPIO(GPIO(9)) == GPIO(9)