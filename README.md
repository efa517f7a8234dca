# simwheel

Building blocks for the logic of a sim-racing steering wheel: validated input
numbers, GPIO pin numbers with exclusive reservation, I2C address helpers, a
simulated I2C and GPIO controller, telemetry data classes, a user-interface
base class, an in-memory preferences store and a pixel-control recorder.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `simwheel.errors` | `InvalidInputNumber`, `GpioError`, `EmptyInputNumberSet`, `UnknownInputNumber`, `InvalidUserInputNumber`, `I2CError` (built with `I2CError.bus_failure` or `I2CError.invalid_address`), `I2CDeviceNotFound`, `I2CFullAddressUnknown`; all derive from `RuntimeError` |
| `simwheel.inputnumbers` | `InputNumber` (0–63 or unspecified, with a class-wide booking register), `InputNumberCombination` (a list of input numbers), `UserInputNumber` (0–127), `add_if_not_exists`, `map_value` |
| `simwheel.gpio` | `GPIO`, `OutputGPIO`, `InputGPIO`, `ADCGPIO`, `RTCGPIO`, and the pin limits `GPIO_COUNT`, `NO_OUTPUT_GPIO`, `RTC_GPIO_RANGE`, `RESERVED_GPIO` |
| `simwheel.definitions` | `I2CBus`, `PowerLatchMode`, `PixelGroup`, `PixelDriver`, `PixelFormat`, and the `JOY_*` game-controller input numbers |
| `simwheel.telemetry` | `TelemetryData`, made of `Powertrain`, `Ecu`, `RaceControl` and `Gauges` dataclasses |
| `simwheel.ui` | `AbstractUserInterface` and the `FrameTimer` helper |
| `simwheel.preferences` | `Preferences`, an in-memory key/value store shared by all instances |
| `simwheel.hal` | `abort_on_invalid_address`, `find_full_address`, `check_speed_multiplier`, `I2CController`, `GPIOController`, `PinMode`, `PinConfig`, and the constants `NOT_FOUND`, `AMBIGUOUS`, `STANDARD_CLOCK_SPEED` |
| `simwheel.pixels` | `PixelRecorder`, which records the last pixel operation |

## Examples

Input numbers and bitmaps:

```python
from simwheel.inputnumbers import InputNumber, InputNumberCombination, map_value
from simwheel.errors import InvalidInputNumber

n = InputNumber(5)
assert n.bitmap() == 1 << 5

combo = InputNumberCombination([0, 1, 2])
assert combo.bitmap() == 0b111

try:
    InputNumber(64)
except InvalidInputNumber as exc:
    print(exc)  # The input number 64 is out of range [0,63]

assert map_value(50, 0, 100, 0, 254) == 127
```

GPIO reservation:

```python
from simwheel.gpio import GPIO
from simwheel.errors import GpioError

pin = GPIO(12)
pin.reserve()
try:
    GPIO(12).reserve()
except GpioError:
    print("pin 12 is already in use")
pin.grant()
```

Resolving a full I2C address and probing a simulated bus:

```python
from simwheel.definitions import I2CBus
from simwheel.hal import I2CController, find_full_address

addresses = [0x20, 0x41]
assert find_full_address(addresses, 0x01, 0b00000111) == 0x41
assert find_full_address(addresses, 0x05, 0b00000111) == 0xFF  # not found

bus = I2CController(devices={I2CBus.PRIMARY: addresses})
bus.require(4)
assert bus.probe(0x20)
assert bus.probe_all() == [0x20, 0x41]
```

GPIO configuration and ADC readings:

```python
from simwheel.hal import GPIOController, PinMode

gpio = GPIOController(adc_reading=2048)
assert gpio.get_adc_reading(5) == 2048
gpio.for_output(4, True, False)
assert gpio.pins[4].mode is PinMode.OUTPUT
```

Frame timing in a user interface:

```python
from simwheel.ui import FrameTimer

timer = FrameTimer()
assert timer.advance(250, 100) == 2
assert timer.value == 50
```

Preferences:

```python
from simwheel.preferences import Preferences

prefs = Preferences()
prefs.begin("settings", False, None)
prefs.put_int("bite_point", 127)
assert prefs.get_int("bite_point", 0) == 127
prefs.end()
```

Recording pixel operations:

```python
from simwheel.definitions import PixelGroup
from simwheel.pixels import PixelRecorder

pixels = PixelRecorder()
pixels.set(PixelGroup.GRP_BUTTONS, 2, 0x01, 0x02, 0x03)
assert pixels.last_color == 0x010203
pixels.show()
assert pixels.shown
```

## What this package does not do

- It talks to no hardware. `I2CController` answers probes from the address
  sets it is given, and `GPIOController` only records pin configurations and
  returns a fixed or supplied ADC reading.
- `Preferences` keeps its values in memory only; nothing is written to disk,
  and the values are lost when the process ends.
- `PixelRecorder` drives no LED strip; it only remembers the last request.
- There is no command-line program, input polling loop, HID reporting or
  battery monitoring.