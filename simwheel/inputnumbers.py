"""Firmware-defined and user-defined input numbers."""

from __future__ import annotations

import functools
from typing import Iterable, TypeVar

from .errors import InvalidInputNumber, InvalidUserInputNumber

T = TypeVar("T")

_UNSPECIFIED = 0xFF
_ALL_BITS = (1 << 64) - 1


def add_if_not_exists(item: T, collection: list[T]) -> bool:
    """Append ``item`` unless already present. Return True if it was added."""
    if item in collection:
        return False
    collection.append(item)
    return True


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def map_value(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Map ``x`` linearly from one range to another, truncating toward zero."""
    run = in_max - in_min
    if run == 0:
        return 0
    rise = out_max - out_min
    delta = x - in_min
    return _trunc_div(delta * rise, run) + out_min


@functools.total_ordering
class InputNumber:
    """An input number in the range [0,63], or unspecified (``None``)."""

    __slots__ = ("_value",)
    _registered = 0

    def __init__(self, value: "int | InputNumber | None" = None) -> None:
        if value is None:
            self._value = _UNSPECIFIED
        elif isinstance(value, InputNumber):
            self._value = value._value
        else:
            value = int(value)
            if not 0 <= value < 64:
                raise InvalidInputNumber(value)
            self._value = value

    def is_specified(self) -> bool:
        return self._value < 64

    def bitmap(self) -> int:
        """Return this input number as a 64-bit bitmap (zero if unspecified)."""
        return (1 << self._value) if self._value < 64 else 0

    def __int__(self) -> int:
        if self._value > 63:
            raise InvalidInputNumber()
        return self._value

    __index__ = __int__

    def _key(self, other: object) -> int | None:
        if isinstance(other, InputNumber):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self._value == key

    def __lt__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self._value < key

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        if self.is_specified():
            return f"InputNumber({self._value})"
        return "InputNumber(None)"

    def book(self) -> None:
        """Mark this input number as in use."""
        if self._value < 64:
            InputNumber._registered |= 1 << self._value

    def unbook(self) -> None:
        """Mark this input number as not in use."""
        if self._value < 64:
            InputNumber._registered &= ~(1 << self._value) & _ALL_BITS

    @classmethod
    def book_all(cls) -> None:
        InputNumber._registered = _ALL_BITS

    @classmethod
    def is_booked(cls, input_number: "InputNumber | int") -> bool:
        if isinstance(input_number, InputNumber):
            return bool(InputNumber._registered & input_number.bitmap())
        if 0 <= input_number < 64:
            return bool(InputNumber._registered & (1 << input_number))
        return False

    @classmethod
    def booked_bitmap(cls) -> int:
        return InputNumber._registered

    @classmethod
    def clear_book(cls) -> None:
        InputNumber._registered = 0


class InputNumberCombination(list):
    """A combination of input numbers."""

    def __init__(self, items: Iterable["int | InputNumber"] = ()) -> None:
        super().__init__()
        for item in items:
            if isinstance(item, InputNumber):
                self.append(InputNumber(item))
            else:
                if item > 63 or item < 0:
                    raise InvalidInputNumber(item)
                self.append(InputNumber(item))

    def to_list(self) -> list[int]:
        """Return the plain integers, raising on any unspecified input number."""
        result = []
        for number in self:
            if not number.is_specified():
                raise InvalidInputNumber()
            result.append(int(number))
        return result

    def bitmap(self) -> int:
        """Combine all input numbers into a single 64-bit bitmap."""
        result = 0
        for number in self:
            result |= number.bitmap()
        return result


@functools.total_ordering
class UserInputNumber:
    """A user-defined input number in the range [0,127]."""

    __slots__ = ("_value",)

    def __init__(self, value: "int | UserInputNumber" = 0) -> None:
        if isinstance(value, UserInputNumber):
            self._value = value._value
            return
        value = int(value)
        if not 0 <= value < 128:
            raise InvalidUserInputNumber(value)
        self._value = value

    def high(self) -> int:
        """Return the most significant 64-bit bitmap."""
        return (1 << self._value) if self._value < 64 else 0

    def low(self) -> int:
        """Return the least significant 64-bit bitmap."""
        return 0 if self._value >= 64 else (1 << self._value)

    def __int__(self) -> int:
        return self._value

    __index__ = __int__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UserInputNumber):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, UserInputNumber):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"UserInputNumber({self._value})"