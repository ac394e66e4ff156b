"""Signed fixed-point numbers with eight fractional bits."""

from __future__ import annotations

import math
import struct
from typing import Union

Number = Union[int, float, "Fixed"]

FRACTIONAL_BITS = 8
_SCALE = 1 << FRACTIONAL_BITS


def _f32(value: float) -> float:
    """Round a Python float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = math.floor(abs(value) + 0.5)
    return -magnitude if value < 0 else magnitude


class Fixed:
    """A fixed-point number stored as an integer count of 1/256 steps.

    Conversions to float go through single precision, and comparisons and
    arithmetic are carried out on those single-precision values.
    """

    __slots__ = ("_raw",)

    def __init__(self, value: Number = 0) -> None:
        if isinstance(value, Fixed):
            self._raw = value._raw
        elif isinstance(value, int):
            self._raw = int(value) << FRACTIONAL_BITS
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"cannot represent {value!r} as a fixed-point number")
            scaled = _f32(_f32(value) * _SCALE)
            self._raw = _round_half_away(scaled)
        else:
            raise TypeError(f"cannot build a Fixed from {type(value).__name__}")

    @classmethod
    def from_raw(cls, raw: int) -> "Fixed":
        """Build a number directly from its raw integer representation."""
        if not isinstance(raw, int):
            raise TypeError("raw bits must be an int")
        result = cls()
        result._raw = int(raw)
        return result

    @property
    def raw(self) -> int:
        """The raw integer representation."""
        return self._raw

    def to_float(self) -> float:
        """The value as a single-precision float."""
        return _f32(self._raw / _SCALE)

    def to_int(self) -> int:
        """The integer part, rounded toward negative infinity."""
        return self._raw >> FRACTIONAL_BITS

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return f"{self.to_float():g}"

    def __repr__(self) -> str:
        return f"Fixed.from_raw({self._raw})"

    @staticmethod
    def _coerce(other: object) -> "Fixed | None":
        if isinstance(other, Fixed):
            return other
        if isinstance(other, (int, float)):
            return Fixed(other)
        return None

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_float() == rhs.to_float()

    def __ne__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_float() != rhs.to_float()

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_float() < rhs.to_float()

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_float() <= rhs.to_float()

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_float() > rhs.to_float()

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_float() >= rhs.to_float()

    def __hash__(self) -> int:
        return hash(self.to_float())

    def __add__(self, other: object) -> "Fixed":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed(_f32(rhs.to_float() + self.to_float()))

    def __sub__(self, other: object) -> "Fixed":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed(_f32(self.to_float() - rhs.to_float()))

    def __mul__(self, other: object) -> "Fixed":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed(_f32(rhs.to_float() * self.to_float()))

    def __truediv__(self, other: object) -> "Fixed":
        """Divide the right-hand operand by this one (``a / b`` is ``b`` over ``a``)."""
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        divisor = self.to_float()
        if divisor == 0:
            raise ZeroDivisionError("fixed-point division by zero")
        return Fixed(_f32(rhs.to_float() / divisor))

    def increment(self) -> "Fixed":
        """Add one raw step in place and return this number."""
        self._raw += 1
        return self

    def decrement(self) -> "Fixed":
        """Subtract one raw step in place and return this number."""
        self._raw -= 1
        return self

    def post_increment(self) -> "Fixed":
        """Add one raw step in place and return a copy of the previous value."""
        previous = Fixed(self)
        self._raw += 1
        return previous

    def post_decrement(self) -> "Fixed":
        """Subtract one raw step in place and return a copy of the previous value."""
        previous = Fixed(self)
        self._raw -= 1
        return previous

    @staticmethod
    def min(one: "Fixed", two: "Fixed") -> "Fixed":
        """Return the smaller of two numbers, the first one on a tie."""
        return two if one > two else one

    @staticmethod
    def max(one: "Fixed", two: "Fixed") -> "Fixed":
        """Return the larger of two numbers, the first one on a tie."""
        return two if one < two else one