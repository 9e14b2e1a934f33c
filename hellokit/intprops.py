"""Properties of fixed-width integer types and overflow checks.

An :class:`IntType` describes a two's-complement integer type of a given
width. The ``*_range_overflow`` functions tell whether an operation
would leave the range ``[minimum, maximum]``. They work the way C
integer arithmetic does, so division truncates toward zero. The
``*_overflow`` functions take the result type directly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IntType:
    """A fixed-width two's-complement integer type."""

    bits: int
    signed: bool = True

    def __post_init__(self) -> None:
        if self.bits < 1:
            raise ValueError(f"an integer type needs at least one bit, not {self.bits}")

    def minimum(self) -> int:
        """Return the smallest value of the type."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    def maximum(self) -> int:
        """Return the largest value of the type."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _trunc_rem(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def int_bits_strlen_bound(bits: int) -> int:
    """Bound the length of the decimal text of an unsigned ``bits``-bit value."""
    return (bits * 146 + 484) // 485


def int_strlen_bound(int_type: IntType) -> int:
    """Bound the length of the decimal text of any value of ``int_type``."""
    sign = 1 if int_type.signed else 0
    return int_bits_strlen_bound(int_type.bits - sign) + sign


def int_bufsize_bound(int_type: IntType) -> int:
    """Bound the buffer size for a value of ``int_type``, terminator included."""
    return int_strlen_bound(int_type) + 1


def add_range_overflow(a: int, b: int, minimum: int, maximum: int) -> bool:
    """Tell whether ``a + b`` would leave ``[minimum, maximum]``."""
    if b < 0:
        return a < minimum - b
    return maximum - b < a


def subtract_range_overflow(a: int, b: int, minimum: int, maximum: int) -> bool:
    """Tell whether ``a - b`` would leave ``[minimum, maximum]``."""
    if b < 0:
        return maximum + b < a
    return a < minimum + b


def negate_range_overflow(a: int, minimum: int, maximum: int) -> bool:
    """Tell whether ``-a`` would leave ``[minimum, maximum]``."""
    if minimum < 0:
        return a < -maximum
    return 0 < a


def multiply_range_overflow(a: int, b: int, minimum: int, maximum: int) -> bool:
    """Tell whether ``a * b`` would leave ``[minimum, maximum]``."""
    if b < 0:
        if a < 0:
            return a < _trunc_div(maximum, b)
        if b == -1:
            return False
        return _trunc_div(minimum, b) < a
    if b == 0:
        return False
    if a < 0:
        return a < _trunc_div(minimum, b)
    return _trunc_div(maximum, b) < a


def divide_range_overflow(a: int, b: int, minimum: int, maximum: int) -> bool:
    """Tell whether ``a / b`` would leave ``[minimum, maximum]``.

    Division by zero is not checked.
    """
    return minimum < 0 and b == -1 and a < -maximum


def remainder_range_overflow(a: int, b: int, minimum: int, maximum: int) -> bool:
    """Tell whether ``a % b`` would trap; the same case as division."""
    return divide_range_overflow(a, b, minimum, maximum)


def left_shift_range_overflow(a: int, b: int, minimum: int, maximum: int) -> bool:
    """Tell whether ``a << b`` would leave ``[minimum, maximum]``.

    ``minimum`` and ``maximum`` bound ``a`` only.
    """
    if a < 0:
        return a < minimum >> b
    return maximum >> b < a


def _outside(value: int, int_type: IntType) -> bool:
    return not int_type.minimum() <= value <= int_type.maximum()


def add_overflow(a: int, b: int, int_type: IntType) -> bool:
    """Tell whether ``a + b`` does not fit the result type ``int_type``."""
    if int_type.signed:
        return add_range_overflow(a, b, int_type.minimum(), int_type.maximum())
    return _outside(a + b, int_type)


def subtract_overflow(a: int, b: int, int_type: IntType) -> bool:
    """Tell whether ``a - b`` does not fit the result type ``int_type``."""
    if int_type.signed:
        return subtract_range_overflow(a, b, int_type.minimum(), int_type.maximum())
    return _outside(a - b, int_type)


def negate_overflow(a: int, int_type: IntType) -> bool:
    """Tell whether ``-a`` does not fit ``int_type``, the type of ``a``."""
    return negate_range_overflow(a, int_type.minimum(), int_type.maximum())


def multiply_overflow(a: int, b: int, int_type: IntType) -> bool:
    """Tell whether ``a * b`` does not fit the result type ``int_type``."""
    if int_type.signed:
        return multiply_range_overflow(a, b, int_type.minimum(), int_type.maximum())
    return _outside(a * b, int_type)


def divide_overflow(a: int, b: int, int_type: IntType) -> bool:
    """Tell whether ``a / b`` does not fit the result type ``int_type``."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    if int_type.signed:
        return divide_range_overflow(a, b, int_type.minimum(), int_type.maximum())
    return _outside(_trunc_div(a, b), int_type)


def remainder_overflow(a: int, b: int, int_type: IntType) -> bool:
    """Tell whether ``a % b`` does not fit the result type ``int_type``."""
    if b == 0:
        raise ZeroDivisionError("integer modulo by zero")
    if int_type.signed:
        return remainder_range_overflow(a, b, int_type.minimum(), int_type.maximum())
    return _outside(_trunc_rem(a, b), int_type)


def left_shift_overflow(a: int, b: int, int_type: IntType) -> bool:
    """Tell whether ``a << b`` does not fit ``int_type``, the type of ``a``."""
    return left_shift_range_overflow(a, b, int_type.minimum(), int_type.maximum())