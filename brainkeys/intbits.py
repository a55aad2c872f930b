"""Fixed-width 320-bit two's complement integer helpers.

Values are plain Python ints holding the unsigned bit pattern of a
320-bit word (five 64-bit limbs). Arithmetic that overflows wraps, and
the top bit is the sign bit wherever a signed reading is needed.
"""

from __future__ import annotations

import math

__all__ = [
    "BITS",
    "MASK",
    "wrap",
    "to_signed",
    "is_negative",
    "shift_left",
    "shift_right",
    "swap_bit",
    "get_bit",
    "bit_length",
    "lowest_bit",
    "size_in_words",
    "divmod_fixed",
    "binary_gcd",
    "to_bytes32",
    "from_bytes32",
    "to_double",
]

BITS = 320
MASK = (1 << BITS) - 1
_SIGN = 1 << (BITS - 1)
_WORD_BITS = 32
_WORDS = BITS // _WORD_BITS
_MASK256 = (1 << 256) - 1


def _check_shift(n: int) -> None:
    if n < 0:
        raise ValueError(f"negative bit count {n}")


def wrap(value: int) -> int:
    """Reduce any integer to its 320-bit two's complement bit pattern."""
    return value & MASK


def to_signed(value: int) -> int:
    """Read a 320-bit pattern as a signed integer."""
    value = wrap(value)
    return value - (1 << BITS) if value & _SIGN else value


def is_negative(value: int) -> bool:
    """True when the sign bit of the 320-bit pattern is set."""
    return bool(wrap(value) & _SIGN)


def shift_left(value: int, n: int) -> int:
    """Shift left by n bits, dropping bits pushed past the top."""
    _check_shift(n)
    return wrap(wrap(value) << n)


def shift_right(value: int, n: int) -> int:
    """Arithmetic (sign-propagating) right shift by n bits."""
    _check_shift(n)
    return wrap(to_signed(value) >> n)


def swap_bit(value: int, n: int) -> int:
    """Flip bit n of the pattern."""
    if not 0 <= n < BITS:
        raise ValueError(f"bit index {n} out of range")
    return wrap(value) ^ (1 << n)


def get_bit(value: int, n: int) -> int:
    """Return bit n of the pattern as 0 or 1."""
    _check_shift(n)
    return (wrap(value) >> n) & 1


def bit_length(value: int) -> int:
    """Number of significant bits of the absolute value of the signed reading."""
    return abs(to_signed(value)).bit_length()


def lowest_bit(value: int) -> int:
    """Index of the lowest set bit; the value must not be zero."""
    value = wrap(value)
    if value == 0:
        raise ValueError("zero has no set bit")
    return (value & -value).bit_length() - 1


def size_in_words(value: int) -> int:
    """Number of 32-bit words up to the highest non-zero one, at least one."""
    value = wrap(value)
    return max(1, -(-value.bit_length() // _WORD_BITS))


def divmod_fixed(value: int, divisor: int) -> tuple[int, int]:
    """Unsigned division of two 320-bit patterns into (quotient, remainder)."""
    value = wrap(value)
    divisor = wrap(divisor)
    if divisor > value:
        return 0, value
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if divisor == value:
        return 1, 0
    return divmod(value, divisor)


def binary_gcd(a: int, b: int) -> int:
    """Greatest common divisor of the signed readings of a and b.

    When one operand is zero the other is returned unchanged.
    """
    a = wrap(a)
    b = wrap(b)
    if a == 0:
        return b
    if b == 0:
        return a
    return wrap(math.gcd(to_signed(a), to_signed(b)))


def to_bytes32(value: int) -> bytes:
    """Low 256 bits as 32 big-endian bytes."""
    return (wrap(value) & _MASK256).to_bytes(32, "big")


def from_bytes32(data: bytes) -> int:
    """Read 32 big-endian bytes into a value."""
    if len(data) != 32:
        raise ValueError(f"expected 32 bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def to_double(value: int) -> float:
    """Unsigned value as a float, summed word by word from the lowest."""
    value = wrap(value)
    return sum(
        float((value >> (_WORD_BITS * i)) & 0xFFFFFFFF) * 2.0 ** (_WORD_BITS * i)
        for i in range(_WORDS)
    )