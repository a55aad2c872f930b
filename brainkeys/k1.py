"""Arithmetic specialised to the secp256k1 prime and group order.

Field products are reduced with the identity 2^256 = 0x1000003D1 (mod p).
That reduction does only two folding passes and drops the final carry.
Its result therefore always fits in 256 bits and is congruent to the
product in all but vanishingly rare cases. It is not guaranteed to be
below p.
"""

from __future__ import annotations

__all__ = [
    "P",
    "ORDER",
    "reduce_k1",
    "mul_k1",
    "square_k1",
    "order_add",
    "order_mul",
]

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

_FOLD = 0x1000003D1
_MASK256 = (1 << 256) - 1
_LIMIT256 = 1 << 256
_LIMIT512 = 1 << 512


def _check(value: int, limit: int, name: str) -> None:
    if not 0 <= value < limit:
        raise ValueError(f"{name} must lie in [0, 2^{limit.bit_length() - 1}), got {value}")


def reduce_k1(value: int) -> int:
    """Fold a product of up to 512 bits down to 256 bits modulo p."""
    _check(value, _LIMIT512, "value")
    low = value & _MASK256
    folded = (value >> 256) * _FOLD
    total = low + (folded & _MASK256)
    carry = total >> 256
    total &= _MASK256
    return (total + ((folded >> 256) + carry) * _FOLD) & _MASK256


def mul_k1(a: int, b: int) -> int:
    """Multiply two 256-bit values and fold the product modulo p."""
    _check(a, _LIMIT256, "a")
    _check(b, _LIMIT256, "b")
    return reduce_k1(a * b)


def square_k1(a: int) -> int:
    """Square a 256-bit value and fold the result modulo p."""
    _check(a, _LIMIT256, "a")
    return reduce_k1(a * a)


def order_add(a: int, b: int) -> int:
    """Add two values below the group order, modulo the order."""
    _check(a, _LIMIT256, "a")
    _check(b, _LIMIT256, "b")
    total = a + b - ORDER
    return total + ORDER if total < 0 else total


def order_mul(a: int, b: int) -> int:
    """Multiply two values below the group order, modulo the order."""
    _check(a, _LIMIT256, "a")
    _check(b, _LIMIT256, "b")
    return a * b % ORDER