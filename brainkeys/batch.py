"""Simultaneous inversion of many field elements."""

from __future__ import annotations

from collections.abc import Iterable

from .field import PrimeField

__all__ = ["batch_inverse"]


def batch_inverse(values: Iterable[int], field: PrimeField) -> list[int]:
    """Invert every value with a single field inversion.

    Raises ZeroDivisionError if any value has no inverse.
    """
    items = list(values)
    if not items:
        return []

    prefixes = [items[0] % field.p]
    for value in items[1:]:
        prefixes.append(field.mul(prefixes[-1], value))

    inverse = field.inv(prefixes[-1])
    result = [0] * len(items)
    for i in range(len(items) - 1, 0, -1):
        result[i] = field.mul(prefixes[i - 1], inverse)
        inverse = field.mul(inverse, items[i])
    result[0] = inverse
    return result