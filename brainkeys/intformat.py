"""Text forms of 320-bit integer patterns: bases, bit strings and word dumps."""

from __future__ import annotations

from .intbits import BITS, is_negative, to_signed, wrap

__all__ = [
    "parse_base",
    "format_base",
    "parse_base10",
    "parse_base16",
    "format_base10",
    "format_base16",
    "to_base2",
    "block_string",
    "c64_string",
]

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_WORD_BITS = 32
_WORDS = BITS // _WORD_BITS
_LIMB_BITS = 64
_LIMBS = BITS // _LIMB_BITS


def _charset(base: int) -> str:
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"unsupported base {base}")
    return _DIGITS[:base]


def _words(value: int, width: int) -> list[int]:
    """Split a pattern into little-endian words of the given bit width."""
    mask = (1 << width) - 1
    return [(value >> (width * i)) & mask for i in range(BITS // width)]


def parse_base(text: str, base: int) -> int:
    """Read digits in the given base (case-insensitive), wrapping to 320 bits."""
    charset = _charset(base)
    value = 0
    for ch in text:
        digit = charset.find(ch.upper())
        if digit < 0:
            raise ValueError(f"invalid digit {ch!r} for base {base}")
        value = value * base + digit
    return wrap(value)


def format_base(value: int, base: int) -> str:
    """Write the signed reading of the pattern in the given base, uppercase."""
    charset = _charset(base)
    magnitude = abs(to_signed(value))
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, base)
        digits.append(charset[digit])
        if magnitude == 0:
            break
    sign = "-" if is_negative(value) else ""
    return sign + "".join(reversed(digits))


def parse_base10(text: str) -> int:
    """Read a decimal string."""
    return parse_base(text, 10)


def parse_base16(text: str) -> int:
    """Read a hexadecimal string."""
    return parse_base(text, 16)


def format_base10(value: int) -> str:
    """Write the signed reading in decimal."""
    return format_base(value, 10)


def format_base16(value: int) -> str:
    """Write the signed reading in uppercase hexadecimal."""
    return format_base(value, 16)


def to_base2(value: int) -> str:
    """Bit string of the nine lowest 32-bit words.

    Words run from the lowest to the highest, each written most
    significant bit first.
    """
    words = _words(wrap(value), _WORD_BITS)[: _WORDS - 1]
    return "".join(f"{word:032b}" for word in words)


def block_string(value: int) -> str:
    """The eight lowest 32-bit words as space-separated hex, highest first."""
    words = _words(wrap(value), _WORD_BITS)[: _WORDS - 2]
    return " ".join(f"{word:08X}" for word in reversed(words))


def c64_string(value: int, digits: int) -> str:
    """The lowest 64-bit limbs as a brace-enclosed list of unsigned literals."""
    if not 0 <= digits <= _LIMBS:
        raise ValueError(f"limb count {digits} out of range 0..{_LIMBS}")
    limbs = _words(wrap(value), _LIMB_BITS)[:digits]
    parts = (f"0x{limb:x}ULL" if limb else "0ULL" for limb in limbs)
    return "{" + ",".join(parts) + "}"