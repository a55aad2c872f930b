"""Bech32 strings and SegWit addresses."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "Bech32Error",
    "polymod_step",
    "convert_bits",
    "bech32_encode",
    "bech32_decode",
    "decode_nocheck",
    "decode_witness_program",
    "segwit_encode",
    "segwit_decode",
]

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_REVERSE = {ch: i for i, ch in enumerate(CHARSET)}
_REVERSE.update({ch.upper(): i for ch, i in list(_REVERSE.items())})

_GENERATORS = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_MAX_LENGTH = 90
_CHECKSUM_LENGTH = 6


class Bech32Error(ValueError):
    """Raised when a Bech32 string or SegWit address cannot be built or read."""


def polymod_step(pre: int) -> int:
    """Advance the Bech32 checksum by one 5-bit step."""
    top = (pre >> 25) & 0xFF
    chk = ((pre & 0x1FFFFFF) << 5) & 0xFFFFFFFF
    for bit, generator in enumerate(_GENERATORS):
        if (top >> bit) & 1:
            chk ^= generator
    return chk


def convert_bits(
    data: Iterable[int], from_bits: int, to_bits: int, pad: bool
) -> list[int]:
    """Regroup a sequence of from_bits-wide values into to_bits-wide values."""
    acc = 0
    bits = 0
    maxv = (1 << to_bits) - 1
    keep = (1 << (from_bits + to_bits - 1)) - 1
    out: list[int] = []
    for value in data:
        if value < 0 or value >> from_bits:
            raise Bech32Error(f"value {value} does not fit in {from_bits} bits")
        acc = ((acc << from_bits) | value) & keep
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & maxv)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & maxv)
    elif ((acc << (to_bits - bits)) & maxv) or bits >= from_bits:
        raise Bech32Error("invalid padding")
    return out


def _hrp_checksum(hrp: str) -> int:
    chk = 1
    for ch in hrp:
        chk = polymod_step(chk) ^ (ord(ch.lower()) >> 5)
    chk = polymod_step(chk)
    for ch in hrp:
        chk = polymod_step(chk) ^ (ord(ch) & 0x1F)
    return chk


def bech32_encode(hrp: str, data: Sequence[int]) -> str:
    """Build a Bech32 string from a lowercase hrp and 5-bit values."""
    for ch in hrp:
        code = ord(ch)
        if code < 33 or code > 126:
            raise Bech32Error(f"invalid character {ch!r} in human readable part")
        if "A" <= ch <= "Z":
            raise Bech32Error("human readable part must be lowercase")
    if len(hrp) + 7 + len(data) > _MAX_LENGTH:
        raise Bech32Error("resulting string too long")
    chk = _hrp_checksum(hrp)
    chars = []
    for value in data:
        if value < 0 or value >> 5:
            raise Bech32Error(f"data value {value} is not a 5-bit value")
        chk = polymod_step(chk) ^ value
        chars.append(CHARSET[value])
    for _ in range(_CHECKSUM_LENGTH):
        chk = polymod_step(chk)
    chk ^= 1
    checksum = "".join(
        CHARSET[(chk >> ((5 - i) * 5)) & 0x1F] for i in range(_CHECKSUM_LENGTH)
    )
    return f"{hrp}1{''.join(chars)}{checksum}"


def bech32_decode(text: str) -> tuple[str, list[int]]:
    """Check and split a Bech32 string into its lowercase hrp and 5-bit data."""
    if len(text) < 8 or len(text) > _MAX_LENGTH:
        raise Bech32Error("invalid length")
    sep = text.rfind("1")
    if sep < 1 or len(text) - sep - 1 < _CHECKSUM_LENGTH:
        raise Bech32Error("missing or misplaced separator")
    hrp_part = text[:sep]
    have_lower = have_upper = False
    for ch in hrp_part:
        code = ord(ch)
        if code < 33 or code > 126:
            raise Bech32Error(f"invalid character {ch!r} in human readable part")
        if "a" <= ch <= "z":
            have_lower = True
        elif "A" <= ch <= "Z":
            have_upper = True
    chk = _hrp_checksum(hrp_part)
    values: list[int] = []
    for ch in text[sep + 1:]:
        if "a" <= ch <= "z":
            have_lower = True
        elif "A" <= ch <= "Z":
            have_upper = True
        value = _REVERSE.get(ch)
        if value is None:
            raise Bech32Error(f"invalid data character {ch!r}")
        chk = polymod_step(chk) ^ value
        values.append(value)
    if have_lower and have_upper:
        raise Bech32Error("mixed case")
    if chk != 1:
        raise Bech32Error("invalid checksum")
    return hrp_part.lower(), values[:-_CHECKSUM_LENGTH]


def decode_nocheck(text: str) -> bytes:
    """Pack Bech32 characters into bytes without separator or checksum checks.

    The last, partially filled byte is always emitted.
    """
    acc = 0
    acc_len = 8
    out = bytearray()
    for ch in text:
        if ord(ch) >= 0x80:
            raise Bech32Error(f"invalid character {ch!r}")
        value = _REVERSE.get(ch.lower())
        if value is None:
            raise Bech32Error(f"invalid character {ch!r}")
        if acc_len >= 5:
            acc |= value << (acc_len - 5)
            acc_len -= 5
        else:
            shift = 5 - acc_len
            out.append((acc | (value >> shift)) & 0xFF)
            acc_len = 8 - shift
            acc = (value << acc_len) & 0xFF
    out.append(acc & 0xFF)
    return bytes(out)


def decode_witness_program(text: str) -> bytes:
    """Decode a Bech32 string and return the program after its version value.

    The hrp and version are not checked.
    """
    _, data = bech32_decode(text)
    if not data:
        raise Bech32Error("no witness version")
    return bytes(convert_bits(data[1:], 5, 8, False))


def segwit_encode(hrp: str, witver: int, witprog: bytes) -> str:
    """Encode a SegWit address."""
    if witver < 0 or witver > 16:
        raise Bech32Error(f"invalid witness version {witver}")
    if witver == 0 and len(witprog) not in (20, 32):
        raise Bech32Error("version 0 programs must be 20 or 32 bytes")
    if len(witprog) < 2 or len(witprog) > 40:
        raise Bech32Error("witness program must be 2 to 40 bytes")
    return bech32_encode(hrp, [witver, *convert_bits(witprog, 8, 5, True)])


def segwit_decode(hrp: str, addr: str) -> tuple[int, bytes]:
    """Decode a SegWit address expected under hrp into (version, program)."""
    actual_hrp, data = bech32_decode(addr)
    if not data or len(data) > 65:
        raise Bech32Error("invalid data length")
    if actual_hrp != hrp:
        raise Bech32Error(f"unexpected human readable part {actual_hrp!r}")
    witver = data[0]
    if witver > 16:
        raise Bech32Error(f"invalid witness version {witver}")
    program = bytes(convert_bits(data[1:], 5, 8, False))
    if len(program) < 2 or len(program) > 40:
        raise Bech32Error("witness program must be 2 to 40 bytes")
    if witver == 0 and len(program) not in (20, 32):
        raise Bech32Error("version 0 programs must be 20 or 32 bytes")
    return witver, program